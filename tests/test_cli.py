"""Tests for the list-select command line."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Optional

import click
import pytest
from click.testing import CliRunner

from list_select import cli
from list_select.app import ListSelectApp
from list_select.items import Labeled, Primitive
from list_select.utils import load_items


@pytest.fixture
def captured(monkeypatch: pytest.MonkeyPatch) -> List[Any]:
    """Patch ListSelectApp.run; the test decides what the 'user' picked."""
    seen: List[Any] = []
    result: dict = {"value": None}

    def fake_run(self: ListSelectApp, *args: Any, **kwargs: Any) -> Optional[List[Any]]:
        seen.append(self.config)
        return result["value"]

    monkeypatch.setattr(ListSelectApp, "run", fake_run)
    seen.append(result)
    return seen


def pick(captured: List[Any], value: Any) -> None:
    captured[0]["value"] = value


class TestMain:
    def test_prints_chosen_items(self, captured: List[Any]) -> None:
        pick(captured, [Primitive("Apple"), Primitive("Cherry")])
        result = CliRunner().invoke(cli.main, ["Apple", "Banana", "Cherry", "--multiple"])
        assert result.exit_code == 0, result.output
        assert result.output.strip().splitlines() == ["Apple", "Cherry"]
        config = captured[1]
        assert config.multiple is True
        assert config.search is False
        assert config.keyboard_events is True

    def test_json_output_uses_values(self, captured: List[Any], tmp_path: Path) -> None:
        data = tmp_path / "items.json"
        data.write_text(json.dumps(["plain", {"name": "Labeled", "value": 7}]), encoding="utf-8")
        pick(captured, [Primitive("plain"), Labeled("Labeled", 7)])
        result = CliRunner().invoke(cli.main, ["--file", str(data), "--json", "--multiple"])
        assert result.exit_code == 0, result.output
        assert json.loads(result.output.strip().splitlines()[-1]) == ["plain", 7]

    def test_cancel_exits_with_one(self, captured: List[Any]) -> None:
        pick(captured, None)
        result = CliRunner().invoke(cli.main, ["a", "b"])
        assert result.exit_code == 1

    def test_options_reach_config(self, captured: List[Any]) -> None:
        pick(captured, [])
        result = CliRunner().invoke(
            cli.main,
            ["a", "b", "c", "--search", "--no-keyboard", "--selected", "1", "--disabled", "2"],
        )
        assert result.exit_code == 0, result.output
        config = captured[1]
        assert config.search is True
        assert config.keyboard_events is False
        assert config.selected == {1}
        assert config.disabled == {2}

    def test_no_items_is_usage_error(self, captured: List[Any]) -> None:
        result = CliRunner().invoke(cli.main, [])
        assert result.exit_code == 2
        assert "No items given" in result.output

    def test_out_of_range_index(self, captured: List[Any]) -> None:
        result = CliRunner().invoke(cli.main, ["a", "b", "--disabled", "5"])
        assert result.exit_code == 2
        assert "out of range" in result.output

    def test_single_mode_rejects_many_preselected(self, captured: List[Any]) -> None:
        result = CliRunner().invoke(cli.main, ["a", "b", "--selected", "0", "--selected", "1"])
        assert result.exit_code == 2

    def test_malformed_json_item(self, captured: List[Any], tmp_path: Path) -> None:
        data = tmp_path / "bad.json"
        data.write_text(json.dumps(["ok", 5]), encoding="utf-8")
        result = CliRunner().invoke(cli.main, ["--file", str(data)])
        assert result.exit_code == 2
        assert "Invalid item" in result.output


class TestBuildConfig:
    def test_json_must_be_array(self, tmp_path: Path) -> None:
        data = tmp_path / "obj.json"
        data.write_text('{"name": "x"}', encoding="utf-8")
        with pytest.raises(click.BadParameter):
            cli.build_config([], str(data), False, False, True, [], [])

    def test_text_file_lines(self, tmp_path: Path) -> None:
        data = tmp_path / "items.txt"
        data.write_text("one\n\n  \ntwo words\n", encoding="utf-8")
        assert load_items(str(data)) == ["one", "two words"]
        config = cli.build_config(["zero"], str(data), False, False, True, [], [])
        assert [item.display_text for item in config.items] == ["zero", "one", "two words"]
