"""Checks on the project metadata in pyproject.toml."""

from __future__ import annotations

from pathlib import Path

import pytest

tomllib = pytest.importorskip("tomllib")

PYPROJECT = Path(__file__).resolve().parent.parent / "pyproject.toml"


def test_readme_if_declared_is_a_readme() -> None:
    project = tomllib.loads(PYPROJECT.read_text(encoding="utf-8"))["project"]
    readme = project.get("readme")
    if readme is not None:
        assert Path(str(readme)).name.upper().startswith("README")


def test_console_script_points_at_cli() -> None:
    project = tomllib.loads(PYPROJECT.read_text(encoding="utf-8"))["project"]
    assert project["scripts"]["list-select"] == "list_select.cli:main"
