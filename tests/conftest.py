"""Shared test fixtures for list-select tests."""

from __future__ import annotations

from typing import Iterator

import pytest

from list_select.debug import reset_logger


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep debug switches from the developer's shell out of the tests."""
    for name in ("LIST_SELECT_DEBUG", "LIST_SELECT_LOG", "LIST_SELECT_DEBUG_KEYS"):
        monkeypatch.delenv(name, raising=False)
    reset_logger()
    yield
    reset_logger()
