from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional, Tuple

from .items import Item, ItemCatalog


def token_prefix_match(text: str, query: str) -> bool:
    """True when any whitespace-separated word of ``text`` starts with ``query``.

    ``query`` is expected lower-cased already.
    """
    if not query:
        return True
    return any(token.lower().startswith(query) for token in (text or "").split())


def filter_items(items: Iterable[Item], query: str) -> ItemCatalog:
    q = (query or "").lower()
    return ItemCatalog(tuple(item for item in items if token_prefix_match(item.search_text, q)))


@dataclass
class SearchFilter:
    """Holds the typed query and derives filtered catalogs from the original items.

    - Typing only stores the query; nothing is filtered until :meth:`commit`.
    - Every commit starts from the full original list, never from a
      previously filtered subset.
    - :meth:`reset` only restores the full list once the query is empty.
    """

    query: str = ""
    _source: Tuple[Item, ...] = field(default_factory=tuple)
    _last_count: Optional[int] = None

    def set_items(self, items: Iterable[Item]) -> None:
        self._source = tuple(items or ())
        self._last_count = None

    @property
    def source(self) -> Tuple[Item, ...]:
        return self._source

    def update_query(self, text: Optional[str]) -> None:
        text = text or ""
        if text != self.query:
            self._last_count = None
        self.query = text

    def has_query(self) -> bool:
        return bool(self.query)

    def commit(self) -> ItemCatalog:
        if not self.query:
            return self._full()
        catalog = filter_items(self._source, self.query)
        self._last_count = len(catalog)
        return catalog

    def reset(self) -> Optional[ItemCatalog]:
        """Full catalog when the query is empty, otherwise ``None``."""
        if self.query:
            return None
        return self._full()

    def summary(self) -> str:
        if not self.query:
            return ""
        if self._last_count is None:
            return f"'{self.query}' (Enter=apply)"
        return f"'{self.query}' {self._last_count}/{len(self._source)}"

    def _full(self) -> ItemCatalog:
        self._last_count = None
        return ItemCatalog(self._source)
