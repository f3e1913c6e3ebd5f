from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, NamedTuple, Optional, Tuple, Union


class InvalidItemError(ValueError):
    """Raised when a raw value cannot be turned into a list item."""

    def __init__(self, position: int, value: Any, reason: str) -> None:
        self.position = position
        self.value = value
        super().__init__(f"item {position}: {reason} (got {type(value).__name__}: {value!r})")


class Primitive(NamedTuple):
    """A plain display string."""
    text: str

    @property
    def display_text(self) -> str:
        return self.text

    @property
    def search_text(self) -> str:
        return self.text


class Labeled(NamedTuple):
    """A structured item: ``name`` is shown, ``value`` is carried along."""
    name: str
    value: Any = None

    @property
    def display_text(self) -> str:
        if self.name:
            return self.name
        return "" if self.value is None else str(self.value)

    @property
    def search_text(self) -> str:
        return self.name


Item = Union[Primitive, Labeled]


def coerce_item(raw: Any, position: int = 0) -> Item:
    """Decide the item variant for a raw configured value.

    Strings become :class:`Primitive`; mappings with a string ``name``
    become :class:`Labeled`. Anything else is rejected.
    """
    if isinstance(raw, Primitive):
        if not isinstance(raw.text, str):
            raise InvalidItemError(position, raw, "'text' must be a string")
        return raw
    if isinstance(raw, Labeled):
        if not isinstance(raw.name, str):
            raise InvalidItemError(position, raw, "'name' must be a string")
        return raw
    if isinstance(raw, str):
        return Primitive(raw)
    if isinstance(raw, Mapping):
        if "name" not in raw:
            raise InvalidItemError(position, raw, "mapping items need a 'name' key")
        name = raw["name"]
        if not isinstance(name, str):
            raise InvalidItemError(position, raw, "'name' must be a string")
        return Labeled(name, raw.get("value"))
    raise InvalidItemError(position, raw, "expected a string or a mapping with a 'name'")


@dataclass(frozen=True)
class ItemCatalog:
    """Ordered, immutable sequence of items with index-bounded lookups."""

    items: Tuple[Item, ...] = ()

    @classmethod
    def from_values(cls, values: Optional[Iterable[Any]]) -> "ItemCatalog":
        return cls(tuple(coerce_item(raw, pos) for pos, raw in enumerate(values or ())))

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self.items)

    def __getitem__(self, index: int) -> Item:
        return self.items[index]

    def has_index(self, index: Optional[int]) -> bool:
        # bool is an int subclass; True/False are not indices here
        if index is None or isinstance(index, bool) or not isinstance(index, int):
            return False
        return 0 <= index < len(self.items)

    def get(self, index: Optional[int]) -> Optional[Item]:
        if not self.has_index(index):
            return None
        return self.items[index]  # type: ignore[index]

    @property
    def last_index(self) -> Optional[int]:
        return len(self.items) - 1 if self.items else None

    def display_text(self, index: Optional[int]) -> str:
        item = self.get(index)
        return item.display_text if item is not None else ""

    def display_texts(self) -> list[str]:
        return [item.display_text for item in self.items]
