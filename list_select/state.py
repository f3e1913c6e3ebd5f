"""Selection, focus and disabled-set bookkeeping as pure transitions.

Every transition takes a :class:`ListState` and returns a new one. When a
transition refuses (invalid or disabled index, nothing to do) it returns
the very same record, so callers can use ``new is old`` to tell whether
anything was committed.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import FrozenSet, Iterable, Optional, Union

from .items import ItemCatalog


Payload = Union[FrozenSet[int], int, None]


@dataclass(frozen=True)
class ListState:
    catalog: ItemCatalog = field(default_factory=ItemCatalog)
    selected: FrozenSet[int] = frozenset()
    disabled: FrozenSet[int] = frozenset()
    focused: Optional[int] = None
    anchor: Optional[int] = None
    multiple: bool = False

    @classmethod
    def initial(
        cls,
        catalog: ItemCatalog,
        selected: Iterable[int] = (),
        disabled: Iterable[int] = (),
        multiple: bool = False,
    ) -> "ListState":
        return cls(
            catalog=catalog,
            selected=normalize_selected(selected, multiple),
            disabled=frozenset(disabled),
            multiple=multiple,
        )

    def is_selected(self, index: Optional[int]) -> bool:
        return index in self.selected

    def is_disabled(self, index: Optional[int]) -> bool:
        return index in self.disabled

    @property
    def payload(self) -> Payload:
        """Value handed to ``on_change``: all indices, or the single one."""
        if self.multiple:
            return self.selected
        return min(self.selected) if self.selected else None


def normalize_selected(selected: Iterable[int], multiple: bool) -> FrozenSet[int]:
    indices = frozenset(selected)
    if not multiple and len(indices) > 1:
        return frozenset({min(indices)})
    return indices


def _span(a: int, b: int) -> FrozenSet[int]:
    return frozenset(range(min(a, b), max(a, b) + 1))


# ---- Selection ----

def select(state: ListState, index: Optional[int], contiguous: bool = False) -> ListState:
    if index is None or not state.catalog.has_index(index) or state.is_disabled(index):
        return state
    # anchor is read from the incoming record before anything changes
    anchor = state.anchor
    if not state.multiple:
        selected = frozenset({index})
    else:
        selected = state.selected | {index}
        if contiguous and anchor is not None:
            # an anchor left over from a larger catalog is clipped to the current one
            selected |= frozenset(i for i in _span(anchor, index) if state.catalog.has_index(i))
    return replace(state, selected=selected, anchor=index)


def deselect(state: ListState, index: Optional[int], contiguous: bool = False) -> ListState:
    if index is None or not state.catalog.has_index(index):
        return state
    anchor = state.anchor
    if state.multiple and contiguous and anchor is not None:
        selected = state.selected - _span(anchor, index)
    else:
        selected = state.selected - {index}
    return replace(state, selected=selected, anchor=index)


def toggle(state: ListState, index: Optional[int], contiguous: bool = False) -> ListState:
    if index is None or not state.catalog.has_index(index):
        return state
    if not state.is_selected(index):
        return select(state, index, contiguous)
    if state.multiple:
        return deselect(state, index, contiguous)
    return state


def select_all(state: ListState) -> ListState:
    if not state.multiple or not state.catalog:
        return state
    eligible = [i for i in range(len(state.catalog)) if i not in state.disabled]
    if not eligible:
        return state
    return replace(state, selected=state.selected | frozenset(eligible), anchor=eligible[-1])


def clear(state: ListState) -> ListState:
    """Full reset of interaction state: selection, anchor, disabled, focus."""
    return replace(state, selected=frozenset(), disabled=frozenset(), focused=None, anchor=None)


# ---- Disabled set ----

def disable_index(state: ListState, index: Optional[int]) -> ListState:
    if index is None or not state.catalog.has_index(index) or state.is_disabled(index):
        return state
    focused = None if state.focused == index else state.focused
    return replace(state, disabled=state.disabled | {index}, focused=focused)


def enable_index(state: ListState, index: Optional[int]) -> ListState:
    if not state.is_disabled(index):
        return state
    return replace(state, disabled=state.disabled - {index})


# ---- Focus ----

def focus_index(state: ListState, index: Optional[int]) -> ListState:
    if index is None or not state.catalog.has_index(index) or state.is_disabled(index):
        return state
    if state.focused == index:
        return state
    return replace(state, focused=index)


def _step(state: ListState, forward: bool) -> ListState:
    last = state.catalog.last_index
    if last is None:
        return state if state.focused is None else replace(state, focused=None)

    current = state.focused
    if forward:
        if current is None or current >= last or current < 0:
            candidate = 0
        else:
            candidate = current + 1
    else:
        if current is None or current <= 0 or current > last:
            candidate = last
        else:
            candidate = current - 1

    # bounded to one full cycle: every index is visited at most once
    for _ in range(last + 1):
        if candidate not in state.disabled:
            return replace(state, focused=candidate)
        if forward:
            candidate = 0 if candidate >= last else candidate + 1
        else:
            candidate = last if candidate <= 0 else candidate - 1

    return replace(state, focused=None)


def focus_next(state: ListState) -> ListState:
    return _step(state, forward=True)


def focus_previous(state: ListState) -> ListState:
    return _step(state, forward=False)


def focus_first(state: ListState) -> ListState:
    for i in range(len(state.catalog)):
        if i not in state.disabled:
            return replace(state, focused=i)
    return replace(state, focused=None)


def focus_last(state: ListState) -> ListState:
    for i in reversed(range(len(state.catalog))):
        if i not in state.disabled:
            return replace(state, focused=i)
    return replace(state, focused=None)


# ---- Catalog and re-configuration ----

def with_catalog(state: ListState, catalog: ItemCatalog) -> ListState:
    """Swap the active catalog; other indices are left as they are."""
    return replace(state, catalog=catalog)


def with_selected(state: ListState, selected: Iterable[int]) -> ListState:
    return replace(state, selected=normalize_selected(selected, state.multiple))


def with_disabled(state: ListState, disabled: Iterable[int]) -> ListState:
    return replace(state, disabled=frozenset(disabled))
