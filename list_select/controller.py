from __future__ import annotations

from typing import Any, Callable, FrozenSet, Iterable, Iterator, List, NamedTuple, Optional

from . import state as transitions
from .config import ListConfig
from .debug import get_logger
from .items import Item, ItemCatalog
from .search import SearchFilter
from .state import ListState, Payload


class RowView(NamedTuple):
    """What a row renderer gets to draw one index of the active catalog."""
    index: int
    disabled: bool
    selected: bool
    focused: bool
    display_text: str


Listener = Callable[[Payload], None]


class SelectableList:
    """One selectable list instance: owns its items, state and search filter.

    All mutation goes through the methods below. Selection changes are
    committed first and only then reported to ``on_change`` and any extra
    listeners, so a callback always sees the finished state and may call
    back into the list.
    """

    def __init__(self, config: Optional[ListConfig] = None, **options: Any) -> None:
        if config is not None and options:
            raise TypeError("pass either a ListConfig or keyword options, not both")
        self.config = config if config is not None else ListConfig.from_options(**options)
        self.logr = get_logger("list")
        self._items = ItemCatalog.from_values(self.config.items)
        self._state = ListState.initial(
            self._items,
            selected=self.config.selected,
            disabled=self.config.disabled,
            multiple=self.config.multiple,
        )
        self.search = SearchFilter()
        self.search.set_items(self._items)
        self._listeners: List[Listener] = []
        self.logr.debug(
            "init: items=%d multiple=%s search=%s keyboard=%s",
            len(self._items),
            self.config.multiple,
            self.config.search,
            self.config.keyboard_events,
        )

    # ---- Read-only views ----
    @property
    def state(self) -> ListState:
        return self._state

    @property
    def catalog(self) -> ItemCatalog:
        return self._state.catalog

    @property
    def items(self) -> ItemCatalog:
        """The original configured items, before any filtering."""
        return self._items

    @property
    def selected(self) -> FrozenSet[int]:
        return self._state.selected

    @property
    def disabled(self) -> FrozenSet[int]:
        return self._state.disabled

    @property
    def focused(self) -> Optional[int]:
        return self._state.focused

    @property
    def anchor(self) -> Optional[int]:
        return self._state.anchor

    @property
    def multiple(self) -> bool:
        return self._state.multiple

    @property
    def query(self) -> str:
        return self.search.query

    @property
    def payload(self) -> Payload:
        return self._state.payload

    def rows(self) -> Iterator[RowView]:
        st = self._state
        for index, item in enumerate(st.catalog):
            yield RowView(
                index=index,
                disabled=index in st.disabled,
                selected=index in st.selected,
                focused=st.focused == index,
                display_text=item.display_text,
            )

    def selected_items(self) -> List[Item]:
        catalog = self._state.catalog
        return [catalog[i] for i in sorted(self._state.selected) if catalog.has_index(i)]

    # ---- Change emission ----
    def add_listener(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _commit(self, new_state: ListState, op: str, emit: bool) -> bool:
        if new_state is self._state:
            self.logr.debug("%s: no change", op)
            return False
        self._state = new_state
        self.logr.debug(
            "%s: selected=%s anchor=%s focused=%s disabled=%s",
            op,
            sorted(new_state.selected),
            new_state.anchor,
            new_state.focused,
            sorted(new_state.disabled),
        )
        if emit:
            payload = new_state.payload
            self.config.on_change(payload)
            for listener in list(self._listeners):
                listener(payload)
        return True

    # ---- Selection ----
    def select(self, index: Optional[int], contiguous: bool = False) -> bool:
        return self._commit(transitions.select(self._state, index, contiguous), "select", emit=True)

    def deselect(self, index: Optional[int], contiguous: bool = False) -> bool:
        return self._commit(transitions.deselect(self._state, index, contiguous), "deselect", emit=True)

    def toggle(self, index: Optional[int], contiguous: bool = False) -> bool:
        return self._commit(transitions.toggle(self._state, index, contiguous), "toggle", emit=True)

    def select_all(self) -> bool:
        return self._commit(transitions.select_all(self._state), "select_all", emit=True)

    def clear(self) -> bool:
        return self._commit(transitions.clear(self._state), "clear", emit=True)

    # ---- Disabled set ----
    def disable_index(self, index: Optional[int]) -> bool:
        return self._commit(transitions.disable_index(self._state, index), "disable", emit=False)

    def enable_index(self, index: Optional[int]) -> bool:
        return self._commit(transitions.enable_index(self._state, index), "enable", emit=False)

    # ---- Focus ----
    def focus_index(self, index: Optional[int]) -> bool:
        return self._commit(transitions.focus_index(self._state, index), "focus_index", emit=False)

    def focus_next(self) -> bool:
        return self._commit(transitions.focus_next(self._state), "focus_next", emit=False)

    def focus_previous(self) -> bool:
        return self._commit(transitions.focus_previous(self._state), "focus_previous", emit=False)

    def focus_first(self) -> bool:
        return self._commit(transitions.focus_first(self._state), "focus_first", emit=False)

    def focus_last(self) -> bool:
        return self._commit(transitions.focus_last(self._state), "focus_last", emit=False)

    # ---- Search ----
    def update_query(self, text: Optional[str]) -> bool:
        """Store the typed query; an empty query restores the full list."""
        self.search.update_query(text)
        if not self.search.has_query():
            return self.reset_search()
        return False

    def commit_search(self) -> bool:
        catalog = self.search.commit()
        self.logr.debug("commit_search: query=%r matches=%d", self.search.query, len(catalog))
        return self._commit(transitions.with_catalog(self._state, catalog), "commit_search", emit=False)

    def reset_search(self) -> bool:
        catalog = self.search.reset()
        if catalog is None or catalog == self._state.catalog:
            return False
        return self._commit(transitions.with_catalog(self._state, catalog), "reset_search", emit=False)

    # ---- Re-configuration ----
    def configure(
        self,
        *,
        items: Optional[Iterable[Any]] = None,
        selected: Optional[Iterable[int]] = None,
        disabled: Optional[Iterable[int]] = None,
    ) -> None:
        """Replace items / selected / disabled wholesale, keeping focus and anchor."""
        st = self._state
        if items is not None:
            self._items = ItemCatalog.from_values(items)
            self.search.set_items(self._items)
            st = transitions.with_catalog(st, self._items)
        if selected is not None:
            st = transitions.with_selected(st, selected)
        if disabled is not None:
            st = transitions.with_disabled(st, disabled)
        self._commit(st, "configure", emit=False)
