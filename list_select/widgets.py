from __future__ import annotations

from typing import Any, Callable, Iterable, List, Optional

from rich.text import Text
from textual import events
from textual.app import ComposeResult
from textual.containers import Vertical, VerticalScroll
from textual.message import Message
from textual.widgets import Input, Static

from .config import ListConfig
from .controller import RowView, SelectableList
from .debug import debug_keys_enabled, get_logger
from .formatting import format_row
from .keymap import KEY_END, KEY_HOME, split_modifiers
from .router import KeyboardRouter
from .state import Payload
from .utils import safe_call


RowRenderer = Callable[[RowView], Text]


class ListRow(Static):
    """Draws one index of the catalog and forwards pointer hover/activate.

    Holds no selection state; it is re-fed a :class:`RowView` after every
    change.
    """

    DEFAULT_CSS = """
    ListRow {
        height: 1;
        padding: 0 1;
    }
    ListRow.-disabled {
        color: $text-muted;
    }
    """

    def __init__(
        self,
        view: RowView,
        *,
        render_row: RowRenderer,
        on_hover: Callable[[int], Any],
        on_activate: Callable[[int, bool], Any],
    ) -> None:
        super().__init__(render_row(view), classes=f"list-row row-{view.index}")
        self.row_view = view
        self._render_row = render_row
        self._on_hover = on_hover
        self._on_activate = on_activate
        self._apply_classes(view)

    @property
    def index(self) -> int:
        return self.row_view.index

    def show_view(self, view: RowView) -> None:
        if view == self.row_view:
            return
        self.row_view = view
        self.update(self._render_row(view))
        self._apply_classes(view)

    def _apply_classes(self, view: RowView) -> None:
        self.set_class(view.disabled, "-disabled")
        self.set_class(view.selected, "-selected")
        self.set_class(view.focused, "-focused")

    def on_enter(self, event: events.Enter) -> None:
        self._on_hover(self.index)

    def on_click(self, event: events.Click) -> None:
        safe_call(event.stop)
        self._on_activate(self.index, bool(getattr(event, "shift", False)))


class RowList(VerticalScroll, can_focus=False):
    """Scrolling body of a SelectList; keyboard focus stays with the list."""

    DEFAULT_CSS = """
    RowList {
        height: 1fr;
    }
    """


class SelectList(Vertical, can_focus=True):
    """Selectable list backed by a :class:`SelectableList`.

    - Keys go through the KeyboardRouter when keyboard events are enabled.
    - With ``search`` on, an input box sits above the rows: typing stores the
      query, Enter applies it, emptying the box shows everything again.
    - Posts :class:`SelectList.Changed` after every selection change.
    """

    DEFAULT_CSS = """
    SelectList {
        height: 1fr;
        border: solid steelblue;
    }
    SelectList:focus-within {
        border: thick yellow;
    }
    SelectList > Input {
        margin: 0 0 1 0;
    }
    """

    class Changed(Message):
        """Selection changed; ``payload`` is the indices (multiple) or the index/None."""

        def __init__(self, select_list: "SelectList", payload: Payload) -> None:
            super().__init__()
            self.select_list = select_list
            self.payload = payload

        @property
        def control(self) -> "SelectList":
            return self.select_list

    def __init__(
        self,
        items: Iterable[Any] = (),
        *,
        selected: Iterable[int] = (),
        disabled: Iterable[int] = (),
        multiple: bool = False,
        search: bool = False,
        keyboard_events: bool = True,
        on_change: Optional[Callable[[Payload], None]] = None,
        config: Optional[ListConfig] = None,
        render_row: Optional[RowRenderer] = None,
        id: Optional[str] = None,
        classes: Optional[str] = None,
    ) -> None:
        super().__init__(id=id, classes=classes)
        if config is None:
            config = ListConfig.from_options(
                items=items,
                selected=selected,
                disabled=disabled,
                multiple=multiple,
                search=search,
                keyboard_events=keyboard_events,
                on_change=on_change,
            )
        self.logr = get_logger("widget")
        self._debug_keys = debug_keys_enabled()
        self.model = SelectableList(config)
        self.router = KeyboardRouter(self.model)
        self.model.add_listener(self._post_changed)
        self._render_row = render_row or format_row
        self._rows: List[ListRow] = []
        self._rendered_catalog = None

    # ---- Composition ----
    def compose(self) -> ComposeResult:
        if self.model.config.search:
            yield Input(placeholder="Search", classes="list-search")
        self._rendered_catalog = self.model.catalog
        self._rows = [self._make_row(view) for view in self.model.rows()]
        yield RowList(*self._rows)

    def _make_row(self, view: RowView) -> ListRow:
        return ListRow(view, render_row=self._render_row, on_hover=self._hover, on_activate=self._activate)

    @property
    def rows(self) -> List[ListRow]:
        return list(self._rows)

    def refresh_rows(self) -> None:
        """Bring the rows in line with the model; rebuild when the catalog changed."""
        catalog = self.model.catalog
        if catalog is not self._rendered_catalog:
            self._rendered_catalog = catalog
            row_list = self.query_one(RowList)
            row_list.remove_children()
            self._rows = [self._make_row(view) for view in self.model.rows()]
            if self._rows:
                row_list.mount(*self._rows)
            self.logr.debug("refresh_rows: rebuilt %d rows", len(self._rows))
        else:
            for row, view in zip(self._rows, self.model.rows()):
                row.show_view(view)
        focused = self.model.focused
        if focused is not None and 0 <= focused < len(self._rows):
            safe_call(self._rows[focused].scroll_visible, animate=False)

    def _post_changed(self, payload: Payload) -> None:
        self.post_message(self.Changed(self, payload))

    def _run(self, op: str, func: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
        try:
            result = func(*args, **kwargs)
        except Exception:
            self.logr.exception("%s failed", op)
            raise
        self.refresh_rows()
        return result

    # ---- Public operations ----
    def select(self, index: Optional[int], contiguous: bool = False) -> bool:
        return self._run("select", self.model.select, index, contiguous)

    def deselect(self, index: Optional[int], contiguous: bool = False) -> bool:
        return self._run("deselect", self.model.deselect, index, contiguous)

    def toggle(self, index: Optional[int], contiguous: bool = False) -> bool:
        return self._run("toggle", self.model.toggle, index, contiguous)

    def select_all_items(self) -> bool:
        return self._run("select_all", self.model.select_all)

    def clear_selection(self) -> bool:
        return self._run("clear", self.model.clear)

    def disable_index(self, index: Optional[int]) -> bool:
        return self._run("disable", self.model.disable_index, index)

    def enable_index(self, index: Optional[int]) -> bool:
        return self._run("enable", self.model.enable_index, index)

    def focus_index(self, index: Optional[int]) -> bool:
        return self._run("focus_index", self.model.focus_index, index)

    def configure(self, **kwargs: Any) -> None:
        self._run("configure", self.model.configure, **kwargs)

    # ---- Pointer adapters ----
    def _hover(self, index: int) -> None:
        self._run("hover", self.router.pointer_hover, index)

    def _activate(self, index: int, shift: bool) -> None:
        safe_call(self.focus)
        self._run("activate", self.router.pointer_activate, index, shift)

    # ---- Keyboard ----
    def _search_has_focus(self) -> bool:
        focused = getattr(self.screen, "focused", None)
        return isinstance(focused, Input) and focused.parent is self

    def on_key(self, event: events.Key) -> None:
        if self._debug_keys:
            self.logr.debug(
                "on_key: key=%s char=%s focus=%s",
                getattr(event, "key", None),
                getattr(event, "character", None),
                getattr(getattr(self.screen, "focused", None), "id", None),
            )
        if not self.model.config.keyboard_events:
            return
        name, _shift = split_modifiers(event.key)
        # Home/End belong to the search box while it is being edited
        if name in (KEY_HOME, KEY_END) and self._search_has_focus():
            return
        if self._run("key", self.router.dispatch, event.key):
            event.prevent_default()
            event.stop()

    # ---- Search box ----
    def on_input_changed(self, event: Input.Changed) -> None:
        self._run("update_query", self.model.update_query, event.value)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self._run("commit_search", self.model.commit_search)
