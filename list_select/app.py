from typing import List, Optional

from textual import events
from textual.app import App, ComposeResult
from textual.widgets import Footer, Header, Input, Static

from .config import ListConfig
from .debug import get_logger
from .items import Item
from .keymap import app_bindings
from .tips import list_tips, selection_status
from .utils import safe_call
from .version import __version__
from .widgets import SelectList


class ListSelectApp(App[Optional[List[Item]]]):
    """Hosts a single SelectList; exits with the chosen items or ``None``."""

    TITLE = "ListSelect"
    SUB_TITLE = f"v{__version__}"

    DEFAULT_CSS = """
    #tips {
        height: 1;
        padding: 0 1;
        color: $text-muted;
    }
    """

    BINDINGS = app_bindings()

    def __init__(self, config: ListConfig, title: Optional[str] = None) -> None:
        super().__init__()
        self.logr = get_logger("app")
        self.config = config
        if title:
            self.title = title

    def compose(self) -> ComposeResult:
        yield Header()
        self.select_list = SelectList(config=self.config, id="select-list")
        yield self.select_list
        self.tips = Static("", id="tips")
        yield self.tips
        yield Footer()

    def on_mount(self) -> None:
        self.logr.debug("on_mount: items=%d", len(self.select_list.model.items))
        safe_call(self.select_list.focus)
        self._update_tips()

    def check_action(self, action: str, parameters: tuple) -> Optional[bool]:
        if action == "select_all_items" and not self.config.multiple:
            return False
        return True

    def _search_box(self) -> Optional[Input]:
        focused = getattr(self.screen, "focused", None)
        return focused if isinstance(focused, Input) else None

    def _update_tips(self) -> None:
        model = self.select_list.model
        status = selection_status(len(model.selected), len(model.catalog), model.multiple)
        tips = list_tips(
            multiple=model.multiple,
            keyboard=self.config.keyboard_events,
            search_hint=model.search.summary(),
            search_focused=self._search_box() is not None,
        )
        self.tips_text = f"{status} | {tips}"
        self.tips.update(self.tips_text)

    # ---- Events ----
    def on_select_list_changed(self, event: SelectList.Changed) -> None:
        self.logr.debug("changed: payload=%s", event.payload)
        self._update_tips()

    def on_input_changed(self, event: Input.Changed) -> None:
        self._update_tips()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self._update_tips()

    def on_descendant_focus(self, event: events.DescendantFocus) -> None:
        self._update_tips()

    # ---- Actions ----
    def action_accept(self) -> None:
        chosen = self.select_list.model.selected_items()
        self.logr.debug("accept: %d item(s)", len(chosen))
        self.exit(chosen)

    def action_cancel(self) -> None:
        # Esc inside a non-empty search box clears it first
        box = self._search_box()
        if box is not None and box.value:
            box.value = ""
            return
        self.exit(None)

    def action_clear_selection(self) -> None:
        self.select_list.clear_selection()
        self._update_tips()

    def action_select_all_items(self) -> None:
        self.select_list.select_all_items()
        self._update_tips()
