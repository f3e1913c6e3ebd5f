from __future__ import annotations

from typing import Optional

from .controller import SelectableList
from .debug import debug_keys_enabled, get_logger
from .keymap import KEY_DOWN, KEY_END, KEY_HOME, KEY_J, KEY_K, KEY_SPACE, KEY_UP, KEYS, split_modifiers


class KeyboardRouter:
    """Maps decoded keys and pointer actions onto a :class:`SelectableList`.

    Holds no state besides the target list.
    """

    def __init__(self, target: SelectableList) -> None:
        self.target = target
        self._debug_keys = debug_keys_enabled()
        self._logr = get_logger("router")

    def dispatch(self, key: str, shift: bool = False) -> bool:
        """Run the action for ``key``; True means the key was recognized.

        Callers suppress the default handling of every recognized key, even
        when the action itself changed nothing.
        """
        name, shift = split_modifiers(key, shift)
        if self._debug_keys:
            self._logr.debug("dispatch: key=%s name=%s shift=%s", key, name, shift)
        if name not in KEYS:
            return False
        if name in (KEY_UP, KEY_K):
            self.target.focus_previous()
        elif name in (KEY_DOWN, KEY_J):
            self.target.focus_next()
        elif name == KEY_SPACE:
            self.target.toggle(self.target.focused, contiguous=shift)
        elif name == KEY_HOME:
            self.target.focus_first()
        elif name == KEY_END:
            self.target.focus_last()
        return True

    def pointer_activate(self, index: Optional[int], shift: bool = False) -> bool:
        return self.target.toggle(index, contiguous=shift)

    def pointer_hover(self, index: Optional[int]) -> bool:
        return self.target.focus_index(index)
