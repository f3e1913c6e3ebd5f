from textual.binding import Binding


# Key names as Textual reports them in ``events.Key.key``.
KEY_UP = "up"
KEY_DOWN = "down"
KEY_K = "k"
KEY_J = "j"
KEY_SPACE = "space"
KEY_HOME = "home"
KEY_END = "end"

KEYS = frozenset({KEY_UP, KEY_DOWN, KEY_K, KEY_J, KEY_SPACE, KEY_HOME, KEY_END})

SHIFT_PREFIX = "shift+"


def split_modifiers(key: str, shift: bool = False) -> tuple[str, bool]:
    """Normalize ``shift+space`` style names to ``("space", True)``.

    Upper-case letters arrive with shift held as well.
    """
    if key.startswith(SHIFT_PREFIX):
        return key[len(SHIFT_PREFIX):], True
    if len(key) == 1 and key.isalpha() and key.isupper():
        return key.lower(), True
    return key, shift


# Centralized default bindings for the host app. The list widget routes its
# own navigation keys through the KeyboardRouter instead of bindings.


def app_bindings() -> list[Binding]:
    return [
        Binding("ctrl+q", "quit", "Quit"),
        Binding("enter", "accept", "Accept"),
        Binding("escape", "cancel", "Cancel"),
        Binding("ctrl+r", "clear_selection", "Clear"),
        Binding("a", "select_all_items", "Select All"),
    ]
