from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Callable, FrozenSet, Tuple


def _noop(_payload: Any) -> None:
    pass


# camelCase names accepted for callers porting existing configuration
_ALIASES = {
    "keyboardEvents": "keyboard_events",
    "onChange": "on_change",
}


@dataclass(frozen=True)
class ListConfig:
    """Per-instance configuration for a selectable list.

    Every field has a default; each instance gets its own record, nothing
    is shared or mutated between lists.
    """

    items: Tuple[Any, ...] = ()
    selected: FrozenSet[int] = frozenset()
    disabled: FrozenSet[int] = frozenset()
    multiple: bool = False
    search: bool = False
    keyboard_events: bool = True
    on_change: Callable[[Any], None] = field(default=_noop, compare=False)

    @classmethod
    def from_options(cls, **options: Any) -> "ListConfig":
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in options.items():
            name = _ALIASES.get(key, key)
            if name not in known:
                raise TypeError(f"unknown list option: {key!r}")
            kwargs[name] = value
        if "items" in kwargs:
            kwargs["items"] = tuple(kwargs["items"] or ())
        for name in ("selected", "disabled"):
            if name in kwargs:
                kwargs[name] = frozenset(kwargs[name] or ())
        if kwargs.get("on_change") is None:
            kwargs.pop("on_change", None)
        return cls(**kwargs)
