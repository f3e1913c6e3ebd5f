import os
from typing import Any, List, Optional, Sequence

import click
from rich.console import Console

from .config import ListConfig
from .debug import get_logger, reset_logger
from .formatting import format_result
from .items import InvalidItemError, ItemCatalog
from .app import ListSelectApp
from .utils import load_items


def _check_indices(option: str, indices: Sequence[int], count: int) -> None:
    bad = [i for i in indices if i >= count]
    if bad:
        raise click.BadParameter(
            f"index {bad[0]} is out of range for {count} item(s)",
            param_hint=f"'--{option}'",
        )


def build_config(
    items: Sequence[str],
    file_path: Optional[str],
    multiple: bool,
    search: bool,
    keyboard: bool,
    selected: Sequence[int],
    disabled: Sequence[int],
    on_change=None,
) -> ListConfig:
    """Turn command line values into a validated ListConfig."""
    raw: List[Any] = list(items)
    if file_path:
        try:
            raw.extend(load_items(file_path))
        except (OSError, ValueError) as exc:
            raise click.BadParameter(str(exc), param_hint="'--file'") from exc
    if not raw:
        raise click.UsageError("No items given. Pass them as arguments or with --file.")
    try:
        catalog = ItemCatalog.from_values(raw)
    except InvalidItemError as exc:
        raise click.UsageError(f"Invalid item: {exc}") from exc
    _check_indices("selected", selected, len(catalog))
    _check_indices("disabled", disabled, len(catalog))
    if not multiple and len(set(selected)) > 1:
        raise click.BadParameter("only one index can be preselected without --multiple", param_hint="'--selected'")
    return ListConfig.from_options(
        items=catalog.items,
        selected=selected,
        disabled=disabled,
        multiple=multiple,
        search=search,
        keyboard_events=keyboard,
        on_change=on_change,
    )


@click.command()
@click.argument("items", nargs=-1)
@click.option(
    "--file",
    "-f",
    "file_path",
    type=click.Path(exists=True, dir_okay=False, resolve_path=True),
    help="Read items from a file: one per line, or a JSON array of strings / {name, value} objects for *.json.",
)
@click.option("--multiple", "-m", is_flag=True, default=False, help="Allow selecting more than one item.", show_default=True)
@click.option("--search", "-s", is_flag=True, default=False, help="Show a search box above the list.", show_default=True)
@click.option(
    "--keyboard/--no-keyboard",
    default=True,
    help="Enable Up/Down/j/k/Space navigation.",
    show_default=True,
)
@click.option("--selected", multiple=True, type=click.IntRange(min=0), help="Index to preselect (repeatable).")
@click.option("--disabled", multiple=True, type=click.IntRange(min=0), help="Index to disable (repeatable).")
@click.option("--title", default=None, help="Title shown in the header.")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print the chosen values as a JSON array.")
@click.option(
    "--debug",
    is_flag=True,
    default=False,
    help="Enable verbose debug logging to list_select_debug.log",
    show_default=True,
)
def main(items, file_path, multiple, search, keyboard, selected, disabled, title, as_json, debug):
    """
    Pick one or more ITEMS from an interactive list and print the choice.
    """
    console = Console(stderr=True)
    if debug:
        os.environ["LIST_SELECT_DEBUG"] = "1"
        reset_logger()
        console.print("[dim]Debug logging enabled -> list_select_debug.log[/dim]")
    log = get_logger("main")

    def _log_change(payload) -> None:
        log.debug("on_change: payload=%s", sorted(payload) if isinstance(payload, frozenset) else payload)

    config = build_config(items, file_path, multiple, search, keyboard, selected, disabled, on_change=_log_change)
    log.debug(
        "start: items=%d multiple=%s search=%s keyboard=%s selected=%s disabled=%s",
        len(config.items),
        multiple,
        search,
        keyboard,
        sorted(config.selected),
        sorted(config.disabled),
    )

    app = ListSelectApp(config, title=title)
    chosen = app.run()
    if chosen is None:
        log.debug("cancelled")
        console.print("[bold yellow]Cancelled.[/bold yellow]")
        raise click.exceptions.Exit(1)
    if not chosen:
        console.print("[bold yellow]Note:[/bold yellow] nothing was selected.")
        return
    click.echo(format_result(chosen, as_json=as_json))


if __name__ == "__main__":
    main()
