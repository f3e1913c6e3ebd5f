def list_tips(multiple: bool = False, keyboard: bool = True, search_hint: str = "", search_focused: bool = False) -> str:
    """Format the tips line shown under the list."""
    if search_focused:
        # Typing goes to the search box; Enter applies the filter there
        parts = ["Tips: Enter=apply filter", "clear box=show all", "Tab=back to list"]
    else:
        parts = ["Tips:"]
        if keyboard:
            parts[0] += " Up/k Down/j=move"
            parts.append("Space=toggle")
            if multiple:
                parts.append("Shift+Space=range")
        else:
            parts[0] += " click=toggle"
        if multiple:
            parts.append("Shift+click=range")
        parts.extend(["Enter=accept", "Esc=cancel"])
    base = ", ".join(parts)
    return base + (f" | Search: {search_hint}" if search_hint else "")


def selection_status(count: int, total: int, multiple: bool) -> str:
    if not multiple:
        return "1 selected" if count else "nothing selected"
    return f"{count}/{total} selected"
