from __future__ import annotations

import sys
from typing import Callable, Optional, Sequence, TextIO


def numbered_menu(names: Sequence[str]) -> list[str]:
    """Render the selection menu lines, indices starting at 0."""
    lines = ["Please select a workflow:"]
    lines.extend(f"[{i}] - {name}" for i, name in enumerate(names))
    return lines


def parse_selection(raw: str, names: Sequence[str]) -> Optional[str]:
    """Return the workflow picked by `raw`, or None if it is not a valid index."""
    try:
        index = int(raw.strip())
    except ValueError:
        return None
    if 0 <= index < len(names) and names[index]:
        return names[index]
    return None


def select_workflow(
    names: Sequence[str],
    *,
    read: Callable[[], str] = input,
    out: Optional[TextIO] = None,
) -> str:
    """Print the menu and keep asking until a valid index is entered.

    EOFError from `read` propagates to the caller.
    """
    out = out or sys.stdout
    if not any(names):
        raise ValueError("no workflows available to select")

    for line in numbered_menu(names):
        print(line, file=out)

    while True:
        choice = parse_selection(read(), names)
        if choice is not None:
            return choice
        print("Please enter a valid number", file=out)
