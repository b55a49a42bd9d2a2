from __future__ import annotations

from pathlib import Path


def write_diagram(path: Path, diagram_code: str) -> None:
    """Write actdiag source to `path`, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(diagram_code.rstrip() + "\n", encoding="utf-8")
