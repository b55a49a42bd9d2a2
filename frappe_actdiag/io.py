from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import yaml

from .model import Workflow, WorkflowDocument, WorkflowState, WorkflowTransition


def _as_str(value: Any) -> str:
    """Frappe sends null for unset Link fields; treat those as empty."""
    if value is None:
        return ""
    return str(value)


def _records(doc: dict[str, Any], key: str) -> list[dict[str, Any]]:
    items = doc.get(key, []) or []
    if not isinstance(items, list):
        raise TypeError(f"workflow {doc.get('name')!r}: {key} must be a list")
    return [item for item in items if isinstance(item, dict)]


def parse_workflow_catalog(payload: dict[str, Any]) -> list[str]:
    """Return workflow names from a `frappe.desk.reportview.get` response.

    The response is column oriented (`keys` + `values` rows); each row is
    joined into a single name.
    """
    message = payload.get("message") or {}
    if not isinstance(message, dict):
        raise TypeError(
            f"reportview message must be a mapping, got {type(message).__name__}"
        )

    names: list[str] = []
    for row in message.get("values", []) or []:
        if isinstance(row, list):
            names.append("".join(_as_str(v) for v in row))
        else:
            names.append(_as_str(row))
    return names


def _parse_workflow(doc: dict[str, Any]) -> Workflow:
    states = tuple(
        WorkflowState(
            name=_as_str(s.get("state")),
            authorized_role=_as_str(s.get("allow_edit")),
        )
        for s in _records(doc, "states")
    )
    transitions = tuple(
        WorkflowTransition(
            from_state=_as_str(t.get("state")),
            to_state=_as_str(t.get("next_state")),
            action=_as_str(t.get("action")),
            authorized_role=_as_str(t.get("allowed")),
        )
        for t in _records(doc, "transitions")
    )
    return Workflow(name=_as_str(doc.get("name")), states=states, transitions=transitions)


def parse_workflow_document(payload: dict[str, Any]) -> WorkflowDocument:
    """Build a WorkflowDocument from a `frappe.desk.form.load.getdoc` response."""
    docs = payload.get("docs", []) or []
    if not isinstance(docs, list):
        raise TypeError("getdoc response docs must be a list")

    workflows = tuple(_parse_workflow(d) for d in docs if isinstance(d, dict))

    if not workflows:
        print("warning: workflow document contains no docs", file=sys.stderr)
    for wf in workflows:
        if not wf.states and not wf.transitions:
            print(
                f"warning: workflow {wf.name!r} has no states and no transitions",
                file=sys.stderr,
            )

    return WorkflowDocument(workflows=workflows)


def load_document(path: Path) -> WorkflowDocument:
    """Load a saved getdoc response (JSON or YAML) from disk.

    A bare Workflow record (a mapping with `states`/`transitions` but no
    `docs`) is accepted too and treated as a single-record document.
    """
    if not path.exists():
        raise FileNotFoundError(str(path))

    raw = path.read_text(encoding="utf-8")
    try:
        # JSON is a subset of YAML, so one loader covers both export formats.
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ValueError(f"Failed to parse workflow document {path}: {e}") from e

    if not isinstance(data, dict):
        raise TypeError(
            f"Top-level document must be a mapping in {path}, got {type(data).__name__}"
        )

    if "docs" not in data and ("states" in data or "transitions" in data):
        data = {"docs": [data]}

    return parse_workflow_document(data)
