import json
from pathlib import Path

from frappe_actdiag.grouping import group_by_role
from frappe_actdiag.io import parse_workflow_document
from frappe_actdiag.model import (
    Workflow,
    WorkflowDocument,
    WorkflowState,
    WorkflowTransition,
)


FIXTURE_DIR = Path(__file__).resolve().parents[1] / "fixtures" / "frappe"


def load_json(path: Path) -> dict:
    return json.loads(path.read_text(encoding="utf-8"))


def _two_record_document() -> WorkflowDocument:
    first = Workflow(
        name="A",
        states=(
            WorkflowState("Draft", "Clerk"),
            WorkflowState("Review", "Manager"),
            WorkflowState("Draft", "Clerk"),
        ),
        transitions=(WorkflowTransition("Draft", "Review", "Send", "Clerk"),),
    )
    second = Workflow(
        name="B",
        states=(WorkflowState("Closed", ""), WorkflowState("Open", "Manager")),
        transitions=(
            WorkflowTransition("Review", "Closed", "Close", "Manager"),
            WorkflowTransition("Closed", "Open", "Reopen", ""),
        ),
    )
    return WorkflowDocument(workflows=(first, second))


def test_grouping_preserves_every_record():
    doc = _two_record_document()
    view = group_by_role(doc)

    assert sum(len(v) for v in view.states_by_role.values()) == len(doc.states)
    assert sum(len(v) for v in view.transitions_by_role.values()) == len(doc.transitions)


def test_grouping_flattens_records_in_document_order_and_keeps_duplicates():
    view = group_by_role(_two_record_document())

    assert view.states_by_role == {
        "Clerk": ["Draft", "Draft"],
        "Manager": ["Review", "Open"],
        "": ["Closed"],
    }
    assert list(view.transitions_by_role) == ["Clerk", "Manager", ""]
    assert [t.action for t in view.transitions_by_role["Manager"]] == ["Close"]


def test_grouping_buckets_by_authorized_role_only():
    view = group_by_role(_two_record_document())

    for role, transitions in view.transitions_by_role.items():
        assert all(t.authorized_role == role for t in transitions)


def test_grouping_empty_document():
    view = group_by_role(WorkflowDocument())
    assert view.states_by_role == {}
    assert view.transitions_by_role == {}


def test_grouping_fixture_null_role_goes_to_empty_bucket():
    doc = parse_workflow_document(load_json(FIXTURE_DIR / "getdoc_leave_approval.json"))
    view = group_by_role(doc)

    assert view.states_by_role[""] == ["Archived"]
    assert list(view.states_by_role) == ["Employee", "Leave Approver", ""]
    assert list(view.transitions_by_role) == ["Employee", "Leave Approver", "System Manager"]
