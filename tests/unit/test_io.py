from pathlib import Path

import pytest

from frappe_actdiag.io import load_document, parse_workflow_catalog, parse_workflow_document


FIXTURE_DIR = Path(__file__).resolve().parents[1] / "fixtures" / "frappe"


def test_catalog_rows_are_joined():
    payload = {"message": {"keys": ["name"], "values": [["Leave ", "Approval"], ["Expense"]]}}
    assert parse_workflow_catalog(payload) == ["Leave Approval", "Expense"]


def test_catalog_without_values_is_empty():
    assert parse_workflow_catalog({"message": {"keys": ["name"]}}) == []
    assert parse_workflow_catalog({}) == []


def test_document_maps_frappe_field_names():
    payload = {
        "docs": [
            {
                "name": "WF",
                "states": [{"state": "Draft", "allow_edit": "Clerk"}],
                "transitions": [
                    {"state": "Draft", "action": "Send", "next_state": "Sent", "allowed": None}
                ],
            }
        ]
    }
    doc = parse_workflow_document(payload)

    state = doc.states[0]
    assert (state.name, state.authorized_role) == ("Draft", "Clerk")
    t = doc.transitions[0]
    assert (t.from_state, t.to_state, t.action, t.authorized_role) == ("Draft", "Sent", "Send", "")


def test_empty_docs_warns(capsys):
    doc = parse_workflow_document({"docs": []})

    assert doc.workflows == ()
    assert "warning: workflow document contains no docs" in capsys.readouterr().err


def test_transitions_must_be_a_list():
    with pytest.raises(TypeError, match="transitions must be a list"):
        parse_workflow_document({"docs": [{"name": "WF", "transitions": "oops"}]})


def test_load_json_document():
    doc = load_document(FIXTURE_DIR / "getdoc_leave_approval.json")
    assert [s.name for s in doc.states] == ["Draft", "Pending", "Approved", "Rejected", "Archived"]


def test_load_bare_yaml_record():
    doc = load_document(FIXTURE_DIR / "purchase_order.yaml")

    assert [wf.name for wf in doc.workflows] == ["Purchase Order Approval"]
    assert doc.transitions[0].authorized_role == "Purchase Manager"


def test_load_document_rejects_non_mapping(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(TypeError, match="must be a mapping"):
        load_document(path)


def test_load_document_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_document(tmp_path / "missing.json")
