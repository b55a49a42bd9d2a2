from __future__ import annotations

from .model import RoleGroupedView, WorkflowDocument


def group_by_role(document: WorkflowDocument) -> RoleGroupedView:
    """Partition every state and transition of `document` by authorized role.

    Records keep their document order inside a bucket and duplicates are kept.
    Unassigned records go to the "" bucket.
    """
    view = RoleGroupedView()

    for state in document.states:
        view.states_by_role.setdefault(state.authorized_role or "", []).append(
            state.name
        )

    for transition in document.transitions:
        view.transitions_by_role.setdefault(
            transition.authorized_role or "", []
        ).append(transition)

    return view
