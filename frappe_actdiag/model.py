from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class WorkflowState:
    name: str
    authorized_role: str = ""


@dataclass(frozen=True)
class WorkflowTransition:
    from_state: str
    to_state: str
    action: str
    authorized_role: str = ""


@dataclass(frozen=True)
class Workflow:
    """One named Workflow record (a single entry of a getdoc `docs` list)."""

    name: str
    states: tuple[WorkflowState, ...] = ()
    transitions: tuple[WorkflowTransition, ...] = ()


@dataclass(frozen=True)
class WorkflowDocument:
    """A fetched workflow document.

    A getdoc response may carry several records; `states` and `transitions`
    flatten all of them in document order.
    """

    workflows: tuple[Workflow, ...] = ()

    @property
    def states(self) -> list[WorkflowState]:
        return [s for wf in self.workflows for s in wf.states]

    @property
    def transitions(self) -> list[WorkflowTransition]:
        return [t for wf in self.workflows for t in wf.transitions]


@dataclass
class RoleGroupedView:
    """States and transitions bucketed by the role allowed to act on them.

    Both mappings keep insertion order: a role appears at the position where
    it was first encountered in the source document.
    """

    states_by_role: dict[str, list[str]] = field(default_factory=dict)
    transitions_by_role: dict[str, list[WorkflowTransition]] = field(
        default_factory=dict
    )
