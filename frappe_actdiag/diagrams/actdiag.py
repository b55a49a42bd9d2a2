from __future__ import annotations

from ..actdiag_fmt import (
    ACTDIAG_FOOTER,
    ACTDIAG_HEADER,
    ad_edge,
    ad_lane_close,
    ad_lane_open,
    ad_state,
)
from ..model import RoleGroupedView


def gen_actdiag(view: RoleGroupedView, *, escape_quotes: bool = False) -> str:
    """Generate an actdiag source with one lane per role.

    Lanes follow the role order of `view.states_by_role`; every transition is
    listed after the lanes, grouped by role in `view.transitions_by_role`
    order. An empty view yields just the header and footer.
    """
    lines: list[str] = [ACTDIAG_HEADER]

    for role, states in view.states_by_role.items():
        lines.append(ad_lane_open(role, escape_quotes=escape_quotes))
        for state in states:
            lines.append(ad_state(state, escape_quotes=escape_quotes))
        lines.append(ad_lane_close())

    for transitions in view.transitions_by_role.values():
        for t in transitions:
            lines.append(
                ad_edge(t.from_state, t.to_state, t.action, escape_quotes=escape_quotes)
            )

    lines.append(ACTDIAG_FOOTER)
    return "\n".join(lines)
