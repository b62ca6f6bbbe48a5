"""Project status lifecycle.

Projects move draft -> submitted -> pending client decision -> awarded or
lost, and may be cancelled from any open status. Administrators may move a
project to any other status.
"""

from __future__ import annotations

from servest.exceptions import InvalidTransitionError
from servest.models.enums import ProjectStatus

VALID_TRANSITIONS: dict[ProjectStatus, tuple[ProjectStatus, ...]] = {
    ProjectStatus.DRAFT: (ProjectStatus.SUBMITTED, ProjectStatus.CANCELLED),
    ProjectStatus.SUBMITTED: (ProjectStatus.PENDING_CLIENT_DECISION, ProjectStatus.CANCELLED),
    ProjectStatus.PENDING_CLIENT_DECISION: (
        ProjectStatus.AWARDED,
        ProjectStatus.LOST,
        ProjectStatus.CANCELLED,
    ),
    ProjectStatus.AWARDED: (ProjectStatus.CANCELLED,),
    ProjectStatus.LOST: (ProjectStatus.CANCELLED,),
    ProjectStatus.CANCELLED: (),
}

STATUS_LABELS: dict[ProjectStatus, str] = {
    ProjectStatus.DRAFT: "Draft",
    ProjectStatus.SUBMITTED: "Submitted",
    ProjectStatus.PENDING_CLIENT_DECISION: "Pending Decision",
    ProjectStatus.AWARDED: "Awarded",
    ProjectStatus.LOST: "Lost",
    ProjectStatus.CANCELLED: "Cancelled",
}


def available_transitions(
    current: ProjectStatus, is_admin: bool = False
) -> tuple[ProjectStatus, ...]:
    if is_admin:
        return tuple(status for status in ProjectStatus if status is not current)
    return VALID_TRANSITIONS[current]


def can_transition(current: ProjectStatus, target: ProjectStatus, is_admin: bool = False) -> bool:
    return target in available_transitions(current, is_admin)


def transition(
    current: ProjectStatus, target: ProjectStatus, is_admin: bool = False
) -> ProjectStatus:
    """Return ``target`` if the move is allowed.

    Raises:
        InvalidTransitionError: If ``current`` cannot move to ``target``.
    """
    if not can_transition(current, target, is_admin):
        raise InvalidTransitionError(current, target)
    return target
