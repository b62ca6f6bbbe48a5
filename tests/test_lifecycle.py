"""Tests for the project status lifecycle."""

from __future__ import annotations

import pytest

from servest.exceptions import InvalidTransitionError
from servest.lifecycle import VALID_TRANSITIONS, available_transitions, can_transition, transition
from servest.models.enums import ProjectStatus

S = ProjectStatus


class TestTransitions:
    @pytest.mark.parametrize(
        ("current", "target"),
        [
            (S.DRAFT, S.SUBMITTED),
            (S.SUBMITTED, S.PENDING_CLIENT_DECISION),
            (S.PENDING_CLIENT_DECISION, S.AWARDED),
            (S.PENDING_CLIENT_DECISION, S.LOST),
            (S.AWARDED, S.CANCELLED),
        ],
    )
    def test_allowed(self, current: ProjectStatus, target: ProjectStatus) -> None:
        assert can_transition(current, target)
        assert transition(current, target) is target

    @pytest.mark.parametrize(
        ("current", "target"),
        [
            (S.DRAFT, S.AWARDED),
            (S.LOST, S.AWARDED),
            (S.CANCELLED, S.DRAFT),
            (S.SUBMITTED, S.SUBMITTED),
        ],
    )
    def test_rejected(self, current: ProjectStatus, target: ProjectStatus) -> None:
        assert not can_transition(current, target)
        with pytest.raises(InvalidTransitionError, match=f"from {current} to {target}"):
            transition(current, target)

    def test_cancelled_is_terminal(self) -> None:
        assert available_transitions(S.CANCELLED) == ()

    def test_every_status_has_an_entry(self) -> None:
        assert set(VALID_TRANSITIONS) == set(ProjectStatus)


class TestAdmin:
    def test_admin_may_move_anywhere_else(self) -> None:
        options = available_transitions(S.CANCELLED, is_admin=True)
        assert S.CANCELLED not in options
        assert len(options) == len(ProjectStatus) - 1
        assert transition(S.LOST, S.AWARDED, is_admin=True) is S.AWARDED

    def test_admin_cannot_stay_put(self) -> None:
        assert not can_transition(S.DRAFT, S.DRAFT, is_admin=True)
