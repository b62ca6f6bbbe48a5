"""Combine organisation-level libraries with project-local entries."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from pydantic import BaseModel

if TYPE_CHECKING:
    from collections.abc import Iterable

    from servest.models.facilities import TechnicianType

T = TypeVar("T", bound=BaseModel)

# Technician fields edited per project; the organisation library never overrides them.
TECHNICIAN_PROJECT_FIELDS = ("notes",)


def merge_by_key(
    org: Iterable[T],
    project: Iterable[T],
    key: str = "id",
    preserve: Iterable[str] = (),
) -> list[T]:
    """Merge two libraries of records identified by ``key``.

    Organisation entries come first and win on shared keys, except for the
    ``preserve`` fields, which keep the project's value. Entries that exist
    only in the project follow in project order.

    Example::

        merged = merge_by_key(org_technicians, state.technician_library)
        state = state.model_copy(update={"technician_library": merged})
    """
    project_entries = list(project)
    by_key = {getattr(entry, key): entry for entry in project_entries}
    kept = tuple(preserve)

    merged: list[T] = []
    seen = set()
    for entry in org:
        entry_key = getattr(entry, key)
        local = by_key.get(entry_key)
        if local is not None and kept:
            entry = entry.model_copy(update={name: getattr(local, name) for name in kept})
        merged.append(entry)
        seen.add(entry_key)

    for entry in project_entries:
        entry_key = getattr(entry, key)
        if entry_key not in seen:
            merged.append(entry)
            seen.add(entry_key)
    return merged


def merge_technician_library(
    org: Iterable[TechnicianType], project: Iterable[TechnicianType]
) -> list[TechnicianType]:
    """Refresh a project's technician library from the organisation's, keeping project notes."""
    return merge_by_key(org, project, preserve=TECHNICIAN_PROJECT_FIELDS)
