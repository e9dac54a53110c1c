"""ID assignment for aggregates whose repositories don't generate IDs."""

from __future__ import annotations

from collections.abc import Iterable


def next_sequential_id(existing_ids: Iterable[str]) -> str:
    """One past the highest purely numeric ID; other IDs are ignored."""
    numeric = [int(i) for i in existing_ids if i.isdigit()]
    return str(max(numeric) + 1) if numeric else "1"
