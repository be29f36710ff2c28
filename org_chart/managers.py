"""Manager lookup, always against the full (unfiltered) record set."""

from __future__ import annotations

from typing import Iterable

from org_chart.config import COL_MANAGER_ID


def is_manager(candidate_id: str | None, records: Iterable[dict]) -> bool:
    if candidate_id is None:
        return False
    return any(r.get(COL_MANAGER_ID) == candidate_id for r in records)


def manager_ids(records: Iterable[dict]) -> set[str]:
    """Every Id that at least one record reports to."""
    return {r[COL_MANAGER_ID] for r in records if r.get(COL_MANAGER_ID) is not None}
