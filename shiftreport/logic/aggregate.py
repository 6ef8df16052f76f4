"""Completed-shift aggregation per active workplace."""

from __future__ import annotations

from collections import defaultdict
from typing import Iterable, Mapping

from shiftreport.ingest.models import Shift, Workplace


def active_workplace_names(workplaces: Iterable[Workplace]) -> dict[int, str]:
    return {workplace.id: workplace.name for workplace in workplaces if workplace.is_active}


def count_completed_shifts(shifts: Iterable[Shift], active_names: Mapping[int, str]) -> dict[int, int]:
    """Count completed shifts per active workplace.

    Keys appear in the order their first qualifying shift was seen. Shifts for
    inactive or unknown workplaces are skipped.
    """
    counts: dict[int, int] = defaultdict(int)
    for shift in shifts:
        if shift.is_completed and shift.workplace_id in active_names:
            counts[shift.workplace_id] += 1
    return dict(counts)
