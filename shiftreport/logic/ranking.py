"""Ranking logic for workplaces."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from typing import Mapping, Sequence

TOP_N = 3


@dataclass(slots=True)
class WorkplaceResult:
    name: str
    shifts: int


def rank_workplaces(
    counts: Mapping[int, int],
    names: Mapping[int, str],
    *,
    limit: int = TOP_N,
) -> list[WorkplaceResult]:
    if not 0 <= limit <= TOP_N:
        raise ValueError(f"limit must be between 0 and {TOP_N}, got {limit}")
    results: list[WorkplaceResult] = []
    for workplace_id, count in counts.items():
        name = names.get(workplace_id)
        if not name:
            continue
        results.append(WorkplaceResult(name=name, shifts=count))
    # sorted() is stable, so ties keep their encounter order
    results = sorted(results, key=lambda result: result.shifts, reverse=True)
    return results[:limit]


def render_results(results: Sequence[WorkplaceResult]) -> str:
    return json.dumps([asdict(result) for result in results], indent=2, ensure_ascii=False)
