"""Ingestion helpers."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

from shiftreport.ingest.client import ShiftsApiClient
from shiftreport.ingest.models import Shift, Workplace

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Snapshot:
    workplaces: list[Workplace]
    shifts: list[Shift]


async def fetch_snapshot(client: ShiftsApiClient) -> Snapshot:
    """Fetch both collections concurrently.

    If either fetch fails the other is cancelled and the first failure is
    re-raised as-is.
    """
    try:
        async with asyncio.TaskGroup() as group:
            workplaces_task = group.create_task(client.fetch_workplaces())
            shifts_task = group.create_task(client.fetch_shifts())
    except ExceptionGroup as exc:
        raise exc.exceptions[0]
    workplaces, shifts = workplaces_task.result(), shifts_task.result()
    logger.info("Loaded %s workplaces and %s shifts", len(workplaces), len(shifts))
    return Snapshot(workplaces=workplaces, shifts=shifts)
