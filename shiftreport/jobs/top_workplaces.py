"""Top workplaces report job."""

from __future__ import annotations

import asyncio
import logging
import os
import sys

import httpx
from dotenv import load_dotenv

from shiftreport.ingest import fetch_snapshot
from shiftreport.ingest.client import ShiftsApiClient, create_client_from_env
from shiftreport.logic.aggregate import active_workplace_names, count_completed_shifts
from shiftreport.logic.ranking import TOP_N, WorkplaceResult, rank_workplaces, render_results

logger = logging.getLogger(__name__)

FAILURE_HEADLINE = "Failed to fetch or process workplace data. Is the server running?"


async def compute_top_workplaces(
    client: ShiftsApiClient | None = None,
    *,
    limit: int = TOP_N,
) -> list[WorkplaceResult]:
    owns_client = client is None
    client = client or create_client_from_env()
    try:
        snapshot = await fetch_snapshot(client)
    finally:
        if owns_client:
            await client.close()

    names = active_workplace_names(snapshot.workplaces)
    counts = count_completed_shifts(snapshot.shifts, names)
    logger.info("%s of %s active workplaces have completed shifts", len(counts), len(names))
    return rank_workplaces(counts, names, limit=limit)


def main() -> None:
    try:
        load_dotenv()
        logging.basicConfig(
            level=os.environ.get("LOG_LEVEL", "WARNING").upper(),
            stream=sys.stderr,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
        results = asyncio.run(compute_top_workplaces())
    except httpx.HTTPError as exc:
        print(FAILURE_HEADLINE, file=sys.stderr)
        print(f"HTTP error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    except Exception as exc:
        print(FAILURE_HEADLINE, file=sys.stderr)
        print(f"Unexpected error: {exc!r}", file=sys.stderr)
        raise SystemExit(1) from exc
    print(render_results(results))


if __name__ == "__main__":
    main()
