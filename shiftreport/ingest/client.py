"""Client for the paginated shifts API."""

from __future__ import annotations

import logging
import os
from collections.abc import AsyncIterator
from typing import Any, Mapping
from urllib.parse import urljoin

import httpx

from shiftreport.ingest.models import Page, Shift, Workplace

logger = logging.getLogger(__name__)

DEFAULT_API_BASE_URL = "http://localhost:3000"
DEFAULT_TIMEOUT = 30.0
USER_AGENT = "ShiftReport/1.0"


class PaginationLimitError(RuntimeError):
    pass


class ShiftsApiClient:
    def __init__(
        self,
        base_url: str = DEFAULT_API_BASE_URL,
        *,
        session: httpx.AsyncClient | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        max_pages: int | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.max_pages = max_pages
        self._session = session or httpx.AsyncClient(timeout=timeout, headers={"User-Agent": USER_AGENT})

    async def close(self) -> None:
        await self._session.aclose()

    async def fetch_workplaces(self) -> list[Workplace]:
        items = await self.fetch_all(f"{self.base_url}/workplaces")
        return [Workplace.from_payload(item) for item in items]

    async def fetch_shifts(self) -> list[Shift]:
        items = await self.fetch_all(f"{self.base_url}/shifts")
        return [Shift.from_payload(item) for item in items]

    async def fetch_all(self, url: str) -> list[Mapping[str, Any]]:
        """Collect the items of every page reachable from ``url``, in page order.

        Any failing page aborts the whole fetch; nothing partial is returned.
        """
        items: list[Mapping[str, Any]] = []
        pages = 0
        async for page in self.iter_pages(url):
            items.extend(page.items)
            pages += 1
        logger.info("Fetched %s items across %s pages from %s", len(items), pages, url)
        return items

    async def iter_pages(self, url: str) -> AsyncIterator[Page]:
        next_url: str | None = url
        fetched = 0
        while next_url:
            if self.max_pages is not None and fetched >= self.max_pages:
                raise PaginationLimitError(f"Gave up on {url} after {fetched} pages")
            page = await self._get_page(next_url)
            fetched += 1
            yield page
            next_url = urljoin(next_url, page.next_url) if page.next_url else None

    async def _get_page(self, url: str) -> Page:
        logger.debug("GET %s", url)
        response = await self._session.get(url)
        response.raise_for_status()
        return Page.from_payload(response.json())


def create_client_from_env() -> ShiftsApiClient:
    """Create a client using the SHIFTS_API_* environment variables."""
    base_url = os.environ.get("SHIFTS_API_BASE_URL", DEFAULT_API_BASE_URL)
    timeout = float(os.environ.get("SHIFTS_API_TIMEOUT", DEFAULT_TIMEOUT))
    max_pages = os.environ.get("SHIFTS_API_MAX_PAGES")
    return ShiftsApiClient(
        base_url,
        timeout=timeout,
        max_pages=int(max_pages) if max_pages else None,
    )
