"""Ingestion data models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping

from shiftreport.utils.dates import parse_iso_datetime

ACTIVE_STATUS = 0


class MalformedResponseError(ValueError):
    pass


@dataclass(frozen=True, slots=True)
class Workplace:
    id: int
    name: str
    status: int

    @property
    def is_active(self) -> bool:
        return self.status == ACTIVE_STATUS

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> Workplace:
        try:
            return cls(id=_as_int(data["id"]), name=_as_str(data["name"]), status=_as_int(data["status"]))
        except (KeyError, TypeError, ValueError) as exc:
            raise MalformedResponseError(f"Invalid workplace record: {data!r}") from exc


@dataclass(frozen=True, slots=True)
class Shift:
    id: int
    workplace_id: int
    worker_id: int | None = None
    cancelled_at: datetime | None = None

    @property
    def is_completed(self) -> bool:
        """Assigned to a worker and never cancelled."""
        return self.worker_id is not None and self.cancelled_at is None

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> Shift:
        try:
            worker_id = data.get("workerId")
            cancelled_at = data.get("cancelledAt")
            return cls(
                id=_as_int(data["id"]),
                workplace_id=_as_int(data["workplaceId"]),
                worker_id=_as_int(worker_id) if worker_id is not None else None,
                cancelled_at=parse_iso_datetime(cancelled_at) if cancelled_at is not None else None,
            )
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            raise MalformedResponseError(f"Invalid shift record: {data!r}") from exc


@dataclass(frozen=True, slots=True)
class Page:
    items: list[Mapping[str, Any]]
    next_url: str | None

    @classmethod
    def from_payload(cls, payload: Any) -> Page:
        if not isinstance(payload, Mapping):
            raise MalformedResponseError(f"Expected a JSON object, got {type(payload).__name__}")
        items = payload.get("data")
        if not isinstance(items, list):
            raise MalformedResponseError("Page is missing its 'data' list")
        links = payload.get("links") or {}
        if not isinstance(links, Mapping):
            raise MalformedResponseError("Page 'links' must be an object")
        next_url = links.get("next") or None
        if next_url is not None and not isinstance(next_url, str):
            raise MalformedResponseError(f"Invalid next link: {next_url!r}")
        return cls(items=items, next_url=next_url)


def _as_str(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"Expected a string, got {value!r}")
    return value


def _as_int(value: Any) -> int:
    # bool is an int subclass; JSON true/false is never a valid id or status
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Expected an integer, got {value!r}")
    return value
