"""Datetime helpers."""

from __future__ import annotations

from datetime import datetime

import pendulum


def parse_iso_datetime(value: str) -> datetime:
    parsed = pendulum.parse(value)
    if not isinstance(parsed, datetime):
        raise ValueError(f"Expected a timestamp, got {value!r}")
    return parsed
