"""CSV report writer."""

from __future__ import annotations

import csv
from collections.abc import Iterable
from datetime import date, datetime, timezone
from decimal import Decimal
from pathlib import Path

from power_position.models import HourlyPosition

HEADER = ("Datetime", "Volume")
DELIMITER = ";"


def report_filename(reference_date: date, generated_at: datetime) -> str:
    """``PowerPosition_<YYYYMMDD>_<YYYYMMDDHHmm>.csv``, generation time in UTC."""
    if generated_at.tzinfo is not None:
        generated_at = generated_at.astimezone(timezone.utc)
    return f"PowerPosition_{reference_date:%Y%m%d}_{generated_at:%Y%m%d%H%M}.csv"


def format_timestamp(ts: datetime) -> str:
    return ts.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def format_volume(volume: float) -> str:
    """Plain decimal notation: no exponent, no grouping, no trailing ``.0``."""
    if volume == 0:
        return "0"
    text = format(Decimal(repr(volume)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def write_positions(path: str | Path, positions: Iterable[HourlyPosition]) -> Path:
    """Write *positions* to *path*, replacing any existing file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="") as f:
        writer = csv.writer(f, delimiter=DELIMITER, lineterminator="\n")
        writer.writerow(HEADER)
        for pos in positions:
            writer.writerow((format_timestamp(pos.ts), format_volume(pos.volume)))
    return path
