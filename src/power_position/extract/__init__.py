"""Extraction pipeline — aggregate trades into hourly UTC positions and write reports."""

from power_position.extract.aggregator import aggregate_positions
from power_position.extract.extractor import PowerPositionExtractor
from power_position.extract.timezones import TimezoneResolver, ZoneInfoResolver
from power_position.extract.writer import report_filename, write_positions

__all__ = [
    "PowerPositionExtractor",
    "TimezoneResolver",
    "ZoneInfoResolver",
    "aggregate_positions",
    "report_filename",
    "write_positions",
]
