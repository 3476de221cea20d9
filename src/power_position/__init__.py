"""Scheduled extraction of day-ahead power positions into hourly UTC reports."""

__version__ = "0.1.0"
