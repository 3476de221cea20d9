"""Structured logging."""

from power_position.logging.setup import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
