"""Reconciliation reports."""

from .console import ConsoleReporter
from .summary import build_summary, transactions_frame, format_frame

__all__ = ["ConsoleReporter", "build_summary", "transactions_frame", "format_frame"]
