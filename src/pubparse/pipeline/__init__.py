"""Batch conversion pipeline."""

from .orchestrator import DEFAULT_WORKERS, BatchOrchestrator
from .progress import ProgressCounter, ProgressReporter
from .report import ReportLog

__all__ = [
    "BatchOrchestrator",
    "DEFAULT_WORKERS",
    "ProgressCounter",
    "ProgressReporter",
    "ReportLog",
]
