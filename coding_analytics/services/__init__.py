"""Data loading and report output for the host layer."""

from .data_loader import DataLoader
from .report_generator import ReportGenerator

__all__ = ["DataLoader", "ReportGenerator"]
