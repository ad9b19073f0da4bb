from src.cli.formatters.progress_formatter import check_progress
from src.cli.formatters.report_formatter import (
    STATUS_STYLES,
    format_maturity,
    format_registrations,
    format_report,
)

__all__ = [
    "STATUS_STYLES",
    "check_progress",
    "format_maturity",
    "format_registrations",
    "format_report",
]
