"""
SafePass Output
================

Rich console formatters and JSON/HTML report writers.
"""

from safepass.output.console import SafePassConsoleOutput
from safepass.output.report import SafePassReportGenerator

__all__ = ["SafePassConsoleOutput", "SafePassReportGenerator"]
