"""Reporters for audit reports.

PlainTextReporter and JSONReporter use stdlib only.
ConsoleReporter renders with rich.
"""

from faacheck.application.reporters._base import BaseReporter
from faacheck.application.reporters.console import ConsoleReporter
from faacheck.application.reporters.json_reporter import JSONReporter, report_to_dict
from faacheck.application.reporters.plain_text import PlainTextReporter

__all__ = [
    "BaseReporter",
    "PlainTextReporter",
    "JSONReporter",
    "ConsoleReporter",
    "report_to_dict",
]
