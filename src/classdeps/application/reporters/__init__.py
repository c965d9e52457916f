"""Reporters for dependency extraction results.

Output is str; the caller decides where it goes.
"""

from classdeps.application.reporters.console import ConsoleConfig, ConsoleReporter
from classdeps.application.reporters.json_reporter import JsonReporter
from classdeps.application.reporters.protocol import ReporterProtocol

__all__ = [
    "ConsoleConfig",
    "ConsoleReporter",
    "JsonReporter",
    "ReporterProtocol",
]
