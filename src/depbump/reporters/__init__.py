"""Reporters for rendering available updates.

This module provides a terminal table reporter and a Markdown reporter.
"""

from depbump.reporters.base import BaseReporter, change_label
from depbump.reporters.console import ConsoleReporter
from depbump.reporters.markdown import MarkdownReporter

__all__ = ["BaseReporter", "ConsoleReporter", "MarkdownReporter", "change_label"]
