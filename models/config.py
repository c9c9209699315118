"""Configuration enums for the linter evaluation harness."""

from enum import Enum


class ReportFormat(str, Enum):
    """Output format for evaluation reports."""

    MARKDOWN = "markdown"
    JSON = "json"
