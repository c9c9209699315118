"""
Data models for the linter evaluation harness.

Provides Pydantic models for fixtures and warnings, and
configuration enums for controlling report output.
"""

from models.config import ReportFormat
from models.fixture import ConfigTree, EvalCase, FileData, LintWarning

__all__ = [
    "ReportFormat",
    "LintWarning",
    "FileData",
    "ConfigTree",
    "EvalCase",
]
