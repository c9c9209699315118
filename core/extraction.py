"""
Warning extraction from free-form linter output.

The prompt asks the model to report each issue as

    - File Path: <path>, Key: <key>, Value: <value>
      Warning Type: ..., Suggestion: <message>

Anything that does not follow this shape is ignored. Extraction is purely
syntactic and never raises.
"""

import logging
import re

from models import LintWarning

__all__ = ["WARNING_PATTERN", "extract_warnings"]

logger = logging.getLogger(__name__)

# The Suggestion may follow on the next line or after any number of
# intermediate lines, but never past the start of another record.
WARNING_PATTERN = re.compile(
    r"- File Path: (.*?), Key: (.*?), Value: .*?\n"
    r"(?:(?!.*- File Path:).*\n)*?"
    r".*?Suggestion: (.*?)(?:\n|\Z)"
)


def extract_warnings(text: str) -> list[LintWarning]:
    """Return every (path, key, message) record found in ``text``."""
    warnings = [
        LintWarning(
            path=match.group(1).strip(),
            key=match.group(2).strip(),
            message=match.group(3).strip(),
        )
        for match in WARNING_PATTERN.finditer(text)
    ]
    logger.debug("Extracted %d warning(s) from %d chars", len(warnings), len(text))
    return warnings
