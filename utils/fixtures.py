"""Fixture discovery and loading for linter evaluation cases."""

import json
import logging
from pathlib import Path
from typing import List, Union

from models import EvalCase

logger = logging.getLogger(__name__)


def discover_test_cases(directory: Union[str, Path], pattern: str = "*.json") -> List[Path]:
    """
    List fixture files in ``directory`` matching ``pattern``, sorted by name.

    Raises FileNotFoundError if the directory does not exist.
    """
    root = Path(directory)
    if not root.is_dir():
        raise FileNotFoundError(f"Test case directory not found: {root}")

    paths = sorted(p for p in root.glob(pattern) if p.is_file() and p.suffix == ".json")
    logger.info(f"Discovered {len(paths)} test case(s) in {root}")
    return paths


def load_test_case(path: Union[str, Path]) -> EvalCase:
    """
    Read and validate one fixture file.

    Raises:
        OSError: The file cannot be read.
        ValueError: The file is not valid JSON or does not match the fixture shape.
    """
    raw = Path(path).read_text(encoding="utf-8")
    data = json.loads(raw)
    return EvalCase.model_validate(data)
