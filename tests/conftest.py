"""Shared pytest fixtures for the linter evaluation tests.

Fixture files live in ``test_cases/`` at the repository root, canned model
responses in ``tests/data/responses/``. The on-disk response cache is
redirected to a temporary file for every test so nothing leaks into the
working directory.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from models import EvalCase
from utils import cache
from utils.fixtures import load_test_case

ROOT_DIR = Path(__file__).resolve().parents[1]
TEST_CASES_DIR = ROOT_DIR / "test_cases"
RESPONSES_DIR = Path(__file__).resolve().parent / "data" / "responses"


@pytest.fixture(autouse=True)
def isolated_cache(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the response cache at an empty temporary file."""

    cache_file = tmp_path / "cache.json"
    monkeypatch.setattr(cache, "CACHE_FILE", cache_file)
    monkeypatch.setattr(cache, "_cache", {})
    return cache_file


@pytest.fixture
def test_cases_dir() -> Path:
    return TEST_CASES_DIR


@pytest.fixture
def sensitive_case() -> EvalCase:
    return load_test_case(TEST_CASES_DIR / "sensitive_values.json")


@pytest.fixture
def sensitive_response() -> str:
    return (RESPONSES_DIR / "sensitive_values.txt").read_text(encoding="utf-8")


@pytest.fixture
def unstructured_response() -> str:
    return (RESPONSES_DIR / "unstructured.txt").read_text(encoding="utf-8")
