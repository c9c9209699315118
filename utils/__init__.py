"""
Utility functions for fixtures, prompts and response caching.

All utilities are lightweight I/O helpers around the scoring core.
"""

from utils.cache import (
    CACHE_TTL_SECONDS,
    clear_cache,
    get_cache_key,
    get_cached_result,
    set_cached_result,
)
from utils.fixtures import discover_test_cases, load_test_case
from utils.prompt import LINTER_PROMPT, build_prompt, marshal_tree

__all__ = [
    # Fixtures
    "discover_test_cases",
    "load_test_case",
    # Prompt
    "LINTER_PROMPT",
    "build_prompt",
    "marshal_tree",
    # Cache
    "get_cache_key",
    "get_cached_result",
    "set_cached_result",
    "clear_cache",
    "CACHE_TTL_SECONDS",
]
