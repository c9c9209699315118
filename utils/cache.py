"""Response caching utilities for the linter evaluation harness.

With temperature 0 the same model and prompt give the same answer, so
responses can be replayed while iterating on fixtures or scoring.
"""

import hashlib
import json
import logging
import time
from pathlib import Path
from typing import Any, Dict, Optional

# Cache configuration (next to config.json, independent of the working directory)
DEFAULT_CACHE_FILE = Path(__file__).resolve().parents[1] / ".lint_eval_cache.json"
CACHE_FILE = DEFAULT_CACHE_FILE
CACHE_TTL_SECONDS = 86400  # 1 day

# In-memory cache (loaded from disk on startup)
_cache: Dict[str, Dict[str, Any]] = {}


def get_cache_key(model: str, prompt: str, temperature: float = 0) -> str:
    """Generate cache key from model, temperature and prompt."""
    param_str = json.dumps(
        {"model": model, "prompt": prompt, "temperature": temperature}, sort_keys=True
    )
    return hashlib.md5(param_str.encode()).hexdigest()


def load_cache() -> Dict[str, Any]:
    """Load cache from disk."""
    if CACHE_FILE.exists():
        try:
            data = json.loads(CACHE_FILE.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logging.warning(f"Failed to load cache: {e}")
            return {}
        if isinstance(data, dict):
            return data
        logging.warning(
            f"Ignoring cache file {CACHE_FILE}: expected an object, got {type(data).__name__}"
        )
    return {}


def save_cache() -> None:
    """Save cache to disk."""
    try:
        CACHE_FILE.write_text(json.dumps(_cache, indent=2), encoding="utf-8")
    except OSError as e:
        logging.warning(f"Failed to save cache: {e}")


def _is_valid_entry(entry: Any) -> bool:
    return (
        isinstance(entry, dict)
        and isinstance(entry.get("result"), str)
        and isinstance(entry.get("timestamp"), (int, float))
    )


def get_cached_result(
    cache_key: str, ttl_seconds: float = CACHE_TTL_SECONDS
) -> Optional[str]:
    """Retrieve cached response if not expired."""
    if cache_key not in _cache:
        return None

    cached = _cache[cache_key]
    if not _is_valid_entry(cached):
        logging.warning(f"Dropping malformed cache entry {cache_key}")
    elif time.time() - cached["timestamp"] < ttl_seconds:
        return cached["result"]
    del _cache[cache_key]
    save_cache()  # Clean up expired or malformed
    return None


def set_cached_result(cache_key: str, result: str) -> None:
    """Store response in cache with timestamp."""
    _cache[cache_key] = {"result": result, "timestamp": time.time()}
    save_cache()


def clear_cache() -> bool:
    """Clear all cached responses."""
    global _cache
    _cache = {}
    try:
        if CACHE_FILE.exists():
            CACHE_FILE.unlink()
        return True
    except OSError as e:
        logging.error(f"Failed to clear cache: {e}")
        return False


# Initialize cache from disk on module import
_cache = load_cache()
