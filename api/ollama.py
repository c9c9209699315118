"""Ollama generate API integration.

Sends a single non-streaming prompt to a locally served model and returns
the raw response text. Errors are not swallowed here: the runner decides
how a failed call affects the evaluation.
"""

import logging
import os
from typing import Any, Dict, Optional

import httpx

DEFAULT_TIMEOUT = 120.0
DEFAULT_MODEL = "mistral"
DEFAULT_URL = "http://localhost:11434/api/generate"


def _get_model() -> str:
    """Get model name from environment."""
    return os.getenv("OLLAMA_MODEL", DEFAULT_MODEL)


def _get_url() -> str:
    """Get generate endpoint from environment."""
    return os.getenv("OLLAMA_URL", DEFAULT_URL)


def _build_payload(prompt: str, model: str, temperature: float) -> Dict[str, Any]:
    return {
        "model": model,
        "prompt": prompt,
        "stream": False,
        "temperature": temperature,
    }


def _extract_response_text(data: Any) -> str:
    """Return the ``response`` field of a generate reply with clear errors."""
    if not isinstance(data, dict) or "response" not in data:
        raise ValueError("Unexpected ollama response structure; missing 'response'")

    text = data["response"]
    if not isinstance(text, str):
        raise ValueError(
            f"Expected ollama response text but received {type(text).__name__}"
        )
    return text


async def generate(
    prompt: str,
    model: Optional[str] = None,
    url: Optional[str] = None,
    temperature: float = 0,
    timeout: float = DEFAULT_TIMEOUT,
) -> str:
    """Run a prompt through the model and return its full response text.

    Args:
        prompt: Complete prompt text
        model: Model name (defaults to OLLAMA_MODEL or "mistral")
        url: Generate endpoint (defaults to OLLAMA_URL or localhost:11434)
        temperature: Sampling temperature, 0 for deterministic output
        timeout: Request timeout in seconds

    Returns:
        The model's response text.

    Raises:
        httpx.HTTPError: Transport failure or non-2xx status.
        ValueError: Body is not JSON or lacks a string ``response`` field.
    """
    model = model or _get_model()
    url = url or _get_url()
    payload = _build_payload(prompt, model, temperature)

    logging.debug(f"Ollama: sending {len(prompt)} chars to {model} at {url}")
    async with httpx.AsyncClient(timeout=timeout) as client:
        response = await client.post(url, json=payload)
        response.raise_for_status()
        data = response.json()

    return _extract_response_text(data)
