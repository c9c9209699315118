"""
Model-serving API integrations.

Functions here take a fully built prompt and return the model's raw text:

    async def generate(prompt: str, model: str = None, **options) -> str

Available Backends:
─────────────────────────────────────────────────────────────────────────────
    ollama           Local Ollama server, /api/generate (non-streaming)

Configuration:
─────────────────────────────────────────────────────────────────────────────
Set in environment variables or .env file:

    OLLAMA_URL        Generate endpoint (default http://localhost:11434/api/generate)
    OLLAMA_MODEL      Model name (default mistral)
"""

# ══════════════════════════════════════════════════════════════════════════════
# Environment Setup
# ══════════════════════════════════════════════════════════════════════════════

from dotenv import load_dotenv

load_dotenv()

# ══════════════════════════════════════════════════════════════════════════════
# Backends
# ══════════════════════════════════════════════════════════════════════════════

from api.ollama import (  # noqa: E402
    DEFAULT_MODEL,
    DEFAULT_TIMEOUT,
    DEFAULT_URL,
    generate,
)

__all__ = [
    "generate",
    "DEFAULT_MODEL",
    "DEFAULT_TIMEOUT",
    "DEFAULT_URL",
]
