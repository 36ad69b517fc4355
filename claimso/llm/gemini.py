"""
Gemini Model Manager - shared model instance for the email pipeline.

The intent classifier and both extractors share one Vertex AI initialization.
System instructions are per-model-instance in the Gemini API, so a fresh
GenerativeModel is built for each distinct instruction.
"""

from __future__ import annotations

import os
from functools import lru_cache

from claimso.infrastructure.settings import GEMINI_LOCATION, GEMINI_MODEL, GOOGLE_CLOUD_PROJECT
from claimso.observability.logging import get_logger

logger = get_logger(__name__)


class GeminiInitializationError(RuntimeError):
    """Raised when Gemini model cannot be initialized."""


@lru_cache(maxsize=1)
def get_gemini_model():
    """
    Get or create shared Gemini model instance (no system instruction).

    Uses @lru_cache for a thread-safe singleton.

    Returns:
        GenerativeModel: Shared Gemini model

    Raises:
        GeminiInitializationError: If model cannot be initialized
    """
    # Read env vars fresh (settings may have stale values if loaded before dotenv)
    project = os.getenv("GOOGLE_CLOUD_PROJECT") or GOOGLE_CLOUD_PROJECT
    location = os.getenv("GEMINI_LOCATION", "") or GEMINI_LOCATION or "us-central1"
    model_name = os.getenv("GEMINI_MODEL", "") or GEMINI_MODEL

    if not project:
        raise GeminiInitializationError("GOOGLE_CLOUD_PROJECT not set")

    try:
        import vertexai
        from vertexai.generative_models import GenerativeModel

        vertexai.init(project=project, location=location)
        model = GenerativeModel(model_name)
    except Exception as e:
        logger.error("Failed to initialize Gemini model: %s", e)
        raise GeminiInitializationError(f"Failed to initialize Gemini: {e}") from e

    logger.info(
        "Initialized Gemini model (Vertex AI): project=%s, location=%s, model=%s",
        project,
        location,
        model_name,
    )
    return model


def get_gemini_model_with_options(system_instruction: str | None = None) -> object:
    """Create a Gemini model instance with optional system instruction.

    Falls back to the cached singleton when no instruction is given.
    """
    if system_instruction is None:
        return get_gemini_model()

    # Ensure Vertex AI has been initialized before building a new instance
    get_gemini_model()

    from vertexai.generative_models import GenerativeModel

    model_name = os.getenv("GEMINI_MODEL", "") or GEMINI_MODEL
    return GenerativeModel(model_name, system_instruction=system_instruction)
