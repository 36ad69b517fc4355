"""Parsing helpers for JSON model output."""

from __future__ import annotations

import json
import re
from typing import Any

from claimso.observability.logging import get_logger
from claimso.observability.telemetry import counter

logger = get_logger(__name__)

_FENCE_OPEN = re.compile(r"^```(?:json)?\s*\n?", re.IGNORECASE)
_FENCE_CLOSE = re.compile(r"\n?```\s*$")


def load_json_object(response_text: str | None, counter_prefix: str = "llm") -> dict[str, Any]:
    """Parse a model response into a JSON object.

    Markdown code fences are stripped (they should not appear when the model is
    asked for ``application/json``, so their presence is counted).

    Raises:
        ValueError: If the text is empty, is not JSON, or is not a JSON object.
            ``json.JSONDecodeError`` is a ValueError subclass.
    """
    if response_text is None or not response_text.strip():
        raise ValueError("Empty response from model")

    json_text = response_text.strip()
    if json_text.startswith("```"):
        counter(f"llm.{counter_prefix}.code_fence_fallback")
        logger.warning("Model response contained code fences (unexpected with JSON mode)")
        json_text = _FENCE_OPEN.sub("", json_text)
        json_text = _FENCE_CLOSE.sub("", json_text)

    data = json.loads(json_text)
    if not isinstance(data, dict):
        raise ValueError(f"Expected JSON object, got {type(data).__name__}")
    return data
