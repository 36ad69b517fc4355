"""
Text sanitization for caller-supplied fields drawn into the claim packet.

Applied independently to every field before it is measured or drawn, never to
the assembled document.
"""

from __future__ import annotations

import re

from claimso.config import SANITIZER_MAX_LENGTH

# C0 controls except tab, line feed and carriage return (those fold into spaces), plus DEL
_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")
_MARKUP_CHARS = re.compile(r"[<>{}]")
_WHITESPACE = re.compile(r"\s+")


def sanitize_text(text: object, max_length: int = SANITIZER_MAX_LENGTH) -> str:
    """
    Strip control characters and ``< > { }``, collapse whitespace, trim and
    truncate to ``max_length`` characters.

    Idempotent: ``sanitize_text(sanitize_text(x)) == sanitize_text(x)``.
    Non-string or empty input yields "".
    """
    if not text or not isinstance(text, str):
        return ""

    text = _CONTROL_CHARS.sub("", text)
    text = _MARKUP_CHARS.sub("", text)
    text = _WHITESPACE.sub(" ", text).strip()
    # Strip again after truncation so a cut never leaves a trailing space
    return text[:max_length].rstrip()
