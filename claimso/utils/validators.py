"""Reusable pydantic field types for API request models."""

from __future__ import annotations

from typing import Annotated

from pydantic import StringConstraints

# Required text: surrounding whitespace stripped, must not be empty afterwards
NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
