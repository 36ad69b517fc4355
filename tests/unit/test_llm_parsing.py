"""Unit tests for JSON parsing of model output."""

from __future__ import annotations

import json

import pytest

from claimso.llm.parsing import load_json_object
from claimso.observability.telemetry import get_counter


class TestLoadJSONObject:
    def test_plain_object(self):
        assert load_json_object('{"intent": "PURCHASE"}') == {"intent": "PURCHASE"}

    def test_fenced_object(self):
        assert load_json_object('```json\n{"a": 1}\n```', counter_prefix="receipt") == {"a": 1}
        assert get_counter("llm.receipt.code_fence_fallback") == 1

    def test_fence_without_language_tag(self):
        assert load_json_object('```\n{"a": 1}\n```') == {"a": 1}

    @pytest.mark.parametrize("text", [None, "", "   "])
    def test_empty_response_raises(self, text):
        with pytest.raises(ValueError, match="Empty response"):
            load_json_object(text)

    def test_invalid_json_raises(self):
        with pytest.raises(json.JSONDecodeError):
            load_json_object("{not json}")

    def test_non_object_raises(self):
        with pytest.raises(ValueError, match="Expected JSON object"):
            load_json_object('["PURCHASE"]')
