"""Unit tests for claim packet text sanitization"""

from __future__ import annotations

import pytest

from claimso.claims import sanitize_text
from claimso.config import SANITIZER_MAX_LENGTH

SAMPLES = [
    "<b>Hello</b>\x00 {world}",
    "  spaced\t\tout\n\nlines  ",
    "a" * 999 + " b",
    "x" * 1500,
    "Price: $399 <USD>",
    "\x07\x1b[31mred\x7f",
    "",
]


def test_removes_markup_and_control_characters():
    assert sanitize_text("<b>Hello</b>\x00 {world}") == "bHello/b world"


def test_collapses_whitespace_and_trims():
    assert sanitize_text("  line1\n\tline2   line3 ") == "line1 line2 line3"


def test_truncates_to_max_length():
    assert len(sanitize_text("x" * 1500)) == SANITIZER_MAX_LENGTH


def test_truncation_never_leaves_trailing_space():
    assert sanitize_text("a" * 999 + " b") == "a" * 999


@pytest.mark.parametrize("value", [None, 42, "", "   "])
def test_non_text_and_blank_yield_empty_string(value):
    assert sanitize_text(value) == ""


@pytest.mark.parametrize("text", SAMPLES)
def test_is_idempotent(text):
    once = sanitize_text(text)
    assert sanitize_text(once) == once
    assert len(once) <= SANITIZER_MAX_LENGTH
    assert not set(once) & set("<>{}")
