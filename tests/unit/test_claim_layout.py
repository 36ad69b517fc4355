"""Unit tests for the claim packet layout cursor and word wrap"""

from __future__ import annotations

from reportlab.lib.pagesizes import LETTER

from claimso.claims import FontMetrics, LayoutContext, wrap_words


class TestWrapWords:
    def test_breaks_only_at_word_boundaries(self):
        lines = wrap_words("aaa bbb ccc dddd", 10, len)
        assert lines == ["aaa bbb", "ccc dddd"]

    def test_empty_text_yields_no_lines(self):
        assert wrap_words("", 100, len) == []
        assert wrap_words("   ", 100, len) == []

    def test_overlong_first_word_is_placed_alone(self):
        assert wrap_words("supercalifragilistic a", 5, len) == ["supercalifragilistic", "a"]

    def test_overlong_word_after_others_starts_new_line(self):
        assert wrap_words("a verylongword b", 5, len) == ["a", "verylongword", "b"]

    def test_lines_fit_width_and_preserve_words(self):
        text = "The left ear cup  stopped producing\nsound after two months of normal use " * 8
        metrics = FontMetrics()
        measure = lambda line: metrics.text_width(line, 11)  # noqa: E731

        lines = wrap_words(text, 200, measure)

        assert " ".join(lines) == " ".join(text.split())
        for line in lines:
            assert measure(line) <= 200 or " " not in line


class TestLayoutContext:
    def test_starts_near_top_of_letter_page(self):
        ctx = LayoutContext.for_page(LETTER)
        assert ctx.y == LETTER[1] - 50
        assert ctx.usable_text_width == LETTER[0] - 140
        assert ctx.right_edge == LETTER[0] - 50

    def test_after_line_advances_by_size_plus_gap(self):
        ctx = LayoutContext.for_page(LETTER)
        assert ctx.after_line(11).y == ctx.y - 16

    def test_moves_return_new_context(self):
        ctx = LayoutContext.for_page(LETTER)
        moved = ctx.advance(20)
        assert moved.y == ctx.y - 20
        assert ctx.y == LETTER[1] - 50
        assert moved.at(50).y == 50

    def test_bold_text_is_wider(self):
        metrics = FontMetrics()
        assert metrics.text_width("WARRANTY", 12, metrics.bold) > metrics.text_width("WARRANTY", 12)
