"""
Layout primitives for the single-page claim packet.

The write cursor lives in an immutable LayoutContext that every drawing
operation receives and returns, so wrapping and spacing can be tested without
rendering a page.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field, replace

from reportlab.lib.pagesizes import LETTER
from reportlab.pdfbase.pdfmetrics import stringWidth

REGULAR_FONT = "Helvetica"
BOLD_FONT = "Helvetica-Bold"

# Vertical gap added under every text line, on top of the font size
LINE_GAP = 5
# Total horizontal inset of wrapped body text (left indent plus right margin)
WRAP_INSET = 140


@dataclass(frozen=True)
class FontMetrics:
    """Font names and width measurement for the standard PDF fonts."""

    regular: str = REGULAR_FONT
    bold: str = BOLD_FONT

    def text_width(self, text: str, size: float, font: str | None = None) -> float:
        return stringWidth(text, font or self.regular, size)


@dataclass(frozen=True)
class LayoutContext:
    """Cursor position plus the page geometry and metrics it is measured against."""

    y: float
    page_width: float
    page_height: float
    margin: float = 50
    metrics: FontMetrics = field(default_factory=FontMetrics)

    @classmethod
    def for_page(
        cls,
        page_size: tuple[float, float] = LETTER,
        top_offset: float = 50,
        metrics: FontMetrics | None = None,
    ) -> LayoutContext:
        width, height = page_size
        return cls(
            y=height - top_offset,
            page_width=width,
            page_height=height,
            metrics=metrics or FontMetrics(),
        )

    @property
    def usable_text_width(self) -> float:
        return self.page_width - WRAP_INSET

    @property
    def right_edge(self) -> float:
        return self.page_width - self.margin

    def advance(self, dy: float) -> LayoutContext:
        """Move the cursor down the page by ``dy`` points."""
        return replace(self, y=self.y - dy)

    def after_line(self, size: float) -> LayoutContext:
        """Cursor position after a text line of the given font size."""
        return self.advance(size + LINE_GAP)

    def at(self, y: float) -> LayoutContext:
        return replace(self, y=y)


def wrap_words(text: str, max_width: float, measure: Callable[[str], float]) -> list[str]:
    """
    Greedy word wrap.

    Words are added to the current line while its measured width stays within
    ``max_width``. A word that would overflow starts a new line, unless the
    current line is empty, in which case it is placed alone even if it is wider
    than ``max_width``. Words are never split.

    Args:
        text: Text to wrap; any whitespace separates words.
        max_width: Usable width in points.
        measure: Width of a candidate line at the body font size.

    Returns:
        Lines in order. Empty text yields no lines.
    """
    lines: list[str] = []
    current = ""

    for word in text.split():
        candidate = f"{current} {word}" if current else word
        if current and measure(candidate) > max_width:
            lines.append(current)
            current = word
        else:
            current = candidate

    if current:
        lines.append(current)

    return lines
