"""
Claim Packet Renderer - single-page warranty claim PDF.

Layout is a top-down pass over one US Letter page. Each drawing helper takes
the current LayoutContext and returns the advanced one. There is no
pagination: content that runs past the bottom margin is clipped by the page,
which is accepted for the short packets this service produces.
"""

from __future__ import annotations

import io
from collections.abc import Sequence
from datetime import datetime

from reportlab.lib.colors import Color
from reportlab.lib.pagesizes import LETTER
from reportlab.pdfgen.canvas import Canvas

from claimso.claims.layout import LayoutContext, wrap_words
from claimso.claims.models import ClaimPacketRequest
from claimso.claims.sanitizer import sanitize_text
from claimso.config import ORGANIZATION_NAME
from claimso.observability.logging import get_logger
from claimso.observability.telemetry import counter, log_event, time_block

logger = get_logger(__name__)

BLACK = Color(0, 0, 0)
GRAY = Color(0.4, 0.4, 0.4)
BLUE = Color(0.2, 0.4, 0.8)

TITLE = "WARRANTY CLAIM PACKET"
NOT_AVAILABLE = "N/A"
EVIDENCE_LINES = (
    "Photos/videos available upon request.",
    "Additional documentation can be provided as needed.",
)

# Horizontal positions
LEFT_X = 50
INDENT_X = 70
VALUE_X = 200

# Font sizes
TITLE_SIZE = 24
MARK_SIZE = 16
DATE_SIZE = 12
HEADING_SIZE = 14
BODY_SIZE = 11
FOOTER_SIZE = 10

# Vertical spacing
ROW_HEIGHT = 16
SECTION_SPACING = 20
HEADING_SPACING = 5
FOOTER_Y = 50
FOOTER_RULE_OFFSET = 20


def format_price(price: float | None, currency: str | None) -> str:
    """``<currency or $><price>``, integral prices without decimals; N/A when missing or zero."""
    if not price:
        return NOT_AVAILABLE
    amount = int(price) if float(price).is_integer() else price
    return f"{sanitize_text(currency) or '$'}{amount}"


def format_generated_date(now: datetime) -> str:
    """Long US date, e.g. ``October 16, 2026``."""
    return f"{now:%B} {now.day}, {now.year}"


def build_document_id(product_id: str, now: datetime) -> str:
    """Product id plus the generation time in epoch milliseconds."""
    return f"{sanitize_text(product_id)}-{int(now.timestamp() * 1000)}"


def _or_na(value: str | None) -> str:
    return sanitize_text(value) or NOT_AVAILABLE


class ClaimPacketRenderer:
    """Render a ClaimPacketRequest to PDF bytes. Stateless; safe to reuse."""

    def render(self, request: ClaimPacketRequest, now: datetime | None = None) -> bytes:
        """
        Render the packet.

        Args:
            request: Validated claim request
            now: Generation time (defaults to the current local time)

        Returns:
            PDF document bytes
        """
        now = now or datetime.now().astimezone()
        product = request.product
        document_id = build_document_id(product.id, now)

        with time_block("claims.render.latency"):
            buffer = io.BytesIO()
            canvas = Canvas(buffer, pagesize=LETTER)
            canvas.setTitle(f"Warranty Claim Packet - {sanitize_text(product.name)}")
            canvas.setAuthor(ORGANIZATION_NAME)
            canvas.setSubject(f"Document ID: {document_id}")

            ctx = LayoutContext.for_page(LETTER)
            ctx = self._draw_header(canvas, ctx, now)
            ctx = self._draw_requester(canvas, ctx, request)
            ctx = self._draw_rows_section(
                canvas,
                ctx,
                "PRODUCT DETAILS:",
                [
                    ("Product Name:", _or_na(product.name)),
                    ("Brand:", _or_na(product.brand)),
                    ("Category:", _or_na(product.category)),
                    ("Serial Number:", _or_na(product.serial_number)),
                ],
            )
            ctx = self._draw_rows_section(
                canvas,
                ctx,
                "PURCHASE INFORMATION:",
                [
                    ("Purchase Date:", _or_na(product.purchase_date)),
                    ("Retailer:", _or_na(product.retailer)),
                    ("Order Number:", _or_na(product.order_number)),
                    ("Price:", format_price(product.price, product.currency)),
                ],
            )
            ctx = self._draw_problem_description(canvas, ctx, request.problem_description)
            ctx = self._draw_evidence(canvas, ctx)

            if ctx.y < FOOTER_Y + FOOTER_RULE_OFFSET:
                counter("claims.render.overflow")
                logger.warning("Claim packet content overflows the footer (y=%.1f)", ctx.y)

            self._draw_footer(canvas, ctx.at(FOOTER_Y), document_id)

            canvas.showPage()
            canvas.save()
            pdf_bytes = buffer.getvalue()

        counter("claims.render.success")
        log_event("claims.render.complete", size_bytes=len(pdf_bytes))
        return pdf_bytes

    # ------------------------------------------------------------------
    # Drawing operations
    # ------------------------------------------------------------------

    @staticmethod
    def _text(
        canvas: Canvas,
        ctx: LayoutContext,
        text: str,
        x: float,
        size: float,
        bold: bool = False,
        color: Color = BLACK,
    ) -> LayoutContext:
        canvas.setFont(ctx.metrics.bold if bold else ctx.metrics.regular, size)
        canvas.setFillColor(color)
        canvas.drawString(x, ctx.y, text)
        return ctx.after_line(size)

    @staticmethod
    def _rule(canvas: Canvas, ctx: LayoutContext, y: float) -> None:
        canvas.setStrokeColor(GRAY)
        canvas.setLineWidth(1)
        canvas.line(ctx.margin, y, ctx.right_edge, y)

    def _heading(self, canvas: Canvas, ctx: LayoutContext, title: str) -> LayoutContext:
        ctx = self._text(canvas, ctx, title, LEFT_X, HEADING_SIZE, bold=True)
        return ctx.advance(HEADING_SPACING)

    def _draw_header(self, canvas: Canvas, ctx: LayoutContext, now: datetime) -> LayoutContext:
        ctx = self._text(canvas, ctx, TITLE, LEFT_X, TITLE_SIZE, bold=True, color=BLUE)
        ctx = self._text(
            canvas, ctx, ORGANIZATION_NAME, ctx.page_width - 150, MARK_SIZE, bold=True, color=GRAY
        )
        ctx = ctx.advance(10)
        self._rule(canvas, ctx, ctx.y)
        ctx = ctx.advance(SECTION_SPACING)
        ctx = self._text(
            canvas, ctx, f"Generated: {format_generated_date(now)}", LEFT_X, DATE_SIZE, color=GRAY
        )
        return ctx.advance(SECTION_SPACING)

    def _draw_requester(
        self, canvas: Canvas, ctx: LayoutContext, request: ClaimPacketRequest
    ) -> LayoutContext:
        ctx = self._text(canvas, ctx, "PREPARED FOR:", LEFT_X, HEADING_SIZE, bold=True)
        ctx = self._text(canvas, ctx, sanitize_text(request.user.name), INDENT_X, DATE_SIZE)
        ctx = self._text(
            canvas, ctx, sanitize_text(request.user.email), INDENT_X, DATE_SIZE, color=GRAY
        )
        return ctx.advance(SECTION_SPACING)

    def _draw_rows_section(
        self,
        canvas: Canvas,
        ctx: LayoutContext,
        title: str,
        rows: Sequence[tuple[str, str]],
    ) -> LayoutContext:
        ctx = self._heading(canvas, ctx, title)
        for label, value in rows:
            canvas.setFillColor(BLACK)
            canvas.setFont(ctx.metrics.bold, BODY_SIZE)
            canvas.drawString(INDENT_X, ctx.y, label)
            canvas.setFont(ctx.metrics.regular, BODY_SIZE)
            canvas.drawString(VALUE_X, ctx.y, value)
            ctx = ctx.advance(ROW_HEIGHT)
        return ctx.advance(SECTION_SPACING)

    def _draw_problem_description(
        self, canvas: Canvas, ctx: LayoutContext, description: str
    ) -> LayoutContext:
        ctx = self._heading(canvas, ctx, "PROBLEM DESCRIPTION:")
        lines = wrap_words(
            sanitize_text(description),
            ctx.usable_text_width,
            lambda line: ctx.metrics.text_width(line, BODY_SIZE),
        )
        for line in lines:
            ctx = self._text(canvas, ctx, f'"{line}"', INDENT_X, BODY_SIZE)
        return ctx.advance(SECTION_SPACING)

    def _draw_evidence(self, canvas: Canvas, ctx: LayoutContext) -> LayoutContext:
        ctx = self._heading(canvas, ctx, "SUPPORTING EVIDENCE:")
        for line in EVIDENCE_LINES:
            ctx = self._text(canvas, ctx, line, INDENT_X, BODY_SIZE, color=GRAY)
        return ctx.advance(SECTION_SPACING)

    def _draw_footer(self, canvas: Canvas, ctx: LayoutContext, document_id: str) -> None:
        self._rule(canvas, ctx, ctx.y + FOOTER_RULE_OFFSET)
        canvas.setFont(ctx.metrics.regular, FOOTER_SIZE)
        canvas.setFillColor(GRAY)
        canvas.drawString(LEFT_X, ctx.y, f"Generated by {ORGANIZATION_NAME}")
        canvas.drawString(ctx.page_width - 200, ctx.y, f"Document ID: {document_id}")
