"""CLAIMSO Services - email interpretation and warranty artifact generation"""

from __future__ import annotations

__version__ = "1.0.0"


# Lazy imports for the pipeline entry points
def __getattr__(name: str):
    """
    Lazy imports to avoid loading the Gemini SDK or reportlab when only importing
    lightweight modules.
    """
    if name == "EmailInterpretationPipeline":
        from claimso.email_parser.pipeline import EmailInterpretationPipeline

        return EmailInterpretationPipeline

    if name == "ClaimPacketRenderer":
        from claimso.claims.renderer import ClaimPacketRenderer

        return ClaimPacketRenderer

    if name == "PassComposer":
        from claimso.passes.composer import PassComposer

        return PassComposer

    if name == "CalendarEventEncoder":
        from claimso.reminders.encoder import CalendarEventEncoder

        return CalendarEventEncoder

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)


__all__ = [
    "CalendarEventEncoder",
    "ClaimPacketRenderer",
    "EmailInterpretationPipeline",
    "PassComposer",
]
