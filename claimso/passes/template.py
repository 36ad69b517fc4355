"""
Static CLAIMSO Smart Pass template.

Branding and back-of-card copy are fixed; the identifiers come from config.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

from claimso.config import (
    APPLE_TEAM_ID,
    ORGANIZATION_NAME,
    PASS_EXPIRES_AFTER_DAYS,
    PASS_RELEVANT_AFTER_DAYS,
    PASS_TYPE_IDENTIFIER,
)
from claimso.passes.models import PassBarcode, PassField, PassTemplate

PRODUCTS_FIELD_KEY = "products"
PRODUCTS_FIELD_LABEL = "Products Protected"
OWNER_FIELD_KEY = "user-info"
OWNER_FIELD_LABEL = "Vault Owner"

FEATURES_TEXT = (
    "• Real-time warranty notifications\n"
    "• Automatic receipt processing\n"
    "• Smart claim assistance\n"
    "• Universal product tracking"
)


def build_pass_template(now: datetime | None = None) -> PassTemplate:
    """Fresh template; ``now`` fixes member-since and the relevance window."""
    now = now or datetime.now(UTC)

    return PassTemplate(
        pass_type_identifier=PASS_TYPE_IDENTIFIER,
        team_identifier=APPLE_TEAM_ID,
        organization_name=ORGANIZATION_NAME,
        description=f"{ORGANIZATION_NAME} Smart Pass - Personal Warranty Assistant",
        logo_text=ORGANIZATION_NAME,
        foreground_color="rgb(255, 255, 255)",
        background_color="rgb(37, 99, 235)",
        label_color="rgb(255, 255, 255)",
        primary_fields=(PassField("title", "Smart Pass", "Personal Warranty Assistant"),),
        secondary_fields=(
            PassField("status", "Status", "Active"),
            PassField(PRODUCTS_FIELD_KEY, PRODUCTS_FIELD_LABEL, "Loading..."),
        ),
        auxiliary_fields=(PassField("member-since", "Member Since", str(now.year)),),
        back_fields=(
            PassField(
                "description",
                "About CLAIMSO Smart Pass",
                "Your personal warranty assistant that helps you track purchases, "
                "manage warranties, and file claims with confidence.",
            ),
            PassField("features", "Features", FEATURES_TEXT),
            PassField(
                "support",
                "Support",
                "Need help? Visit claimso.com/support or email hello@claimso.com",
            ),
        ),
        barcodes=(PassBarcode(message=""),),
        relevant_date=now + timedelta(days=PASS_RELEVANT_AFTER_DAYS),
        expiration_date=now + timedelta(days=PASS_EXPIRES_AFTER_DAYS),
    )
