"""
Pass Composer - per-subject customization of the Smart Pass template.

Composition is pure: it copies the template and patches the dynamic fields.
Signing happens only after credentials have been loaded successfully, so a
misconfigured deployment never reaches composition or produces partial bytes.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import replace
from datetime import datetime

from claimso.observability.logging import get_logger
from claimso.observability.telemetry import counter, log_event, time_block
from claimso.passes.credentials import SignerCredentials, SigningConfigurationError
from claimso.passes.models import PassBarcode, PassField, PassTemplate, SubjectProfile, replace_field
from claimso.passes.signer import PassSigner, PKPassSigner
from claimso.passes.template import (
    OWNER_FIELD_KEY,
    OWNER_FIELD_LABEL,
    PRODUCTS_FIELD_KEY,
    PRODUCTS_FIELD_LABEL,
    build_pass_template,
)

logger = get_logger(__name__)


class PassComposer:
    """
    Build and sign Smart Passes.

    Args:
        signer: Archive signer (defaults to PKPassSigner)
        load_credentials: Credential loader, called on every ``generate``
        template_factory: Produces the base template for a given time
    """

    def __init__(
        self,
        signer: PassSigner | None = None,
        load_credentials: Callable[[], SignerCredentials] = SignerCredentials.from_env,
        template_factory: Callable[[datetime | None], PassTemplate] = build_pass_template,
    ):
        self.signer = signer or PKPassSigner()
        self.load_credentials = load_credentials
        self.template_factory = template_factory

    def compose(
        self, profile: SubjectProfile, template: PassTemplate | None = None
    ) -> PassTemplate:
        """Customized copy of ``template`` for ``profile``; the input is left untouched."""
        base = template or self.template_factory(None)

        products = PassField(PRODUCTS_FIELD_KEY, PRODUCTS_FIELD_LABEL, str(profile.product_count))
        owner = PassField(
            OWNER_FIELD_KEY,
            OWNER_FIELD_LABEL,
            f"{profile.full_name or 'User'}\n{profile.email}",
        )

        return replace(
            base,
            serial_number=profile.id,
            secondary_fields=replace_field(base.secondary_fields, products),
            back_fields=base.back_fields + (owner,),
            barcodes=(PassBarcode(message=profile.id),),
        )

    def generate(self, profile: SubjectProfile) -> bytes:
        """
        Compose and sign a pass.

        Raises:
            SigningConfigurationError: If signer certificate or key is missing
        """
        try:
            credentials = self.load_credentials()
        except SigningConfigurationError:
            counter("passes.signing_not_configured")
            logger.error("Pass signing is not configured")
            raise

        with time_block("passes.generate.latency"):
            pass_json = self.compose(profile).to_pass_json()
            archive = self.signer.sign(pass_json, credentials)

        counter("passes.generated")
        log_event("passes.generated", size_bytes=len(archive))
        return archive
