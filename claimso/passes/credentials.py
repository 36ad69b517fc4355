"""
Pass signing credentials.

Certificates and keys are supplied as base64-encoded PEM in the environment
and read at call time, so rotating them does not require a restart.
"""

from __future__ import annotations

import base64
import binascii
import os
from collections.abc import Mapping
from dataclasses import dataclass

SIGNER_CERT_ENV = "PASSKIT_CERT"
SIGNER_KEY_ENV = "PASSKIT_KEY"
SIGNER_KEY_PASSPHRASE_ENV = "PASSKIT_KEY_PASSPHRASE"
WWDR_CERT_ENV = "WWDR_CERT"


class SigningConfigurationError(RuntimeError):
    """Raised when mandatory signing credentials are missing or unreadable."""


def _decode(name: str, value: str) -> bytes:
    try:
        return base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError) as e:
        raise SigningConfigurationError(f"{name} is not valid base64") from e


@dataclass(frozen=True)
class SignerCredentials:
    """Decoded signer certificate and key, plus the optional extras."""

    signer_cert: bytes
    signer_key: bytes
    key_passphrase: str = ""
    wwdr_cert: bytes | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> SignerCredentials:
        """
        Load credentials from the environment.

        Raises:
            SigningConfigurationError: If the signer certificate or key is
                missing, or any supplied value is not valid base64
        """
        env = os.environ if environ is None else environ

        cert = env.get(SIGNER_CERT_ENV, "")
        key = env.get(SIGNER_KEY_ENV, "")
        missing = [name for name, value in ((SIGNER_CERT_ENV, cert), (SIGNER_KEY_ENV, key)) if not value]
        if missing:
            raise SigningConfigurationError(
                f"Missing required certificate environment variables: {', '.join(missing)}"
            )

        wwdr = env.get(WWDR_CERT_ENV, "")
        return cls(
            signer_cert=_decode(SIGNER_CERT_ENV, cert),
            signer_key=_decode(SIGNER_KEY_ENV, key),
            key_passphrase=env.get(SIGNER_KEY_PASSPHRASE_ENV, ""),
            wwdr_cert=_decode(WWDR_CERT_ENV, wwdr) if wwdr else None,
        )
