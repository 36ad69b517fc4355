"""
.pkpass packaging and PKCS#7 signing.

A pass archive is a zip of pass.json, its image assets, manifest.json (SHA-1
digest of every other file) and a detached DER PKCS#7 signature over the
manifest.
"""

from __future__ import annotations

import hashlib
import io
import json
import struct
import zipfile
import zlib
from typing import Any, Protocol

from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.serialization import pkcs7

from claimso.observability.logging import get_logger
from claimso.passes.credentials import SignerCredentials, SigningConfigurationError

logger = get_logger(__name__)

ICON_SIZE = 29
ICON_RGB = (37, 99, 235)


class PassSigner(Protocol):
    """Turns a finished pass.json payload into signed archive bytes."""

    def sign(self, pass_json: dict[str, Any], credentials: SignerCredentials) -> bytes: ...


def solid_png(width: int, height: int, rgb: tuple[int, int, int]) -> bytes:
    """Minimal truecolor PNG filled with one colour."""

    def chunk(tag: bytes, data: bytes) -> bytes:
        body = tag + data
        return struct.pack(">I", len(data)) + body + struct.pack(">I", zlib.crc32(body))

    row = b"\x00" + bytes(rgb) * width
    header = struct.pack(">IIBBBBB", width, height, 8, 2, 0, 0, 0)
    return (
        b"\x89PNG\r\n\x1a\n"
        + chunk(b"IHDR", header)
        + chunk(b"IDAT", zlib.compress(row * height))
        + chunk(b"IEND", b"")
    )


def build_manifest(files: dict[str, bytes]) -> bytes:
    manifest = {name: hashlib.sha1(data).hexdigest() for name, data in sorted(files.items())}
    return json.dumps(manifest, indent=2).encode("utf-8")


def _load_certificate(data: bytes) -> x509.Certificate:
    if data.lstrip().startswith(b"-----BEGIN"):
        return x509.load_pem_x509_certificate(data)
    return x509.load_der_x509_certificate(data)


class PKPassSigner:
    """PassSigner backed by ``cryptography``'s PKCS#7 builder."""

    def __init__(self, icon: bytes | None = None):
        self.icon = icon or solid_png(ICON_SIZE, ICON_SIZE, ICON_RGB)

    def sign(self, pass_json: dict[str, Any], credentials: SignerCredentials) -> bytes:
        files = {
            "pass.json": json.dumps(pass_json, ensure_ascii=False).encode("utf-8"),
            "icon.png": self.icon,
        }
        manifest = build_manifest(files)

        try:
            certificate = _load_certificate(credentials.signer_cert)
            private_key = serialization.load_pem_private_key(
                credentials.signer_key,
                password=credentials.key_passphrase.encode("utf-8") or None,
            )
            wwdr = _load_certificate(credentials.wwdr_cert) if credentials.wwdr_cert else None
        except (ValueError, TypeError) as e:
            logger.error("Pass signing credentials could not be loaded: %s", type(e).__name__)
            raise SigningConfigurationError("Pass signing credentials could not be loaded") from e

        builder = (
            pkcs7.PKCS7SignatureBuilder()
            .set_data(manifest)
            .add_signer(certificate, private_key, hashes.SHA256())
        )
        if wwdr is not None:
            builder = builder.add_certificate(wwdr)
        signature = builder.sign(
            serialization.Encoding.DER,
            [pkcs7.PKCS7Options.DetachedSignature, pkcs7.PKCS7Options.Binary],
        )

        buffer = io.BytesIO()
        with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as archive:
            for name, data in files.items():
                archive.writestr(name, data)
            archive.writestr("manifest.json", manifest)
            archive.writestr("signature", signature)

        return buffer.getvalue()
