"""Registration key generation service."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from fobkeys.app.ports import SignerPort
from fobkeys.errors import InvalidName, KeyGenerationFailed
from fobkeys.utils.license_url import build_license_url
from fobkeys.utils.registration import DEFAULT_CODEC, RegistrationCodec

logger = logging.getLogger(__name__)


def encode_name(name: str) -> bytes:
    """Return the exact bytes that are signed and verified for ``name``.

    Raises:
        InvalidName: If ``name`` is empty or not encodable as UTF-8
    """
    if not isinstance(name, str):
        raise InvalidName(f"name must be a string, got {type(name).__name__}")
    if name == "":
        raise InvalidName("name must not be empty")
    try:
        return name.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise InvalidName("name cannot be encoded as UTF-8") from exc


@dataclass(slots=True)
class KeyGenerator:
    """Turn licensee names into registration keys.

    DSA signatures are randomized, so generating twice for the same name
    yields different key text. Every generated key verifies.
    """

    signer: SignerPort
    codec: RegistrationCodec = field(default=DEFAULT_CODEC)

    def generate(self, name: str) -> str:
        """Return a registration key for ``name``.

        Raises:
            InvalidName: If ``name`` is empty or not encodable
            SigningFailed: If the signing backend fails
            KeyGenerationFailed: If the backend returns an empty signature
        """
        name_bytes = encode_name(name)
        signature = self.signer.sign(name_bytes)
        if not signature:
            raise KeyGenerationFailed("signing produced an empty signature")

        key = self.codec.encode(signature)
        logger.debug("Generated %d-character registration key", len(key))
        return key

    def generate_url(self, name: str, scheme: str) -> str:
        """Return a registration URL carrying ``name`` and a fresh key."""

        key = self.generate(name)
        return build_license_url(scheme, name, key)
