"""Registration key verification service.

Verification runs inside shipped applications on attacker-controlled input,
so every failure mode collapses to ``False`` here instead of raising.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from fobkeys.app.keygen_service import encode_name
from fobkeys.app.ports import VerifierPort
from fobkeys.errors import InvalidName, MalformedKey, VerificationError
from fobkeys.utils.license_url import parse_license_url
from fobkeys.utils.registration import DEFAULT_CODEC, RegistrationCodec

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class KeyVerifier:
    """Check (name, registration key) pairs against a public key."""

    verifier: VerifierPort
    codec: RegistrationCodec = field(default=DEFAULT_CODEC)

    def verify(self, name: str, key: str) -> bool:
        """Return True only when ``key`` is an authentic key for ``name``."""

        try:
            name_bytes = encode_name(name)
        except InvalidName as exc:
            logger.debug("Rejected registration: %s", exc)
            return False

        try:
            signature = self.codec.decode(key)
        except MalformedKey as exc:
            logger.debug("Rejected registration key: %s", exc)
            return False

        try:
            valid = self.verifier.verify(name_bytes, signature)
        except VerificationError as exc:
            logger.debug("Rejected registration signature: %s", exc)
            return False

        if not valid:
            logger.debug("Registration signature does not match name")
        return valid

    def verify_url(self, url: str) -> bool:
        """Verify the name and key carried by a registration URL."""

        try:
            parsed = parse_license_url(url)
        except MalformedKey as exc:
            logger.debug("Rejected registration URL: %s", exc)
            return False
        return self.verify(parsed.name, parsed.key)
