"""Registration key text codec.

Converts raw signature bytes to the CocoaFob registration key format and back.
The format is RFC 4648 Base32 with the ``=`` padding removed, the letters
``O`` and ``I`` replaced by ``8`` and ``9`` (neither digit is part of the
Base32 alphabet, so the substitution is reversible), and the result split into
groups of five characters joined by dashes::

    GAWQE-FCAQB-...-HZ8K9

Decoding is tolerant of whitespace anywhere in the text and of lowercase
input, so keys copied out of emails or typed by hand still decode.
"""

from __future__ import annotations

import base64
import binascii
import re
from dataclasses import dataclass

from fobkeys.errors import MalformedKey

GROUP_SIZE = 5
SEPARATOR = "-"

BASE32_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"

# Unpadded Base32 text lengths (mod 8) that correspond to whole bytes.
_VALID_TAIL_LENGTHS = frozenset({0, 2, 4, 5, 7})

_ENCODE_TABLE = str.maketrans({"O": "8", "I": "9"})
_DECODE_TABLE = str.maketrans({"8": "O", "9": "I"})
_WHITESPACE = re.compile(r"\s+")
_ALPHABET_SET = frozenset(BASE32_ALPHABET)


@dataclass(frozen=True, slots=True)
class RegistrationCodec:
    """Stateless transform between signature bytes and registration key text."""

    group_size: int = GROUP_SIZE
    separator: str = SEPARATOR

    def __post_init__(self) -> None:
        if self.group_size < 1:
            raise ValueError("group_size must be a positive integer")
        if not self.separator:
            raise ValueError("separator must be a non-empty string")
        if set(self.separator.upper()) & (_ALPHABET_SET | {"8", "9"}):
            raise ValueError(
                f"separator {self.separator!r} collides with the registration key alphabet"
            )

    def encode(self, signature: bytes) -> str:
        """Render ``signature`` as grouped registration key text.

        Args:
            signature: Raw signature bytes (must be non-empty)

        Returns:
            Registration key, e.g. ``"MZXW6-YTB89"`` for ``b"foobar"``

        Raises:
            ValueError: If ``signature`` is empty
        """
        if not signature:
            raise ValueError("cannot encode an empty signature")

        text = base64.b32encode(bytes(signature)).decode("ascii").rstrip("=")
        text = text.translate(_ENCODE_TABLE)
        size = self.group_size
        groups = [text[index : index + size] for index in range(0, len(text), size)]
        return self.separator.join(groups)

    def decode(self, key: str) -> bytes:
        """Recover signature bytes from registration key text.

        Args:
            key: Registration key as typed or pasted by a user

        Returns:
            The signature bytes that :meth:`encode` was given

        Raises:
            MalformedKey: If the cleaned text is empty, uses characters outside
                the alphabet, or has a length Base32 cannot represent
        """
        if not isinstance(key, str):
            raise MalformedKey(f"registration key must be text, got {type(key).__name__}")

        cleaned = _WHITESPACE.sub("", key).replace(self.separator, "")
        if not cleaned:
            raise MalformedKey("registration key is empty")
        if not cleaned.isascii():
            raise MalformedKey("registration key contains non-ASCII characters")

        cleaned = cleaned.upper().translate(_DECODE_TABLE)
        invalid = sorted(set(cleaned) - _ALPHABET_SET)
        if invalid:
            raise MalformedKey(
                f"registration key contains invalid characters: {''.join(invalid)!r}"
            )

        if len(cleaned) % 8 not in _VALID_TAIL_LENGTHS:
            raise MalformedKey(
                f"registration key has an impossible length ({len(cleaned)} characters)"
            )

        padded = cleaned + "=" * (-len(cleaned) % 8)
        try:
            return base64.b32decode(padded)
        except binascii.Error as exc:  # pragma: no cover - guarded by the checks above
            raise MalformedKey("registration key is not valid Base32") from exc


DEFAULT_CODEC = RegistrationCodec()


def encode_registration_key(signature: bytes) -> str:
    """Encode ``signature`` with the default CocoaFob grouping."""

    return DEFAULT_CODEC.encode(signature)


def decode_registration_key(key: str) -> bytes:
    """Decode ``key`` with the default CocoaFob grouping."""

    return DEFAULT_CODEC.decode(key)


__all__ = [
    "BASE32_ALPHABET",
    "DEFAULT_CODEC",
    "GROUP_SIZE",
    "SEPARATOR",
    "RegistrationCodec",
    "decode_registration_key",
    "encode_registration_key",
]
