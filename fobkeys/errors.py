"""Error taxonomy for registration key generation and verification."""


class FobKeyError(Exception):
    """Base class for all fobkeys failures."""


class InvalidName(FobKeyError, ValueError):
    """Raised when a name is empty or cannot be encoded as UTF-8."""


class InvalidKey(FobKeyError, ValueError):
    """Raised when PEM key material cannot be parsed or is not a DSA key."""


class SigningFailed(FobKeyError):
    """Raised when the cryptographic backend fails to produce a signature."""


class KeyGenerationFailed(SigningFailed):
    """Raised when signing completes but yields no usable signature bytes."""


class MalformedKey(FobKeyError, ValueError):
    """Raised when registration key text does not decode to signature bytes."""


class VerificationError(FobKeyError):
    """Raised when signature bytes are structurally invalid (not a DER pair)."""


__all__ = [
    "FobKeyError",
    "InvalidKey",
    "InvalidName",
    "KeyGenerationFailed",
    "MalformedKey",
    "SigningFailed",
    "VerificationError",
]
