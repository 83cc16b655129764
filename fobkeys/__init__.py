"""fobkeys - CocoaFob-style registration key generation and verification.

DSA-signed, Base32-encoded license keys bound to a licensee name.
"""

__version__ = "0.1.0"
__author__ = "fobkeys Contributors"

from fobkeys.app import KeyGenerator, KeyVerifier
from fobkeys.errors import (
    FobKeyError,
    InvalidKey,
    InvalidName,
    KeyGenerationFailed,
    MalformedKey,
    SigningFailed,
    VerificationError,
)
from fobkeys.utils.registration import (
    RegistrationCodec,
    decode_registration_key,
    encode_registration_key,
)

__all__ = [
    "FobKeyError",
    "InvalidKey",
    "InvalidName",
    "KeyGenerationFailed",
    "KeyGenerator",
    "KeyVerifier",
    "MalformedKey",
    "RegistrationCodec",
    "SigningFailed",
    "VerificationError",
    "__version__",
    "decode_registration_key",
    "encode_registration_key",
]
