"""Application layer for fobkeys.

Services compose key ports with the registration key codec. Key parsing and
file access live in adapters and the bootstrap module.
"""

__all__ = [
    "KeyGenerator",
    "KeyVerifier",
]

from fobkeys.app.keygen_service import KeyGenerator
from fobkeys.app.verify_service import KeyVerifier
