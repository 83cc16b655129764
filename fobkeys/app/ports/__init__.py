"""Port interfaces for the fobkeys application layer.

Services depend on these protocols, never on concrete key implementations.
"""

__all__ = [
    "SignerPort",
    "VerifierPort",
]

from fobkeys.app.ports.signer import SignerPort, VerifierPort
