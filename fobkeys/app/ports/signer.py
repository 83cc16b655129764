"""Signer and verifier port interfaces for registration key signatures."""

from typing import Protocol


class SignerPort(Protocol):
    """Port interface for producing signatures over name bytes.

    Implementations own private key material and never expose it.

    Side effects: None (pure computation).
    """

    def sign(self, data: bytes) -> bytes:
        """Sign data.

        Args:
            data: Message bytes (the UTF-8 encoded name)

        Returns:
            Raw signature bytes

        Raises:
            SigningFailed: If the backend cannot produce a signature
        """
        ...


class VerifierPort(Protocol):
    """Port interface for checking signatures with public key material.

    Side effects: None (pure computation).
    """

    def verify(self, data: bytes, signature: bytes) -> bool:
        """Verify signature.

        Args:
            data: Original message bytes
            signature: Signature to verify

        Returns:
            True if signature is valid, False if it does not match

        Raises:
            VerificationError: If ``signature`` is structurally invalid
        """
        ...
