"""DSA key adapters backed by the ``cryptography`` package.

CocoaFob registration keys are DSA signatures over the SHA-1 digest of the
licensee name. The adapters here wrap ``cryptography`` key objects so the
application layer only ever sees :class:`SignerPort` / :class:`VerifierPort`.
"""

from __future__ import annotations

import logging
from types import TracebackType

from cryptography.exceptions import InvalidSignature, UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import dsa
from cryptography.hazmat.primitives.asymmetric.utils import decode_dss_signature

from fobkeys.app.ports import SignerPort, VerifierPort
from fobkeys.errors import InvalidKey, SigningFailed, VerificationError

logger = logging.getLogger(__name__)

_PRIVATE_PEM_MARKER = b"PRIVATE KEY-----"


def _digest() -> hashes.HashAlgorithm:
    # Fixed by the CocoaFob key format.
    return hashes.SHA1()


def _as_bytes(pem: bytes | str) -> bytes:
    if isinstance(pem, str):
        return pem.encode("utf-8")
    return bytes(pem)


class DSAVerifyingKey(VerifierPort):
    """Public half of a DSA key pair; checks registration signatures."""

    def __init__(self, key: dsa.DSAPublicKey) -> None:
        if not isinstance(key, dsa.DSAPublicKey):
            raise InvalidKey(f"expected a DSA public key, got {type(key).__name__}")
        self._key = key

    @property
    def key_size(self) -> int:
        return self._key.key_size

    def verify(self, data: bytes, signature: bytes) -> bool:
        """Return True when ``signature`` is a valid DSA/SHA-1 signature of ``data``."""

        try:
            decode_dss_signature(bytes(signature))
        except ValueError as exc:
            raise VerificationError("signature is not a DER-encoded (r, s) pair") from exc

        try:
            self._key.verify(bytes(signature), bytes(data), _digest())
        except InvalidSignature:
            return False
        return True

    def __repr__(self) -> str:
        return f"DSAVerifyingKey(key_size={self.key_size})"


class DSASigningKey(SignerPort):
    """Private DSA key usable only through :meth:`sign`.

    The wrapper supports scoped use: once :meth:`close` runs (or the ``with``
    block exits) the reference to the backend key is dropped and further
    signing attempts fail.
    """

    def __init__(self, key: dsa.DSAPrivateKey) -> None:
        if not isinstance(key, dsa.DSAPrivateKey):
            raise InvalidKey(f"expected a DSA private key, got {type(key).__name__}")
        self._key: dsa.DSAPrivateKey | None = key

    @property
    def closed(self) -> bool:
        return self._key is None

    @property
    def key_size(self) -> int:
        return self._require_key().key_size

    def sign(self, data: bytes) -> bytes:
        """Return the DER-encoded DSA signature of SHA-1(``data``)."""

        key = self._require_key()
        try:
            return key.sign(bytes(data), _digest())
        except Exception as exc:  # noqa: BLE001 - backend errors vary by OpenSSL build
            detail = str(exc) or type(exc).__name__
            raise SigningFailed(f"DSA signing failed: {detail}") from exc

    def public_key(self) -> DSAVerifyingKey:
        """Return the verifying key matching this signing key."""

        return DSAVerifyingKey(self._require_key().public_key())

    def close(self) -> None:
        """Release the backend key reference."""

        self._key = None

    def __enter__(self) -> DSASigningKey:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def _require_key(self) -> dsa.DSAPrivateKey:
        if self._key is None:
            raise SigningFailed("signing key has been released")
        return self._key

    def __repr__(self) -> str:
        if self._key is None:
            return "DSASigningKey(closed)"
        return f"DSASigningKey(key_size={self._key.key_size})"


def load_private_key(pem: bytes | str, password: bytes | None = None) -> DSASigningKey:
    """Parse a PEM-encoded DSA private key.

    Args:
        pem: PEM text (``BEGIN PRIVATE KEY`` or ``BEGIN DSA PRIVATE KEY``)
        password: Passphrase for encrypted PEM files

    Returns:
        Signing key wrapper

    Raises:
        InvalidKey: If the PEM cannot be parsed or is not a DSA private key
    """
    try:
        key = serialization.load_pem_private_key(_as_bytes(pem), password=password)
    except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
        raise InvalidKey(f"could not load private key: {exc}") from exc

    if not isinstance(key, dsa.DSAPrivateKey):
        raise InvalidKey(f"private key is not a DSA key ({type(key).__name__})")

    logger.debug("Loaded DSA private key (%d bits)", key.key_size)
    return DSASigningKey(key)


def load_public_key(pem: bytes | str) -> DSAVerifyingKey:
    """Parse a PEM-encoded DSA public key.

    A PEM private key is accepted as well; only its public half is kept.

    Raises:
        InvalidKey: If the PEM cannot be parsed or is not a DSA key
    """
    data = _as_bytes(pem)
    if _PRIVATE_PEM_MARKER in data:
        return load_private_key(data).public_key()

    try:
        key = serialization.load_pem_public_key(data)
    except (ValueError, UnsupportedAlgorithm) as exc:
        raise InvalidKey(f"could not load public key: {exc}") from exc

    if not isinstance(key, dsa.DSAPublicKey):
        raise InvalidKey(f"public key is not a DSA key ({type(key).__name__})")

    logger.debug("Loaded DSA public key (%d bits)", key.key_size)
    return DSAVerifyingKey(key)


__all__ = [
    "DSASigningKey",
    "DSAVerifyingKey",
    "load_private_key",
    "load_public_key",
]
