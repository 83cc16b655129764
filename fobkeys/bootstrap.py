"""Application bootstrap wiring key adapters into services."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from fobkeys.app import KeyGenerator, KeyVerifier
from fobkeys.app.adapters import load_private_key, load_public_key
from fobkeys.config import Settings, get_settings


def generator_from_pem(pem: bytes | str, password: bytes | None = None) -> KeyGenerator:
    """Build a :class:`KeyGenerator` around a PEM-encoded DSA private key."""

    return KeyGenerator(signer=load_private_key(pem, password=password))


def verifier_from_pem(pem: bytes | str) -> KeyVerifier:
    """Build a :class:`KeyVerifier` around a PEM-encoded DSA public key."""

    return KeyVerifier(verifier=load_public_key(pem))


@contextmanager
def open_generator(
    settings: Settings | None = None,
    *,
    private_key_path: Path | None = None,
) -> Iterator[KeyGenerator]:
    """Yield a generator whose private key is released when the block exits.

    Args:
        settings: Settings to read the key location from (defaults to global)
        private_key_path: Overrides ``settings.private_key_path``

    Raises:
        InvalidKey: If the key file is missing, unreadable or not a DSA key
    """
    settings = settings or get_settings()
    pem = settings.read_private_key_pem(private_key_path)
    signing_key = load_private_key(pem, password=settings.get_private_key_password())
    del pem
    with signing_key:
        yield KeyGenerator(signer=signing_key)


def build_verifier(
    settings: Settings | None = None,
    *,
    public_key_path: Path | None = None,
) -> KeyVerifier:
    """Return a verifier for the configured (or given) public key file.

    Raises:
        InvalidKey: If the key file is missing, unreadable or not a DSA key
    """
    settings = settings or get_settings()
    return verifier_from_pem(settings.read_public_key_pem(public_key_path))
