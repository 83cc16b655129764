"""Pytest configuration and fixtures."""

import os
import shutil
import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import dsa

from fobkeys.app import KeyGenerator, KeyVerifier
from fobkeys.app.adapters import DSASigningKey, DSAVerifyingKey
from fobkeys.config import Settings


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    try:
        yield Path(tmpdir)
    finally:
        shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture(scope="session")
def dsa_private_key() -> dsa.DSAPrivateKey:
    """DSA key pair shared by the whole session (parameter generation is slow)."""
    return dsa.generate_private_key(key_size=1024)


@pytest.fixture(scope="session")
def other_dsa_private_key() -> dsa.DSAPrivateKey:
    """Unrelated DSA key pair for negative verification cases."""
    return dsa.generate_private_key(key_size=1024)


@pytest.fixture(scope="session")
def private_pem(dsa_private_key: dsa.DSAPrivateKey) -> bytes:
    return dsa_private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    )


@pytest.fixture(scope="session")
def public_pem(dsa_private_key: dsa.DSAPrivateKey) -> bytes:
    return dsa_private_key.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    )


@pytest.fixture
def signing_key(dsa_private_key: dsa.DSAPrivateKey) -> DSASigningKey:
    return DSASigningKey(dsa_private_key)


@pytest.fixture
def generator(signing_key: DSASigningKey) -> KeyGenerator:
    return KeyGenerator(signer=signing_key)


@pytest.fixture
def verifier(dsa_private_key: dsa.DSAPrivateKey) -> KeyVerifier:
    return KeyVerifier(verifier=DSAVerifyingKey(dsa_private_key.public_key()))


@pytest.fixture
def other_verifier(other_dsa_private_key: dsa.DSAPrivateKey) -> KeyVerifier:
    return KeyVerifier(verifier=DSAVerifyingKey(other_dsa_private_key.public_key()))


@pytest.fixture
def key_files(temp_dir: Path, private_pem: bytes, public_pem: bytes) -> tuple[Path, Path]:
    """Write the session key pair to PEM files (private key mode 0600)."""
    private_path = temp_dir / "dsa_priv.pem"
    public_path = temp_dir / "dsa_pub.pem"
    private_path.write_bytes(private_pem)
    public_path.write_bytes(public_pem)
    os.chmod(private_path, 0o600)
    return private_path, public_path


@pytest.fixture
def override_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[Settings, None, None]:
    """Provide isolated fobkeys settings scoped to tests."""

    import fobkeys.config as config_module

    for variable in (
        "FOBKEYS_PRIVATE_KEY_PATH",
        "FOBKEYS_PRIVATE_KEY_PASSWORD",
        "FOBKEYS_PUBLIC_KEY_PATH",
        "FOBKEYS_URL_SCHEME",
    ):
        monkeypatch.delenv(variable, raising=False)

    original_settings = getattr(config_module, "_settings", None)
    settings = config_module.Settings(_env_file=None)
    config_module._settings = settings

    try:
        yield settings
    finally:
        config_module._settings = original_settings
