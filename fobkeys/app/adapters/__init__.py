"""Concrete adapters wiring application ports to the cryptography backend."""

from __future__ import annotations

from .dsa import DSASigningKey, DSAVerifyingKey, load_private_key, load_public_key

__all__ = [
    "DSASigningKey",
    "DSAVerifyingKey",
    "load_private_key",
    "load_public_key",
]
