"""Utilities for reading key files and URL-safe byte encoding."""

from __future__ import annotations

import base64
import binascii
import logging
import os
import stat
from pathlib import Path

logger = logging.getLogger(__name__)


def _warn_if_exposed(path: Path) -> None:
    """Log a warning when ``path`` is readable by group or other users.

    Args:
        path: Private key file location
    """
    if os.name != "posix":
        return
    try:
        mode = path.stat().st_mode
    except OSError:
        return
    if mode & (stat.S_IRWXG | stat.S_IRWXO):
        logger.warning(
            "Private key file %s is accessible by other users (mode %o); "
            "restrict it with chmod 600",
            path,
            stat.S_IMODE(mode),
        )


def read_key_file(path: Path, *, private: bool = False) -> bytes:
    """Read PEM bytes from ``path``.

    Args:
        path: Key file location
        private: Check file permissions as for secret material

    Returns:
        Raw file contents.

    Raises:
        FileNotFoundError: If the file does not exist
        PermissionError: If the file cannot be read
    """
    path = path.expanduser()
    if private:
        _warn_if_exposed(path)
    return path.read_bytes()


def encode_bytes(data: bytes) -> str:
    """Encode binary data as unpadded URL-safe Base64."""
    return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")


def decode_bytes(encoded: str) -> bytes:
    """Decode data produced by :func:`encode_bytes`.

    Raises:
        ValueError: If ``encoded`` is not URL-safe Base64
    """
    padded = encoded + "=" * (-len(encoded) % 4)
    try:
        return base64.urlsafe_b64decode(padded.encode("ascii"))
    except (binascii.Error, UnicodeEncodeError) as exc:
        raise ValueError("invalid URL-safe base64 data") from exc
