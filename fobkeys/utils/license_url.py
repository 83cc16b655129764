"""Registration URLs.

Applications that register a custom URL scheme can be activated by clicking a
link of the form::

    com.example.myapp.lic://<base64 name>/<registration key>

The name is URL-safe Base64 without padding so arbitrary Unicode names survive
mail clients and browsers; the key is the plain registration key text.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from urllib.parse import quote, unquote

from fobkeys.errors import MalformedKey
from fobkeys.utils.crypto import decode_bytes, encode_bytes

_SCHEME_PATTERN = r"[A-Za-z][A-Za-z0-9+.\-]*"
_SCHEME_RE = re.compile(rf"^{_SCHEME_PATTERN}$")
_URL_RE = re.compile(
    rf"^(?P<scheme>{_SCHEME_PATTERN})://(?P<name>[A-Za-z0-9_\-]+)/(?P<key>.+)$"
)


@dataclass(frozen=True, slots=True)
class LicenseURL:
    """Parsed registration URL."""

    scheme: str
    name: str
    key: str


def is_valid_scheme(scheme: str) -> bool:
    """Return True when ``scheme`` is a syntactically valid URL scheme."""
    return bool(scheme) and _SCHEME_RE.match(scheme) is not None


def build_license_url(scheme: str, name: str, key: str) -> str:
    """Return the registration URL for ``name`` and ``key`` under ``scheme``.

    Raises:
        ValueError: If ``scheme`` is not a valid URL scheme or ``name`` is empty
    """
    if not is_valid_scheme(scheme):
        raise ValueError(f"invalid URL scheme: {scheme!r}")
    if not name:
        raise ValueError("name must not be empty")
    encoded_name = encode_bytes(name.encode("utf-8"))
    return f"{scheme}://{encoded_name}/{quote(key, safe='-')}"


def parse_license_url(url: str) -> LicenseURL:
    """Split a registration URL into scheme, name and key.

    Raises:
        MalformedKey: If ``url`` is not a registration URL
    """
    match = _URL_RE.match(url.strip()) if isinstance(url, str) else None
    if match is None:
        raise MalformedKey("not a registration URL")

    try:
        name = decode_bytes(match["name"]).decode("utf-8")
    except ValueError as exc:
        raise MalformedKey("registration URL carries an undecodable name") from exc

    key = unquote(match["key"]).strip("/")
    if not name or not key:
        raise MalformedKey("registration URL is missing the name or key")
    return LicenseURL(scheme=match["scheme"], name=name, key=key)


__all__ = ["LicenseURL", "build_license_url", "is_valid_scheme", "parse_license_url"]
