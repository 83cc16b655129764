"""Tests for registration key verification at the trust boundary."""

from __future__ import annotations

import logging

import pytest

from fobkeys.app import KeyGenerator, KeyVerifier
from fobkeys.errors import VerificationError
from fobkeys.utils.registration import encode_registration_key


class _ExplodingVerifier:
    def verify(self, data: bytes, signature: bytes) -> bool:
        raise VerificationError("not a DER pair")


def test_key_for_other_name_is_rejected(generator: KeyGenerator, verifier: KeyVerifier) -> None:
    key = generator.generate("Alice")

    assert verifier.verify("Bob", key) is False


def test_key_from_unrelated_pair_is_rejected(
    generator: KeyGenerator,
    other_verifier: KeyVerifier,
) -> None:
    key = generator.generate("Alice")

    assert other_verifier.verify("Alice", key) is False


def test_empty_name_is_not_authenticated(generator: KeyGenerator, verifier: KeyVerifier) -> None:
    key = generator.generate("Alice")

    assert verifier.verify("", key) is False
    assert verifier.verify("", "") is False


@pytest.mark.parametrize(
    "garbage",
    [
        "",
        " ",
        "-",
        "!!!!!",
        "A",
        "ABC",
        "00000-11111",
        "ÄÖÜ",
        "MZXW6-YTB89",
        "AAAAA-AAAAA-AAAAA-AAAAA-AAAAA-AAAAA-AA",
        "GAWQE" * 40,
    ],
)
def test_garbage_keys_return_false(verifier: KeyVerifier, garbage: str) -> None:
    assert verifier.verify("Alice", garbage) is False


def test_non_text_inputs_return_false(verifier: KeyVerifier) -> None:
    assert verifier.verify("Alice", None) is False  # type: ignore[arg-type]
    assert verifier.verify(None, "MZXW6") is False  # type: ignore[arg-type]


def test_unencodable_name_returns_false(verifier: KeyVerifier) -> None:
    assert verifier.verify("\udfff", "MZXW6") is False


def test_case_and_whitespace_are_tolerated(
    generator: KeyGenerator,
    verifier: KeyVerifier,
) -> None:
    key = generator.generate("Alice")
    mangled = "  " + key.lower().replace("-", " - ") + "\n"

    assert verifier.verify("Alice", mangled) is True


def test_tampered_key_is_rejected(generator: KeyGenerator, verifier: KeyVerifier) -> None:
    key = generator.generate("Alice")
    tampered = ("B" if key[0] != "B" else "C") + key[1:]

    assert verifier.verify("Alice", tampered) is False


def test_well_formed_but_wrong_signature_is_rejected(verifier: KeyVerifier) -> None:
    # SEQUENCE { INTEGER 1, INTEGER 1 }
    key = encode_registration_key(b"\x30\x06\x02\x01\x01\x02\x01\x01")

    assert verifier.verify("Alice", key) is False


def test_verification_errors_collapse_to_false() -> None:
    key_verifier = KeyVerifier(verifier=_ExplodingVerifier())

    assert key_verifier.verify("Alice", "MZXW6-YTB89") is False


def test_rejections_are_logged_at_debug(
    verifier: KeyVerifier,
    caplog: pytest.LogCaptureFixture,
) -> None:
    caplog.set_level(logging.DEBUG, logger="fobkeys.app.verify_service")

    verifier.verify("Alice", "!!!")

    assert any("Rejected registration key" in record.message for record in caplog.records)
    assert all(record.levelno == logging.DEBUG for record in caplog.records)


@pytest.mark.parametrize(
    "url",
    ["", "garbage", "com.example.app.lic://", "com.example.app.lic://QWxpY2U/", "://x/y"],
)
def test_bad_urls_return_false(verifier: KeyVerifier, url: str) -> None:
    assert verifier.verify_url(url) is False


def test_url_for_other_key_pair_is_rejected(
    generator: KeyGenerator,
    other_verifier: KeyVerifier,
) -> None:
    url = generator.generate_url("Alice", "com.example.app.lic")

    assert other_verifier.verify_url(url) is False
