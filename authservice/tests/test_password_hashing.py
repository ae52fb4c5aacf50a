from __future__ import annotations

from authservice.application.services.password_hashing import WerkzeugPasswordHasher

# A cheap method keeps the suite fast; the cost is part of the method string.
FAST_METHOD = "pbkdf2:sha256:1000"


def test_digest_never_equals_plaintext() -> None:
    hasher = WerkzeugPasswordHasher(method=FAST_METHOD)

    digest = hasher.hash("secret")

    assert digest != "secret"
    assert "secret" not in digest
    assert digest.startswith("pbkdf2:sha256:1000$")


def test_digest_is_salted() -> None:
    hasher = WerkzeugPasswordHasher(method=FAST_METHOD)

    assert hasher.hash("secret") != hasher.hash("secret")


def test_verify_matches_only_the_original_password() -> None:
    hasher = WerkzeugPasswordHasher(method=FAST_METHOD)
    digest = hasher.hash("secret")

    assert hasher.verify("secret", digest)
    assert not hasher.verify("Secret", digest)
    assert not hasher.verify("", digest)


def test_verify_rejects_malformed_digest() -> None:
    hasher = WerkzeugPasswordHasher(method=FAST_METHOD)

    assert not hasher.verify("secret", "")
    assert not hasher.verify("secret", "secret")


def test_default_method_uses_scrypt() -> None:
    digest = WerkzeugPasswordHasher().hash("secret")

    assert digest.startswith("scrypt:32768:8:1$")
    assert WerkzeugPasswordHasher().verify("secret", digest)
