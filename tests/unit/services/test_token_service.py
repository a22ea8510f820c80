from datetime import timedelta
from types import SimpleNamespace

import pytest

from taskflow.app.services.token_service import (
    DEFAULT_REFRESH_TOKEN_TTL,
    TEST_JWT_SECRET,
    ConfigurationError,
    TokenService,
    generate_refresh_secret,
    hash_refresh_secret,
    parse_duration,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("1h", timedelta(hours=1)),
        ("12h", timedelta(hours=12)),
        ("30d", timedelta(days=30)),
        ("7d", timedelta(days=7)),
    ],
)
def test_parse_duration(value, expected):
    assert parse_duration(value, DEFAULT_REFRESH_TOKEN_TTL) == expected


@pytest.mark.parametrize("value", [None, "", "15m", "abc", "d", "-1d"])
def test_parse_duration_falls_back_to_default(value):
    assert parse_duration(value, DEFAULT_REFRESH_TOKEN_TTL) == timedelta(days=30)


def test_refresh_secret_is_64_hex_chars():
    secret = generate_refresh_secret()

    assert len(secret) == 64
    int(secret, 16)


def test_refresh_secrets_do_not_collide():
    secrets = {generate_refresh_secret() for _ in range(1000)}

    assert len(secrets) == 1000


def test_refresh_hash_is_deterministic_sha256():
    assert hash_refresh_secret("abc") == hash_refresh_secret("abc")
    assert hash_refresh_secret("abc") == (
        "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
    )
    assert hash_refresh_secret("abc") != hash_refresh_secret("abd")


@pytest.mark.parametrize("secret", [None, "", "too-short"])
def test_missing_or_short_secret_fails(secret):
    with pytest.raises(ConfigurationError):
        TokenService(secret)


def test_from_config_requires_secret_outside_test_mode():
    config = SimpleNamespace(ENVIRONMENT="development", JWT_SECRET=None)

    with pytest.raises(ConfigurationError):
        TokenService.from_config(config)


def test_from_config_uses_fixed_secret_in_test_mode():
    config = SimpleNamespace(
        ENVIRONMENT="test",
        JWT_SECRET=None,
        JWT_ACCESS_TOKEN_EXPIRY="2h",
        JWT_REFRESH_TOKEN_EXPIRY="7d",
    )

    service = TokenService.from_config(config)
    token = service.sign_access_token("4b7c1f0e-1d8a-4f33-9a8e-2f7c9c8e1a11", "a@example.com")

    assert service.access_token_ttl == timedelta(hours=2)
    assert service.refresh_token_ttl == timedelta(days=7)
    assert TokenService(TEST_JWT_SECRET).verify_access_token(token) is not None


def test_garbage_access_token_is_none(tokens):
    assert tokens.verify_access_token("not.a.jwt") is None
