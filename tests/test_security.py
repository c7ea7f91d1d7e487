"""
Unit tests for bearer token resolution.
"""
from datetime import timedelta

from jose import jwt

from app.core.security import create_access_token, decode_principal


def test_decode_principal_round_trip():
    token = create_access_token({"sub": "user_123"})
    assert decode_principal(token) == "user_123"


def test_expired_token_resolves_to_none():
    token = create_access_token({"sub": "user_123"}, timedelta(minutes=-5))
    assert decode_principal(token) is None


def test_token_signed_with_other_key_resolves_to_none():
    token = jwt.encode({"sub": "user_123"}, "some-other-secret", algorithm="HS256")
    assert decode_principal(token) is None


def test_token_without_subject_resolves_to_none():
    token = create_access_token({"role": "candidate"})
    assert decode_principal(token) is None


def test_garbage_resolves_to_none():
    assert decode_principal("definitely.not.a-token") is None
