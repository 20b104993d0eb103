from datetime import datetime, timezone
from unittest.mock import patch

import pytest
from jose import jwt

from app.services.security import create_access_token, decode_access_token, hash_password, verify_password
from app.utils.exceptions import ForbiddenError


def test_hash_password_is_salted():
    first = hash_password("pw1")
    second = hash_password("pw1")

    assert first != second
    assert verify_password("pw1", first)
    assert verify_password("pw1", second)


def test_verify_password_rejects_other_plaintext():
    password_hash = hash_password("pw1")

    assert not verify_password("pw2", password_hash)
    assert not verify_password("", password_hash)


def test_token_carries_username_without_expiry():
    token = create_access_token("alice")
    payload = decode_access_token(token)

    assert payload["username"] == "alice"
    assert "exp" not in payload


def test_old_token_is_still_accepted():
    issued = datetime(2001, 1, 1, tzinfo=timezone.utc)
    token = jwt.encode({"username": "alice", "iat": issued}, "test-secret", algorithm="HS256")

    assert decode_access_token(token)["username"] == "alice"


def test_decode_rejects_foreign_signature():
    token = jwt.encode({"username": "alice"}, "another-secret", algorithm="HS256")

    with pytest.raises(ForbiddenError):
        decode_access_token(token)


def test_decode_rejects_garbage():
    with pytest.raises(ForbiddenError) as exc_info:
        decode_access_token("garbage")

    assert exc_info.value.status_code == 403


def test_long_password_uses_first_72_bytes():
    password_hash = hash_password("a" * 100)

    assert verify_password("a" * 100, password_hash)
    assert verify_password("a" * 72, password_hash)
    assert not verify_password("b" * 100, password_hash)


def test_missing_secret_refuses_to_sign():
    with patch("app.services.security.settings") as mock_settings:
        mock_settings.jwt_secret = ""
        mock_settings.jwt_algorithm = "HS256"
        with pytest.raises(RuntimeError):
            create_access_token("alice")
        with pytest.raises(RuntimeError):
            decode_access_token("anything")
