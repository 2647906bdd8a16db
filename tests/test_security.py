"""Tests for bearer token verification."""

import uuid
from datetime import timedelta

import pytest
from fastapi import HTTPException
from jose import jwt

from app.core.config import Settings, settings
from app.core.security import create_access_token, verify_access_token


class TestVerifyAccessToken:
    def test_round_trip_subject(self):
        user_id = uuid.uuid4()
        assert verify_access_token(create_access_token({"sub": str(user_id)})) == user_id

    def test_expired_token(self):
        token = create_access_token({"sub": str(uuid.uuid4())}, expires_delta=timedelta(minutes=-1))
        with pytest.raises(HTTPException) as exc_info:
            verify_access_token(token)
        assert exc_info.value.status_code == 401

    def test_wrong_secret(self):
        token = jwt.encode(
            {"sub": str(uuid.uuid4()), "type": "access"}, "other-secret", algorithm=settings.ALGORITHM
        )
        with pytest.raises(HTTPException):
            verify_access_token(token)

    def test_wrong_token_type(self):
        token = jwt.encode(
            {"sub": str(uuid.uuid4()), "type": "refresh"}, settings.SECRET_KEY, algorithm=settings.ALGORITHM
        )
        with pytest.raises(HTTPException) as exc_info:
            verify_access_token(token)
        assert "token type" in exc_info.value.detail

    def test_subject_must_be_uuid(self):
        with pytest.raises(HTTPException):
            verify_access_token(create_access_token({"sub": "42"}))

    def test_missing_subject(self):
        with pytest.raises(HTTPException):
            verify_access_token(create_access_token({"role": "user"}))

    def test_explicit_settings(self):
        user_id = uuid.uuid4()
        rotated = Settings(SECRET_KEY="rotated-secret")
        token = create_access_token({"sub": str(user_id)}, token_settings=rotated)
        assert verify_access_token(token, rotated) == user_id
        with pytest.raises(HTTPException):
            verify_access_token(token)
