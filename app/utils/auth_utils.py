# app/utils/auth_utils.py
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from fastapi import Response

from app.core.config import Settings, get_settings

logger = logging.getLogger(__name__)

TOKEN_COOKIE = "token"

# Login claims are echoed back as-is, so registered names such as aud or
# sub are carried but never checked against expected values.
DECODE_OPTIONS = {
    "verify_aud": False,
    "verify_iss": False,
    "verify_sub": False,
    "verify_jti": False,
}


def create_access_token(
    data: dict,
    expires_delta: Optional[timedelta] = None,
    settings: Optional[Settings] = None,
) -> str:
    settings = settings or get_settings()
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    now = datetime.now(timezone.utc)
    to_encode = data.copy()
    to_encode.update({"iat": now, "exp": now + expires_delta})
    return jwt.encode(to_encode, settings.ACCESS_TOKEN_SECRET, algorithm=settings.ALGORITHM)


def decode_token(token: str, settings: Optional[Settings] = None) -> dict:
    settings = settings or get_settings()
    return jwt.decode(
        token,
        settings.ACCESS_TOKEN_SECRET,
        algorithms=[settings.ALGORITHM],
        options=DECODE_OPTIONS,
    )


def verify_token(token: Optional[str], settings: Optional[Settings] = None) -> Optional[dict]:
    """Return the token claims, or None if the token is missing or invalid."""
    if not token:
        return None
    try:
        return decode_token(token, settings)
    except jwt.InvalidTokenError as e:
        logger.info("Rejected token: %s", e)
        return None


def set_token_cookie(response: Response, token: str, settings: Optional[Settings] = None) -> None:
    profile = (settings or get_settings()).profile
    response.set_cookie(
        TOKEN_COOKIE,
        token,
        httponly=True,
        secure=profile.cookie_secure,
        samesite=profile.cookie_samesite,
    )


def clear_token_cookie(response: Response, settings: Optional[Settings] = None) -> None:
    # Browsers only drop the cookie if the flags match the ones it was set with.
    profile = (settings or get_settings()).profile
    response.delete_cookie(
        TOKEN_COOKIE,
        httponly=True,
        secure=profile.cookie_secure,
        samesite=profile.cookie_samesite,
    )
