# app/core/security.py
from datetime import datetime, timedelta, timezone
from typing import Optional
from uuid import UUID

from jose import JWTError, jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from app.core.config import Settings, get_settings, settings


# =====================================================================
# JWT TOKEN CONFIGURATION
# =====================================================================

security = HTTPBearer()


# =====================================================================
# TOKEN CREATION
# =====================================================================

def create_access_token(
    data: dict,
    expires_delta: Optional[timedelta] = None,
    token_settings: Optional[Settings] = None,
) -> str:
    """
    Create JWT access token.

    Tokens are normally issued by the accounts service; this helper signs
    tokens with the shared secret for tooling and tests.

    Args:
        data: Dictionary containing user data (typically {"sub": user_id})
        expires_delta: Optional lifetime, defaults to ACCESS_TOKEN_EXPIRE_MINUTES
        token_settings: Secret and algorithm to sign with, defaults to the
            environment settings

    Returns:
        Encoded JWT access token
    """
    token_settings = token_settings or settings
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=token_settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    to_encode.update({"exp": expire, "type": "access"})
    return jwt.encode(
        to_encode, token_settings.SECRET_KEY, algorithm=token_settings.ALGORITHM
    )


# =====================================================================
# TOKEN VERIFICATION
# =====================================================================

def verify_access_token(token: str, token_settings: Optional[Settings] = None) -> UUID:
    """
    Verify JWT access token and return the user id it was issued for.

    Raises:
        HTTPException: If token is invalid, expired or has no usable subject
    """
    token_settings = token_settings or settings
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    try:
        payload = jwt.decode(
            token, token_settings.SECRET_KEY, algorithms=[token_settings.ALGORITHM]
        )
    except JWTError:
        raise credentials_exception

    if payload.get("type") != "access":
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token type. Expected access",
            headers={"WWW-Authenticate": "Bearer"},
        )

    subject = payload.get("sub")
    if subject is None:
        raise credentials_exception

    try:
        return UUID(str(subject))
    except ValueError:
        raise credentials_exception


# =====================================================================
# USER IDENTITY DEPENDENCY
# =====================================================================

async def get_current_user_id(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    app_settings: Settings = Depends(get_settings),
) -> UUID:
    """Resolve the caller's user id from the bearer token."""
    return verify_access_token(credentials.credentials, app_settings)
