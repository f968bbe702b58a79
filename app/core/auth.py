from typing import Optional
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import jwt, JWTError
from pydantic import ValidationError
import logging
from app.core.config import settings
from app.schemas.auth import Identity, TokenPayload

logger = logging.getLogger(__name__)
security = HTTPBearer(auto_error=False)

def credentials_exception() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

def verify_jwt(token: str) -> dict:
    try:
        payload = jwt.decode(
            token,
            settings.JWT_SECRET,
            algorithms=[settings.JWT_ALGORITHM],
            audience=settings.JWT_AUDIENCE,
            options={"verify_aud": settings.JWT_AUDIENCE is not None},
        )
        return payload
    except JWTError as e:
        logger.warning(f"JWT error: {e}")
        raise credentials_exception()

def authenticate(token: Optional[str]) -> Identity:
    """
    Resolve a bearer token to the caller identity or reject it with a 401.
    """
    if not token:
        raise credentials_exception()

    try:
        token_data = TokenPayload(**verify_jwt(token))
    except ValidationError as e:
        logger.warning(f"Malformed token payload: {e}")
        raise credentials_exception()

    if not token_data.sub:
        raise credentials_exception()

    return Identity(id=token_data.sub, email=token_data.email, role=token_data.role)

async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)
) -> Identity:
    token = credentials.credentials if credentials else None
    return authenticate(token)
