from typing import Optional
from pydantic import BaseModel

class TokenPayload(BaseModel):
    sub: Optional[str] = None
    email: Optional[str] = None
    role: Optional[str] = None
    exp: Optional[float] = None

class Identity(BaseModel):
    """Caller identity attached to authenticated requests."""
    id: str
    email: Optional[str] = None
    role: Optional[str] = None
