from typing import Optional
from datetime import datetime, timezone
from pydantic import EmailStr, Field, field_validator
from app.db.models.request import RequestStatus
from app.schemas.base import BaseSchema, CamelModel

class RequestBase(CamelModel):
    name: str = Field(..., min_length=1)
    email: EmailStr
    phone: str = Field(..., min_length=1)
    service: Optional[str] = None
    description: str = Field(..., min_length=1)
    status: RequestStatus = RequestStatus.new
    found_us: Optional[str] = None

class RequestCreate(RequestBase):
    date: Optional[datetime] = None

    @field_validator("date")
    @classmethod
    def normalize_date(cls, v: Optional[datetime]) -> Optional[datetime]:
        # Stored as UTC
        if v is not None and v.tzinfo is not None:
            return v.astimezone(timezone.utc)
        return v

class RequestStatusUpdate(CamelModel):
    # Checked against the lifecycle vocabulary, not by the schema
    status: Optional[str] = None

class Request(RequestBase, BaseSchema):
    email: str
    date: datetime

class RequestListItem(CamelModel):
    """Projection returned by the filtered listing."""
    id: str
    name: str
    email: str
    phone: str
    service: Optional[str] = None
    description: str
    status: RequestStatus
    date: datetime

class RecentRequest(CamelModel):
    """Projection returned by the recent-requests feed."""
    id: str
    name: str
    service: Optional[str] = None
    phone: str
    description: str
    date: datetime
    status: RequestStatus

class RequestCreated(CamelModel):
    message: str
    request: Request
