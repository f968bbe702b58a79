from typing import Optional
from pydantic import EmailStr, Field
from app.db.models.client import ClientStatus
from app.schemas.base import BaseSchema, CamelModel

class ClientBase(CamelModel):
    name: str = Field(..., min_length=1)
    email: EmailStr
    phone: str = Field(..., min_length=1)
    company: str = Field(..., min_length=1)
    status: ClientStatus = ClientStatus.active

class ClientCreate(ClientBase):
    pass

class ClientUpdate(ClientBase):
    name: Optional[str] = Field(None, min_length=1)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, min_length=1)
    company: Optional[str] = Field(None, min_length=1)
    status: Optional[ClientStatus] = None

class Client(ClientBase, BaseSchema):
    email: str
