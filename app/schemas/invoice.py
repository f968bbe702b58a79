from typing import Optional
from datetime import date as Date
from pydantic import Field
from app.db.models.invoice import InvoiceStatus
from app.schemas.base import BaseSchema, CamelModel

class InvoiceBase(CamelModel):
    client: str = Field(..., min_length=1)
    amount: float
    date: Date
    due_date: Date
    status: InvoiceStatus = InvoiceStatus.pending
    service: str = Field(..., min_length=1)
    client_id: Optional[str] = None

class InvoiceCreate(InvoiceBase):
    pass

class InvoiceUpdate(InvoiceBase):
    client: Optional[str] = Field(None, min_length=1)
    amount: Optional[float] = None
    date: Optional[Date] = None
    due_date: Optional[Date] = None
    status: Optional[InvoiceStatus] = None
    service: Optional[str] = Field(None, min_length=1)

class Invoice(InvoiceBase, BaseSchema):
    pass
