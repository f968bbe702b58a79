from typing import List, Optional, Union, Dict, Any
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError
from app.crud.base import (
    get_record, create_record, update_record, delete_record, raise_store_error
)
from app.db.models.invoice import Invoice
from app.schemas.invoice import InvoiceCreate, InvoiceUpdate

async def get_invoice(db: AsyncSession, invoice_id: str) -> Optional[Invoice]:
    return await get_record(db, Invoice, invoice_id)

async def get_invoices(db: AsyncSession) -> List[Invoice]:
    """
    Get all invoices, newest first.
    """
    try:
        result = await db.execute(select(Invoice).order_by(Invoice.date.desc(), Invoice.created_at.desc()))
        return list(result.scalars().all())
    except SQLAlchemyError as e:
        await raise_store_error(db, e, "get_invoices", "Invoice")

async def create_invoice(db: AsyncSession, invoice: InvoiceCreate) -> Invoice:
    return await create_record(db, Invoice, invoice.model_dump())

async def update_invoice(db: AsyncSession, invoice_id: str, invoice_in: Union[InvoiceUpdate, Dict[str, Any]]) -> Invoice:
    return await update_record(db, Invoice, invoice_id, invoice_in)

async def delete_invoice(db: AsyncSession, invoice_id: str) -> Invoice:
    return await delete_record(db, Invoice, invoice_id)
