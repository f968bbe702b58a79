from typing import List, Any
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
import logging
from app.core.auth import get_current_user
from app.core.database import get_db
from app.crud import invoice as invoice_crud
from app.schemas.auth import Identity
from app.schemas.base import Message
from app.schemas.invoice import Invoice, InvoiceCreate, InvoiceUpdate
from app.schemas.stats import FinanceStats
from app.services import stats_service

logger = logging.getLogger(__name__)
router = APIRouter()

@router.get("/invoices", response_model=List[Invoice])
async def get_invoices(
    db: AsyncSession = Depends(get_db),
    current_user: Identity = Depends(get_current_user)
) -> Any:
    """
    Retrieve invoices, newest first.
    """
    return await invoice_crud.get_invoices(db)

@router.post("/invoices", response_model=Invoice, status_code=status.HTTP_201_CREATED)
async def create_invoice(
    *,
    db: AsyncSession = Depends(get_db),
    invoice_in: InvoiceCreate,
    current_user: Identity = Depends(get_current_user)
) -> Any:
    """
    Create new invoice.
    """
    invoice = await invoice_crud.create_invoice(db, invoice_in)
    logger.info(f"Invoice created: {invoice.id}")
    return invoice

@router.put("/invoices/{invoice_id}", response_model=Invoice)
async def update_invoice(
    *,
    db: AsyncSession = Depends(get_db),
    invoice_id: str,
    invoice_in: InvoiceUpdate,
    current_user: Identity = Depends(get_current_user)
) -> Any:
    """
    Update invoice. Only the supplied fields change.
    """
    return await invoice_crud.update_invoice(db, invoice_id, invoice_in)

@router.delete("/invoices/{invoice_id}", response_model=Message)
async def delete_invoice(
    *,
    db: AsyncSession = Depends(get_db),
    invoice_id: str,
    current_user: Identity = Depends(get_current_user)
) -> Any:
    """
    Delete invoice.
    """
    await invoice_crud.delete_invoice(db, invoice_id)
    logger.info(f"Invoice deleted: {invoice_id}")
    return {"message": "Invoice deleted"}

@router.get("/stats", response_model=FinanceStats)
async def get_finance_stats(
    db: AsyncSession = Depends(get_db),
    current_user: Identity = Depends(get_current_user)
) -> Any:
    """
    Revenue totals, outstanding amounts, revenue per service and monthly
    revenue for the current year.
    """
    return await stats_service.get_finance_stats(db)
