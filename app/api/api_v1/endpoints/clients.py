from typing import List, Any
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
import logging
from app.core.auth import get_current_user
from app.core.database import get_db
from app.crud import client as client_crud
from app.core.exceptions import NotFoundError
from app.schemas.auth import Identity
from app.schemas.client import Client, ClientCreate, ClientUpdate

logger = logging.getLogger(__name__)
router = APIRouter()

@router.get("", response_model=List[Client])
async def get_clients(
    db: AsyncSession = Depends(get_db),
    current_user: Identity = Depends(get_current_user)
) -> Any:
    """
    Retrieve clients.
    """
    return await client_crud.get_clients(db)

@router.post("", response_model=Client, status_code=status.HTTP_201_CREATED)
async def create_client(
    *,
    db: AsyncSession = Depends(get_db),
    client_in: ClientCreate,
    current_user: Identity = Depends(get_current_user)
) -> Any:
    """
    Create new client.
    """
    client = await client_crud.create_client(db, client_in)
    logger.info(f"Client created: {client.id}")
    return client

@router.get("/{client_id}", response_model=Client)
async def read_client(
    *,
    db: AsyncSession = Depends(get_db),
    client_id: str,
    current_user: Identity = Depends(get_current_user)
) -> Any:
    """
    Get client by ID.
    """
    client = await client_crud.get_client(db, client_id)
    if not client:
        raise NotFoundError("Client")
    return client

@router.put("/{client_id}", response_model=Client)
async def update_client(
    *,
    db: AsyncSession = Depends(get_db),
    client_id: str,
    client_in: ClientUpdate,
    current_user: Identity = Depends(get_current_user)
) -> Any:
    """
    Update client. Only the supplied fields change.
    """
    return await client_crud.update_client(db, client_id, client_in)

@router.delete("/{client_id}", response_model=Client)
async def delete_client(
    *,
    db: AsyncSession = Depends(get_db),
    client_id: str,
    current_user: Identity = Depends(get_current_user)
) -> Any:
    """
    Delete client.
    """
    client = await client_crud.delete_client(db, client_id)
    logger.info(f"Client deleted: {client_id}")
    return client
