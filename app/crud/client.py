from typing import List, Optional, Union, Dict, Any
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError
from app.crud.base import (
    get_record, create_record, update_record, delete_record, raise_store_error
)
from app.db.models.client import Client
from app.schemas.client import ClientCreate, ClientUpdate

async def get_client(db: AsyncSession, client_id: str) -> Optional[Client]:
    return await get_record(db, Client, client_id)

async def get_clients(db: AsyncSession) -> List[Client]:
    try:
        result = await db.execute(select(Client).order_by(Client.created_at))
        return list(result.scalars().all())
    except SQLAlchemyError as e:
        await raise_store_error(db, e, "get_clients", "Client")

async def create_client(db: AsyncSession, client: ClientCreate) -> Client:
    return await create_record(db, Client, client.model_dump(), unique_field="email")

async def update_client(db: AsyncSession, client_id: str, client_in: Union[ClientUpdate, Dict[str, Any]]) -> Client:
    return await update_record(db, Client, client_id, client_in, unique_field="email")

async def delete_client(db: AsyncSession, client_id: str) -> Client:
    # Invoices that weak-reference this client are left untouched
    return await delete_record(db, Client, client_id)
