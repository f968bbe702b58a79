from typing import Any, List, Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError
from app.crud.base import (
    get_record, count_records, create_record, update_record, delete_record, raise_store_error
)
from app.db.models.request import Request
from app.schemas.request import RequestCreate
from app.services.request_lifecycle import parse_status
from app.services.request_query import RequestFilter, build_request_query, build_recent_query

async def get_request(db: AsyncSession, request_id: str) -> Optional[Request]:
    return await get_record(db, Request, request_id)

async def get_requests(db: AsyncSession, request_filter: Optional[RequestFilter] = None) -> List[Any]:
    """
    Get requests matching the filter, newest first, as listing projections.
    """
    query = build_request_query(request_filter or RequestFilter())
    try:
        result = await db.execute(query)
        return list(result.all())
    except SQLAlchemyError as e:
        await raise_store_error(db, e, "get_requests", "Request")

async def get_recent_requests(db: AsyncSession) -> List[Any]:
    try:
        result = await db.execute(build_recent_query())
        return list(result.all())
    except SQLAlchemyError as e:
        await raise_store_error(db, e, "get_recent_requests", "Request")

async def get_all_requests(db: AsyncSession) -> List[Request]:
    try:
        result = await db.execute(select(Request))
        return list(result.scalars().all())
    except SQLAlchemyError as e:
        await raise_store_error(db, e, "get_all_requests", "Request")

async def count_requests(db: AsyncSession) -> int:
    return await count_records(db, Request)

async def create_request(db: AsyncSession, request_in: RequestCreate) -> Request:
    data = request_in.model_dump()
    if data.get("date") is None:
        # Let the column default stamp the creation time
        data.pop("date", None)
    return await create_record(db, Request, data)

async def update_request_status(db: AsyncSession, request_id: str, status: Any) -> Request:
    """
    Move a request to a new status.

    The target is checked against the status vocabulary first; an invalid
    value raises InvalidStatusError without reading or writing the store.
    """
    target = parse_status(status)
    return await update_record(db, Request, request_id, {"status": target})

async def delete_request(db: AsyncSession, request_id: str) -> Request:
    return await delete_record(db, Request, request_id)
