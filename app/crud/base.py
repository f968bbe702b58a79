"""
Shared record-store operations.

Every collection module (clients, employees, departments, invoices,
requests) delegates to these helpers so uniqueness and infrastructure
failures surface as the same error kinds everywhere. Updates are an
explicit load -> merge -> write sequence with last-writer-wins semantics.
"""

from typing import Any, Dict, Mapping, Optional, Type, TypeVar, Union
import logging

from pydantic import BaseModel
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import DuplicateKeyError, NotFoundError, StoreUnavailableError
from app.db.base_class import Base

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=Base)


def merge_partial(
    current: Mapping[str, Any],
    changes: Union[BaseModel, Mapping[str, Any]]
) -> Dict[str, Any]:
    """
    Merge caller-supplied changes into the current record values.

    Fields the caller did not send, and fields sent as ``None``, keep their
    current value. The inputs are not modified.
    """
    if isinstance(changes, BaseModel):
        update_data = changes.model_dump(exclude_unset=True)
    else:
        update_data = dict(changes)

    merged = dict(current)
    for field, value in update_data.items():
        if value is None:
            continue
        merged[field] = value
    return merged


def record_values(db_obj: Base) -> Dict[str, Any]:
    """Column values of a stored record as a plain dict."""
    return {column.key: getattr(db_obj, column.key) for column in db_obj.__table__.columns}


async def raise_store_error(
    db: AsyncSession,
    error: SQLAlchemyError,
    operation: str,
    entity: str,
    unique_field: Optional[str] = None
):
    await db.rollback()
    if isinstance(error, IntegrityError) and unique_field:
        logger.warning(f"Uniqueness violation in {operation}: {error}")
        raise DuplicateKeyError(entity, unique_field) from error
    logger.error(f"Database error in {operation}: {error}")
    raise StoreUnavailableError() from error


async def get_record(db: AsyncSession, model: Type[ModelType], record_id: str) -> Optional[ModelType]:
    try:
        result = await db.execute(select(model).where(model.id == record_id))
        return result.scalar_one_or_none()
    except SQLAlchemyError as e:
        await raise_store_error(db, e, f"get {model.__tablename__}", model.__name__)


async def count_records(db: AsyncSession, model: Type[ModelType], *criteria) -> int:
    try:
        query = select(func.count()).select_from(model)
        if criteria:
            query = query.where(*criteria)
        result = await db.execute(query)
        return result.scalar_one()
    except SQLAlchemyError as e:
        await raise_store_error(db, e, f"count {model.__tablename__}", model.__name__)


async def create_record(
    db: AsyncSession,
    model: Type[ModelType],
    data: Mapping[str, Any],
    unique_field: Optional[str] = None
) -> ModelType:
    try:
        db_obj = model(**data)
        db.add(db_obj)
        await db.commit()
        await db.refresh(db_obj)
        return db_obj
    except SQLAlchemyError as e:
        await raise_store_error(db, e, f"create {model.__tablename__}", model.__name__, unique_field)


async def update_record(
    db: AsyncSession,
    model: Type[ModelType],
    record_id: str,
    changes: Union[BaseModel, Mapping[str, Any]],
    unique_field: Optional[str] = None
) -> ModelType:
    db_obj = await get_record(db, model, record_id)
    if not db_obj:
        raise NotFoundError(model.__name__)

    current = record_values(db_obj)
    merged = merge_partial(current, changes)
    try:
        for field, value in merged.items():
            if field in current and value != current[field]:
                setattr(db_obj, field, value)
        await db.commit()
        await db.refresh(db_obj)
        return db_obj
    except SQLAlchemyError as e:
        await raise_store_error(db, e, f"update {model.__tablename__}", model.__name__, unique_field)


async def delete_record(db: AsyncSession, model: Type[ModelType], record_id: str) -> ModelType:
    db_obj = await get_record(db, model, record_id)
    if not db_obj:
        raise NotFoundError(model.__name__)

    try:
        await db.delete(db_obj)
        await db.commit()
        return db_obj
    except SQLAlchemyError as e:
        await raise_store_error(db, e, f"delete {model.__tablename__}", model.__name__)
