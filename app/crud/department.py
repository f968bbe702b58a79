from typing import List
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError
from app.crud.base import create_record, raise_store_error
from app.db.models.department import Department
from app.schemas.department import DepartmentCreate

async def get_departments(db: AsyncSession) -> List[Department]:
    try:
        result = await db.execute(select(Department).order_by(Department.name))
        return list(result.scalars().all())
    except SQLAlchemyError as e:
        await raise_store_error(db, e, "get_departments", "Department")

async def create_department(db: AsyncSession, department: DepartmentCreate) -> Department:
    return await create_record(db, Department, department.model_dump(), unique_field="name")
