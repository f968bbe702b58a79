from typing import List, Optional, Union, Dict, Any
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError
from app.crud.base import (
    get_record, count_records, create_record, update_record, delete_record, raise_store_error
)
from app.db.models.employee import Employee, EmployeeStatus
from app.schemas.employee import EmployeeCreate, EmployeeUpdate

async def get_employee(db: AsyncSession, employee_id: str) -> Optional[Employee]:
    return await get_record(db, Employee, employee_id)

async def get_employees(db: AsyncSession, status: Optional[EmployeeStatus] = None) -> List[Employee]:
    """
    Get employees sorted by name, optionally restricted to one status.
    """
    try:
        query = select(Employee).order_by(Employee.name)
        if status is not None:
            query = query.where(Employee.status == status)
        result = await db.execute(query)
        return list(result.scalars().all())
    except SQLAlchemyError as e:
        await raise_store_error(db, e, "get_employees", "Employee")

async def count_employees(db: AsyncSession, status: Optional[EmployeeStatus] = None) -> int:
    if status is None:
        return await count_records(db, Employee)
    return await count_records(db, Employee, Employee.status == status)

async def create_employee(db: AsyncSession, employee: EmployeeCreate) -> Employee:
    return await create_record(db, Employee, employee.model_dump(), unique_field="email")

async def update_employee(db: AsyncSession, employee_id: str, employee_in: Union[EmployeeUpdate, Dict[str, Any]]) -> Employee:
    return await update_record(db, Employee, employee_id, employee_in, unique_field="email")

async def delete_employee(db: AsyncSession, employee_id: str) -> Employee:
    return await delete_record(db, Employee, employee_id)
