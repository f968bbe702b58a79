from typing import List, Any
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
import logging
from app.core.auth import get_current_user
from app.core.database import get_db
from app.crud import employee as employee_crud
from app.crud import department as department_crud
from app.schemas.auth import Identity
from app.schemas.base import Message
from app.schemas.department import Department, DepartmentCreate, DepartmentStats
from app.schemas.employee import Employee, EmployeeCreate, EmployeeUpdate
from app.schemas.stats import EmployeeStats
from app.services import stats_service

logger = logging.getLogger(__name__)
router = APIRouter()

@router.get("", response_model=List[Employee])
async def get_employees(
    db: AsyncSession = Depends(get_db),
    current_user: Identity = Depends(get_current_user)
) -> Any:
    """
    Retrieve employees sorted by name.
    """
    return await employee_crud.get_employees(db)

@router.post("", response_model=Employee, status_code=status.HTTP_201_CREATED)
async def create_employee(
    *,
    db: AsyncSession = Depends(get_db),
    employee_in: EmployeeCreate,
    current_user: Identity = Depends(get_current_user)
) -> Any:
    """
    Create new employee.
    """
    employee = await employee_crud.create_employee(db, employee_in)
    logger.info(f"Employee created: {employee.id}")
    return employee

@router.get("/departments", response_model=List[DepartmentStats])
async def get_departments(
    db: AsyncSession = Depends(get_db),
    current_user: Identity = Depends(get_current_user)
) -> Any:
    """
    Departments with their budget and number of active employees.
    """
    return await stats_service.get_department_stats(db)

@router.post("/departments", response_model=Department, status_code=status.HTTP_201_CREATED)
async def create_department(
    *,
    db: AsyncSession = Depends(get_db),
    department_in: DepartmentCreate,
    current_user: Identity = Depends(get_current_user)
) -> Any:
    """
    Create new department.
    """
    department = await department_crud.create_department(db, department_in)
    logger.info(f"Department created: {department.name}")
    return department

@router.get("/stats", response_model=EmployeeStats)
async def get_employee_stats(
    db: AsyncSession = Depends(get_db),
    current_user: Identity = Depends(get_current_user)
) -> Any:
    """
    Headcount, salary totals and active employees per department.
    """
    return await stats_service.get_employee_stats(db)

@router.put("/{employee_id}", response_model=Employee)
async def update_employee(
    *,
    db: AsyncSession = Depends(get_db),
    employee_id: str,
    employee_in: EmployeeUpdate,
    current_user: Identity = Depends(get_current_user)
) -> Any:
    """
    Update employee. Only the supplied fields change.
    """
    return await employee_crud.update_employee(db, employee_id, employee_in)

@router.delete("/{employee_id}", response_model=Message)
async def delete_employee(
    *,
    db: AsyncSession = Depends(get_db),
    employee_id: str,
    current_user: Identity = Depends(get_current_user)
) -> Any:
    """
    Delete employee.
    """
    await employee_crud.delete_employee(db, employee_id)
    logger.info(f"Employee deleted: {employee_id}")
    return {"message": "Employee deleted"}
