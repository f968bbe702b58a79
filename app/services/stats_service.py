"""
Dashboard statistics.

Each call loads the current contents of the relevant collections and runs
the aggregation functions over them. Nothing is cached, so two calls with no
writes in between return the same figures.
"""

from datetime import date
from typing import List, Optional
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.crud import department as department_crud
from app.crud import employee as employee_crud
from app.crud import invoice as invoice_crud
from app.crud import request as request_crud
from app.schemas.department import DepartmentStats
from app.schemas.stats import EmployeeStats, FinanceStats, RequestStats
from app.services import aggregation

logger = logging.getLogger(__name__)


async def get_employee_stats(db: AsyncSession) -> EmployeeStats:
    employees = await employee_crud.get_employees(db)
    return aggregation.employee_stats(employees)


async def get_department_stats(db: AsyncSession) -> List[DepartmentStats]:
    departments = await department_crud.get_departments(db)
    if not departments:
        logger.info("No departments stored, reporting default departments")
    employees = await employee_crud.get_employees(db)
    return aggregation.department_stats(departments, employees)


async def get_finance_stats(db: AsyncSession, today: Optional[date] = None) -> FinanceStats:
    invoices = await invoice_crud.get_invoices(db)
    return aggregation.finance_stats(invoices, today=today)


async def get_request_stats(db: AsyncSession) -> RequestStats:
    requests = await request_crud.get_all_requests(db)
    return aggregation.request_stats(requests)
