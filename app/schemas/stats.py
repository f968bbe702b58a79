from typing import List, Optional
from app.schemas.base import CamelModel


class SalaryStats(CamelModel):
    total_salaries: float = 0
    avg_salary: float = 0


class DepartmentCount(CamelModel):
    department: str
    count: int


class EmployeeStats(CamelModel):
    total_employees: int
    active_employees: int
    salary_stats: SalaryStats
    department_stats: List[DepartmentCount]


class ServiceRevenue(CamelModel):
    service: str
    value: float


class MonthlyRevenue(CamelModel):
    month: int
    revenue: float


class FinanceStats(CamelModel):
    total_revenue: float
    pending_amount: float
    overdue_amount: float
    revenue_by_service: List[ServiceRevenue]
    monthly_revenue: List[MonthlyRevenue]


class ServiceCount(CamelModel):
    service: Optional[str] = None
    count: int


class SourceCount(CamelModel):
    source: Optional[str] = None
    count: int


class RequestStats(CamelModel):
    total_requests: int
    service_breakdown: List[ServiceCount]
    source_breakdown: List[SourceCount]
    # Distinct requester emails; approximates active clients
    active_clients: int
    # Milliseconds between creation and last update of contacted requests
    avg_response_time: float
