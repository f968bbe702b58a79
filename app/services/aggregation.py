"""
Dashboard aggregations.

Pure functions over record sequences: nothing here touches the database or
keeps state between calls, so every result reflects exactly the records
passed in. Records only need the attributes of the corresponding ORM models
(``status``, ``salary``, ``amount``, ...). Empty inputs produce zeros and
empty lists, never ``None``.
"""

from collections import Counter, defaultdict
from datetime import date
from typing import Dict, Iterable, List, NamedTuple, Optional, Sequence, Tuple

from app.db.models.employee import EmployeeStatus
from app.db.models.invoice import InvoiceStatus
from app.db.models.request import RequestStatus
from app.schemas.department import DepartmentStats
from app.schemas.stats import (
    DepartmentCount,
    EmployeeStats,
    FinanceStats,
    MonthlyRevenue,
    RequestStats,
    SalaryStats,
    ServiceCount,
    ServiceRevenue,
    SourceCount,
)


class DefaultDepartment(NamedTuple):
    name: str
    budget: float


# Reported when no Department records exist
DEFAULT_DEPARTMENTS: Tuple[DefaultDepartment, ...] = (
    DefaultDepartment("Development", 720000),
    DefaultDepartment("Design", 336000),
    DefaultDepartment("Administration", 300000),
    DefaultDepartment("Quality", 240000),
    DefaultDepartment("Sales", 350000),
)


def _by_count(item: Tuple[Optional[str], int]) -> Tuple[int, bool, str]:
    # Highest count first, then key ascending with missing keys last
    key, count = item
    return (-count, key is None, key or "")


def _active(employees: Iterable) -> List:
    return [e for e in employees if e.status == EmployeeStatus.active]


def active_counts_by_department(employees: Iterable) -> Dict[str, int]:
    """Lookup of department label -> number of Active employees."""
    return dict(Counter(e.department for e in _active(employees)))


def employee_stats(employees: Sequence) -> EmployeeStats:
    active = _active(employees)

    total_salaries = sum(e.salary or 0 for e in active)
    avg_salary = total_salaries / len(active) if active else 0

    counts = active_counts_by_department(active)
    department_stats = [
        DepartmentCount(department=name, count=count)
        for name, count in sorted(counts.items(), key=_by_count)
    ]

    return EmployeeStats(
        total_employees=len(employees),
        active_employees=len(active),
        salary_stats=SalaryStats(total_salaries=total_salaries, avg_salary=avg_salary),
        department_stats=department_stats,
    )


def department_stats(departments: Sequence, employees: Iterable) -> List[DepartmentStats]:
    """
    Budget and Active headcount per department.

    Employees are joined to departments by name equality through a lookup
    built once per call. Without stored departments the default table is
    reported in its declared order.
    """
    counts = active_counts_by_department(employees)

    if departments:
        source = sorted(departments, key=lambda d: d.name)
    else:
        source = DEFAULT_DEPARTMENTS

    return [
        DepartmentStats(
            name=department.name,
            budget=department.budget or 0,
            employee_count=counts.get(department.name, 0),
        )
        for department in source
    ]


def finance_stats(invoices: Iterable, today: Optional[date] = None) -> FinanceStats:
    """
    Revenue figures over all invoices.

    Monthly revenue only counts Paid invoices dated within the calendar year
    of ``today`` (defaults to the current date).
    """
    year = (today or date.today()).year

    total_revenue = 0.0
    pending_amount = 0.0
    overdue_amount = 0.0
    by_service: Dict[str, float] = defaultdict(float)
    by_month: Dict[int, float] = defaultdict(float)

    for invoice in invoices:
        amount = invoice.amount or 0
        total_revenue += amount
        if invoice.status == InvoiceStatus.pending:
            pending_amount += amount
        elif invoice.status == InvoiceStatus.overdue:
            overdue_amount += amount
        elif invoice.status == InvoiceStatus.paid:
            by_service[invoice.service] += amount
            if invoice.date is not None and invoice.date.year == year:
                by_month[invoice.date.month] += amount

    return FinanceStats(
        total_revenue=total_revenue,
        pending_amount=pending_amount,
        overdue_amount=overdue_amount,
        revenue_by_service=[
            ServiceRevenue(service=service, value=value)
            for service, value in sorted(by_service.items())
        ],
        monthly_revenue=[
            MonthlyRevenue(month=month, revenue=revenue)
            for month, revenue in sorted(by_month.items())
        ],
    )


def response_time_ms(request) -> float:
    delta = request.updated_at - request.created_at
    return delta.total_seconds() * 1000


def request_stats(requests: Sequence) -> RequestStats:
    services = Counter(r.service for r in requests)
    sources = Counter(r.found_us for r in requests)

    # TODO: confirm with product whether this should count linked Client
    # records; distinct requester emails over-count repeat leads.
    active_clients = len({r.email for r in requests})

    contacted = [r for r in requests if r.status == RequestStatus.contacted]
    avg_response_time = (
        sum(response_time_ms(r) for r in contacted) / len(contacted) if contacted else 0
    )

    return RequestStats(
        total_requests=len(requests),
        service_breakdown=[
            ServiceCount(service=service, count=count)
            for service, count in sorted(services.items(), key=_by_count)
        ],
        source_breakdown=[
            SourceCount(source=source, count=count)
            for source, count in sorted(sources.items(), key=_by_count)
        ],
        active_clients=active_clients,
        avg_response_time=avg_response_time,
    )
