from app.schemas.base import BaseSchema, CamelModel, Message
from app.schemas.client import Client, ClientCreate, ClientUpdate
from app.schemas.employee import Employee, EmployeeCreate, EmployeeUpdate
from app.schemas.department import Department, DepartmentCreate, DepartmentStats
from app.schemas.invoice import Invoice, InvoiceCreate, InvoiceUpdate
from app.schemas.request import (
    Request, RequestCreate, RequestStatusUpdate,
    RequestListItem, RecentRequest, RequestCreated
)
from app.schemas.stats import (
    SalaryStats, DepartmentCount, EmployeeStats,
    ServiceRevenue, MonthlyRevenue, FinanceStats,
    ServiceCount, SourceCount, RequestStats
)

# Export all schemas
__all__ = [
    'BaseSchema', 'CamelModel', 'Message',
    'Client', 'ClientCreate', 'ClientUpdate',
    'Employee', 'EmployeeCreate', 'EmployeeUpdate',
    'Department', 'DepartmentCreate', 'DepartmentStats',
    'Invoice', 'InvoiceCreate', 'InvoiceUpdate',
    'Request', 'RequestCreate', 'RequestStatusUpdate',
    'RequestListItem', 'RecentRequest', 'RequestCreated',
    'SalaryStats', 'DepartmentCount', 'EmployeeStats',
    'ServiceRevenue', 'MonthlyRevenue', 'FinanceStats',
    'ServiceCount', 'SourceCount', 'RequestStats',
]
