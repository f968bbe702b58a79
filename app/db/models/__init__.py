from app.db.models.client import Client, ClientStatus
from app.db.models.employee import Employee, EmployeeStatus
from app.db.models.department import Department
from app.db.models.invoice import Invoice, InvoiceStatus
from app.db.models.request import Request, RequestStatus

# Export all models and enums
__all__ = [
    'Client', 'ClientStatus',
    'Employee', 'EmployeeStatus',
    'Department',
    'Invoice', 'InvoiceStatus',
    'Request', 'RequestStatus',
]
