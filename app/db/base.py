from app.db.base_class import Base
from app.db.models.client import Client
from app.db.models.employee import Employee
from app.db.models.department import Department
from app.db.models.invoice import Invoice
from app.db.models.request import Request

# All models are imported here for SQLAlchemy to discover them
