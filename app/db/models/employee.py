from sqlalchemy import Column, Text, Date, Float, Enum as SQLEnum
from enum import Enum
from app.db.base_class import Base
from app.db.models._mixins import RecordMixin, status_enum_values

class EmployeeStatus(str, Enum):
    active = "Active"
    inactive = "Inactive"

class Employee(RecordMixin, Base):
    __tablename__ = "employees"

    name = Column(Text, nullable=False)
    email = Column(Text, nullable=False, unique=True)
    phone = Column(Text, nullable=False)
    position = Column(Text, nullable=False)
    # Free-text label matched against Department.name, not a foreign key
    department = Column(Text, nullable=False, index=True)
    hire_date = Column(Date, nullable=False)
    salary = Column(Float, nullable=False)
    status = Column(
        SQLEnum(EmployeeStatus, native_enum=False, values_callable=status_enum_values),
        nullable=False,
        default=EmployeeStatus.active,
    )
