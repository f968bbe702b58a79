from typing import Optional
from datetime import date
from pydantic import EmailStr, Field
from app.db.models.employee import EmployeeStatus
from app.schemas.base import BaseSchema, CamelModel

class EmployeeBase(CamelModel):
    name: str = Field(..., min_length=1)
    email: EmailStr
    phone: str = Field(..., min_length=1)
    position: str = Field(..., min_length=1)
    department: str = Field(..., min_length=1)
    hire_date: date
    salary: float = Field(..., ge=0)
    status: EmployeeStatus = EmployeeStatus.active

class EmployeeCreate(EmployeeBase):
    pass

class EmployeeUpdate(EmployeeBase):
    name: Optional[str] = Field(None, min_length=1)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, min_length=1)
    position: Optional[str] = Field(None, min_length=1)
    department: Optional[str] = Field(None, min_length=1)
    hire_date: Optional[date] = None
    salary: Optional[float] = Field(None, ge=0)
    status: Optional[EmployeeStatus] = None

class Employee(EmployeeBase, BaseSchema):
    email: str
