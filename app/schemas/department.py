from pydantic import Field
from app.schemas.base import BaseSchema, CamelModel

class DepartmentBase(CamelModel):
    name: str = Field(..., min_length=1)
    budget: float = Field(0, ge=0)

class DepartmentCreate(DepartmentBase):
    pass

class Department(DepartmentBase, BaseSchema):
    pass

class DepartmentStats(CamelModel):
    name: str
    budget: float
    employee_count: int
