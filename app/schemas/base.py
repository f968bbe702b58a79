from datetime import datetime
from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Accepts snake_case or camelCase input and serializes as camelCase."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class BaseSchema(CamelModel):
    id: str
    created_at: datetime
    updated_at: datetime


class Message(CamelModel):
    message: str
