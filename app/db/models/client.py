from sqlalchemy import Column, Text, Enum as SQLEnum
from enum import Enum
from app.db.base_class import Base
from app.db.models._mixins import RecordMixin, status_enum_values

class ClientStatus(str, Enum):
    active = "Active"
    inactive = "Inactive"

class Client(RecordMixin, Base):
    __tablename__ = "clients"

    name = Column(Text, nullable=False)
    email = Column(Text, nullable=False, unique=True)
    phone = Column(Text, nullable=False)
    company = Column(Text, nullable=False)
    status = Column(
        SQLEnum(ClientStatus, native_enum=False, values_callable=status_enum_values),
        nullable=False,
        default=ClientStatus.active,
    )
