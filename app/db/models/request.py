from sqlalchemy import Column, Text, DateTime, Enum as SQLEnum
from enum import Enum
from app.db.base_class import Base
from app.db.models._mixins import RecordMixin, status_enum_values, utcnow

class RequestStatus(str, Enum):
    new = "New"
    contacted = "Contacted"
    in_progress = "In Progress"
    completed = "Completed"
    cancelled = "Cancelled"

class Request(RecordMixin, Base):
    __tablename__ = "requests"

    name = Column(Text, nullable=False)
    email = Column(Text, nullable=False, index=True)
    phone = Column(Text, nullable=False)
    service = Column(Text, nullable=True)
    description = Column(Text, nullable=False)
    status = Column(
        SQLEnum(RequestStatus, native_enum=False, values_callable=status_enum_values, length=20),
        nullable=False,
        default=RequestStatus.new,
    )
    date = Column(DateTime(timezone=True), nullable=False, default=utcnow, index=True)
    found_us = Column(Text, nullable=True)
