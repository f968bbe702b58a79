import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, String, DateTime


def generate_id() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def status_enum_values(enum_cls):
    # Persist the display values ("In Progress"), not the member names
    return [member.value for member in enum_cls]


class RecordMixin:
    """Columns shared by every stored record."""

    id = Column(String(36), primary_key=True, default=generate_id)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)
