from sqlalchemy import Column, Text, Date, Float, String, Enum as SQLEnum
from enum import Enum
from app.db.base_class import Base
from app.db.models._mixins import RecordMixin, status_enum_values

class InvoiceStatus(str, Enum):
    pending = "Pending"
    paid = "Paid"
    overdue = "Overdue"

class Invoice(RecordMixin, Base):
    __tablename__ = "invoices"

    client = Column(Text, nullable=False)
    amount = Column(Float, nullable=False)
    date = Column(Date, nullable=False, index=True)
    due_date = Column(Date, nullable=False)
    status = Column(
        SQLEnum(InvoiceStatus, native_enum=False, values_callable=status_enum_values),
        nullable=False,
        default=InvoiceStatus.pending,
    )
    service = Column(Text, nullable=False)
    # Weak reference: no foreign key, deleting the client leaves the invoice alone
    client_id = Column(String(36), nullable=True)
