from sqlalchemy import Column, Text, Float
from app.db.base_class import Base
from app.db.models._mixins import RecordMixin

class Department(RecordMixin, Base):
    __tablename__ = "departments"

    name = Column(Text, nullable=False, unique=True)
    budget = Column(Float, nullable=False, default=0)
