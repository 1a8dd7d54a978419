from sqlalchemy import Column, Integer, String, ForeignKey, TIMESTAMP, CheckConstraint, func
from ..database import Base

class Table(Base):
    __tablename__ = "tables"
    __table_args__ = (
        CheckConstraint("capacity >= 1", name="ck_tables_capacity_positive"),
    )

    table_id = Column(Integer, primary_key=True, index=True)
    table_name = Column(String(100), nullable=False)
    capacity = Column(Integer, nullable=False)
    # non-null while the table is occupied by this reservation
    reservation_id = Column(Integer, ForeignKey("reservations.reservation_id"), nullable=True)
    created_at = Column(TIMESTAMP, server_default=func.current_timestamp())
    updated_at = Column(TIMESTAMP, server_default=func.current_timestamp(), onupdate=func.current_timestamp())