from sqlalchemy import Column, Integer, String, Date, Time, TIMESTAMP, CheckConstraint, func
from ..database import Base
import enum

class ReservationStatus(str, enum.Enum):
    booked = "booked"
    seated = "seated"
    finished = "finished"
    cancelled = "cancelled"

class Reservation(Base):
    __tablename__ = "reservations"
    __table_args__ = (
        CheckConstraint("people >= 1", name="ck_reservations_people_positive"),
    )

    reservation_id = Column(Integer, primary_key=True, index=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    mobile_number = Column(String(30), nullable=False, index=True)
    reservation_date = Column(Date, nullable=False, index=True)
    reservation_time = Column(Time, nullable=False)
    people = Column(Integer, nullable=False)
    status = Column(String(20), nullable=False, default=ReservationStatus.booked.value)
    created_at = Column(TIMESTAMP, server_default=func.current_timestamp())
    updated_at = Column(TIMESTAMP, server_default=func.current_timestamp(), onupdate=func.current_timestamp())
