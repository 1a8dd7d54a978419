from pydantic import BaseModel, Field
from datetime import date, time, datetime
from typing import Optional

class ReservationCreate(BaseModel):
    first_name: Optional[str] = Field(None, max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)
    mobile_number: Optional[str] = Field(None, max_length=30)
    reservation_date: Optional[date] = None
    reservation_time: Optional[time] = None
    people: Optional[int] = None
    status: Optional[str] = None

class ReservationStatusUpdate(BaseModel):
    status: Optional[str] = None

class ReservationResponse(BaseModel):
    reservation_id: int
    first_name: str
    last_name: str
    mobile_number: str
    reservation_date: date
    reservation_time: time
    people: int
    status: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
