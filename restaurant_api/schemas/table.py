from pydantic import BaseModel, Field
from typing import Optional

class TableCreate(BaseModel):
    table_name: Optional[str] = Field(None, max_length=100)
    capacity: Optional[int] = None

class TableSeat(BaseModel):
    reservation_id: Optional[int] = None

class TableResponse(BaseModel):
    table_id: int
    table_name: str
    capacity: int
    reservation_id: Optional[int] = None

    class Config:
        from_attributes = True
