from typing import Generic, Optional, TypeVar
from pydantic import BaseModel

T = TypeVar("T")


class RequestSchema(BaseModel, Generic[T]):
    """Incoming `{"data": {...}}` envelope; a missing `data` key is treated as empty."""
    data: Optional[T] = None

    def body(self) -> dict:
        return self.data.model_dump() if self.data is not None else {}


class ResponseSchema(BaseModel, Generic[T]):
    data: T
