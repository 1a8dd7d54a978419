from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..database import get_db
from ..schemas.common import RequestSchema, ResponseSchema
from ..schemas.table import TableCreate, TableResponse, TableSeat
from ..services import table_service
from ..validation.pipeline import PipelineContext, run_pipeline
from ..validation.reservations import reservation_exists
from ..validation.tables import (
    seat_body_valid,
    table_and_reservation_valid,
    table_body_valid,
    table_exists,
    table_occupied,
)

router = APIRouter(prefix="/tables", tags=["tables"])


@router.post("", status_code=201, response_model=ResponseSchema[TableResponse])
def create_table(payload: RequestSchema[TableCreate], db: Session = Depends(get_db)):
    ctx = run_pipeline(db, PipelineContext(body=payload.body()), table_body_valid)
    table = table_service.create(db, ctx.body)
    return ResponseSchema(data=TableResponse.model_validate(table))


@router.get("", response_model=ResponseSchema[List[TableResponse]])
def list_tables(db: Session = Depends(get_db)):
    rows = table_service.list_tables(db)
    return ResponseSchema(data=[TableResponse.model_validate(t) for t in rows])


@router.put("/{table_id}/seat", response_model=ResponseSchema[TableResponse])
def seat_table(table_id: int, payload: RequestSchema[TableSeat], db: Session = Depends(get_db)):
    ctx = run_pipeline(
        db,
        PipelineContext(params={"table_id": table_id}, body=payload.body()),
        table_exists,
        seat_body_valid,
        reservation_exists,
        table_and_reservation_valid,
    )
    table = table_service.seat(db, ctx.table, ctx.reservation)
    return ResponseSchema(data=TableResponse.model_validate(table))


@router.delete("/{table_id}/seat", response_model=ResponseSchema[dict])
def finish_table(table_id: int, db: Session = Depends(get_db)):
    ctx = run_pipeline(db, PipelineContext(params={"table_id": table_id}), table_exists, table_occupied)
    table_service.finish(db, ctx.table)
    return ResponseSchema(data={})
