from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ..database import get_db
from ..schemas.common import RequestSchema, ResponseSchema
from ..schemas.reservation import ReservationCreate, ReservationResponse, ReservationStatusUpdate
from ..services import reservation_service
from ..validation.pipeline import PipelineContext, run_pipeline
from ..validation.reservations import (
    reservation_body_valid,
    reservation_exists,
    status_body_valid,
    status_transition_valid,
)

router = APIRouter(prefix="/reservations", tags=["reservations"])


@router.post("", status_code=201, response_model=ResponseSchema[ReservationResponse])
def create_reservation(payload: RequestSchema[ReservationCreate], db: Session = Depends(get_db)):
    ctx = run_pipeline(db, PipelineContext(body=payload.body()), reservation_body_valid)
    reservation = reservation_service.create(db, ctx.body)
    return ResponseSchema(data=ReservationResponse.model_validate(reservation))


@router.get("", response_model=ResponseSchema[List[ReservationResponse]])
def list_reservations(
    reservation_date: Optional[date] = Query(None, alias="date"),
    mobile_number: Optional[str] = None,
    db: Session = Depends(get_db),
):
    rows = reservation_service.list_reservations(db, reservation_date=reservation_date, mobile_number=mobile_number)
    return ResponseSchema(data=[ReservationResponse.model_validate(r) for r in rows])


@router.get("/{reservation_id}", response_model=ResponseSchema[ReservationResponse])
def read_reservation(reservation_id: int, db: Session = Depends(get_db)):
    ctx = run_pipeline(db, PipelineContext(params={"reservation_id": reservation_id}), reservation_exists)
    return ResponseSchema(data=ReservationResponse.model_validate(ctx.reservation))


@router.put("/{reservation_id}/status", response_model=ResponseSchema[ReservationResponse])
def update_reservation_status(
    reservation_id: int,
    payload: RequestSchema[ReservationStatusUpdate],
    db: Session = Depends(get_db),
):
    ctx = run_pipeline(
        db,
        PipelineContext(params={"reservation_id": reservation_id}, body=payload.body()),
        reservation_exists,
        status_body_valid,
        status_transition_valid,
    )
    reservation = reservation_service.update_status(db, ctx.reservation, ctx.body["status"])
    return ResponseSchema(data=ReservationResponse.model_validate(reservation))
