import logging
import re
from datetime import date
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from ..database import transaction
from ..models.reservation import Reservation, ReservationStatus

logger = logging.getLogger(__name__)

# Statuses hidden from the daily dashboard listing
INACTIVE_STATUSES = (ReservationStatus.finished.value, ReservationStatus.cancelled.value)


def read(db: Session, reservation_id: int) -> Optional[Reservation]:
    return db.query(Reservation).filter(Reservation.reservation_id == reservation_id).first()


def create(db: Session, data: dict) -> Reservation:
    reservation = Reservation(
        first_name=data["first_name"],
        last_name=data["last_name"],
        mobile_number=data["mobile_number"],
        reservation_date=data["reservation_date"],
        reservation_time=data["reservation_time"],
        people=data["people"],
        status=ReservationStatus.booked.value,
    )
    with transaction(db):
        db.add(reservation)
    db.refresh(reservation)
    logger.info("Reservation %s created for %s", reservation.reservation_id, reservation.reservation_date)
    return reservation


def _digits_only(column):
    stripped = column
    for char in ("(", ")", "-", " "):
        stripped = func.replace(stripped, char, "")
    return stripped


def list_reservations(db: Session, reservation_date: Optional[date] = None, mobile_number: Optional[str] = None) -> List[Reservation]:
    """List reservations.

    With `reservation_date` only that day's active reservations are returned,
    ordered by time. With `mobile_number` every reservation whose number
    contains the given digits matches, whatever its status.
    """
    q = db.query(Reservation)
    if reservation_date:
        return (
            q.filter(
                Reservation.reservation_date == reservation_date,
                Reservation.status.notin_(INACTIVE_STATUSES),
            )
            .order_by(Reservation.reservation_time.asc())
            .all()
        )
    if mobile_number:
        digits = re.sub(r"\D", "", mobile_number)
        if not digits:
            return []
        q = q.filter(_digits_only(Reservation.mobile_number).like(f"%{digits}%"))
    return q.order_by(Reservation.reservation_date.asc(), Reservation.reservation_time.asc()).all()


def update_status(db: Session, reservation: Reservation, status: ReservationStatus) -> Reservation:
    previous = reservation.status
    with transaction(db):
        reservation.status = status.value
        db.add(reservation)
    db.refresh(reservation)
    logger.info("Reservation %s moved from %s to %s", reservation.reservation_id, previous, reservation.status)
    return reservation
