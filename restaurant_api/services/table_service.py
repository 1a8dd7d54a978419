import logging
from typing import List, Optional

from sqlalchemy import update
from sqlalchemy.orm import Session

from ..database import transaction
from ..errors import ValidationError
from ..models.reservation import Reservation, ReservationStatus
from ..models.table import Table

logger = logging.getLogger(__name__)


def read(db: Session, table_id: int) -> Optional[Table]:
    return db.query(Table).filter(Table.table_id == table_id).first()


def create(db: Session, data: dict) -> Table:
    table = Table(table_name=data["table_name"], capacity=data["capacity"], reservation_id=None)
    with transaction(db):
        db.add(table)
    db.refresh(table)
    logger.info("Table %s (%s) created with capacity %s", table.table_id, table.table_name, table.capacity)
    return table


def list_tables(db: Session) -> List[Table]:
    return db.query(Table).order_by(Table.table_name.asc()).all()


def seat(db: Session, table: Table, reservation: Reservation) -> Table:
    """Occupy `table` with `reservation` and mark the reservation seated in one transaction.

    The table write only applies while the table is still free, so a request
    that lost a race against another seating fails instead of overwriting it.
    """
    with transaction(db):
        result = db.execute(
            update(Table)
            .where(Table.table_id == table.table_id, Table.reservation_id.is_(None))
            .values(reservation_id=reservation.reservation_id)
        )
        if result.rowcount != 1:
            raise ValidationError("Table must not be occupied")
        result = db.execute(
            update(Reservation)
            .where(
                Reservation.reservation_id == reservation.reservation_id,
                Reservation.status == ReservationStatus.booked.value,
            )
            .values(status=ReservationStatus.seated.value)
        )
        if result.rowcount != 1:
            raise ValidationError("Reservation is already seated")
    db.refresh(table)
    logger.info("Reservation %s seated at table %s", reservation.reservation_id, table.table_id)
    return table


def finish(db: Session, table: Table) -> None:
    """Free `table` and mark the reservation it held as finished in one transaction."""
    reservation_id = table.reservation_id
    with transaction(db):
        result = db.execute(
            update(Table)
            .where(
                Table.table_id == table.table_id,
                Table.reservation_id.isnot(None),
                Table.reservation_id == reservation_id,
            )
            .values(reservation_id=None)
        )
        if result.rowcount != 1:
            raise ValidationError("Table was not occupied but must be occupied")
        db.execute(
            update(Reservation)
            .where(Reservation.reservation_id == reservation_id)
            .values(status=ReservationStatus.finished.value)
        )
    logger.info("Table %s finished reservation %s", table.table_id, reservation_id)
