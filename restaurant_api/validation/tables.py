from sqlalchemy.orm import Session

from ..errors import NotFoundError, ValidationError
from ..services import table_service
from .pipeline import PipelineContext
from .status import check_transition, seated


def table_body_valid(db: Session, ctx: PipelineContext) -> PipelineContext:
    table_name = ctx.body.get("table_name")
    capacity = ctx.body.get("capacity")
    if not table_name:
        raise ValidationError("Table must include a table_name")
    if len(table_name) < 2:
        raise ValidationError("The table_name must be at least 2 characters long")
    if capacity is None or capacity < 1:
        raise ValidationError("Table must have a capacity of at least 1")
    return ctx.evolve(body={"table_name": table_name, "capacity": capacity})


def table_exists(db: Session, ctx: PipelineContext) -> PipelineContext:
    table_id = ctx.params["table_id"]
    table = table_service.read(db, table_id)
    if table is None:
        raise NotFoundError(f"Table {table_id} cannot be found.")
    return ctx.evolve(table=table)


def seat_body_valid(db: Session, ctx: PipelineContext) -> PipelineContext:
    reservation_id = ctx.body.get("reservation_id")
    if not reservation_id:
        raise ValidationError("Body must include a reservation_id")
    return ctx.evolve(body={"reservation_id": reservation_id})


def table_and_reservation_valid(db: Session, ctx: PipelineContext) -> PipelineContext:
    """Capacity, occupancy and reservation status checks before seating."""
    table, reservation = ctx.table, ctx.reservation
    if table.capacity < reservation.people:
        raise ValidationError("Table capacity must be more than the number of people in the reservation")
    if table.reservation_id is not None:
        raise ValidationError("Table must not be occupied")
    check_transition(reservation.status, seated)
    return ctx


def table_occupied(db: Session, ctx: PipelineContext) -> PipelineContext:
    if ctx.table.reservation_id is None:
        raise ValidationError("Table was not occupied but must be occupied")
    return ctx
