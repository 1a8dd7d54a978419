import calendar
from datetime import datetime

from sqlalchemy.orm import Session

from ..config import settings
from ..errors import NotFoundError, ValidationError
from ..services import reservation_service
from .pipeline import PipelineContext
from .status import booked, check_transition, finished, parse_status, seated

REQUIRED_FIELDS = (
    "first_name",
    "last_name",
    "mobile_number",
    "reservation_date",
    "reservation_time",
    "people",
)

# Only PUT and DELETE /tables/{id}/seat may move a reservation into these
TABLE_MANAGED_STATUSES = (seated, finished)


def _now() -> datetime:
    return datetime.now()


def reservation_exists(db: Session, ctx: PipelineContext) -> PipelineContext:
    """Resolve the reservation named by the body (seating) or the path."""
    reservation_id = ctx.body.get("reservation_id") or ctx.params.get("reservation_id")
    reservation = reservation_service.read(db, reservation_id)
    if reservation is None:
        raise NotFoundError(f"Reservation {reservation_id} cannot be found.")
    return ctx.evolve(reservation=reservation)


def reservation_body_valid(db: Session, ctx: PipelineContext) -> PipelineContext:
    body = ctx.body
    for name in REQUIRED_FIELDS:
        if body.get(name) is None or body.get(name) == "":
            raise ValidationError(f"Reservation must include a {name}")
    if body["people"] < 1:
        raise ValidationError("people must be at least 1")

    status = body.get("status")
    if status and parse_status(status) is not booked:
        raise ValidationError(f"A new reservation cannot have status {status}")

    reservation_date = body["reservation_date"]
    reservation_time = body["reservation_time"]
    if reservation_time.tzinfo is not None:
        raise ValidationError("reservation_time must not include a timezone")
    if reservation_date.weekday() in settings.CLOSED_WEEKDAYS:
        raise ValidationError(f"The restaurant is closed on {calendar.day_name[reservation_date.weekday()]}s")
    if datetime.combine(reservation_date, reservation_time) < _now():
        raise ValidationError("Reservation must be made for a future date and time")
    if not settings.OPENING_TIME <= reservation_time <= settings.LAST_RESERVATION_TIME:
        raise ValidationError(
            f"Reservation time must be between {settings.OPENING_TIME:%H:%M} "
            f"and {settings.LAST_RESERVATION_TIME:%H:%M}"
        )
    return ctx.evolve(body={name: body[name] for name in REQUIRED_FIELDS})


def status_body_valid(db: Session, ctx: PipelineContext) -> PipelineContext:
    status = ctx.body.get("status")
    if not status:
        raise ValidationError("Body must include a status")
    status = parse_status(status)
    if status in TABLE_MANAGED_STATUSES:
        raise ValidationError(f"status {status.value} is set by seating or finishing a table")
    return ctx.evolve(body={"status": status})


def status_transition_valid(db: Session, ctx: PipelineContext) -> PipelineContext:
    check_transition(ctx.reservation.status, ctx.body["status"])
    return ctx
