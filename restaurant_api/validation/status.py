from typing import Dict, FrozenSet

from ..errors import ValidationError
from ..models.reservation import ReservationStatus

booked = ReservationStatus.booked
seated = ReservationStatus.seated
finished = ReservationStatus.finished
cancelled = ReservationStatus.cancelled

ALLOWED_TRANSITIONS: Dict[ReservationStatus, FrozenSet[ReservationStatus]] = {
    booked: frozenset({seated, cancelled}),
    seated: frozenset({finished}),
    finished: frozenset(),
    cancelled: frozenset(),
}


def parse_status(value) -> ReservationStatus:
    try:
        return ReservationStatus(value)
    except ValueError:
        raise ValidationError(f"unknown status: {value}")


def check_transition(current, new) -> ReservationStatus:
    """Return the target status, or raise if `current` may not move to it."""
    current = parse_status(current)
    new = parse_status(new)
    if new in ALLOWED_TRANSITIONS[current]:
        return new
    if current is finished:
        raise ValidationError("a finished reservation cannot be updated")
    if current is cancelled:
        raise ValidationError("a cancelled reservation cannot be updated")
    if current is seated and new is seated:
        raise ValidationError("Reservation is already seated")
    raise ValidationError(f"cannot change reservation status from {current.value} to {new.value}")
