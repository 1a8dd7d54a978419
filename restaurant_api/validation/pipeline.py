"""Ordered pre-mutation checks.

A request builds a `PipelineContext` from its path params and body, then
`run_pipeline` hands it to each step in turn. A step either raises one of the
errors in `restaurant_api.errors` or returns a new context carrying whatever
it resolved (validated body, looked-up table or reservation). Steps never
modify the context they receive.
"""
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Mapping, Optional

from sqlalchemy.orm import Session

from ..models.reservation import Reservation
from ..models.table import Table


@dataclass(frozen=True)
class PipelineContext:
    params: Mapping[str, Any] = field(default_factory=dict)
    body: Mapping[str, Any] = field(default_factory=dict)
    table: Optional[Table] = None
    reservation: Optional[Reservation] = None

    def evolve(self, **changes) -> "PipelineContext":
        return replace(self, **changes)


Step = Callable[[Session, PipelineContext], PipelineContext]


def run_pipeline(db: Session, ctx: PipelineContext, *steps: Step) -> PipelineContext:
    for step in steps:
        ctx = step(db, ctx)
    return ctx
