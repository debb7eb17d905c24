from pydantic import BaseModel
from enum import Enum
from uuid import UUID
from typing import Literal, Optional, List


class VerdictModel(str, Enum):
    pending = "pending"  # no pick yet, or the round has no winner
    correct = "correct"
    incorrect = "incorrect"
    missed = "missed"  # not picked, but it was the winner
    dimmed = "dimmed"


class ModeModel(BaseModel):
    mode_id: str
    name: str
    description: str
    rule: str

    class Config:
        from_attributes = True


class RationalModel(BaseModel):
    display: str
    value: float
    denom_hint: int
    kind: str

    class Config:
        from_attributes = True


class RoundModel(BaseModel):
    mode: ModeModel
    left: RationalModel
    right: RationalModel
    winner: int | None  # hidden (None) until the player has picked
    attempts: int
    exhausted: bool


class PickModel(BaseModel):
    side: Literal[0, 1]


class TickModel(BaseModel):
    value: float
    is_major: bool
    label: int | None

    class Config:
        from_attributes = True


class NumberLineModel(BaseModel):
    domain_min: int
    domain_max: int
    step_denominator: int
    ticks: List[TickModel]
    plot_left: float
    plot_right: float
    position_left: float
    position_right: float


class SessionStateModel(BaseModel):
    session_id: UUID
    round: RoundModel
    selection: int | None
    verdicts: Optional[List[VerdictModel]] = None
    number_line: Optional[NumberLineModel] = None
