"""Number line shared by both cards.

The line spans whole numbers around the two plotted values and is divided
at the finest fractional unit either card uses (lcm of the denominator hints),
so quarters and thirds on the same line give twelfths.
"""

import math
from dataclasses import dataclass
from fractions import Fraction
from typing import List, Optional, Tuple

import numpy as np

from number_duel.domain.round_rules import Round

MAJOR_TICK_TOLERANCE = 1e-6
POSITION_MARGIN = 5.0
POSITION_SPAN = 90.0


@dataclass(frozen=True)
class Tick:
    value: float
    is_major: bool

    @property
    def label(self) -> Optional[int]:
        """Integer label, shown on whole-number ticks only."""
        return round(self.value) if self.is_major else None


@dataclass(frozen=True)
class NumberLine:
    domain_min: int
    domain_max: int
    step_denominator: int
    ticks: Tuple[Tick, ...]
    plot_left: float
    plot_right: float
    position_left: float
    position_right: float

    @property
    def step(self) -> float:
        return 1 / self.step_denominator


def gcd(a: int, b: int) -> int:
    """Greatest common divisor of |a| and |b|; 1 when both are 0."""
    return int(np.gcd(abs(a), abs(b))) or 1


def lcm(a: int, b: int) -> int:
    return abs(a * b) // gcd(a, b)


def plot_values(round_: Round) -> Tuple[Fraction, Fraction]:
    """Values to plot: raw for signed modes, absolute for the Abs modes."""
    if round_.mode.is_absolute:
        return round_.left.magnitude, round_.right.magnitude
    return round_.left.exact, round_.right.exact


def domain_for(first, second) -> Tuple[int, int]:
    """Integer domain around two values, at least 2 wide when both share an integer."""
    domain_min = math.floor(min(first, second))
    domain_max = math.ceil(max(first, second))
    if domain_min == domain_max:
        domain_min -= 1
        domain_max += 1
    return domain_min, domain_max


def build_ticks(domain_min: int, domain_max: int, step_denominator: int) -> List[Tick]:
    """Every multiple of 1/step_denominator in [domain_min, domain_max].

    Tick values are computed from integer numerators so the steps never drift.
    """
    numerators = np.arange(
        round(domain_min * step_denominator),
        round(domain_max * step_denominator) + 1,
    )
    values = numerators / step_denominator
    majors = np.abs(values - np.round(values)) < MAJOR_TICK_TOLERANCE
    return [
        Tick(value=float(value), is_major=bool(is_major))
        for value, is_major in zip(values, majors)
    ]


def position_percent(value, domain_min: int, domain_max: int) -> float:
    """Map value from [domain_min, domain_max] onto [5, 95] percent of the line."""
    if domain_max == domain_min:
        return 50.0
    t = (float(value) - domain_min) / (domain_max - domain_min)
    return POSITION_MARGIN + t * POSITION_SPAN


def layout_for(round_: Round, selection: Optional[int]) -> Optional[NumberLine]:
    """Compute the number line for a round

    Args:
        round_ (Round): The finalized round
        selection (Optional[int]): The side the player picked, if any

    Returns:
        Optional[NumberLine]: None until the player has picked a side
    """
    if selection is None:
        return None

    plot_left, plot_right = plot_values(round_)
    domain_min, domain_max = domain_for(plot_left, plot_right)
    step_denominator = lcm(round_.left.denom_hint or 1, round_.right.denom_hint or 1)

    return NumberLine(
        domain_min=domain_min,
        domain_max=domain_max,
        step_denominator=step_denominator,
        ticks=tuple(build_ticks(domain_min, domain_max, step_denominator)),
        plot_left=float(plot_left),
        plot_right=float(plot_right),
        position_left=position_percent(plot_left, domain_min, domain_max),
        position_right=position_percent(plot_right, domain_min, domain_max),
    )
