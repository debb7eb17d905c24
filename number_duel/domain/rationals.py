"""Rational quantities shown on the two cards.

Three shapes are generated with equal probability:

- decimal: quarters between -9.75 and 9.75, shown with two decimals ("-3.50")
- fraction: a proper fraction such as "-3/8"
- mixed: a mixed number such as "-2 1/3" (sign on the whole part only)

Values are kept as exact ``Fraction`` objects. ``denom_hint`` is the finest
fractional unit the quantity was generated at and drives the tick spacing
of the number line.
"""

from dataclasses import dataclass
from fractions import Fraction
from typing import Optional, Tuple

from number_duel.domain.randomness import (
    UniformSource,
    default_uniform_source,
    random_choice,
    random_int_inclusive,
    random_sign,
)

DECIMAL = "decimal"
FRACTION = "fraction"
MIXED = "mixed"

SHAPES = (DECIMAL, FRACTION, MIXED)

DECIMAL_WHOLE_RANGE = (0, 9)
DECIMAL_PARTS: Tuple[Fraction, ...] = (
    Fraction(0),
    Fraction(1, 4),
    Fraction(1, 2),
    Fraction(3, 4),
)
DECIMAL_DENOM_HINT = 4

FRACTION_DENOMINATORS = (2, 3, 4, 5, 6, 8, 10)

MIXED_WHOLE_RANGE = (1, 5)
MIXED_DENOMINATORS = (2, 3, 4, 5, 6, 8)


@dataclass(frozen=True)
class Rational:
    display: str
    exact: Fraction
    denom_hint: int
    kind: str

    @property
    def value(self) -> float:
        return float(self.exact)

    @property
    def magnitude(self) -> Fraction:
        return abs(self.exact)


def make_decimal(sign: int, whole: int, decimal) -> Rational:
    """Build a decimal-shaped rational

    Args:
        sign (int): -1 or 1
        whole (int): Whole part, 0..9
        decimal: Fractional part, one of 0, 0.25, 0.5, 0.75

    Returns:
        Rational: e.g. sign=-1, whole=0, decimal=0.25 gives "-0.25"
    """
    exact = sign * (Fraction(whole) + Fraction(decimal))
    # Fraction(0) carries no sign, so zero always formats as "0.00"
    return Rational(
        display=f"{float(exact):.2f}",
        exact=exact,
        denom_hint=DECIMAL_DENOM_HINT,
        kind=DECIMAL,
    )


def make_fraction(sign: int, numerator: int, denominator: int) -> Rational:
    prefix = "-" if sign == -1 and numerator > 0 else ""
    return Rational(
        display=f"{prefix}{numerator}/{denominator}",
        exact=sign * Fraction(numerator, denominator),
        denom_hint=denominator,
        kind=FRACTION,
    )


def make_mixed(sign: int, whole: int, numerator: int, denominator: int) -> Rational:
    whole_part = f"-{whole}" if sign == -1 else f"{whole}"
    return Rational(
        display=f"{whole_part} {numerator}/{denominator}",
        exact=sign * (whole + Fraction(numerator, denominator)),
        denom_hint=denominator,
        kind=MIXED,
    )


class RationalGenerator:
    def __init__(self, uniform: Optional[UniformSource] = None):
        self.uniform: UniformSource = uniform or default_uniform_source()

    def generate(self) -> Rational:
        """Pick a shape uniformly, then sample a rational of that shape."""
        shape = random_choice(self.uniform, SHAPES)
        if shape == DECIMAL:
            return self.generate_decimal()
        if shape == FRACTION:
            return self.generate_fraction()
        return self.generate_mixed()

    def generate_decimal(self) -> Rational:
        sign = random_sign(self.uniform)
        whole = random_int_inclusive(self.uniform, *DECIMAL_WHOLE_RANGE)
        decimal = random_choice(self.uniform, DECIMAL_PARTS)
        return make_decimal(sign, whole, decimal)

    def generate_fraction(self) -> Rational:
        denominator = random_choice(self.uniform, FRACTION_DENOMINATORS)
        numerator = random_int_inclusive(self.uniform, 1, denominator - 1)
        sign = random_sign(self.uniform)
        return make_fraction(sign, numerator, denominator)

    def generate_mixed(self) -> Rational:
        whole = random_int_inclusive(self.uniform, *MIXED_WHOLE_RANGE)
        denominator = random_choice(self.uniform, MIXED_DENOMINATORS)
        numerator = random_int_inclusive(self.uniform, 1, denominator - 1)
        sign = random_sign(self.uniform)
        return make_mixed(sign, whole, numerator, denominator)
