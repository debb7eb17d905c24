"""Round rules that are independent from HTTP and sessions.

Rule of thumb:
- OK: comparisons, retry bounds, verdicts derived from a round.
- Not OK: sessions, logging, datetime.now(), the global random state.

Sides are plain ints: 0 is card A (left), 1 is card B (right).
``None`` stands for a tie, i.e. no winner.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from number_duel.domain.modes import GREATER, GREATER_ABS, LESSER, LESSER_ABS, Mode, ModeCatalog
from number_duel.domain.rationals import Rational, RationalGenerator

LEFT = 0
RIGHT = 1
SIDES = (LEFT, RIGHT)

MAX_ROUND_ATTEMPTS = 100

VERDICT_PENDING = "pending"
VERDICT_CORRECT = "correct"
VERDICT_INCORRECT = "incorrect"
VERDICT_MISSED = "missed"
VERDICT_DIMMED = "dimmed"


@dataclass(frozen=True)
class Round:
    mode: Mode
    left: Rational
    right: Rational
    winner: Optional[int]
    attempts: int = 1
    exhausted: bool = False

    @property
    def is_tie(self) -> bool:
        return self.winner is None

    def rational(self, side: int) -> Rational:
        return self.left if side == LEFT else self.right


def _higher(first, second) -> Optional[int]:
    if first > second:
        return LEFT
    if second > first:
        return RIGHT
    return None


def _lower(first, second) -> Optional[int]:
    if first < second:
        return LEFT
    if second < first:
        return RIGHT
    return None


def evaluate_outcome(mode: Mode, left: Rational, right: Rational) -> Optional[int]:
    """Decide which side wins under the given mode

    Args:
        mode (Mode): Comparison rule
        left (Rational): Card A
        right (Rational): Card B

    Returns:
        Optional[int]: 0 (A), 1 (B), or None on a tie
    """
    if mode.mode_id == GREATER:
        return _higher(left.exact, right.exact)
    if mode.mode_id == LESSER:
        return _lower(left.exact, right.exact)
    if mode.mode_id == GREATER_ABS:
        return _higher(left.magnitude, right.magnitude)
    if mode.mode_id == LESSER_ABS:
        return _lower(left.magnitude, right.magnitude)
    return None


def generate_round(
    catalog: ModeCatalog,
    generator: RationalGenerator,
    *,
    max_attempts: int = MAX_ROUND_ATTEMPTS,
) -> Round:
    """Draw mode and cards until the outcome is not a tie.

    The loop stops at the first decisive draw or after ``max_attempts``.
    When the cap is reached and the last draw is still tied, that draw is
    returned with ``exhausted=True`` and ``winner=None``.
    """
    if max_attempts < 1:
        raise ValueError("max_attempts must be at least 1")

    for attempt in range(1, max_attempts + 1):
        mode = catalog.random_mode()
        left = generator.generate()
        right = generator.generate()
        winner = evaluate_outcome(mode, left, right)
        if winner is not None:
            return Round(mode=mode, left=left, right=right, winner=winner, attempts=attempt)

    return Round(
        mode=mode,
        left=left,
        right=right,
        winner=None,
        attempts=max_attempts,
        exhausted=True,
    )


def card_verdict(round_: Round, selection: Optional[int], side: int) -> str:
    """Verdict for one card once the player has picked.

    A tied round has no correct card, so every card stays pending.
    """
    if selection is None or round_.winner is None:
        return VERDICT_PENDING
    if selection == side:
        return VERDICT_CORRECT if round_.winner == side else VERDICT_INCORRECT
    if round_.winner == side:
        return VERDICT_MISSED
    return VERDICT_DIMMED


def card_verdicts(round_: Round, selection: Optional[int]) -> Tuple[str, str]:
    return (
        card_verdict(round_, selection, LEFT),
        card_verdict(round_, selection, RIGHT),
    )
