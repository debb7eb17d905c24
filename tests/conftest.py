from typing import Iterable, List

from number_duel.domain.modes import MODES, Mode
from number_duel.domain.rationals import Rational


def scripted(values: Iterable[float]):
    """Uniform source that replays the given deviates in order."""
    return iter(values).__next__


def mode_by_id(mode_id: str) -> Mode:
    return next(mode for mode in MODES if mode.mode_id == mode_id)


class FixedCatalog:
    def __init__(self, modes: List[Mode]):
        self.modes = list(modes)
        self.calls = 0

    def random_mode(self) -> Mode:
        mode = self.modes[min(self.calls, len(self.modes) - 1)]
        self.calls += 1
        return mode


class FixedGenerator:
    def __init__(self, rationals: List[Rational]):
        self.rationals = list(rationals)
        self.calls = 0

    def generate(self) -> Rational:
        rational = self.rationals[self.calls % len(self.rationals)]
        self.calls += 1
        return rational

