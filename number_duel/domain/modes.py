"""Comparison modes.

The catalog is fixed: four modes, always in the same order.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from number_duel.domain.randomness import (
    UniformSource,
    default_uniform_source,
    random_choice,
)

GREATER = "greater"
LESSER = "lesser"
GREATER_ABS = "greaterAbs"
LESSER_ABS = "lesserAbs"

ABSOLUTE_MODE_IDS = (GREATER_ABS, LESSER_ABS)


@dataclass(frozen=True)
class Mode:
    mode_id: str
    name: str
    description: str
    rule: str

    @property
    def is_absolute(self) -> bool:
        """True when the mode compares distances from 0."""
        return self.mode_id in ABSOLUTE_MODE_IDS


MODES: Tuple[Mode, ...] = (
    Mode(
        mode_id=GREATER,
        name="Greater",
        description="The larger number wins.",
        rule="Choose the number with the greater value.",
    ),
    Mode(
        mode_id=LESSER,
        name="Lesser",
        description="The smaller number wins.",
        rule="Choose the number with the lesser value.",
    ),
    Mode(
        mode_id=GREATER_ABS,
        name="Greater Absolute",
        description="The number with the larger absolute value wins.",
        rule="Choose the number whose distance from 0 is greater.",
    ),
    Mode(
        mode_id=LESSER_ABS,
        name="Lesser Absolute",
        description="The number with the smaller absolute value wins.",
        rule="Choose the number whose distance from 0 is smaller.",
    ),
)


class ModeCatalog:
    def __init__(self, uniform: Optional[UniformSource] = None):
        self.uniform: UniformSource = uniform or default_uniform_source()

    def all_modes(self) -> Tuple[Mode, ...]:
        return MODES

    def random_mode(self) -> Mode:
        """Draw one of the four modes with probability 1/4 each."""
        return random_choice(self.uniform, MODES)

    def get_mode(self, mode_id: str) -> Mode:
        """Look a mode up by id

        Args:
            mode_id (str): One of greater, lesser, greaterAbs, lesserAbs

        Raises:
            KeyError: The id is not in the catalog

        Returns:
            Mode: The matching mode
        """
        for mode in MODES:
            if mode.mode_id == mode_id:
                return mode
        raise KeyError(f"Unknown mode: {mode_id}")
