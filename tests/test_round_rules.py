import pytest

from number_duel.domain.modes import MODES, ModeCatalog
from number_duel.domain.randomness import default_uniform_source
from number_duel.domain.rationals import (
    FRACTION_DENOMINATORS,
    MIXED_DENOMINATORS,
    RationalGenerator,
    make_decimal,
    make_fraction,
    make_mixed,
)
from number_duel.domain.round_rules import (
    MAX_ROUND_ATTEMPTS,
    Round,
    card_verdicts,
    evaluate_outcome,
    generate_round,
)
from tests.conftest import FixedCatalog, FixedGenerator, mode_by_id

SAMPLES = [
    make_decimal(1, 3, 0),
    make_decimal(-1, 2, 0.5),
    make_decimal(-1, 0, 0.75),
    make_fraction(-1, 1, 2),
    make_fraction(1, 2, 5),
    make_mixed(-1, 3, 1, 4),
    make_mixed(1, 1, 5, 8),
]


@pytest.mark.parametrize(
    "mode_id, left, right, expected",
    [
        ("greater", make_decimal(1, 3, 0), make_decimal(-1, 2, 0.5), 0),
        ("lesser", make_decimal(1, 3, 0), make_decimal(-1, 2, 0.5), 1),
        ("greaterAbs", make_fraction(-1, 3, 4), make_decimal(1, 0, 0.5), 0),
        ("lesserAbs", make_fraction(-1, 1, 2), make_decimal(1, 0, 0.75), 0),
        ("lesserAbs", make_mixed(-1, 1, 1, 2), make_fraction(1, 5, 6), 1),
    ],
)
def test_evaluate_outcome(mode_id, left, right, expected):
    assert evaluate_outcome(mode_by_id(mode_id), left, right) == expected


@pytest.mark.parametrize("mode", MODES, ids=lambda mode: mode.mode_id)
def test_outcome_flips_when_sides_swap(mode):
    for left in SAMPLES:
        for right in SAMPLES:
            if mode.is_absolute:
                distinct = left.magnitude != right.magnitude
            else:
                distinct = left.exact != right.exact
            if not distinct:
                continue
            winner = evaluate_outcome(mode, left, right)
            assert winner in (0, 1)
            assert evaluate_outcome(mode, right, left) == 1 - winner


@pytest.mark.parametrize("mode", MODES, ids=lambda mode: mode.mode_id)
def test_equal_values_tie(mode):
    # 1/2 from a fraction and 0.50 from a decimal are the same number
    assert evaluate_outcome(mode, make_fraction(1, 1, 2), make_decimal(1, 0, 0.5)) is None


@pytest.mark.parametrize("mode_id", ["greaterAbs", "lesserAbs"])
def test_opposite_signs_tie_in_absolute_modes(mode_id):
    left = make_mixed(-1, 2, 2, 8)
    right = make_decimal(1, 2, 0.25)
    assert evaluate_outcome(mode_by_id(mode_id), left, right) is None


def test_generate_round_stops_at_first_decisive_draw():
    catalog = FixedCatalog([mode_by_id("greater")])
    generator = FixedGenerator(
        [
            make_fraction(1, 1, 2),
            make_decimal(1, 0, 0.5),
            make_decimal(1, 3, 0),
            make_decimal(-1, 2, 0.5),
        ]
    )
    round_ = generate_round(catalog, generator)
    assert round_.attempts == 2
    assert round_.winner == 0
    assert not round_.exhausted
    assert round_.left.display == "3.00"
    assert round_.right.display == "-2.50"


def test_generate_round_flags_exhausted_cap():
    catalog = FixedCatalog([mode_by_id("lesser")])
    generator = FixedGenerator([make_fraction(1, 1, 2)])
    round_ = generate_round(catalog, generator)
    assert round_.exhausted
    assert round_.is_tie
    assert round_.attempts == MAX_ROUND_ATTEMPTS
    assert catalog.calls == MAX_ROUND_ATTEMPTS
    assert generator.calls == 2 * MAX_ROUND_ATTEMPTS


def test_generate_round_rejects_non_positive_cap():
    with pytest.raises(ValueError):
        generate_round(FixedCatalog(list(MODES)), FixedGenerator(SAMPLES), max_attempts=0)


def test_random_rounds_are_decisive():
    uniform = default_uniform_source(2024)
    catalog = ModeCatalog(uniform)
    generator = RationalGenerator(uniform)
    hints = {4} | set(FRACTION_DENOMINATORS) | set(MIXED_DENOMINATORS)
    for _ in range(300):
        round_ = generate_round(catalog, generator)
        assert 1 <= round_.attempts <= MAX_ROUND_ATTEMPTS
        assert not round_.exhausted
        assert round_.winner in (0, 1)
        assert round_.left.denom_hint in hints
        assert round_.right.denom_hint in hints


def _round(winner):
    return Round(
        mode=mode_by_id("greater"),
        left=make_decimal(1, 3, 0),
        right=make_decimal(-1, 2, 0.5),
        winner=winner,
    )


@pytest.mark.parametrize(
    "winner, selection, expected",
    [
        (0, None, ("pending", "pending")),
        (0, 0, ("correct", "dimmed")),
        (0, 1, ("missed", "incorrect")),
        (1, 1, ("dimmed", "correct")),
        (1, 0, ("incorrect", "missed")),
        (None, 0, ("pending", "pending")),
    ],
)
def test_card_verdicts(winner, selection, expected):
    assert card_verdicts(_round(winner), selection) == expected
