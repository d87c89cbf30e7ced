import random
from collections import Counter

import pytest

from skyraid.rng_service import RNGService


def test_rng_determinism():
    a = RNGService(12345)
    b = RNGService(12345)
    assert [a.random() for _ in range(5)] == [b.random() for _ in range(5)]
    assert a.weighted_choice({"x": 1, "y": 1}) == b.weighted_choice({"x": 1, "y": 1})


def test_rng_independent_of_global():
    """Service does not share state with the global random module."""
    rng = RNGService(999)
    random.seed(999)
    assert rng.random() == random.random()
    random.seed(111)
    assert rng.random() != random.random()


def test_weighted_choice_uses_cumulative_order():
    weights = {"ship": 40, "heli": 40, "tank": 20}
    # roll = r * 100 walked over 40 / 80 / 100
    for r, expected in [(0.0, "ship"), (0.39, "ship"), (0.4, "heli"), (0.79, "heli"), (0.8, "tank"), (0.999, "tank")]:
        rng = RNGService(0)
        rng._generator.random = lambda r=r: r
        assert rng.weighted_choice(weights) == expected


def test_weighted_choice_distribution():
    rng = RNGService(2024)
    counts = Counter(rng.weighted_choice({"ship": 40, "heli": 40, "tank": 20}) for _ in range(5000))
    assert 0.16 < counts["tank"] / 5000 < 0.24
    assert 0.35 < counts["ship"] / 5000 < 0.45


def test_weighted_choice_rejects_empty_weights():
    with pytest.raises(ValueError):
        RNGService(1).weighted_choice({"a": 0})
