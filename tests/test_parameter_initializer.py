import itertools
from collections import Counter

import numpy as np
import pytest

from env.slot_machine.ParameterInitializer import (ArmParams, CONFIGURED_STDDEV, DEFAULT_ARM_PARAMS,
                                                   fisher_yates_shuffle, init_arm_params, parse_configured_means)


class ConstantRng:
    def __init__(self, pick_last=False):
        self.pick_last = pick_last
        self.calls = []

    def integers(self, low, high):
        self.calls.append((low, high))
        return high - 1 if self.pick_last else low


def test_configured_means_are_used_verbatim():
    params = init_arm_params(DEFAULT_ARM_PARAMS, [300, 300, 300])
    assert params == [ArmParams(300, 150)] * 3


def test_configured_means_keep_their_order():
    params = init_arm_params(DEFAULT_ARM_PARAMS, [700, 100, 400], rng=ConstantRng())
    assert [p.mean for p in params] == [700, 100, 400]
    assert all(p.stddev == CONFIGURED_STDDEV for p in params)


@pytest.mark.parametrize("configured", [
    [300, 300],
    [300, 300, 300, 300],
    ["1", "x", "3"],
    [1.5, 2, 3],
    [float("nan"), 2, 3],
    [True, 2, 3],
    "abc",
    "",
    42,
])
def test_malformed_configuration_falls_back_to_shuffled_defaults(configured):
    params = init_arm_params(DEFAULT_ARM_PARAMS, configured, seed=1)
    assert sorted(params) == sorted(DEFAULT_ARM_PARAMS)


def test_fallback_uses_the_given_generator():
    rng = ConstantRng()
    params = init_arm_params(DEFAULT_ARM_PARAMS, [300, 300], rng=rng)
    assert rng.calls == [(0, 3), (0, 2)]
    assert params == [DEFAULT_ARM_PARAMS[1], DEFAULT_ARM_PARAMS[2], DEFAULT_ARM_PARAMS[0]]


def test_fisher_yates_swaps_from_the_last_index():
    assert fisher_yates_shuffle(["a", "b", "c"], ConstantRng()) == ["b", "c", "a"]
    assert fisher_yates_shuffle(["a", "b", "c"], ConstantRng(pick_last=True)) == ["a", "b", "c"]
    assert fisher_yates_shuffle([], ConstantRng()) == []


def test_fisher_yates_does_not_modify_its_input():
    items = [1, 2, 3, 4]
    fisher_yates_shuffle(items, np.random.default_rng(0))
    assert items == [1, 2, 3, 4]


def test_fisher_yates_is_uniform():
    rng = np.random.default_rng(123)
    counts = Counter(tuple(fisher_yates_shuffle([0, 1, 2], rng)) for _ in range(6000))
    assert set(counts) == set(itertools.permutations([0, 1, 2]))
    assert all(800 < count < 1200 for count in counts.values())


def test_stddev_travels_with_its_mean():
    base = [(1, 10), (2, 20), (3, 30), (4, 40)]
    for seed in range(10):
        params = init_arm_params(base, seed=seed)
        assert all(p.stddev == p.mean * 10 for p in params)


def test_same_seed_same_permutation():
    assert init_arm_params(seed=5) == init_arm_params(seed=5)


def test_default_params_used_when_base_is_none():
    assert sorted(init_arm_params(seed=0)) == sorted(DEFAULT_ARM_PARAMS)


@pytest.mark.parametrize("raw,expected", [
    (None, None),
    ([300, 500, 700], [300, 500, 700]),
    ((1.0, 2.0), [1, 2]),
    ("300,500,700", [300, 500, 700]),
    (" 300, 500 ,700 ", [300, 500, 700]),
    ("?means=300,500,700", [300, 500, 700]),
    ("round=2&means=1,2,3", [1, 2, 3]),
    ("?round=2", None),
    ("?means=300,abc", None),
    ("300,,700", None),
    ([], None),
])
def test_parse_configured_means(raw, expected):
    assert parse_configured_means(raw) == expected
