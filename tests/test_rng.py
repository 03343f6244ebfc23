import itertools
import random
from collections import Counter

import pytest

from ballmaze.errors import RandomSourceExhausted
from ballmaze.rng import ScriptedRandom, make_rng, shuffle


def test_shuffle_is_in_place_and_returns_same_list() -> None:
    items = [1, 2, 3, 4, 5]
    out = shuffle(items, random.Random(3))
    assert out is items
    assert sorted(items) == [1, 2, 3, 4, 5]


def test_shuffle_walks_boundary_from_the_end() -> None:
    # Drawing the boundary itself every time leaves the order unchanged.
    assert shuffle(list("abcd"), ScriptedRandom([3, 2, 1])) == list("abcd")

    # Drawing 0 every time: swap(3,0) -> dbca, swap(2,0) -> cbda, swap(1,0) -> bcda.
    assert shuffle(list("abcd"), ScriptedRandom([0, 0, 0])) == list("bcda")


def test_shuffle_takes_n_minus_one_draws() -> None:
    src = ScriptedRandom([0, 0, 0, 0])
    shuffle([1, 2, 3, 4], src)
    assert src.remaining == 1


def test_shuffle_of_empty_and_single_item_draws_nothing() -> None:
    src = ScriptedRandom([])
    assert shuffle([], src) == []
    assert shuffle(["x"], src) == ["x"]


def test_shuffle_is_uniform() -> None:
    rng = random.Random(1234)
    trials = 10_000
    counts = Counter(tuple(shuffle([0, 1, 2, 3], rng)) for _ in range(trials))

    perms = list(itertools.permutations(range(4)))
    assert set(counts) == set(perms)

    expected = trials / len(perms)
    chi2 = sum((counts[p] - expected) ** 2 / expected for p in perms)
    # 23 degrees of freedom, p = 0.001
    assert chi2 < 49.73


def test_scripted_random_runs_out() -> None:
    src = ScriptedRandom([1])
    assert src.randrange(2) == 1
    with pytest.raises(RandomSourceExhausted):
        src.randrange(2)


def test_scripted_random_rejects_values_out_of_range() -> None:
    src = ScriptedRandom([5])
    with pytest.raises(RandomSourceExhausted):
        src.randrange(3)


def test_exhaustion_propagates_through_shuffle() -> None:
    with pytest.raises(RandomSourceExhausted):
        shuffle([1, 2, 3, 4], ScriptedRandom([0]))


def test_make_rng_is_reproducible() -> None:
    a = make_rng(99)
    b = make_rng(99)
    assert [a.randrange(1000) for _ in range(5)] == [b.randrange(1000) for _ in range(5)]
