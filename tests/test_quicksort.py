import random

import pytest

from behavioral.quicksort import (
    HoareQuicksortStrategy,
    LomutoQuicksortStrategy,
    QuicksortContext,
    get_quicksort_strategy,
    random_sample,
)

STRATEGIES = [HoareQuicksortStrategy, LomutoQuicksortStrategy]


@pytest.mark.parametrize("strategy_class", STRATEGIES)
@pytest.mark.parametrize("values", [
    [],
    [1],
    [2, 1],
    [5, 2, 3, 1, 5, 4],
    [3, 3, 3, 3],
    list(range(50)),
    list(range(50, 0, -1)),
    ["Swift", "Ruby", "C", "NASM"],
    [2.7, -1.5, 0.0, 2.2],
])
def test_sort_matches_sorted(strategy_class, values):
    array = list(values)
    result = strategy_class().sort(array)

    assert result is array
    assert array == sorted(values)


@pytest.mark.parametrize("strategy_class", STRATEGIES)
def test_random_input_with_duplicates(strategy_class):
    rng = random.Random(7)
    for _ in range(20):
        values = [rng.randint(0, 10) for _ in range(rng.randint(0, 40))]
        array = list(values)
        strategy_class().sort(array)
        assert array == sorted(values)


@pytest.mark.parametrize("strategy_class", STRATEGIES)
def test_large_sorted_input_does_not_hit_recursion_limit(strategy_class):
    values = list(range(5000))
    array = list(values)
    strategy_class().sort(array)
    assert array == values


@pytest.mark.parametrize("strategy_class", STRATEGIES)
def test_quicksorted_only_touches_the_given_range(strategy_class):
    array = [9, 8, 4, 3, 2, 1, 0]
    strategy_class().quicksorted(array, 2, 5)
    assert array == [9, 8, 1, 2, 3, 4, 0]


@pytest.mark.parametrize("strategy_class", STRATEGIES)
def test_out_of_range_bounds_raise(strategy_class):
    with pytest.raises(IndexError):
        strategy_class().quicksorted([3, 1, 2], 0, 3)
    with pytest.raises(IndexError):
        strategy_class().quicksorted([3, 1, 2], -1, 2)


def test_hoare_partition_returns_split_point():
    array = [5, 3, 8, 1, 9, 2]
    pivot_point = HoareQuicksortStrategy().partition(array, 0, len(array) - 1)

    assert 0 <= pivot_point < len(array) - 1
    assert max(array[:pivot_point + 1]) <= min(array[pivot_point + 1:])


def test_lomuto_partition_places_pivot():
    array = [5, 3, 8, 1, 9, 4]
    pivot_point = LomutoQuicksortStrategy().partition(array, 0, len(array) - 1)

    assert array[pivot_point] == 4
    assert all(value <= 4 for value in array[:pivot_point])
    assert all(value > 4 for value in array[pivot_point + 1:])


def test_get_quicksort_strategy_by_name():
    assert isinstance(get_quicksort_strategy("hoare"), HoareQuicksortStrategy)
    assert isinstance(get_quicksort_strategy(" Lomuto "), LomutoQuicksortStrategy)
    with pytest.raises(ValueError):
        get_quicksort_strategy("bubble")


def test_context_switches_strategy_at_runtime():
    context = QuicksortContext()
    assert isinstance(context.strategy, HoareQuicksortStrategy)

    array = [3, 1, 2]
    context.quicksorted_with(LomutoQuicksortStrategy(), array)

    assert isinstance(context.strategy, LomutoQuicksortStrategy)
    assert array == [1, 2, 3]


def test_random_sample_respects_bounds():
    sample = random_sample(4, 10, random.Random(1))
    assert len(sample) == 4
    assert all(0 <= value <= 10 for value in sample)
