import random
from statistics import median

import pytest

from contestkit.cf2032 import circuit_lights, medians_partition, trinity_operations


@pytest.mark.parametrize("switches", [[0, 0], [1, 1], [0, 1, 1, 0], [1, 1, 1, 0, 0, 1]])
def test_circuit_bounds_are_consistent(switches):
    fewest, most = circuit_lights(switches)
    on = sum(switches)
    n = len(switches) // 2
    assert fewest == on % 2
    assert fewest <= most <= n
    assert most % 2 == fewest


def test_circuit_all_off():
    assert circuit_lights([0, 0, 0, 0]) == (0, 0)


def test_circuit_odd_length_rejected():
    with pytest.raises(ValueError):
        circuit_lights([0, 1, 0])


def test_medians_single_element():
    assert medians_partition(1, 1) == [1]


def test_medians_impossible_at_edge():
    assert medians_partition(3, 1) is None
    assert medians_partition(3, 3) is None


@pytest.mark.parametrize("n,k", [(3, 2), (15, 8), (7, 3), (9, 5), (11, 4)])
def test_medians_partition_is_valid(n, k):
    borders = medians_partition(n, k)
    assert borders is not None
    bounds = borders + [n + 1]
    parts = [list(range(start, end)) for start, end in zip(bounds, bounds[1:])]
    assert len(parts) % 2 == 1
    assert all(len(part) % 2 == 1 for part in parts)
    assert median(median(part) for part in parts) == k


def test_medians_parity_mismatch():
    assert medians_partition(4, 2) is None


def test_trinity_all_equal_needs_nothing():
    assert trinity_operations([5, 5, 5, 5]) == 0


def test_trinity_increasing_sequence():
    assert trinity_operations([1, 2, 3, 4, 5, 6, 7]) == 3


def test_trinity_order_does_not_matter():
    values = [4, 9, 1, 3, 7, 2, 8, 6]
    shuffled = values[:]
    random.Random(1).shuffle(shuffled)
    result = trinity_operations(values)
    assert trinity_operations(shuffled) == result
    assert 0 <= result <= len(values) - 2


def test_trinity_needs_three_values():
    with pytest.raises(ValueError):
        trinity_operations([1, 2])