from itertools import combinations

import pytest

from contestkit.cf2037 import (
    ardent_flames,
    intercepted_dimensions,
    kachina_binary_string,
    sharky_power_ups,
    superultra_permutation,
    twice_score,
)


def _is_prime(x):
    return x > 1 and all(x % d for d in range(2, int(x**0.5) + 1))


def test_twice_four_equal():
    assert twice_score([1, 1, 1, 1]) == 2


@pytest.mark.parametrize("values", [[1, 2, 3], [2, 2, 3, 3, 3], [5] * 7, []])
def test_twice_bounded_and_order_free(values):
    score = twice_score(values)
    assert 0 <= score <= len(values) // 2
    assert twice_score(list(reversed(values))) == score


@pytest.mark.parametrize("values", [[1, 1, 2], [3, 3, 4, 5, 6, 7, 8, 9, 9, 9, 10], [2, 1, 4, 5, 3, 3]])
def test_intercepted_dimensions_found(values):
    result = intercepted_dimensions(values)
    assert result is not None
    rows, cols = result
    assert rows * cols == len(values) - 2
    assert rows in values and cols in values


def test_intercepted_dimensions_missing():
    assert intercepted_dimensions([2, 2, 2]) is None


@pytest.mark.parametrize("n", [2, 3, 4])
def test_superultra_small_impossible(n):
    assert superultra_permutation(n) is None


@pytest.mark.parametrize("n", [5, 6, 8, 11, 20])
def test_superultra_sums_are_composite(n):
    perm = superultra_permutation(n)
    assert sorted(perm) == list(range(1, n + 1))
    assert not any(_is_prime(x + y) for x, y in zip(perm, perm[1:]))


def test_sharky_example():
    hurdles = [(7, 14), (30, 40)]
    power_ups = [(2, 2), (3, 1), (3, 5), (18, 2), (22, 32)]
    assert sharky_power_ups(hurdles, power_ups, 50) == 4


def test_sharky_impossible():
    assert sharky_power_ups([(2, 3)], [], 10) == -1


def test_sharky_no_hurdles():
    assert sharky_power_ups([], [(2, 3)], 10) == 0


def _oracle(hidden):
    def ask(left, right):
        part = hidden[left - 1:right]
        return sum(1 for i, j in combinations(range(len(part)), 2)
                   if part[i] == "0" and part[j] == "1")
    return ask


@pytest.mark.parametrize("hidden", ["01", "001", "0101", "0011"])
def test_kachina_recovers_string(hidden):
    assert kachina_binary_string(len(hidden), _oracle(hidden)) == hidden


@pytest.mark.parametrize("hidden", ["10", "1100", "1111"])
def test_kachina_impossible(hidden):
    assert kachina_binary_string(len(hidden), _oracle(hidden)) is None


def test_ardent_unit_health():
    assert ardent_flames([1, 1, 1], [1, 2, 3], 2, 1) == 1


def test_ardent_too_many_required():
    assert ardent_flames([5, 5], [1, 2], 3, 3) == -1


def test_ardent_monotone_in_health():
    weak = ardent_flames([4, 6, 8], [1, 3, 5], 3, 2)
    strong = ardent_flames([8, 12, 16], [1, 3, 5], 3, 2)
    assert weak > 0
    assert strong >= weak