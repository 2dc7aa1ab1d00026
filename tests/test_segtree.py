import itertools
import random

import pytest

from contestkit.segtree import (
    BinaryRangeTree,
    MaxSubarrayTree,
    ModAffineTree,
    max_subarray_sum,
    maximum_sum_subsequence,
)


def _best_subarray(values):
    return max(sum(values[i:j]) for i in range(len(values)) for j in range(i + 1, len(values) + 1))


def _longest_ones(bits):
    return max((len(list(group)) for key, group in itertools.groupby(bits) if key == 1), default=0)


def _best_non_adjacent(values):
    best = 0
    for mask in itertools.product((0, 1), repeat=len(values)):
        if any(a and b for a, b in zip(mask, mask[1:])):
            continue
        best = max(best, sum(v for v, take in zip(values, mask) if take))
    return best


def test_max_subarray_sum_sample():
    assert max_subarray_sum([2, -4, 3, -1, 2, -4, 3]) == 4


def test_max_subarray_sum_all_negative_picks_single_element():
    values = [-7, -3, -9]
    assert max_subarray_sum(values) == max(values)


@pytest.mark.parametrize("seed", range(4))
def test_max_subarray_tree_ranges(seed):
    rng = random.Random(seed)
    values = [rng.randint(-10, 10) for _ in range(rng.randint(1, 12))]
    tree = MaxSubarrayTree(values)
    for left in range(len(values)):
        for right in range(left, len(values)):
            assert tree.query(left, right) == _best_subarray(values[left:right + 1])


def test_max_subarray_tree_errors():
    with pytest.raises(ValueError):
        MaxSubarrayTree([])
    tree = MaxSubarrayTree([1, 2, 3])
    with pytest.raises(IndexError):
        tree.query(2, 3)
    with pytest.raises(IndexError):
        tree.query(2, 1)


@pytest.mark.parametrize("seed", range(6))
def test_binary_range_tree_against_list(seed):
    rng = random.Random(seed)
    n = rng.randint(1, 15)
    bits = [rng.randint(0, 1) for _ in range(n)]
    tree = BinaryRangeTree(bits)
    for _ in range(80):
        left = rng.randrange(n)
        right = rng.randrange(left, n)
        op = rng.randrange(4)
        if op == 0:
            value = rng.randint(0, 1)
            tree.assign(left, right, value)
            bits[left:right + 1] = [value] * (right - left + 1)
        elif op == 1:
            tree.flip(left, right)
            bits[left:right + 1] = [1 - b for b in bits[left:right + 1]]
        elif op == 2:
            assert tree.count_ones(left, right) == sum(bits[left:right + 1])
        else:
            assert tree.longest_ones(left, right) == _longest_ones(bits[left:right + 1])


def test_binary_range_tree_flip_twice_restores():
    bits = [1, 0, 1, 1, 0, 0, 1]
    tree = BinaryRangeTree(bits)
    tree.flip(1, 5)
    tree.flip(1, 5)
    assert tree.count_ones(0, 6) == sum(bits)
    assert tree.longest_ones(0, 6) == _longest_ones(bits)


def test_binary_range_tree_errors():
    with pytest.raises(ValueError):
        BinaryRangeTree([0, 2])
    tree = BinaryRangeTree([0, 1])
    with pytest.raises(ValueError):
        tree.assign(0, 1, 2)
    with pytest.raises(IndexError):
        tree.count_ones(0, 2)


@pytest.mark.parametrize("seed", range(6))
def test_mod_affine_tree_against_list(seed):
    rng = random.Random(seed)
    modulus = rng.choice([7, 571373, 10**9 + 7])
    n = rng.randint(1, 12)
    values = [rng.randint(0, 50) for _ in range(n)]
    tree = ModAffineTree(values, modulus)
    for _ in range(80):
        left = rng.randrange(n)
        right = rng.randrange(left, n)
        op = rng.randrange(3)
        value = rng.randint(0, 30)
        if op == 0:
            tree.multiply(left, right, value)
            values[left:right + 1] = [v * value for v in values[left:right + 1]]
        elif op == 1:
            tree.add(left, right, value)
            values[left:right + 1] = [v + value for v in values[left:right + 1]]
        else:
            assert tree.sum(left, right) == sum(values[left:right + 1]) % modulus


def test_mod_affine_tree_errors():
    with pytest.raises(ValueError):
        ModAffineTree([1, 2], 0)
    with pytest.raises(ValueError):
        ModAffineTree([], 5)
    tree = ModAffineTree([1, 2], 5)
    with pytest.raises(IndexError):
        tree.add(-1, 0, 3)


def test_maximum_sum_subsequence_examples():
    assert maximum_sum_subsequence([3, 5, 9], [[1, -2], [0, -3]]) == 21
    assert maximum_sum_subsequence([0, -1], [[0, -5]]) == 0


@pytest.mark.parametrize("seed", range(5))
def test_maximum_sum_subsequence_against_enumeration(seed):
    rng = random.Random(seed)
    nums = [rng.randint(-5, 9) for _ in range(rng.randint(1, 7))]
    queries = [[rng.randrange(len(nums)), rng.randint(-5, 9)] for _ in range(6)]
    current = list(nums)
    expected = 0
    for position, value in queries:
        current[position] = value
        expected += _best_non_adjacent(current)
    assert maximum_sum_subsequence(nums, queries) == expected % (10**9 + 7)


def test_maximum_sum_subsequence_errors():
    with pytest.raises(ValueError):
        maximum_sum_subsequence([], [])
    with pytest.raises(IndexError):
        maximum_sum_subsequence([1, 2], [[2, 5]])