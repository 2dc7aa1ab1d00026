"""Segment trees for range queries and range updates.

All indices are 0-based and ranges are inclusive on both ends.
"""

from dataclasses import dataclass

_MOD = 10**9 + 7


def _check_range(left, right, size):
    if not 0 <= left <= right < size:
        raise IndexError(f"invalid range [{left}, {right}] for size {size}")


@dataclass(frozen=True)
class _Span:
    best: int
    prefix: int
    suffix: int
    total: int

    @classmethod
    def single(cls, value):
        return cls(value, value, value, value)

    def __add__(self, other):
        return _Span(
            best=max(self.best, other.best, self.suffix + other.prefix),
            prefix=max(self.prefix, self.total + other.prefix),
            suffix=max(other.suffix, self.suffix + other.total),
            total=self.total + other.total,
        )


class MaxSubarrayTree:
    """Static tree answering maximum non-empty subarray sum on a range."""

    def __init__(self, values):
        values = list(values)
        if not values:
            raise ValueError("values must not be empty")
        self._size = len(values)
        self._nodes = [None] * (4 * self._size)
        self._build(1, 0, self._size - 1, values)

    def _build(self, node, lo, hi, values):
        if lo == hi:
            self._nodes[node] = _Span.single(values[lo])
            return
        mid = (lo + hi) // 2
        self._build(2 * node, lo, mid, values)
        self._build(2 * node + 1, mid + 1, hi, values)
        self._nodes[node] = self._nodes[2 * node] + self._nodes[2 * node + 1]

    def _query(self, node, lo, hi, left, right):
        if left <= lo and hi <= right:
            return self._nodes[node]
        mid = (lo + hi) // 2
        if right <= mid:
            return self._query(2 * node, lo, mid, left, right)
        if left > mid:
            return self._query(2 * node + 1, mid + 1, hi, left, right)
        return (self._query(2 * node, lo, mid, left, right)
                + self._query(2 * node + 1, mid + 1, hi, left, right))

    def query(self, left, right):
        """Return the largest sum of a non-empty subarray inside ``[left, right]``."""
        _check_range(left, right, self._size)
        return self._query(1, 0, self._size - 1, left, right).best


def max_subarray_sum(values):
    """Return the largest sum of a non-empty contiguous subarray."""
    tree = MaxSubarrayTree(values)
    return tree.query(0, tree._size - 1)


@dataclass(frozen=True)
class _Run:
    length: int
    count: int
    prefix: int
    suffix: int
    best: int

    @classmethod
    def filled(cls, length):
        return cls(length, length, length, length, length)

    @classmethod
    def blank(cls, length):
        return cls(length, 0, 0, 0, 0)

    def __add__(self, other):
        return _Run(
            length=self.length + other.length,
            count=self.count + other.count,
            prefix=self.prefix + (other.prefix if self.prefix == self.length else 0),
            suffix=other.suffix + (self.suffix if other.suffix == other.length else 0),
            best=max(self.best, other.best, self.suffix + other.prefix),
        )


class BinaryRangeTree:
    """A 0/1 sequence supporting range assignment, range flip and run queries."""

    def __init__(self, bits):
        bits = list(bits)
        if not bits:
            raise ValueError("bits must not be empty")
        if any(bit not in (0, 1) for bit in bits):
            raise ValueError("bits must be 0 or 1")
        self._size = len(bits)
        size = 4 * self._size
        self._runs = [None] * size  # (zeros, ones) per node
        self._cover = [None] * size
        self._flipped = [False] * size
        self._build(1, 0, self._size - 1, bits)

    def _build(self, node, lo, hi, bits):
        if lo == hi:
            one = _Run.filled(1) if bits[lo] else _Run.blank(1)
            zero = _Run.blank(1) if bits[lo] else _Run.filled(1)
            self._runs[node] = (zero, one)
            return
        mid = (lo + hi) // 2
        self._build(2 * node, lo, mid, bits)
        self._build(2 * node + 1, mid + 1, hi, bits)
        self._pull(node)

    def _pull(self, node):
        lz, lo_ = self._runs[2 * node]
        rz, ro = self._runs[2 * node + 1]
        self._runs[node] = (lz + rz, lo_ + ro)

    def _apply_flip(self, node):
        zero, one = self._runs[node]
        self._runs[node] = (one, zero)
        self._flipped[node] = not self._flipped[node]

    def _apply_cover(self, node, value):
        length = self._runs[node][0].length
        full, empty = _Run.filled(length), _Run.blank(length)
        self._runs[node] = (empty, full) if value else (full, empty)
        self._flipped[node] = False
        self._cover[node] = value

    def _push(self, node):
        value = self._cover[node]
        if value is not None:
            self._apply_cover(2 * node, value)
            self._apply_cover(2 * node + 1, value)
            self._cover[node] = None
        if self._flipped[node]:
            self._apply_flip(2 * node)
            self._apply_flip(2 * node + 1)
            self._flipped[node] = False

    def _update(self, node, lo, hi, left, right, apply):
        if left <= lo and hi <= right:
            apply(node)
            return
        self._push(node)
        mid = (lo + hi) // 2
        if left <= mid:
            self._update(2 * node, lo, mid, left, right, apply)
        if right > mid:
            self._update(2 * node + 1, mid + 1, hi, left, right, apply)
        self._pull(node)

    def _query(self, node, lo, hi, left, right):
        if left <= lo and hi <= right:
            return self._runs[node][1]
        self._push(node)
        mid = (lo + hi) // 2
        if right <= mid:
            return self._query(2 * node, lo, mid, left, right)
        if left > mid:
            return self._query(2 * node + 1, mid + 1, hi, left, right)
        return (self._query(2 * node, lo, mid, left, right)
                + self._query(2 * node + 1, mid + 1, hi, left, right))

    def assign(self, left, right, value):
        """Set every bit in ``[left, right]`` to ``value``."""
        if value not in (0, 1):
            raise ValueError("value must be 0 or 1")
        _check_range(left, right, self._size)
        self._update(1, 0, self._size - 1, left, right,
                     lambda node: self._apply_cover(node, value))

    def flip(self, left, right):
        """Invert every bit in ``[left, right]``."""
        _check_range(left, right, self._size)
        self._update(1, 0, self._size - 1, left, right, self._apply_flip)

    def count_ones(self, left, right):
        """Return the number of ones in ``[left, right]``."""
        _check_range(left, right, self._size)
        return self._query(1, 0, self._size - 1, left, right).count

    def longest_ones(self, left, right):
        """Return the length of the longest run of ones in ``[left, right]``."""
        _check_range(left, right, self._size)
        return self._query(1, 0, self._size - 1, left, right).best


class ModAffineTree:
    """Range multiply, range add and range sum, all modulo ``modulus``."""

    def __init__(self, values, modulus):
        if modulus <= 0:
            raise ValueError("modulus must be positive")
        values = list(values)
        if not values:
            raise ValueError("values must not be empty")
        self._mod = modulus
        self._size = len(values)
        size = 4 * self._size
        self._sums = [0] * size
        self._adds = [0] * size
        self._muls = [1] * size
        self._lengths = [0] * size
        self._build(1, 0, self._size - 1, values)

    def _build(self, node, lo, hi, values):
        self._lengths[node] = hi - lo + 1
        if lo == hi:
            self._sums[node] = values[lo] % self._mod
            return
        mid = (lo + hi) // 2
        self._build(2 * node, lo, mid, values)
        self._build(2 * node + 1, mid + 1, hi, values)
        self._pull(node)

    def _pull(self, node):
        self._sums[node] = (self._sums[2 * node] + self._sums[2 * node + 1]) % self._mod

    def _apply_add(self, node, value):
        mod = self._mod
        self._sums[node] = (self._sums[node] + value * self._lengths[node]) % mod
        self._adds[node] = (self._adds[node] + value) % mod

    def _apply_mul(self, node, value):
        mod = self._mod
        self._sums[node] = self._sums[node] * value % mod
        self._muls[node] = self._muls[node] * value % mod
        self._adds[node] = self._adds[node] * value % mod

    def _push(self, node):
        if self._muls[node] != 1:
            self._apply_mul(2 * node, self._muls[node])
            self._apply_mul(2 * node + 1, self._muls[node])
            self._muls[node] = 1
        if self._adds[node]:
            self._apply_add(2 * node, self._adds[node])
            self._apply_add(2 * node + 1, self._adds[node])
            self._adds[node] = 0

    def _update(self, node, lo, hi, left, right, apply, value):
        if left <= lo and hi <= right:
            apply(node, value)
            return
        self._push(node)
        mid = (lo + hi) // 2
        if left <= mid:
            self._update(2 * node, lo, mid, left, right, apply, value)
        if right > mid:
            self._update(2 * node + 1, mid + 1, hi, left, right, apply, value)
        self._pull(node)

    def _query(self, node, lo, hi, left, right):
        if left <= lo and hi <= right:
            return self._sums[node]
        self._push(node)
        mid = (lo + hi) // 2
        total = 0
        if left <= mid:
            total += self._query(2 * node, lo, mid, left, right)
        if right > mid:
            total += self._query(2 * node + 1, mid + 1, hi, left, right)
        return total % self._mod

    def multiply(self, left, right, value):
        """Multiply every element of ``[left, right]`` by ``value``."""
        _check_range(left, right, self._size)
        self._update(1, 0, self._size - 1, left, right, self._apply_mul, value % self._mod)

    def add(self, left, right, value):
        """Add ``value`` to every element of ``[left, right]``."""
        _check_range(left, right, self._size)
        self._update(1, 0, self._size - 1, left, right, self._apply_add, value % self._mod)

    def sum(self, left, right):
        """Return the sum of ``[left, right]`` modulo the tree's modulus."""
        _check_range(left, right, self._size)
        return self._query(1, 0, self._size - 1, left, right)


def _combine_states(l, r):
    # Index bit 1: leftmost element may be taken; bit 0: rightmost may be taken.
    return (
        max(l[0] + r[2], l[1] + r[0]),
        max(l[0] + r[3], l[1] + r[1]),
        max(l[2] + r[2], l[3] + r[0]),
        max(l[2] + r[3], l[3] + r[1]),
    )


class _NonAdjacentTree:
    def __init__(self, values):
        self._size = len(values)
        self._states = [(0, 0, 0, 0)] * (4 * self._size)
        self._build(1, 0, self._size - 1, values)

    def _build(self, node, lo, hi, values):
        if lo == hi:
            self._states[node] = (0, 0, 0, max(0, values[lo]))
            return
        mid = (lo + hi) // 2
        self._build(2 * node, lo, mid, values)
        self._build(2 * node + 1, mid + 1, hi, values)
        self._states[node] = _combine_states(self._states[2 * node], self._states[2 * node + 1])

    def set(self, position, value, node=1, lo=0, hi=None):
        if hi is None:
            hi = self._size - 1
        if lo == hi:
            self._states[node] = (0, 0, 0, max(0, value))
            return
        mid = (lo + hi) // 2
        if position <= mid:
            self.set(position, value, 2 * node, lo, mid)
        else:
            self.set(position, value, 2 * node + 1, mid + 1, hi)
        self._states[node] = _combine_states(self._states[2 * node], self._states[2 * node + 1])

    @property
    def best(self):
        return self._states[1][3]


def maximum_sum_subsequence(nums, queries):
    """Apply each ``(position, value)`` update and sum the best non-adjacent
    subsequence sums after every update, modulo 10**9 + 7."""
    nums = list(nums)
    if not nums:
        raise ValueError("nums must not be empty")
    tree = _NonAdjacentTree(nums)
    total = 0
    for position, value in queries:
        if not 0 <= position < len(nums):
            raise IndexError(f"position {position} out of range")
        tree.set(position, value)
        total = (total + tree.best) % _MOD
    return total