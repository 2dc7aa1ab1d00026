"""Solutions to a set of team-contest problems."""

import heapq
from collections import Counter
from itertools import product

_MOD = 10**9 + 7


def halving_operations(a):
    """Return the fewest halvings making ``a`` strictly increasing, or -1."""
    values = list(a)
    operations = 0
    for i in range(len(values) - 2, -1, -1):
        if values[i + 1] == 0:
            return -1
        while values[i] >= values[i + 1]:
            values[i] >>= 1
            operations += 1
    return operations


def maximum_sum_after_insertions(a, k):
    """Return the array sum after ``k`` insertions of the best subarray sum.

    The doubled best subarray is taken modulo 10**9 + 7 and a negative
    result is lifted into the range ``[0, 10**9 + 7)``.
    """
    best = current = total = 0
    for value in a:
        total += value
        current = current + value if current + value > 0 else 0
        best = max(best, current)
    doubled = best if k == 0 else best * pow(2, k, _MOD) % _MOD
    result = total - best + doubled
    if result < 0:
        result %= _MOD
    return result


def diy_rectangle(values):
    """Pick the largest axis-aligned rectangle from paired coordinates.

    Returns the four corners as ``(x, y)`` tuples, or ``None`` when fewer
    than four pairs of equal values exist.
    """
    seen = Counter()
    pairs = []
    for value in values:
        seen[value] += 1
        if seen[value] % 2 == 0:
            pairs.append(value)
    if len(pairs) < 4:
        return None
    pairs.sort()
    x_low, y_low = pairs[0], pairs[1]
    x_high, y_high = pairs[-2], pairs[-1]
    return [(x_low, y_low), (x_low, y_high), (x_high, y_low), (x_high, y_high)]


def three_activities(a, b, c):
    """Return the best total of one entry from each list on three distinct days."""
    def top(values):
        return heapq.nlargest(3, enumerate(values), key=lambda item: item[1])

    best = 0
    for (i, x), (j, y), (k, z) in product(top(a), top(b), top(c)):
        if i == j or i == k or j == k:
            continue
        best = max(best, x + y + z)
    return best