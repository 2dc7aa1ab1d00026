"""Solutions to three problems from one Codeforces round."""

import heapq
from collections import Counter
from itertools import accumulate

_HAPPY_TOTALS = frozenset(side * side for side in range(1, 100, 2))


def jigsaw_happy_days(pieces):
    """Return how many days end with the puzzle forming a complete odd square."""
    return sum(1 for total in accumulate(pieces) if total in _HAPPY_TOTALS)


def replace_character(s):
    """Replace one character to minimise the number of distinct permutations of ``s``."""
    if not s:
        raise ValueError("string must not be empty")
    ranked = sorted(sorted(Counter(s).items()), key=lambda item: item[1])
    rare = ranked[0][0]
    common = ranked[-1][0]
    return s.replace(rare, common, 1)


def move_back_at_cost(a):
    """Return the lexicographically smallest array after moving elements to the back,
    each move adding one to the moved element."""
    kept = []
    moved = []
    for value in a:
        while kept and value < kept[-1]:
            heapq.heappush(moved, kept.pop() + 1)
        if kept and moved and moved[0] < value:
            heapq.heappush(moved, value + 1)
        else:
            kept.append(value)
    return kept + sorted(moved)