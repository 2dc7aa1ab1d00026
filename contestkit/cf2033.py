"""Solutions to two problems from one Codeforces round: Sakurako's games."""

from collections import defaultdict

_FIRST_PLAYER = "Sakurako"
_SECOND_PLAYER = "Kosuke"


def last_mover(n):
    """Return the name of the player who makes the last move for ``n``.

    The dot moves ``i`` units on move ``i``, so after move ``i`` it sits at
    distance ``i``.  The game ends on move ``n + 1``; Sakurako makes the odd
    moves and Kosuke the even ones.
    """
    final_move = n + 1
    if final_move % 2 == 0:
        return _SECOND_PLAYER
    return _FIRST_PLAYER


def water_magic(grid):
    """Return the fewest diagonal raises needed to make every cell non-negative."""
    lowest = defaultdict(int)
    for i, row in enumerate(grid):
        for j, value in enumerate(row):
            diagonal = i - j
            lowest[diagonal] = min(lowest[diagonal], value)
    return sum(-value for value in lowest.values())