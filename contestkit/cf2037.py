"""Solutions to six problems from one Codeforces round."""

import heapq
from collections import Counter
from dataclasses import dataclass

_ATTACK_LIMIT = 10**9 + 1


def twice_score(a):
    """Return how many disjoint pairs of equal values can be taken from ``a``."""
    return sum(count // 2 for count in Counter(a).values())


def intercepted_dimensions(values):
    """Recover ``(n, m)`` of a grid from its shuffled input, or ``None`` if not found.

    The shuffled input holds ``n``, ``m`` and the ``n * m`` grid entries.
    """
    values = list(values)
    cells = len(values) - 2
    counts = Counter(values)
    i = 1
    while i * i <= cells:
        if cells % i == 0 and counts[i] > 0:
            counts[i] -= 1
            if counts[cells // i] > 0:
                return i, cells // i
        i += 1
    return None


def superultra_permutation(n):
    """Return a permutation of ``1..n`` whose adjacent sums are all composite, or ``None``."""
    if n < 5:
        return None
    return [1, 3, *range(7, n + 1, 2), 5, 4, 2, *range(6, n + 1, 2)]


def sharky_power_ups(hurdles, power_ups, length):
    """Return the fewest power-ups needed to jump every hurdle, or -1.

    ``hurdles`` are ``(l, r)`` intervals and ``power_ups`` are ``(x, v)``
    pairs, both in increasing position order; ``length`` is the track end.
    """
    pending = iter(power_ups)
    upcoming = next(pending, None)
    available = []
    power = 1
    taken = 0
    for low, high in hurdles:
        while upcoming is not None and upcoming[0] < low:
            heapq.heappush(available, -upcoming[1])
            upcoming = next(pending, None)
        needed = high - low + 2
        while power < needed and available:
            power -= heapq.heappop(available)
            taken += 1
        if power < needed:
            return -1
    return taken


def kachina_binary_string(n, ask):
    """Recover a hidden binary string of length ``n`` with questions.

    ``ask(l, r)`` returns the number of ``01`` subsequences in the 1-based
    inclusive range ``[l, r]``. Returns the string, or ``None`` when it
    cannot be determined.
    """
    ones = []
    total = 0
    for start in range(n - 1, 0, -1):
        value = ask(start, n)
        known = len(ones)
        gained = value - total
        if gained > known:
            ones.extend(range(start + 1, start + 1 + gained - known))
        elif value == total and total > 0:
            ones.append(start)
        total = value
    if not ones:
        return None
    bits = ["0"] * n
    for position in ones:
        bits[position - 1] = "1"
    return "".join(bits)


@dataclass
class _Enemies:
    health: list
    positions: list
    m: int
    k: int

    def defeatable(self, attack):
        events = []
        for health, position in zip(self.health, self.positions):
            hits = -(-health // attack)
            if hits > self.m:
                continue
            reach = self.m - hits
            events.append((position - reach, 1))
            events.append((position + reach + 1, -1))
        events.sort()
        covered = 0
        for _, delta in events:
            covered += delta
            if covered >= self.k:
                return True
        return False


def ardent_flames(health, positions, m, k):
    """Return the least attack needed to defeat ``k`` enemies, or -1 if none suffices."""
    enemies = _Enemies(list(health), list(positions), m, k)
    low, high = 0, _ATTACK_LIMIT
    while high - low > 1:
        mid = (low + high) // 2
        if enemies.defeatable(mid):
            high = mid
        else:
            low = mid
    return high if high != _ATTACK_LIMIT else -1