"""Solutions to six problems from one Codeforces round."""

from itertools import pairwise
from math import gcd

_DIGITS = frozenset("0123456789")


def line_breaks(words, m):
    """Return how many leading words fit on a strip of length ``m``."""
    fitted = 0
    for word in words:
        if len(word) > m:
            break
        m -= len(word)
        fitted += 1
    return fitted


def transfusion(a):
    """Tell whether moves between neighbours-of-neighbours can make all elements equal."""
    values = list(a)
    n = len(values)
    if n == 0:
        raise ValueError("array must not be empty")
    total = sum(values)
    if total % n:
        return False
    target = total // n
    tail_class = values[(n - 1) % 2::2]
    return sum(tail_class) == target * len(tail_class)


def _check_digits(s):
    if not s or not set(s) <= _DIGITS:
        raise ValueError("expected a string of decimal digits")


def uninteresting_number(s):
    """Tell whether squaring some digits 2 and 3 can make the number divisible by 9."""
    _check_digits(s)
    reachable = {sum(int(ch) for ch in s) % 9}
    for ch in s:
        bump = {"2": 2, "3": 6}.get(ch)
        if bump is not None:
            reachable |= {(r + bump) % 9 for r in reachable}
    return 0 in reachable


def maximize_digital_string(s):
    """Return the lexicographically largest string reachable by moving digits left,
    each step left costing one."""
    _check_digits(s)
    digits = [int(ch) for ch in s]
    n = len(digits)
    for i in range(n):
        best = max(range(i, min(n, i + 10)), key=lambda j: digits[j] - j)
        moved = digits[best] - (best - i)
        del digits[best]
        digits.insert(i, moved)
    return "".join(map(str, digits))


def three_strings(a, b, c):
    """Return the fewest changed characters of ``c`` for it to be an interleaving of ``a`` and ``b``."""
    la, lb = len(a), len(b)
    if len(c) != la + lb:
        raise ValueError("len(c) must equal len(a) + len(b)")
    below = None
    for i in range(la, -1, -1):
        row = [0] * (lb + 1)
        for j in range(lb, -1, -1):
            options = []
            if i < la:
                options.append(below[j] + (a[i] != c[i + j]))
            if j < lb:
                options.append(row[j + 1] + (b[j] != c[i + j]))
            row[j] = min(options) if options else 0
        below = row
    return below[0]


class _GcdTable:
    """Sparse table answering range gcd queries."""

    def __init__(self, values):
        self._levels = [list(values)]
        width = 1
        while 2 * width <= len(values):
            prev = self._levels[-1]
            self._levels.append([gcd(x, y) for x, y in zip(prev, prev[width:])])
            width *= 2

    def query(self, lo, hi):
        level = (hi - lo + 1).bit_length() - 1
        row = self._levels[level]
        return gcd(row[lo], row[hi - (1 << level) + 1])


def maximum_modulo_equality(a, queries):
    """Return, per 1-based ``(l, r)`` query, the largest modulus making ``a[l..r]`` all equal.

    A range where every value is equal, including a single element, gives 0.
    """
    values = list(a)
    n = len(values)
    table = _GcdTable([abs(y - x) for x, y in pairwise(values)])
    answers = []
    for low, high in queries:
        if not 1 <= low <= high <= n:
            raise IndexError(f"invalid range [{low}, {high}] for size {n}")
        answers.append(table.query(low - 1, high - 2) if low < high else 0)
    return answers