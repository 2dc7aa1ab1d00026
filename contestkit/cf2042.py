"""Solutions to four problems from one Codeforces round."""

from bisect import bisect_left, bisect_right, insort
from collections import Counter


def greedy_monocarp(a, k):
    """Return how many coins to add so that greedy taking from ``a`` totals exactly ``k``."""
    for value in sorted(a, reverse=True):
        if value > k:
            break
        k -= value
    return k


def colored_marbles(colors):
    """Return Alice's score when both players play the marble game optimally."""
    counts = Counter(colors).values()
    unique = sum(1 for count in counts if count == 1)
    shared = sum(1 for count in counts if count > 1)
    return 2 * ((unique + 1) // 2) + shared


def competitive_fishing(s, k):
    """Return the fewest groups giving Bob a lead of at least ``k``, or -1."""
    suffixes = []
    balance = 0
    for ch in reversed(s[1:]):
        balance += 1 if ch == "1" else -1
        suffixes.append(balance)
    suffixes.sort(reverse=True)
    for groups, gain in enumerate(suffixes, start=2):
        k -= gain
        if k <= 0:
            return groups
    return -1


def recommendations(segments):
    """Return, per ``(l, r)`` segment, the count of strongly recommended tracks."""
    segments = list(segments)
    answer = [0] * len(segments)
    indexed = list(enumerate(segments))

    rights = []
    for index, (low, high) in sorted(indexed, key=lambda item: (item[1][0], -item[1][1])):
        pos = bisect_left(rights, high)
        if pos < len(rights):
            answer[index] += rights[pos] - high
        insort(rights, high)

    lefts = []
    for index, (low, high) in sorted(indexed, key=lambda item: (-item[1][1], item[1][0])):
        pos = bisect_right(lefts, low)
        if pos > 0:
            answer[index] += low - lefts[pos - 1]
        insort(lefts, low)

    for index, count in Counter(segments).items():
        if count > 1:
            for i, segment in indexed:
                if segment == index:
                    answer[i] = 0
    return answer