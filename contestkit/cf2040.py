"""Solutions to four problems from one Codeforces round."""

from collections import Counter
from dataclasses import dataclass, field


def game_of_division(a, k):
    """Return the 1-based index of an element whose residue mod ``k`` is unique, or ``None``."""
    values = list(a)
    residues = Counter(value % k for value in values)
    for index, value in enumerate(values, start=1):
        if residues[value % k] == 1:
            return index
    return None


def paint_strip(n):
    """Return the fewest first-type operations needed to paint a strip of length ``n``."""
    covered = 1
    operations = 1
    while covered < n:
        covered = (covered + 1) * 2
        operations += 1
    return operations


def ordered_permutation(n, k):
    """Return the ``k``-th permutation of maximal sum in lexicographic order, or ``None``."""
    if n <= 60 and (1 << (n - 1)) < k:
        return None
    result = [0] * n
    low, high = 0, n - 1
    for value in range(1, n):
        rest = n - value - 1
        if rest <= 60 and (1 << rest) < k:
            result[high] = value
            high -= 1
            k -= 1 << rest
        else:
            result[low] = value
            low += 1
    result[low] = n
    return result


@dataclass
class _Frame:
    node: int
    parent: int
    children: object
    was_first: bool
    next_is_first: bool = field(default=True)


def non_prime_tree(n, edges):
    """Label a tree's vertices with distinct values so no edge difference is prime.

    ``edges`` are 1-based vertex pairs; returns the labels of vertices ``1..n``.
    """
    adjacency = [[] for _ in range(n)]
    for u, v in edges:
        adjacency[u - 1].append(v - 1)
        adjacency[v - 1].append(u - 1)
    labels = [0] * n
    current = 1
    labels[0] = current
    stack = [_Frame(0, -1, iter(adjacency[0]), False)]
    while stack:
        frame = stack[-1]
        child = next((c for c in frame.children if c != frame.parent), None)
        if child is None:
            stack.pop()
            if frame.was_first:
                current += 1
            continue
        first = frame.next_is_first
        frame.next_is_first = False
        current += 1 if first else 2
        labels[child] = current
        stack.append(_Frame(child, frame.node, iter(adjacency[child]), first))
    return labels