"""Solutions to nine problems from one Codeforces round."""

from collections import Counter


def easy_problem(n):
    """Return the number of ordered pairs of positive integers ``(a, b)`` with ``a = n - b``."""
    return n - 1


_MIRROR = {"p": "q", "q": "p"}


def normal_problem(s):
    """Return the string seen from inside the store: reversed with ``p`` and ``q`` swapped."""
    return "".join(_MIRROR.get(ch, "w") for ch in reversed(s))


def hard_problem(m, a, b, c):
    """Return how many monkeys can be seated in two rows of ``m`` seats."""
    front = min(m, a)
    back = min(m, b)
    return front + back + min(2 * m - front - back, c)


def harder_problem(a):
    """Return a permutation-like sequence ``b`` in which ``a[i]`` is a mode of every prefix.

    Every value of ``a`` must lie in ``1..len(a)``.
    """
    values = list(a)
    n = len(values)
    first_seen = {}
    for index, value in enumerate(values):
        if not 1 <= value <= n:
            raise ValueError(f"value {value} outside 1..{n}")
        first_seen.setdefault(value, index)
    placed = [None] * n
    for value, index in first_seen.items():
        placed[index] = value
    unused = (value for value in range(1, n + 1) if value not in first_seen)
    return [value if value is not None else next(unused) for value in placed]


def insane_problem(k, l1, r1, l2, r2):
    """Count pairs ``(x, y)`` with ``l1 <= x <= r1``, ``l2 <= y <= r2`` and ``y = x * k**p``."""
    if k < 1:
        raise ValueError("k must be positive")
    powers = [1, k]
    if k >= 2:
        power = k
        while power * k <= r2:
            power *= k
            powers.append(power)
    count = 0
    for factor in powers:
        high = min(r1, r2 // factor)
        if high < l1:
            continue
        low = max(l1, -(-l2 // factor))
        count += max(0, high - low + 1)
    return count


def _beauty_reachable(x, rows, cols):
    magnitude = abs(x)
    k = 1
    while k * k <= magnitude:
        if magnitude % k == 0:
            q = x // k
            if ((k in rows and q in cols)
                    or (k in cols and q in rows)
                    or (-k in cols and -q in rows)
                    or (-k in rows and -q in cols)):
                return True
        k += 1
    return False


def easy_demon_problem(a, b, queries):
    """For each query tell whether clearing one row and one column of the grid
    ``M[i][j] = a[i] * b[j]`` can leave a total beauty equal to it."""
    a = list(a)
    b = list(b)
    total_a = sum(a)
    total_b = sum(b)
    rows = {total_a - value for value in a}
    cols = {total_b - value for value in b}
    return [_beauty_reachable(x, rows, cols) for x in queries]


def _targets(recipients):
    targets = [recipient - 1 for recipient in recipients]
    n = len(targets)
    if any(not 0 <= target < n for target in targets):
        raise ValueError("recipients must lie in 1..n")
    return targets


def _indegrees(targets):
    counts = Counter(targets)
    return [counts[node] for node in range(len(targets))]


def medium_demon_easy(recipients):
    """Return the first stable year when every spider holds at most one plushie.

    ``recipients[i]`` is the 1-based spider that spider ``i + 1`` gives to.
    """
    targets = _targets(recipients)
    indegree = _indegrees(targets)
    layer = [node for node, degree in enumerate(indegree) if degree == 0]
    years = 0
    while layer:
        following = []
        for node in layer:
            target = targets[node]
            indegree[target] -= 1
            if indegree[target] == 0:
                following.append(target)
        layer = following
        years += 1
    return years + 2


def _subtree_size(children, root):
    size = 0
    stack = [root]
    while stack:
        node = stack.pop()
        size += 1
        stack.extend(children[node])
    return size


def medium_demon_hard(recipients):
    """Return the first stable year when spiders may hold any number of plushies."""
    targets = _targets(recipients)
    indegree = _indegrees(targets)
    children = [[] for _ in targets]
    layer = [node for node, degree in enumerate(indegree) if degree == 0]
    while layer:
        following = []
        for node in layer:
            target = targets[node]
            children[target].append(node)
            indegree[target] -= 1
            if indegree[target] == 0:
                following.append(target)
        layer = following
    best = 0
    for node, degree in enumerate(indegree):
        if degree != 0:
            for child in children[node]:
                best = max(best, _subtree_size(children, child))
    return best + 2


def _prefix_table(n):
    return [[0] * (n + 1) for _ in range(n + 1)]


def _rectangle(table, top, left, bottom, right):
    return (table[bottom + 1][right + 1] - table[top][right + 1]
            - table[bottom + 1][left] + table[top][left])


def hard_demon_problem(matrix, queries):
    """Return, per query, the sum of ``A_i * i`` over the flattened submatrix.

    ``queries`` are 1-based ``(x1, y1, x2, y2)`` corners.
    """
    n = len(matrix)
    plain = _prefix_table(n)
    by_column = _prefix_table(n)
    by_row = _prefix_table(n)
    for i, row in enumerate(matrix):
        if len(row) != n:
            raise ValueError("matrix must be square")
        for j, value in enumerate(row):
            for table, weight in ((plain, value), (by_column, (j + 1) * value), (by_row, i * value)):
                table[i + 1][j + 1] = weight + table[i][j + 1] + table[i + 1][j] - table[i][j]
    answers = []
    for x1, y1, x2, y2 in queries:
        top, left, bottom, right = x1 - 1, y1 - 1, x2 - 1, y2 - 1
        width = right - left + 1
        answers.append(
            _rectangle(by_column, top, left, bottom, right)
            + width * _rectangle(by_row, top, left, bottom, right)
            - (width * top + left) * _rectangle(plain, top, left, bottom, right)
        )
    return answers