"""Solutions to three problems from one Codeforces round: circuit, medians, trinity."""


def circuit_lights(switches):
    """Return ``(fewest, most)`` lights that can be on for the given switch states.

    ``switches`` holds the ``2n`` switch states, each 0 or 1.
    """
    switches = list(switches)
    if len(switches) % 2:
        raise ValueError("the number of switches must be even")
    n = len(switches) // 2
    on = sum(1 for state in switches if state == 1)
    most = on if on <= n else 2 * n - on
    return on % 2, most


def medians_partition(n, k):
    """Split ``1..n`` into an odd number of odd-length parts whose medians have median ``k``.

    Returns the 1-based left borders of the parts, or ``None`` if impossible.
    """
    left = k - 1
    right = n - k
    if left % 2 != right % 2 or (left == 0) != (right == 0):
        return None
    if left % 2 == 1:
        return [1, k, k + 1]
    if left == 0:
        return [1]
    return [1, 2, k, k + 1, k + 2]


def trinity_operations(a):
    """Return the fewest assignments making every triple of ``a`` a non-degenerate triangle."""
    values = sorted(a)
    n = len(values)
    if n < 3:
        raise ValueError("at least three values are required")
    lo = 0
    pair_sum = 0
    best_left, best_right = 0, 1
    for hi in range(1, n):
        if hi - lo == 1:
            pair_sum = values[lo] + values[hi]
            continue
        while pair_sum <= values[hi]:
            lo += 1
            pair_sum = values[lo] + values[lo + 1]
        if hi - lo > 1 and pair_sum > values[hi] and hi - lo > best_right - best_left:
            best_left, best_right = lo, hi
    return best_left + (n - 1 - best_right)