"""String algorithms: Z-function, prefix function, KMP search and Manacher."""


def z_function(s):
    """Return the Z-array of ``s``.

    ``z[i]`` is the length of the longest common prefix of ``s`` and
    ``s[i:]``; ``z[0]`` is 0 by convention.
    """
    n = len(s)
    z = [0] * n
    left = right = 0
    for j in range(1, n):
        length = max(0, min(right - j + 1, z[j - left]))
        while j + length < n and s[j + length] == s[length]:
            length += 1
        z[j] = length
        if j + length - 1 > right:
            left, right = j, j + length - 1
    return z


def prefix_function(s):
    """Return the prefix function: the longest proper border of each prefix."""
    pi = [0] * len(s)
    j = 0
    for i in range(1, len(s)):
        while j > 0 and s[i] != s[j]:
            j = pi[j - 1]
        if s[i] == s[j]:
            j += 1
        pi[i] = j
    return pi


def find_occurrences(text, pattern):
    """Return the start indices of every (possibly overlapping) match of ``pattern``."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    pi = prefix_function(pattern)
    m = len(pattern)
    matches = []
    j = 0
    for i, ch in enumerate(text):
        while j > 0 and ch != pattern[j]:
            j = pi[j - 1]
        if ch == pattern[j]:
            j += 1
        if j == m:
            matches.append(i - m + 1)
            j = pi[j - 1]
    return matches


def manacher(s):
    """Return, for each centre, the radius of the longest odd palindrome around it."""
    n = len(s)
    radius = [0] * n
    left = right = 0
    for i in range(1, n):
        r = max(0, min(radius[max(0, 2 * left - i)], right - i))
        while i + r + 1 < n and i - r - 1 >= 0 and s[i + r + 1] == s[i - r - 1]:
            r += 1
        radius[i] = r
        if i + r > right:
            left, right = i, i + r
    return radius