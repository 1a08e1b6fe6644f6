"""Levenshtein distance and the similarity ratio used to pair changed lines"""


def levenshtein(a: str, b: str) -> int:
    """Edit distance (insert/delete/substitute, unit cost) over code points."""
    m, n = len(a), len(b)
    if m == 0:
        return n
    if n == 0:
        return m

    prev = list(range(n + 1))
    curr = [0] * (n + 1)
    for i in range(1, m + 1):
        curr[0] = i
        for j in range(1, n + 1):
            if a[i - 1] == b[j - 1]:
                curr[j] = prev[j - 1]
            else:
                curr[j] = 1 + min(prev[j], curr[j - 1], prev[j - 1])
        prev, curr = curr, prev
    return prev[n]


def similarity(a: str, b: str) -> float:
    """Return 1 - distance / longer length: 1.0 for two empty strings, 0.0 if only one is empty."""
    if not a and not b:
        return 1.0
    if not a or not b:
        return 0.0
    return 1.0 - levenshtein(a, b) / max(len(a), len(b))
