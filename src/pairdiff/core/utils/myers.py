"""Minimal edit scripts between two sequences (Myers' O(ND) difference algorithm)

Used at line granularity for row pairing and at character granularity for
highlight ranges. Only the positions of deleted and inserted units are
reported; matched units are implied by what is left over.
"""

from typing import NamedTuple, Sequence


class EditScript(NamedTuple):
    removed:  frozenset[int]    # indices into the left sequence
    inserted: frozenset[int]    # indices into the right sequence


def _take_insert(frontier: list[int], base: int, k: int, d: int) -> bool:
    """True when diagonal k is best reached by moving down (an insertion) from k + 1."""
    return k == -d or (k != d and frontier[base + k - 1] < frontier[base + k + 1])


def edit_script(left: Sequence, right: Sequence) -> EditScript:
    """Return the removed/inserted positions of a shortest edit script from left to right.

    Where several shortest scripts exist, a deletion is taken before an
    insertion at every branch point, so the result is stable for equal inputs.
    """
    n, m = len(left), len(right)
    offset = n + m + 1
    v = [0] * (2 * offset + 1)     # furthest x on each diagonal k, stored at k + offset
    trace: list[list[int]] = []    # trace[d] holds diagonals -d-1 .. d+1 as they were before step d

    for d in range(n + m + 1):
        trace.append(v[offset - d - 1:offset + d + 2])
        for k in range(-d, d + 1, 2):
            if _take_insert(v, offset, k, d):
                x = v[offset + k + 1]
            else:
                x = v[offset + k - 1] + 1
            y = x - k
            while x < n and y < m and left[x] == right[y]:
                x += 1
                y += 1
            v[offset + k] = x
            if x >= n and y >= m:
                return _backtrack(trace, n, m)

    raise AssertionError("edit path not found")  # d = n + m always reaches (n, m)


def _backtrack(trace: list[list[int]], n: int, m: int) -> EditScript:
    """Walk the recorded frontiers from (n, m) back to (0, 0), collecting edits."""
    removed: set[int] = set()
    inserted: set[int] = set()
    x, y = n, m

    for d in range(len(trace) - 1, -1, -1):
        frontier, base = trace[d], d + 1
        k = x - y
        prev_k = k + 1 if _take_insert(frontier, base, k, d) else k - 1
        prev_x = frontier[base + prev_k]
        prev_y = prev_x - prev_k

        while x > prev_x and y > prev_y:
            x -= 1
            y -= 1
        if d > 0:
            if x == prev_x:
                inserted.add(prev_y)
            else:
                removed.add(prev_x)
        x, y = prev_x, prev_y

    return EditScript(frozenset(removed), frozenset(inserted))
