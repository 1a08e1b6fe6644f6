"""Character-level highlight ranges for modified line pairs"""

from typing import Iterable

from pairdiff.core.models import CharRange
from pairdiff.core.utils.myers import edit_script


def merge_ranges(indices: Iterable[int]) -> list[CharRange]:
    """Collapse positions into maximal contiguous half-open ranges, e.g. {1, 2, 5} -> [(1, 3), (5, 6)]."""
    ranges: list[CharRange] = []
    for i in sorted(indices):
        if ranges and ranges[-1][1] == i:
            ranges[-1] = (ranges[-1][0], i + 1)
        else:
            ranges.append((i, i + 1))
    return ranges


def char_diff(left: str, right: str) -> tuple[list[CharRange], list[CharRange]]:
    """Return (left_ranges, right_ranges): removed code points of left, inserted code points of right."""
    script = edit_script(left, right)
    return merge_ranges(script.removed), merge_ranges(script.inserted)
