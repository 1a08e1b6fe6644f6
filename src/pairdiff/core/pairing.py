"""Turn a line-level edit script into classified diff rows"""

from pairdiff.core.chardiff import char_diff
from pairdiff.core.models import DiffLineType, DiffRow
from pairdiff.core.utils.myers import EditScript
from pairdiff.core.utils.similarity import similarity


SIMILARITY_THRESHOLD = 0.5


def _deleted(line: str, num: int) -> DiffRow:
    return DiffRow(left_line_number=num, left_content=line, type=DiffLineType.deleted)


def _added(line: str, num: int) -> DiffRow:
    return DiffRow(right_line_number=num, right_content=line, type=DiffLineType.added)


def resolve_rows(left: list[str], right: list[str], script: EditScript) -> list[DiffRow]:
    """Walk both line lists in lock-step and classify each step.

    A removed left line facing an inserted right line at the same step is
    paired into one modified row when their similarity reaches the threshold;
    otherwise only the left line is emitted (as deleted) and the right line is
    reconsidered on the next step.
    """
    rows: list[DiffRow] = []
    li = ri = 0
    left_num = right_num = 1

    while li < len(left) or ri < len(right):
        is_removed = li < len(left) and li in script.removed
        is_inserted = ri < len(right) and ri in script.inserted

        if is_removed and is_inserted:
            a, b = left[li], right[ri]
            if similarity(a, b) >= SIMILARITY_THRESHOLD:
                left_ranges, right_ranges = char_diff(a, b)
                rows.append(DiffRow(
                    left_line_number=left_num, right_line_number=right_num,
                    left_content=a, right_content=b, type=DiffLineType.modified,
                    left_changed_ranges=left_ranges, right_changed_ranges=right_ranges,
                ))
                li, ri = li + 1, ri + 1
                left_num, right_num = left_num + 1, right_num + 1
            else:
                rows.append(_deleted(a, left_num))
                li, left_num = li + 1, left_num + 1
        elif is_removed:
            rows.append(_deleted(left[li], left_num))
            li, left_num = li + 1, left_num + 1
        elif is_inserted:
            rows.append(_added(right[ri], right_num))
            ri, right_num = ri + 1, right_num + 1
        elif li < len(left) and ri < len(right):
            rows.append(DiffRow(
                left_line_number=left_num, right_line_number=right_num,
                left_content=left[li], right_content=right[ri], type=DiffLineType.unchanged,
            ))
            li, ri = li + 1, ri + 1
            left_num, right_num = left_num + 1, right_num + 1
        elif li < len(left):
            rows.append(_deleted(left[li], left_num))
            li, left_num = li + 1, left_num + 1
        else:
            rows.append(_added(right[ri], right_num))
            ri, right_num = ri + 1, right_num + 1

    return rows
