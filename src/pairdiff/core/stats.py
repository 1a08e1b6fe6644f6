"""Summary counts over classified diff rows"""

from collections import Counter

from pairdiff.core.models import DiffLineType, DiffRow, DiffStats


def compute_stats(rows: list[DiffRow]) -> DiffStats:
    counts = Counter(row.type for row in rows)
    return DiffStats(
        additions=counts[DiffLineType.added],
        deletions=counts[DiffLineType.deleted],
        modifications=counts[DiffLineType.modified],
        unchanged=counts[DiffLineType.unchanged],
    )
