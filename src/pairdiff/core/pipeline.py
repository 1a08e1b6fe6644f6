"""Diff entry points: text and canonicalized JSON"""

import logging

from pairdiff.core.canonical import canonicalize_json
from pairdiff.core.models import DiffResult
from pairdiff.core.pairing import resolve_rows
from pairdiff.core.stats import compute_stats
from pairdiff.core.utils.lines import split_lines
from pairdiff.core.utils.myers import edit_script


logger = logging.getLogger(__name__)


def diff(left: str, right: str) -> DiffResult:
    """Compare two texts line by line, with character ranges on modified lines.

    Pure and reentrant: no state survives the call and no input raises.
    Two empty texts give no rows at all; an empty text facing a non-empty
    one has no lines, so the other side is purely added or deleted.
    """
    left_lines, right_lines = split_lines(left), split_lines(right)
    if left_lines == [""] and right_lines == [""]:
        return DiffResult()
    if left == "":
        left_lines = []
    if right == "":
        right_lines = []

    script = edit_script(left_lines, right_lines)
    rows = resolve_rows(left_lines, right_lines, script)
    stats = compute_stats(rows)
    logger.debug(
        "diff: %d left / %d right lines -> %d rows (%s)",
        len(left_lines), len(right_lines), len(rows), stats,
    )
    return DiffResult(rows=rows, stats=stats)


def diff_json(left: str, right: str) -> DiffResult:
    """Diff two JSON documents after canonicalization.

    Both blank -> empty result; one blank side counts as {}.
    Raises InvalidInputError if either side is not JSON, before any diffing.
    """
    if not left.strip() and not right.strip():
        return DiffResult()
    left_json = canonicalize_json(left if left.strip() else "{}")
    right_json = canonicalize_json(right if right.strip() else "{}")
    return diff(left_json, right_json)
