"""Terminal rendering: side-by-side columns with highlighted changes, and the summary line"""

from typing import Optional

import typer

from pairdiff.core.models import CharRange, DiffLineType, DiffRow, DiffStats


MARKERS = {
    DiffLineType.unchanged: " ",
    DiffLineType.added:     "+",
    DiffLineType.deleted:   "-",
    DiffLineType.modified:  "~",
}


def _visible(text: str, width: int) -> str:
    return text if len(text) <= width else text[:width - 1] + "…"


def _cell(
    text: Optional[str],
    width: int,
    ranges: list[CharRange],
    color: bool,
    line_fg: Optional[str] = None,
    highlight_bg: Optional[str] = None,
    ) -> str:
    """Fit text into width columns; style whole line with line_fg and ranges with highlight_bg."""
    shown = _visible(text or "", width)
    padding = " " * (width - len(shown))
    if not color:
        return shown + padding
    if line_fg:
        return typer.style(shown, fg=line_fg) + padding

    parts, pos = [], 0
    for start, end in ranges:
        start, end = min(start, len(shown)), min(end, len(shown))
        if start >= end:
            continue
        parts.append(shown[pos:start])
        parts.append(typer.style(shown[start:end], bg=highlight_bg, bold=True))
        pos = end
    parts.append(shown[pos:])
    return "".join(parts) + padding


def render_side_by_side(rows: list[DiffRow], width: int = 60, color: bool = False) -> list[str]:
    """Return one text line per row: marker, left cell, line numbers, right cell."""
    out = []
    for row in rows:
        left = _cell(
            row.left_content, width, row.left_changed_ranges, color,
            line_fg="red" if row.type == DiffLineType.deleted else None, highlight_bg="red",
        )
        right = _cell(
            row.right_content, width, row.right_changed_ranges, color,
            line_fg="green" if row.type == DiffLineType.added else None, highlight_bg="green",
        )
        lnum = "" if row.left_line_number is None else str(row.left_line_number)
        rnum = "" if row.right_line_number is None else str(row.right_line_number)
        out.append(f"{MARKERS[row.type]} {left} {lnum:>4} │ {rnum:<4} {right}".rstrip())
    return out


def summary_line(stats: DiffStats) -> str:
    """'+A -D ~M' listing only non-zero counts, or a no-differences notice."""
    if not stats.has_changes:
        return "No differences found"
    parts = []
    if stats.additions:
        parts.append(f"+{stats.additions}")
    if stats.deletions:
        parts.append(f"-{stats.deletions}")
    if stats.modifications:
        parts.append(f"~{stats.modifications}")
    return " ".join(parts)
