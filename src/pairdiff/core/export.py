"""Serializers for diff results: unified text and JSON"""

from pairdiff.core.models import DiffLineType, DiffResult, DiffRow


def unified_lines(rows: list[DiffRow]) -> list[str]:
    """Return body lines (no header, no newlines): '-' deleted, '+' added, both for modified, ' ' unchanged."""
    lines = []
    for row in rows:
        if row.type == DiffLineType.deleted:
            lines.append(f"-{row.left_content}")
        elif row.type == DiffLineType.added:
            lines.append(f"+{row.right_content}")
        elif row.type == DiffLineType.modified:
            lines.append(f"-{row.left_content}")
            lines.append(f"+{row.right_content}")
        else:
            lines.append(f" {row.left_content}")
    return lines


def unified_diff(
    result: DiffResult,
    left_label: str = "original",
    right_label: str = "modified",
    ) -> str:
    """Return the full unified text: '--- left' / '+++ right' header, then one line per row entry.

    Every row is included (no hunks or context trimming); each line ends with a newline.
    """
    lines = [f"--- {left_label}", f"+++ {right_label}", *unified_lines(result.rows)]
    return "".join(f"{line}\n" for line in lines)


def to_json(result: DiffResult, indent: int = 2) -> str:
    """Dump rows and stats (including has_changes) as JSON."""
    return result.model_dump_json(indent=indent)
