"""Split raw text into lines on universal newlines"""

import re


_NEWLINE = re.compile(r"\r\n|\r|\n")


def split_lines(text: str) -> list[str]:
    """Split on \\r\\n, \\r or \\n. '' -> [''] and a trailing newline leaves a trailing ''."""
    return _NEWLINE.split(text)
