"""JSON canonicalization and minification: deterministic output for text diffing and formatting"""

import json
import logging

from pairdiff.errors import InvalidInputError


logger = logging.getLogger(__name__)


def _reject_constant(name: str):
    raise ValueError(f"{name} is not valid JSON")


def _load(text: str):
    """Parse a JSON document; raises InvalidInputError. NaN/Infinity are rejected."""
    if not text.strip():
        raise InvalidInputError("Empty input: nothing to format")
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except ValueError as e:
        logger.debug("JSON parse failed: %s", e)
        raise InvalidInputError(f"Invalid JSON: {e}") from e


def canonicalize_json(text: str) -> str:
    """Re-serialize a JSON document with sorted keys and two-space indentation."""
    return json.dumps(_load(text), indent=2, sort_keys=True, ensure_ascii=False, separators=(",", ": "))


def minify_json(text: str) -> str:
    """Serialize a JSON document on one line without whitespace, keeping key order."""
    return json.dumps(_load(text), separators=(",", ":"), ensure_ascii=False)
