"""Result models for the diff engine: row classification, rows, and summary stats"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator


CharRange = tuple[int, int]     # half-open (start, end) code point offsets


class DiffLineType(str, Enum):
    unchanged = "unchanged"
    added = "added"
    deleted = "deleted"
    modified = "modified"


class DiffRow(BaseModel):
    """One aligned row of a side-by-side diff."""
    model_config = ConfigDict(frozen=True)

    left_line_number:  Optional[int] = Field(default=None, ge=1)
    right_line_number: Optional[int] = Field(default=None, ge=1)
    left_content:      Optional[str] = None
    right_content:     Optional[str] = None
    type: DiffLineType
    left_changed_ranges:  list[CharRange] = []
    right_changed_ranges: list[CharRange] = []

    @model_validator(mode="after")
    def _check_sides(self) -> "DiffRow":
        has_left = self.left_content is not None and self.left_line_number is not None
        has_right = self.right_content is not None and self.right_line_number is not None
        no_left = self.left_content is None and self.left_line_number is None
        no_right = self.right_content is None and self.right_line_number is None

        if self.type == DiffLineType.added and not (no_left and has_right):
            raise ValueError("added rows carry only the right side")
        if self.type == DiffLineType.deleted and not (has_left and no_right):
            raise ValueError("deleted rows carry only the left side")
        if self.type in (DiffLineType.modified, DiffLineType.unchanged) and not (has_left and has_right):
            raise ValueError(f"{self.type.value} rows carry both sides")
        if self.type != DiffLineType.modified and (self.left_changed_ranges or self.right_changed_ranges):
            raise ValueError("changed ranges are only allowed on modified rows")
        return self


class DiffStats(BaseModel):
    """Per-classification row counts."""
    model_config = ConfigDict(frozen=True)

    additions:     int = Field(default=0, ge=0)
    deletions:     int = Field(default=0, ge=0)
    modifications: int = Field(default=0, ge=0)
    unchanged:     int = Field(default=0, ge=0)

    @computed_field
    @property
    def has_changes(self) -> bool:
        return self.additions + self.deletions + self.modifications > 0


class DiffResult(BaseModel):
    """Ordered rows plus their stats; produced fresh by every diff call."""
    model_config = ConfigDict(frozen=True)

    rows:  list[DiffRow] = []
    stats: DiffStats = DiffStats()
