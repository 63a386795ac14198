"""Edit model shared by the SES engine, hunk assembler and renderer"""

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, Field


class Op(str, Enum):
    """Kind of a single edit step. The value is the display glyph."""
    INSERT = "+"
    DELETE = "-"
    EQUAL = " "

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Edit:
    """One step of an edit script; lines keep their terminator verbatim."""
    op:       Op
    old_line: str = ""          # DELETE and EQUAL
    new_line: str = ""          # INSERT and EQUAL

    @property
    def line(self) -> str:
        """Text shown for this edit: old text for deletions, new text otherwise."""
        return self.old_line if self.op is Op.DELETE else self.new_line


@dataclass(frozen=True)
class Hunk:
    """A context-padded run of edits rendered under one header."""
    old_start: int              # 1-indexed; line before the span when old_count == 0
    old_count: int
    new_start: int
    new_count: int
    start:     int              # half-open index range into the edit list
    end:       int


class DiffOptions(BaseModel):
    """Formatting options for rendering an edit list."""
    context: int  = Field(default=3, ge=0, description="Unchanged lines shown around each change")
    gutter:  bool = Field(default=False, description="Line numbers and visible whitespace instead of unified")
    color:   bool = Field(default=False, description="Wrap changed lines in ANSI escapes")
