"""Group an edit list into context-padded hunks"""

import logging
from dataclasses import dataclass
from typing import Sequence

from sesdiff.core.models import Edit, Hunk, Op


logger = logging.getLogger(__name__)


@dataclass
class _OpenHunk:
    """A hunk still being extended while scanning the edit list.

    old_before / new_before count the lines preceding the hunk on each side;
    equal_run counts the equal edits seen since the last change. Trailing
    equal lines are included in the counts until the hunk closes.
    """
    start:      int
    old_before: int
    new_before: int
    old_count:  int = 0
    new_count:  int = 0
    equal_run:  int = 0

    def close(self, end: int, context: int) -> Hunk:
        """Trim trailing equal lines down to context and freeze the hunk ending at end."""
        trim = max(0, self.equal_run - context)
        old_count = self.old_count - trim
        new_count = self.new_count - trim
        return Hunk(
            old_start=self.old_before + 1 if old_count else self.old_before,
            old_count=old_count,
            new_start=self.new_before + 1 if new_count else self.new_before,
            new_count=new_count,
            start=self.start,
            end=end - trim,
        )


def build_hunks(edits: Sequence[Edit], context: int) -> list[Hunk]:
    """Partition the changes in edits into hunks with up to context equal lines around them.

    Hunks separated by at most 2 * context equal lines are merged.
    Raises ValueError if context is negative.
    """
    if context < 0:
        raise ValueError(f"context must be non-negative, got {context}")

    hunks: list[Hunk] = []
    current: _OpenHunk | None = None
    old_line = new_line = 0             # lines consumed before edits[i]

    for i, edit in enumerate(edits):
        if edit.op is Op.EQUAL:
            if current is not None:
                if current.equal_run + 1 > 2 * context:
                    hunks.append(current.close(i, context))
                    current = None
                else:
                    current.equal_run += 1
                    current.old_count += 1
                    current.new_count += 1
            old_line += 1
            new_line += 1
            continue

        if current is None:
            # Every edit before i since the last hunk is equal.
            lead = min(i, context)
            current = _OpenHunk(
                start=i - lead,
                old_before=old_line - lead,
                new_before=new_line - lead,
                old_count=lead,
                new_count=lead,
            )
        current.equal_run = 0
        if edit.op is Op.DELETE:
            current.old_count += 1
            old_line += 1
        else:
            current.new_count += 1
            new_line += 1

    if current is not None:
        hunks.append(current.close(len(edits), context))

    logger.debug("build_hunks: %d edits -> %d hunks (context=%d)", len(edits), len(hunks), context)
    return hunks
