"""Pure helpers for summarising an edit list"""

from typing import Sequence

from sesdiff.core.models import Edit, Op


def diff_summary(edits: Sequence[Edit]) -> dict[str, int]:
    """Return added/deleted/unchanged line counts. Useful for compact change stats."""
    added = deleted = unchanged = 0
    for edit in edits:
        if edit.op is Op.INSERT:
            added += 1
        elif edit.op is Op.DELETE:
            deleted += 1
        else:
            unchanged += 1
    return {"added": added, "deleted": deleted, "unchanged": unchanged}


def has_changes(edits: Sequence[Edit]) -> bool:
    """True if any edit is an insertion or deletion."""
    return any(edit.op is not Op.EQUAL for edit in edits)
