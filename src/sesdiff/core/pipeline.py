"""File-level orchestration: read, diff, write header and body"""

import logging
import os
from datetime import datetime, tzinfo
from pathlib import Path
from typing import TextIO

from sesdiff.core.models import DiffOptions, Edit
from sesdiff.core.render import write
from sesdiff.core.ses import diff_lines
from sesdiff.core.utils.diff import diff_summary, has_changes
from sesdiff.core.utils.lines import read_lines


logger = logging.getLogger(__name__)

_NS_PER_SECOND = 1_000_000_000


def diff_files(old_path: str | Path, new_path: str | Path) -> list[Edit]:
    """Read both files and return the edit script from old to new."""
    return diff_lines(read_lines(old_path), read_lines(new_path))


def format_timestamp(mtime_ns: int, tz: tzinfo | None = None) -> str:
    """Format a nanosecond epoch time as 'YYYY-MM-DD HH:MM:SS.nnnnnnnnn +hhmm'.

    Uses the local timezone when tz is None.
    """
    seconds, nanos = divmod(mtime_ns, _NS_PER_SECOND)
    if tz is None:
        dt = datetime.fromtimestamp(seconds).astimezone()
    else:
        dt = datetime.fromtimestamp(seconds, tz=tz)
    return f"{dt:%Y-%m-%d %H:%M:%S}.{nanos:09d} {dt:%z}"


def write_file_header(
    out: TextIO,
    old_name: str,
    old_mtime_ns: int,
    new_name: str,
    new_mtime_ns: int,
    tz: tzinfo | None = None,
    ) -> None:
    """Write the two-line '--- old' / '+++ new' preamble of a unified diff."""
    out.write(
        f"--- {old_name}\t{format_timestamp(old_mtime_ns, tz)}\n"
        f"+++ {new_name}\t{format_timestamp(new_mtime_ns, tz)}\n"
    )


def run_diff(out: TextIO, old_path: str, new_path: str, options: DiffOptions) -> bool:
    """Diff two files and write the result to out. Returns True if they differ.

    Identical files write nothing. The file header is written only in unified mode.
    Raises OSError if either file cannot be read, UnicodeDecodeError if it is not UTF-8.
    """
    old_stat, new_stat = os.stat(old_path), os.stat(new_path)
    edits = diff_files(old_path, new_path)

    logger.debug("%s -> %s: %s", old_path, new_path, diff_summary(edits))
    if not has_changes(edits):
        return False

    if not options.gutter:
        write_file_header(out, old_path, old_stat.st_mtime_ns, new_path, new_stat.st_mtime_ns)
    write(out, edits, options)
    return True
