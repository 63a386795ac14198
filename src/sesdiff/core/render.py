"""Render an edit list as unified diff text or as an annotated gutter view"""

from typing import Sequence, TextIO

import typer

from sesdiff.core.hunks import build_hunks
from sesdiff.core.models import DiffOptions, Edit, Hunk, Op


NO_NEWLINE = "\\ No newline at end of file"

SPACE_GLYPH = "·"
TAB_GLYPH = "→"
RETURN_GLYPH = "↵"
SEPARATOR = "│"

OP_COLORS: dict[Op, str] = {
    Op.DELETE: typer.colors.RED,
    Op.INSERT: typer.colors.GREEN,
}


def _strip_terminator(text: str) -> str:
    return text[:-1] if text.endswith("\n") else text


def _paint(text: str, op: Op, color: bool) -> str:
    """Wrap changed-line text in ANSI escapes when color is on."""
    if not color or op is Op.EQUAL:
        return text
    return typer.style(text, fg=OP_COLORS[op])


def format_hunk_header(hunk: Hunk) -> str:
    """Return the @@ header line; a side with count 1 omits its count."""
    old = f"-{hunk.old_start}" if hunk.old_count == 1 else f"-{hunk.old_start},{hunk.old_count}"
    new = f"+{hunk.new_start}" if hunk.new_count == 1 else f"+{hunk.new_start},{hunk.new_count}"
    return f"@@ {old} {new} @@\n"


# --- unified ---

def write_unified(out: TextIO, edits: Sequence[Edit], context: int = 3, color: bool = False) -> None:
    """Write edits as unified diff hunks to out. Writes nothing if there are no changes."""
    for hunk in build_hunks(edits, context):
        out.write(format_hunk_header(hunk))
        for edit in edits[hunk.start:hunk.end]:
            text = edit.line
            out.write(_paint(f"{edit.op}{_strip_terminator(text)}", edit.op, color) + "\n")
            if not text.endswith("\n"):
                out.write(NO_NEWLINE + "\n")


# --- gutter ---

def _visible(text: str) -> str:
    """Show spaces, tabs and a bare terminator as glyphs; drop the trailing terminator."""
    if text == "\n":
        return RETURN_GLYPH
    return _strip_terminator(text).replace(" ", SPACE_GLYPH).replace("\t", TAB_GLYPH)


def _newline_pairs(edits: Sequence[Edit], start: int, end: int) -> set[int]:
    """Indices of changed lines whose only difference from their partner is a trailing terminator.

    Within each run of deletions followed by insertions, the last deletion
    pairs with the last insertion; both indices of a matching pair are returned.
    """
    marked: set[int] = set()
    i = start
    while i < end:
        if edits[i].op is Op.EQUAL:
            i += 1
            continue
        last_del = last_ins = None
        while i < end and edits[i].op is not Op.EQUAL:
            if edits[i].op is Op.DELETE:
                last_del = i
            else:
                last_ins = i
            i += 1
        if last_del is None or last_ins is None:
            continue
        old, new = edits[last_del].old_line, edits[last_ins].new_line
        if old.endswith("\n") != new.endswith("\n") and _strip_terminator(old) == _strip_terminator(new):
            marked.update((last_del, last_ins))
    return marked


def _gutter_width(edits: Sequence[Edit]) -> int:
    """Digits needed for the largest old line number."""
    old_lines = sum(1 for e in edits if e.op is not Op.INSERT)
    return len(str(max(old_lines, 1)))


def _summary_line(width: int, count: int) -> str:
    noun = "line" if count == 1 else "lines"
    return f"{' ' * width}───┼─── {count} identical {noun} ───\n"


def write_gutter(out: TextIO, edits: Sequence[Edit], context: int = 3, color: bool = False) -> None:
    """Write edits with old line numbers, visible whitespace and collapsed-run summaries."""
    hunks = build_hunks(edits, context)
    if not hunks:
        return
    width = _gutter_width(edits)
    blank = " " * width

    # old line number of every edit, 0 for insertions
    numbers: list[int] = []
    old_line = 0
    for edit in edits:
        if edit.op is not Op.INSERT:
            old_line += 1
            numbers.append(old_line)
        else:
            numbers.append(0)

    previous: Hunk | None = None
    for hunk in hunks:
        if previous is not None:
            out.write(_summary_line(width, hunk.start - previous.end))
        pairs = _newline_pairs(edits, hunk.start, hunk.end)
        for i in range(hunk.start, hunk.end):
            edit = edits[i]
            text = edit.line
            number = f"{numbers[i]:>{width}}" if numbers[i] else blank
            if edit.op is Op.EQUAL:
                content = _strip_terminator(text)
            else:
                content = _visible(text)
                if i in pairs and text.endswith("\n") and text != "\n":
                    content += RETURN_GLYPH
            out.write(_paint(f"{number} {edit.op} {SEPARATOR} {content}", edit.op, color) + "\n")
            if not text.endswith("\n") and i not in pairs:
                out.write(f"{blank}   {SEPARATOR} {NO_NEWLINE}\n")
        previous = hunk


def write(out: TextIO, edits: Sequence[Edit], options: DiffOptions | None = None) -> None:
    """Render edits to out in the style selected by options."""
    options = options or DiffOptions()
    if options.gutter:
        write_gutter(out, edits, options.context, options.color)
    else:
        write_unified(out, edits, options.context, options.color)
