"""Unit tests for core/ses.py"""

import pytest

from sesdiff.core.models import Edit, Op
from sesdiff.core.ses import diff_lines, shortest_edit


E, D, I = Op.EQUAL, Op.DELETE, Op.INSERT


def _edit(op: Op, line: str) -> Edit:
    if op is E:
        return Edit(E, old_line=line, new_line=line)
    if op is D:
        return Edit(D, old_line=line)
    return Edit(I, new_line=line)


def _lcs(a: list[str], b: list[str]) -> int:
    """Longest common subsequence length by dynamic programming."""
    table = [[0] * (len(b) + 1) for _ in range(len(a) + 1)]
    for i in range(len(a) - 1, -1, -1):
        for j in range(len(b) - 1, -1, -1):
            if a[i] == b[j]:
                table[i][j] = table[i + 1][j + 1] + 1
            else:
                table[i][j] = max(table[i + 1][j], table[i][j + 1])
    return table[0][0]


# --- diff_lines ---

@pytest.mark.parametrize("a,b,want", [
    ([], [], []),
    ([], ["A", "B"], [(I, "A"), (I, "B")]),
    (["A", "B"], [], [(D, "A"), (D, "B")]),
    (list("ABC"), list("ABC"), [(E, "A"), (E, "B"), (E, "C")]),
    (list("AB"), list("CD"), [(D, "A"), (D, "B"), (I, "C"), (I, "D")]),
    (list("ABCX"), list("ABCY"), [(E, "A"), (E, "B"), (E, "C"), (D, "X"), (I, "Y")]),
    (list("XABC"), list("YABC"), [(D, "X"), (I, "Y"), (E, "A"), (E, "B"), (E, "C")]),
    (list("ABCABBA"), list("CBABAC"), [
        (D, "A"), (D, "B"), (E, "C"), (I, "B"), (E, "A"),
        (E, "B"), (D, "B"), (E, "A"), (I, "C"),
    ]),
], ids=[
    "both-empty", "first-empty", "second-empty", "equal",
    "completely-different", "common-prefix", "common-suffix", "paper-example",
])
def test_diff_lines(a, b, want):
    """diff_lines returns the expected edit script in forward order."""
    assert diff_lines(a, b) == [_edit(op, line) for op, line in want]


def test_diff_lines_both_empty_is_empty_list():
    """Two empty inputs produce a genuinely empty list."""
    assert diff_lines([], []) == []


def test_diff_lines_keeps_terminators():
    """Line text is stored verbatim, so a missing final newline is a change."""
    edits = diff_lines(["x\n", "y"], ["x\n", "y\n"])
    assert edits == [
        Edit(E, old_line="x\n", new_line="x\n"),
        Edit(D, old_line="y"),
        Edit(I, new_line="y\n"),
    ]


def test_diff_lines_reconstructs_both_sides(random_pairs):
    """Replaying the old and new sides of the script yields a and b."""
    for a, b in random_pairs:
        edits = diff_lines(a, b)
        assert [e.old_line for e in edits if e.op is not I] == a
        assert [e.new_line for e in edits if e.op is not D] == b


def test_diff_lines_is_minimal(random_pairs):
    """The number of changes equals len(a) + len(b) - 2 * LCS."""
    for a, b in random_pairs:
        changes = sum(1 for e in diff_lines(a, b) if e.op is not E)
        assert changes == len(a) + len(b) - 2 * _lcs(a, b)


def test_diff_lines_identity():
    """Equal sequences give one EQUAL edit per line, in order."""
    lines = [f"line{i}\n" for i in range(20)]
    edits = diff_lines(lines, list(lines))
    assert all(e.op is E for e in edits)
    assert [e.new_line for e in edits] == lines


def test_diff_lines_disjoint():
    """Disjoint sequences give all deletions followed by all insertions."""
    a = ["a1\n", "a2\n", "a3\n"]
    b = ["b1\n", "b2\n"]
    edits = diff_lines(a, b)
    assert [e.op for e in edits] == [D, D, D, I, I]
    assert [e.old_line for e in edits[:3]] == a
    assert [e.new_line for e in edits[3:]] == b


# --- shortest_edit ---

def test_shortest_edit_empty_inputs():
    """No search history is recorded for two empty inputs."""
    assert shortest_edit([], []) == []


@pytest.mark.parametrize("a,b,distance", [
    (list("ABC"), list("ABC"), 0),
    (list("ABCX"), list("ABCY"), 2),
    (list("ABCABBA"), list("CBABAC"), 5),
    ([], list("AB"), 2),
])
def test_shortest_edit_depth_is_distance(a, b, distance):
    """One frontier snapshot is kept per depth up to and including the edit distance."""
    trace = shortest_edit(a, b)
    assert len(trace) - 1 == distance
    assert all(len(v) == 2 * (len(a) + len(b)) + 1 for v in trace)
