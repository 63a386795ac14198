"""Myers O(ND) shortest edit script between two line sequences

See E. W. Myers, "An O(ND) Difference Algorithm and Its Variations" (1986).
The search keeps a snapshot of the frontier array for every depth so the
edit script can be rebuilt by walking the history backward.
"""

import logging
from typing import Sequence

from sesdiff.core.models import Edit, Op


logger = logging.getLogger(__name__)


def _moves_down(v: list[int], i: int, k: int, d: int) -> bool:
    """True if diagonal k at depth d is reached by a down move (insert) from k+1."""
    return k == -d or (k != d and v[i - 1] < v[i + 1])


def shortest_edit(a: Sequence[str], b: Sequence[str]) -> list[list[int]]:
    """Return the frontier snapshots taken before each depth d of the search.

    Diagonal k is stored at index k + len(a) + len(b). The number of
    snapshots minus one is the edit distance. Empty when both inputs are empty.
    """
    n, m = len(a), len(b)
    max_d = n + m
    trace: list[list[int]] = []
    if max_d == 0:
        return trace

    v = [0] * (2 * max_d + 1)
    for d in range(max_d + 1):
        trace.append(v.copy())
        for k in range(-d, d + 1, 2):
            if k > n or k < -m:
                continue
            i = k + max_d
            if _moves_down(v, i, k, d):
                x = v[i + 1]
            else:
                x = v[i - 1] + 1
            y = x - k
            while x < n and y < m and a[x] == b[y]:
                x += 1
                y += 1
            v[i] = x
            if x >= n and y >= m:
                return trace
    return trace


def diff_lines(a: Sequence[str], b: Sequence[str]) -> list[Edit]:
    """Return the minimal edit script turning a into b, in forward order."""
    n, m = len(a), len(b)
    max_d = n + m
    if max_d == 0:
        return []

    trace = shortest_edit(a, b)
    edits: list[Edit] = []
    x, y = n, m
    for d in range(len(trace) - 1, -1, -1):
        v = trace[d]
        k = x - y
        i = k + max_d
        if _moves_down(v, i, k, d):
            prev_k, op = k + 1, Op.INSERT
        else:
            prev_k, op = k - 1, Op.DELETE
        prev_x = v[prev_k + max_d]
        prev_y = prev_x - prev_k

        while x > prev_x and y > prev_y:
            edits.append(Edit(Op.EQUAL, old_line=a[x - 1], new_line=b[y - 1]))
            x -= 1
            y -= 1

        if d > 0:
            if op is Op.INSERT:
                edits.append(Edit(Op.INSERT, new_line=b[y - 1]))
            else:
                edits.append(Edit(Op.DELETE, old_line=a[x - 1]))
        x, y = prev_x, prev_y

    edits.reverse()
    logger.debug("diff_lines: old=%d new=%d distance=%d", n, m, len(trace) - 1)
    return edits
