# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""
Forward greedy search of the edit graph, after Fig. 2 of Myers' article.

Unlike the textbook version which only returns the length of the shortest
edit script, the search here records every trace it visits so that one
shortest path can be recovered afterwards by `find_path`.

Comparisons are tri-state: `is_same` may return None to signal that
two items cannot be compared, which aborts the whole search.
"""

import operator

from ..log import UndiffableError, debug
from ..profiling import timer
from .traces import Point, Trace, ORIGIN

__all__ = ["diff_traces", "myers_traces", "find_path", "diff_path"]


def _value_at(V, i):
    "Read V[i], returning None for indices outside of V."
    if i < 0 or i >= len(V):
        return None
    return V[i]


def traces_for_insertions(M):
    "Path inserting all M items of the target into an empty source."
    return [Trace(Point(0, j), Point(0, j + 1), 0) for j in range(M)]


def traces_for_deletions(N):
    "Path deleting all N items of the source."
    return [Trace(Point(i, 0), Point(i + 1, 0), 0) for i in range(N)]


def next_trace(D, k, previous_x, next_x):
    """Compute the single off-diagonal step onto diagonal k in generation D.

    previous_x and next_x are the furthest reaching x on diagonals
    k-1 and k+1, or None where those lie outside of the frontier.
    """
    if k == -D or (k != D and previous_x is not None and next_x is not None
                   and previous_x < next_x):
        # Coming from diagonal k+1, the diagonal above k, so keeping x
        x = -1 if next_x is None else next_x
        return Trace(Point(x, x - k - 1), Point(x, x - k), D)
    else:
        # Coming from diagonal k-1, the diagonal to the left of k, so incrementing x
        x = (0 if previous_x is None else previous_x) + 1
        return Trace(Point(x - 1, x - k), Point(x, x - k), D)


def myers_traces(A, B, is_same=operator.__eq__):
    """Run the forward search and return all traces visited.

    The last trace in the returned list always ends in (N, M).
    Raises UndiffableError if `is_same` returns None for any pair
    compared along the way.
    """
    N, M = len(A), len(B)
    # Parameter bounding the size of an acceptible edit script,
    # N+M always suffices
    MAX = N + M
    # V is indexed from -M to +N in the algorithm,
    # here indexing using V[V0 + k] to map to 0-based indices
    V = [-1] * (MAX + 1)
    V0 = M
    V[V0+1] = 0  # Seed for first iteration, corresponding to diagonal k=-1

    traces = []
    for D in range(MAX + 1):
        for k in range(-D, D + 1, 2):
            if k < -M or k > N:
                continue

            trace = next_trace(D, k, _value_at(V, V0+k-1), _value_at(V, V0+k+1))
            x, y = trace.end
            if x > N or y > M:
                continue
            traces.append(trace)

            # Follow matching items along diagonal k
            while 0 <= x < N and 0 <= y < M:
                same = is_same(A[x], B[y])
                if same is None:
                    raise UndiffableError(
                        "Cannot determine identity of source item {} "
                        "and target item {}.".format(x, y))
                if not same:
                    break
                traces.append(Trace(Point(x, y), Point(x + 1, y + 1), D))
                x += 1
                y += 1

            # Store x coordinate at end of snake for this k-line
            V[V0+k] = x

            if x >= N and y >= M:
                debug("Shortest edit script of length %d found after %d traces",
                      D, len(traces))
                return traces
    raise RuntimeError("Shortest edit script length exceeds {}.".format(MAX))


def diff_traces(A, B, is_same=operator.__eq__):
    "Return the traces needed to build a diff of A and B."
    N, M = len(A), len(B)
    if N == 0 and M == 0:
        return []
    elif N == 0:
        return traces_for_insertions(M)
    elif M == 0:
        return traces_for_deletions(N)
    else:
        return myers_traces(A, B, is_same)


def find_path(traces):
    """Recover the shortest path from the flat list of traces.

    Walks backwards from the last trace, which ends in (N, M),
    collecting each trace ending where the current one starts
    until the origin is reached.
    """
    if not traces:
        return []

    item = traces[-1]
    path = [item]
    if item.start != ORIGIN:
        for trace in reversed(traces):
            if trace.end == item.start:
                path.append(trace)
                item = trace
                if trace.start == ORIGIN:
                    break
    path.reverse()
    return path


def diff_path(A, B, is_same=operator.__eq__):
    "Return the traces forming one shortest path through the edit graph of A and B."
    with timer.time('search'):
        traces = diff_traces(A, B, is_same)
    with timer.time('find_path'):
        return find_path(traces)
