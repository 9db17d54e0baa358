# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""
Edit graph primitives: points and the traces (edges) between them.

A point (x, y) means x items of the source and y items of the target
have been consumed. A trace moves one step along the edit graph, see
Myers' article "An O(ND) Difference Algorithm and Its Variations".
"""

from collections import namedtuple

__all__ = ["Point", "Trace", "TraceType", "ORIGIN", "trace_type", "trace_k"]


Point = namedtuple("Point", ["x", "y"])

# start, end: Point; d: the search generation the trace was found in
Trace = namedtuple("Trace", ["start", "end", "d"])

ORIGIN = Point(0, 0)


class TraceType:
    "Collection of the possible shapes of a trace."
    INSERTION = "insertion"
    DELETION = "deletion"
    MATCH = "match"


def trace_type(trace):
    """Classify a trace by its shape.

    Diagonal traces are matched pairs, traces advancing y are
    insertions, anything else advances x and is a deletion.
    """
    start, end = trace.start, trace.end
    if start.x + 1 == end.x and start.y + 1 == end.y:
        return TraceType.MATCH
    elif start.y < end.y:
        return TraceType.INSERTION
    else:
        return TraceType.DELETION


def trace_k(trace):
    "The diagonal the trace starts on."
    return trace.start.x - trace.start.y
