# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ..diff_format import EditScriptBuilder
from ..log import UndiffableError
from ..profiling import timer

from .config import DiffConfig
from .seq_myers import diff_path
from .traces import TraceType, trace_type

__all__ = ["diff", "classify_path"]


def classify_path(a, b, path, is_equal):
    """Map a shortest path through the edit graph to an edit script.

    Insertions are indexed by target position, deletions and updates
    by source position, following the batch update conventions of
    list/table views.
    """
    di = EditScriptBuilder()
    for trace in path:
        kind = trace_type(trace)
        i, j = trace.start
        if kind == TraceType.MATCH:
            equal = is_equal(a[i], b[j])
            if equal is None:
                raise UndiffableError(
                    "Cannot compare content of source item {} "
                    "and target item {}.".format(i, j))
            if not equal:
                di.update(i)
        elif kind == TraceType.INSERTION:
            di.insert(j)
        else:
            di.delete(i)
    return di.validated()


def diff(a, b, is_same=None, is_equal=None, config=None):
    """Compute the shortest edit script transforming sequence a into b.

    is_same and is_equal are tri-state predicates (True/False/None),
    see rowdiff.diffing.comparing. They default to those of `config`,
    or plain equality when no config is given.

    Returns a list of insert/delete/update entries, or raises
    UndiffableError if any required comparison returned None.
    """
    if config is None:
        config = DiffConfig()
    if is_same is None:
        is_same = config.is_same
    if is_equal is None:
        is_equal = config.is_equal

    path = diff_path(a, b, is_same)
    with timer.time('classify'):
        return classify_path(a, b, path, is_equal)
