# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""
Tri-state comparison predicates.

Every predicate takes one item of each sequence and returns True,
False, or None when the two items cannot be compared at all. None is
never treated as False by the diff: it makes the items undiffable.
"""

from collections.abc import Mapping

__all__ = ["compare_values", "compare_by_key", "compare_by_attribute",
           "compare_fields"]


_missing = object()


def compare_values(x, y):
    "Whole-value equality, always decidable."
    return x == y


def compare_by_key(key, strict=True):
    """Identity predicate comparing mappings by the value at `key`.

    Items that are not mappings or lack `key` are not comparable:
    the predicate returns None for them, or False if `strict` is off.
    """
    unknown = None if strict else False

    def is_same(x, y):
        if not (isinstance(x, Mapping) and isinstance(y, Mapping)):
            return unknown
        xk = x.get(key, _missing)
        yk = y.get(key, _missing)
        if xk is _missing or yk is _missing:
            return unknown
        return xk == yk

    is_same.__name__ = "compare_by_key_%s" % key
    return is_same


def compare_by_attribute(name, strict=True):
    "Identity predicate comparing objects by attribute `name`."
    unknown = None if strict else False

    def is_same(x, y):
        xa = getattr(x, name, _missing)
        ya = getattr(y, name, _missing)
        if xa is _missing or ya is _missing:
            return unknown
        return xa == ya

    is_same.__name__ = "compare_by_attribute_%s" % name
    return is_same


def compare_fields(fields):
    """Content predicate comparing mappings on the given fields only.

    A field missing from both items counts as equal, missing from one
    as different. Non-mapping items are not comparable.
    """
    fields = tuple(fields)

    def is_equal(x, y):
        if not (isinstance(x, Mapping) and isinstance(y, Mapping)):
            return None
        return all(x.get(f, _missing) == y.get(f, _missing) for f in fields)

    return is_equal
