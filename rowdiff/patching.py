# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy

from .diff_format import DiffOp, EditScriptFormatError, validate_edit_script


__all__ = ["patch"]


def patch_list(source, target, script):
    deleted = set()
    inserted = []
    updated = set()
    for e in script:
        if e.op == DiffOp.DELETE:
            deleted.add(e.at)
        elif e.op == DiffOp.INSERT:
            inserted.append(e.at)
        elif e.op == DiffOp.UPDATE:
            updated.add(e.at)
        else:
            raise EditScriptFormatError("Invalid op {}.".format(e.op))

    if deleted & updated:
        raise EditScriptFormatError(
            "Cannot update deleted items {}.".format(sorted(deleted & updated)))

    # Surviving items paired with their source index,
    # inserted items get None as they have no source
    items = [(i, value) for i, value in enumerate(source) if i not in deleted]

    # Insert in ascending order, each index is a position in the final sequence
    for j in sorted(inserted):
        if j > len(items):
            raise EditScriptFormatError(
                "Insert index {} beyond end of patched sequence.".format(j))
        items.insert(j, (None, target[j]))

    if len(items) != len(target):
        raise EditScriptFormatError(
            "Patched sequence has {} items, expected {}.".format(len(items), len(target)))

    newobj = []
    for pos, (i, value) in enumerate(items):
        if i is None or i in updated:
            value = target[pos]
        newobj.append(copy.deepcopy(value))
    return newobj


def patch(source, target, script):
    """Apply an edit script from diff(source, target) to source.

    The script is applied the way a list view applies a batch update:
    deletions at source indices first, then insertions at target
    indices, and finally updated items are refreshed from target.
    Items neither inserted nor updated are taken from source.

    Strings are patched character by character and returned as strings.
    """
    validate_edit_script(script, len(source), len(target))
    if isinstance(source, str):
        return "".join(patch_list(list(source), list(target), script))
    elif isinstance(source, (list, tuple)):
        return patch_list(source, target, script)
    else:
        raise ValueError("Invalid object type to patch: {}".format(type(source).__name__))
