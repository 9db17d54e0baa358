# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .log import EditScriptFormatError


class DiffEntry(dict):
    """For internal usage in rowdiff library.

    Minimal class providing attribute access to edit script entry keys.
    """
    def __getattr__(self, name):
        if name.startswith("__") and name.endswith("__"):
            return self.__getattribute__(name)
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name)

    def __setattr__(self, name, value):
        self[name] = value


class DiffOp:
    "Collection of valid values for the op field in edit script entries."
    INSERT = "insert"
    DELETE = "delete"
    UPDATE = "update"


def op_insert(at):
    "Create an edit script entry inserting the target item with index `at`."
    return DiffEntry(op=DiffOp.INSERT, at=at)

def op_delete(at):
    "Create an edit script entry deleting the source item with index `at`."
    return DiffEntry(op=DiffOp.DELETE, at=at)

def op_update(at):
    "Create an edit script entry marking the source item with index `at` as changed."
    return DiffEntry(op=DiffOp.UPDATE, at=at)


class EditScriptBuilder(object):
    """Accumulates edit script entries in path order.

    Unlike a sorted builder, entries are kept in the order they are
    appended, which for the Myers path is monotonically increasing
    in both source and target coordinates.
    """

    # Valid values for the op field in edit script entries
    OPS = (
        DiffOp.INSERT,
        DiffOp.DELETE,
        DiffOp.UPDATE,
        )

    def __init__(self):
        self._script = []
        self._seen = set()

    def validated(self):
        return self._script

    def append(self, entry):
        # Simplifies some algorithms
        if entry is None:
            return

        # Typechecking (just for internal consistency checking)
        assert isinstance(entry, DiffEntry)
        assert "op" in entry
        assert entry.op in EditScriptBuilder.OPS
        assert "at" in entry
        assert (entry.op, entry.at) not in self._seen, (
            'duplicate edit script entry %r' % (entry,))

        self._seen.add((entry.op, entry.at))
        self._script.append(entry)

    def insert(self, at):
        self.append(op_insert(at))

    def delete(self, at):
        self.append(op_delete(at))

    def update(self, at):
        self.append(op_update(at))


def count_ops(script):
    """Count entries of each op kind in an edit script.

    Returns a dict with a count for every op in `EditScriptBuilder.OPS`.
    """
    counts = dict.fromkeys(EditScriptBuilder.OPS, 0)
    for e in script:
        counts[e.op] += 1
    return counts


def is_valid_edit_script(script, source_length=None, target_length=None):
    """Checks wheter an edit script (list of entries) is well formed.

    Returns a boolean indicating the well-formedness of the script.
    """
    try:
        validate_edit_script(script, source_length, target_length)
        result = True
    except EditScriptFormatError:
        result = False
    return result


def validate_edit_script(script, source_length=None, target_length=None):
    """Check wheter an edit script (list of entries) is well formed.

    When the lengths of the diffed sequences are given, indices are
    range checked too: insert indices against the target and
    delete/update indices against the source.

    Raises an EditScriptFormatError if not well formed.
    """
    if not isinstance(script, list):
        raise EditScriptFormatError("Edit script must be a list.")
    seen = set()
    for e in script:
        validate_edit_script_entry(e, source_length, target_length)
        if (e.op, e.at) in seen:
            raise EditScriptFormatError(
                "Duplicate edit script entry '{}'.".format(e))
        seen.add((e.op, e.at))


def validate_edit_script_entry(e, source_length=None, target_length=None):
    """Check that e is a well formed edit script entry.

    Raises an EditScriptFormatError if not well formed.
    """
    if not isinstance(e, DiffEntry):
        raise EditScriptFormatError("Edit script entry '{}' is not a diff type.".format(e))
    if "op" not in e or "at" not in e:
        raise EditScriptFormatError("Edit script entry '{}' needs 'op' and 'at'.".format(e))

    op = e.op
    at = e.at
    # bool is an int subclass, but never a valid index
    if not isinstance(at, int) or isinstance(at, bool) or at < 0:
        raise EditScriptFormatError(
            "Invalid edit script index '{}' of type '{}'.".format(at, type(at)))

    if op == DiffOp.INSERT:
        limit = target_length
    elif op in (DiffOp.DELETE, DiffOp.UPDATE):
        limit = source_length
    else:
        raise EditScriptFormatError("Unknown edit script op '{}'.".format(op))

    if limit is not None and at >= limit:
        raise EditScriptFormatError(
            "{} index {} out of range for sequence of length {}.".format(op, at, limit))


def to_diffentry_dicts(script):
    "Convert an edit script loaded from json into a list of DiffEntry objects."
    if not isinstance(script, list):
        raise EditScriptFormatError("Edit script must be a list.")
    converted = []
    for e in script:
        if not isinstance(e, dict):
            raise EditScriptFormatError("Edit script entry '{}' is not an object.".format(e))
        converted.append(DiffEntry(e))
    return converted


def to_json_script(script):
    "Convert an edit script into plain dicts, suitable for json serialization."
    return [{"op": e.op, "at": e.at} for e in script]
