# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .log import DeltaFormatError, InvalidOperation


class DeltaEntry(dict):
    """For internal usage in notedelta library.

    Minimal class providing attribute access to delta entry keys.
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


class DeltaOp:
    "Collection of valid values for the op field in delta entries."
    RETAIN = "retain"
    INSERT = "insert"
    REMOVE = "remove"


OPS = (
    DeltaOp.RETAIN,
    DeltaOp.INSERT,
    DeltaOp.REMOVE,
    )


def op_retain(length):
    "Create a delta entry to keep the next length characters of the base."
    return DeltaEntry(op=DeltaOp.RETAIN, length=length)

def op_insert(content):
    "Create a delta entry to emit content without consuming the base."
    return DeltaEntry(op=DeltaOp.INSERT, content=content)

def op_remove(length):
    "Create a delta entry to drop the next length characters of the base."
    return DeltaEntry(op=DeltaOp.REMOVE, length=length)


def is_valid_delta(ops):
    """Checks whether a list of delta entries is well formed.

    Returns a boolean indicating the well-formedness of the delta.
    """
    try:
        validate_delta(ops)
    except DeltaFormatError:
        return False
    return True


def validate_delta(ops):
    """Check whether a list of delta entries is well formed.

    Raises an InvalidOperation if not well formed.
    """
    if not isinstance(ops, (list, tuple)):
        raise InvalidOperation("Delta must be a list of entries.")
    for e in ops:
        validate_delta_entry(e)


def validate_delta_entry(e):
    """Check that e is a well formed delta entry.

    Raises an InvalidOperation if not well formed.
    """
    if not isinstance(e, dict):
        raise InvalidOperation("Delta entry '{}' is not a mapping.".format(e))

    op = e.get("op")
    if op in (DeltaOp.RETAIN, DeltaOp.REMOVE):
        length = e.get("length")
        # bool is an int subclass but never a length
        if not isinstance(length, int) or isinstance(length, bool):
            raise InvalidOperation(
                "{} expects a number of characters, not '{}'.".format(op, length))
        if length < 0:
            raise InvalidOperation(
                "{} expects a non-negative length, not {}.".format(op, length))
    elif op == DeltaOp.INSERT:
        content = e.get("content")
        if not isinstance(content, str):
            raise InvalidOperation(
                "insert expects a string to emit, not '{}'.".format(content))
    else:
        raise InvalidOperation("Unknown delta op '{}'.".format(op))


def count_consumed_symbols(e):
    """Count how many characters a single delta entry consumes from the base
    and produces in the target."""
    op = e["op"]
    if op == DeltaOp.RETAIN:
        return (e["length"], e["length"])
    elif op == DeltaOp.INSERT:
        return (0, len(e["content"]))
    elif op == DeltaOp.REMOVE:
        return (e["length"], 0)
    else:
        raise InvalidOperation("Invalid op '{}'".format(op))


def format_entry(e):
    "Short human readable form of a delta entry, e.g. `retain 3`."
    if e["op"] == DeltaOp.INSERT:
        return "insert {!r}".format(e["content"])
    return "{} {}".format(e["op"], e["length"])
