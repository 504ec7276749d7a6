# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .config import Apply, OUT_OF_RANGE_POLICIES, config_instance
from .delta_format import (
    DeltaEntry, DeltaOp, op_retain, op_insert, op_remove,
    validate_delta_entry, count_consumed_symbols, format_entry)
from .log import InvalidOperation, OutOfRange
from .log import debug


__all__ = ["TextDelta"]


def _carry(entry, n, rest):
    """Consume n characters of entry.

    Returns what is left of entry, or the next entry of the rest iterator
    when nothing is left.
    """
    if entry.op == DeltaOp.INSERT:
        if len(entry.content) > n:
            return op_insert(entry.content[n:])
    elif entry.length > n:
        return DeltaEntry(op=entry.op, length=entry.length - n)
    return next(rest, None)


class TextDelta(object):
    """Describes a sequence of operations that might be applied to a string.

    Operations are evaluated left to right against a cursor into the base
    string: retain copies characters, insert emits literal content and
    remove skips characters. Whatever is left of the base after the last
    operation is kept.
    """

    def __init__(self, ops=None):
        self._ops = []
        for e in ops or ():
            self.append(e)

    def retain(self, length):
        """Retains, or skips over, part of the base string.

        length: the number of characters to retain.
        """
        entry = op_retain(length)
        validate_delta_entry(entry)
        if length:
            self._ops.append(entry)
        return self

    def insert(self, content):
        entry = op_insert(content)
        validate_delta_entry(entry)
        if content:
            self._ops.append(entry)
        return self

    def remove(self, length):
        entry = op_remove(length)
        validate_delta_entry(entry)
        if length:
            self._ops.append(entry)
        return self

    def append(self, entry):
        if not isinstance(entry, dict):
            raise InvalidOperation("Delta entry '{}' is not a mapping.".format(entry))
        op = entry.get("op")
        if op == DeltaOp.RETAIN:
            return self.retain(entry.get("length"))
        elif op == DeltaOp.INSERT:
            return self.insert(entry.get("content"))
        elif op == DeltaOp.REMOVE:
            return self.remove(entry.get("length"))
        raise InvalidOperation("Unknown delta op '{}'.".format(op))

    def extend(self, entries):
        for e in entries:
            self.append(e)
        return self

    @property
    def ops(self):
        "Copies of the entries, in order."
        return [DeltaEntry(e) for e in self._ops]

    def __iter__(self):
        return iter(self.ops)

    def __len__(self):
        return len(self._ops)

    def __bool__(self):
        return bool(self._ops)

    def __eq__(self, other):
        if not isinstance(other, TextDelta):
            return NotImplemented
        return self._ops == other._ops

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    def __repr__(self):
        return "TextDelta([{}])".format(", ".join(format_entry(e) for e in self._ops))

    @property
    def base_length(self):
        "Number of base characters consumed by retains and removes."
        return sum(count_consumed_symbols(e)[0] for e in self._ops)

    def target_length(self, base_length):
        "Length of the result of applying this delta to a base it fits."
        produced = sum(count_consumed_symbols(e)[1] for e in self._ops)
        return produced + max(base_length - self.base_length, 0)

    def can_apply(self, base):
        "Whether every retain and remove stays within base."
        return self.base_length <= len(base)

    def apply(self, base, out_of_range=None):
        """Produce a new string by applying this delta to base.

        out_of_range selects what happens when a retain or remove runs past
        the end of base: 'clamp' stops the cursor at the end, 'reject'
        raises OutOfRange. Defaults to the configured Apply.out_of_range.
        """
        if out_of_range is None:
            out_of_range = config_instance(Apply).out_of_range
        if out_of_range not in OUT_OF_RANGE_POLICIES:
            raise ValueError("Invalid out_of_range policy: {!r}".format(out_of_range))

        result = []
        i = 0
        n = len(base)
        for e in self._ops:
            op = e.op
            if op == DeltaOp.INSERT:
                result.append(e.content)
                continue
            if i + e.length > n:
                if out_of_range == 'reject':
                    raise OutOfRange(
                        "{} of {} at offset {} exceeds base length {}".format(
                            op, e.length, i, n))
                debug("clamping %s of %d at offset %d to base length %d",
                      op, e.length, i, n)
            if op == DeltaOp.RETAIN:
                result.append(base[i:i + e.length])
            i = min(i + e.length, n)
        result.append(base[i:])
        return "".join(result)

    def compose(self, other):
        """Produce one delta equivalent to applying self and then other.

        Neither self nor other is modified.
        """
        if not isinstance(other, TextDelta):
            raise TypeError("Can only compose with a TextDelta, not {}".format(
                type(other).__name__))
        merged = TextDelta()
        this_ops = iter(self._ops)
        other_ops = iter(other._ops)
        t = next(this_ops, None)
        o = next(other_ops, None)
        while t is not None or o is not None:
            if t is None:
                merged.append(o)
                o = next(other_ops, None)
            elif o is None:
                merged.append(t)
                t = next(this_ops, None)
            elif o.op == DeltaOp.INSERT:
                # Inserted by other, nothing in self can touch it
                merged.append(o)
                o = next(other_ops, None)
            elif t.op == DeltaOp.REMOVE:
                # Removed characters never reach other
                merged.append(t)
                t = next(this_ops, None)
            elif o.op == DeltaOp.RETAIN:
                if t.op == DeltaOp.RETAIN:
                    n = min(o.length, t.length)
                    merged.retain(n)
                elif t.op == DeltaOp.INSERT:
                    n = min(o.length, len(t.content))
                    merged.insert(t.content[:n])
                else:
                    raise InvalidOperation("Unknown delta op '{}'.".format(t.op))
                t = _carry(t, n, this_ops)
                o = _carry(o, n, other_ops)
            elif o.op == DeltaOp.REMOVE:
                if t.op == DeltaOp.RETAIN:
                    n = min(o.length, t.length)
                    merged.remove(n)
                elif t.op == DeltaOp.INSERT:
                    # Removing freshly inserted characters cancels them out
                    n = min(o.length, len(t.content))
                else:
                    raise InvalidOperation("Unknown delta op '{}'.".format(t.op))
                t = _carry(t, n, this_ops)
                o = _carry(o, n, other_ops)
            else:
                raise InvalidOperation("Unknown delta op '{}'.".format(o.op))
        debug("composed %d and %d ops into %d", len(self), len(other), len(merged))
        return merged
