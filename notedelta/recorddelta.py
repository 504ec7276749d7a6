# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .records import new_record, validate_element_type, get_field
from .textdelta import TextDelta
from .log import InvalidOperation, NotFound
from .log import debug


__all__ = ["RecordDelta", "RecordMapDelta"]


# Sentinel to tell an unset scalar apart from one set to ""
Missing = object()


class RecordDelta(object):
    """Describes changes to one record.

    Value edits are folded together by composition, element type and
    type reference replacements are last-write-wins. Child ids are never
    changed.
    """

    def __init__(self, record_id):
        self._record_id = record_id
        self._value_delta = None
        self._element_type = Missing
        self._type_reference_id = Missing

    @property
    def record_id(self):
        return self._record_id

    @property
    def value_delta(self):
        return self._value_delta

    @property
    def element_type(self):
        return None if self._element_type is Missing else self._element_type

    @property
    def type_reference_id(self):
        return None if self._type_reference_id is Missing else self._type_reference_id

    def edit_value(self, delta):
        if not isinstance(delta, TextDelta):
            raise InvalidOperation("edit_value expects a TextDelta, not {!r}.".format(delta))
        if self._value_delta is None:
            self._value_delta = TextDelta(delta.ops)
        else:
            self._value_delta = self._value_delta.compose(delta)
        return self

    def set_element_type(self, tag):
        validate_element_type(tag)
        self._element_type = tag
        return self

    def set_type_reference(self, id):
        self._type_reference_id = id
        return self

    set_note_type = set_type_reference

    def affects_id(self, id):
        return self._record_id == id

    def is_empty(self):
        return (self._value_delta is None and
                self._element_type is Missing and
                self._type_reference_id is Missing)

    def update(self, other):
        "Fold the changes of another record delta into this one."
        if other.value_delta is not None:
            self.edit_value(other.value_delta)
        if other._element_type is not Missing:
            self._element_type = other._element_type
        if other._type_reference_id is not Missing:
            self._type_reference_id = other._type_reference_id
        return self

    def apply(self, prev, out_of_range=None):
        """Produce a new raw record from prev, a snapshot or raw record."""
        value = get_field(prev, "value")
        if self._value_delta is not None:
            value = self._value_delta.apply(value, out_of_range=out_of_range)
        element_type = get_field(prev, "element_type")
        if self._element_type is not Missing:
            element_type = self._element_type
        type_reference_id = get_field(prev, "type_reference_id")
        if self._type_reference_id is not Missing:
            type_reference_id = self._type_reference_id
        return new_record(
            get_field(prev, "id"), value, element_type,
            type_reference_id, get_field(prev, "child_ids"))

    def __repr__(self):
        parts = [repr(self._record_id)]
        if self._value_delta is not None:
            parts.append("value={!r}".format(self._value_delta))
        if self._element_type is not Missing:
            parts.append("element_type={!r}".format(self._element_type))
        if self._type_reference_id is not Missing:
            parts.append("type_reference_id={!r}".format(self._type_reference_id))
        return "RecordDelta({})".format(", ".join(parts))


class RecordMapDelta(object):
    "Ordered collection of record deltas, at most one per record id."

    def __init__(self, record_deltas=None):
        self._deltas = {}
        for d in record_deltas or ():
            self.add(d)

    def edit(self, record_id):
        """Return the record delta held for record_id, creating it if needed."""
        if record_id not in self._deltas:
            self._deltas[record_id] = RecordDelta(record_id)
        return self._deltas[record_id]

    def add(self, record_delta):
        if self._deltas.get(record_delta.record_id) is record_delta:
            return self
        self.edit(record_delta.record_id).update(record_delta)
        return self

    def affects_id(self, id):
        return id in self._deltas

    @property
    def record_ids(self):
        return list(self._deltas)

    def __iter__(self):
        return iter(self._deltas.values())

    def __len__(self):
        return len(self._deltas)

    def apply(self, loader, out_of_range=None):
        """Apply every record delta to the record the loader resolves for it.

        Returns a dict of record id to new raw record. Fails as a whole if
        any record cannot be resolved.
        """
        result = {}
        for record_id, d in self._deltas.items():
            prev = loader.resolve(record_id)
            if prev is None:
                raise NotFound(record_id)
            result[record_id] = d.apply(prev, out_of_range=out_of_range)
        debug("applied %d record deltas", len(result))
        return result
