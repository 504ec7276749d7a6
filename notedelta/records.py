# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .delta_format import DeltaEntry
from .log import InvalidOperation, NotFound
from .log import debug


__all__ = [
    "ElementType", "RawRecord", "new_record",
    "RecordLoader", "DictRecordLoader", "RecordSnapshot",
    ]


class ElementType:
    "Collection of valid values for the element_type field of records."
    ANY = ""
    NAME = "name"
    VARIANT = "variant"
    OCCURRENCE = "occurrence"
    ASSOCIATION = "association"
    ROLE = "role"


ELEMENT_TYPES = (
    ElementType.ANY,
    ElementType.NAME,
    ElementType.VARIANT,
    ElementType.OCCURRENCE,
    ElementType.ASSOCIATION,
    ElementType.ROLE,
    )


def validate_element_type(tag):
    if tag not in ELEMENT_TYPES:
        raise InvalidOperation("Unknown element type {!r}.".format(tag))


class RawRecord(DeltaEntry):
    """A plain note record: id, value, element_type, type_reference_id
    and the ordered child_ids, with attribute access to its keys."""


def new_record(id, value="", element_type=ElementType.ANY,
               type_reference_id="", child_ids=()):
    "Create a raw record, copying child_ids."
    return RawRecord(
        id=id,
        value=value,
        element_type=element_type,
        type_reference_id=type_reference_id,
        child_ids=list(child_ids),
    )


class RecordLoader(object):
    """Resolves record ids to raw records.

    Subclasses implement resolve(id), returning a raw record (any mapping
    or object with the record keys) or raising NotFound.
    """

    def resolve(self, id):
        raise NotImplementedError


class DictRecordLoader(RecordLoader):
    "In-memory loader over a mapping of id to raw record."

    def __init__(self, records=None):
        self.records = {}
        for r in records or ():
            self.add(r)

    def add(self, record):
        self.records[get_field(record, "id")] = record
        return self

    def resolve(self, id):
        try:
            return self.records[id]
        except KeyError:
            raise NotFound(id)


def get_field(record, key):
    if isinstance(record, dict):
        return record[key]
    return getattr(record, key)


class RecordSnapshot(object):
    """Immutable view of one record.

    The type and children of a record are resolved through the loader each
    time they are accessed, each result wrapped in a new snapshot sharing
    the same loader.
    """

    __slots__ = ("_id", "_value", "_element_type", "_type_reference_id",
                 "_child_ids", "_loader")

    def __init__(self, record, loader):
        self._id = get_field(record, "id")
        self._value = get_field(record, "value")
        self._element_type = get_field(record, "element_type")
        self._type_reference_id = get_field(record, "type_reference_id")
        self._child_ids = tuple(get_field(record, "child_ids"))
        self._loader = loader

    @property
    def id(self):
        return self._id

    @property
    def value(self):
        return self._value

    @property
    def element_type(self):
        return self._element_type

    @property
    def type_reference_id(self):
        return self._type_reference_id

    @property
    def child_ids(self):
        return self._child_ids

    @property
    def loader(self):
        return self._loader

    @property
    def short_name(self):
        return self._id[:4]

    def _load(self, id):
        debug("resolving record %r", id)
        record = self._loader.resolve(id)
        if record is None:
            raise NotFound(id)
        return RecordSnapshot(record, self._loader)

    @property
    def type(self):
        "Snapshot of the type record, or None for untyped records."
        if not self._type_reference_id:
            return None
        return self._load(self._type_reference_id)

    @property
    def children(self):
        """Snapshots of all children, in order.

        Fails as a whole if any child cannot be resolved.
        """
        return [self._load(id) for id in self._child_ids]

    def to_record(self):
        return new_record(
            self._id, self._value, self._element_type,
            self._type_reference_id, self._child_ids)

    def __eq__(self, other):
        if not isinstance(other, RecordSnapshot):
            return NotImplemented
        return self.to_record() == other.to_record()

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    def __repr__(self):
        return "RecordSnapshot(id={!r}, element_type={!r}, value={!r})".format(
            self._id, self._element_type, self._value)
