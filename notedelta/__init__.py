# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ._version import __version__

from .log import DeltaFormatError, InvalidOperation, OutOfRange, NotFound
from .delta_format import DeltaOp, op_retain, op_insert, op_remove
from .textdelta import TextDelta
from .diffing import diff_text
from .records import (
    ElementType, RawRecord, new_record,
    RecordLoader, DictRecordLoader, RecordSnapshot)
from .recorddelta import RecordDelta, RecordMapDelta


__all__ = [
    "__version__",
    "DeltaFormatError", "InvalidOperation", "OutOfRange", "NotFound",
    "DeltaOp", "op_retain", "op_insert", "op_remove",
    "TextDelta", "diff_text",
    "ElementType", "RawRecord", "new_record",
    "RecordLoader", "DictRecordLoader", "RecordSnapshot",
    "RecordDelta", "RecordMapDelta",
    ]
