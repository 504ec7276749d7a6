# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import pytest

from notedelta import TextDelta, InvalidOperation, OutOfRange
from notedelta.delta_format import op_retain, op_insert, op_remove


def test_apply_identity():
    for base in ["", "a", "hello world"]:
        assert TextDelta().retain(len(base)).apply(base) == base
        assert TextDelta().apply(base) == base


def test_apply_simple_ops():
    assert TextDelta().insert("abc").apply("def") == "abcdef"
    assert TextDelta().remove(3).apply("xyzabc") == "abc"
    assert TextDelta().retain(3).insert("def").apply("abcghi") == "abcdefghi"
    assert TextDelta().retain(3).remove(3).apply("abcxyzghi") == "abcghi"


def test_apply_keeps_untouched_tail():
    assert TextDelta().retain(1).insert("-").apply("abc") == "a-bc"
    assert TextDelta().remove(1).retain(1).insert("!").apply("abcd") == "b!cd"


def test_apply_does_not_modify_delta():
    d = TextDelta().retain(1).remove(1).insert("x")
    before = d.ops
    assert d.apply("abc") == "axc"
    assert d.apply("xyz") == "xxz"
    assert d.ops == before


def test_builder_chains_and_skips_empty_ops():
    d = TextDelta()
    assert d.retain(0) is d
    assert d.insert("") is d
    assert d.remove(0) is d
    assert len(d) == 0
    assert not d
    d.retain(2).insert("x").remove(1)
    assert d.ops == [op_retain(2), op_insert("x"), op_remove(1)]


@pytest.mark.parametrize("build", [
    lambda d: d.retain(-1),
    lambda d: d.remove(-2),
    lambda d: d.retain("3"),
    lambda d: d.remove(None),
    lambda d: d.insert(5),
])
def test_builder_rejects_malformed_ops(build):
    d = TextDelta().retain(1)
    with pytest.raises(InvalidOperation):
        build(d)
    assert d.ops == [op_retain(1)]


def test_append_dispatches_on_tag():
    d = TextDelta()
    d.append(op_retain(1)).append(op_insert("a")).append({"op": "remove", "length": 2})
    assert d.ops == [op_retain(1), op_insert("a"), op_remove(2)]


def test_append_rejects_unknown_variant():
    d = TextDelta()
    with pytest.raises(InvalidOperation):
        d.append({"op": "replace", "content": "x"})
    with pytest.raises(InvalidOperation):
        d.append(("retain", 3))
    with pytest.raises(InvalidOperation):
        TextDelta([op_retain(1), {"op": "move", "length": 1}])


def test_ops_are_copies():
    d = TextDelta().retain(2)
    ops = d.ops
    ops[0].length = 10
    ops.append(op_insert("x"))
    for e in d:
        e.length = 7
    assert d.ops == [op_retain(2)]
    assert d.apply("abc") == "abc"


def test_constructor_copies_ops():
    ops = [op_retain(1), op_insert("x")]
    d = TextDelta(ops)
    ops[0].length = 5
    assert d.ops == [op_retain(1), op_insert("x")]
    assert TextDelta(d.ops) == d


def test_equality_and_repr():
    assert TextDelta().retain(1).insert("a") == TextDelta().retain(1).insert("a")
    assert TextDelta().retain(1) != TextDelta().remove(1)
    assert TextDelta() != []
    assert repr(TextDelta().retain(3).insert("x").remove(1)) == \
        "TextDelta([retain 3, insert 'x', remove 1])"


def test_lengths():
    d = TextDelta().retain(2).insert("xyz").remove(3)
    assert d.base_length == 5
    assert d.target_length(5) == 5
    assert d.target_length(8) == 8
    assert d.can_apply("abcde")
    assert not d.can_apply("abcd")
    assert TextDelta().insert("a").can_apply("")


def test_out_of_range_clamps_by_default():
    assert TextDelta().retain(5).apply("abc") == "abc"
    assert TextDelta().remove(5).apply("abc") == ""
    assert TextDelta().retain(2).remove(5).insert("x").apply("abc") == "abx"
    assert TextDelta().remove(4).retain(1).insert("!").apply("abc") == "!"


def test_out_of_range_reject():
    with pytest.raises(OutOfRange):
        TextDelta().retain(5).apply("abc", out_of_range="reject")
    with pytest.raises(OutOfRange):
        TextDelta().retain(2).remove(2).apply("abc", out_of_range="reject")
    # Exactly reaching the end is fine
    assert TextDelta().retain(1).remove(2).apply("abc", out_of_range="reject") == "a"


def test_out_of_range_is_index_error():
    with pytest.raises(IndexError):
        TextDelta().remove(1).apply("", out_of_range="reject")


def test_invalid_policy():
    with pytest.raises(ValueError):
        TextDelta().apply("abc", out_of_range="wrap")
