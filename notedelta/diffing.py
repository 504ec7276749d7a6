# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from difflib import SequenceMatcher

from .textdelta import TextDelta


__all__ = ["diff_text"]


def opcodes_to_delta(a, b, opcodes):
    "Convert difflib opcodes to a text delta."
    delta = TextDelta()
    last = len(opcodes) - 1
    for i, opcode in enumerate(opcodes):
        action, abegin, aend, bbegin, bend = opcode
        asize = aend - abegin
        if action == "equal":
            # The untouched tail of the base is kept implicitly
            if i < last:
                delta.retain(asize)
        elif action == "replace":
            delta.remove(asize)
            delta.insert(b[bbegin:bend])
        elif action == "insert":
            delta.insert(b[bbegin:bend])
        elif action == "delete":
            delta.remove(asize)
        else:
            raise RuntimeError("Unknown action {}".format(action))
    return delta


def diff_text(a, b):
    """Compute a text delta turning string a into string b.

    This implementation uses SequenceMatcher from the builtin Python difflib,
    so diff_text(a, b).apply(a) == b for any pair of strings.
    """
    assert isinstance(a, str) and isinstance(b, str), 'diff_text compares strings'
    s = SequenceMatcher(None, a, b, autojunk=False)
    return opcodes_to_delta(a, b, s.get_opcodes())
