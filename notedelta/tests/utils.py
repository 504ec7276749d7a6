# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import random
import string

from notedelta import TextDelta
from notedelta.delta_format import OPS, DeltaOp, is_valid_delta


def check_compose(d1, d2, base):
    "Check that composing d1 and d2 has the effect of applying them in turn."
    composed = d1.compose(d2)
    assert is_valid_delta(composed.ops)
    assert composed.apply(base) == d2.apply(d1.apply(base))
    return composed


def random_delta(rng, base_length, max_ops=6):
    """Build a random delta whose retains and removes fit a base of
    base_length characters."""
    delta = TextDelta()
    remaining = base_length
    for _ in range(rng.randint(0, max_ops)):
        op = rng.choice(OPS)
        if op == DeltaOp.INSERT:
            size = rng.randint(1, 4)
            delta.insert("".join(rng.choice(string.ascii_uppercase) for _ in range(size)))
        elif remaining:
            n = rng.randint(1, remaining)
            remaining -= n
            if op == DeltaOp.RETAIN:
                delta.retain(n)
            else:
                delta.remove(n)
    return delta


def seeded_rng(seed):
    return random.Random(seed)
