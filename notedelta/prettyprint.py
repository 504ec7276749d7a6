# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple
import sys

import colorama

from .config import PrettyPrint, config_instance
from .delta_format import DeltaOp
from .log import InvalidOperation
from .records import get_field


# Indentation offset in pretty-print
IND = "  "


ColoredConstants = namedtuple('ColoredConstants', (
    'KEEP',
    'REMOVE',
    'ADD',
    'INFO',
    'RESET',
))


col_const = {
    True: ColoredConstants(
        KEEP   = '{color}   '.format(color=''),
        REMOVE = '{color}-  '.format(color=colorama.Fore.RED),
        ADD    = '{color}+  '.format(color=colorama.Fore.GREEN),
        INFO   = '{color}## '.format(color=colorama.Fore.BLUE + colorama.Style.BRIGHT),
        RESET  = colorama.Style.RESET_ALL,
    ),

    False: ColoredConstants(
        KEEP   = '   ',
        REMOVE = '-  ',
        ADD    = '+  ',
        INFO   = '## ',
        RESET  = '',
    )
}


class PrettyPrintConfig:
    def __init__(self, out=None, use_color=None):
        self.out = sys.stdout if out is None else out
        if use_color is None:
            use_color = config_instance(PrettyPrint).use_color
        self.use_color = use_color

    @property
    def KEEP(self):
        return col_const[self.use_color].KEEP

    @property
    def REMOVE(self):
        return col_const[self.use_color].REMOVE

    @property
    def ADD(self):
        return col_const[self.use_color].ADD

    @property
    def INFO(self):
        return col_const[self.use_color].INFO

    @property
    def RESET(self):
        return col_const[self.use_color].RESET


def pretty_print_multiline(text, prefix="", config=None):
    assert isinstance(text, str), 'expected string argument'
    config = config or PrettyPrintConfig()

    # Preprend prefix to lines, letting lines keep their own newlines
    lines = text.splitlines(True)
    for line in lines:
        config.out.write(prefix + line)

    # If the final line doesn't have a newline,
    # make sure we still start a new line
    if not text.endswith("\n"):
        config.out.write("\n")


def pretty_print_action(msg, where, config):
    config.out.write("%s%s %s:%s\n" % (config.INFO, msg, where, config.RESET))


def pretty_print_text_delta(base, delta, config=None):
    """Print each operation of delta against base.

    Kept text is prefixed with spaces, inserted text with '+'
    and removed text with '-'.
    """
    config = config or PrettyPrintConfig()
    i = 0
    for e in delta:
        op = e.op
        if op == DeltaOp.RETAIN:
            pretty_print_action("kept", "%d-%d" % (i, i + e.length), config)
            pretty_print_multiline(base[i:i + e.length], config.KEEP, config)
            i += e.length
        elif op == DeltaOp.INSERT:
            pretty_print_action("inserted before", "%d" % i, config)
            pretty_print_multiline(e.content, config.ADD, config)
        elif op == DeltaOp.REMOVE:
            pretty_print_action("removed", "%d-%d" % (i, i + e.length), config)
            pretty_print_multiline(base[i:i + e.length], config.REMOVE, config)
            i += e.length
        else:
            raise InvalidOperation("Unknown delta op {}".format(op))
        config.out.write(config.RESET)


def pretty_print_record_delta(prev, record_delta, config=None):
    "Print the changes record_delta would make to prev."
    config = config or PrettyPrintConfig()
    record_id = get_field(prev, "id")
    changes = (
        ("element type", "element_type", record_delta.element_type),
        ("type reference", "type_reference_id", record_delta.type_reference_id),
    )
    for label, key, new in changes:
        if new is None:
            continue
        pretty_print_action("%s changed" % label, record_id, config)
        config.out.write("%s%s%s\n" % (config.REMOVE, get_field(prev, key), config.RESET))
        config.out.write("%s%s%s\n" % (config.ADD, new, config.RESET))
    if record_delta.value_delta is not None:
        pretty_print_action("value edited", record_id, config)
        pretty_print_text_delta(get_field(prev, "value"), record_delta.value_delta, config)
