# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple
import datetime
import os
import pprint
import sys

import colorama

from .diff_format import DiffOp, EditScriptFormatError


# Indentation offset in pretty-print
IND = "  "

# Max line width used some placed in pretty-print
MAXWIDTH = 78


DIFF_ENTRY_END = '\n'

ColoredConstants = namedtuple('ColoredConstants', (
    'KEEP',
    'REMOVE',
    'ADD',
    'UPDATE',
    'INFO',
    'RESET',
))


col_const = {
    True: ColoredConstants(
        KEEP   = '{color}   '.format(color=''),
        REMOVE = '{color}-  '.format(color=colorama.Fore.RED),
        ADD    = '{color}+  '.format(color=colorama.Fore.GREEN),
        UPDATE = '{color}~  '.format(color=colorama.Fore.YELLOW),
        INFO   = '{color}## '.format(color=colorama.Fore.BLUE + colorama.Style.BRIGHT),
        RESET  = colorama.Style.RESET_ALL,
    ),

    False: ColoredConstants(
        KEEP   = '   ',
        REMOVE = '-  ',
        ADD    = '+  ',
        UPDATE = '~  ',
        INFO   = '## ',
        RESET  = '',
    )
}


class PrettyPrintConfig:
    def __init__(
            self,
            out=sys.stdout,
            use_color=True,
            show_values=True,
            ):
        self.out = out
        self.use_color = use_color
        self.show_values = show_values

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
    def UPDATE(self):
        return col_const[self.use_color].UPDATE

    @property
    def INFO(self):
        return col_const[self.use_color].INFO

    @property
    def RESET(self):
        return col_const[self.use_color].RESET

DefaultConfig = PrettyPrintConfig()


_short_ops = {
    DiffOp.INSERT: "I",
    DiffOp.DELETE: "D",
    DiffOp.UPDATE: "U",
}


def format_entry(e):
    "Compact form of an edit script entry, e.g. D(r:1)."
    try:
        return "%s(r:%d)" % (_short_ops[e.op], e.at)
    except KeyError:
        raise EditScriptFormatError("Unknown edit script op {}".format(e.op))


def format_script(script):
    "Compact form of a whole edit script, e.g. [D(r:0), I(r:2)]."
    return "[%s]" % ", ".join(format_entry(e) for e in script)


def file_timestamp(filename):
    "Return modification time for filename as a string."
    if os.path.exists(filename):
        t = os.path.getmtime(filename)
        dt = datetime.datetime.fromtimestamp(t)
        return dt.isoformat(str(" "))
    else:
        return "(no timestamp)"


def format_value(v):
    "Format simple value for printing, using pprint for anything not a string."
    if isinstance(v, str):
        return v
    return pprint.pformat(v, width=MAXWIDTH)


def pretty_print_multiline(text, prefix="", config=DefaultConfig):
    assert isinstance(text, str), 'expected string argument'

    # Preprend prefix to lines, letting lines keep their own newlines
    lines = text.splitlines(True)
    for line in lines:
        config.out.write(prefix + line)

    # If the final line doesn't have a newline,
    # make sure we still start a new line
    if not text.endswith("\n"):
        config.out.write("\n")


def pretty_print_value(value, prefix="", config=DefaultConfig):
    pretty_print_multiline(format_value(value), prefix, config)


def pretty_print_diff_action(msg, key, config):
    config.out.write("%s%s %s:%s\n" % (config.INFO, msg, key, config.RESET))


def pretty_print_edit_script_entry(a, b, e, config=DefaultConfig):
    """Pretty-print a single entry of an edit script of a into b.

    Either of a or b can be None, e.g. when printing a stored script,
    in which case only the action is printed.
    """
    op = e.op
    at = e.at

    if op == DiffOp.INSERT:
        pretty_print_diff_action("inserted", "target[%d]" % at, config)
        if config.show_values and b is not None:
            pretty_print_value(b[at], config.ADD, config)

    elif op == DiffOp.DELETE:
        pretty_print_diff_action("deleted", "source[%d]" % at, config)
        if config.show_values and a is not None:
            pretty_print_value(a[at], config.REMOVE, config)

    elif op == DiffOp.UPDATE:
        pretty_print_diff_action("updated", "source[%d]" % at, config)
        if config.show_values and a is not None:
            pretty_print_value(a[at], config.UPDATE, config)

    else:
        raise EditScriptFormatError("Unknown edit script op {}".format(op))

    config.out.write(DIFF_ENTRY_END + config.RESET)


edit_script_header = """\
rowdiff {afn} {bfn}
--- {afn}{atime}
+++ {bfn}{btime}
"""


def pretty_print_edit_script(a, b, script, config=DefaultConfig):
    "Pretty-print all entries of an edit script of a into b."
    for e in script:
        pretty_print_edit_script_entry(a, b, e, config)


def pretty_print_sequence_diff(afn, bfn, a, b, script, config=DefaultConfig):
    """Pretty-print the edit script of two sequences read from files

    Parameters
    ----------

    afn: str
        Filename of a, the source sequence
    bfn: str
        Filename of b, the target sequence
    a: list
        The source sequence
    b: list
        The target sequence
    script: list
        The edit script describing the transformation from a to b
    config: PrettyPrintConfig
        Config object determining what gets printed and where
    """
    if script:
        atime = "  " + file_timestamp(afn)
        btime = "  " + file_timestamp(bfn)
        config.out.write(edit_script_header.format(
            afn=afn, bfn=bfn, atime=atime, btime=btime))
        pretty_print_edit_script(a, b, script, config)
