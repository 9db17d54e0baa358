# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import os
import sys

from .args import (
    ConfigBackedParser, add_generic_args, add_filename_args,
    add_prettyprint_args, prettyprint_config_from_args,
)
from .diff_format import to_diffentry_dicts, validate_edit_script
from .log import EditScriptFormatError, error
from .prettyprint import pretty_print_edit_script
from .utils import read_json, read_sequence, setup_std_streams


_description = ("Show a stored edit script, "
                "optionally with the values of the diffed sequences.")


def main_show(args):
    for fn in (args.script, args.source, args.target):
        if fn is not None and not os.path.exists(fn):
            error("Missing file %s", fn)
            return 1

    try:
        script = to_diffentry_dicts(read_json(args.script))
        a = read_sequence(args.source) if args.source else None
        b = read_sequence(args.target) if args.target else None
        validate_edit_script(
            script,
            None if a is None else len(a),
            None if b is None else len(b))
    except EditScriptFormatError as e:
        error("Invalid edit script %s: %s", args.script, e)
        return 1
    except ValueError as e:
        error("Could not read sequences: %s", e)
        return 1

    # This printer is to keep the unit tests passing,
    # some tests capture output with capsys which doesn't
    # pick up on sys.stdout.write()
    class Printer:
        def write(self, text):
            print(text, end="")

    config = prettyprint_config_from_args(args, out=Printer())
    pretty_print_edit_script(a, b, script, config)
    return 0


def _build_arg_parser(prog='rowdiff-show'):
    """Creates an argument parser for the show command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog,
        )
    add_generic_args(parser)
    add_prettyprint_args(parser)
    add_filename_args(parser, ["script"])
    parser.add_argument(
        '-s', '--source',
        default=None,
        help="the source sequence the script was computed from.")
    parser.add_argument(
        '-t', '--target',
        default=None,
        help="the target sequence the script was computed to.")
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_show(arguments)


if __name__ == "__main__":
    sys.exit(main())
