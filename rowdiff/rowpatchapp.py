# coding: utf-8

# Copyright (c) IPython Development Team.
# Distributed under the terms of the Modified BSD License.

import os
import sys
import json

from .args import ConfigBackedParser
from .diff_format import to_diffentry_dicts
from .log import EditScriptFormatError, error
from .patching import patch
from .utils import (
    EXPLICIT_MISSING_FILE, read_json, read_sequence, setup_std_streams, write_json,
)


_description = "Apply an edit script from rowdiff to a JSON array."


def main_patch(args):
    source_filename = args.source
    target_filename = args.target
    script_filename = args.script
    output_filename = args.output

    for fn in (source_filename, target_filename, script_filename):
        if not os.path.exists(fn) and fn != EXPLICIT_MISSING_FILE:
            error("Missing file %s", fn)
            return 1

    try:
        source = read_sequence(source_filename)
        target = read_sequence(target_filename)
        script = to_diffentry_dicts(read_json(script_filename))
        after = patch(source, target, script)
    except EditScriptFormatError as e:
        error("Invalid edit script %s: %s", script_filename, e)
        return 1
    except ValueError as e:
        error("Could not read sequences: %s", e)
        return 1

    if output_filename:
        write_json(after, output_filename)
    else:
        print(json.dumps(after, indent=2, separators=(",", ": ")))

    return 0


def _build_arg_parser(prog='rowdiff-patch'):
    """Creates an argument parser for the patch command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog,
        add_help=True,
        )
    from .args import add_generic_args, add_filename_args
    add_generic_args(parser)
    add_filename_args(parser, ["source", "target", "script"])
    parser.add_argument(
        '-o', '--output',
        default=None,
        help="if supplied, the patched sequence is written "
             "to this file. Otherwise it is printed to the "
             "terminal.")
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_patch(arguments)


if __name__ == "__main__":
    sys.exit(main())
