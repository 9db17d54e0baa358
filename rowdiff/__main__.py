# coding: utf-8

# Copyright (c) IPython Development Team.
# Distributed under the terms of the Modified BSD License.

import sys

from ._version import __version__

COMMANDS = ["diff", "patch", "show"]
HELP_MESSAGE_VERBOSE = ("Usage: rowdiff [OPTIONS]\n\n"
                       "OPTIONS: -h, --version, --config, COMMANDS{%s}\n\n"
                       "Examples: rowdiff --version\n"
                       "          rowdiff diff -h\n"
                       "          rowdiff diff --id-key id before.json after.json\n"
                       "          rowdiff patch before.json after.json script.json\n"
                       % ", ".join(COMMANDS))


def main_dispatch(args=None):
    if args is None:
        args = sys.argv[1:]
    if len(args) < 1:
        sys.exit("Option missing.\n\n%s" % HELP_MESSAGE_VERBOSE)

    cmd = args[0]
    args = args[1:]

    if cmd == "diff":
        from rowdiff.rowdiffapp import main
    elif cmd == "patch":
        from rowdiff.rowpatchapp import main
    elif cmd == "show":
        from rowdiff.rowshowapp import main
    else:
        if cmd == '--version':
            sys.exit(__version__)
        if cmd == '-h' or cmd == '--help':
            sys.exit(HELP_MESSAGE_VERBOSE)
        if cmd == '--config':
            # List all possible config options:
            from .args import print_config
            from .config import build_config, entrypoint_configurables
            print('All available config options, and their current values:\n',
                  file=sys.stderr)
            for entrypoint, cls in entrypoint_configurables.items():
                config = build_config(entrypoint, True)
                print_config(cls.__name__, config, out=sys.stderr)
                print('', file=sys.stderr)
            sys.exit(1)
        else:
            sys.exit("Unrecognized command '%s'\n\n%s." %
                     (cmd, HELP_MESSAGE_VERBOSE))
    return main(args)


if __name__ == "__main__":
    # This is triggered by "python -m rowdiff <args>"
    sys.exit(main_dispatch())
