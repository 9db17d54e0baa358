# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import argparse
import json
import logging
import sys

from ._version import __version__
from .config import (
    get_defaults_for_argparse, build_config, entrypoint_configurables,
)
from .log import init_logging, set_rowdiff_log_level


class ConfigBackedParser(argparse.ArgumentParser):

    def parse_known_args(self, args=None, namespace=None):
        entrypoint = self.prog.split(' ')[0]
        try:
            defs = get_defaults_for_argparse(entrypoint)
            self.set_defaults(**defs)
        except ValueError:
            pass
        return super(ConfigBackedParser, self).parse_known_args(args=args, namespace=namespace)


class LogLevelAction(argparse.Action):
    def __init__(self, option_strings, dest, default=None, **kwargs):
        # __call__ is not called if option not given:
        level = getattr(logging, default or 'INFO')
        init_logging(level=level)
        set_rowdiff_log_level(level)
        super(LogLevelAction, self).__init__(option_strings, dest, default=default, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        setattr(namespace, self.dest, values)
        level = getattr(logging, values)
        set_rowdiff_log_level(level, True)


def modify_config_for_print(config):
    output = {}
    for k, v in config.items():
        if isinstance(v, dict):
            output[k] = modify_config_for_print(v)
            if not output[k]:
                output[k] = '{}'
        else:
            output[k] = json.dumps(v)
    return output


def print_config(header, config, out=None):
    "Print the effective config values of an entrypoint."
    if out is None:
        out = sys.stderr
    out.write('%s:\n' % header)
    for k, v in sorted(modify_config_for_print(config).items()):
        out.write('  %s: %s\n' % (k, v))


class ConfigHelpAction(argparse.Action):
    def __init__(self, option_strings, dest, help=None):
        super(ConfigHelpAction, self).__init__(
            option_strings, dest, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        header = entrypoint_configurables[parser.prog].__name__
        config = build_config(parser.prog, True)
        print_config(header, config)
        sys.exit(1)


def add_generic_args(parser):
    """Adds a set of arguments common to all rowdiff commands.
    """
    parser.add_argument(
        '--version',
        action="version",
        version="%(prog)s " + __version__)
    parser.add_argument(
        '--config',
        help="list the valid config keys and their current effective values",
        action=ConfigHelpAction,
    )
    parser.add_argument(
        '--log-level',
        default='INFO',
        choices=('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        help="set the log level by name.",
        action=LogLevelAction,
    )


def add_diff_args(parser):
    """Adds a set of arguments for commands that perform diffs.
    """
    comparing = parser.add_argument_group(
        title='comparing',
        description='Set how items of the two sequences are compared.')
    comparing.add_argument(
        '-k', '--id-key',
        dest='id_key',
        default=None,
        help="identify items by the value at this key. If not given, "
             "items are identified by comparing their whole value.")
    comparing.add_argument(
        '-f', '--compare-fields',
        dest='compare_fields',
        nargs='+',
        default=[],
        metavar='FIELD',
        help="compare the content of identified items on these keys only.")
    comparing.add_argument(
        '--no-strict',
        dest='strict',
        action='store_false',
        default=True,
        help="consider items lacking the id key as different from all "
             "others, instead of failing the diff.")


filename_help = {
    "source": "The source sequence filename (a JSON array).",
    "target": "The target sequence filename (a JSON array).",
    "script": "The edit script filename, output from rowdiff diff --out.",
    }


def add_filename_args(parser, names):
    """Add the source, target, and script positional arguments.

    Helps getting consistent doc strings.
    """
    for name in names:
        parser.add_argument(name, help=filename_help[name])


def add_prettyprint_args(parser):
    """Adds optional arguments for controlling pretty print behavior.
    """
    parser.add_argument(
        '--color',
        dest='color',
        action="store_true",
        default=True,
        help=("use ANSI color code escapes for text output")
    )
    parser.add_argument(
        '--no-color',
        dest='color',
        action="store_false",
        help=("prevent use of ANSI color code escapes for text output")
    )


def prettyprint_config_from_args(arguments, **kwargs):
    from .prettyprint import PrettyPrintConfig
    return PrettyPrintConfig(
        use_color=getattr(arguments, 'color', True),
        **kwargs
    )


def diff_config_from_args(arguments):
    from .diffing.config import DiffConfig
    return DiffConfig.from_options(
        id_key=getattr(arguments, 'id_key', None),
        compare_fields_=getattr(arguments, 'compare_fields', None),
        strict=getattr(arguments, 'strict', True),
    )
