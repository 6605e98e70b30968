# Copyright (c), 2016-2025, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
# mypy: ignore-errors
"""Command Line Interface"""
import sys
import os
import argparse
import logging

from extbinding import ExtBindingException, ExtensionRegistry, check_bindings, \
    load_plugins


PROGRAM_NAME = os.path.basename(sys.argv[0])


def get_loglevel(verbosity):
    if verbosity <= 0:
        return logging.ERROR
    elif verbosity == 1:
        return logging.WARNING
    elif verbosity == 2:
        return logging.INFO
    else:
        return logging.DEBUG


def max_errors_number(value):
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError("%r is not an integer" % value) from None
    if number < 1:
        raise argparse.ArgumentTypeError("%r is not a positive integer" % value)
    return number


def plugins_epilog(plugins):
    if not plugins:
        return "no extension plugins installed."

    lines = ["installed extension plugins:"]
    for plugin in plugins:
        if plugin.usage:
            lines.append(f"  -{plugin.option_name}: {plugin.usage}")
        else:
            lines.append(f"  -{plugin.option_name}")
    return '\n'.join(lines)


def check():
    try:
        plugins = load_plugins()
    except ExtBindingException as err:
        print(f"error: {err}", file=sys.stderr)
        sys.exit(2)

    parser = argparse.ArgumentParser(prog=PROGRAM_NAME, add_help=True,
                                     description="check the vendor extensions "
                                                 "of a set of binding files.",
                                     epilog=plugins_epilog(plugins),
                                     formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.usage = "%(prog)s [OPTION]... [FILE]...\n" \
                   "Try '%(prog)s --help' for more information."
    parser.add_argument('-v', dest='verbosity', action='count', default=0,
                        help="increase output verbosity.")
    parser.add_argument('--extension', action='store_true', default=False,
                        help="allow vendor extensions (strict mode for default).")
    parser.add_argument('-X', dest='enabled', action='append', default=[],
                        metavar='NAME', help="enable the plugin with the option "
                                             "name X<NAME>.")
    parser.add_argument('--dtd', action='store_true', default=False,
                        help="check DTD binding files instead of XSD bindings.")
    parser.add_argument('--max-errors', type=max_errors_number, default=None,
                        metavar='N', help="stop a check after N errors.")
    parser.add_argument('--unsafe', action='store_true', default=False,
                        help="allow entity declarations and external references.")
    parser.add_argument('files', metavar='[FILE ...]', nargs='+',
                        help="binding files to be checked.")

    args = parser.parse_args()

    loglevel = get_loglevel(args.verbosity)
    logging.basicConfig(level=loglevel)

    enabled = [f'X{name}' for name in args.enabled]
    try:
        registry = ExtensionRegistry(plugins, enabled)
    except ExtBindingException as err:
        print(f"error: {err}", file=sys.stderr)
        sys.exit(2)

    tot_errors = 0
    for filepath in args.files:
        try:
            collector = check_bindings(
                filepath,
                registry=registry,
                schema_language='dtd' if args.dtd else 'xsd',
                compatibility_mode='extension' if args.extension else 'strict',
                defuse=not args.unsafe,
                max_errors=args.max_errors,
                loglevel=loglevel,
            )
        except ExtBindingException as err:
            tot_errors += 1
            print(f"error with {filepath}: {err}", file=sys.stderr)
            continue

        for warning in collector.warnings:
            print(f"{filepath}: warning: {warning}", file=sys.stderr)

        if not collector.errors:
            print("{} is valid".format(filepath))
        else:
            for error in collector.errors:
                print(f"{filepath}: error: {error}", file=sys.stderr)
            print("{} is not valid".format(filepath), file=sys.stderr)
            tot_errors += len(collector.errors)

    sys.exit(tot_errors)
