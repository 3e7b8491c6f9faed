"""
semconll-util subcommands
"""

# Author: Eric Kow
# License: BSD3

import argparse

from semconll.util import add_subcommand
from . import (conll2009,
               count,
               tree)

# argparse doesn't support a way to group subcommands into sections, so
# we just abuse the order of the list
SUBCOMMAND_SECTIONS = [
    ('Conversion', [
        conll2009,
    ]),
    ('Querying', [
        count,
        tree,
    ]),
]

SUBCOMMANDS = []
for descr, section in SUBCOMMAND_SECTIONS:
    SUBCOMMANDS.extend(section)


def main(argv=None):
    """
    Run the semconll-util command line
    """
    arg_parser = argparse.ArgumentParser(description='semconll utilities')
    subparsers = arg_parser.add_subparsers(title='subcommands',
                                       dest='subcommand')
    subparsers.required = True
    for module in SUBCOMMANDS:
        subparser = add_subcommand(subparsers, module)
        module.config_argparser(subparser)
    args = arg_parser.parse_args(argv)
    args.func(args)
