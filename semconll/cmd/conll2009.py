# Author: Eric Kow
# License: BSD3

"""
Convert CoreNLP output to CoNLL-2009

One output file per input document, named after the document.
"""

import sys

from semconll.conll2009 import dump_conll2009_files
from .args import (add_usual_input_args, add_writer_args,
                   read_documents, writer_config)


def config_argparser(parser):
    """
    Subcommand flags.

    You should create and pass in the subparser to which the flags
    are to be added.
    """
    add_usual_input_args(parser)
    add_writer_args(parser)
    parser.set_defaults(func=main)


def main(args):
    """
    Subcommand main.

    You shouldn't need to call this yourself if you're using
    `config_argparser`
    """
    docs = read_documents(args)
    paths = dump_conll2009_files(docs, args.output, writer_config(args))
    if args.verbose:
        for path in paths:
            print('Wrote %s' % path, file=sys.stderr)
