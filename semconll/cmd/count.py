# Author: Eric Kow
# License: BSD3

"""
Show number of sentences, tokens, dependencies, etc
"""

from tabulate import tabulate

from semconll.annotation import AnnoType
from semconll.syntax import basic_dependencies
from .args import add_usual_input_args, read_documents


# we have an order on this, so no dict
LAYER_CATEGORIES = [("sentences", AnnoType.SENTENCE),
                    ("tokens", AnnoType.TOKEN),
                    ("morph", AnnoType.MORPH),
                    ("predicates", AnnoType.SEM_PRED),
                    ("arguments", AnnoType.SEM_ARG)]


def config_argparser(parser):
    """
    Subcommand flags.

    You should create and pass in the subparser to which the flags
    are to be added.
    """
    add_usual_input_args(parser)
    parser.set_defaults(func=main)


def count_layers(doc):
    """
    Counts for a document, in the order of `headers()`
    """
    counts = [len(doc.select(atype)) for _, atype in LAYER_CATEGORIES]
    deps = doc.select(AnnoType.DEPENDENCY)
    nb_basic = len(basic_dependencies(deps))
    return counts + [nb_basic, len(deps) - nb_basic]


def headers():
    """
    Column names for the report
    """
    return (['document'] +
            [k for k, _ in LAYER_CATEGORIES] +
            ['basic deps', 'other deps'])


def report(docs):
    """
    Table of counts, one row per document plus a total row
    """
    rows = []
    totals = None
    for doc in docs:
        counts = count_layers(doc)
        name = doc.origin.basename() if doc.origin else '?'
        rows.append([name] + counts)
        totals = counts if totals is None else\
            [x + y for x, y in zip(totals, counts)]
    if totals is not None:
        rows.append(['TOTAL'] + totals)
    return tabulate(rows, headers=headers())


def main(args):
    """
    Subcommand main.

    You shouldn't need to call this yourself if you're using
    `config_argparser`
    """
    print(report(read_documents(args)))
