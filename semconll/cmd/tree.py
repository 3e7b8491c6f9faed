# Author: Eric Kow
# License: BSD3

"""
Show the basic dependency tree of each sentence
"""

from semconll.annotation import AnnoType
from semconll.syntax import DependencyTree
from .args import add_usual_input_args, read_documents


def config_argparser(parser):
    """
    Subcommand flags.

    You should create and pass in the subparser to which the flags
    are to be added.
    """
    add_usual_input_args(parser)
    parser.add_argument('--margin', type=int, default=70,
                        help='Line width for pretty printing trees')
    parser.set_defaults(func=main)


def main(args):
    """
    Subcommand main.

    You shouldn't need to call this yourself if you're using
    `config_argparser`
    """
    for doc in read_documents(args):
        print('# %s' % (doc.origin.basename() if doc.origin else '?'))
        for sentence in doc.select(AnnoType.SENTENCE):
            tree = DependencyTree.build(doc, sentence)
            print(tree.pformat(margin=args.margin))
        print()
