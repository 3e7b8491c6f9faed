# Author: Eric Kow
# License: BSD3

"""
Command line options
"""

import sys

from semconll.conll2009 import Conll2009Config
from semconll.external.corenlp import read_results


def add_usual_input_args(parser):
    """
    Augment a subcommand argparser with typical input arguments.
    """
    parser.add_argument('xml_files', metavar='FILE', nargs='+',
                        help='CoreNLP XML output (the text file it was '
                        'made from is used if it sits next to it, '
                        'eg. foo.txt for foo.txt.xml)')
    parser.add_argument('--text-encoding', metavar='ENCODING',
                        default='utf-8',
                        help='Encoding of the original text files')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Print what we are doing to stderr')


def read_documents(args):
    """
    Read the documents specified in the command line arguments.
    """
    if args.verbose:
        print('Reading %d file(s)' % len(args.xml_files), file=sys.stderr)
    return read_results(args.xml_files, encoding=args.text_encoding)


def add_writer_args(parser):
    """
    Augment a subcommand argparser with the CoNLL-2009 writer settings
    """
    defaults = Conll2009Config()
    parser.add_argument('--output', '-o', metavar='DIR', required=True,
                        help='Output directory')
    parser.add_argument('--encoding', default=defaults.encoding,
                        help='Encoding of output files')
    parser.add_argument('--suffix', default=defaults.filename_suffix,
                        help='Suffix of output files')
    for layer, help_layer in [('pos', 'POS and PPOS'),
                              ('lemma', 'LEMMA and PLEMMA'),
                              ('morph', 'FEAT and PFEAT'),
                              ('dependency', 'HEAD, PHEAD, DEPREL and '
                               'PDEPREL'),
                              ('semantic-predicate', 'FILLPRED, PRED and '
                               'APREDs')]:
        parser.add_argument('--no-' + layer,
                            dest='write_' + layer.replace('-', '_'),
                            action='store_false',
                            help='Leave %s empty' % help_layer)


def writer_config(args):
    """
    CoNLL-2009 writer settings from the command line arguments
    """
    return Conll2009Config(
        encoding=args.encoding,
        filename_suffix=args.suffix,
        write_pos=args.write_pos,
        write_lemma=args.write_lemma,
        write_morph=args.write_morph,
        write_dependency=args.write_dependency,
        write_semantic_predicate=args.write_semantic_predicate)
