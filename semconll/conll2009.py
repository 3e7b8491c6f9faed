# Author: Eric Kow
# License: BSD3

"""CoNLL-2009 format for syntactic and semantic dependencies.

One line per token, sentences separated by a blank line. Each line
holds these tab-separated fields:

1. ID - token counter, starting at 1 for each new sentence
2. FORM - word form or punctuation symbol
3. LEMMA - lemma of FORM
4. PLEMMA - predicted lemma (we repeat LEMMA)
5. POS - part of speech tag
6. PPOS - predicted part of speech tag (we repeat POS)
7. FEAT - morphological features, separated by a vertical bar (|)
8. PFEAT - predicted features (we repeat FEAT)
9. HEAD - ID of the governor of the token, or 0 for the root
10. PHEAD - predicted head (we repeat HEAD)
11. DEPREL - dependency relation to HEAD
12. PDEPREL - predicted relation (we repeat DEPREL)
13. FILLPRED - 'Y' for predicate-bearing tokens
14. PRED - sense identifier of the predicate on this token
15. APREDs - one column per predicate of the sentence (in sentence
    order), giving the role the token plays for that predicate

Unused fields hold an underscore.

See `The CoNLL-2009 Shared Task: Syntactic and Semantic Dependencies in
Multiple Languages <http://ufal.mff.cuni.cz/conll2009-st/>`_
"""

import io
import os
import warnings

from semconll.annotation import AnnoType
from semconll.index import index_covered
from semconll.syntax import basic_dependencies

UNUSED = '_'


class Conll2009Exception(Exception):
    """
    Annotations that cannot be written in CoNLL-2009 (eg. a token with
    two governors in the basic dependency tree)
    """
    def __init__(self, *args, **kw):
        super(Conll2009Exception, self).__init__(*args, **kw)


class Conll2009Config(object):
    """
    What to write and how.

    Parameters
    ----------
    encoding : str, defaults to 'utf-8'
        Character encoding of output files.
    filename_suffix : str, defaults to '.conll'
        Appended to the document name to get the output file name.
    write_pos : boolean, defaults to True
        If False, POS and PPOS are left unused.
    write_lemma : boolean, defaults to True
        If False, LEMMA and PLEMMA are left unused.
    write_morph : boolean, defaults to True
        If False, FEAT and PFEAT are left unused.
    write_dependency : boolean, defaults to True
        If False, HEAD, PHEAD, DEPREL and PDEPREL are left unused.
    write_semantic_predicate : boolean, defaults to True
        If False, FILLPRED, PRED and every APRED are left unused (there is
        still one APRED column per predicate).
    """
    def __init__(self, encoding='utf-8', filename_suffix='.conll',
                 write_pos=True, write_lemma=True, write_morph=True,
                 write_dependency=True, write_semantic_predicate=True):
        self.encoding = encoding
        self.filename_suffix = filename_suffix
        self.write_pos = write_pos
        self.write_lemma = write_lemma
        self.write_morph = write_morph
        self.write_dependency = write_dependency
        self.write_semantic_predicate = write_semantic_predicate


class Row(object):
    """
    Everything we know about one token of the sentence being written

    Attributes
    ----------
    id : int
        1-based position of the token in its sentence.
    token : Token
    feats : MorphologicalFeatures or None
    deprel : Dependency or None
        Basic dependency with this token as dependent.
    pred : SemPred or None
    args : list of (SemArgLink or None)
        Role of this token for each predicate of the sentence.
    """
    def __init__(self, rid, token, nb_preds):
        self.id = rid
        self.token = token
        self.feats = None
        self.deprel = None
        self.pred = None
        self.args = [None] * nb_preds


def sentence_rows(doc, sentence, pred_idx, arg_idx):
    """Build the rows for a sentence.

    Parameters
    ----------
    doc : Document
    sentence : Sentence
    pred_idx : dict from Token to list of SemPred
        Predicates covered by each token.
    arg_idx : dict from SemArg to list of Token
        Tokens covered by each argument.

    Returns
    -------
    rows : list of Row
        One row per token of the sentence, in order.
    """
    tokens = doc.select_covered(AnnoType.TOKEN, sentence)
    morphology = doc.select_covered(AnnoType.MORPH, sentence)
    use_feats = len(morphology) == len(tokens)
    if morphology and not use_feats:
        warnings.warn('%d morphology annotations for %d tokens, leaving '
                      'out morphology for sentence %s' %
                      (len(morphology), len(tokens), sentence.span))
    preds = doc.select_covered(AnnoType.SEM_PRED, sentence)

    rows = []
    for i, token in enumerate(tokens):
        row = Row(i + 1, token, len(preds))
        if use_feats:
            row.feats = morphology[i]
        # several predicates on one token: we keep only the first
        preds_for_token = pred_idx.get(token)
        if preds_for_token:
            row.pred = preds_for_token[0]
        rows.append(row)
    rows_by_token = {row.token: row for row in rows}

    deps = doc.select_covered(AnnoType.DEPENDENCY, sentence)
    _attach_dependencies(doc, rows_by_token, basic_dependencies(deps))
    _attach_arguments(rows_by_token, preds, arg_idx)
    return rows


def _attach_dependencies(doc, rows_by_token, deps):
    """Give each row the basic dependency it is dependent of"""
    for dep in deps:
        row = rows_by_token.get(dep.dependent)
        if row is None:
            raise Conll2009Exception('Dependent token [%s] is not part of '
                                     'the sentence' %
                                     doc.covered_text(dep.dependent))
        if row.deprel is not None:
            raise Conll2009Exception('Illegal basic dependency structure - '
                                     'token [%s] is dependent of more than '
                                     'one dependency.' %
                                     doc.covered_text(row.token))
        if dep.governor not in rows_by_token:
            raise Conll2009Exception('Governor token [%s] is not part of '
                                     'the sentence' %
                                     doc.covered_text(dep.governor))
        row.deprel = dep


def _attach_arguments(rows_by_token, preds, arg_idx):
    """Spread the argument roles of each predicate over the rows of
    the tokens the arguments cover"""
    for k, pred in enumerate(preds):
        for link in pred.arguments:
            for token in arg_idx.get(link.target, []):
                row = rows_by_token.get(token)
                if row is not None:
                    row.args[k] = link


def format_row(doc, row, rows_by_token, config):
    """
    Return the line for a row (with its trailing newline)
    """
    form = doc.covered_text(row.token)

    lemma = UNUSED
    if config.write_lemma and row.token.lemma is not None:
        lemma = row.token.lemma

    pos = UNUSED
    if config.write_pos and row.token.pos is not None:
        pos = row.token.pos

    feat = UNUSED
    if config.write_morph and row.feats is not None:
        feat = row.feats.value

    head = UNUSED
    deprel = UNUSED
    if config.write_dependency and row.deprel is not None:
        deprel = row.deprel.dep_type
        head_id = rows_by_token[row.deprel.governor].id
        if head_id == row.id:
            # roots may be modelled as a loop
            head_id = 0
        head = str(head_id)

    fillpred = UNUSED
    pred = UNUSED
    if config.write_semantic_predicate:
        if row.pred is not None:
            fillpred = 'Y'
            pred = row.pred.category
        apreds = [UNUSED if x is None else x.role for x in row.args]
    else:
        apreds = [UNUSED] * len(row.args)

    fields = [str(row.id), form,
              lemma, lemma,
              pos, pos,
              feat, feat,
              head, head,
              deprel, deprel,
              fillpred, pred,
              '\t'.join(apreds)]
    return '\t'.join(fields) + '\n'


def write_conll2009(doc, out, config=None):
    """Write a document in CoNLL-2009 format to a text stream.

    Parameters
    ----------
    doc : Document
    out : file-like
        Text stream; we only ever call `out.write`.
    config : Conll2009Config, optional
    """
    config = config or Conll2009Config()
    pred_idx = index_covered(doc, AnnoType.TOKEN, AnnoType.SEM_PRED)
    arg_idx = index_covered(doc, AnnoType.SEM_ARG, AnnoType.TOKEN)
    for sentence in doc.select(AnnoType.SENTENCE):
        rows = sentence_rows(doc, sentence, pred_idx, arg_idx)
        rows_by_token = {row.token: row for row in rows}
        for row in rows:
            out.write(format_row(doc, row, rows_by_token, config))
        out.write('\n')


def conll2009_path(doc, out_dir, config=None):
    """
    Path of the output file for a document within a folder

    The document must have an origin (see `semconll.corpus.FileId`).
    """
    config = config or Conll2009Config()
    if doc.origin is None:
        raise ValueError('Cannot name the output file of a document '
                         'without origin')
    return os.path.join(out_dir, doc.origin.basename(config.filename_suffix))


def dump_conll2009(doc, f, config=None):
    """Dump a document to a CoNLL-2009 file.

    Parameters
    ----------
    doc : Document
    f : str
        Path of the output file.
    config : Conll2009Config, optional
    """
    config = config or Conll2009Config()
    with io.open(f, 'w', encoding=config.encoding, newline='\n') as f_out:
        write_conll2009(doc, f_out, config)


def dump_conll2009_files(docs, out_dir, config=None):
    """Dump documents to a folder, one file per document.

    Parameters
    ----------
    docs : iterable of Document
        Documents, each with an origin to name its file after.
    out_dir : str
        Path to the output folder; created if need be.
    config : Conll2009Config, optional

    Returns
    -------
    paths : list of str
        Files written, in the order of `docs`.
    """
    config = config or Conll2009Config()
    if not os.path.exists(out_dir):
        os.makedirs(out_dir)
    paths = []
    for doc in docs:
        f_doc = conll2009_path(doc, out_dir, config)
        dump_conll2009(doc, f_doc, config)
        paths.append(f_doc)
    return paths
