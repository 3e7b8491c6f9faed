# -*- coding: utf-8 -*-
#
# Author: Eric Kow
# License: BSD3
# pylint: disable=too-many-public-methods, invalid-name

"""
Tests for semconll
"""

import io
import shutil
import tempfile
import unittest

from semconll.annotation import AnnoType, Document, Span, Unit
from semconll.conll2009 import (Conll2009Config, Conll2009Exception,
                                conll2009_path, dump_conll2009,
                                dump_conll2009_files, write_conll2009)
from semconll.corpus import FileId
from semconll.index import covered_by, index_covered
from semconll.segmentation import (Compound, CompoundPart,
                                   CompoundSplitLevel, LinkingMorpheme,
                                   MorphologicalFeatures,
                                   SegmentationException, Sentence, Token,
                                   add_tokenized_sentences, token_spans)
from semconll.semantics import SemArg, SemArgLink, SemPred
from semconll.syntax import (Dependency, DependencyFlavor, DependencyTree,
                             SyntaxException)

# ---------------------------------------------------------------------
# spans
# ---------------------------------------------------------------------


class SpanTest(unittest.TestCase):
    "tests for semconll.annotation.Span"

    def test_encloses(self):
        "a span encloses itself, but not None"
        self.assertTrue(Span(2, 4).encloses(Span(2, 4)))
        self.assertTrue(Span(2, 4).encloses(Span(4, 4)))
        self.assertFalse(Span(2, 4).encloses(Span(3, 5)))
        self.assertFalse(Span(2, 4).encloses(None))

    def test_merge_all(self):
        "smallest span around all"
        self.assertEqual(Span(1, 9),
                         Span.merge_all([Span(3, 9), Span(1, 2)]))
        self.assertRaises(ValueError, Span.merge_all, [])


# ---------------------------------------------------------------------
# documents and span index
# ---------------------------------------------------------------------

def mk_unit(start, end, utype=AnnoType.TOKEN):
    "a bare unit"
    return Unit(Span(start, end), utype)


class DocumentTest(unittest.TestCase):
    "selection from a document"

    def test_select_order(self):
        "by start, longest first, ties in order of addition"
        u_5_6 = mk_unit(5, 6)
        u_0_2 = mk_unit(0, 2)
        u_0_4 = mk_unit(0, 4)
        u_0_2b = mk_unit(0, 2)
        doc = Document(u"0123456789", [u_5_6, u_0_2, u_0_4, u_0_2b])
        self.assertEqual([u_0_4, u_0_2, u_0_2b, u_5_6],
                         doc.select(AnnoType.TOKEN))
        self.assertEqual([], doc.select(AnnoType.SENTENCE))

    def test_select_after_add(self):
        "adding a unit after a query is seen by the next query"
        doc = Document(u"0123456789", [mk_unit(3, 4)])
        self.assertEqual(1, len(doc.select(AnnoType.TOKEN)))
        early = doc.add(mk_unit(0, 1))
        self.assertIs(early, doc.select(AnnoType.TOKEN)[0])

    def test_select_covered(self):
        "only units of the right layer inside the cover"
        toks = [mk_unit(0, 2), mk_unit(3, 5), mk_unit(6, 8)]
        other = mk_unit(3, 5, AnnoType.SEM_ARG)
        sent = mk_unit(2, 8, AnnoType.SENTENCE)
        doc = Document(u"ab cd ef", toks + [other, sent])
        self.assertEqual(toks[1:], doc.select_covered(AnnoType.TOKEN, sent))
        self.assertEqual(toks[:1],
                         doc.select_covered(AnnoType.TOKEN, Span(0, 3)))

    def test_text(self):
        "surface text of units"
        doc = Document(u"why hello there!")
        unit = doc.add(mk_unit(4, 9))
        self.assertEqual(u"hello", doc.covered_text(unit))
        self.assertEqual(u"why hello there!", doc.text())

    def test_origin(self):
        "units get the origin of their document"
        doc = Document(u"hi", [mk_unit(0, 2)])
        doc.set_origin(FileId('d1'))
        self.assertEqual(FileId('d1'), doc.select(AnnoType.TOKEN)[0].origin)


class IndexTest(unittest.TestCase):
    "semconll.index"

    def test_covered_by(self):
        "inclusive on both ends"
        layer = [mk_unit(0, 2), mk_unit(1, 3), mk_unit(2, 4), mk_unit(2, 2),
                 mk_unit(4, 6)]
        self.assertEqual([layer[1], layer[3]],
                         covered_by(layer, Span(1, 3)))
        self.assertEqual([], covered_by(layer, Span(6, 9)))

    def test_index_covered(self):
        "each outer unit maps to the inner ones it encloses"
        a1 = mk_unit(0, 5, AnnoType.SEM_ARG)
        a2 = mk_unit(3, 9, AnnoType.SEM_ARG)
        a3 = mk_unit(9, 10, AnnoType.SEM_ARG)
        t1 = mk_unit(0, 2)
        t2 = mk_unit(3, 5)
        t3 = mk_unit(6, 9)
        doc = Document(u"ab cd efg h", [t3, a2, t1, a1, t2, a3])
        idx = index_covered(doc, AnnoType.SEM_ARG, AnnoType.TOKEN)
        self.assertEqual([t1, t2], idx[a1])
        self.assertEqual([t2, t3], idx[a2])
        self.assertEqual([], idx[a3])

    def test_index_covered_ties(self):
        "inner units on the same span keep their order"
        tok = mk_unit(0, 3)
        p1 = mk_unit(0, 3, AnnoType.SEM_PRED)
        p2 = mk_unit(0, 3, AnnoType.SEM_PRED)
        doc = Document(u"eat", [p1, tok, p2])
        idx = index_covered(doc, AnnoType.TOKEN, AnnoType.SEM_PRED)
        self.assertEqual([p1, p2], idx[tok])

    def test_index_matches_naive(self):
        "same answer as comparing every pair"
        outers = [mk_unit(s, e, AnnoType.SEM_ARG)
                  for s, e in [(0, 4), (0, 10), (2, 3), (3, 8), (7, 7)]]
        inners = [mk_unit(s, e)
                  for s, e in [(0, 1), (1, 3), (2, 3), (3, 4), (4, 7),
                               (7, 7), (7, 9), (9, 10)]]
        doc = Document(u"x" * 10, outers + inners)
        idx = index_covered(doc, AnnoType.SEM_ARG, AnnoType.TOKEN)
        for outer in outers:
            expected = [x for x in doc.select(AnnoType.TOKEN)
                        if outer.span.encloses(x.span)]
            self.assertEqual(expected, idx[outer])


# ---------------------------------------------------------------------
# segmentation
# ---------------------------------------------------------------------

class TokenSpansTest(unittest.TestCase):
    "lining words up with their text"

    def test_simple_align(self):
        "trivial token realignment"
        spans = list(token_spans(u"a bb    ccc", ["a", "bb", "ccc"]))
        self.assertEqual([Span(0, 1), Span(2, 4), Span(8, 11)], spans)

    def test_messy_align(self):
        "ignore whitespace in token"
        spans = list(token_spans(u"a bb    ccc", ["a", "b b", "c c c"]))
        self.assertEqual([Span(0, 1), Span(2, 4), Span(8, 11)], spans)

    def test_mismatch(self):
        "words have to be there"
        self.assertRaises(SegmentationException, list,
                          token_spans(u"a bb", ["a", "bc"]))
        self.assertRaises(SegmentationException, list,
                          token_spans(u"a bb", ["a", "bb", "c"]))

    def test_add_tokenized_sentences(self):
        "sentences and tokens registered with the document"
        doc = Document(u"I eat. You sleep.")
        s1, s2 = add_tokenized_sentences(doc, [["I", "eat", "."],
                                               ["You", "sleep", "."]])
        self.assertEqual(Span(0, 6), s1.span)
        self.assertEqual(Span(7, 17), s2.span)
        words = [doc.covered_text(t)
                 for t in doc.select_covered(AnnoType.TOKEN, s2)]
        self.assertEqual([u"You", u"sleep", u"."], words)


class CompoundTest(unittest.TestCase):
    "splits of getränk+[auto+mat]"

    def setUp(self):
        self.doc = Document(u"getränkautomat")
        getrank = CompoundPart(Span(0, 7))
        auto = CompoundPart(Span(7, 11))
        mat = CompoundPart(Span(11, 14))
        automat = CompoundPart(Span(7, 14), [auto, mat])
        self.compound = Compound(Span(0, 14), [getrank, automat])
        self.doc.add_all([getrank, auto, mat, automat, self.compound])

    def splits(self, level, compound=None):
        "surface text of splits"
        compound = compound or self.compound
        return [self.doc.covered_text(x)
                for x in compound.get_splits_without_morpheme(level)]

    def test_all(self):
        "parts come before their own splits"
        self.assertEqual([u"getränk", u"automat", u"auto", u"mat"],
                         self.splits(CompoundSplitLevel.ALL))

    def test_lowest(self):
        "leaves"
        self.assertEqual([u"getränk", u"auto", u"mat"],
                         self.splits(CompoundSplitLevel.LOWEST))

    def test_highest(self):
        "direct splits"
        self.assertEqual([u"getränk", u"automat"],
                         self.splits(CompoundSplitLevel.HIGHEST))

    def test_none(self):
        "nothing at all"
        self.assertEqual([], self.splits(CompoundSplitLevel.NONE))

    def test_levels_within_all(self):
        "highest and lowest are both part of all"
        every = self.compound.get_splits_without_morpheme(
            CompoundSplitLevel.ALL)
        for level in [CompoundSplitLevel.HIGHEST, CompoundSplitLevel.LOWEST]:
            for split in self.compound.get_splits_without_morpheme(level):
                self.assertIn(split, every)

    def test_linking_morpheme(self):
        "linking morphemes only show up when asked for"
        doc = Document(u"arbeitsamt")
        arbeit = CompoundPart(Span(0, 6))
        link = LinkingMorpheme(Span(6, 7))
        amt = CompoundPart(Span(7, 10))
        compound = Compound(Span(0, 10), [arbeit, link, amt])
        doc.add_all([arbeit, link, amt, compound])
        self.doc = doc
        for level in [CompoundSplitLevel.ALL, CompoundSplitLevel.HIGHEST,
                      CompoundSplitLevel.LOWEST]:
            self.assertEqual([u"arbeit", u"amt"],
                             self.splits(level, compound))
        lowest = compound.get_splits(CompoundSplitLevel.LOWEST)
        self.assertEqual(u"arbeitsamt",
                         u"".join(doc.covered_text(x) for x in lowest))

    def test_nested_linking_morpheme(self):
        "morphemes deeper in the tree are left out too"
        doc = Document(u"abcde")
        inner = CompoundPart(Span(1, 5), [CompoundPart(Span(1, 2)),
                                          LinkingMorpheme(Span(2, 3)),
                                          CompoundPart(Span(3, 5))])
        compound = Compound(Span(0, 5), [CompoundPart(Span(0, 1)), inner])
        self.doc = doc
        self.assertEqual([u"a", u"bcde", u"b", u"de"],
                         self.splits(CompoundSplitLevel.ALL, compound))
        self.assertEqual(5, len(compound.get_splits(CompoundSplitLevel.ALL)))


# ---------------------------------------------------------------------
# syntax
# ---------------------------------------------------------------------

def mk_i_eat(text=u"I eat.", root_loop=True):
    """
    Sentence "I eat." with eat governing the other two tokens, and a
    predicate on eat whose A0 is I

    Return the document and its tokens
    """
    doc = Document(text, origin=FileId('ieat'))
    sent, = add_tokenized_sentences(doc, [text.replace(u'.', u' .').split()])
    i, eat, stop = doc.select_covered(AnnoType.TOKEN, sent)
    doc.add(Dependency(eat, i, 'SBJ'))
    if root_loop:
        doc.add(Dependency(eat, eat, 'ROOT', flavor=DependencyFlavor.BASIC))
    doc.add(Dependency(eat, stop, 'P'))
    arg = doc.add(SemArg(i.span))
    doc.add(SemPred(eat.span, 'eat.01', [SemArgLink('A0', arg)]))
    return doc, (i, eat, stop)


class DependencyTreeTest(unittest.TestCase):
    "tree view of basic dependencies"

    def test_build(self):
        "the root is a self loop"
        doc, _ = mk_i_eat()
        sent = doc.select(AnnoType.SENTENCE)[0]
        doc.add(Dependency(doc.select(AnnoType.TOKEN)[2],
                           doc.select(AnnoType.TOKEN)[0], 'nsubj',
                           flavor=DependencyFlavor.ENHANCED))
        tree = DependencyTree.build(doc, sent)
        self.assertTrue(tree.is_root())
        self.assertEqual('ROOT', tree.label())
        self.assertEqual(['eat/ROOT'], [x.label() for x in tree])
        self.assertEqual(['I/SBJ', './P'], [x.label() for x in tree[0]])
        self.assertEqual(Span(0, 6), tree.text_span())
        self.assertEqual(Span(0, 6), tree[0].span)

    def test_headless(self):
        "tokens without dependency hang off the root"
        doc, _ = mk_i_eat(root_loop=False)
        tree = DependencyTree.build(doc, doc.select(AnnoType.SENTENCE)[0])
        self.assertEqual(['eat'], [x.label() for x in tree])
        self.assertIsNone(tree[0].link)

    def test_cycle(self):
        "no way to the root"
        doc = Document(u"a b c")
        sent, = add_tokenized_sentences(doc, [["a", "b", "c"]])
        a, b, _ = doc.select(AnnoType.TOKEN)
        doc.add_all([Dependency(a, b, 'x'), Dependency(b, a, 'y')])
        self.assertRaises(SyntaxException, DependencyTree.build, doc, sent)


# ---------------------------------------------------------------------
# CoNLL-2009
# ---------------------------------------------------------------------

def conll(doc, config=None):
    "CoNLL-2009 output as a string"
    out = io.StringIO()
    write_conll2009(doc, out, config)
    return out.getvalue()


def lines_of(output):
    "non-blank lines, split into fields"
    return [x.split('\t') for x in output.split('\n') if x]


class Conll2009Test(unittest.TestCase):
    "writing CoNLL-2009"

    def test_minimal(self):
        "one token, nothing else"
        doc = Document(u"Hi")
        add_tokenized_sentences(doc, [["Hi"]])
        self.assertEqual(u"1\tHi\t_\t_\t_\t_\t_\t_\t_\t_\t_\t_\t_\t_\t\n\n",
                         conll(doc))

    def test_empty_document(self):
        "no sentences, no output"
        self.assertEqual(u"", conll(Document(u"")))

    def test_predicate(self):
        "dependencies and one predicate"
        doc, _ = mk_i_eat()
        expected = u"".join('\t'.join(x) + '\n' for x in [
            ['1', 'I', '_', '_', '_', '_', '_', '_',
             '2', '2', 'SBJ', 'SBJ', '_', '_', 'A0'],
            ['2', 'eat', '_', '_', '_', '_', '_', '_',
             '0', '0', 'ROOT', 'ROOT', 'Y', 'eat.01', '_'],
            ['3', '.', '_', '_', '_', '_', '_', '_',
             '2', '2', 'P', 'P', '_', '_', '_'],
        ]) + u"\n"
        self.assertEqual(expected, conll(doc))

    def test_headless_token(self):
        "a token without dependency has no head"
        doc, _ = mk_i_eat(root_loop=False)
        rows = lines_of(conll(doc))
        self.assertEqual(['_', '_', '_', '_'], rows[1][8:12])

    def test_lemma_pos_morph(self):
        "token attributes, mirrored in the predicted columns"
        doc, toks = mk_i_eat()
        for tok, lemma, pos, feats in zip(toks,
                                          ['I', 'eat', '.'],
                                          ['PRP', 'VBP', '.'],
                                          ['Number=Sing', '_', '_']):
            tok.lemma = lemma
            tok.pos = pos
            doc.add(MorphologicalFeatures(tok.span, feats))
        rows = lines_of(conll(doc))
        self.assertEqual(['1', 'I', 'I', 'I', 'PRP', 'PRP',
                          'Number=Sing', 'Number=Sing'], rows[0][:8])
        self.assertEqual(['2', 'eat', 'eat', 'eat', 'VBP', 'VBP',
                          '_', '_'], rows[1][:8])
        for row in rows:
            for gold in [2, 4, 6, 8, 10]:
                self.assertEqual(row[gold], row[gold + 1])

    def test_morph_mismatch(self):
        "no morphology unless there is one bundle per token"
        doc, toks = mk_i_eat()
        doc.add(MorphologicalFeatures(toks[0].span, 'Number=Sing'))
        with self.assertWarns(UserWarning):
            rows = lines_of(conll(doc))
        self.assertEqual(['_'] * 3, [x[6] for x in rows])

    def test_config_off(self):
        "every layer switched off"
        doc, toks = mk_i_eat()
        for tok in toks:
            tok.lemma = 'x'
            tok.pos = 'X'
            doc.add(MorphologicalFeatures(tok.span, 'A=B'))
        config = Conll2009Config(write_pos=False, write_lemma=False,
                                 write_morph=False, write_dependency=False,
                                 write_semantic_predicate=False)
        rows = lines_of(conll(doc, config))
        for row in rows:
            self.assertEqual(15, len(row))
            self.assertEqual(['_'] * 13, row[2:])

    def test_config_some(self):
        "switching off one layer leaves the others alone"
        doc, toks = mk_i_eat()
        for tok in toks:
            tok.lemma = 'x'
            tok.pos = 'X'
        rows = lines_of(conll(doc, Conll2009Config(write_pos=False)))
        self.assertEqual(['x', 'x', '_', '_'], rows[0][2:6])
        self.assertEqual('A0', rows[0][14])

    def test_sentences(self):
        "ids restart with each sentence, one blank line after each"
        doc = Document(u"I eat. You sleep well.")
        add_tokenized_sentences(doc, [["I", "eat", "."],
                                      ["You", "sleep", "well", "."]])
        output = conll(doc)
        blocks = output.split('\n\n')
        self.assertEqual(['', ], blocks[2:])
        self.assertTrue(output.endswith('.\t_\t_\t_\t_\t_\t_\t_\t_\t_'
                                        '\t_\t_\t_\t\n\n'))
        ids = [[x.split('\t')[0] for x in block.split('\n')]
               for block in blocks[:2]]
        self.assertEqual([['1', '2', '3'], ['1', '2', '3', '4']], ids)

    def test_predicate_columns(self):
        "one APRED column per predicate, in sentence order"
        doc = Document(u"I want to eat.")
        sent, = add_tokenized_sentences(doc, [["I", "want", "to", "eat",
                                               "."]])
        i, want, _, eat, _ = doc.select_covered(AnnoType.TOKEN, sent)
        arg_i = doc.add(SemArg(i.span))
        arg_eat = doc.add(SemArg(Span(eat.span.char_start - 3,
                                      eat.span.char_end)))
        # added out of order on purpose
        doc.add(SemPred(eat.span, 'eat.01', [SemArgLink('A0', arg_i)]))
        doc.add(SemPred(want.span, 'want.01', [SemArgLink('A0', arg_i),
                                               SemArgLink('A1', arg_eat)]))
        rows = lines_of(conll(doc))
        self.assertEqual(['want.01', 'eat.01'], [rows[1][13], rows[3][13]])
        self.assertEqual([['A0', 'A0'], ['_', '_'], ['A1', '_'],
                          ['A1', '_'], ['_', '_']],
                         [x[14:] for x in rows])
        self.assertEqual(['_', 'Y', '_', 'Y', '_'], [x[12] for x in rows])

    def test_shared_token(self):
        "two predicates on one token: the first one wins the PRED column"
        doc, (i, eat, _) = mk_i_eat()
        arg = doc.add(SemArg(i.span))
        doc.add(SemPred(eat.span, 'eat.02', [SemArgLink('A1', arg)]))
        rows = lines_of(conll(doc))
        self.assertEqual(['eat.01', '_', 'A0', 'A1'],
                         [rows[1][13], rows[1][14], rows[0][14],
                          rows[0][15]])
        self.assertEqual(16, len(rows[2]))

    def test_enhanced_ignored(self):
        "only basic dependencies make it"
        doc, (i, _, stop) = mk_i_eat()
        before = conll(doc)
        doc.add(Dependency(stop, i, 'weird', flavor=DependencyFlavor.ENHANCED))
        self.assertEqual(before, conll(doc))

    def test_two_governors(self):
        "a token with two basic governors is an error"
        doc, (i, _, stop) = mk_i_eat()
        doc.add(Dependency(stop, i, 'weird'))
        with self.assertRaises(Conll2009Exception) as cm:
            conll(doc)
        self.assertIn('[I]', str(cm.exception))

    def test_governor_outside(self):
        "a governor in another sentence is an error"
        doc = Document(u"a b")
        add_tokenized_sentences(doc, [["a"], ["b"]])
        a, b = doc.select(AnnoType.TOKEN)
        doc.add(Dependency(b, a, 'x'))
        self.assertRaises(Conll2009Exception, conll, doc)

    def test_dependent_outside(self):
        "a dependency spanning another sentence than its dependent"
        doc = Document(u"a b")
        add_tokenized_sentences(doc, [["a"], ["b"]])
        a, b = doc.select(AnnoType.TOKEN)
        doc.add(Dependency(a, a, 'x', span=b.span))
        with self.assertRaises(Conll2009Exception) as cm:
            conll(doc)
        self.assertIn('[a]', str(cm.exception))

    def test_argument_across_sentences(self):
        "argument tokens in the next sentence are left alone"
        doc = Document(u"a b. c d.")
        add_tokenized_sentences(doc, [["a", "b", "."], ["c", "d", "."]])
        a = doc.select(AnnoType.TOKEN)[0]
        arg = doc.add(SemArg(Span(2, 7)))
        doc.add(SemPred(a.span, 'a.01', [SemArgLink('A1', arg)]))
        rows = lines_of(conll(doc))
        self.assertEqual(['_', 'A1', 'A1'], [x[14] for x in rows[:3]])
        self.assertEqual([15, 15, 15], [len(x) for x in rows[3:]])
        self.assertEqual(['', '', ''], [x[14] for x in rows[3:]])

    def test_overlapping_links(self):
        "two links of a predicate on one token: the last one is written"
        doc = Document(u"I eat.")
        add_tokenized_sentences(doc, [["I", "eat", "."]])
        i, eat, _ = doc.select(AnnoType.TOKEN)
        arg1 = doc.add(SemArg(i.span))
        arg2 = doc.add(SemArg(i.span))
        doc.add(SemPred(eat.span, 'eat.01', [SemArgLink('A0', arg1),
                                             SemArgLink('AM', arg2)]))
        rows = lines_of(conll(doc))
        self.assertEqual(['AM', '_', '_'], [x[14] for x in rows])

    def test_sentence_units(self):
        "sentences need not come from add_tokenized_sentences"
        doc = Document(u"ab")
        doc.add_all([Token(Span(1, 2)), Sentence(Span(0, 2)),
                     Token(Span(0, 1), lemma='a')])
        rows = lines_of(conll(doc))
        self.assertEqual([['1', 'a', 'a'], ['2', 'b', '_']],
                         [x[:3] for x in rows])


class Conll2009FileTest(unittest.TestCase):
    "writing CoNLL-2009 files"

    def setUp(self):
        self.out_dir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.out_dir)

    def test_dump_files(self):
        "one file per document, named after it"
        doc1, _ = mk_i_eat()
        doc2, _ = mk_i_eat(u"Ça eat.")
        doc2.set_origin(FileId('ca', 'part1'))
        config = Conll2009Config(encoding='latin-1', filename_suffix='.txt')
        paths = dump_conll2009_files([doc1, doc2], self.out_dir + '/sub',
                                     config)
        self.assertEqual([self.out_dir + '/sub/ieat.txt',
                          self.out_dir + '/sub/ca_part1.txt'], paths)
        with open(paths[1], 'rb') as f_in:
            raw = f_in.read()
        self.assertEqual(conll(doc2).encode('latin-1'), raw)
        self.assertNotIn(b'\r', raw)

    def test_default_name(self):
        "default suffix is .conll"
        doc, _ = mk_i_eat()
        self.assertEqual(self.out_dir + '/ieat.conll',
                         conll2009_path(doc, self.out_dir))
        self.assertRaises(ValueError, conll2009_path, Document(u""),
                          self.out_dir)

    def test_unencodable(self):
        "characters the encoding cannot represent are an error"
        doc, _ = mk_i_eat(u"Ça eat.")
        path = self.out_dir + '/ca.conll'
        self.assertRaises(UnicodeEncodeError, dump_conll2009, doc, path,
                          Conll2009Config(encoding='ascii'))

    def test_utf8(self):
        "utf-8 by default"
        doc, _ = mk_i_eat(u"Ça eat.")
        path = self.out_dir + '/ca.conll'
        dump_conll2009(doc, path)
        with io.open(path, 'r', encoding='utf-8', newline='') as f_in:
            self.assertEqual(conll(doc), f_in.read())


def test_file_basename():
    "subdocuments are joined to the document name"
    assert FileId('d1').basename('.conll') == 'd1.conll'
    assert FileId('d1', 'p2').basename() == 'd1_p2'
