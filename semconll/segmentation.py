#!/usr/bin/env python
# -*- coding: utf-8 -*-
#
# Author: Eric Kow
# License: BSD3

"""
Segmentation layers: sentences, tokens and their morphology, and the
recursive split structure of compound words.

Compounds
~~~~~~~~~
A compound is decomposed into an ordered sequence of splits. A split is
either a `CompoundPart`, which may itself be split further, or a
`LinkingMorpheme`, the glue between two parts (the German *s* in
*Arbeit-s-amt*). "getränkeautomat" would typically be ::

    Compound getränkeautomat
      CompoundPart getränk
      CompoundPart automat
        CompoundPart auto
        CompoundPart mat

`Compound.get_splits_without_morpheme` gives a view of this tree at one
of the levels in `CompoundSplitLevel`.
"""

from enum import Enum
from itertools import filterfalse, islice

from semconll.annotation import AnnoType, Span, Unit
from semconll.util import concat

# I don't yet see how "too few public methods" is helpful
# pylint: disable=R0903


class SegmentationException(Exception):
    """
    Tokens that cannot be lined up with the text they are supposed
    to come from
    """
    def __init__(self, *args, **kw):
        super(SegmentationException, self).__init__(*args, **kw)

# ---------------------------------------------------------------------
# sentences and tokens
# ---------------------------------------------------------------------


class Sentence(Unit):
    """
    A sentence; its tokens are the tokens it covers
    """
    def __init__(self, span, features=None):
        Unit.__init__(self, span, AnnoType.SENTENCE, features)


class MorphologicalFeatures(Unit):
    """
    Bundle of morphological features over a token, kept as an opaque
    string (eg. ``Case=Nom|Number=Sing``, or ``_``)
    """
    def __init__(self, span, value, features=None):
        Unit.__init__(self, span, AnnoType.MORPH, features)
        self.value = value


class Token(Unit):
    """
    A token, with optional lemma, part of speech tag and morphology

    Attributes
    ----------
    lemma : str or None
    pos : str or None
    morph : MorphologicalFeatures or None
        Not read by the CoNLL-2009 writer, which pairs the morphology
        of a sentence with its tokens by position.
    """
    def __init__(self, span, lemma=None, pos=None, morph=None,
                 features=None):
        Unit.__init__(self, span, AnnoType.TOKEN, features)
        self.lemma = lemma
        self.pos = pos
        self.morph = morph


def token_spans(text, words, offset=0):
    """
    Given a string and a sequence of substrings within than string,
    infer a span for each of the substrings.

    We do this spans by walking the text and the words we consume
    substrings and skipping over any whitespace (including that
    which is within the words). For this to work, the word sequence
    must be identical to the text modulo whitespace.

    Spans are relative to the start of the string itself, but can be
    shifted by passing an offset (the start of the original string's
    span). Empty words are accepted but have a zero-length span.

    Note: this function is lazy so you can use it incrementally
    provided you can generate the words lazily too
    """
    txt_iter = filterfalse(lambda x: x[1].isspace(), enumerate(text))
    last = offset  # for corner case of empty words
    for word in words:
        word_chars = [c for c in word if not c.isspace()]
        if not word_chars:
            yield Span(last, last)
            continue
        prefix = list(islice(txt_iter, len(word_chars)))
        if len(prefix) < len(word_chars):
            raise SegmentationException("Too many tokens (current: %s)" %
                                        word)
        last = prefix[-1][0] + 1 + offset
        span = Span(prefix[0][0] + offset, last)
        for (idx, txt_char), word_char in zip(prefix, word_chars):
            if txt_char != word_char:
                snippet = text[span.char_start - offset:span.char_end - offset]
                msg = ("token mismatch at char %d (%s vs %s)\n"
                       " token: [%s]\n"
                       " text:  [%s]") % (idx, txt_char, word_char,
                                          word, snippet)
                raise SegmentationException(msg)
        yield span


def add_tokenized_sentences(doc, sentences):
    """
    Line pre-tokenised sentences up with the text of a document, and
    register the corresponding sentences and tokens with it.

    Parameters
    ----------
    doc : Document
    sentences : iterable of list of str
        Words of each sentence, in text order.

    Returns
    -------
    res : list of Sentence
        The new sentences (empty word lists are skipped).
    """
    sentences = [list(x) for x in sentences]
    spans = token_spans(doc.text(), concat(sentences))
    res = []
    for words in sentences:
        tokens = [Token(next(spans)) for _ in words]
        if not tokens:
            continue
        doc.add_all(tokens)
        sentence = Sentence(Span.merge_all(t.span for t in tokens))
        res.append(doc.add(sentence))
    return res

# ---------------------------------------------------------------------
# compounds
# ---------------------------------------------------------------------


class CompoundSplitLevel(Enum):
    """
    Depth at which to read the split tree of a compound
    """
    ALL = 'all'
    LOWEST = 'lowest'
    HIGHEST = 'highest'
    NONE = 'none'


class Split(Unit):
    """
    Some piece of a compound
    """
    def __init__(self, span, utype, splits=None, features=None):
        Unit.__init__(self, span, utype, features)
        self.splits = list(splits or [])

    def is_linking_morpheme(self):
        "True if this split only glues other parts together"
        return self.type is AnnoType.LINKING_MORPHEME


class CompoundPart(Split):
    """
    A part of a compound, possibly split further
    """
    def __init__(self, span, splits=None, features=None):
        Split.__init__(self, span, AnnoType.COMPOUND_PART, splits, features)


class LinkingMorpheme(Split):
    """
    Linking element between two compound parts
    """
    def __init__(self, span, features=None):
        Split.__init__(self, span, AnnoType.LINKING_MORPHEME, None, features)


def _all_splits(splits, morphemes):
    "pre-order walk; a part comes before its own splits"
    res = []
    for split in splits:
        if morphemes or not split.is_linking_morpheme():
            res.append(split)
        res.extend(_all_splits(split.splits, morphemes))
    return res


def _lowest_splits(splits, morphemes):
    "leaves of the split tree"
    res = []
    for split in splits:
        if split.splits:
            res.extend(_lowest_splits(split.splits, morphemes))
        elif morphemes or not split.is_linking_morpheme():
            res.append(split)
    return res


class Compound(Unit):
    """
    A compound word and its splits (direct children only; deeper
    levels hang off the parts themselves)
    """
    def __init__(self, span, splits=None, features=None):
        Unit.__init__(self, span, AnnoType.COMPOUND, features)
        self.splits = list(splits or [])

    def get_splits(self, level):
        """
        Splits of this compound at the given `CompoundSplitLevel`,
        linking morphemes included
        """
        return self._splits(level, morphemes=True)

    def get_splits_without_morpheme(self, level):
        """
        Splits of this compound at the given `CompoundSplitLevel`,
        linking morphemes left out

        * NONE: nothing
        * HIGHEST: the direct splits of the compound
        * LOWEST: the splits that are not split any further
        * ALL: every split, a part coming right before its own
          splits (so `[getränk, [auto, mat]]` reads
          getränk, automat, auto, mat)
        """
        return self._splits(level, morphemes=False)

    def _splits(self, level, morphemes):
        if level is CompoundSplitLevel.ALL:
            return _all_splits(self.splits, morphemes)
        elif level is CompoundSplitLevel.LOWEST:
            return _lowest_splits(self.splits, morphemes)
        elif level is CompoundSplitLevel.HIGHEST:
            return [x for x in self.splits
                    if morphemes or not x.is_linking_morpheme()]
        elif level is CompoundSplitLevel.NONE:
            return []
        else:
            raise ValueError("Unknown split level: %s" % level)
