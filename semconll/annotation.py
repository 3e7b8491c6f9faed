"""
Low-level representation of standoff annotations over a source text.

An annotation here is little more than a span of the text and a layer
tag saying what sort of thing it is (a token, a sentence, a semantic
predicate...). Layer-specific attributes live on the subclasses found in
`semconll.segmentation`, `semconll.syntax` and `semconll.semantics`.

The `Document` ties them together: it owns the text and the units, and
answers the selection queries the writers need (all units of a layer,
units of a layer covered by another unit).
"""

# Author: Eric Kow
# License: CeCILL-B (French BSD3)

# pylint: disable=too-few-public-methods

from collections import defaultdict
from enum import Enum
from itertools import chain

from semconll.index import covered_by


class Span(object):
    """
    What portion of text an annotation corresponds to.
    Assumed to be in terms of character offsets

    The way we interpret spans amounts to how Python
    interprets array slice indices.

    One way to understand them is to think of offsets as
    sitting in between individual characters ::

          h   o   w   d   y
        0   1   2   3   4   5

    So `(0,5)` covers the whole word above, and `(1,2)`
    picks out the letter "o"
    """
    def __init__(self, start, end):
        self.char_start = start
        self.char_end = end

    def __str__(self):
        return '(%d,%d)' % (self.char_start, self.char_end)

    def __repr__(self):
        return 'Span(%d, %d)' % (self.char_start, self.char_end)

    def _tuple(self):
        return (self.char_start, self.char_end)

    def __lt__(self, other):
        return self._tuple() < other._tuple()

    def __eq__(self, other):
        return isinstance(other, Span) and self._tuple() == other._tuple()

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash(self._tuple())

    def length(self):
        """
        Return the length of this span
        """
        return self.char_end - self.char_start

    def encloses(self, other):
        """
        Return True if this span includes the argument

        Note that `x.encloses(x) == True`

        Corner case: `x.encloses(None) == False`
        """
        if other is None:
            return False
        return (self.char_start <= other.char_start and
                other.char_end <= self.char_end)

    @classmethod
    def merge_all(cls, spans):
        """
        Return a span that stretches from the beginning to the end
        of all the spans in the list
        """
        spans = list(spans)
        if not spans:
            raise ValueError("must have at least one span")
        return Span(min(x.char_start for x in spans),
                    max(x.char_end for x in spans))


class AnnoType(Enum):
    """
    Layers of annotation a document can carry.

    Selection queries on a `Document` are parameterised by one of these.
    """
    SENTENCE = 'Sentence'
    TOKEN = 'Token'
    MORPH = 'MorphologicalFeatures'
    DEPENDENCY = 'Dependency'
    SEM_PRED = 'SemPred'
    SEM_ARG = 'SemArg'
    COMPOUND = 'Compound'
    COMPOUND_PART = 'CompoundPart'
    LINKING_MORPHEME = 'LinkingMorpheme'


# pylint: disable=no-self-use
class Standoff(object):
    """A standoff object ultimately points to some piece of text.

    The pointing is not necessarily direct though.

    Attributes
    ----------
    origin : semconll.corpus.FileId, optional
        FileId of the document supporting this standoff.
    """
    def __init__(self, origin=None):
        self.origin = origin

    def _members(self):
        """Any annotations contained within this annotation.

        Must return None if is a terminal annotation (not the same
        meaning as returning the empty list).
        Non-terminal annotations must override this.
        """
        return None

    def _terminals(self):
        """Terminal annotations contained within this annotation.

        For terminal annotations, this is just the annotation itself.
        """
        my_members = self._members()
        if my_members is None:
            return [self]
        return list(chain.from_iterable(m._terminals() for m in my_members))

    def text_span(self):
        """
        Return the span from the earliest terminal annotation contained here
        to the latest.

        Corner case: if this is an empty non-terminal, return None.
        """
        terminals = self._terminals()
        if not terminals:
            return None
        return Span.merge_all(t.span for t in terminals)
# pylint: enable=no-self-use


class Unit(Standoff):
    """An annotation over a span of text.

    Units compare by identity: two tokens over the same characters are
    still two tokens.

    Parameters
    ----------
    span : Span
        Coordinates of the annotated span.
    utype : AnnoType
        Layer this unit belongs to.
    features : dict from str to str, optional
        Any additional attributes not modelled by the subclass.
    """
    def __init__(self, span, utype, features=None, origin=None):
        Standoff.__init__(self, origin)
        self.span = span
        self.type = utype
        self.features = features or {}

    def __str__(self):
        return '[%s] %s' % (self.type.value, self.span)

    def __repr__(self):
        return '<%s %s>' % (self.type.value, self.span)


def doc_order_key(anno):
    """
    Sort key giving document order: by start offset, longest first
    """
    return (anno.span.char_start, -anno.span.char_end)


class Document(Standoff):
    """
    A source text and the units annotating it.

    Units are expected to be added once by whatever produced them (a
    reader, a tagger); writers only ever query the document.
    """
    def __init__(self, text, annotations=(), origin=None):
        Standoff.__init__(self, origin)
        self._text = text
        self._units = []
        self._layers = defaultdict(list)
        # layer -> (units in document order, start offsets),
        # invalidated by `add`
        self._sorted = {}
        self.add_all(annotations)

    def add(self, anno):
        """
        Register a unit with this document and return it
        """
        anno.origin = self.origin
        self._units.append(anno)
        self._layers[anno.type].append(anno)
        self._sorted.pop(anno.type, None)
        return anno

    def add_all(self, annos):
        """
        Register several units at once
        """
        for anno in annos:
            self.add(anno)

    def _members(self):
        return self._units

    def set_origin(self, origin):
        """
        Set the origin of this document and of all its units

        :type origin: :py:class:`semconll.corpus.FileId`
        """
        self.origin = origin
        for anno in self._units:
            anno.origin = origin

    def select(self, atype):
        """
        All units of the given layer in document order (ascending start,
        then descending end; units with the same span stay in the order
        they were added)
        """
        return self._sorted_layer(atype)[0]

    def _sorted_layer(self, atype):
        "units of a layer in document order, with their start offsets"
        if atype not in self._sorted:
            layer = sorted(self._layers[atype], key=doc_order_key)
            starts = [x.span.char_start for x in layer]
            self._sorted[atype] = (layer, starts)
        return self._sorted[atype]

    def select_covered(self, atype, cover):
        """
        Units of the given layer whose span lies within the span of
        `cover` (an annotation or a `Span`), in document order
        """
        span = cover if isinstance(cover, Span) else cover.text_span()
        layer, starts = self._sorted_layer(atype)
        return covered_by(layer, span, starts=starts)

    def text(self, span=None):
        """
        Return the text associated with these annotations (or None),
        optionally limited to a span
        """
        if self._text is None:
            return None
        elif span is None:
            return self._text
        else:
            return self._text[span.char_start:span.char_end]

    def covered_text(self, anno):
        """
        Surface text of an annotation
        """
        return self.text(anno.text_span())
