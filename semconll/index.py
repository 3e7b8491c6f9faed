# Author: Eric Kow
# License: BSD3

"""
Span enclosure lookups between annotation layers.

Everything here works on layers in document order (ascending start
offset, see `semconll.annotation.Document.select`), which lets us find
enclosed units by walking forward from the first candidate instead of
comparing every pair of units.
"""

from bisect import bisect_left


def covered_by(layer, span, starts=None):
    """
    Units from `layer` whose span lies within `span`

    Parameters
    ----------
    layer : list of Unit
        Units in document order.
    span : Span
        Enclosing span.
    starts : list of int, optional
        Start offsets of the units in `layer`, if you have them at hand.

    Returns
    -------
    res : list of Unit
        Enclosed units, in the order of `layer`.
    """
    if starts is None:
        starts = [x.span.char_start for x in layer]
    res = []
    i = bisect_left(starts, span.char_start)
    while i < len(layer) and starts[i] <= span.char_end:
        if span.encloses(layer[i].span):
            res.append(layer[i])
        i += 1
    return res


def index_covered(doc, outer_type, inner_type):
    """
    Map each unit of the outer layer to the units of the inner layer it
    encloses

    Enclosure is `outer.char_start <= inner.char_start` and
    `inner.char_end <= outer.char_end`. Inner units come out in document
    order; every outer unit gets an entry, possibly empty.

    This is a sweep over both layers: because outer units are visited
    by increasing start offset, the first inner candidate never moves
    backwards.

    Parameters
    ----------
    doc : Document
    outer_type : AnnoType
    inner_type : AnnoType

    Returns
    -------
    index : dict from Unit to list of Unit
    """
    outers = doc.select(outer_type)
    inners = doc.select(inner_type)
    index = {}
    first = 0
    for outer in outers:
        o_start = outer.span.char_start
        o_end = outer.span.char_end
        while first < len(inners) and inners[first].span.char_start < o_start:
            first += 1
        covered = []
        i = first
        while i < len(inners) and inners[i].span.char_start <= o_end:
            if outer.span.encloses(inners[i].span):
                covered.append(inners[i])
            i += 1
        index[outer] = covered
    return index
