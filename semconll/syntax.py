#!/usr/bin/env python
# -*- coding: utf-8 -*-
#
# Author: Eric Kow
# License: BSD3

"""
Syntactic dependencies between tokens.

A dependency is stored as a unit over the span of its dependent, with
references to the governing and dependent tokens. Parsers usually give
us more than one flavour of dependencies for the same sentence (eg.
CoreNLP's basic and collapsed dependencies); only the basic ones are
expected to form a tree.

The tree view here builds off the NLTK Tree class, like the constituency
trees we get from parsers.
"""

from collections import defaultdict
from enum import Enum

import nltk.tree

from semconll.annotation import AnnoType, Span, Standoff, Unit, doc_order_key


class SyntaxException(Exception):
    """
    Dependencies that cannot be read as a tree
    """
    def __init__(self, *args, **kw):
        super(SyntaxException, self).__init__(*args, **kw)


class DependencyFlavor(Enum):
    """
    Flavour of a dependency edge
    """
    BASIC = 'basic'
    ENHANCED = 'enhanced'


class Dependency(Unit):
    """
    A labelled edge from a governor token to a dependent token.

    A root is usually modelled as a dependency which is its own
    governor.

    Attributes
    ----------
    governor : Token
    dependent : Token
    dep_type : str
        Dependency relation label.
    flavor : DependencyFlavor or None
        None is read as basic.
    """
    def __init__(self, governor, dependent, dep_type, flavor=None,
                 span=None, features=None):
        Unit.__init__(self, span or dependent.span, AnnoType.DEPENDENCY,
                      features)
        self.governor = governor
        self.dependent = dependent
        self.dep_type = dep_type
        self.flavor = flavor

    def is_basic(self):
        "True if this dependency belongs to the basic tree"
        return self.flavor is None or self.flavor is DependencyFlavor.BASIC

    def is_root(self):
        "True if this dependency is a self-loop"
        return self.governor is self.dependent


def basic_dependencies(deps):
    """
    Only the dependencies that belong to the basic tree
    """
    return [x for x in deps if x.is_basic()]


class DependencyTree(nltk.Tree, Standoff):
    """
    A variant of the NLTK Tree data structure for the representation
    of the basic dependency tree of a sentence. The tree is also a
    Standoff annotation; spans roughly indicate the range covered by
    the tokens in the subtree (this glosses over any gaps).

    Fields:

    * label is 'ROOT' for the root node, else the form of the token
      followed by the link label (`form/link`)
    * token is the `Token` for this node (None for the root)
    * link is the label of the dependency between this node and its
      governor; None for the root and for tokens without a governor
    """
    def __init__(self, node, children, link=None, token=None, span=None,
                 origin=None):
        nltk.Tree.__init__(self, node, children)
        Standoff.__init__(self, origin)
        self.link = link
        self.token = token
        spans = [x.span for x in children]
        if token is not None:
            spans.append(token.span)
        self.span = span if span is not None else Span.merge_all(spans)

    def is_root(self):
        """
        This is a dependency tree root (has a special node)
        """
        return self.token is None

    def text_span(self):
        return self.span

    @classmethod
    def build(cls, doc, sentence):
        """
        Build the tree of the basic dependencies of a sentence.

        Tokens which are their own governor, or which have no governor
        at all, hang off the root. Children are in document order.
        """
        tokens = doc.select_covered(AnnoType.TOKEN, sentence)
        deps = basic_dependencies(doc.select_covered(AnnoType.DEPENDENCY,
                                                     sentence))
        kids = defaultdict(list)
        governed = set()
        for dep in deps:
            if dep.dependent in governed:
                raise SyntaxException('token [%s] is dependent of more '
                                      'than one dependency' %
                                      doc.covered_text(dep.dependent))
            governed.add(dep.dependent)
            gov = None if dep.is_root() else dep.governor
            kids[gov].append((dep.dependent, dep.dep_type))
        for tok in tokens:
            if tok not in governed:
                kids[None].append((tok, None))

        seen = set()

        def step(token, link):
            "recursive helper for tree building"
            seen.add(token)
            form = doc.covered_text(token)
            label = form if link is None else '%s/%s' % (form, link)
            return cls(label, subtrees(token), link=link, token=token)

        def subtrees(gov):
            "trees of the dependents of gov"
            return [step(tok, link) for tok, link in
                    sorted(kids[gov], key=lambda x: doc_order_key(x[0]))]

        tree = cls('ROOT', subtrees(None), span=sentence.text_span(),
                   origin=doc.origin)
        lost = [t for t in tokens if t not in seen]
        if lost:
            raise SyntaxException('tokens unreachable from the root '
                                  '(cycle or governor outside the '
                                  'sentence): %s' %
                                  ' '.join(doc.covered_text(t) for t in lost))
        return tree
