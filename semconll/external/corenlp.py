#!/usr/bin/env python
# -*- coding: utf-8 -*-
#
# Author: Eric Kow
# License: BSD3

"""
Stanford CoreNLP_ XML output as a `semconll.annotation.Document`

Example of output:

.. code-block:: xml

  <root>
    <document>
      <sentences>
        <sentence id="1">
          <tokens>
            <token id="1">
              <word>I</word>
              <lemma>I</lemma>
              <CharacterOffsetBegin>0</CharacterOffsetBegin>
              <CharacterOffsetEnd>1</CharacterOffsetEnd>
              <POS>PRP</POS>
            </token>
            ...
          </tokens>
          <dependencies type="basic-dependencies">
            <dep type="root">
              <governor idx="0">ROOT</governor>
              <dependent idx="2">eat</dependent>
            </dep>
            <dep type="nsubj">
              <governor idx="2">eat</governor>
              <dependent idx="1">I</dependent>
            </dep>
            ...
          </dependencies>
          <dependencies type="collapsed-ccprocessed-dependencies">
            ...
          </dependencies>
        </sentence>
      </sentences>
    </document>
  </root>

Character offsets are relative to the text CoreNLP was given; token
indices are 1-based within their sentence, 0 standing for the root.

.. _CoreNLP:       http://nlp.stanford.edu/software/corenlp.shtml
"""

import io
import os
import xml.etree.ElementTree as ET

from semconll.annotation import Document, Span
from semconll.corpus import FileId
from semconll.segmentation import Sentence, Token
from semconll.syntax import Dependency, DependencyFlavor

DEPENDENCY_FLAVORS = [
    ('basic-dependencies', DependencyFlavor.BASIC),
    ('collapsed-dependencies', DependencyFlavor.ENHANCED),
    ('collapsed-ccprocessed-dependencies', DependencyFlavor.ENHANCED),
    ('enhanced-dependencies', DependencyFlavor.ENHANCED),
    ('enhanced-plus-plus-dependencies', DependencyFlavor.ENHANCED),
]
"""
Dependency sections we read, and the flavour we give their edges
"""

XML_SUFFIX = '.xml'


class CoreNlpException(Exception):
    """
    CoreNLP output we do not understand
    """
    def __init__(self, *args, **kw):
        super(CoreNlpException, self).__init__(*args, **kw)


def _text_or_none(elt, name):
    """Text of a child element, None if there is no such child"""
    child = elt.find(name)
    return None if child is None else child.text


def _read_tokens(s_elt):
    """Tokens of a sentence element, as a dict from index to Token"""
    tokens = {}
    for t_elt in s_elt.findall('.//tokens/token'):
        tid = t_elt.get('id')
        if tid is None:
            raise CoreNlpException('Token without id')
        try:
            start = int(t_elt.find('CharacterOffsetBegin').text)
            end = int(t_elt.find('CharacterOffsetEnd').text)
        except AttributeError:
            raise CoreNlpException('Token %s has no character offsets' % tid)
        token = Token(Span(start, end),
                      lemma=_text_or_none(t_elt, 'lemma'),
                      pos=_text_or_none(t_elt, 'POS'))
        token.features['word'] = _text_or_none(t_elt, 'word')
        ner = _text_or_none(t_elt, 'NER')
        if ner is not None:
            token.features['NER'] = ner
        tokens[tid] = token
    return tokens


def _read_deps(s_elt, tokens):
    """Dependencies of all the flavours we know about, for a sentence"""
    deps = []
    for dep_section, flavor in DEPENDENCY_FLAVORS:
        xpath = ".//dependencies[@type='%s']/dep" % dep_section
        for d_elt in s_elt.findall(xpath):
            gov_id = d_elt.find('governor').get('idx')
            dep_id = d_elt.find('dependent').get('idx')
            if dep_id not in tokens or (gov_id != '0' and
                                        gov_id not in tokens):
                raise CoreNlpException('Dependency %s -> %s refers to an '
                                       'unknown token' % (gov_id, dep_id))
            dependent = tokens[dep_id]
            # the root is modelled as a loop
            governor = dependent if gov_id == '0' else tokens[gov_id]
            deps.append(Dependency(governor, dependent, d_elt.get('type'),
                                   flavor=flavor))
    return deps


def rebuild_text(tokens):
    """
    Approximate the text CoreNLP was given by writing each word at its
    offsets, with spaces everywhere else
    """
    if not tokens:
        return ''
    chars = [' '] * max(t.span.char_end for t in tokens)
    for tok in tokens:
        word = tok.features.get('word') or ''
        width = tok.span.length()
        chars[tok.span.char_start:tok.span.char_end] =\
            list(word[:width].ljust(width))
    return ''.join(chars)


def read_corenlp_xml(xml_file, text=None, origin=None):
    """Read CoreNLP's output for a document.

    Parameters
    ----------
    xml_file : str
        Path to the CoreNLP XML file.
    text : str, optional
        Text that was given to CoreNLP; if None, we rebuild an
        approximation from the words and their offsets.
    origin : FileId, optional
        Identifier for the document; if None, we name it after the
        XML file.

    Returns
    -------
    doc : Document
        Document with sentence, token and dependency layers.
    """
    root = ET.parse(xml_file)
    sentences = []
    tokens = []
    deps = []
    for s_elt in root.findall('.//sentences/sentence'):
        s_tokens = _read_tokens(s_elt)
        if not s_tokens:
            continue
        s_span = Span.merge_all(t.span for t in s_tokens.values())
        sentences.append(Sentence(s_span,
                                  features={'id': s_elt.get('id')}))
        tokens.extend(s_tokens.values())
        deps.extend(_read_deps(s_elt, s_tokens))

    if text is None:
        text = rebuild_text(tokens)
    if origin is None:
        origin = FileId(doc_name(xml_file))
    doc = Document(text, origin=origin)
    doc.add_all(sentences)
    doc.add_all(tokens)
    doc.add_all(deps)
    return doc


def doc_name(xml_file):
    """
    Document name for a CoreNLP output file: `foo.txt.xml` is the
    output for `foo.txt`, which we call `foo`
    """
    name = os.path.basename(xml_file)
    if name.endswith(XML_SUFFIX):
        name = name[:-len(XML_SUFFIX)]
    return os.path.splitext(name)[0]


def read_results(xml_files, encoding='utf-8'):
    """
    Read several CoreNLP output files, using the original text file
    next to each (`foo.txt` for `foo.txt.xml`) when there is one.

    Return a list of documents in the order of the files.
    """
    docs = []
    for xml_file in xml_files:
        text = None
        txt_file = xml_file[:-len(XML_SUFFIX)]\
            if xml_file.endswith(XML_SUFFIX) else None
        if txt_file and os.path.isfile(txt_file):
            with io.open(txt_file, 'r', encoding=encoding,
                         newline='') as f_txt:
                text = f_txt.read()
        docs.append(read_corenlp_xml(xml_file, text=text))
    return docs
