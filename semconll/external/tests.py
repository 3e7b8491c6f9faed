# -*- coding: utf-8 -*-
#
# Author: Eric Kow
# License: BSD3
# pylint: disable=invalid-name

"""
Tests for the CoreNLP reader
"""

import io
import os
import shutil
import tempfile
import unittest

from semconll.annotation import AnnoType
from semconll.conll2009 import write_conll2009
from semconll.corpus import FileId
from semconll.external.corenlp import (CoreNlpException, doc_name,
                                       read_corenlp_xml, read_results)
from semconll.syntax import DependencyFlavor

I_EAT_XML = u"""<?xml version="1.0" encoding="UTF-8"?>
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
            <NER>O</NER>
          </token>
          <token id="2">
            <word>eat</word>
            <lemma>eat</lemma>
            <CharacterOffsetBegin>2</CharacterOffsetBegin>
            <CharacterOffsetEnd>5</CharacterOffsetEnd>
            <POS>VBP</POS>
          </token>
          <token id="3">
            <word>.</word>
            <lemma>.</lemma>
            <CharacterOffsetBegin>5</CharacterOffsetBegin>
            <CharacterOffsetEnd>6</CharacterOffsetEnd>
            <POS>.</POS>
          </token>
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
          <dep type="punct">
            <governor idx="2">eat</governor>
            <dependent idx="3">.</dependent>
          </dep>
        </dependencies>
        <dependencies type="collapsed-ccprocessed-dependencies">
          <dep type="root">
            <governor idx="0">ROOT</governor>
            <dependent idx="2">eat</dependent>
          </dep>
          <dep type="nsubj">
            <governor idx="2">eat</governor>
            <dependent idx="1">I</dependent>
          </dep>
        </dependencies>
      </sentence>
    </sentences>
  </document>
</root>
"""

BAD_DEP_XML = u"""<?xml version="1.0" encoding="UTF-8"?>
<root>
  <document>
    <sentences>
      <sentence id="1">
        <tokens>
          <token id="1">
            <word>Hi</word>
            <CharacterOffsetBegin>0</CharacterOffsetBegin>
            <CharacterOffsetEnd>2</CharacterOffsetEnd>
          </token>
        </tokens>
        <dependencies type="basic-dependencies">
          <dep type="dep">
            <governor idx="7">Bye</governor>
            <dependent idx="1">Hi</dependent>
          </dep>
        </dependencies>
      </sentence>
    </sentences>
  </document>
</root>
"""


def write_file(path, content):
    "write some utf-8 text to a file"
    with io.open(path, 'w', encoding='utf-8') as f_out:
        f_out.write(content)


class CoreNlpTest(unittest.TestCase):
    "reading CoreNLP XML"

    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()
        self.xml_file = os.path.join(self.tmpdir, 'ieat.txt.xml')
        write_file(self.xml_file, I_EAT_XML)

    def tearDown(self):
        shutil.rmtree(self.tmpdir)

    def test_doc_name(self):
        "strip the xml suffix and the original extension"
        self.assertEqual('foo', doc_name('/tmp/foo.txt.xml'))
        self.assertEqual('bar', doc_name('bar.xml'))

    def test_tokens(self):
        "tokens and sentences"
        doc = read_corenlp_xml(self.xml_file)
        self.assertEqual(FileId('ieat'), doc.origin)
        self.assertEqual(u"I eat.", doc.text())
        sents = doc.select(AnnoType.SENTENCE)
        self.assertEqual(1, len(sents))
        self.assertEqual('1', sents[0].features['id'])
        toks = doc.select_covered(AnnoType.TOKEN, sents[0])
        self.assertEqual(['I', 'eat', '.'], [doc.covered_text(t)
                                             for t in toks])
        self.assertEqual(['PRP', 'VBP', '.'], [t.pos for t in toks])
        self.assertEqual('eat', toks[1].lemma)
        self.assertEqual('O', toks[0].features['NER'])
        self.assertNotIn('NER', toks[1].features)

    def test_dependencies(self):
        "every flavour is read, roots as loops"
        doc = read_corenlp_xml(self.xml_file)
        deps = doc.select(AnnoType.DEPENDENCY)
        basic = [d for d in deps if d.flavor is DependencyFlavor.BASIC]
        other = [d for d in deps if d.flavor is DependencyFlavor.ENHANCED]
        self.assertEqual(3, len(basic))
        self.assertEqual(2, len(other))
        roots = [d for d in basic if d.is_root()]
        self.assertEqual(1, len(roots))
        self.assertEqual(u"eat", doc.covered_text(roots[0].dependent))
        self.assertEqual('root', roots[0].dep_type)

    def test_text_file(self):
        "text next to the XML is used when present"
        write_file(os.path.join(self.tmpdir, 'ieat.txt'), u"I eat.\n")
        doc, = read_results([self.xml_file])
        self.assertEqual(u"I eat.\n", doc.text())

    def test_unknown_token(self):
        "dependency on a token that is not there"
        bad_file = os.path.join(self.tmpdir, 'bad.xml')
        write_file(bad_file, BAD_DEP_XML)
        self.assertRaises(CoreNlpException, read_corenlp_xml, bad_file)

    def test_conll2009(self):
        "straight through to CoNLL-2009"
        doc = read_corenlp_xml(self.xml_file)
        out = io.StringIO()
        write_conll2009(doc, out)
        rows = [x.split('\t') for x in out.getvalue().split('\n') if x]
        self.assertEqual(['2', 'eat', 'eat', 'eat', 'VBP', 'VBP', '_', '_',
                          '0', '0', 'root', 'root', '_', '_', ''], rows[1])
        self.assertEqual(['2', '2', 'nsubj', 'nsubj'], rows[0][8:12])
