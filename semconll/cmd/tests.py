# Author: Eric Kow
# License: BSD3
# pylint: disable=invalid-name

"""
Tests for the semconll-util command line
"""

import contextlib
import io
import os
import shutil
import tempfile
import unittest

from semconll.cmd import main
from semconll.external.tests import I_EAT_XML, write_file


class CmdTest(unittest.TestCase):
    "running subcommands end to end"

    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()
        self.xml_file = os.path.join(self.tmpdir, 'ieat.txt.xml')
        write_file(self.xml_file, I_EAT_XML)

    def tearDown(self):
        shutil.rmtree(self.tmpdir)

    def run_main(self, argv):
        "stdout of a semconll-util invocation"
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            main(argv)
        return out.getvalue()

    def test_conll2009(self):
        "one file per input"
        out_dir = os.path.join(self.tmpdir, 'out')
        self.run_main(['conll2009', self.xml_file, '-o', out_dir,
                       '--suffix', '.conll09', '--no-lemma'])
        out_file = os.path.join(out_dir, 'ieat.conll09')
        with io.open(out_file, encoding='utf-8') as f_in:
            lines = f_in.read().split('\n')
        self.assertEqual(['1', 'I', '_', '_', 'PRP', 'PRP'],
                         lines[0].split('\t')[:6])
        self.assertEqual(['', ''], lines[3:])

    def test_count(self):
        "report has a total"
        output = self.run_main(['count', self.xml_file, self.xml_file])
        self.assertIn('TOTAL', output)
        self.assertIn('basic deps', output)
        total = output.strip().split('\n')[-1].split()
        self.assertEqual(['TOTAL', '2', '6', '0', '0', '0', '6', '4'],
                         total)

    def test_tree(self):
        "dependency trees"
        output = self.run_main(['tree', self.xml_file])
        self.assertIn('# ieat', output)
        self.assertIn('eat/root', output)
        self.assertIn('I/nsubj', output)

    def test_no_subcommand(self):
        "a subcommand is needed"
        with contextlib.redirect_stderr(io.StringIO()):
            self.assertRaises(SystemExit, main, [])
