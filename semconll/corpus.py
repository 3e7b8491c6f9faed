# Author: Eric Kow
# License: BSD3

"""
Document identity
"""
#
# Writers produce one output file per document; the FileId is what
# they name that file after.


class FileId:
    """
    Information needed to identify a document.

    :param doc: document name
    :type doc:  string

    :param subdoc: subdocument (often None); for documents that were
        cut into smaller pieces before processing (eg. for tools that
        require too much memory on large inputs)
    :type subdoc: string
    """
    def __init__(self, doc, subdoc=None):
        self.doc = doc
        self.subdoc = subdoc

    def __str__(self):
        return "%s [%s]" % (self.doc, self.subdoc)

    def __repr__(self):
        return "FileId(%r, %r)" % (self.doc, self.subdoc)

    def _tuple(self):
        """
        For internal use by __hash__, __eq__, etc
        """
        return (self.doc, self.subdoc)

    def __hash__(self):
        return hash(self._tuple())

    def __eq__(self, other):
        return isinstance(other, FileId) and self._tuple() == other._tuple()

    def __lt__(self, other):
        return (self.doc, self.subdoc or '') < (other.doc, other.subdoc or '')

    def basename(self, suffix=''):
        """
        File name for output derived from this document
        """
        parts = [self.doc, self.subdoc]
        return "_".join(p for p in parts if p is not None) + suffix
