"""
The semconll library holds linguistic annotations over a text as
standoff annotations, and writes them out in the CoNLL-2009 format for
syntactic and semantic dependencies. It has a layered structure:

* base layer (spans, annotations, documents, span indexing)
* annotation layers (segmentation, syntax, semantics)
* formats and tools (CoNLL-2009 output, CoreNLP input, command line)

Layers
~~~~~~
The base layer provides:

* annotation (semconll.annotation): spans, units and the `Document`
  holding them together with the text, selectable by layer
  (`semconll.annotation.AnnoType`)

* span index (semconll.index): which units of a layer fall within which
  units of another

* corpus (semconll.corpus): identifiers for documents, used to name
  output files

On top of this, each annotation layer has its own module:

* `semconll.segmentation`: sentences, tokens, morphological features,
  compound words and their splits
* `semconll.syntax`: dependencies, and a tree view of the basic ones
* `semconll.semantics`: semantic predicates, arguments and roles

Finally, the format and tool layer ::

      cmd (semconll-util)
          |           \\
          v            v
      conll2009     external.corenlp                [tools]
          |            |
          v            v
   segmentation   syntax   semantics                [layers]
          \\         |        /
           v        v       v
       annotation <- index, corpus                  [base]

A typical use is to read or build a `Document`, then hand it to
`semconll.conll2009.write_conll2009` (or `dump_conll2009_files` for a
whole set of documents).
"""
