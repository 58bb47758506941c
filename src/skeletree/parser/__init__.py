"""Document input -- load a JSON/YAML file and extract what the tree needs.

Typical usage::

    from skeletree.parser import extract_document, load_document

    document = extract_document(load_document("openapi.yaml"))

Sub-modules:

* :mod:`~skeletree.parser.loader` -- File/stdin I/O and JSON/YAML parsing.
* :mod:`~skeletree.parser.extractor` -- Lenient conversion of the raw
  mapping into :class:`~skeletree.models.APIDocument`.
"""

from skeletree.parser.extractor import extract_document
from skeletree.parser.loader import load_document

__all__ = ["load_document", "extract_document"]
