# Copyright 2008-2021 dicomtree authors. See LICENSE file for details.
"""dicomtree package -- decode DICOM files and buffers into an element tree.
   See Quick Start below.

-----------
Quick Start
-----------

1. Read a file and walk the decoded elements::

    from dicomtree import dcmread
    result = dcmread("file1.dcm")
    if not result.success:
        print(*result.messages, sep="\n")
    for elem in result.dataset.iterall():
        print(elem.tag, elem.VR, elem.name, elem.value)

2. Data received over a network has no file header, use :func:`read_bytes`
   with the negotiated transfer syntax::

    from dicomtree import read_bytes
    result = read_bytes(data, syntax="1.2.840.10008.1.2")

3. Reading never raises, look at ``result.messages`` for the problems found.
   Elements read before a fatal problem are kept in the tree.
"""

from dicomtree.dataelem import DataElement
from dicomtree.dataset import Dataset
from dicomtree.filereader import dcmread, read_bytes, ParseResult, Diagnostic
from dicomtree.sequence import Sequence, Item

from ._version import __version__, __version_info__

__all__ = [
    "DataElement",
    "Dataset",
    "Diagnostic",
    "Item",
    "ParseResult",
    "Sequence",
    "dcmread",
    "read_bytes",
    "__version__",
    "__version_info__",
]
