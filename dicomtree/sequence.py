# Copyright 2008-2021 dicomtree authors. See LICENSE file for details.
"""Define the Sequence and Item classes.

Both are data elements that can contain other data elements. A Sequence
(VR of SQ) holds Items, an Item holds the data elements of one sequence
entry. The fragments of encapsulated pixel data are Items that hold raw
bytes only.
"""

from typing import Optional, Tuple, Union

from dicomtree.dataelem import DataElement
from dicomtree.dataset import Dataset
from dicomtree.tag import ItemTag


TagType = Union[int, str, Tuple[int, int]]


class Sequence(DataElement, Dataset):
    """A DICOM Sequence data element, a container of :class:`Item`.

    Examples
    --------

    >>> ds = Dataset()
    >>> seq = Sequence('0008,1140', parent=ds)
    >>> item = Item(parent=seq)
    >>> elem = DataElement('0008,1150', '1.2.3', parent=item)
    >>> [e.name for e in ds.iterall()]
    ['Referenced Image Sequence', 'Item', 'Referenced SOP Class UID']
    """

    is_parent = True

    def __init__(
        self,
        tag: TagType,
        length: int = 0,
        bin: Optional[bytes] = None,
        name: Optional[str] = None,
        VR: Optional[str] = "SQ",
        parent: Optional[Dataset] = None
    ) -> None:
        Dataset.__init__(self)
        DataElement.__init__(
            self, tag, None, bin=bin, length=length, name=name, VR=VR,
            parent=parent
        )

    def __repr__(self) -> str:
        return (f"<{self.__class__.__name__} {self.tag!r} {self.name!r}, "
                f"{len(self)} items>")


class Item(DataElement, Dataset):
    """A DICOM sequence Item.

    An item nested in an ordinary sequence has child data elements; a
    fragment of encapsulated pixel data has its raw bytes in
    :attr:`~dicomtree.dataelem.DataElement.bin` and no children.
    """

    is_parent = True

    def __init__(
        self,
        tag: TagType = ItemTag,
        bin: Optional[bytes] = None,
        length: Optional[int] = None,
        name: Optional[str] = None,
        VR: Optional[str] = None,
        parent: Optional[Dataset] = None
    ) -> None:
        Dataset.__init__(self)
        DataElement.__init__(
            self, tag, None, bin=bin, length=length, name=name, VR=VR,
            parent=parent
        )

    def __repr__(self) -> str:
        return (f"<{self.__class__.__name__} {self.tag!r} {self.name!r}, "
                f"{len(self)} elements, {len(self.bin)} bytes>")
