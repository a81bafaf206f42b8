# Copyright 2008-2021 dicomtree authors. See LICENSE file for details.
"""Define the Dataset class, the root of a decoded element tree.

:class:`Dataset` keeps its elements in the order they were read, which is
the order they appear in the data. :class:`~dicomtree.sequence.Sequence`
and :class:`~dicomtree.sequence.Item` are containers too, so a decoded file
forms a tree::

    Dataset
    +-- DataElement (0008,0020)
    +-- Sequence (0008,1140)
    |   +-- Item (FFFE,E000)
    |       +-- DataElement (0008,1150)
    +-- DataElement (7FE0,0010)
"""

from typing import Any, Iterator, List, Optional

from dicomtree.dataelem import DataElement
from dicomtree.tag import Tag


class Dataset:
    """Contains an ordered collection of DICOM Data Elements.

    Examples
    --------

    >>> ds = Dataset()
    >>> elem = DataElement('0010,0010', 'CITIZEN^Joan', parent=ds)
    >>> '0010,0010' in ds
    True
    >>> ds['0010,0010'].value
    'CITIZEN^Joan'
    """

    is_parent = True
    parent: Optional["Dataset"] = None

    def __init__(self) -> None:
        self._children: List[DataElement] = []

    def add(self, data_element: DataElement) -> None:
        """Append `data_element` to the dataset and make it its parent."""
        data_element.parent = self
        self._children.append(data_element)

    @property
    def children(self) -> List[DataElement]:
        """Return a :class:`list` of the direct child elements."""
        return list(self._children)

    def __len__(self) -> int:
        """Return the number of direct child elements."""
        return len(self._children)

    def __iter__(self) -> Iterator[DataElement]:
        """Iterate through the direct child elements, in order."""
        yield from self._children

    def __bool__(self) -> bool:
        # a container is never falsy, even without children
        return True

    def _find(self, tag: Any) -> Optional[DataElement]:
        tag = Tag(tag)
        for elem in self._children:
            if elem.tag == tag:
                return elem

        return None

    def __contains__(self, tag: Any) -> bool:
        """Return ``True`` if a direct child has the tag `tag`."""
        try:
            return self._find(tag) is not None
        except (ValueError, TypeError, OverflowError):
            return False

    def __getitem__(self, tag: Any) -> DataElement:
        """Return the first direct child with the tag `tag`.

        Raises
        ------
        KeyError
            If no direct child has the tag.
        """
        elem = self._find(tag)
        if elem is None:
            raise KeyError(tag)

        return elem

    def get(self, tag: Any, default: Any = None) -> Any:
        """Return the first direct child with the tag `tag`, or `default`."""
        elem = self._find(tag)
        if elem is None:
            return default

        return elem

    def iterall(self) -> Iterator[DataElement]:
        """Iterate through all descendant elements, depth first."""
        for elem in self._children:
            yield elem
            if elem.is_parent:
                yield from elem.iterall()  # type: ignore[attr-defined]

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}, {len(self)} elements>"
