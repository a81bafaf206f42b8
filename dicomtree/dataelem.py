# Copyright 2008-2021 dicomtree authors. See LICENSE file for details.
"""Define the DataElement class.

A DataElement has a tag,
              a value representation (VR),
              a length,
              the raw bytes of its value
              and (for most VRs) a decoded value.
"""

from typing import Any, Optional, Union, Tuple, TYPE_CHECKING
import weakref

from dicomtree.datadict import default_dictionary
from dicomtree.tag import Tag, BaseTag

if TYPE_CHECKING:  # pragma: no cover
    from dicomtree.dataset import Dataset


UNDEFINED_LENGTH = 0xFFFFFFFF
"""The length field value of a sequence, item or element of undefined length."""


class DataElement:
    """Contain a decoded DICOM Element.

    Examples
    --------

    >>> from dicomtree.dataset import Dataset
    >>> ds = Dataset()
    >>> elem = DataElement('0010,0010', 'CITIZEN^Joan', parent=ds)
    >>> elem.name, elem.VR
    ("Patient's Name", 'PN')
    >>> ds['0010,0010'] is elem
    True

    Attributes
    ----------
    tag : dicomtree.tag.BaseTag
        The element's tag.
    value
        The decoded value, ``None`` for binary VRs and empty values.
    bin : bytes
        The raw bytes of the value as found in the data.
    length : int
        The declared length of the value, :data:`UNDEFINED_LENGTH` if
        undefined.
    name : str
        The element's name.
    VR : str
        The element's Value Representation.
    """

    is_parent = False

    def __init__(
        self,
        tag: Union[int, str, Tuple[int, int]],
        value: Any,
        bin: Optional[bytes] = None,
        length: Optional[int] = None,
        name: Optional[str] = None,
        VR: Optional[str] = None,
        parent: Optional["Dataset"] = None
    ) -> None:
        """Create a new :class:`DataElement`.

        Parameters
        ----------
        tag : int or str or 2-tuple of int
            The DICOM (group, element) tag in any form accepted by
            :func:`~dicomtree.tag.Tag`.
        value
            The decoded value of the data element.
        bin : bytes, optional
            The raw bytes of the value.
        length : int, optional
            The declared value length, default the length of `bin`.
        name : str, optional
            The element name, default from the data dictionary.
        VR : str, optional
            The 2 character DICOM value representation, default from the
            data dictionary.
        parent : dataset.Dataset, optional
            The container to add the new element to.
        """
        self.tag: BaseTag = Tag(tag)
        self.value = value
        self.bin = b'' if bin is None else bin
        self.length = len(self.bin) if length is None else length
        if name is None or VR is None:
            dict_name, dict_VR = default_dictionary.lookup_tag(self.tag)
            name = dict_name if name is None else name
            VR = dict_VR if VR is None else VR
        self.name = name
        self.VR = VR
        self._parent: "Optional[weakref.ReferenceType[Dataset]]" = None
        if parent is not None:
            parent.add(self)

    @property
    def parent(self) -> "Optional[Dataset]":
        """Return the container this element belongs to (if any)."""
        if self._parent is None:
            return None

        return self._parent()

    @parent.setter
    def parent(self, value: "Optional[Dataset]") -> None:
        self._parent = None if value is None else weakref.ref(value)

    @property
    def is_undefined_length(self) -> bool:
        """Return ``True`` if the element's length field was undefined."""
        return self.length == UNDEFINED_LENGTH

    @property
    def is_private(self) -> bool:
        """Return ``True`` if the element has a private tag."""
        return self.tag.is_private

    def __repr__(self) -> str:
        return (f"<{self.__class__.__name__} {self.tag!r} {self.VR} "
                f"{self.name!r}: {self.value!r}>")
