# Copyright 2008-2021 dicomtree authors. See LICENSE file for details.
"""Access dicom dictionary information"""

from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

from dicomtree.tag import Tag, is_group_length, is_private

# the actual dict of {tag: (VR, VM, name, is_retired, keyword), ...}
from dicomtree._dicom_dict import DicomDictionary

# those with tags like "(50xx,0005)"
from dicomtree._dicom_dict import RepeatersDictionary
from dicomtree._uid_dict import UID_dictionary
from dicomtree.uid import UID, ExplicitVRBigEndian, ImplicitVRLittleEndian


DictEntry = Tuple[str, str, str, str, str]

GROUP_LENGTH_ENTRY = ("Group Length", "UL")
PRIVATE_ENTRY = ("Private", "UN")
UNKNOWN_ENTRY = ("Unknown", "UN")


def _build_masks(
    repeaters: Mapping[str, DictEntry]
) -> Dict[str, Tuple[int, int]]:
    # Map a true bitwise mask to the DICOM mask with "x"'s in it.
    masks = {}
    for mask_x in repeaters:
        digits = mask_x.replace(",", "")
        # mask1 is XOR'd to see that all non-"x" bits
        # are identical (XOR result = 0 if bits same)
        # then AND those out with 0 bits at the "x"
        # ("we don't care") location using mask2
        mask1 = int(digits.replace("x", "0"), 16)
        mask2 = int("".join(["F0"[c == "x"] for c in digits]), 16)
        masks[mask_x] = (mask1, mask2)

    return masks


class DataDictionary:
    """Immutable lookup of element names and VRs, and of transfer syntaxes.

    Parameters
    ----------
    elements : dict, optional
        ``{'GGGG,EEEE': (VR, VM, name, is_retired, keyword), ...}``, default
        the bundled DICOM dictionary.
    repeaters : dict, optional
        As `elements` but for repeating group tags such as ``'60xx,3000'``.
    uids : dict, optional
        ``{uid: (name, type, info, is_retired, keyword), ...}``, default the
        bundled UID dictionary.

    Examples
    --------

    >>> ds_dict = DataDictionary()
    >>> ds_dict.lookup_tag('0010,0010')
    ("Patient's Name", 'PN')
    >>> ds_dict.lookup_transfer_syntax('1.2.840.10008.1.2.2')
    (True, True, False)
    """
    def __init__(
        self,
        elements: Optional[Mapping[str, DictEntry]] = None,
        repeaters: Optional[Mapping[str, DictEntry]] = None,
        uids: Optional[Mapping[str, Tuple[str, str, str, str, str]]] = None
    ) -> None:
        if elements is None:
            elements = DicomDictionary
        if repeaters is None:
            repeaters = RepeatersDictionary
        if uids is None:
            uids = UID_dictionary

        self._elements = MappingProxyType(
            {Tag(tag): entry for tag, entry in elements.items()}
        )
        self._repeaters = MappingProxyType(dict(repeaters))
        self._masks = MappingProxyType(_build_masks(self._repeaters))
        self._transfer_syntaxes = frozenset(
            uid for uid, entry in uids.items() if entry[1] == "Transfer Syntax"
        )

    def mask_match(self, tag: str) -> Optional[str]:
        """Return the repeaters tag mask for `tag`.

        Returns
        -------
        str or None
            If the tag is in the repeaters dictionary then returns the
            corresponding mask, otherwise returns ``None``.
        """
        value = int(tag.replace(",", ""), 16)
        for mask_x, (mask1, mask2) in self._masks.items():
            if (value ^ mask1) & mask2 == 0:
                return mask_x

        return None

    def get_entry(self, tag: str) -> Optional[DictEntry]:
        """Return the dictionary entry for `tag`, or ``None`` if unknown."""
        tag = Tag(tag)
        entry = self._elements.get(tag)
        if entry is not None:
            return entry

        mask_x = self.mask_match(tag)
        if mask_x is not None:
            return self._repeaters[mask_x]

        return None

    def lookup_tag(self, tag: str) -> Tuple[str, str]:
        """Return the (name, VR) for `tag`.

        Tags not in the dictionary give ``("Group Length", "UL")`` for group
        length tags, ``("Private", "UN")`` for private tags and
        ``("Unknown", "UN")`` otherwise.
        """
        entry = self.get_entry(tag)
        if entry is not None:
            return entry[2], entry[0]

        if is_group_length(tag):
            return GROUP_LENGTH_ENTRY

        if is_private(tag):
            return PRIVATE_ENTRY

        return UNKNOWN_ENTRY

    def lookup_transfer_syntax(self, uid: str) -> Tuple[bool, bool, bool]:
        """Return (is valid, is explicit VR, is little endian) for `uid`.

        An unknown transfer syntax gives ``(False, True, True)``, explicit VR
        little endian being the most likely encoding of anything else.
        """
        uid = UID(uid)
        if uid not in self._transfer_syntaxes:
            return False, True, True

        return (
            True, uid != ImplicitVRLittleEndian, uid != ExplicitVRBigEndian
        )


default_dictionary = DataDictionary()
"""The :class:`DataDictionary` built from the bundled tables."""
