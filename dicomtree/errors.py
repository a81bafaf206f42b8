# Copyright 2008-2021 dicomtree authors. See LICENSE file for details.
"""Module for dicomtree exception and warning classes.

The reader never raises these to its caller; it records them as
:class:`~dicomtree.filereader.Diagnostic` entries on the returned
:class:`~dicomtree.filereader.ParseResult`. The byte codec and tag
utilities raise :class:`PreconditionError` directly.
"""


class DicomTreeError(Exception):
    """Base class for conditions that stop decoding."""


class PreconditionError(DicomTreeError, ValueError):
    """Raised when an argument, path or buffer can't be used at all.

    Examples are a missing or unreadable file, a buffer too small to hold a
    DICOM header, or an unsupported bit depth passed to the byte codec.
    """


class DecodeFailure(DicomTreeError):
    """A data element's tag, VR, length or value could not be decoded."""


class LengthMismatchError(DicomTreeError):
    """The bytes available for a value don't match its declared length."""


class ChildParseFailure(DicomTreeError):
    """Decoding the contents of a sequence or item failed."""


class DicomTreeWarning(UserWarning):
    """Base class for conditions that are recorded but don't stop decoding."""


class HeaderWarning(DicomTreeWarning):
    """The 128 byte preamble and 'DICM' prefix are missing."""


class StandardViolationWarning(DicomTreeWarning):
    """The data deviates from the DICOM Standard, e.g. an odd value length."""


class UnknownTransferSyntaxWarning(DicomTreeWarning):
    """The transfer syntax UID isn't known; a best guess encoding is used."""
