# Copyright 2008-2021 dicomtree authors. See LICENSE file for details.
"""Read a DICOM file or buffer into a tree of data elements.

Reading never raises: every problem found is recorded as a
:class:`Diagnostic` on the returned :class:`ParseResult`, and the elements
read before a fatal problem stay attached to the tree.
"""

import os
import zlib
from typing import List, NamedTuple, Optional, Tuple, Type, Union

from dicomtree import config
from dicomtree.config import logger
from dicomtree.datadict import DataDictionary, default_dictionary
from dicomtree.dataelem import DataElement, UNDEFINED_LENGTH
from dicomtree.dataset import Dataset
from dicomtree.errors import (
    DicomTreeError, PreconditionError, DecodeFailure, LengthMismatchError,
    ChildParseFailure, HeaderWarning, StandardViolationWarning,
    UnknownTransferSyntaxWarning
)
from dicomtree.filebase import DicomStream
from dicomtree.fileutil import check_file, path_from_pathlike, PathType
from dicomtree.sequence import Sequence, Item
from dicomtree.tag import (
    BaseTag, tag_in_exception, META_GROUP, ItemTag, ITEM_TAGS,
    DELIMITER_TAGS, PixelDataTag, TransferSyntaxUIDTag
)
from dicomtree.uid import (
    UID, ImplicitVRLittleEndian, DeflatedExplicitVRLittleEndian
)
from dicomtree.util.hexutil import bytes2hex
from dicomtree.values import extra_length_VRs


PREAMBLE_LENGTH = 128
HEADER_LENGTH = PREAMBLE_LENGTH + 4
ENCAPSULATED_PIXEL_NAME = "Encapsulated Pixel Data"
PIXEL_ITEM_NAME = "Pixel Data Item"

Category = Union[Type[DicomTreeError], Type[Warning]]


class Diagnostic(NamedTuple):
    """A problem found while reading.

    Attributes
    ----------
    category : type
        One of the :mod:`dicomtree.errors` classes. Subclasses of
        :class:`~dicomtree.errors.DicomTreeError` are fatal, subclasses of
        :class:`~dicomtree.errors.DicomTreeWarning` are not.
    message : str
        A description of the problem.
    """
    category: Category
    message: str

    def __str__(self) -> str:
        return self.message

    @property
    def is_fatal(self) -> bool:
        return issubclass(self.category, DicomTreeError)


class ParseResult(NamedTuple):
    """The outcome of reading a file or buffer.

    Attributes
    ----------
    success : bool
        ``False`` if a fatal problem stopped reading (here or in any nested
        sequence or item).
    messages : list of Diagnostic
        Every problem found, in the order found.
    dataset : dataset.Dataset
        The root of the tree the elements were added to.
    signature : bool
        ``True`` if the 128 byte preamble and 'DICM' prefix were found.
    explicit : bool
        ``True`` if the data set was read as explicit VR.
    is_little_endian : bool
        ``True`` if the data set was read as little endian.
    transfer_syntax : str or None
        The transfer syntax UID used for the data set, ``None`` if the
        data ended before one was needed.
    """
    success: bool
    messages: List[Diagnostic]
    dataset: Dataset
    signature: bool = False
    explicit: bool = True
    is_little_endian: bool = True
    transfer_syntax: Optional[str] = None

    @property
    def errors(self) -> List[Diagnostic]:
        """Return the fatal diagnostics."""
        return [msg for msg in self.messages if msg.is_fatal]

    @property
    def warnings(self) -> List[Diagnostic]:
        """Return the non-fatal diagnostics."""
        return [msg for msg in self.messages if not msg.is_fatal]


class DatasetReader:
    """Read the data elements in one byte range into a container.

    Parameters
    ----------
    dataset : dataset.Dataset
        The container the elements are added to, either the root of the
        tree or the :class:`~dicomtree.sequence.Sequence` or
        :class:`~dicomtree.sequence.Item` whose value is being read.
    buffer : bytes
        The data to read.
    syntax : str, optional
        A transfer syntax UID that overrides the one in the File Meta
        Information.
    raw : bool, optional
        If ``True`` then `buffer` has no preamble and 'DICM' prefix (as for
        data received over a network), otherwise (default) check for them.
    dictionary : datadict.DataDictionary, optional
        The dictionary used to look up element names and VRs and the
        encoding of transfer syntaxes, default
        :data:`~dicomtree.datadict.default_dictionary`.
    depth : int, optional
        The nesting depth of `dataset` in the tree.
    encoding : 2-tuple of bool, optional
        The (is explicit VR, is little endian) encoding of an enclosing
        data set. If used then there is no transfer syntax switch and the
        meta group rules don't apply.
    """

    def __init__(
        self,
        dataset: Dataset,
        buffer: bytes,
        syntax: Optional[str] = None,
        raw: bool = False,
        dictionary: Optional[DataDictionary] = None,
        depth: int = 0,
        encoding: Optional[Tuple[bool, bool]] = None
    ) -> None:
        self.dataset = dataset
        self.buffer = buffer
        self.syntax = syntax
        self.raw = raw
        self.dictionary = dictionary or default_dictionary
        self.depth = depth

        self.messages: List[Diagnostic] = []
        self.success = True
        self.signature = False
        self.explicit = True
        is_little_endian = True
        self._switched = False
        if encoding is not None:
            self.explicit, is_little_endian = encoding
            self._switched = True

        self._stream = DicomStream(buffer, is_little_endian)
        self._current_parent: Dataset = dataset
        self._current_element: Optional[DataElement] = None
        self._open_scopes = 0
        self._pixel_sequence: Optional[Sequence] = None
        self._tag: Optional[BaseTag] = None

    @property
    def is_little_endian(self) -> bool:
        return self._stream.is_little_endian

    @property
    def in_encapsulation(self) -> bool:
        """Return ``True`` while reading encapsulated pixel data items."""
        return self._pixel_sequence is not None

    def read(self) -> ParseResult:
        """Read the buffer and return the outcome."""
        if len(self.buffer) > config.max_buffer_size:
            self._record(
                PreconditionError,
                f"The data ({len(self.buffer)} bytes) exceeds the maximum "
                f"buffer size of {config.max_buffer_size} bytes"
            )
            return self._result()

        if not self.raw and not self._read_preamble():
            return self._result()

        while True:
            self._tag = None
            try:
                if not self._read_data_element():
                    break
            except Exception as exc:
                location = f" {self._tag}" if self._tag else ""
                self._record(
                    DecodeFailure,
                    f"Failed to read the data element{location}: {exc}"
                )
                break

        if self.success and self._open_scopes:
            self._record(
                StandardViolationWarning,
                f"The data ended with {self._open_scopes} undefined length "
                f"sequence(s) or item(s) still open"
            )

        return self._result()

    def _result(self) -> ParseResult:
        return ParseResult(
            self.success,
            self.messages,
            self.dataset,
            signature=self.signature,
            explicit=self.explicit,
            is_little_endian=self.is_little_endian,
            transfer_syntax=self.syntax
        )

    def _record(self, category: Category, message: str) -> None:
        self.messages.append(Diagnostic(category, message))
        if issubclass(category, DicomTreeError):
            self.success = False
            logger.error(message)
        else:
            logger.warning(message)

    def _read_preamble(self) -> bool:
        """Check for the preamble and 'DICM' prefix.

        Returns ``False`` if the buffer can't hold them, otherwise the stream
        is left after the prefix, or at the start of the buffer if the prefix
        is missing.
        """
        if len(self._stream) < HEADER_LENGTH:
            self._record(
                PreconditionError,
                f"The data ({len(self._stream)} bytes) is too small to "
                f"contain a DICOM header"
            )
            return False

        logger.debug("Reading File Meta Information preamble...")
        preamble = self._stream.extract(PREAMBLE_LENGTH)
        if config.debugging:
            sample = bytes2hex(preamble[:8]) + "..." + bytes2hex(preamble[-8:])
            logger.debug("{0:08x}: {1}".format(0, sample))

        logger.debug("Reading File Meta Information prefix...")
        magic = self._stream.extract(4)
        if magic != b"DICM":
            self._record(
                HeaderWarning,
                "File is not conformant with the DICOM File Format: 'DICM' "
                "prefix is missing from the File Meta Information header "
                "or the header itself is missing. Assuming no header and "
                "continuing."
            )
            self._stream.skip(-HEADER_LENGTH)
            self.explicit = False
            return True

        logger.debug("{0:08x}: 'DICM' prefix found".format(PREAMBLE_LENGTH))
        self.signature = True
        self.explicit = True
        return True

    def _switch_syntax(self) -> bool:
        """Change to the data set's transfer syntax.

        Returns ``True`` if the stream must be rewound to re-read the last
        tag.
        """
        self._switched = True
        if self.syntax is None:
            elem = self.dataset.get(TransferSyntaxUIDTag)
            if elem is not None and elem.value:
                self.syntax = elem.value
            else:
                self.syntax = ImplicitVRLittleEndian

        valid, explicit, little_endian = (
            self.dictionary.lookup_transfer_syntax(self.syntax)
        )
        if not valid:
            self._record(
                UnknownTransferSyntaxWarning,
                f"Unknown transfer syntax '{self.syntax}', reading the data "
                f"set as {'explicit' if explicit else 'implicit'} VR "
                f"{'little' if little_endian else 'big'} endian"
            )

        logger.debug(
            "Switching to transfer syntax '%s' at position 0x%x",
            self.syntax, self._stream.tell() - 4
        )
        self.explicit = explicit
        if UID(self.syntax) == DeflatedExplicitVRLittleEndian:
            self._stream.skip(-4)
            zipped = self._stream.extract(self._stream.remaining)
            # raw deflate stream, no zlib header
            unzipped = zlib.decompress(zipped, -zlib.MAX_WBITS)
            self._stream = DicomStream(unzipped, little_endian)
            return True

        if little_endian != self._stream.is_little_endian:
            self._stream.is_little_endian = little_endian
            self._stream.skip(-4)
            return True

        return False

    def _read_tag(self) -> Optional[BaseTag]:
        tag = self._stream.decode_tag()
        if tag is None:
            return None

        if not self._switched and tag.group != META_GROUP:
            if self._switch_syntax():
                tag = self._stream.decode_tag()

        return tag

    def _read_VR_length(self, tag: BaseTag, VR: str) -> Tuple[str, int]:
        if not self.explicit:
            return VR, self._stream.read_UL()

        if tag in ITEM_TAGS:
            return VR, self._stream.read_UL()

        VR = self._stream.read_string(2)
        if VR in extra_length_VRs:
            self._stream.skip(2)  # reserved
            return VR, self._stream.read_UL()

        return VR, self._stream.read_US()

    def _read_data_element(self) -> bool:
        """Read the next data element and add it to the tree.

        Returns ``False`` when reading should stop, either at the end of the
        data or after a fatal problem.
        """
        tag = self._read_tag()
        if tag is None:
            return False

        self._tag = tag
        start = self._stream.tell() - 4
        name, VR = self.dictionary.lookup_tag(tag)
        VR, length = self._read_VR_length(tag, VR)

        if config.debugging:
            header = self._stream.getvalue(start, self._stream.tell())
            logger.debug(
                f"{start:08x}: {bytes2hex(header):<35} ({tag}) {VR} "
                f"{name} Length: {length:#x}"
            )

        undefined = length == UNDEFINED_LENGTH
        if not undefined and length % 2:
            self._record(
                StandardViolationWarning,
                f"The value length of {name} {tag} ({length}) is odd"
            )

        if self.in_encapsulation and tag == ItemTag:
            VR = 'OB'
            if self._current_element is not self._pixel_sequence:
                name = PIXEL_ITEM_NAME

        bin = b''
        value = None
        failure = None
        encapsulated = False
        is_sequence = VR == 'SQ'
        if not undefined and length > 0:
            bin = self._stream.extract(length)
            if not is_sequence and tag != ItemTag and len(bin) == length:
                self._stream.skip(-length)
                try:
                    with tag_in_exception(tag):
                        value = self._stream.decode(length, VR)
                except Exception as exc:
                    failure = str(exc)
        elif undefined and tag == PixelDataTag:
            name = ENCAPSULATED_PIXEL_NAME
            encapsulated = is_sequence = True

        if is_sequence:
            elem = Sequence(
                tag, length=length, bin=bin, name=name, VR=VR,
                parent=self._current_parent
            )
            if encapsulated:
                self._pixel_sequence = elem
            return self._read_container(elem, bin)

        if tag == ItemTag:
            item = Item(
                tag, bin=bin, length=length, name=name, VR=VR,
                parent=self._current_parent
            )
            if self.in_encapsulation:
                return self._read_fragment(item)

            return self._read_container(item, bin)

        if tag in DELIMITER_TAGS:
            self._close_scope(tag, name)
            return True

        elem = DataElement(
            tag, value, bin=bin, length=length, name=name, VR=VR,
            parent=self._current_parent
        )
        self._current_element = elem
        if config.debugging and value is not None:
            logger.debug(f"{'':8}  {name}: {value!r}")

        if failure is not None:
            self._record(DecodeFailure, failure)
            return False

        return self._check_length(elem)

    def _check_length(self, elem: DataElement) -> bool:
        if len(elem.bin) == elem.length:
            return True

        if elem.is_undefined_length:
            declared = "undefined"
        else:
            declared = f"{elem.length} bytes"
        self._record(
            LengthMismatchError,
            f"The value of {elem.name} {elem.tag} has {len(elem.bin)} bytes "
            f"but its declared length is {declared}"
        )
        return False

    def _check_depth(self, elem: DataElement, depth: int) -> bool:
        if depth <= config.max_nesting_depth:
            return True

        self._record(
            DecodeFailure,
            f"{elem.name} {elem.tag} is nested deeper than the maximum of "
            f"{config.max_nesting_depth} sequences and items"
        )
        return False

    def _read_container(self, elem: DataElement, bin: bytes) -> bool:
        """Read the contents of a sequence or item.

        An undefined length opens a scope that a delimiter closes, a defined
        length is read by a nested reader.
        """
        self._current_element = elem
        depth = self.depth + self._open_scopes + 1
        if elem.is_undefined_length:
            if not self._check_depth(elem, depth):
                return False

            self._current_parent = elem  # type: ignore[assignment]
            self._open_scopes += 1
            return True

        if not self._check_length(elem):
            return False

        if not bin:
            return True

        if not self._check_depth(elem, depth):
            return False

        logger.debug(
            "Reading the %d byte value of %s %s", len(bin), elem.name, elem.tag
        )
        reader = DatasetReader(
            elem,  # type: ignore[arg-type]
            bin,
            syntax=self.syntax,
            raw=True,
            dictionary=self.dictionary,
            depth=depth,
            encoding=(self.explicit, self.is_little_endian)
        )
        result = reader.read()
        self.messages.extend(result.messages)
        if not result.success:
            self._record(
                ChildParseFailure,
                f"Failed to read the contents of {elem.name} {elem.tag}"
            )
            return False

        return True

    def _read_fragment(self, item: Item) -> bool:
        self._current_element = item
        if item.is_undefined_length:
            self._record(
                DecodeFailure,
                f"{item.name} {item.tag} of the encapsulated pixel data has "
                f"an undefined length"
            )
            return False

        return self._check_length(item)

    def _close_scope(self, tag: BaseTag, name: str) -> None:
        parent = self._current_parent
        if self._open_scopes == 0:
            self._record(
                StandardViolationWarning,
                f"Found a {name} {tag} with no open sequence or item, ignored"
            )
            return

        if parent is self._pixel_sequence:
            self._pixel_sequence = None

        self._current_parent = parent.parent  # type: ignore[attr-defined]
        self._open_scopes -= 1


def read_bytes(
    buffer: bytes,
    dataset: Optional[Dataset] = None,
    syntax: Optional[str] = None,
    raw: bool = True,
    dictionary: Optional[DataDictionary] = None
) -> ParseResult:
    """Read DICOM data from `buffer`.

    Parameters
    ----------
    buffer : bytes
        The encoded data.
    dataset : dataset.Dataset, optional
        The root the elements are added to, default a new
        :class:`~dicomtree.dataset.Dataset`.
    syntax : str, optional
        A transfer syntax UID to use instead of the one in the data.
    raw : bool, optional
        If ``True`` (default) then `buffer` is a data set without the file
        preamble and 'DICM' prefix, as received over a network.
    dictionary : datadict.DataDictionary, optional
        The dictionary to use instead of the default one.

    Returns
    -------
    ParseResult
        The outcome, with the tree in its ``dataset``.
    """
    if dataset is None:
        dataset = Dataset()

    return DatasetReader(
        dataset, buffer, syntax=syntax, raw=raw, dictionary=dictionary
    ).read()


def dcmread(
    fp: PathType,
    dataset: Optional[Dataset] = None,
    syntax: Optional[str] = None,
    dictionary: Optional[DataDictionary] = None
) -> ParseResult:
    """Read a DICOM file.

    Parameters
    ----------
    fp : str or PathLike
        The path of the file to read.
    dataset : dataset.Dataset, optional
        The root the elements are added to, default a new
        :class:`~dicomtree.dataset.Dataset`.
    syntax : str, optional
        A transfer syntax UID to use instead of the one in the file.
    dictionary : datadict.DataDictionary, optional
        The dictionary to use instead of the default one.

    Returns
    -------
    ParseResult
        The outcome, with the tree in its ``dataset``. If the file can't be
        read the result is unsuccessful and the tree empty.

    Examples
    --------

    >>> result = dcmread("CT_small.dcm")
    >>> result.success
    True
    >>> result.dataset['0010,0010'].value
    'CompressedSamples^CT1'
    """
    if dataset is None:
        dataset = Dataset()

    fp = path_from_pathlike(fp)
    problem = check_file(fp)
    if problem is None and os.path.getsize(fp) > config.max_buffer_size:
        problem = (f"The file exceeds the maximum buffer size of "
                   f"{config.max_buffer_size} bytes ({fp!s})")

    if problem is None:
        logger.debug("Reading file '{0}'".format(fp))
        try:
            with open(fp, 'rb') as f:
                buffer = f.read()
        except OSError as exc:
            problem = f"Unable to read the file: {exc}"

    if problem is not None:
        logger.error(problem)
        return ParseResult(
            False, [Diagnostic(PreconditionError, problem)], dataset
        )

    return DatasetReader(
        dataset, buffer, syntax=syntax, dictionary=dictionary
    ).read()
