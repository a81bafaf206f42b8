# Copyright 2008-2021 dicomtree authors. See LICENSE file for details.
"""Functions for converting values of DICOM
   data elements to proper python types
"""

from struct import calcsize, unpack
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

from dicomtree.bytecodec import unpack_integers
from dicomtree.config import logger
from dicomtree.tag import TupleTag


default_encoding = "iso8859"

# VRs which are never decoded; their raw bytes are kept as they are
BINARY_VRS = frozenset(('OB', 'OW', 'OF', 'UN'))

# VRs that use 2 reserved bytes and a 4 byte length in explicit VR encoding
extra_length_VRs = frozenset(
    ('OB', 'OD', 'OF', 'OL', 'OV', 'OW', 'SQ', 'UC', 'UN', 'UR', 'UT')
)

# double '\' because it is used as escape chr in Python
_backslash_str = "\\"


def _join(values: List[Any]) -> Union[str, Any]:
    """Return a single value as is, several joined with a backslash."""
    if len(values) == 1:
        return values[0]

    return _backslash_str.join(str(v) for v in values)


def convert_tag(byte_string, is_little_endian, offset=0):
    """Return a decoded :class:`~dicomtree.tag.BaseTag` from the encoded
    `byte_string`.

    Parameters
    ----------
    byte_string : bytes
        The encoded tag.
    is_little_endian : bool
        ``True`` if the encoding is little endian, ``False`` otherwise.
    offset : int, optional
        The byte offset in `byte_string` to the start of the tag.

    Returns
    -------
    BaseTag
        The decoded tag.
    """
    if is_little_endian:
        struct_format = "<HH"
    else:
        struct_format = ">HH"
    return TupleTag(unpack(struct_format, byte_string[offset:offset + 4]))


def convert_ATvalue(byte_string, is_little_endian, struct_format=None):
    """Return a decoded 'AT' value.

    Parameters
    ----------
    byte_string : bytes
        The encoded 'AT' element value.
    is_little_endian : bool
        ``True`` if the value is encoded as little endian, ``False`` otherwise.
    struct_format : str, optional
        Not used.

    Returns
    -------
    BaseTag or str
        The decoded tag, or several tags joined with a backslash.
    """
    length = len(byte_string)
    if length % 4 != 0:
        logger.warning("Expected length to be multiple of 4 for VR 'AT', "
                       "got length %d", length)
    return _join([
        convert_tag(byte_string, is_little_endian, offset=x)
        for x in range(0, length - length % 4, 4)
    ])


def convert_numbers(byte_string, is_little_endian, struct_format):
    """Return a decoded numerical VR value.

    Given an encoded DICOM Element value, use `struct_format` and the
    endianness of the data to decode it. Integers are decoded using
    :func:`~dicomtree.bytecodec.unpack_integers`.

    Parameters
    ----------
    byte_string : bytes
        The encoded numerical VR element value.
    is_little_endian : bool
        ``True`` if the value is encoded as little endian, ``False`` otherwise.
    struct_format : str
        The format of the numerical data encoded in `byte_string`. Should be a
        valid format for :func:`struct.unpack()` without the endianness.

    Returns
    -------
    int or float
        If `byte_string` encodes a single value.
    str
        If `byte_string` encodes multiple values, joined with a backslash.
    """
    endian_chr = '><'[is_little_endian]

    # "=" means use 'standard' size, needed on 64-bit systems.
    bytes_per_value = calcsize("=" + struct_format)
    length = len(byte_string)

    if length % bytes_per_value != 0:
        logger.warning("Expected length to be even multiple of number size")
        byte_string = byte_string[:length - length % bytes_per_value]

    if struct_format in ('f', 'd'):
        count = len(byte_string) // bytes_per_value
        values = list(unpack(f"{endian_chr}{count}{struct_format}",
                             byte_string))
    else:
        values = unpack_integers(byte_string, endian_chr + struct_format)

    if not values:
        return None

    return _join(values)


def convert_string(byte_string, is_little_endian, struct_format=None):
    """Return a decoded string VR value.

    Trailing space and null padding is removed. Multiple values keep their
    native backslash separators.

    Parameters
    ----------
    byte_string : bytes
        The encoded text VR element value.
    is_little_endian : bool
        Not used.
    struct_format : str, optional
        Not used.

    Returns
    -------
    str
        The decoded value(s).
    """
    value = byte_string.decode(default_encoding)
    return value.rstrip(' \0')


def convert_AE_string(byte_string, is_little_endian, struct_format=None):
    """Return a decoded 'AE' value.

    Elements with VR of 'AE' have non-significant leading and trailing spaces.
    """
    return convert_string(byte_string, is_little_endian).strip()


def convert_UI(byte_string, is_little_endian, struct_format=None):
    """Return a decoded 'UI' value.

    Elements with VR of 'UI' may have a non-significant trailing null ``0x00``.
    """
    value = byte_string.decode(default_encoding)
    return value.rstrip('\0').strip()


ConverterType = Union[Callable[..., Any], Tuple[Callable[..., Any], str]]


def convert_value(VR: str, byte_string: bytes,
                  is_little_endian: bool) -> Optional[Any]:
    """Return encoded element value using the appropriate decoder.

    Parameters
    ----------
    VR : str
        The element's value representation.
    byte_string : bytes
        The encoded element value.
    is_little_endian : bool
        ``True`` if the value is encoded as little endian, ``False`` otherwise.

    Returns
    -------
    value or None
        The element value decoded using the appropriate decoder, or ``None``
        for empty values, binary VRs and unknown VRs.
    """
    if not byte_string or VR in BINARY_VRS:
        return None

    if VR not in converters:
        logger.debug("Unknown Value Representation '%s', value not decoded",
                     VR)
        return None

    # Dispatch two cases: a plain converter,
    # or a number one which needs a format string
    converter = converters[VR]
    if isinstance(converter, tuple):
        converter, num_format = converter
    else:
        num_format = None

    return converter(byte_string, is_little_endian, num_format)


# converters map a VR to the function
# to read the value(s). for convert_numbers,
# the converter maps to a tuple
# (function, struct_format)
# (struct_format in python struct module style)
converters: Dict[str, ConverterType] = {
    'AE': convert_AE_string,
    'AS': convert_string,
    'AT': convert_ATvalue,
    'CS': convert_string,
    'DA': convert_string,
    'DS': convert_string,
    'DT': convert_string,
    'FD': (convert_numbers, 'd'),
    'FL': (convert_numbers, 'f'),
    'IS': convert_string,
    'LO': convert_string,
    'LT': convert_string,
    'OD': (convert_numbers, 'd'),
    'OL': (convert_numbers, 'L'),
    'OV': (convert_numbers, 'Q'),
    'PN': convert_string,
    'SH': convert_string,
    'SL': (convert_numbers, 'l'),
    'SS': (convert_numbers, 'h'),
    'ST': convert_string,
    'SV': (convert_numbers, 'q'),
    'TM': convert_string,
    'UC': convert_string,
    'UI': convert_UI,
    'UL': (convert_numbers, 'L'),
    'UR': convert_string,
    'US': (convert_numbers, 'H'),
    'UT': convert_string,
    'UV': (convert_numbers, 'Q'),
}
