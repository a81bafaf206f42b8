# Copyright 2008-2021 dicomtree authors. See LICENSE file for details.
"""Byte order aware conversion between integers and raw bytes.

Format codes follow :mod:`struct`: an optional byte order character
(``'<'``, ``'>'`` or ``'='``) followed by a single integer format character.
The number of values is derived from the input, so ``'<H'`` packs or unpacks
any number of little endian unsigned shorts.
"""

from struct import Struct, calcsize, error as StructError, pack, unpack
from typing import Iterable, List, Sequence

from dicomtree.errors import PreconditionError


_INTEGER_CODES = 'bBhHiIlLqQ'
_BYTE_ORDERS = '<>='

# Signed big endian codes are converted by way of their little endian and
# unsigned counterparts: (signed LE, unsigned LE, unsigned BE)
_DERIVED = {
    '>h': ('<h', '<H', '>H'),
    '>l': ('<l', '<L', '>L'),
}

_SHIFTS = {8: 128, 16: 32768}


def _split_format(fmt: str) -> Sequence[str]:
    """Return the (byte order, code) of `fmt`, defaulting to little endian."""
    if not isinstance(fmt, str) or not 1 <= len(fmt) <= 2:
        raise PreconditionError(f"Invalid format code '{fmt}'")

    if len(fmt) == 1:
        order, code = '<', fmt
    else:
        order, code = fmt[0], fmt[1]

    if order not in _BYTE_ORDERS or code not in _INTEGER_CODES:
        raise PreconditionError(f"Unsupported format code '{fmt}'")

    return order, code


def _bulk(fmt: str, count: int) -> str:
    order, code = _split_format(fmt)
    return f"{order}{count}{code}"


def pack_integers(values: Iterable[int], fmt: str) -> bytes:
    """Return `values` encoded as :class:`bytes` using `fmt`.

    Parameters
    ----------
    values : iterable of int
        The integers to encode.
    fmt : str
        The format code, e.g. ``'<H'`` or ``'>h'``.

    Returns
    -------
    bytes
        The encoded integers.

    Raises
    ------
    PreconditionError
        If `fmt` is not a supported integer format code or a value is
        outside the range of the format.
    """
    values = list(values)
    order, code = _split_format(fmt)
    derived = _DERIVED.get(order + code)
    try:
        if derived is None:
            return pack(_bulk(fmt, len(values)), *values)

        signed_le, unsigned_le, unsigned_be = derived
        wrongly_packed = pack(_bulk(signed_le, len(values)), *values)
        reunpacked = unpack(_bulk(unsigned_le, len(values)), wrongly_packed)
        return pack(_bulk(unsigned_be, len(values)), *reunpacked)
    except StructError as exc:
        raise PreconditionError(
            f"Unable to pack the values using format '{fmt}': {exc}"
        ) from exc


def unpack_integers(byte_string: bytes, fmt: str) -> List[int]:
    """Return the integers encoded in `byte_string` using `fmt`.

    Parameters
    ----------
    byte_string : bytes
        The encoded integers.
    fmt : str
        The format code, e.g. ``'<H'`` or ``'>l'``.

    Returns
    -------
    list of int
        The decoded integers.

    Raises
    ------
    PreconditionError
        If `fmt` is not a supported integer format code or the length of
        `byte_string` is not a multiple of the size of a single value.
    """
    order, code = _split_format(fmt)
    width = calcsize('=' + code)
    if len(byte_string) % width != 0:
        raise PreconditionError(
            f"Expected a multiple of {width} bytes for format '{fmt}', got "
            f"{len(byte_string)} bytes"
        )

    count = len(byte_string) // width
    derived = _DERIVED.get(order + code)
    try:
        if derived is None:
            return list(unpack(_bulk(fmt, count), byte_string))

        signed_le, unsigned_le, unsigned_be = derived
        wrongly_unpacked = unpack(_bulk(unsigned_be, count), byte_string)
        repacked = pack(_bulk(unsigned_le, count), *wrongly_unpacked)
        return list(unpack(_bulk(signed_le, count), repacked))
    except StructError as exc:
        raise PreconditionError(
            f"Unable to unpack the data using format '{fmt}': {exc}"
        ) from exc


def _check_depth(depth: int) -> None:
    if not isinstance(depth, int) or isinstance(depth, bool):
        raise PreconditionError(
            f"Expected an integer bit depth, got {type(depth).__name__}"
        )
    if depth not in _SHIFTS:
        raise PreconditionError(f"Unsupported bit depth {depth}")


def to_blob(values: Iterable[int], depth: int) -> bytes:
    """Return unsigned integer `values` packed as 8 or 16-bit binary data.

    16-bit values are packed in the native byte order.

    Raises
    ------
    PreconditionError
        If `depth` is not 8 or 16 or a value is outside the unsigned
        range of `depth` bits.
    """
    _check_depth(depth)
    values = list(values)
    code = 'B' if depth == 8 else 'H'
    try:
        return Struct(f"={len(values)}{code}").pack(*values)
    except StructError as exc:
        raise PreconditionError(
            f"Unable to pack the values as {depth}-bit data: {exc}"
        ) from exc


def to_signed(values: Iterable[int], depth: int) -> List[int]:
    """Return `values` shifted from the unsigned to the signed range of
    `depth` bits.

    Raises
    ------
    PreconditionError
        If `depth` is not 8 or 16.
    """
    _check_depth(depth)
    shift = _SHIFTS[depth]
    return [v - shift for v in values]


def to_unsigned(values: Iterable[int], depth: int) -> List[int]:
    """Return `values` shifted from the signed to the unsigned range of
    `depth` bits.

    Raises
    ------
    PreconditionError
        If `depth` is not 8 or 16.
    """
    _check_depth(depth)
    shift = _SHIFTS[depth]
    return [v + shift for v in values]
