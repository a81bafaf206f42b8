# Copyright 2008-2021 dicomtree authors. See LICENSE file for details.
"""Hold the DicomStream class, which decodes values from a byte buffer."""

from struct import unpack
from typing import Any, Optional

from dicomtree.tag import BaseTag, TupleTag
from dicomtree.values import convert_value, default_encoding


class DicomStream:
    """Sequential decoding of an immutable byte buffer.

    Keeps track of the read position and the byte order used for the tag,
    length and numeric values read from the buffer. The position may be
    moved backwards with :meth:`skip` to re-read data.

    Parameters
    ----------
    buffer : bytes
        The data to decode.
    is_little_endian : bool, optional
        The initial byte order, default ``True``.
    """

    def __init__(self, buffer: bytes, is_little_endian: bool = True) -> None:
        self._buffer = bytes(buffer)
        self._index = 0
        self.is_little_endian = is_little_endian

    def __len__(self) -> int:
        return len(self._buffer)

    @property
    def remaining(self) -> int:
        """Return the number of bytes left to read."""
        return len(self._buffer) - self._index

    def tell(self) -> int:
        """Return the current read position."""
        return self._index

    def skip(self, offset: int) -> None:
        """Move the read position by `offset` bytes (negative rewinds).

        The position is kept within the buffer.
        """
        self._index = min(max(self._index + offset, 0), len(self._buffer))

    # Set up property is_little_endian
    # Big/Little Endian changes the format used to read unsigned
    # short or long, e.g. length fields etc
    @property
    def is_little_endian(self) -> bool:
        return self._little_endian

    @is_little_endian.setter
    def is_little_endian(self, value: bool) -> None:
        self._little_endian = value
        self._endian_chr = "<" if value else ">"

    def set_endian(self, little_endian: bool) -> None:
        """Set the byte order used for subsequent decoding."""
        self.is_little_endian = little_endian

    def extract(self, length: int) -> bytes:
        """Return the next `length` raw bytes and advance past them.

        Fewer bytes are returned if the buffer ends first.
        """
        data = self._buffer[self._index:self._index + length]
        self._index += len(data)
        return data

    def getvalue(self, start: int = 0, stop: Optional[int] = None) -> bytes:
        """Return the bytes from `start` to `stop` without moving."""
        return self._buffer[start:stop]

    def read(self, length: int) -> Optional[bytes]:
        """Return exactly `length` bytes, or ``None`` (without advancing)
        if fewer remain.
        """
        if self.remaining < length:
            return None

        return self.extract(length)

    def decode_tag(self) -> Optional[BaseTag]:
        """Return the next tag, or ``None`` at the end of the buffer."""
        bytes_read = self.read(4)
        if bytes_read is None:
            return None

        return TupleTag(unpack(self._endian_chr + "HH", bytes_read))

    def read_US(self) -> int:
        """Return an unsigned short in the current byte order."""
        return unpack(self._endian_chr + "H", self._read_exact(2))[0]

    def read_UL(self) -> int:
        """Return an unsigned long in the current byte order."""
        return unpack(self._endian_chr + "L", self._read_exact(4))[0]

    def read_string(self, length: int) -> str:
        """Return the next `length` bytes decoded as text."""
        return self._read_exact(length).decode(default_encoding)

    def decode(self, length: int, VR: str) -> Any:
        """Return the next `length` bytes decoded according to `VR`.

        See :func:`~dicomtree.values.convert_value` for the conversions.
        """
        return convert_value(VR, self._read_exact(length),
                             self.is_little_endian)

    def _read_exact(self, length: int) -> bytes:
        bytes_read = self.read(length)
        if bytes_read is None:
            raise EOFError(
                f"Unexpected end of data. Read {self.remaining} bytes of "
                f"{length} expected starting at position 0x{self._index:x}"
            )

        return bytes_read
