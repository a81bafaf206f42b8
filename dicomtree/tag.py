# Copyright 2008-2021 dicomtree authors. See LICENSE file for details.
"""Define Tag class to hold a DICOM (group, element) tag and related functions.

Tags are stored as 9 character strings of the form ``'GGGG,EEEE'``, where
``G`` is a hex digit of the group number and ``E`` a hex digit of the element
number. The free functions in this module accept any :class:`str` of that
form, :class:`BaseTag` instances included.
"""
import re
from typing import Tuple, Any, Union, Optional, Iterator, List
from contextlib import contextmanager

from dicomtree.errors import PreconditionError


_RE_TAG = re.compile(r'\A[0-9a-fA-F]{4},[0-9a-fA-F]{4}\Z')
_RE_PRIVATE = re.compile(r'\A[0-9a-fA-F]{3}[13579bdfBDF],[0-9a-fA-F]{4}\Z')


@contextmanager
def tag_in_exception(tag: Any) -> Iterator[None]:
    """Use `tag` within a context.

    Used to include the tag details in the message when an exception is
    raised within the context.

    Parameters
    ----------
    tag : str
        The tag to use in the context.
    """
    try:
        yield
    except Exception as ex:
        msg = f"With tag {tag} got exception: {ex}"
        try:
            new_ex = type(ex)(msg)
        except TypeError:
            # e.g. UnicodeDecodeError needs more than a message
            new_ex = ValueError(msg)
        raise new_ex from ex


def Tag(
    arg: Union[int, str, Tuple[int, int]], arg2: Optional[int] = None
) -> "BaseTag":
    """Create a :class:`BaseTag`.

    General function for creating a :class:`BaseTag` in any of the standard
    forms:

    * ``Tag('0010,0010')``
    * ``Tag(0x00100010)``
    * ``Tag((0x10, 0x10))``
    * ``Tag(0x0010, 0x0010)``

    Parameters
    ----------
    arg : int or str or 2-tuple
        If :class:`str` then the tag as ``'GGGG,EEEE'``. If :class:`int`, then
        either the group or the combined group/element number of the DICOM
        tag. If :class:`tuple` then the (group, element) numbers.
    arg2 : int, optional
        The element number of the DICOM tag, required when `arg` only contains
        the group number of the tag.

    Returns
    -------
    BaseTag

    Raises
    ------
    ValueError
        If the arguments don't describe a valid tag.
    """
    if isinstance(arg, BaseTag):
        return arg

    if arg2 is not None:
        # act as if was passed a single tuple
        arg = (arg, arg2)  # type: ignore

    if isinstance(arg, str):
        if not is_valid_tag(arg):
            raise ValueError(f"'{arg}' is not a valid 'GGGG,EEEE' tag")
        return BaseTag(arg)

    if isinstance(arg, (tuple, list)):
        if len(arg) != 2:
            raise ValueError("Tag must be created using an int or 2-tuple")
        if not all(isinstance(x, int) for x in arg):
            raise ValueError("Both arguments for Tag must be int")
        if not (0 <= arg[0] <= 0xFFFF and 0 <= arg[1] <= 0xFFFF):
            raise OverflowError(
                "Groups and elements of tags must each be <=2 byte integers"
            )
        return TupleTag((arg[0], arg[1]))

    if isinstance(arg, int):
        if not 0 <= arg <= 0xFFFFFFFF:
            raise OverflowError(
                f"Tags are limited to 32-bit length; tag {arg!r}"
            )
        return TupleTag((arg >> 16, arg & 0xFFFF))

    raise TypeError(f"Can't create a Tag from {type(arg).__name__}")


class BaseTag(str):
    """Represents a DICOM element (group, element) tag as ``'GGGG,EEEE'``.

    Instances are always upper case, so they compare equal to any other
    upper case tag string.

    Attributes
    ----------
    element : str
        The element part of the tag.
    group : str
        The group part of the tag.
    is_private : bool
        ``True`` if the corresponding element is private.
    """
    def __new__(cls, val: str) -> "BaseTag":
        return super().__new__(cls, val.upper())

    def __eq__(self, other: Any) -> bool:
        """Return ``True`` if `self` equals `other`, ignoring case."""
        if isinstance(other, str):
            return str.__eq__(self, other.upper())

        return NotImplemented

    def __ne__(self, other: Any) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result

        return not result

    __hash__ = str.__hash__

    def __repr__(self) -> str:
        return f"({self})"

    @property
    def group(self) -> str:
        """Return the tag's group as a 4 character hex :class:`str`."""
        return group(self)

    @property
    def element(self) -> str:
        """Return the tag's element as a 4 character hex :class:`str`."""
        return element(self)

    elem = element  # alternate syntax

    @property
    def group_number(self) -> int:
        """Return the tag's group as :class:`int`."""
        return int(self.group, 16)

    @property
    def element_number(self) -> int:
        """Return the tag's element as :class:`int`."""
        return int(self.element, 16)

    @property
    def is_private(self) -> bool:
        """Return ``True`` if the tag is private (has an odd group number)."""
        return is_private(self)

    @property
    def is_group_length(self) -> bool:
        """Return ``True`` if the tag is a group length tag."""
        return is_group_length(self)

    @property
    def group_length(self) -> "BaseTag":
        """Return the (GGGG,0000) group length tag of this tag's group."""
        return BaseTag(group_length(self))


def TupleTag(group_elem: Tuple[int, int]) -> BaseTag:
    """Fast factory for :class:`BaseTag` object with known safe (group, elem)
    :class:`tuple`
    """
    return BaseTag("{0:04X},{1:04X}".format(*group_elem))


def group(tag: str) -> str:
    """Return the group part of `tag`: its first 4 characters."""
    return tag[0:4]


def element(tag: str) -> str:
    """Return the element part of `tag`: its last 4 characters."""
    return tag[5:9]


def group_length(tag: str) -> str:
    """Return the ``'GGGG,0000'`` group length tag for `tag`.

    Parameters
    ----------
    tag : str
        Either a 4 character group string or a 9 character tag string.
    """
    if len(tag) == 4:
        return tag.upper() + ',0000'

    return group(tag).upper() + ',0000'


def is_group_length(tag: str) -> bool:
    """Return ``True`` if `tag` is a group length tag (element '0000')."""
    return element(tag) == '0000'


def is_private(tag: str) -> bool:
    """Return ``True`` if `tag` is a private tag (has an odd group number)."""
    return _RE_PRIVATE.match(tag) is not None


def is_valid_tag(tag: Any) -> bool:
    """Return ``True`` if `tag` is a valid ``'GGGG,EEEE'`` tag string."""
    return isinstance(tag, str) and _RE_TAG.match(tag) is not None


def divide(value: str, parts: int) -> List[str]:
    """Divide `value` into `parts` sub-strings of exactly equal length.

    Used to separate the values of fixed length multi-valued fields.

    Parameters
    ----------
    value : str
        The string to divide.
    parts : int
        The number of sub-strings to create.

    Returns
    -------
    list of str
        The sub-strings, in order.

    Raises
    ------
    PreconditionError
        If `parts` isn't an :class:`int` in the range ``[1, len(value)]``, or
        if the length of `value` isn't a multiple of `parts`.
    """
    if not isinstance(parts, int) or isinstance(parts, bool):
        raise PreconditionError(
            f"Expected an integer, got {type(parts).__name__}"
        )
    if parts < 1 or parts > len(value):
        raise PreconditionError(
            f"Argument must be in the range <1 - {len(value)}>, got {parts}"
        )
    if len(value) % parts != 0:
        raise PreconditionError(
            f"Length of the string ({len(value)}) must be a multiple of "
            f"parts ({parts})"
        )

    sub_length = len(value) // parts
    return [value[i:i + sub_length] for i in range(0, len(value), sub_length)]


META_GROUP = '0002'

# Define some special tags:
# See DICOM Standard Part 5, Section 7.5

# start of Sequence Item
ItemTag = TupleTag((0xFFFE, 0xE000))

# end of Sequence Item
ItemDelimiterTag = TupleTag((0xFFFE, 0xE00D))

# end of Sequence of undefined length
SequenceDelimiterTag = TupleTag((0xFFFE, 0xE0DD))

ITEM_TAGS = frozenset((ItemTag, ItemDelimiterTag, SequenceDelimiterTag))
DELIMITER_TAGS = frozenset((ItemDelimiterTag, SequenceDelimiterTag))

PixelDataTag = TupleTag((0x7FE0, 0x0010))
TransferSyntaxUIDTag = TupleTag((0x0002, 0x0010))
