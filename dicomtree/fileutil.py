# Copyright 2008-2021 dicomtree authors. See LICENSE file for details.
"""Functions for checking that a path can be read as DICOM data."""
import os
from typing import Optional, Union

PathType = Union[str, bytes, "os.PathLike[str]"]

MIN_FILE_SIZE = 9
"""Files smaller than this cannot contain a DICOM data element."""


def path_from_pathlike(file_object):
    """Returns the path if `file_object` is a path-like object, otherwise the
    original `file_object`.

    Parameters
    ----------
    file_object: str or PathLike or file-like

    Returns
    -------
    str or file-like
        the string representation of the given path object, or the object
        itself in case of an object not representing a path.
    """
    try:
        return os.fspath(file_object)
    except TypeError:
        return file_object


def check_file(path: PathType) -> Optional[str]:
    """Return a description of why `path` can't be read, or ``None``.

    The checks are made in order: the path must exist, be readable, not be a
    directory and hold at least :data:`MIN_FILE_SIZE` bytes.
    """
    if not os.path.exists(path):
        return f"The file you have supplied does not exist ({path!s})"

    if not os.access(path, os.R_OK):
        return f"File exists but I don't have permission to read it ({path!s})"

    if os.path.isdir(path):
        return f"Expected a file, got a directory ({path!s})"

    if os.path.getsize(path) < MIN_FILE_SIZE:
        return (f"This file is too small to contain any DICOM information "
                f"({path!s})")

    return None
