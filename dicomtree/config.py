# Copyright 2008-2021 dicomtree authors. See LICENSE file for details.
"""dicomtree configuration options."""

# doc strings following items are picked up by sphinx for documentation

import logging


max_nesting_depth = 64
"""Maximum depth of nested sequences and items the reader will follow.

A data set nested deeper than this is treated as corrupt and reading stops
with a failure diagnostic.

Default ``64``.
"""

max_buffer_size = 2 * 1024 * 1024 * 1024
"""Maximum size in bytes of a buffer (or file) the reader will decode.

Default ``2 GiB``.
"""

# Logging system and debug function to change logging level
logger = logging.getLogger('dicomtree')
logger.addHandler(logging.NullHandler())

debugging: bool


def debug(debug_on=True, default_handler=True):
    """Turn on/off debugging of DICOM decoding.

    When debugging is on, buffer offsets and details about the elements read
    at that location are logged to the 'dicomtree' logger using Python's
    :mod:`logging` module.

    Parameters
    ----------
    debug_on : bool, optional
        If ``True`` (default) then turn on debugging, ``False`` to turn off.
    default_handler : bool, optional
        If ``True`` (default) then use :class:`logging.StreamHandler` as the
        handler for log messages.
    """
    global logger, debugging

    if default_handler:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    if debug_on:
        logger.setLevel(logging.DEBUG)
        debugging = True
    else:
        logger.setLevel(logging.WARNING)
        debugging = False


# force level=WARNING, in case logging default is set differently
debug(False, False)
