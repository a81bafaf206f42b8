"""Pure python package for decoding DICOM data into an element tree."""
import re
from typing import cast, Match


__version__: str = '0.4.0'

result = cast(Match[str], re.match(r'(\d+\.\d+\.\d+).*', __version__))
__version_info__ = tuple(result.group(1).split('.'))
