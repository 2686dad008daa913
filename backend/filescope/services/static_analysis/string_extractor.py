"""
FileScope String Extractor

Extract printable ASCII strings from file content:
- Runs of bytes 0x20-0x7E (space through tilde)
- Only runs of at least MIN_STRING_LENGTH characters are kept
- Strings are produced lazily, in file order

Wide-character (UTF-16) strings are not detected.
"""

import re
from typing import Iterator, List

from filescope.utils.constants import MIN_STRING_LENGTH, PRINTABLE_MIN, PRINTABLE_MAX


class StringExtractor:
    """
    Extract printable strings from binary content.

    Each extracted string is a maximal run of printable bytes, so no
    extracted string ever spans a non-printable byte.
    """

    def __init__(self, min_length: int = MIN_STRING_LENGTH):
        if min_length < 1:
            raise ValueError(f"min_length must be positive, got {min_length}")
        self.min_length = min_length
        self._pattern = re.compile(
            rb'[%c-%c]{%d,}' % (PRINTABLE_MIN, PRINTABLE_MAX, min_length)
        )

    def iter_strings(self, content: bytes) -> Iterator[str]:
        """
        Yield printable strings one at a time in the order found.

        Args:
            content: File content as bytes

        Yields:
            Each printable run of at least ``min_length`` characters
        """
        for match in self._pattern.finditer(content):
            yield match.group().decode('ascii')

    def extract(self, content: bytes) -> List[str]:
        """Extract all printable strings into a list."""
        return list(self.iter_strings(content))
