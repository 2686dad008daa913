"""
FileScope Archive Lister

List the entry names of ZIP containers without extracting them.
Listing is best-effort: a corrupt or non-ZIP payload produces a single
sentinel entry instead of an error.
"""

import io
import logging
import zipfile
from typing import Iterable, List

from filescope.models.static_analysis import FileInfo
from filescope.utils.constants import (
    ARCHIVE_ERROR_SENTINEL,
    ZIP_CONTENT_TYPES,
    ZIP_EXTENSION,
)

logger = logging.getLogger(__name__)


class ArchiveLister:
    """
    List the contents of ZIP archives.

    An input counts as an archive when its declared MIME type is a ZIP
    content type or its name ends with ``.zip``. The bytes themselves are
    not sniffed.
    """

    def __init__(self, content_types: Iterable[str] = ZIP_CONTENT_TYPES):
        self.content_types = frozenset(t.lower() for t in content_types)

    def is_archive(self, file_info: FileInfo) -> bool:
        """Check whether the declared metadata marks the file as a ZIP."""
        if file_info.type.lower() in self.content_types:
            return True
        return file_info.name.lower().endswith(ZIP_EXTENSION)

    def list_entries(self, content: bytes) -> List[str]:
        """
        List entry names in container order.

        Args:
            content: Archive content as bytes

        Returns:
            Entry names (directories included), or the error sentinel
            when the container cannot be read
        """
        try:
            with zipfile.ZipFile(io.BytesIO(content), 'r') as zf:
                return zf.namelist()
        except Exception as e:
            logger.warning(f"ZIP listing failed: {e}")
            return [ARCHIVE_ERROR_SENTINEL]
