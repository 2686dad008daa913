"""
FileScope Static Analysis Engine

Main orchestrator for file static analysis.
Runs every analysis stage over one byte buffer, reports progress between
stages and assembles the final report once all stages have finished.
"""

import codecs
import logging
import mimetypes
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import BinaryIO, Callable, Iterable, Optional, Sequence, Union

from filescope.models.static_analysis import (
    AnalysisStage,
    FileInfo,
    HashSet,
    SourceMetadata,
    StaticAnalysisReport,
)
from filescope.services.static_analysis.archive_analyzer import ArchiveLister
from filescope.services.static_analysis.entropy import shannon_entropy
from filescope.services.static_analysis.hasher import sha256_hex
from filescope.services.static_analysis.pattern_matcher import PatternMatcher
from filescope.services.static_analysis.string_extractor import StringExtractor
from filescope.utils.constants import (
    MAX_TEXT_CONTENT_CHARS,
    MIN_STRING_LENGTH,
    PROGRESS_ARCHIVE,
    PROGRESS_DONE,
    PROGRESS_ENTROPY,
    PROGRESS_HASHING,
    PROGRESS_PATTERNS,
    PROGRESS_SCRIPT,
    PROGRESS_STRINGS,
    SCRIPT_EXTENSIONS,
    SUSPICIOUS_KEYWORDS,
    ZIP_CONTENT_TYPES,
)
from filescope.utils.exceptions import UnreadableInputError

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str], None]


class StaticAnalyzer:
    """
    Main static analysis engine.

    Performs file analysis without execution:
    - SHA-256 hashing
    - Byte entropy
    - Printable string extraction
    - Suspicious keyword and network indicator matching
    - Script text capture (by extension)
    - ZIP entry listing (by MIME type or extension)

    Keyword and extension tables are frozen at construction, so one analyzer
    can serve any number of independent analyses.
    """

    STAGE_LABELS = {
        AnalysisStage.HASHING: PROGRESS_HASHING,
        AnalysisStage.ENTROPY: PROGRESS_ENTROPY,
        AnalysisStage.STRING_EXTRACTION: PROGRESS_STRINGS,
        AnalysisStage.PATTERN_MATCHING: PROGRESS_PATTERNS,
        AnalysisStage.SCRIPT_CAPTURE: PROGRESS_SCRIPT,
        AnalysisStage.ARCHIVE_LISTING: PROGRESS_ARCHIVE,
        AnalysisStage.ASSEMBLED: PROGRESS_DONE,
    }

    def __init__(
        self,
        keywords: Sequence[str] = SUSPICIOUS_KEYWORDS,
        script_extensions: Iterable[str] = SCRIPT_EXTENSIONS,
        min_string_length: int = MIN_STRING_LENGTH,
        max_text_content_chars: int = MAX_TEXT_CONTENT_CHARS,
        zip_content_types: Iterable[str] = ZIP_CONTENT_TYPES,
    ):
        """Initialize static analyzer with all sub-analyzers."""
        if max_text_content_chars < 0:
            raise ValueError(
                f"max_text_content_chars must not be negative, got {max_text_content_chars}"
            )
        self.script_extensions = frozenset(
            self._normalize_extension(ext) for ext in script_extensions if ext
        )
        self.max_text_content_chars = max_text_content_chars
        self.string_extractor = StringExtractor(min_length=min_string_length)
        self.pattern_matcher = PatternMatcher(keywords)
        self.archive_lister = ArchiveLister(zip_content_types)

    @classmethod
    def from_settings(cls, settings) -> "StaticAnalyzer":
        """Build an analyzer from application settings."""
        return cls(
            keywords=settings.suspicious_keywords,
            script_extensions=settings.script_extensions,
            min_string_length=settings.min_string_length,
            max_text_content_chars=settings.max_text_content_chars,
        )

    def analyze(
        self,
        content: Union[bytes, bytearray, memoryview],
        source: SourceMetadata,
        progress: Optional[ProgressCallback] = None,
    ) -> StaticAnalysisReport:
        """
        Perform static analysis on file content.

        Args:
            content: Raw file content
            source: Name, declared size, MIME type and timestamp of the file
            progress: Optional sink receiving one label per stage, in order

        Returns:
            StaticAnalysisReport with all analysis findings

        Raises:
            UnreadableInputError: If content is not a byte buffer
        """
        if not isinstance(content, (bytes, bytearray, memoryview)):
            raise UnreadableInputError(
                f"Cannot analyze {source.name}: expected bytes, got {type(content).__name__}"
            )
        content = bytes(content)

        start_time = time.time()
        file_info = self._build_file_info(content, source)

        self._enter(AnalysisStage.HASHING, progress)
        sha256 = sha256_hex(content)

        self._enter(AnalysisStage.ENTROPY, progress)
        entropy = shannon_entropy(content)

        self._enter(AnalysisStage.STRING_EXTRACTION, progress)
        strings = self.string_extractor.extract(content)

        self._enter(AnalysisStage.PATTERN_MATCHING, progress)
        keyword_hits = self.pattern_matcher.find_keywords(strings)
        indicators = self.pattern_matcher.find_indicators(strings)

        text_content = None
        if self.is_script(file_info.name):
            self._enter(AnalysisStage.SCRIPT_CAPTURE, progress)
            text_content = self._decode_text(content)

        archive_contents = None
        if self.archive_lister.is_archive(file_info):
            self._enter(AnalysisStage.ARCHIVE_LISTING, progress)
            archive_contents = self.archive_lister.list_entries(content)

        report = StaticAnalysisReport(
            file_info=file_info,
            hashes=HashSet(sha256=sha256),
            entropy=entropy,
            strings=strings,
            suspicious_keywords=keyword_hits,
            extracted_urls=indicators,
            text_content=text_content,
            archive_contents=archive_contents,
        )

        self._enter(AnalysisStage.ASSEMBLED, progress)
        logger.info(
            f"Analyzed {file_info.name} ({file_info.size} bytes, sha256={sha256}) "
            f"in {int((time.time() - start_time) * 1000)}ms: "
            f"{len(strings)} strings, {len(keyword_hits)} keywords, {len(indicators)} indicators"
        )
        return report

    def analyze_stream(
        self,
        stream: BinaryIO,
        source: SourceMetadata,
        progress: Optional[ProgressCallback] = None,
    ) -> StaticAnalysisReport:
        """Read a binary stream to the end and analyze it."""
        try:
            content = stream.read()
        except OSError as e:
            logger.error(f"Failed to read {source.name}: {e}")
            raise UnreadableInputError(f"Failed to read {source.name}: {e}") from e
        return self.analyze(content, source, progress)

    def analyze_path(
        self,
        path: Union[str, Path],
        progress: Optional[ProgressCallback] = None,
        mime_type: Optional[str] = None,
    ) -> StaticAnalysisReport:
        """
        Analyze a file on disk.

        The MIME type is guessed from the file name unless given.
        """
        path = Path(path)
        try:
            stat = path.stat()
            content = path.read_bytes()
        except OSError as e:
            logger.error(f"Failed to read {path}: {e}")
            raise UnreadableInputError(f"Failed to read {path}: {e}") from e

        if mime_type is None:
            mime_type = mimetypes.guess_type(path.name)[0] or ""

        source = SourceMetadata(
            name=path.name,
            size=stat.st_size,
            mime_type=mime_type,
            last_modified=datetime.fromtimestamp(stat.st_mtime, tz=timezone.utc),
        )
        return self.analyze(content, source, progress)

    def is_script(self, filename: str) -> bool:
        """Check whether the file name carries a configured script extension."""
        return self._get_extension(filename).lower() in self.script_extensions

    def _enter(self, stage: AnalysisStage, progress: Optional[ProgressCallback]):
        logger.debug(f"Entering stage {stage.value}")
        if progress is not None:
            progress(self.STAGE_LABELS[stage])

    def _build_file_info(self, content: bytes, source: SourceMetadata) -> FileInfo:
        last_modified = source.last_modified or datetime.now(timezone.utc)
        return FileInfo(
            name=source.name,
            size=source.size if source.size is not None else len(content),
            type=source.mime_type or "",
            last_modified=last_modified.isoformat(),
        )

    def _decode_text(self, content: bytes) -> str:
        """Decode up to max_text_content_chars characters as UTF-8."""
        limit = self.max_text_content_chars
        # a UTF-8 character is at most 4 bytes
        head = content[:limit * 4]
        if len(head) == len(content):
            return head.decode('utf-8', errors='replace')[:limit]
        # don't turn a sequence split at the cut into a replacement char
        decoder = codecs.getincrementaldecoder('utf-8')(errors='replace')
        return decoder.decode(head, final=False)[:limit]

    def _get_extension(self, filename: str) -> str:
        """Extract file extension from filename."""
        if '.' not in filename:
            return ''
        return '.' + filename.rsplit('.', 1)[-1]

    @staticmethod
    def _normalize_extension(ext: str) -> str:
        ext = ext.lower()
        return ext if ext.startswith('.') else '.' + ext
