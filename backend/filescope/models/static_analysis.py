"""
FileScope Static Analysis Models

Data models for the static analysis feature report.

Every report model is frozen: a report is assembled once, after all analysis
stages have finished, and is never modified afterwards. Field names are
snake_case in Python and camelCase in the serialized document handed to the
external classifier.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class AnalysisStage(str, Enum):
    """Ordered stages of one static analysis pass."""
    HASHING = "hashing"
    ENTROPY = "entropy"
    STRING_EXTRACTION = "string_extraction"
    PATTERN_MATCHING = "pattern_matching"
    SCRIPT_CAPTURE = "script_capture"
    ARCHIVE_LISTING = "archive_listing"
    ASSEMBLED = "assembled"


class _ReportModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )


class SourceMetadata(BaseModel):
    """Metadata supplied alongside the raw bytes of an upload."""
    name: str = Field(..., description="Original file name")
    size: Optional[int] = Field(None, ge=0, description="Declared size in bytes")
    mime_type: str = Field("", description="Declared MIME type, possibly empty")
    last_modified: Optional[datetime] = Field(None, description="Last-modified timestamp")


class FileInfo(_ReportModel):
    """Basic information about the analyzed file."""
    name: str = Field(..., description="Original file name")
    size: int = Field(..., ge=0, description="File size in bytes")
    type: str = Field("", description="Declared MIME type")
    last_modified: str = Field(..., description="ISO-8601 last-modified timestamp")


class HashSet(_ReportModel):
    """Cryptographic digests of the file contents."""
    sha256: str = Field(..., min_length=64, max_length=64, description="Lowercase hex SHA-256")


class KeywordHit(_ReportModel):
    """A configured suspicious keyword and how often it occurred."""
    keyword: str = Field(..., description="Keyword as configured")
    count: int = Field(..., gt=0, description="Number of case-insensitive occurrences")


class StaticAnalysisReport(_ReportModel):
    """Complete static analysis feature report for one file."""

    file_info: FileInfo
    hashes: HashSet
    entropy: float = Field(..., description="Shannon entropy of the byte distribution (0-8)")
    strings: Tuple[str, ...] = Field(default_factory=tuple, description="Printable strings in file order")
    suspicious_keywords: Tuple[KeywordHit, ...] = Field(default_factory=tuple)
    extracted_urls: Tuple[str, ...] = Field(default_factory=tuple, description="URLs and IPv4 tokens")
    text_content: Optional[str] = Field(None, description="Decoded script text prefix")
    archive_contents: Optional[Tuple[str, ...]] = Field(None, description="ZIP entry names")

    @property
    def is_archive(self) -> bool:
        return self.archive_contents is not None

    def to_document(self) -> Dict[str, Any]:
        """Serialize to the plain camelCase document consumed by the classifier."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


__all__ = [
    'AnalysisStage',
    'SourceMetadata',
    'FileInfo',
    'HashSet',
    'KeywordHit',
    'StaticAnalysisReport',
]
