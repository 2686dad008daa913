"""
FileScope Test Configuration

Pytest fixtures and configuration.
"""

import io
import zipfile
from datetime import datetime, timezone

import pytest

from filescope.models.static_analysis import SourceMetadata
from filescope.services.static_analysis import StaticAnalyzer


@pytest.fixture
def analyzer():
    """Analyzer with the default keyword and extension tables."""
    return StaticAnalyzer()


@pytest.fixture
def make_source():
    """Factory for SourceMetadata with a fixed timestamp."""
    def _make(name: str = "sample.bin", mime_type: str = "", size=None):
        return SourceMetadata(
            name=name,
            size=size,
            mime_type=mime_type,
            last_modified=datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc),
        )
    return _make


@pytest.fixture
def zip_bytes():
    """A small valid ZIP archive with a nested directory entry."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, 'w', zipfile.ZIP_DEFLATED) as zf:
        zf.writestr("readme.txt", "hello")
        zf.writestr("bin/", "")
        zf.writestr("bin/payload.exe", b"MZ\x90\x00 eval( http://evil.test/x )")
    return buffer.getvalue()
