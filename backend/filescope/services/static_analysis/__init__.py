"""
FileScope Static Analysis Module

Static feature extraction for uploaded files without execution.

Features:
- SHA-256 hashing
- Shannon entropy for encryption/packing detection
- Printable string extraction
- Suspicious keyword counting and URL/IPv4 harvesting
- Script text capture
- ZIP entry listing

Usage:
    from filescope.models import SourceMetadata
    from filescope.services.static_analysis import StaticAnalyzer

    analyzer = StaticAnalyzer()
    report = analyzer.analyze(
        content=file_bytes,
        source=SourceMetadata(name="dropper.ps1", mime_type="text/plain"),
        progress=print,
    )

    print(f"Entropy: {report.entropy:.2f}")
    print(f"Keywords: {[hit.keyword for hit in report.suspicious_keywords]}")
"""

from filescope.services.static_analysis.analyzer import StaticAnalyzer, ProgressCallback
from filescope.services.static_analysis.archive_analyzer import ArchiveLister
from filescope.services.static_analysis.entropy import byte_histogram, shannon_entropy
from filescope.services.static_analysis.hasher import sha256_hex
from filescope.services.static_analysis.pattern_matcher import PatternMatcher
from filescope.services.static_analysis.string_extractor import StringExtractor

__all__ = [
    'StaticAnalyzer',
    'ProgressCallback',
    'ArchiveLister',
    'PatternMatcher',
    'StringExtractor',
    'byte_histogram',
    'shannon_entropy',
    'sha256_hex',
]
