"""
FileScope Constants - Central location for ALL constant values.
"""

from typing import FrozenSet, Tuple

# APPLICATION INFO
APP_NAME: str = "FileScope"
APP_VERSION: str = "1.0.0"
APP_DESCRIPTION: str = "Static feature extraction for uploaded files"

# FILE LIMITS
MAX_FILE_SIZE_MB: int = 100
MAX_FILE_SIZE_BYTES: int = MAX_FILE_SIZE_MB * 1024 * 1024

# STRING EXTRACTION
MIN_STRING_LENGTH: int = 4
PRINTABLE_MIN: int = 0x20  # space
PRINTABLE_MAX: int = 0x7E  # tilde

# HASHING
HASH_CHUNK_SIZE: int = 1024 * 1024

# SCRIPT CAPTURE
MAX_TEXT_CONTENT_CHARS: int = 100_000

# CLASSIFIER HAND-OFF
HIGH_ENTROPY_THRESHOLD: float = 7.5
CLASSIFIER_TEXT_PREVIEW_CHARS: int = 1500
CLASSIFIER_TOP_KEYWORDS: int = 5

# Versioned suspicious keyword table (v1). Order matters: it is the
# tie-break order for keyword hits with equal counts.
SUSPICIOUS_KEYWORDS_VERSION: str = "1"
SUSPICIOUS_KEYWORDS: Tuple[str, ...] = (
    # scripting / execution
    'eval', 'exec', 'Shell', 'PowerShell', 'cmd.exe', 'Invoke-', 'rundll32',
    'DownloadString', 'FromBase64String',
    # process / injection APIs
    'GetProcAddress', 'LoadLibrary', 'CreateProcess', 'CreateRemoteThread',
    'VirtualAlloc', 'WriteProcessMemory',
    # registry / hooks
    'RegWrite', 'RegOpenKey', 'SetWindowsHook',
    # malware vocabulary
    'keylogger', 'trojan', 'malware', 'exploit', 'CVE-', 'rootkit',
    # network
    'http://', 'https://', 'socket', 'bind', 'listen', 'connect', '.onion',
    'C2 server',
)

SCRIPT_EXTENSIONS: FrozenSet[str] = frozenset({
    '.js', '.py', '.ps1', '.bat', '.sh', '.vbs',
})

ZIP_CONTENT_TYPES: FrozenSet[str] = frozenset({
    'application/zip',
    'application/x-zip-compressed',
})
ZIP_EXTENSION: str = '.zip'

ARCHIVE_ERROR_SENTINEL: str = "Error reading archive contents."

# PROGRESS LABELS (advisory, wording may change)
PROGRESS_HASHING: str = "Calculating hashes..."
PROGRESS_ENTROPY: str = "Calculating entropy..."
PROGRESS_STRINGS: str = "Extracting strings..."
PROGRESS_PATTERNS: str = "Matching keywords & IOCs..."
PROGRESS_SCRIPT: str = "Reading script content..."
PROGRESS_ARCHIVE: str = "Analyzing archive contents..."
PROGRESS_DONE: str = "Analysis complete."

# CLASSIFIER VERDICTS
VERDICT_SAFE: str = "Safe"
VERDICT_SUSPICIOUS: str = "Suspicious"
VERDICT_MALICIOUS: str = "Malicious"
VERDICT_UNKNOWN: str = "Unknown"
