"""
FileScope Utilities Package
===========================

Constants and exception classes used throughout the application.
"""

from filescope.utils.constants import (
    APP_NAME,
    APP_VERSION,
    APP_DESCRIPTION,
    MAX_FILE_SIZE_BYTES,
    MIN_STRING_LENGTH,
    SUSPICIOUS_KEYWORDS,
    SUSPICIOUS_KEYWORDS_VERSION,
    SCRIPT_EXTENSIONS,
    ZIP_CONTENT_TYPES,
    ARCHIVE_ERROR_SENTINEL,
    VERDICT_SAFE,
    VERDICT_SUSPICIOUS,
    VERDICT_MALICIOUS,
    VERDICT_UNKNOWN,
)

from filescope.utils.exceptions import (
    FileScopeBaseException,
    AnalysisError,
    UnreadableInputError,
    ValidationError,
    FileTooLargeError,
    ClassifierError,
    InvalidPredictionError,
    ConfigurationError,
)

__all__ = [
    # Constants
    'APP_NAME',
    'APP_VERSION',
    'APP_DESCRIPTION',
    'MAX_FILE_SIZE_BYTES',
    'MIN_STRING_LENGTH',
    'SUSPICIOUS_KEYWORDS',
    'SUSPICIOUS_KEYWORDS_VERSION',
    'SCRIPT_EXTENSIONS',
    'ZIP_CONTENT_TYPES',
    'ARCHIVE_ERROR_SENTINEL',
    'VERDICT_SAFE',
    'VERDICT_SUSPICIOUS',
    'VERDICT_MALICIOUS',
    'VERDICT_UNKNOWN',
    # Exceptions
    'FileScopeBaseException',
    'AnalysisError',
    'UnreadableInputError',
    'ValidationError',
    'FileTooLargeError',
    'ClassifierError',
    'InvalidPredictionError',
    'ConfigurationError',
]
