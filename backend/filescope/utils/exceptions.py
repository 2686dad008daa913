"""
FileScope Custom Exceptions

Centralized exception classes for error handling.
"""


class FileScopeBaseException(Exception):
    """Base exception for all FileScope errors."""
    def __init__(self, message: str = "An error occurred"):
        self.message = message
        super().__init__(self.message)


# ============================================================================
# Analysis Exceptions
# ============================================================================

class AnalysisError(FileScopeBaseException):
    """Static analysis could not produce a report."""
    pass


class UnreadableInputError(AnalysisError):
    """The input could not be read into a byte buffer."""
    pass


# ============================================================================
# Validation Exceptions
# ============================================================================

class ValidationError(FileScopeBaseException):
    """Input validation failed."""
    pass


class FileTooLargeError(ValidationError):
    """File exceeds maximum size limit."""
    pass


# ============================================================================
# Classifier Exceptions
# ============================================================================

class ClassifierError(FileScopeBaseException):
    """Error handling the external classifier hand-off."""
    pass


class InvalidPredictionError(ClassifierError):
    """Classifier response is not a usable JSON verdict."""
    pass


# ============================================================================
# Configuration Exceptions
# ============================================================================

class ConfigurationError(FileScopeBaseException):
    """Application configuration error."""
    pass
