"""
FileScope API Dependencies

FastAPI dependency injection for settings and the analysis engine.
"""

import logging
from functools import lru_cache

from pydantic import ValidationError as PydanticValidationError

from filescope.config import Settings, get_settings
from filescope.services.static_analysis import StaticAnalyzer
from filescope.utils.constants import SUSPICIOUS_KEYWORDS_VERSION
from filescope.utils.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


@lru_cache()
def get_analyzer() -> StaticAnalyzer:
    """
    Get the shared static analyzer.

    The analyzer only holds immutable configuration, so one instance
    serves all concurrent requests.

    Raises:
        ConfigurationError: If the environment holds invalid settings
    """
    try:
        settings = get_settings()
    except PydanticValidationError as e:
        raise ConfigurationError(f"Invalid settings: {e}") from e

    logger.info(
        f"Static analyzer configured with {len(settings.suspicious_keywords)} keywords "
        f"(default table v{SUSPICIOUS_KEYWORDS_VERSION}), "
        f"{len(settings.script_extensions)} script extensions"
    )
    return StaticAnalyzer.from_settings(settings)


__all__ = [
    'Settings',
    'get_settings',
    'get_analyzer',
]
