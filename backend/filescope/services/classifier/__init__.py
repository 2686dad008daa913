"""
FileScope Classifier Hand-off

Prompt rendering for, and verdict normalization from, the external
threat classifier. The remote call itself is made by the caller.
"""

from filescope.services.classifier.normalizer import normalize_prediction, parse_classifier_json
from filescope.services.classifier.prompts import (
    SYSTEM_PROMPT,
    build_classifier_prompt,
    format_observations,
)

__all__ = [
    'SYSTEM_PROMPT',
    'build_classifier_prompt',
    'format_observations',
    'normalize_prediction',
    'parse_classifier_json',
]
