"""
FileScope Classifier Response Normalizer

Turn the classifier's raw JSON verdict into a ThreatPrediction.
"""

import json
import logging
import re
from typing import Any, Dict, Union

from pydantic import ValidationError as PydanticValidationError

from filescope.models.classification import IOCEntry, Prediction, ThreatPrediction
from filescope.models.static_analysis import StaticAnalysisReport
from filescope.utils.exceptions import InvalidPredictionError

logger = logging.getLogger(__name__)

_PREDICTIONS = {p.value.lower(): p for p in Prediction if p is not Prediction.UNKNOWN}


def parse_classifier_json(content: str) -> Dict[str, Any]:
    """Parse a JSON object from a model response, tolerating code fences."""
    content = content.strip()
    if content.startswith("```"):
        content = re.sub(r'^```(?:json)?\n?', '', content)
        content = re.sub(r'\n?```$', '', content)

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise InvalidPredictionError(f"Classifier returned invalid JSON: {e}") from e

    if not isinstance(data, dict):
        raise InvalidPredictionError(
            f"Classifier returned {type(data).__name__}, expected a JSON object"
        )
    return data


def normalize_prediction(
    raw: Union[str, Dict[str, Any]],
    report: StaticAnalysisReport,
) -> ThreatPrediction:
    """
    Normalize a classifier verdict.

    - Unrecognized predictions become ``Unknown``
    - ``riskScore`` is clamped to 0-100
    - A SHA256 IOC for the analyzed file is added if missing

    Raises:
        InvalidPredictionError: If the verdict is not a usable JSON object
    """
    data = parse_classifier_json(raw) if isinstance(raw, str) else dict(raw)

    label = str(data.get("prediction", "")).strip().lower()
    data["prediction"] = _PREDICTIONS.get(label, Prediction.UNKNOWN)

    raw_score = data.pop("riskScore", data.pop("risk_score", 0))
    try:
        score = int(round(float(raw_score)))
    except (TypeError, ValueError, OverflowError):
        logger.warning(f"Non-numeric riskScore from classifier: {raw_score!r}")
        score = 0
    data["riskScore"] = max(0, min(100, score))

    try:
        prediction = ThreatPrediction.model_validate(data)
    except PydanticValidationError as e:
        raise InvalidPredictionError(f"Classifier verdict has an invalid shape: {e}") from e

    if not any(ioc.type.lower() == "sha256" for ioc in prediction.iocs):
        prediction.iocs.insert(
            0, IOCEntry(type="SHA256", value=report.hashes.sha256, reputation="N/A")
        )

    return prediction
