"""
FileScope Classification Models

Shape of the verdict returned by the external classifier for a
static analysis report.
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from filescope.utils.constants import (
    VERDICT_MALICIOUS,
    VERDICT_SAFE,
    VERDICT_SUSPICIOUS,
    VERDICT_UNKNOWN,
)


class Prediction(str, Enum):
    """Classifier verdict."""
    SAFE = VERDICT_SAFE
    SUSPICIOUS = VERDICT_SUSPICIOUS
    MALICIOUS = VERDICT_MALICIOUS
    UNKNOWN = VERDICT_UNKNOWN


class _ClassifierModel(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True,
        alias_generator=to_camel,
        extra="ignore",
    )


class IOCEntry(_ClassifierModel):
    """Indicator of compromise reported by the classifier."""
    type: str = Field(..., description="IOC type, e.g. SHA256, URL, IP")
    value: str = Field(..., description="IOC value")
    reputation: Optional[str] = Field(None, description="Reputation note")


class AttackTactic(_ClassifierModel):
    """MITRE ATT&CK technique mapped by the classifier."""
    id: str = Field(..., description="Technique ID, e.g. T1059")
    name: str = Field("", description="Technique name")
    description: str = Field("", description="How the file may use it")


class ThreatPrediction(_ClassifierModel):
    """Normalized classifier verdict."""
    prediction: Prediction = Prediction.UNKNOWN
    risk_score: int = Field(0, ge=0, le=100)
    summary: str = ""
    iocs: List[IOCEntry] = Field(default_factory=list)
    threats: List[str] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)
    simulated_behavior: List[str] = Field(default_factory=list)
    attack_tactics: List[AttackTactic] = Field(default_factory=list)

    def to_document(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


__all__ = [
    'Prediction',
    'IOCEntry',
    'AttackTactic',
    'ThreatPrediction',
]
