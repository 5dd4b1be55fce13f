"""Domain models package."""

from mindease.domain.models.analysis import (
    AnalysisResult,
    EmotionOutcome,
    SeverityVerdict,
)
from mindease.domain.models.crisis import CrisisDetection
from mindease.domain.models.response import ResponseContext, ResponsePackage

__all__ = [
    # Classification
    "AnalysisResult",
    "EmotionOutcome",
    "SeverityVerdict",
    # Safety
    "CrisisDetection",
    # Response
    "ResponseContext",
    "ResponsePackage",
]
