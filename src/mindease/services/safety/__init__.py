"""Safety services package."""

from mindease.services.safety.crisis_detector import CrisisDetector
from mindease.services.safety.emergency_resources import (
    GROUNDING_STEPS,
    EmergencyResource,
    EmergencyResourceResolver,
)

__all__ = [
    "CrisisDetector",
    "EmergencyResource",
    "EmergencyResourceResolver",
    "GROUNDING_STEPS",
]
