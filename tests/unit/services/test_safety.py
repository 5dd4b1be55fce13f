"""
Unit Tests for Safety Services

Tests helpline resolution, the crisis script and crisis detection.
"""

import json
from pathlib import Path

import pytest

from mindease.domain.enums.severity import Severity
from mindease.services.detection.severity_classifier import SeverityClassifier
from mindease.services.safety.crisis_detector import CrisisDetector
from mindease.services.safety.emergency_resources import (
    GROUNDING_STEPS,
    EmergencyResourceResolver,
)


class TestEmergencyResourceResolver:
    """Tests for EmergencyResourceResolver."""

    def test_default_country_is_india(self, resources: EmergencyResourceResolver) -> None:
        """Test that India is the default jurisdiction."""
        assert resources.default_country == "IN"
        assert resources.primary_helpline_number() == "+91 9820466726"

    def test_country_lookup_is_case_insensitive(self, resources: EmergencyResourceResolver) -> None:
        """Test that country codes are case-insensitive."""
        assert resources.primary_helpline_number("us") == "988"

    def test_unknown_country_falls_back(self, resources: EmergencyResourceResolver) -> None:
        """Test that unknown countries use the default."""
        assert resources.get_resources("ZZ").country_code == "IN"

    def test_unknown_default_country_uses_built_in(self) -> None:
        """Test that an unknown default uses the built-in country."""
        assert EmergencyResourceResolver(default_country="ZZ").default_country == "IN"

    def test_helpline_numbers(self, resources: EmergencyResourceResolver) -> None:
        """Test hotline name to number listing."""
        numbers = resources.helpline_numbers()

        assert numbers["AASRA"] == "+91 9820466726"
        assert "Lifeline" in numbers

    def test_text_line_is_not_a_hotline(self, resources: EmergencyResourceResolver) -> None:
        """Test that text lines are not listed as hotlines."""
        assert "Crisis Text Line" not in resources.helpline_numbers("US")

    def test_grounding_steps_order(self) -> None:
        """Test the fixed 5-4-3-2-1 order."""
        senses = [step.split(":")[0] for step in GROUNDING_STEPS]

        assert senses == ["See", "Touch", "Hear", "Smell", "Taste"]

    def test_crisis_script(self, resources: EmergencyResourceResolver) -> None:
        """Test the crisis script contents and step order."""
        script = resources.format_crisis_script()

        assert "+91 9820466726" in script
        assert "112" in script
        positions = [script.index(f"{n}. {step}") for n, step in enumerate(GROUNDING_STEPS, start=1)]
        assert positions == sorted(positions)

    def test_emergency_response_text_per_severity(self, resources: EmergencyResourceResolver) -> None:
        """Test that each severity has its own text."""
        texts = {resources.emergency_response_text(severity) for severity in Severity}

        assert len(texts) == 3

    def test_config_file_overrides(self, tmp_path: Path) -> None:
        """Test that a config file overrides and adds countries."""
        config = tmp_path / "helplines.json"
        config.write_text(json.dumps({
            "IN": {
                "country_name": "India",
                "emergency_number": "112",
                "resources": [
                    {"name": "Tele MANAS", "resource_type": "hotline", "contact": "14416"},
                ],
            },
            "nz": {
                "country_name": "New Zealand",
                "emergency_number": "111",
                "resources": [
                    {"name": "Need to talk?", "resource_type": "hotline", "contact": "1737"},
                ],
            },
        }))

        resolver = EmergencyResourceResolver(config_path=str(config))

        assert resolver.primary_helpline_number() == "14416"
        assert resolver.primary_helpline_number("NZ") == "1737"
        assert resolver.get_resources("nz").country_name == "New Zealand"

    def test_config_extra_resource_fields_ignored(self, tmp_path: Path) -> None:
        """Test that unread resource fields in a config file do not block loading."""
        config = tmp_path / "helplines.json"
        config.write_text(json.dumps({
            "GB": {
                "country_name": "United Kingdom",
                "emergency_number": "999",
                "resources": [{
                    "name": "Shout",
                    "resource_type": "hotline",
                    "contact": "85258",
                    "description": "Text support",
                    "languages": ["en"],
                }],
            },
        }))

        resolver = EmergencyResourceResolver(config_path=str(config))

        assert resolver.helpline_numbers("GB") == {"Shout": "85258"}

    def test_invalid_config_keeps_built_ins(self, tmp_path: Path) -> None:
        """Test that an invalid config file is ignored."""
        config = tmp_path / "helplines.json"
        config.write_text("{not json")

        resolver = EmergencyResourceResolver(config_path=str(config))

        assert resolver.primary_helpline_number() == "+91 9820466726"

    def test_missing_config_is_ignored(self, tmp_path: Path) -> None:
        """Test that a missing config file is ignored."""
        resolver = EmergencyResourceResolver(config_path=str(tmp_path / "absent.json"))

        assert resolver.primary_helpline_number() == "+91 9820466726"


class TestCrisisDetector:
    """Tests for CrisisDetector."""

    @pytest.fixture
    def detector(self, resources: EmergencyResourceResolver) -> CrisisDetector:
        return CrisisDetector(resources=resources)

    def test_crisis_detection(self, detector: CrisisDetector) -> None:
        """Test crisis detection with helpline and grounding steps."""
        detection = detector.detect("I want to end my life")

        assert detection.is_crisis
        assert detection.severity == Severity.CRISIS
        assert "end my life" in detection.matched_indicators
        assert detection.helpline_number == "+91 9820466726"
        assert detection.grounding_steps == GROUNDING_STEPS

    def test_moderate_is_not_crisis(self, detector: CrisisDetector) -> None:
        """Test that moderate distress is not a crisis."""
        detection = detector.detect("Everything feels hopeless")

        assert not detection.is_crisis
        assert detection.severity == Severity.MODERATE
        assert detection.grounding_steps == ()
        assert detection.helpline_number

    def test_normal_text(self, detector: CrisisDetector) -> None:
        """Test that normal text matches no indicators."""
        detection = detector.detect("Lunch was good")

        assert detection.severity == Severity.NORMAL
        assert detection.matched_indicators == frozenset()

    @pytest.mark.parametrize("text", [None, "", "   "])
    def test_empty_input(self, detector: CrisisDetector, text) -> None:
        """Test that empty input is not a crisis."""
        assert not detector.detect(text).is_crisis

    def test_agrees_with_shared_classifier(self, resources: EmergencyResourceResolver) -> None:
        """Test that detection agrees with the shared classifier."""
        severity = SeverityClassifier()
        detector = CrisisDetector(severity, resources)

        for text in ("I'm fine", "I feel broken", "I want to kill myself"):
            assert detector.detect(text).severity == severity.classify(text).severity
        assert detector.severity_classifier is severity

    def test_jurisdiction(self, resources: EmergencyResourceResolver) -> None:
        """Test detection in a configured jurisdiction."""
        detector = CrisisDetector(resources=resources, country_code="GB")

        assert detector.detect("I want to die").helpline_number == "116 123"
        assert detector.helpline_numbers() == {"Samaritans": "116 123"}

    def test_has_crisis_indicators(self, detector: CrisisDetector) -> None:
        """Test the quick indicator check."""
        assert detector.has_crisis_indicators("I'm so overwhelmed")
        assert not detector.has_crisis_indicators("Nice weather")

    def test_to_dict(self, detector: CrisisDetector) -> None:
        """Test serialization of a detection."""
        data = detector.detect("I want to end it all").to_dict()

        assert data["is_crisis"] is True
        assert data["severity"] == "crisis"
        assert len(data["grounding_steps"]) == 5
