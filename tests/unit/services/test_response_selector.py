"""
Unit Tests for Response Selector

A seeded random.Random makes template choice reproducible.
"""

import random

import pytest

from mindease.domain.enums.labels import Emotion, Intent, Sentiment
from mindease.domain.enums.severity import Severity
from mindease.domain.models.response import ResponseContext
from mindease.services.response.response_selector import (
    ResponseSelector,
    contains_advice_language,
)
from mindease.services.response.templates import (
    EMOTION_RESPONSES,
    EMOTIONAL_VALIDATIONS,
    GENERAL_WELLNESS_TIPS,
    INTENT_FOLLOW_UPS,
    WELLNESS_TIPS,
)
from mindease.services.safety.emergency_resources import (
    GROUNDING_STEPS,
    EmergencyResourceResolver,
)


class TestTemplates:
    """Tests for template tables."""

    def test_every_emotion_has_templates(self) -> None:
        """Test that every emotion has replies and a validation."""
        for emotion in Emotion:
            assert EMOTION_RESPONSES[emotion]
            assert EMOTIONAL_VALIDATIONS[emotion]

    def test_templates_are_single_paragraph(self) -> None:
        """Test that reply templates are single paragraphs."""
        for templates in EMOTION_RESPONSES.values():
            assert all("\n\n" not in template for template in templates)

    def test_advice_language_detection(self) -> None:
        """Test advice language detection."""
        assert contains_advice_language("Try taking some deep breaths.")
        assert contains_advice_language("What support would help you most?")
        assert not contains_advice_language("That's wonderful!")


class TestResponseSelector:
    """Tests for ResponseSelector."""

    @pytest.fixture
    def selector(self, rng: random.Random, resources: EmergencyResourceResolver) -> ResponseSelector:
        return ResponseSelector(rng=rng, resources=resources)

    def test_seeded_selection_is_exact(self, resources: EmergencyResourceResolver) -> None:
        """Test that a seeded random source picks a known template."""
        selector = ResponseSelector(rng=random.Random(7), resources=resources)

        package = selector.select(Emotion.JOY, Sentiment.POSITIVE, Intent.GENERAL_CONVERSATION, Severity.NORMAL)

        assert package.primary_reply_text == random.Random(7).choice(EMOTION_RESPONSES[Emotion.JOY])
        assert package.follow_up_wellness_tip_text is None
        assert not package.is_crisis_override

    def test_same_seed_same_reply(self, resources: EmergencyResourceResolver) -> None:
        """Test that equal seeds give equal replies."""
        replies = {
            ResponseSelector(rng=random.Random(42), resources=resources)
            .select(Emotion.SADNESS, Sentiment.NEGATIVE, Intent.VENTING, Severity.NORMAL)
            .primary_reply_text
            for _ in range(3)
        }

        assert len(replies) == 1

    @pytest.mark.parametrize("seed", range(12))
    def test_ask_advice_appends_follow_up(self, resources: EmergencyResourceResolver, seed: int) -> None:
        """Test that advice requests get a follow-up unless the template offers help."""
        selector = ResponseSelector(rng=random.Random(seed), resources=resources)

        reply = selector.select(
            Emotion.ANXIETY, Sentiment.NEGATIVE, Intent.ASK_ADVICE, Severity.NORMAL,
        ).primary_reply_text

        reference = random.Random(seed)
        template = reference.choice(EMOTION_RESPONSES[Emotion.ANXIETY])
        if contains_advice_language(template):
            assert reply == template
        else:
            assert reply == f"{template}\n\n{reference.choice(INTENT_FOLLOW_UPS[Intent.ASK_ADVICE])}"

    @pytest.mark.parametrize("seed", range(12))
    def test_seeking_support_follow_up(self, resources: EmergencyResourceResolver, seed: int) -> None:
        """Test that support requests get a support follow-up."""
        selector = ResponseSelector(rng=random.Random(seed), resources=resources)

        reply = selector.select(
            Emotion.JOY, Sentiment.POSITIVE, Intent.SEEKING_SUPPORT, Severity.NORMAL,
        ).primary_reply_text

        template, _, follow_up = reply.partition("\n\n")
        assert template in EMOTION_RESPONSES[Emotion.JOY]
        if follow_up:
            assert follow_up in INTENT_FOLLOW_UPS[Intent.SEEKING_SUPPORT]
        else:
            assert contains_advice_language(template)

    def test_venting_never_appends(self, selector: ResponseSelector) -> None:
        """Test that venting replies get no follow-up."""
        for _ in range(20):
            reply = selector.select(
                Emotion.ANGER, Sentiment.NEGATIVE, Intent.VENTING, Severity.NORMAL,
            ).primary_reply_text
            assert reply in EMOTION_RESPONSES[Emotion.ANGER]

    def test_moderate_attaches_emotion_tip(self, selector: ResponseSelector) -> None:
        """Test that moderate severity attaches an emotion tip."""
        package = selector.select(Emotion.SADNESS, Sentiment.NEGATIVE, Intent.GENERAL_CONVERSATION, Severity.MODERATE)

        assert package.follow_up_wellness_tip_text in WELLNESS_TIPS[Emotion.SADNESS]

    def test_moderate_uses_general_tips_without_emotion_list(self, selector: ResponseSelector) -> None:
        """Test that emotions without tips use the general list."""
        package = selector.select(Emotion.NEUTRAL, Sentiment.NEUTRAL, Intent.GENERAL_CONVERSATION, Severity.MODERATE)

        assert package.follow_up_wellness_tip_text in GENERAL_WELLNESS_TIPS

    @pytest.mark.parametrize("seed", range(5))
    def test_crisis_script_is_fixed(self, resources: EmergencyResourceResolver, seed: int) -> None:
        """Test that the crisis script is the same for every seed."""
        selector = ResponseSelector(rng=random.Random(seed), resources=resources)

        package = selector.select(Emotion.JOY, Sentiment.POSITIVE, Intent.ASK_ADVICE, Severity.CRISIS)

        assert package.is_crisis_override
        assert package.follow_up_wellness_tip_text is None
        assert package.primary_reply_text == resources.format_crisis_script()
        assert "+91 9820466726" in package.primary_reply_text
        for step in GROUNDING_STEPS:
            assert step in package.primary_reply_text

    def test_crisis_script_uses_jurisdiction(self, resources: EmergencyResourceResolver) -> None:
        """Test that the crisis script uses the configured country."""
        selector = ResponseSelector(resources=resources, country_code="US")

        package = selector.select(Emotion.SADNESS, Sentiment.NEGATIVE, Intent.VENTING, Severity.CRISIS)

        assert "Please call 988" in package.primary_reply_text

    def test_validation_for(self) -> None:
        """Test the per-emotion validation line."""
        assert ResponseSelector.validation_for(Emotion.ANXIETY) == EMOTIONAL_VALIDATIONS[Emotion.ANXIETY]

    def test_wellness_tip_for(self, selector: ResponseSelector) -> None:
        """Test wellness tip lookup with the general fallback."""
        assert selector.wellness_tip_for(Emotion.FEAR) in WELLNESS_TIPS[Emotion.FEAR]
        assert selector.wellness_tip_for(Emotion.JOY) in GENERAL_WELLNESS_TIPS

    def test_package_to_dict(self, selector: ResponseSelector) -> None:
        """Test serialization of a reply package."""
        context = ResponseContext(emotion=Emotion.STRESS, severity=Severity.MODERATE)
        package = selector.select(context.emotion, context.sentiment, context.intent, context.severity)

        data = package.to_dict()

        assert data["is_crisis_override"] is False
        assert data["follow_up_wellness_tip_text"] in GENERAL_WELLNESS_TIPS + WELLNESS_TIPS[Emotion.STRESS]

    @pytest.mark.parametrize("severity", [2, "crisis", "CRISIS", "2"])
    def test_plain_crisis_severity_gets_script(self, selector: ResponseSelector, severity) -> None:
        """Test that plain crisis values still select the fixed crisis script."""
        package = selector.select("sadness", "negative", "venting", severity)

        assert package.is_crisis_override
        assert package.follow_up_wellness_tip_text is None

    def test_plain_moderate_values_select_template(self, selector: ResponseSelector) -> None:
        """Test that plain label values select a templated reply with a tip."""
        package = selector.select("stress", "negative", "venting", 1)

        assert package.primary_reply_text in EMOTION_RESPONSES[Emotion.STRESS]
        assert package.follow_up_wellness_tip_text is not None


class TestResponseContext:
    """Tests for ResponseContext label coercion."""

    def test_coerces_wire_labels(self) -> None:
        """Test that wire labels become enum members."""
        context = ResponseContext(emotion="sadness", sentiment="negative", intent="venting", severity="crisis")

        assert context.emotion is Emotion.SADNESS
        assert context.sentiment is Sentiment.NEGATIVE
        assert context.intent is Intent.VENTING
        assert context.severity is Severity.CRISIS

    def test_coerces_integer_severity(self) -> None:
        """Test that integer severities map onto the ordered levels."""
        assert ResponseContext(severity=1).severity is Severity.MODERATE

    def test_from_dict_accepts_analysis_payload(self) -> None:
        """Test that an AnalysisResult.to_dict() payload rebuilds the context."""
        context = ResponseContext.from_dict({
            "emotion": "fear",
            "sentiment": "negative",
            "severity": "moderate",
            "intent": "ask_advice",
            "confidence": 0.8,
        })

        assert context == ResponseContext(
            emotion=Emotion.FEAR,
            sentiment=Sentiment.NEGATIVE,
            intent=Intent.ASK_ADVICE,
            severity=Severity.MODERATE,
        )

    def test_from_dict_missing_keys_use_defaults(self) -> None:
        """Test that missing labels take the neutral defaults."""
        assert ResponseContext.from_dict({"severity": "crisis"}) == ResponseContext(severity=Severity.CRISIS)

    @pytest.mark.parametrize("fields", [{"severity": "urgent"}, {"severity": 7}, {"emotion": "ennui"}])
    def test_unknown_labels_rejected(self, fields: dict) -> None:
        """Test that labels outside the closed sets raise ValueError."""
        with pytest.raises(ValueError):
            ResponseContext(**fields)
