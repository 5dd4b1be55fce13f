"""
Severity Classifier

Assigns a crisis-risk severity tier to an utterance using the
crisis and moderate phrase tiers of the lexicon.

SAFETY-CRITICAL: This classifier is purely local and never depends
on network I/O. A crisis-tier match can never be downgraded by
moderate-tier matches in the same utterance.
"""

from typing import Optional

from mindease.domain.enums.severity import Severity
from mindease.domain.models.analysis import SeverityVerdict
from mindease.services.lexicon.lexicon_store import (
    LexiconStore,
    find_phrases,
    get_default_lexicon,
    normalize_text,
)


class SeverityClassifier:
    """
    Tiered keyword severity classifier.

    Algorithm:
    1. Scan the full crisis tier, collecting every match
    2. Any crisis match => CRISIS; the moderate tier is not scanned
    3. Otherwise scan the moderate tier => MODERATE on any match
    4. Otherwise NORMAL with no indicators

    Usage:
        classifier = SeverityClassifier()
        verdict = classifier.classify("I feel so hopeless")
        verdict.severity  # Severity.MODERATE
    """

    def __init__(self, lexicon: Optional[LexiconStore] = None) -> None:
        self._lexicon = lexicon or get_default_lexicon()

    def classify(self, text: Optional[str]) -> SeverityVerdict:
        """
        Classify severity of an utterance.

        Args:
            text: Raw user input (None and blank input are NORMAL)

        Returns:
            SeverityVerdict with the tier and matched phrases
        """
        normalized = normalize_text(text)
        if not normalized:
            return SeverityVerdict()

        crisis_matches = find_phrases(normalized, self._lexicon.lookup(Severity.CRISIS))
        if crisis_matches:
            return SeverityVerdict(
                severity=Severity.CRISIS,
                matched_indicators=frozenset(crisis_matches),
            )

        moderate_matches = find_phrases(normalized, self._lexicon.lookup(Severity.MODERATE))
        if moderate_matches:
            return SeverityVerdict(
                severity=Severity.MODERATE,
                matched_indicators=frozenset(moderate_matches),
            )

        return SeverityVerdict()

    def has_indicators(self, text: Optional[str]) -> bool:
        """Check whether text contains any crisis or moderate phrase."""
        return self.classify(text).severity > Severity.NORMAL
