"""
Severity Enumeration

Defines the escalation levels assigned to a single utterance.

SAFETY_NOTE: Ordering is meaningful. CRISIS always outranks MODERATE,
which outranks NORMAL. Comparisons rely on the integer values.
"""

from enum import IntEnum


class Severity(IntEnum):
    """
    Crisis-risk severity of an utterance.

    Higher values indicate more urgent risk language.
    """

    NORMAL = 0
    """No risk language detected."""

    MODERATE = 1
    """
    Distress language present (hopelessness, overwhelm, despair).
    - Supportive reply plus a wellness tip
    """

    CRISIS = 2
    """
    Self-harm or suicide language present.
    - Fixed emergency script with helpline and grounding steps
    - Never randomized, never delegated to remote services
    """

    @property
    def label(self) -> str:
        """Lowercase wire label (normal, moderate, crisis)."""
        return self.name.lower()

    @classmethod
    def from_label(cls, label: str) -> "Severity":
        """
        Parse a wire label.

        Raises:
            ValueError: If label is not a known severity
        """
        try:
            return cls[label.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown severity label: {label!r}") from None

    @classmethod
    def coerce(cls, value: "Severity | str | int") -> "Severity":
        """
        Accept a member, its wire label ("crisis") or its integer value.

        Raises:
            ValueError: If value names no severity
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            if value.strip().isdigit():
                return cls(int(value))
            return cls.from_label(value)
        return cls(value)
