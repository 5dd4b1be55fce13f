"""
Emergency Resources

Jurisdiction-aware helplines, crisis messaging and the grounding
exercise offered in crisis responses.

LEGAL_REVIEW_REQUIRED: Helpline information must be verified for
accuracy in each jurisdiction before production use.
"""

import json
import os
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Optional

from mindease.config.logging_config import get_logger
from mindease.domain.enums.severity import Severity

logger = get_logger(__name__)


# Fixed 5-4-3-2-1 sensory grounding sequence; order is part of the contract
GROUNDING_STEPS: tuple[str, ...] = (
    "See: name 5 things you can see around you.",
    "Touch: notice 4 things you can touch or feel.",
    "Hear: listen for 3 things you can hear.",
    "Smell: find 2 things you can smell.",
    "Taste: notice 1 thing you can taste.",
)

# Supportive text shown with a crisis detection, by severity
EMERGENCY_RESPONSES: MappingProxyType = MappingProxyType({
    Severity.CRISIS: (
        "I'm deeply concerned about what you're sharing. Your life has value, "
        "and there are people who want to help you right now. Please reach out "
        "to a crisis helpline immediately. You don't have to face this alone."
    ),
    Severity.MODERATE: (
        "I hear that you're in significant pain. What you're feeling is important, "
        "and you deserve support. Please consider reaching out to someone you trust "
        "or contacting a helpline to talk through this."
    ),
    Severity.NORMAL: (
        "Thank you for sharing with me. I'm here to listen and support you through this."
    ),
})

DEFAULT_COUNTRY_CODE = "IN"


@dataclass
class EmergencyResource:
    """
    A single emergency resource.

    Attributes:
        name: Resource name (e.g., "AASRA")
        resource_type: Type (hotline, text, website)
        contact: Contact information (phone, URL, etc.)
    """

    name: str
    resource_type: str  # hotline, text, website
    contact: str


@dataclass
class JurisdictionResources:
    """
    Emergency resources for a specific jurisdiction.

    Attributes:
        country_code: ISO country code
        country_name: Human-readable country name
        resources: Resources in preference order
        emergency_number: General emergency number (e.g., 112)
    """

    country_code: str
    country_name: str
    resources: list[EmergencyResource] = field(default_factory=list)
    emergency_number: str = ""

    def get_crisis_hotlines(self) -> list[EmergencyResource]:
        """Get crisis hotlines from resources."""
        return [r for r in self.resources if r.resource_type == "hotline"]


class EmergencyResourceResolver:
    """
    Jurisdiction-aware helpline resolver.

    Built-in resources can be overridden per country by a JSON file
    of the form {"IN": {"country_name": ..., "emergency_number": ...,
    "resources": [{"name": ..., "resource_type": ..., "contact": ...}]}}.

    Usage:
        resolver = EmergencyResourceResolver()
        resolver.primary_helpline_number()          # "+91 9820466726"
        resolver.format_crisis_script("IN")
    """

    # LEGAL_REVIEW_REQUIRED: Verify all numbers before production
    BUILT_IN_RESOURCES: dict[str, JurisdictionResources] = {
        "IN": JurisdictionResources(
            country_code="IN",
            country_name="India",
            emergency_number="112",
            resources=[
                EmergencyResource(
                    name="AASRA",
                    resource_type="hotline",
                    contact="+91 9820466726",
                ),
                EmergencyResource(
                    name="iCall",
                    resource_type="hotline",
                    contact="+91 9152987821",
                ),
                EmergencyResource(
                    name="Vandrevala Foundation",
                    resource_type="hotline",
                    contact="+91 9999 77 8888",
                ),
                EmergencyResource(
                    name="Lifeline",
                    resource_type="hotline",
                    contact="1800 200 8332",
                ),
            ],
        ),
        "US": JurisdictionResources(
            country_code="US",
            country_name="United States",
            emergency_number="911",
            resources=[
                EmergencyResource(
                    name="988 Suicide & Crisis Lifeline",
                    resource_type="hotline",
                    contact="988",
                ),
                EmergencyResource(
                    name="Crisis Text Line",
                    resource_type="text",
                    contact="Text HOME to 741741",
                ),
            ],
        ),
        "GB": JurisdictionResources(
            country_code="GB",
            country_name="United Kingdom",
            emergency_number="999",
            resources=[
                EmergencyResource(
                    name="Samaritans",
                    resource_type="hotline",
                    contact="116 123",
                ),
            ],
        ),
    }

    def __init__(
        self,
        default_country: str = DEFAULT_COUNTRY_CODE,
        config_path: Optional[str] = None,
    ) -> None:
        """
        Initialize resolver.

        Args:
            default_country: Country used when none is given
            config_path: Optional path to JSON override file
        """
        self._resources = dict(self.BUILT_IN_RESOURCES)

        if config_path and os.path.exists(config_path):
            self._load_config(config_path)

        if default_country.upper() not in self._resources:
            logger.warning(
                "No resources for default country, using built-in default",
                country_code=default_country,
            )
            default_country = DEFAULT_COUNTRY_CODE
        self._default_country = default_country.upper()

    def _load_config(self, config_path: str) -> None:
        """Load resources from JSON config file."""
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = json.load(f)

            for country_code, country_data in data.items():
                resources = [
                    EmergencyResource(
                        name=r["name"],
                        resource_type=r["resource_type"],
                        contact=r["contact"],
                    )
                    for r in country_data.get("resources", [])
                ]
                self._resources[country_code.upper()] = JurisdictionResources(
                    country_code=country_code.upper(),
                    country_name=country_data.get("country_name", country_code),
                    emergency_number=country_data.get("emergency_number", ""),
                    resources=resources,
                )

            logger.info(
                "Loaded emergency resources config",
                path=config_path,
                jurisdiction_count=len(data),
            )
        except (OSError, KeyError, ValueError, TypeError, AttributeError) as e:
            # Built-in resources stay in effect
            logger.error(
                "Failed to load resources config",
                path=config_path,
                error_type=type(e).__name__,
            )

    @property
    def default_country(self) -> str:
        return self._default_country

    def get_resources(self, country_code: Optional[str] = None) -> JurisdictionResources:
        """
        Get resources for a jurisdiction, falling back to the default country.
        """
        code = (country_code or self._default_country).upper()
        if code in self._resources:
            return self._resources[code]

        logger.warning("No resources for jurisdiction, using default", country_code=code)
        return self._resources[self._default_country]

    def get_primary_hotline(self, country_code: Optional[str] = None) -> Optional[EmergencyResource]:
        """Get the primary crisis hotline for a country."""
        hotlines = self.get_resources(country_code).get_crisis_hotlines()
        return hotlines[0] if hotlines else None

    def primary_helpline_number(self, country_code: Optional[str] = None) -> str:
        """
        Get the primary helpline number.

        Never empty: jurisdictions without a hotline fall back to the
        built-in default country's hotline.
        """
        hotline = self.get_primary_hotline(country_code)
        if hotline is None:
            hotline = self.BUILT_IN_RESOURCES[DEFAULT_COUNTRY_CODE].get_crisis_hotlines()[0]
        return hotline.contact

    def helpline_numbers(self, country_code: Optional[str] = None) -> dict[str, str]:
        """Get hotline name -> number for a country."""
        return {
            r.name: r.contact
            for r in self.get_resources(country_code).get_crisis_hotlines()
        }

    def emergency_response_text(self, severity: Severity) -> str:
        """Supportive text for a severity tier."""
        return EMERGENCY_RESPONSES[severity]

    def format_crisis_script(self, country_code: Optional[str] = None) -> str:
        """
        Format the fixed crisis script.

        Contains validation text, the primary helpline and the numbered
        5-4-3-2-1 grounding steps in their fixed order.
        """
        resources = self.get_resources(country_code)
        helpline = self.primary_helpline_number(country_code)

        lines = [EMERGENCY_RESPONSES[Severity.CRISIS], ""]
        lines.append(f"Please call {helpline} right now to talk to someone who can help.")
        if resources.emergency_number:
            lines.append(
                f"If you are in immediate danger, call {resources.emergency_number}."
            )
        lines.append("")
        lines.append("While you reach out, try this grounding exercise:")
        for number, step in enumerate(GROUNDING_STEPS, start=1):
            lines.append(f"{number}. {step}")

        return "\n".join(lines)
