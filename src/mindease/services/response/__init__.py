"""Response selection services package."""

from mindease.services.response.response_selector import ResponseSelector

__all__ = ["ResponseSelector"]
