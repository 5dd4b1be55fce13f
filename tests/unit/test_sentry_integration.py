"""
Unit Tests for Sentry Integration

Tests event scrubbing before events leave the process.
"""

from mindease.infrastructure.monitoring.sentry_integration import (
    _scrub_dict,
    before_send,
    capture_exception_with_context,
)


class TestScrubbing:
    """Tests for context scrubbing."""

    def test_length_metadata_is_kept(self) -> None:
        """Test that text_length is reported while the utterance is not."""
        scrubbed = _scrub_dict({"text_length": 42, "text": "I feel sad", "severity": "crisis"})

        assert scrubbed["text_length"] == 42
        assert scrubbed["severity"] == "crisis"
        assert scrubbed["text"] == "[REDACTED]"

    def test_secret_keys_match_anywhere(self) -> None:
        """Test that secret-bearing keys are redacted by substring."""
        scrubbed = _scrub_dict({"hf_api_token": "hf_abc", "X-Authorization": "Bearer hf_abc"})

        assert scrubbed == {"hf_api_token": "[REDACTED]", "X-Authorization": "[REDACTED]"}

    def test_nested_payload_inputs(self) -> None:
        """Test that enrichment payload inputs are redacted in nested data."""
        scrubbed = _scrub_dict({"payload": {"inputs": "I want to end my life"}})

        assert scrubbed["payload"]["inputs"] == "[REDACTED]"

    def test_before_send_drops_frame_locals(self) -> None:
        """Test that stack frame variables are removed from events."""
        event = {
            "extra": {"text_length": 12, "utterance": "I feel sad"},
            "exception": {"values": [
                {"stacktrace": {"frames": [{"function": "classify", "vars": {"text": "I feel sad"}}]}},
            ]},
        }

        scrubbed = before_send(event, {})

        assert scrubbed["extra"] == {"text_length": 12, "utterance": "[REDACTED]"}
        assert "vars" not in scrubbed["exception"]["values"][0]["stacktrace"]["frames"][0]

    def test_capture_without_client_is_noop(self) -> None:
        """Test that capturing without an initialized client records nothing."""
        assert capture_exception_with_context(
            RuntimeError("boom"),
            operation="analyze",
            extra={"text_length": 3},
        ) is None
