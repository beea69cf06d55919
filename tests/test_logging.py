"""
Tests for the logging processors.
"""

from revu.logging_config import add_app_context, filter_sensitive_data


class TestLogProcessors:
    """Test suite for the structlog processors."""

    def test_sensitive_keys_redacted(self):
        """Test that key-like fields are redacted, nested ones included."""
        event = filter_sensitive_data(None, "info", {
            "event": "Starting",
            "google_gemini_key": "abc",
            "headers": {"Authorization": "Bearer xyz"},
        })

        assert event["google_gemini_key"] == "[REDACTED]"
        assert event["headers"]["Authorization"] == "[REDACTED]"
        assert event["event"] == "Starting"

    def test_key_looking_values_redacted(self):
        """Test that values shaped like Google keys are redacted."""
        event = filter_sensitive_data(None, "info", {"value": "AIza" + "x" * 30, "other": "y" * 30})

        assert event["value"] == "[REDACTED]"
        assert event["other"] == "y" * 30

    def test_app_context(self):
        """Test that app name and version are added."""
        event = add_app_context(None, "info", {"event": "x"})

        assert event["app"] == "revu"
        assert "version" in event
