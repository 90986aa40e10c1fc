"""Unit tests for infrastructure.logging.formatters module.

Tests cover:
- add_app_info processor
- mask_sensitive_data processor
- truncate_large_values processor
"""

import pytest

from infrastructure.logging.formatters import (
    SENSITIVE_PATTERNS,
    add_app_info,
    mask_sensitive_data,
    truncate_large_values,
)


@pytest.mark.unit
class TestAddAppInfo:
    """Test suite for add_app_info processor factory."""

    def test_adds_name_and_version(self):
        """Processor adds app_name and app_version to event dict."""
        processor = add_app_info("lingo-bot", "abc123")

        result = processor(None, "info", {"event": "translation_fetched"})

        assert result["app_name"] == "lingo-bot"
        assert result["app_version"] == "abc123"
        assert result["event"] == "translation_fetched"

    def test_unknown_version(self):
        """Default version is 'unknown'."""
        result = add_app_info("lingo-bot")(None, "info", {"event": "x"})
        assert result["app_version"] == "unknown"


@pytest.mark.unit
class TestMaskSensitiveData:
    """Test suite for mask_sensitive_data processor factory."""

    def test_masks_known_patterns(self):
        """Every sensitive pattern is masked, case-insensitively."""
        processor = mask_sensitive_data()
        event_dict = {pattern.upper(): "value" for pattern in SENSITIVE_PATTERNS}
        event_dict["event"] = "test"

        result = processor(None, "info", event_dict)

        for pattern in SENSITIVE_PATTERNS:
            assert result[pattern.upper()] == "***REDACTED***"
        assert result["event"] == "test"

    def test_partial_key_match(self):
        """Keys containing a pattern are masked."""
        result = mask_sensitive_data()(None, "info", {"proxy_authorization": "Basic x"})
        assert result["proxy_authorization"] == "***REDACTED***"

    def test_keeps_ordinary_fields(self):
        """Translation fields pass through untouched."""
        event_dict = {"event": "translation_fetched", "target": "fr", "text_length": 5}

        result = mask_sensitive_data()(None, "info", event_dict)

        assert result == event_dict

    def test_none_values_kept(self):
        result = mask_sensitive_data()(None, "info", {"password": None})
        assert result["password"] is None

    def test_custom_mask_and_patterns(self):
        """Custom mask value and extra patterns apply."""
        processor = mask_sensitive_data(
            mask_value="[HIDDEN]", additional_patterns=frozenset({"seed"})
        )

        result = processor(None, "info", {"seed_value": "1.2", "password": "p"})

        assert result["seed_value"] == "[HIDDEN]"
        assert result["password"] == "[HIDDEN]"


@pytest.mark.unit
class TestTruncateLargeValues:
    """Test suite for truncate_large_values processor factory."""

    def test_truncates_long_strings(self):
        """Strings over the limit are cut and annotated."""
        processor = truncate_large_values(max_length=10)

        result = processor(None, "info", {"text": "x" * 25})

        assert result["text"] == "x" * 10 + "...[truncated, 25 chars total]"

    def test_keeps_short_strings(self):
        processor = truncate_large_values(max_length=10)

        result = processor(None, "info", {"text": "short", "count": 12345678901234})

        assert result == {"text": "short", "count": 12345678901234}

    def test_boundary_length_kept(self):
        """A string exactly at the limit is not truncated."""
        result = truncate_large_values(max_length=5)(None, "info", {"text": "abcde"})
        assert result["text"] == "abcde"
