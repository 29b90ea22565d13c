"""Unit tests for actor input validation."""
import logging

import pytest

from src.actor_input import ActorInput, has_usable_api_key, parse_actor_input
from src.errors import (
    EmptyStringsError,
    EmptyTargetsError,
    InvalidInputError,
    LocalizationError,
    MissingInputError
)
from src.logging_config import LOGGER_NAME


class TestParseActorInput:

    def test_full_input_is_mapped(self, raw_input):
        actor_input = parse_actor_input(raw_input)

        assert actor_input.ui_strings == raw_input["uiStrings"]
        assert actor_input.target_languages == ["fr", "de", "es"]
        assert actor_input.source_language == "en"
        assert actor_input.tone == "professional"
        assert actor_input.placeholders == ["{{username}}", "{count}"]
        assert actor_input.lingo_api_key == "api_live_123"

    def test_defaults_applied(self):
        actor_input = parse_actor_input({"uiStrings": {"a": "b"}, "targetLanguages": ["fr"]})

        assert actor_input == ActorInput(
            ui_strings={"a": "b"},
            target_languages=["fr"],
            source_language="en",
            tone="neutral",
            placeholders=[],
            lingo_api_key=None
        )

    def test_empty_source_language_and_tone_use_defaults(self):
        actor_input = parse_actor_input({
            "uiStrings": {"a": "b"},
            "targetLanguages": ["fr"],
            "sourceLanguage": "",
            "tone": "",
            "placeholders": None
        })

        assert actor_input.source_language == "en"
        assert actor_input.tone == "neutral"
        assert actor_input.placeholders == []

    def test_missing_input(self):
        with pytest.raises(MissingInputError, match="Input is missing"):
            parse_actor_input(None)

    @pytest.mark.parametrize("ui_strings", [{}, None, "not a mapping", ["a"]])
    def test_empty_strings_rejected(self, ui_strings):
        with pytest.raises(EmptyStringsError, match="uiStrings is empty or missing"):
            parse_actor_input({"uiStrings": ui_strings, "targetLanguages": ["fr"]})

    def test_absent_strings_rejected(self):
        with pytest.raises(EmptyStringsError):
            parse_actor_input({"targetLanguages": ["fr"]})

    @pytest.mark.parametrize("targets", [[], "fr", None, {"fr": True}])
    def test_empty_targets_rejected(self, targets):
        with pytest.raises(EmptyTargetsError, match="targetLanguages array is empty"):
            parse_actor_input({"uiStrings": {"a": "b"}, "targetLanguages": targets})

    def test_absent_targets_rejected(self):
        with pytest.raises(EmptyTargetsError):
            parse_actor_input({"uiStrings": {"a": "b"}})

    def test_errors_share_a_base_class(self):
        assert issubclass(EmptyStringsError, InvalidInputError)
        assert issubclass(EmptyTargetsError, InvalidInputError)
        assert issubclass(MissingInputError, LocalizationError)

    def test_target_order_is_preserved(self):
        actor_input = parse_actor_input({"uiStrings": {"a": "b"}, "targetLanguages": ["ja", "de", "ar"]})
        assert actor_input.target_languages == ["ja", "de", "ar"]

    def test_placeholder_key_warns_but_does_not_fail(self, raw_input, caplog):
        raw_input["lingoApiKey"] = "YOUR_LINGO_API_KEY"
        logger = logging.getLogger(LOGGER_NAME)
        logger.propagate = True
        try:
            with caplog.at_level(logging.WARNING, logger=LOGGER_NAME):
                actor_input = parse_actor_input(raw_input)
        finally:
            logger.propagate = False

        assert actor_input.lingo_api_key == "YOUR_LINGO_API_KEY"
        assert "lingoApiKey is missing or invalid" in caplog.text


class TestHasUsableApiKey:

    def test_real_key(self):
        assert has_usable_api_key("api_live_123", "YOUR_LINGO_API_KEY") is True

    def test_missing_key(self):
        assert has_usable_api_key(None, "YOUR_LINGO_API_KEY") is False
        assert has_usable_api_key("", "YOUR_LINGO_API_KEY") is False

    def test_placeholder_key(self):
        assert has_usable_api_key("YOUR_LINGO_API_KEY", "YOUR_LINGO_API_KEY") is False
        assert has_usable_api_key("<YOUR_LINGO_API_KEY>", "YOUR_LINGO_API_KEY") is False
