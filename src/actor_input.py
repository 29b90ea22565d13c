"""Parsing and validation of the actor input record."""
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from src.errors import MissingInputError, EmptyStringsError, EmptyTargetsError
from src.logging_config import LOGGER_NAME

logger = logging.getLogger(LOGGER_NAME)


@dataclass
class ActorInput:
    ui_strings: Dict[str, str]
    target_languages: List[str]
    source_language: str = 'en'
    tone: str = 'neutral'
    placeholders: List[str] = field(default_factory=list)
    lingo_api_key: Optional[str] = None


def has_usable_api_key(api_key: Optional[str], placeholder: str) -> bool:
    """
    Check whether the API key can be handed to the Lingo.dev CLI.

    Args:
        api_key: The key from the input, if any.
        placeholder: The sample value shipped in example inputs.

    Returns:
        False when the key is absent or still contains the placeholder text.
    """
    return bool(api_key) and placeholder not in api_key


def parse_actor_input(raw: Optional[Mapping], api_key_placeholder: str = 'YOUR_LINGO_API_KEY') -> ActorInput:
    """
    Validate the raw platform input and apply defaults.

    Args:
        raw: The input record as returned by the platform (camelCase keys).
        api_key_placeholder: Placeholder text that marks an unset API key.

    Returns:
        ActorInput: The validated input.

    Raises:
        MissingInputError: If no input was provided.
        EmptyStringsError: If uiStrings is empty or missing.
        EmptyTargetsError: If targetLanguages is empty or not a list.
    """
    if raw is None:
        raise MissingInputError()

    lingo_api_key = raw.get('lingoApiKey')
    if not has_usable_api_key(lingo_api_key, api_key_placeholder):
        logger.warning(
            "lingoApiKey is missing or invalid. Attempting to use system authentication (local development only)."
        )

    ui_strings: Any = raw.get('uiStrings')
    if not isinstance(ui_strings, Mapping) or len(ui_strings) == 0:
        raise EmptyStringsError()

    target_languages: Any = raw.get('targetLanguages', [])
    if not isinstance(target_languages, list) or len(target_languages) == 0:
        raise EmptyTargetsError()

    return ActorInput(
        ui_strings=dict(ui_strings),
        target_languages=list(target_languages),
        source_language=raw.get('sourceLanguage') or 'en',
        tone=raw.get('tone') or 'neutral',
        placeholders=list(raw.get('placeholders') or []),
        lingo_api_key=lingo_api_key
    )
