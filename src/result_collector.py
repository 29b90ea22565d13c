"""Reading the locale files produced by the Lingo.dev CLI back into a run outcome."""
import json
import logging
import os
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional

import jsonschema
from tqdm import tqdm

from src.logging_config import LOGGER_NAME
from src.translation_validator import check_key_coverage, check_placeholder_preservation

logger = logging.getLogger(LOGGER_NAME)

MISSING_TRANSLATION_MARKER = {"error": "Translation missing"}

# A produced locale file must hold a single JSON object. Values are passed
# through untouched, so nested structures are allowed.
LOCALE_FILE_SCHEMA = {"type": "object"}


@dataclass
class LocaleResult:
    """Outcome for one target locale: the translations, or the reason there are none."""
    locale: str
    translations: Optional[Dict] = None
    error: Optional[str] = None
    missing_keys: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.error is None

    def output_value(self) -> Dict:
        if self.ok:
            return self.translations
        return dict(MISSING_TRANSLATION_MARKER)

    def status_record(self) -> Dict[str, str]:
        if self.ok:
            return {
                "language": self.locale,
                "key": "FILE_GENERATED",
                "status": "Success",
                "message": f"Successfully generated {len(self.translations)} keys."
            }
        return {
            "language": self.locale,
            "key": "FILE_ERROR",
            "status": "Error",
            "message": self.error
        }


@dataclass
class RunOutcome:
    results: List[LocaleResult]

    def output(self) -> Dict[str, Dict]:
        return {result.locale: result.output_value() for result in self.results}

    def status_records(self) -> List[Dict[str, str]]:
        return [result.status_record() for result in self.results]

    @property
    def failed_locales(self) -> List[str]:
        return [result.locale for result in self.results if not result.ok]


def collect_locale_result(
    locales_dir: str,
    locale: str,
    source_strings: Mapping[str, str],
    placeholders: Optional[List[str]] = None,
    strict_key_coverage: bool = False
) -> LocaleResult:
    """
    Read and validate the produced file for one locale.

    Never raises for a missing or malformed file; the failure is returned
    as an error LocaleResult instead.

    Args:
        locales_dir (str): Directory holding `<locale>.json` files.
        locale (str): The target locale code.
        source_strings: The source-language strings, used for coverage checks.
        placeholders: Placeholder patterns to check in the translations.
        strict_key_coverage (bool): Treat missing keys as a failure for this locale.

    Returns:
        LocaleResult: The parsed translations or the error message.
    """
    locale_file_path = os.path.join(locales_dir, f'{locale}.json')
    try:
        with open(locale_file_path, 'r', encoding='utf-8') as f:
            translations = json.load(f)
        jsonschema.validate(instance=translations, schema=LOCALE_FILE_SCHEMA)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as read_exc:
        logger.warning("Could not read output for language %s: %s", locale, read_exc)
        return LocaleResult(locale=locale, error=str(read_exc))
    except jsonschema.ValidationError as schema_exc:
        logger.warning("Could not read output for language %s: %s", locale, schema_exc.message)
        return LocaleResult(locale=locale, error=f"Invalid locale file '{locale_file_path}': {schema_exc.message}")

    missing_keys, _ = check_key_coverage(set(source_strings.keys()), set(translations.keys()))
    missing_keys = sorted(missing_keys)
    if missing_keys:
        logger.warning("Output for language %s is missing %d key(s): %s",
                       locale, len(missing_keys), ', '.join(missing_keys))
        if strict_key_coverage:
            return LocaleResult(
                locale=locale,
                error=f"Missing {len(missing_keys)} key(s): {', '.join(missing_keys)}",
                missing_keys=missing_keys
            )

    if placeholders:
        for key, lost in check_placeholder_preservation(source_strings, translations, placeholders).items():
            if key in translations:
                logger.warning("[%s] '%s' lost placeholder(s): %s", locale, key, ', '.join(lost))

    return LocaleResult(locale=locale, translations=translations, missing_keys=missing_keys)


def collect_results(
    locales_dir: str,
    target_languages: List[str],
    source_strings: Mapping[str, str],
    placeholders: Optional[List[str]] = None,
    strict_key_coverage: bool = False,
    show_progress: bool = True
) -> RunOutcome:
    """
    Collect one LocaleResult per target locale, in input order.

    Returns:
        RunOutcome: The per-locale results.
    """
    results = []
    for locale in tqdm(target_languages, desc="Collecting locale files", unit="locale",
                       disable=not show_progress):
        results.append(collect_locale_result(
            locales_dir,
            locale,
            source_strings,
            placeholders=placeholders,
            strict_key_coverage=strict_key_coverage
        ))

    outcome = RunOutcome(results=results)
    if outcome.failed_locales:
        logger.warning("No usable output for: %s", ', '.join(outcome.failed_locales))
    return outcome
