from typing import Dict, List, Mapping, Set, Tuple


def check_key_coverage(base_keys: Set[str], target_keys: Set[str]) -> Tuple[Set[str], Set[str]]:
    """
    Compares the keys of a translated locale file against the source strings.

    Args:
        base_keys: Keys of the source-language strings.
        target_keys: Keys found in the translated locale file.

    Returns:
        A tuple containing two sets:
        - missing_keys: Keys present in the source but missing from the target.
        - extra_keys: Keys present in the target but absent from the source.
    """
    missing_keys = base_keys - target_keys
    extra_keys = target_keys - base_keys
    return missing_keys, extra_keys


def find_missing_placeholders(target_text: str, placeholders: List[str]) -> List[str]:
    """
    Returns the placeholder patterns that do not occur verbatim in `target_text`.
    """
    return [placeholder for placeholder in placeholders if placeholder not in target_text]


def check_placeholder_preservation(
    source: Mapping[str, str],
    target: Mapping[str, str],
    placeholders: List[str]
) -> Dict[str, List[str]]:
    """
    Checks that every placeholder used in a source string survives in its translation.

    Only placeholders that actually occur in a source value are expected in the
    matching translated value. Keys missing from `target` count as losing all
    of their placeholders.

    Args:
        source: The source-language strings.
        target: The translated strings for one locale.
        placeholders: Placeholder patterns, e.g. ["{{username}}", "{count}"].

    Returns:
        A mapping from key to the placeholders missing in its translation.
        Keys without problems are omitted, so an empty dict means all is well.
    """
    problems: Dict[str, List[str]] = {}
    for key, source_text in source.items():
        expected = [p for p in placeholders if p in str(source_text)]
        if not expected:
            continue
        translated = target.get(key)
        if not isinstance(translated, str):
            problems[key] = expected
            continue
        missing = find_missing_placeholders(translated, expected)
        if missing:
            problems[key] = missing
    return problems
