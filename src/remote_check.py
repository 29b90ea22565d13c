"""
Manual check of the deployed actor.

Runs the actor on the platform with a sample input, prints the OUTPUT record
and the dataset summary, and reports whether every placeholder survived
translation. Needs APIFY_TOKEN; LINGO_API_KEY is forwarded as lingoApiKey.

Usage:
    python -m src.remote_check [--actor-id ID] [--output-file test_output.json]
"""
import argparse
import json
import os
import sys
from typing import Dict, List, Optional, Tuple

from apify_client import ApifyClient
from dotenv import load_dotenv

from src.result_collector import MISSING_TRANSLATION_MARKER
from src.translation_validator import check_placeholder_preservation

DEFAULT_ACTOR_ID = "RyzqJFgd8GV0HwFah"

SAMPLE_UI_STRINGS = {
    "auth.login.title": "Welcome back",
    "auth.login.button": "Sign in",
    "auth.login.error": "Invalid email or password",
    "profile.greeting": "Hello, {{username}}",
    "checkout.confirm": "Are you sure you want to proceed?",
    "notification.new_message": "You have {count} new messages",
    "settings.save": "Save changes",
    "error.generic": "Something went wrong. Please try again."
}

SEPARATOR = "=" * 59


def build_sample_input(lingo_api_key: str) -> Dict:
    return {
        "lingoApiKey": lingo_api_key,
        "uiStrings": dict(SAMPLE_UI_STRINGS),
        "sourceLanguage": "en",
        "targetLanguages": ["fr", "de", "es"],
        "tone": "professional",
        "placeholders": ["{{username}}", "{count}"]
    }


def summarize_placeholder_check(output: Optional[Dict], run_input: Dict) -> Tuple[List[str], bool]:
    """
    Check placeholder preservation for every target language of `run_input`.

    Args:
        output: The OUTPUT record of the run, or None if it was not found.
        run_input: The input the actor was called with.

    Returns:
        A tuple of report lines and whether every placeholder was preserved.
    """
    if not output:
        return ["No OUTPUT to check."], False

    lines = []
    all_preserved = True
    for lang in run_input["targetLanguages"]:
        translations = output.get(lang)
        if not isinstance(translations, dict) or translations == MISSING_TRANSLATION_MARKER:
            lines.append(f"[{lang}] Translation missing")
            all_preserved = False
            continue

        problems = check_placeholder_preservation(
            run_input["uiStrings"], translations, run_input["placeholders"]
        )
        for placeholder in run_input["placeholders"]:
            lost = any(placeholder in missing for missing in problems.values())
            lines.append(f"[{lang}] {placeholder}: {'Missing' if lost else 'Preserved'}")
        if problems:
            all_preserved = False
    return lines, all_preserved


def format_dataset_items(items: List[Dict]) -> List[str]:
    lines = []
    for item in items:
        icon = "OK " if item.get("status") == "Success" else "ERR"
        lines.append(f"{icon} [{item.get('language')}] {item.get('key')}: {item.get('message')}")
    return lines


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the deployed localization actor and check its output.")
    parser.add_argument(
        "--actor-id",
        default=os.environ.get("APIFY_ACTOR_ID", DEFAULT_ACTOR_ID),
        help="Actor ID or name (default: $APIFY_ACTOR_ID or the published actor)."
    )
    parser.add_argument(
        "--output-file",
        help="Also write the OUTPUT record to this JSON file."
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    args = parse_args(argv)

    token = os.environ.get("APIFY_TOKEN")
    if not token:
        print("APIFY_TOKEN is not set.", file=sys.stderr)
        return 2

    run_input = build_sample_input(os.environ.get("LINGO_API_KEY", "YOUR_LINGO_API_KEY"))
    print(f"UI Strings: {len(run_input['uiStrings'])} keys")
    print(f"Source Language: {run_input['sourceLanguage']}")
    print(f"Target Languages: {', '.join(run_input['targetLanguages'])}")
    print(f"Tone: {run_input['tone']}")
    print(f"Placeholders: {', '.join(run_input['placeholders'])}")
    print()

    client = ApifyClient(token)
    print("Running Actor (this may take 1-2 minutes)...")
    run = client.actor(args.actor_id).call(run_input=run_input)
    if run is None:
        print("Actor run did not return run details.", file=sys.stderr)
        return 1
    print(f"Actor run completed with status: {run['status']}")
    print(f"Run ID: {run['id']}")
    print()

    record = client.key_value_store(run["defaultKeyValueStoreId"]).get_record("OUTPUT")
    output = record["value"] if record else None
    if output is None:
        print("No OUTPUT found in Key-Value Store")
    else:
        print(SEPARATOR)
        print("LOCALIZATION OUTPUT".center(len(SEPARATOR)))
        print(SEPARATOR)
        print(json.dumps(output, ensure_ascii=False, indent=2))
        print(SEPARATOR)
        if args.output_file:
            with open(args.output_file, "w", encoding="utf-8") as f:
                json.dump(output, f, ensure_ascii=False, indent=2)
            print(f"Output saved to {args.output_file}")

    items = client.dataset(run["defaultDatasetId"]).list_items().items
    print()
    print(f"Dataset Summary ({len(items)} items):")
    for line in format_dataset_items(items):
        print(f"  {line}")

    print()
    print("Placeholder Preservation Check:")
    lines, all_preserved = summarize_placeholder_check(output, run_input)
    for line in lines:
        print(f"  {line}")
    print()
    print("All placeholders preserved correctly!" if all_preserved else "Some placeholders may be missing")
    return 0 if all_preserved else 1


if __name__ == "__main__":
    sys.exit(main())
