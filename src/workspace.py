"""Staging of the file layout consumed by the Lingo.dev CLI."""
import json
import logging
import os
import shutil
from dataclasses import dataclass
from typing import Dict, List

from src.actor_input import ActorInput
from src.app_config import AppConfig
from src.logging_config import LOGGER_NAME

logger = logging.getLogger(LOGGER_NAME)


@dataclass
class StagedWorkspace:
    root: str
    scratch_dir: str
    locales_dir: str
    source_file_path: str
    context_file_path: str
    i18n_config_path: str

    def locale_file_path(self, locale: str) -> str:
        return os.path.join(self.locales_dir, f'{locale}.json')


def build_context_document(tone: str, placeholders: List[str]) -> str:
    """
    Build the Markdown guidance document that Lingo.dev reads as translation context.

    Args:
        tone (str): Free-text tone descriptor, e.g. "professional".
        placeholders (List[str]): Placeholder patterns that must survive translation verbatim.

    Returns:
        str: The document content.
    """
    placeholder_list = ', '.join(placeholders)
    return (
        "# Localization Context\n"
        "\n"
        "The following UI strings are part of a product interface.\n"
        "Please ensure the translation preserves the following guidelines:\n"
        "\n"
        f"- **Tone**: {tone}\n"
        f"- **Variables**: Preserve all placeholders like {placeholder_list} verbatim.\n"
        "- **Terminology**: Use consistent terminology suitable for a software interface.\n"
    )


def build_i18n_config(source_language: str, target_languages: List[str], config: AppConfig) -> Dict:
    """Build the i18n.json run configuration for the Lingo.dev CLI."""
    return {
        "$schema": config.i18n_schema_url,
        "version": config.i18n_version,
        "locale": {
            "source": source_language,
            "targets": list(target_languages)
        },
        "buckets": {
            "json": {
                # Lingo.dev resolves this glob relative to the directory holding i18n.json.
                "include": [f"{config.scratch_dir_name}/locales/[locale].json"]
            }
        }
    }


def _write_json(path: str, data) -> None:
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(data, f, ensure_ascii=False, indent=2)


def stage_workspace(root: str, actor_input: ActorInput, config: AppConfig) -> StagedWorkspace:
    """
    Prepare a fresh scratch directory and the CLI configuration under `root`.

    Any previous scratch directory is removed first. Write failures propagate.

    Args:
        root (str): Directory that receives i18n.json, the context file and the scratch directory.
        actor_input (ActorInput): The validated input.
        config (AppConfig): Application configuration.

    Returns:
        StagedWorkspace: Paths of everything that was written.
    """
    scratch_dir = os.path.join(root, config.scratch_dir_name)
    locales_dir = os.path.join(scratch_dir, 'locales')

    # The scratch directory may not exist yet
    shutil.rmtree(scratch_dir, ignore_errors=True)
    os.makedirs(locales_dir, exist_ok=True)

    workspace = StagedWorkspace(
        root=root,
        scratch_dir=scratch_dir,
        locales_dir=locales_dir,
        source_file_path=os.path.join(locales_dir, f'{actor_input.source_language}.json'),
        context_file_path=os.path.join(root, config.context_file_name),
        i18n_config_path=os.path.join(root, config.i18n_config_file_name)
    )

    _write_json(workspace.source_file_path, actor_input.ui_strings)
    logger.info("Wrote source strings to %s", workspace.source_file_path)

    with open(workspace.context_file_path, 'w', encoding='utf-8') as f:
        f.write(build_context_document(actor_input.tone, actor_input.placeholders))

    i18n_config = build_i18n_config(actor_input.source_language, actor_input.target_languages, config)
    _write_json(workspace.i18n_config_path, i18n_config)
    logger.info("Created %s configuration.", config.i18n_config_file_name)

    return workspace
