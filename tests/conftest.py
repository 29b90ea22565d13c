import json
import os
import subprocess

import pytest

from src.app_config import AppConfig


def make_app_config(workspace_root: str, **overrides) -> AppConfig:
    """Build an AppConfig with the production defaults, without touching config.yaml or .env."""
    values = dict(
        project_root=workspace_root,
        workspace_root=workspace_root,
        scratch_dir_name='temp_i18n',
        context_file_name='LINGO_CONTEXT.md',
        i18n_config_file_name='i18n.json',
        i18n_schema_url='https://lingo.dev/schema/i18n.json',
        i18n_version='1.10',
        lingo_command=['npx', '-y', 'lingo.dev', 'run', '--force'],
        api_key_env_var='LINGODOTDEV_API_KEY',
        api_key_placeholder='YOUR_LINGO_API_KEY',
        git_user_name='Apify Actor',
        git_user_email='actor@apify.com',
        git_commit_message='Prepare translation context',
        strict_key_coverage=False,
        output_key='OUTPUT',
        show_progress=False
    )
    values.update(overrides)
    return AppConfig(**values)


@pytest.fixture
def workspace_root(tmp_path):
    root = tmp_path / "workspace"
    root.mkdir()
    return str(root)


@pytest.fixture
def app_config(workspace_root):
    return make_app_config(workspace_root)


@pytest.fixture
def raw_input():
    return {
        "lingoApiKey": "api_live_123",
        "uiStrings": {
            "profile.greeting": "Hello, {{username}}",
            "notification.new_message": "You have {count} new messages",
            "settings.save": "Save changes"
        },
        "sourceLanguage": "en",
        "targetLanguages": ["fr", "de", "es"],
        "tone": "professional",
        "placeholders": ["{{username}}", "{count}"]
    }


@pytest.fixture
def french_strings():
    return {
        "profile.greeting": "Bonjour, {{username}}",
        "notification.new_message": "Vous avez {count} nouveaux messages",
        "settings.save": "Enregistrer les modifications"
    }


def write_locale_file(locales_dir: str, locale: str, content) -> str:
    """Write a produced locale file; strings are written as-is, anything else as JSON."""
    os.makedirs(locales_dir, exist_ok=True)
    path = os.path.join(locales_dir, f'{locale}.json')
    with open(path, 'w', encoding='utf-8') as f:
        if isinstance(content, str):
            f.write(content)
        else:
            json.dump(content, f, ensure_ascii=False, indent=2)
    return path


def completed(args, stdout='', stderr='', returncode=0) -> subprocess.CompletedProcess:
    return subprocess.CompletedProcess(args=args, returncode=returncode, stdout=stdout, stderr=stderr)
