"""Checks on the platform build files under .actor/."""
import json
import os

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))
ACTOR_DIR = os.path.join(PROJECT_ROOT, '.actor')


def _read(path):
    with open(path, encoding='utf-8') as f:
        return f.read()


def test_actor_json_declares_dockerfile_and_input_schema():
    actor_json = json.loads(_read(os.path.join(ACTOR_DIR, 'actor.json')))

    assert actor_json["dockerfile"] == "./Dockerfile"
    assert os.path.isfile(os.path.join(ACTOR_DIR, actor_json["dockerfile"]))
    assert os.path.isfile(os.path.join(ACTOR_DIR, actor_json["input"]))


def test_dockerfile_provides_cli_tools_and_entry_point():
    dockerfile = _read(os.path.join(ACTOR_DIR, 'Dockerfile'))

    assert dockerfile.startswith("FROM apify/actor-python")
    for package in ("nodejs", "npm", "git"):
        assert package in dockerfile.split()
    assert 'CMD ["python", "-m", "src.localization_actor"]' in dockerfile


def test_input_schema_requires_strings_and_targets():
    schema = json.loads(_read(os.path.join(ACTOR_DIR, 'input_schema.json')))

    assert schema["required"] == ["uiStrings", "targetLanguages"]
    assert schema["properties"]["sourceLanguage"]["default"] == "en"
    assert schema["properties"]["tone"]["default"] == "neutral"
