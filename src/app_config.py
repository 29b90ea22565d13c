"""Application configuration module for the localization actor."""
import logging
import os
import shlex
import sys
import tempfile
from dataclasses import dataclass
from typing import Dict, List, Any

import yaml
from dotenv import load_dotenv

from src.logging_config import setup_logger

DEFAULT_LINGO_COMMAND = ['npx', '-y', 'lingo.dev', 'run', '--force']


@dataclass
class AppConfig:
    """Application configuration dataclass."""
    # Core paths
    project_root: str
    workspace_root: str

    # Staged file layout
    scratch_dir_name: str
    context_file_name: str
    i18n_config_file_name: str
    i18n_schema_url: str
    i18n_version: str

    # Lingo.dev CLI
    lingo_command: List[str]
    api_key_env_var: str
    api_key_placeholder: str

    # Git preflight
    git_user_name: str
    git_user_email: str
    git_commit_message: str

    # Result handling
    strict_key_coverage: bool
    output_key: str
    show_progress: bool


def _compute_project_root() -> str:
    """Compute the project root directory."""
    script_real_path = os.path.realpath(__file__)
    script_dir = os.path.dirname(script_real_path)
    return os.path.abspath(os.path.join(script_dir, os.pardir))


def _load_dotenv_files(project_root: str) -> None:
    """Load the .env file from the project root, if there is one."""
    dotenv_path = os.path.join(project_root, '.env')
    if os.path.exists(dotenv_path):
        load_dotenv(dotenv_path)


def _load_yaml_config(project_root: str) -> Dict[str, Any]:
    """Load the YAML configuration file, falling back to defaults on any problem."""
    default_config_path = os.path.join(project_root, 'config.yaml')
    config_file = os.environ.get('LOCALIZER_CONFIG_FILE', default_config_path)

    if not os.path.isabs(config_file):
        config_file = os.path.abspath(config_file)

    config = {}
    try:
        if not os.path.exists(config_file):
            print(f"Warning: Configuration file '{config_file}' not found. Using default configuration.",
                  file=sys.stderr)
            return config

        if not os.access(config_file, os.R_OK):
            print(f"Error: Configuration file '{config_file}' exists but is not readable. Check file permissions.",
                  file=sys.stderr)
            return config

        with open(config_file, 'r', encoding='utf-8') as config_file_stream:
            loaded_config = yaml.safe_load(config_file_stream)
            if loaded_config is None:
                print(f"Warning: Configuration file '{config_file}' is empty. Using default configuration.",
                      file=sys.stderr)
            elif isinstance(loaded_config, dict):
                config = loaded_config
            else:
                print(f"Error: Configuration file '{config_file}' must contain a YAML dictionary. Using defaults.",
                      file=sys.stderr)

    except yaml.YAMLError as e:
        print(f"Error: Invalid YAML in configuration file '{config_file}': {e}", file=sys.stderr)
        print("Please check your YAML syntax. Using default configuration.", file=sys.stderr)
    except OSError as e:
        print(f"Error: Could not read configuration file '{config_file}': {e}", file=sys.stderr)
        print("Using default configuration.", file=sys.stderr)

    return config


def _resolve_log_file_path(log_config: Dict[str, Any], project_root: str) -> str:
    """
    Resolve the log file location.

    The default lives in the system temp directory so the log never lands in
    the workspace that gets committed for the Lingo.dev CLI. Relative paths
    from the config are taken relative to the project root, not the cwd.
    """
    log_file_path = log_config.get('log_file_path')
    if not log_file_path:
        return os.path.join(tempfile.gettempdir(), 'localization_actor', 'localization_actor.log')
    if not os.path.isabs(log_file_path):
        log_file_path = os.path.join(project_root, log_file_path)
    return log_file_path


def _setup_logger_from_config(config: Dict[str, Any], project_root: str) -> logging.Logger:
    """Set up logger based on configuration."""
    log_config = config.get('logging', {})
    log_level_str = log_config.get('log_level', 'INFO').upper()
    log_file_path = _resolve_log_file_path(log_config, project_root)
    log_to_console = log_config.get('log_to_console', True)
    return setup_logger(log_level_str, log_file_path, log_to_console)


def _log_dotenv_status(logger: logging.Logger, project_root: str) -> None:
    """Log the status of .env file loading."""
    dotenv_path = os.path.join(project_root, '.env')

    if os.path.exists(dotenv_path):
        logger.info("Loaded environment variables from: %s", dotenv_path)
    else:
        logger.info(
            "No .env file found in project root ('%s'). Relying on system environment variables if any.",
            dotenv_path
        )


def _parse_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ('1', 'true', 'yes', 'on')


def _resolve_lingo_command(config: Dict[str, Any]) -> List[str]:
    """Resolve the CLI command, preferring the LINGO_CLI_COMMAND environment variable."""
    command_from_env = os.environ.get('LINGO_CLI_COMMAND')
    if command_from_env:
        return shlex.split(command_from_env)

    command = config.get('lingo_command', DEFAULT_LINGO_COMMAND)
    if isinstance(command, str):
        return shlex.split(command)
    return [str(part) for part in command]


def load_app_config() -> AppConfig:
    """
    Load application configuration from YAML file and environment variables.

    Returns:
        AppConfig: The loaded application configuration.
    """
    project_root = _compute_project_root()

    _load_dotenv_files(project_root)

    config = _load_yaml_config(project_root)

    logger = _setup_logger_from_config(config, project_root)

    _log_dotenv_status(logger, project_root)

    # The workspace root receives i18n.json, the context file and the scratch directory.
    workspace_root = os.environ.get('LOCALIZER_WORKSPACE_ROOT', config.get('workspace_root') or os.getcwd())
    workspace_root = os.path.abspath(workspace_root)

    strict_key_coverage = _parse_bool(
        os.environ.get('STRICT_KEY_COVERAGE', config.get('strict_key_coverage', False))
    )

    return AppConfig(
        project_root=project_root,
        workspace_root=workspace_root,
        scratch_dir_name=config.get('scratch_dir_name', 'temp_i18n'),
        context_file_name=config.get('context_file_name', 'LINGO_CONTEXT.md'),
        i18n_config_file_name=config.get('i18n_config_file_name', 'i18n.json'),
        i18n_schema_url=config.get('i18n_schema_url', 'https://lingo.dev/schema/i18n.json'),
        i18n_version=str(config.get('i18n_version', '1.10')),
        lingo_command=_resolve_lingo_command(config),
        api_key_env_var=config.get('api_key_env_var', 'LINGODOTDEV_API_KEY'),
        api_key_placeholder=config.get('api_key_placeholder', 'YOUR_LINGO_API_KEY'),
        git_user_name=config.get('git_user_name', 'Apify Actor'),
        git_user_email=config.get('git_user_email', 'actor@apify.com'),
        git_commit_message=config.get('git_commit_message', 'Prepare translation context'),
        strict_key_coverage=strict_key_coverage,
        output_key=config.get('output_key', 'OUTPUT'),
        show_progress=_parse_bool(config.get('show_progress', False))
    )
