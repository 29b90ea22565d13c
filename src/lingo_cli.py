"""Invocation of the Lingo.dev CLI."""
import logging
import subprocess
from typing import Dict, Mapping, Optional

from src.actor_input import has_usable_api_key
from src.app_config import AppConfig
from src.errors import TranslationExecutionError
from src.logging_config import LOGGER_NAME

logger = logging.getLogger(LOGGER_NAME)


def build_cli_env(base_env: Mapping[str, str], api_key: Optional[str], config: AppConfig) -> Dict[str, str]:
    """
    Copy `base_env` and inject the Lingo.dev API key when one was provided.

    Args:
        base_env: The environment to pass through, normally os.environ.
        api_key: The key from the actor input, if any.
        config: Application configuration (variable name and placeholder value).

    Returns:
        Dict[str, str]: The environment for the CLI subprocess.
    """
    env = dict(base_env)
    if has_usable_api_key(api_key, config.api_key_placeholder):
        env[config.api_key_env_var] = api_key
    return env


def run_lingo_cli(root: str, env: Mapping[str, str], config: AppConfig) -> subprocess.CompletedProcess:
    """
    Run the Lingo.dev CLI in `root` and wait for it to finish.

    Args:
        root (str): The workspace root holding i18n.json.
        env: Environment for the subprocess.
        config (AppConfig): Application configuration (the command line).

    Returns:
        subprocess.CompletedProcess: The finished process with captured output.

    Raises:
        TranslationExecutionError: If the CLI cannot be started or exits with a non-zero status.
    """
    logger.info("Executing Lingo.dev CLI: %s", ' '.join(config.lingo_command))
    try:
        result = subprocess.run(
            config.lingo_command,
            cwd=root,
            env=dict(env),
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            check=True
        )
    except subprocess.CalledProcessError as cli_exc:
        logger.error("Lingo CLI Execution Failed!")
        if cli_exc.stdout:
            logger.info("Stdout: %s", cli_exc.stdout)
        if cli_exc.stderr:
            logger.error("Stderr: %s", cli_exc.stderr)
        message = f"Lingo.dev translation failed: {cli_exc}"
        if cli_exc.stderr:
            message = f"{message}\n{cli_exc.stderr.strip()}"
        raise TranslationExecutionError(
            message,
            stdout=cli_exc.stdout,
            stderr=cli_exc.stderr,
            returncode=cli_exc.returncode
        ) from cli_exc
    except OSError as os_exc:
        logger.error("Lingo CLI Execution Failed!")
        raise TranslationExecutionError(f"Lingo.dev translation failed: {os_exc}") from os_exc

    logger.info("Lingo CLI Output: %s", result.stdout)
    if result.stderr:
        logger.warning("Lingo CLI Stderr: %s", result.stderr)
    return result
