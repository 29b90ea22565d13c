import asyncio
import logging
import os
from typing import Mapping, Optional

from apify import Actor

from src.actor_input import ActorInput, parse_actor_input
from src.app_config import AppConfig, load_app_config
from src.git_preflight import run_git_preflight
from src.lingo_cli import build_cli_env, run_lingo_cli
from src.logging_config import LOGGER_NAME
from src.result_collector import RunOutcome, collect_results
from src.workspace import stage_workspace

logger = logging.getLogger(LOGGER_NAME)


def run_localization(
    actor_input: ActorInput,
    root: str,
    config: AppConfig,
    base_env: Optional[Mapping[str, str]] = None
) -> RunOutcome:
    """
    Stage the workspace, run the Lingo.dev CLI and collect its output.

    Only a failing CLI aborts the run; git problems are logged and missing
    locale files end up as error results.

    Args:
        actor_input (ActorInput): The validated input.
        root (str): Workspace root for i18n.json, the context file and the scratch directory.
        config (AppConfig): Application configuration.
        base_env: Environment passed to the CLI. Defaults to os.environ.

    Returns:
        RunOutcome: One result per target locale, in input order.

    Raises:
        OSError: If staging the workspace fails.
        TranslationExecutionError: If the CLI fails.
    """
    logger.info(
        "Starting localization from %s to [%s]. Tone: %s",
        actor_input.source_language, ', '.join(actor_input.target_languages), actor_input.tone
    )

    workspace = stage_workspace(root, actor_input, config)

    run_git_preflight(root, config)

    env = build_cli_env(os.environ if base_env is None else base_env, actor_input.lingo_api_key, config)
    run_lingo_cli(root, env, config)

    return collect_results(
        workspace.locales_dir,
        actor_input.target_languages,
        actor_input.ui_strings,
        placeholders=actor_input.placeholders,
        strict_key_coverage=config.strict_key_coverage,
        show_progress=config.show_progress
    )


async def publish_outcome(actor, outcome: RunOutcome, config: AppConfig) -> None:
    """
    Store the translations as the run's OUTPUT record and push the status records to the dataset.
    """
    await actor.set_value(config.output_key, outcome.output())
    logger.info("Saved localized strings to %s.", config.output_key)

    await actor.push_data(outcome.status_records())


async def main():
    """
    Main function of the actor: read input, localize, publish.
    """
    await Actor.init()
    try:
        config = load_app_config()
        raw_input = await Actor.get_input()
        actor_input = parse_actor_input(raw_input, config.api_key_placeholder)
        outcome = run_localization(actor_input, config.workspace_root, config)
        await publish_outcome(Actor, outcome, config)
    except Exception as run_exc:
        logger.error("Actor failed: %s", run_exc)
        await Actor.fail(status_message=str(run_exc))
        return
    await Actor.exit()


if __name__ == "__main__":
    asyncio.run(main())
