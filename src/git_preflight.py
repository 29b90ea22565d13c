"""
Best-effort git setup for the workspace root.

The Lingo.dev CLI diffs staged files against a git checkout, so the root
needs one. Nothing here raises; problems are reported in GitPreflightResult.
"""
import logging
import subprocess
from dataclasses import dataclass
from typing import List, Optional

from src.app_config import AppConfig
from src.logging_config import LOGGER_NAME

logger = logging.getLogger(LOGGER_NAME)


@dataclass
class GitPreflightResult:
    initialized: bool = False
    committed: bool = False
    warning: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.warning is None


def _run_git(args: List[str], root: str) -> subprocess.CompletedProcess:
    return subprocess.run(
        ['git'] + args,
        cwd=root,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
        check=True
    )


def is_git_checkout(root: str) -> bool:
    """
    Check whether `root` is inside a git work tree.

    Returns False when git reports otherwise, fails, or is not installed.
    """
    try:
        result = _run_git(['rev-parse', '--is-inside-work-tree'], root)
    except (subprocess.CalledProcessError, OSError):
        return False
    return result.stdout.strip() == 'true'


def init_checkout(root: str) -> bool:
    """
    Initialize a git repository in `root` unless one already exists.

    Returns:
        bool: True if a new repository was created.

    Raises:
        subprocess.CalledProcessError: If `git init` fails.
        OSError: If git cannot be executed.
    """
    if is_git_checkout(root):
        return False
    _run_git(['init'], root)
    logger.info("Initialized temporary git repo in '%s'.", root)
    return True


def commit_all(root: str, config: AppConfig) -> bool:
    """
    Stage everything under `root` and commit it with the actor's identity.

    A failing commit (e.g. nothing to commit) is not an error and returns False.
    Failures of `git add` propagate.
    """
    _run_git(['add', '.'], root)
    try:
        _run_git(
            [
                '-c', f'user.name={config.git_user_name}',
                '-c', f'user.email={config.git_user_email}',
                'commit', '-m', config.git_commit_message
            ],
            root
        )
    except subprocess.CalledProcessError as commit_exc:
        logger.debug("git commit skipped: %s", (commit_exc.stdout or commit_exc.stderr or '').strip())
        return False
    return True


def run_git_preflight(root: str, config: AppConfig) -> GitPreflightResult:
    """
    Make sure `root` is a git checkout with the staged files committed.

    Args:
        root (str): The workspace root.
        config (AppConfig): Application configuration (git identity and commit message).

    Returns:
        GitPreflightResult: What was done, plus a warning if the setup failed.
    """
    result = GitPreflightResult()
    try:
        result.initialized = init_checkout(root)
        result.committed = commit_all(root, config)
    except subprocess.CalledProcessError as git_exc:
        result.warning = (git_exc.stderr or str(git_exc)).strip()
    except OSError as os_exc:
        result.warning = str(os_exc)

    if result.warning:
        logger.warning("Git setup warning (lingo might fail): %s", result.warning)
    return result
