"""
Logging for the localization actor.

All modules log through the `localization_actor` logger. Records go to a
log file kept outside the committed workspace and to stderr, where they are
routed through tqdm so the optional locale progress bar stays intact. The
Apify platform shows stderr in the run log, so console output is what the
actor's users see.
"""
import logging
import sys
import os
from logging import Handler

from tqdm import tqdm

LOGGER_NAME = "localization_actor"
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


class TqdmLoggingHandler(Handler):
    """Writes records to stderr via tqdm.write, keeping any active progress bar on its own line."""

    def __init__(self, level=logging.NOTSET):
        super().__init__(level)

    def emit(self, record):
        try:
            msg = self.format(record)
            tqdm.write(msg, file=sys.stderr)
            self.flush()
        except (KeyboardInterrupt, SystemExit):
            raise
        except Exception:
            self.handleError(record)


def setup_logger(log_level_str: str, log_file_path: str, log_to_console: bool) -> logging.Logger:
    """
    (Re)configure the `localization_actor` logger.

    Calling it again replaces the previous handlers, so loading the config
    twice in one process does not duplicate run-log lines. The logger does
    not propagate to the root logger, which the Apify SDK configures for its
    own messages.

    Args:
        log_level_str: Level name such as 'INFO'; unknown names fall back to INFO.
        log_file_path: Absolute path of the log file, or an empty string for no file.
        log_to_console: Whether to write to stderr (the platform run log).

    Returns:
        The configured logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, log_level_str.upper(), logging.INFO))

    if logger.hasHandlers():
        logger.handlers.clear()
    logger.propagate = False

    formatter = logging.Formatter(LOG_FORMAT)

    if log_file_path:
        log_dir = os.path.dirname(log_file_path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.FileHandler(log_file_path, encoding='utf-8')
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if log_to_console:
        console_handler = TqdmLoggingHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    return logger
