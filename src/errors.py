"""Exceptions raised by the localization actor."""
from typing import Optional


class LocalizationError(Exception):
    """Base class for errors that fail a localization run."""


class InvalidInputError(LocalizationError):
    """The actor input cannot be used to start a run."""


class MissingInputError(InvalidInputError):
    def __init__(self, message: str = "Input is missing!"):
        super().__init__(message)


class EmptyStringsError(InvalidInputError):
    def __init__(self, message: str = "uiStrings is empty or missing. Please provide key-value pairs to localize."):
        super().__init__(message)


class EmptyTargetsError(InvalidInputError):
    def __init__(
        self,
        message: str = "targetLanguages array is empty. Please provide at least one target language code."
    ):
        super().__init__(message)


class TranslationExecutionError(LocalizationError):
    """
    The Lingo.dev CLI could not be started or exited with a non-zero status.

    The captured output is kept on the exception so callers can report it.
    """

    def __init__(
        self,
        message: str,
        stdout: Optional[str] = None,
        stderr: Optional[str] = None,
        returncode: Optional[int] = None
    ):
        super().__init__(message)
        self.stdout = stdout
        self.stderr = stderr
        self.returncode = returncode
