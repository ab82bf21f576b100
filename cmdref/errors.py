"""Error kinds raised by the command store, prompts, and dispatcher."""
from __future__ import annotations

from typing import Optional

from core.cli_errors import CLIError, ExitCode


class ReadError(CLIError):
    """A commands file could not be read."""
    def __init__(self, message: str, hint: Optional[str] = None):
        super().__init__(message, ExitCode.IO_ERROR, hint)


class WriteError(CLIError):
    """The store file could not be written; its previous content is intact."""
    def __init__(self, message: str, hint: Optional[str] = None):
        super().__init__(message, ExitCode.IO_ERROR, hint)


class ParseError(CLIError):
    """A commands file is not a JSON list of command objects."""
    def __init__(self, message: str, hint: Optional[str] = None):
        super().__init__(message, ExitCode.DATA_ERROR, hint)


class PromptError(CLIError):
    """The input stream closed or a selection was impossible."""
    def __init__(self, message: str, hint: Optional[str] = None):
        super().__init__(message, ExitCode.ERROR, hint)


class UnrecognizedActionError(CLIError):
    """An action value the dispatcher does not handle (programming error)."""
    def __init__(self, message: str, hint: Optional[str] = None):
        super().__init__(message, ExitCode.ERROR, hint)
