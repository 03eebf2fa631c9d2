"""Exit codes shared by every Chronicle command."""


class ExitCode:
    """Mapping of meaningful CLI exit codes."""

    SUCCESS = 0
    INVALID_INPUT = 1
    UNAUTHORIZED = 2
    STORAGE_ERROR = 3
    NOT_FOUND = 4


__all__ = ["ExitCode"]
