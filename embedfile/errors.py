class EmbedError(Exception):
    """Base class for every fatal condition of a generator run."""

    def __init__(self, message, path=None):
        super().__init__(message)
        self.path = path


class UsageError(EmbedError):
    """Missing, unknown or malformed command-line configuration."""


class OutputOpenError(EmbedError):
    """A generated file could not be created or written."""


class InputReadError(EmbedError):
    """An input file could not be opened or read."""
