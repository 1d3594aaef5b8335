"""Domain exceptions for omdb-searcher."""


class OMDbSearchError(Exception):
    """Base class for every failure the command line reports."""

    exit_code = 1

    def __init__(self, message: str, original_exception: Exception = None):
        super().__init__(message)
        self.original_exception = original_exception


class UsageError(OMDbSearchError):
    """Required options are missing; usage was printed.

    Not a failure: the process exits successfully, like asking for --help.
    """

    exit_code = 0


class ConfigError(OMDbSearchError):
    """Command-line options could not be parsed or hold invalid values."""


class NetworkError(OMDbSearchError):
    """The OMDb API could not be reached."""


class DecodeError(OMDbSearchError):
    """The OMDb API answered with a body that is not the expected JSON."""


class APIError(OMDbSearchError):
    """The OMDb API answered with ``"Response": "False"``."""


class InputError(OMDbSearchError):
    """The menu selection could not be read or parsed."""
