"""Failure types raised by skyterm components."""


class SkytermError(Exception):
    """Base class for all skyterm failures."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class FetchError(SkytermError):
    """The forecast could not be retrieved. Terminal for the run."""


class TransportError(FetchError):
    """Connection, DNS, TLS or timeout failure before a response arrived."""


class DecodeError(FetchError):
    """The response body is not JSON or does not match the expected schema."""


class RemoteError(FetchError):
    """The provider answered with a non-2xx status.

    Open-Meteo rejects unknown field names this way, with a JSON body
    carrying a human readable ``reason``.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        reason: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.status_code = status_code
        self.reason = reason


class TerminalError(SkytermError):
    """Raw mode or screen buffer setup/teardown failed."""
