class EliteAtomicError(Exception):
    """Base class for failures that end a run."""


class CredentialReadError(EliteAtomicError):
    """The API token could not be read from a file or stdin."""


class TransportError(EliteAtomicError):
    """The request never produced a usable HTTP response."""


class ApiRejected(EliteAtomicError):
    """Lichess answered with a non-2xx status."""

    def __init__(self, status_code: int, body: str, reason: str | None = None):
        self.status_code = status_code
        self.body = body
        self.reason = reason
        status_line = f"{status_code} {reason}" if reason else str(status_code)
        super().__init__(f"Unsuccessful API request:\n{status_line}\n{body}")


class ResponseMalformed(EliteAtomicError):
    """A 2xx response did not carry a tournament ID."""
