class GatewayError(Exception):
    """Base class for everything the persistence gateway raises."""


class NotFound(GatewayError):
    """The backend holds no document yet."""


class TransportError(GatewayError):
    """Network failure, timeout, unexpected status or unreadable body."""


class Unauthorized(GatewayError):
    """The backend rejected the bearer token."""


class EndpointUnavailable(GatewayError):
    """Neither upload endpoint accepted the files."""


class SaveFailed(Exception):
    """A write to the backend failed; local state has already been reconciled."""

    def __init__(self, message: str, cause: GatewayError):
        super().__init__(message)
        self.cause = cause


class SaveInProgress(RuntimeError):
    """A save was requested while another one is still in flight."""
