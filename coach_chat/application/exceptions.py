class BackendError(RuntimeError):
    """Base class for failures talking to the assistant backend."""
    pass


class BackendUpstreamError(BackendError):
    """Raised when the backend is unreachable or returns a non-JSON body."""
    pass


class BackendContractError(BackendError):
    """Raised on a non-success status, an error payload, or a missing response field."""
    pass


class SessionBusyError(RuntimeError):
    """Raised when a session already has a request in flight."""
    pass


class BookingFormClosedError(RuntimeError):
    pass


class InvalidBookingDetailsError(ValueError):
    pass


class SessionNotFoundError(KeyError):
    pass
