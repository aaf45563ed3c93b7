class KagiError(Exception):
    """A base exception for the Kagi client."""

    msg: str

    def __init__(self, msg: str):
        self.msg = msg
        super().__init__(msg)

    def __str__(self) -> str:
        return self.msg


class KagiValidationError(KagiError, ValueError):
    """An exception for arguments rejected before any request is sent."""


class KagiAuthenticationError(KagiError):
    """An exception for when Kagi rejects the session token."""

    def __init__(self):
        super().__init__("Invalid or expired session token")


class KagiNetworkError(KagiError):
    """An exception for when Kagi cannot be reached."""

    def __init__(self):
        super().__init__("Network error: Unable to connect to Kagi")


class KagiHTTPError(KagiError):
    """An exception for any other unsuccessful HTTP status."""

    status: int
    reason: str | None

    def __init__(self, status: int, reason: str | None):
        self.status = status
        self.reason = reason
        super().__init__(f"HTTP {status}: {reason or ''}".rstrip())


class KagiParseError(KagiError):
    """An exception for a response body that could not be interpreted."""


class KagiUpstreamError(KagiError):
    """An exception for an error reported inside the summary payload."""
