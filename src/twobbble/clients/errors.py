"""Errors raised by the Dribbble client.

Precondition errors are raised before any request is sent. The remaining
kinds describe a request that was sent and failed.
"""


class DribbbleClientError(Exception):
    """Base class for every error the client raises."""

    def __init__(self, message: str, operation: str | None = None) -> None:
        self.operation = operation
        super().__init__(message)


class PreconditionError(DribbbleClientError, ValueError):
    """A call was rejected before dispatch."""

    def __init__(self, message: str, operation: str, parameter: str) -> None:
        self.parameter = parameter
        super().__init__(message, operation)


class MissingParameterError(PreconditionError):
    def __init__(self, operation: str, parameter: str) -> None:
        super().__init__(
            f"{operation}: required parameter '{parameter}' is missing or empty",
            operation,
            parameter,
        )


class InvalidParameterError(PreconditionError):
    def __init__(self, operation: str, parameter: str, reason: str) -> None:
        super().__init__(f"{operation}: parameter '{parameter}' {reason}", operation, parameter)


class DribbbleTransportError(DribbbleClientError):
    """No usable response arrived: connect, timeout, redirect or content-decoding failure."""


class DribbbleApiError(DribbbleClientError):
    """The API answered with a non-2xx status."""

    def __init__(self, operation: str, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"{operation}: HTTP {status_code}", operation)


class DribbbleDecodeError(DribbbleClientError):
    """The response body did not match the expected entity shape."""

    def __init__(self, operation: str, body: str, reason: str) -> None:
        self.body = body
        super().__init__(f"{operation}: undecodable response ({reason})", operation)
