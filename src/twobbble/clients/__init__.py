from twobbble.clients.base import AbstractDribbbleClient
from twobbble.clients.dribbble_client import DribbbleClient
from twobbble.clients.endpoints import ENDPOINTS, Endpoint, build_request
from twobbble.clients.errors import (
    DribbbleApiError,
    DribbbleClientError,
    DribbbleDecodeError,
    DribbbleTransportError,
    InvalidParameterError,
    MissingParameterError,
    PreconditionError,
)

__all__ = [
    "AbstractDribbbleClient",
    "DribbbleClient",
    "ENDPOINTS",
    "Endpoint",
    "build_request",
    "DribbbleApiError",
    "DribbbleClientError",
    "DribbbleDecodeError",
    "DribbbleTransportError",
    "InvalidParameterError",
    "MissingParameterError",
    "PreconditionError",
]
