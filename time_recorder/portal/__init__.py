from .errors import (
    AnomalousStateError,
    AuthenticationError,
    InitializationError,
    MissingCSRFTokenError,
    PortalError,
    SessionStateError,
    StampingError,
    StateConflictError,
    TransportError,
)
from .parser import ParsedPage, RecorderState, derive_state, parse_page
from .session import PortalSession, StampDirection

__all__ = [
    "AnomalousStateError",
    "AuthenticationError",
    "InitializationError",
    "MissingCSRFTokenError",
    "ParsedPage",
    "PortalError",
    "PortalSession",
    "RecorderState",
    "SessionStateError",
    "StampDirection",
    "StampingError",
    "StateConflictError",
    "TransportError",
    "derive_state",
    "parse_page",
]
