"""Exception types raised while talking to the Yorozuya portal."""


class PortalError(Exception):
    """Base exception for all portal session errors."""


class InitializationError(PortalError):
    """The HTTP client backing a session could not be constructed."""


class TransportError(PortalError):
    """Network failure or timeout while reaching the portal."""


class AuthenticationError(PortalError):
    """The fetched page lacks the logged-in marker.

    The portal answers 200 for failed logins too, so this is the only
    signal. It does not tell a wrong password apart from other failures.
    """


class StampingError(PortalError):
    """A time record could not be attempted from the current session state."""


class SessionStateError(StampingError):
    """Stamping was requested before a successful login."""


class MissingCSRFTokenError(StampingError):
    """The last page carried no __sectag_ token to authorize the stamp."""


class StateConflictError(StampingError):
    """Both arrival and departure are already recorded for today."""


class AnomalousStateError(StampingError):
    """Departure is recorded without an arrival."""
