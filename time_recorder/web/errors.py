"""Exception types raised by the HTTP layer."""


class BadRequestError(Exception):
    """The request body is not valid credentials JSON."""


class EncodingError(Exception):
    """A response body could not be serialized."""
