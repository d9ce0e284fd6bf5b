"""Clock in and out of the Yorozuya time recorder over HTTP."""

__version__ = "0.1.0"
