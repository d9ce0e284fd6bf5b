"""Parse Yorozuya portal HTML to recover the time recorder state.

The portal offers no structured API, so everything is read from the
rendered page:
1. Login check: the user name block only appears for a logged-in user
2. CSRF token: the per-page __sectag_<hex> hidden field
3. Arrival / departure times printed under the time recorder buttons

Extraction strategy for the CSRF token:
1. Try the raw-text pattern (matches the portal's own attribute order)
2. Fall back to an element lookup with BeautifulSoup

Only the login check is fatal. Anything else that does not match is
treated as absent.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from bs4 import BeautifulSoup

from ..constants import (
    AUTHORIZED_MARKER,
    CSRF_NAME_PATTERN,
    CSRF_PATTERN,
    CSRF_VALUE_PATTERN,
    LEAVE_TIME_PATTERN,
    START_TIME_PATTERN,
)
from .errors import AuthenticationError

logger = logging.getLogger(__name__)


class RecorderState(Enum):
    """Attendance state shown by the time recorder for today."""

    UNKNOWN = "unknown"  # also the value before any page was parsed
    OFF = "off"  # before clocking in
    ON = "on"  # clocked in
    END = "end"  # clocked out


@dataclass(frozen=True)
class ParsedPage:
    csrf_key: str = ""
    csrf_value: str = ""
    start_time: Optional[str] = None
    leave_time: Optional[str] = None
    state: RecorderState = RecorderState.UNKNOWN


# ── Field Extractors ─────────────────────────────────────────────────────────


def is_authorized(html: str) -> bool:
    return AUTHORIZED_MARKER in html


def _extract_csrf_from_soup(html: str) -> tuple[str, str]:
    """Find the token as an <input> element regardless of attribute order."""
    soup = BeautifulSoup(html, "html.parser")
    field = soup.find("input", attrs={"name": CSRF_NAME_PATTERN})
    if field is None:
        return "", ""
    value = field.get("value") or ""
    if not CSRF_VALUE_PATTERN.match(value):
        return "", ""
    return field["name"], value


def extract_csrf(html: str) -> tuple[str, str]:
    """Return the (field name, value) of the page's CSRF token.

    Returns a pair of empty strings when the page has no token.
    """
    match = CSRF_PATTERN.search(html)
    if match:
        return match.group(1), match.group(2)

    key, value = _extract_csrf_from_soup(html)
    if key:
        logger.info(f"CSRF token found via element lookup: {key}")
        return key, value

    logger.warning("CSRF token not found in page.")
    return "", ""


def _extract_time(pattern, html: str) -> Optional[str]:
    match = pattern.search(html)
    return match.group(1) if match else None


def extract_times(html: str) -> tuple[Optional[str], Optional[str]]:
    """Return (arrival, departure) as HH:MM strings, None where absent."""
    return _extract_time(START_TIME_PATTERN, html), _extract_time(LEAVE_TIME_PATTERN, html)


# ── State Derivation ─────────────────────────────────────────────────────────


def derive_state(start_time: Optional[str], leave_time: Optional[str]) -> RecorderState:
    """Map which times are present to the time recorder state.

    | start   | leave   | state   |
    |---------|---------|---------|
    | absent  | absent  | OFF     |
    | present | absent  | ON      |
    | present | present | END     |
    | absent  | present | UNKNOWN |

    The last row is left as UNKNOWN rather than guessed at.
    """
    if not start_time and not leave_time:
        return RecorderState.OFF
    if start_time and not leave_time:
        return RecorderState.ON
    if start_time and leave_time:
        return RecorderState.END

    logger.warning(
        f"Unknown state: start time not found, but leave time found (leave_time={leave_time})"
    )
    return RecorderState.UNKNOWN


# ── Page Parser ──────────────────────────────────────────────────────────────


def parse_page(html: str) -> ParsedPage:
    """Parse a portal page fetched with a session's cookies.

    Raises:
        AuthenticationError: The page is not rendered for a logged-in user,
            whatever the HTTP status was.
    """
    if not is_authorized(html):
        raise AuthenticationError("unauthorized")

    csrf_key, csrf_value = extract_csrf(html)
    start_time, leave_time = extract_times(html)
    state = derive_state(start_time, leave_time)

    logger.debug(
        f"[PARSER] state={state.value}, start_time={start_time}, "
        f"leave_time={leave_time}, csrf_found={bool(csrf_key)}"
    )
    return ParsedPage(
        csrf_key=csrf_key,
        csrf_value=csrf_value,
        start_time=start_time,
        leave_time=leave_time,
        state=state,
    )
