"""Cookie-backed HTTP session against the Yorozuya time recorder portal."""

from __future__ import annotations

import logging
from enum import IntEnum
from typing import Optional

import httpx

from ..config import PORTAL_BASE_URL, PORTAL_TIMEOUT
from ..constants import (
    DEFAULT_HEADERS,
    LOGIN_STATIC_FIELDS,
    STAMP_STATIC_FIELDS,
    STAMP_TYPE_FIELD,
)
from ..models.credentials import Credentials
from .errors import (
    AnomalousStateError,
    InitializationError,
    MissingCSRFTokenError,
    SessionStateError,
    StateConflictError,
    TransportError,
)
from .parser import ParsedPage, RecorderState, parse_page

logger = logging.getLogger(__name__)


class StampDirection(IntEnum):
    """Value of timerecorder_stamping_type in the stamp form."""

    TO_ON = 1
    TO_OFF = 2


class PortalSession:
    """One logged-in conversation with the portal.

    Each instance owns its own cookie jar and is meant to live for a single
    inbound request. Every page fetched replaces the CSRF token, times, and
    state with what that page shows.
    """

    def __init__(
        self,
        base_url: str = PORTAL_BASE_URL,
        timeout: float = PORTAL_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._base_url = base_url
        try:
            self._client = httpx.AsyncClient(
                cookies=httpx.Cookies(),
                headers=DEFAULT_HEADERS,
                follow_redirects=True,
                timeout=timeout,
                transport=transport,
            )
        except Exception as e:
            raise InitializationError(f"Failed to create HTTP client: {e}") from e

        self._logged_in = False
        self.csrf_key = ""
        self.csrf_value = ""
        self.start_time: Optional[str] = None
        self.leave_time: Optional[str] = None
        self.state = RecorderState.UNKNOWN

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        await self.close()

    async def close(self):
        await self._client.aclose()

    @property
    def is_logged_in(self) -> bool:
        return self._logged_in

    @property
    def cookies(self) -> httpx.Cookies:
        return self._client.cookies

    # ── Transport ────────────────────────────────────────────────────────────

    async def _post(self, form: dict[str, str]) -> str:
        """POST a form to the portal and return the page body."""
        try:
            response = await self._client.post(self._base_url, data=form)
        except httpx.TimeoutException as e:
            raise TransportError(f"Portal request timed out: {e}") from e
        except httpx.HTTPError as e:
            raise TransportError(f"Portal request failed: {e}") from e

        # The status code says nothing about login success; the page does.
        logger.debug(
            f"[SESSION] POST module={form.get('module')}: status={response.status_code}, "
            f"size={len(response.text)} chars"
        )
        return response.text

    def _apply(self, page: ParsedPage):
        self.csrf_key = page.csrf_key
        self.csrf_value = page.csrf_value
        self.start_time = page.start_time
        self.leave_time = page.leave_time
        self.state = page.state

    # ── Operations ───────────────────────────────────────────────────────────

    async def login(self, credentials: Credentials):
        """Log in and load today's time recorder state.

        Raises:
            TransportError: The portal could not be reached.
            AuthenticationError: The returned page is not a logged-in page.
        """
        form = {**credentials.to_login_form(), **LOGIN_STATIC_FIELDS}
        body = await self._post(form)
        self._apply(parse_page(body))
        self._logged_in = True
        logger.info(f"Logged in to portal (state={self.state.value})")

    async def record_stamp(self, direction: StampDirection):
        """Press the clock-in or clock-out button and reload the state.

        Raises:
            SessionStateError: Called before a successful login.
            StateConflictError: Today's departure is already recorded.
            AnomalousStateError: The session state is UNKNOWN.
            MissingCSRFTokenError: The last page carried no CSRF token.
            TransportError: The portal could not be reached.
            AuthenticationError: The portal dropped the session.
        """
        if not self._logged_in:
            raise SessionStateError("not logged in")
        if self.state is RecorderState.END:
            raise StateConflictError("already clocked out today")
        if self.state is RecorderState.UNKNOWN:
            raise AnomalousStateError("time recorder state is unknown")
        if not self.csrf_key:
            raise MissingCSRFTokenError("CSRF token not found on last page")

        # The token's field name changes per page, so it is merged in
        # between the fixed fields rather than sent under a fixed key.
        form = {
            **STAMP_STATIC_FIELDS,
            self.csrf_key: self.csrf_value,
            STAMP_TYPE_FIELD: str(int(direction)),
        }
        body = await self._post(form)
        self._apply(parse_page(body))
        logger.info(f"Recorded stamp {direction.name} (state={self.state.value})")
