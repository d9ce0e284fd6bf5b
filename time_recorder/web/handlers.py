"""HTTP handlers for the time recorder endpoints.

Endpoints:
    POST /time-recorder/toggle  - Clock in if off, clock out if on
    POST /time-recorder/status  - Report today's arrival and departure times

Both take {"companycd", "username", "password"} and log in afresh; no
portal session outlives the request that created it.
"""

from __future__ import annotations

import functools
import json
import logging
from typing import Any, Callable

from aiohttp import web
from pydantic import BaseModel, ValidationError

from ..constants import (
    MSG_ALREADY_LEFT,
    MSG_INTERNAL_ERROR,
    MSG_INVALID_BODY,
    MSG_UNKNOWN_STATE,
)
from ..models.credentials import Credentials
from ..models.status import MessageResponse, StatusResponse
from ..portal.errors import AuthenticationError, InitializationError, PortalError, TransportError
from ..portal.parser import RecorderState
from ..portal.session import PortalSession, StampDirection
from .errors import BadRequestError, EncodingError

logger = logging.getLogger(__name__)

SESSION_FACTORY = web.AppKey("session_factory", Callable[[], PortalSession])

# Toggle transitions: current state -> (stamp to send, state expected afterwards)
TOGGLE_TRANSITIONS = {
    RecorderState.OFF: (StampDirection.TO_ON, RecorderState.ON),
    RecorderState.ON: (StampDirection.TO_OFF, RecorderState.END),
}


# ── Response Helpers ─────────────────────────────────────────────────────────

json_dumps = functools.partial(json.dumps, ensure_ascii=False)


def respond(status: int, body: BaseModel, dumps: Callable[[Any], str] = json_dumps) -> web.Response:
    """Serialize a response model, falling back to a plain-text 500 on failure."""
    try:
        return web.json_response(
            body.model_dump(mode="json", by_alias=True), status=status, dumps=dumps
        )
    except (TypeError, ValueError) as e:
        error = EncodingError(str(e))
        logger.error(f"Encode error: {error}")
        return web.Response(status=500, text=f"{MSG_INTERNAL_ERROR}: {error}")


def _message(status: int, message: str) -> web.Response:
    return respond(status, MessageResponse(message=message))


# ── Request Lifecycle ────────────────────────────────────────────────────────


async def _read_credentials(request: web.Request) -> Credentials:
    try:
        body = await request.json()
    except ValueError as e:
        raise BadRequestError(f"malformed JSON: {e}") from e

    try:
        return Credentials.model_validate(body)
    except ValidationError as e:
        # Only field locations and error types; input values may hold the password.
        problems = ", ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'body'}: {err['type']}" for err in e.errors()
        )
        raise BadRequestError(f"invalid credentials ({problems})") from e


async def _open_session(request: web.Request) -> tuple[PortalSession | None, web.Response | None]:
    """Read credentials, create a session, and log in.

    Returns the logged-in session, or the error response to send instead.
    """
    try:
        credentials = await _read_credentials(request)
    except BadRequestError as e:
        logger.info(f"Rejected request body: {e}")
        return None, _message(400, MSG_INVALID_BODY)

    try:
        session = request.app[SESSION_FACTORY]()
    except InitializationError as e:
        logger.error(f"Session error: {e}")
        return None, _message(500, MSG_INTERNAL_ERROR)

    try:
        await session.login(credentials)
    except (AuthenticationError, TransportError) as e:
        await session.close()
        logger.error(f"Login error: {e}")
        return None, _message(500, f"Login error: {e}")
    except BaseException:
        await session.close()
        raise

    return session, None


# ── HTTP Handlers ────────────────────────────────────────────────────────────


async def handle_toggle(request: web.Request) -> web.Response:
    session, error = await _open_session(request)
    if error is not None:
        return error

    async with session:
        if session.state is RecorderState.END:
            return _message(400, MSG_ALREADY_LEFT)
        if session.state is RecorderState.UNKNOWN:
            logger.warning(
                f"Unknown state: start_time={session.start_time}, leave_time={session.leave_time}"
            )
            return _message(500, MSG_UNKNOWN_STATE)

        direction, expected = TOGGLE_TRANSITIONS[session.state]
        try:
            await session.record_stamp(direction)
        except PortalError as e:
            logger.error(f"Stamp {direction.name} failed: {e}")
            return _message(500, f"{MSG_INTERNAL_ERROR}: {e}")

        if session.state is not expected:
            logger.warning(
                f"Unexpected state after {direction.name}: "
                f"expected={expected.value}, got={session.state.value}"
            )

        return respond(200, StatusResponse.from_times(session.start_time, session.leave_time))


async def handle_status(request: web.Request) -> web.Response:
    session, error = await _open_session(request)
    if error is not None:
        return error

    async with session:
        return respond(200, StatusResponse.from_times(session.start_time, session.leave_time))
