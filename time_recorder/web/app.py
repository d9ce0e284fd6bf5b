"""aiohttp application factory for the time recorder service."""

from __future__ import annotations

from typing import Callable

from aiohttp import web

from ..portal.session import PortalSession
from .handlers import SESSION_FACTORY, handle_status, handle_toggle
from .middleware import access_log_middleware, not_found_middleware


def create_app(session_factory: Callable[[], PortalSession] = PortalSession) -> web.Application:
    """Build the application.

    Args:
        session_factory: Called once per request to get a fresh portal
            session. Tests pass one that routes to a mock transport.
    """
    app = web.Application(middlewares=[access_log_middleware, not_found_middleware])
    app[SESSION_FACTORY] = session_factory

    app.router.add_post("/time-recorder/toggle", handle_toggle)
    app.router.add_post("/time-recorder/status", handle_status)

    return app
