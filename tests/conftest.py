from __future__ import annotations

import pytest
from aiohttp import web
from aiohttp.test_utils import TestClient, TestServer

from time_recorder.web.app import create_app

from .fakes import FakePortal


@pytest.fixture
def credentials_body() -> dict:
    return {"companycd": "A0001", "username": "yamada", "password": "hunter2"}


@pytest.fixture
async def app_client():
    """Start test servers for arbitrary apps and close them afterwards."""
    clients: list[TestClient] = []

    async def _make(app: web.Application) -> TestClient:
        client = TestClient(TestServer(app))
        await client.start_server()
        clients.append(client)
        return client

    yield _make

    for client in clients:
        await client.close()


@pytest.fixture
def make_client(app_client):
    """Start a test server whose portal sessions talk to the given FakePortal."""

    async def _make(portal: FakePortal) -> TestClient:
        return await app_client(create_app(session_factory=portal.session))

    return _make
