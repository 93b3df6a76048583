"""
Shared fixtures: a fake JasperReports Server built on httpx.MockTransport.
"""

from typing import Callable, List

import httpx
import pytest

from jasperclient.rest_client import JasperRestClient
from jasperclient.server_profile import ServerProfile

SERVER_URL = "http://localhost:8080/jasperserver"


class FakeServer:
    """Routes requests to a handler and remembers every request it saw."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.handler = handler
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def profile():
    return ServerProfile(
        server_url=SERVER_URL + "/",
        username="jasperadmin",
        password="jasperadmin",
        organization="organization_1",
        alias="Mobile Demo",
    )


@pytest.fixture
def make_client(profile):
    """Build a client whose HTTP traffic goes to ``handler``; returns (client, server)."""
    clients = []

    def factory(handler, **kwargs):
        server = FakeServer(handler)
        kwargs.setdefault("max_retries", 0)
        client = JasperRestClient(profile, transport=httpx.MockTransport(server), **kwargs)
        clients.append(client)
        return client, server

    yield factory

    for client in clients:
        client.close()
