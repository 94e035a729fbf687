from typing import Any

import httpx
import pytest

from pdlmcp.client import PDLClient
from pdlmcp.config import Settings
from pdlmcp.tools import build_registry
from pdlmcp.tools.dispatcher import ToolDispatcher


class FakePDL:
    """Stands in for api.peopledatalabs.com behind an httpx.MockTransport."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.body: Any = {"status": 200, "data": {"full_name": "sean thorne"}}
        self.raw: bytes | None = None
        self.exc: Exception | None = None

    def respond(self, status_code: int, body: Any) -> None:
        self.status_code = status_code
        self.body = body

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        if self.raw is not None:
            return httpx.Response(self.status_code, content=self.raw)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def settings() -> Settings:
    return Settings(api_key="test-key")


@pytest.fixture
def fake_pdl() -> FakePDL:
    return FakePDL()


@pytest.fixture
def client(settings, fake_pdl) -> PDLClient:
    return PDLClient(settings, transport=httpx.MockTransport(fake_pdl))


@pytest.fixture
def dispatcher(client) -> ToolDispatcher:
    return ToolDispatcher(build_registry(), client)
