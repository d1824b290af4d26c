import json
from typing import Any, Callable, Dict, List, Optional, Tuple

import httpx
import pytest

from lmstudio_mcp.core.tools import ToolDispatcher
from lmstudio_mcp.lmstudio import LMStudioClient
from lmstudio_mcp.mcp_server import MCPToolRegistry, build_registry

BASE_URL = "http://lmstudio.test:1234"

Route = Tuple[str, str]


class FakeLMStudio:
    """
    In-process stand-in for the LM Studio REST API, served through httpx.MockTransport.

    Routes are keyed by method and raw (still percent-encoded) path. Unknown
    routes answer 404 like the real server does for unknown models.
    """

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self._routes: Dict[Route, Callable[[httpx.Request], httpx.Response]] = {}

    def add(self, method: str, path: str, status_code: int = 200, json_body: Any = None, content: Optional[bytes] = None) -> None:
        def respond(request: httpx.Request) -> httpx.Response:
            if content is not None:
                return httpx.Response(status_code, content=content)
            return httpx.Response(status_code, json=json_body if json_body is not None else {})

        self._routes[(method, path)] = respond

    def add_error(self, method: str, path: str, error: Exception) -> None:
        def respond(request: httpx.Request) -> httpx.Response:
            raise error

        self._routes[(method, path)] = respond

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = (request.method, request.url.raw_path.decode("ascii"))
        respond = self._routes.get(route)
        if respond is None:
            return httpx.Response(404, json={"error": "not found"})
        return respond(request)

    @property
    def posted_bodies(self) -> List[Dict[str, Any]]:
        return [json.loads(r.content) for r in self.requests if r.method == "POST"]


@pytest.fixture
def fake_lmstudio() -> FakeLMStudio:
    fake = FakeLMStudio()
    fake.add("POST", "/api/v0/chat/completions", json_body={"choices": []})
    return fake


@pytest.fixture
def lmstudio_client(fake_lmstudio: FakeLMStudio) -> LMStudioClient:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(fake_lmstudio.handler))
    return LMStudioClient(BASE_URL, http_client=http_client)


@pytest.fixture
def registry(lmstudio_client: LMStudioClient) -> MCPToolRegistry:
    return build_registry(lmstudio_client)


@pytest.fixture
def dispatcher(registry: MCPToolRegistry) -> ToolDispatcher:
    return ToolDispatcher(registry)
