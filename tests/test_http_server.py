import json

import pytest
from fastapi.testclient import TestClient

from pdlmcp.main import create_app


@pytest.fixture
def api(dispatcher):
    with TestClient(create_app(dispatcher=dispatcher)) as test_client:
        yield test_client


def rpc(api, method, params=None, request_id=1):
    body = {"jsonrpc": "2.0", "id": request_id, "method": method}
    if params is not None:
        body["params"] = params
    response = api.post("/mcp", json=body)
    assert response.status_code == 200
    return response.json()


def test_root_and_health(api):
    assert api.get("/").json()["name"] == "peopledatalabs-server"
    assert api.get("/health").json() == {"status": "healthy"}


def test_tools_list(api):
    data = rpc(api, "tools/list")

    assert data["id"] == 1
    tools = data["result"]["tools"]
    assert len(tools) == 10
    assert {"name", "description", "inputSchema"} == set(tools[0])


def test_tools_call_success(api, fake_pdl):
    data = rpc(api, "tools/call", {"name": "enrich_person", "arguments": {"email": "a@b.com"}})

    assert "error" not in data
    result = data["result"]
    assert result["isError"] is False
    assert result["content"][0]["type"] == "text"
    assert json.loads(result["content"][0]["text"]) == fake_pdl.body


def test_tools_call_remote_error(api, fake_pdl):
    fake_pdl.respond(404, {"error": {"message": "not found"}})

    data = rpc(api, "tools/call", {"name": "enrich_company", "arguments": {"name": "nope"}})

    result = data["result"]
    assert result["isError"] is True
    assert "404" in result["content"][0]["text"]
    assert "not found" in result["content"][0]["text"]


def test_tools_call_unknown_tool(api, fake_pdl):
    data = rpc(api, "tools/call", {"name": "nope", "arguments": {}}, request_id="abc")

    assert data["id"] == "abc"
    assert data["error"]["code"] == -32601
    assert "result" not in data
    assert fake_pdl.requests == []


def test_tools_call_invalid_params(api, fake_pdl):
    data = rpc(api, "tools/call", {"name": "search_people", "arguments": {"query": "q", "size": 500}})

    assert data["error"]["code"] == -32602
    assert "size" in data["error"]["message"]
    assert fake_pdl.requests == []


def test_tools_call_without_name(api):
    data = rpc(api, "tools/call", {"arguments": {}})
    assert data["error"]["code"] == -32602


def test_unknown_method(api):
    data = rpc(api, "resources/list")
    assert data["error"]["code"] == -32601
