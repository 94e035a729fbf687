import json

import httpx
import pytest

from pdlmcp.client import PDLClient
from pdlmcp.exceptions import PDLAPIError
from pdlmcp.tools.schemas import OutboundRequest


@pytest.mark.asyncio
async def test_get_sends_fixed_headers(client, fake_pdl):
    data = await client.get("/person/enrich", {"email": "a@b.com"})

    assert data == fake_pdl.body
    request = fake_pdl.last
    assert request.method == "GET"
    assert request.url.host == "api.peopledatalabs.com"
    assert request.url.path == "/v5/person/enrich"
    assert request.url.params["email"] == "a@b.com"
    assert request.headers["X-Api-Key"] == "test-key"
    assert request.headers["Accept"] == "application/json"
    assert request.headers["Content-Type"] == "application/json"


@pytest.mark.asyncio
async def test_list_params_repeat(client, fake_pdl):
    await client.get("/company/enrich", {"profile": ["a", "b"]})
    assert fake_pdl.last.url.params.get_list("profile") == ["a", "b"]


@pytest.mark.asyncio
async def test_post_sends_json(client, fake_pdl):
    fake_pdl.respond(200, [{"status": 200}, {"status": 404}])
    data = await client.post("/person/bulk", {"requests": [{"params": {"email": "a@b.com"}}]})

    assert data == [{"status": 200}, {"status": 404}]
    assert fake_pdl.last.method == "POST"
    assert fake_pdl.last.url.path == "/v5/person/bulk"
    assert json.loads(fake_pdl.last.content) == {"requests": [{"params": {"email": "a@b.com"}}]}


@pytest.mark.asyncio
async def test_send_routes_by_method(client, fake_pdl):
    await client.send(OutboundRequest(method="GET", path="/autocomplete", params={"field": "skill", "text": "py"}))
    assert fake_pdl.last.method == "GET"
    await client.send(OutboundRequest(method="POST", path="/person/bulk", json_body={"requests": [1]}))
    assert fake_pdl.last.method == "POST"


@pytest.mark.asyncio
async def test_error_message_from_body(client, fake_pdl):
    fake_pdl.respond(404, {"status": 404, "error": {"type": "not_found", "message": "not found"}})

    with pytest.raises(PDLAPIError) as exc_info:
        await client.get("/person/enrich", {"email": "nobody@example.com"})

    assert exc_info.value.status_code == 404
    assert exc_info.value.message == "not found"
    assert "404" in str(exc_info.value)


@pytest.mark.asyncio
async def test_error_message_falls_back_to_reason(client, fake_pdl):
    fake_pdl.status_code = 502
    fake_pdl.raw = b"<html>bad gateway</html>"

    with pytest.raises(PDLAPIError) as exc_info:
        await client.get("/person/search", {"sql": "q"})

    assert exc_info.value.status_code == 502
    assert exc_info.value.message == "Bad Gateway"


@pytest.mark.asyncio
async def test_transport_error(client, fake_pdl):
    fake_pdl.exc = httpx.ConnectError("Connection refused")

    with pytest.raises(PDLAPIError) as exc_info:
        await client.get("/person/enrich", {"email": "a@b.com"})

    assert exc_info.value.status_code is None
    assert "Connection refused" in exc_info.value.message


@pytest.mark.asyncio
async def test_non_json_success_body(client, fake_pdl):
    fake_pdl.raw = b"not json"

    with pytest.raises(PDLAPIError, match="not valid JSON"):
        await client.get("/person/enrich", {"email": "a@b.com"})


@pytest.mark.asyncio
async def test_context_manager_closes(settings, fake_pdl):
    async with PDLClient(settings, transport=httpx.MockTransport(fake_pdl)) as pdl:
        await pdl.get("/autocomplete", {"field": "skill", "text": "py"})
    assert pdl._http.is_closed
