import json

import httpx
import pytest

from litreview.config import EngineConfig
from litreview.errors import TransportError
from litreview.services.agent_service import AgentService


def _service(handler, **engine_kwargs) -> AgentService:
    engine = EngineConfig(base_url="http://engine.test/api/agent", **engine_kwargs)
    return AgentService(engine, transport=httpx.MockTransport(handler))


async def test_analyze_posts_payload_and_returns_envelope() -> None:
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["body"] = json.loads(request.content)
        seen["api_key"] = request.headers.get("x-api-key")
        return httpx.Response(200, json={"success": True, "response": "{}"})

    service = _service(handler, api_key="secret")
    envelope = await service.analyze({"message": "m", "agent_id": "a"})

    assert envelope == {"success": True, "response": "{}"}
    assert seen["body"] == {"message": "m", "agent_id": "a"}
    assert seen["api_key"] == "secret"


async def test_no_api_key_header_when_unset() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert "x-api-key" not in request.headers
        return httpx.Response(200, json={"success": True, "response": {}})

    await _service(handler).analyze({})


async def test_connection_error_becomes_transport_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(TransportError, match="Could not reach"):
        await _service(handler).analyze({})


async def test_timeout_becomes_transport_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("slow", request=request)

    with pytest.raises(TransportError, match="timed out"):
        await _service(handler, timeout=1.0).analyze({})


async def test_http_error_without_envelope() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(502, json={"detail": "bad gateway"})

    with pytest.raises(TransportError) as exc:
        await _service(handler).analyze({})
    assert exc.value.status_code == 502


async def test_http_error_with_envelope_is_passed_on() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, json={"success": False, "error": "model overloaded"})

    envelope = await _service(handler).analyze({})
    assert envelope == {"success": False, "error": "model overloaded"}


async def test_non_json_body() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>oops</html>")

    with pytest.raises(TransportError, match="non-JSON"):
        await _service(handler).analyze({})
