import httpx
import pytest

from aitask.http_client import USER_AGENT, build_async_client, check_status_code


@pytest.mark.asyncio
async def test_check_status_code(settings):
    def handler(request):
        assert request.headers["user-agent"] == USER_AGENT
        if request.url.path == "/missing":
            return httpx.Response(404)
        return httpx.Response(200, text="ok")

    async with build_async_client(settings, transport=httpx.MockTransport(handler)) as client:
        assert await check_status_code(client, "http://localhost:8080/ok") == 200
        assert await check_status_code(client, "http://localhost:8080/missing") == 404


@pytest.mark.asyncio
async def test_check_status_code_propagates_transport_errors():
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    async with build_async_client(transport=httpx.MockTransport(handler)) as client:
        with pytest.raises(httpx.ConnectError):
            await check_status_code(client, "http://localhost:9/")


def test_build_async_client_timeout(settings):
    client = build_async_client(settings, extra_headers={"X-Test": "1"})

    assert client.timeout.read == settings.timeout_s
    assert client.headers["x-test"] == "1"
