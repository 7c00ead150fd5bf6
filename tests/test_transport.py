from __future__ import annotations

from collections.abc import AsyncIterator

import aiohttp
import pytest
import pytest_asyncio
from aiohttp import test_utils, web

from pyctabus._transport import HttpTransport
from pyctabus.config import BusTrackerConfig
from pyctabus.exceptions import CtaBusTransportError


async def _directions(request: web.Request) -> web.Response:
    return web.json_response({"bustime-response": {"directions": [{"dir": f"{request.query['rt']}-Northbound"}]}})


async def _broken(_request: web.Request) -> web.Response:
    return web.Response(status=500, text="upstream exploded")


async def _not_json(_request: web.Request) -> web.Response:
    return web.Response(text="<html>maintenance</html>", content_type="text/html")


async def _bad_utf8(_request: web.Request) -> web.Response:
    return web.Response(
        body=b'{"bustime-response":{"routes":[{"rt":"22","rtnm":"\xff\xfe"}]}}',
        content_type="application/json",
        charset="utf-8",
    )


@pytest_asyncio.fixture
async def server() -> AsyncIterator[test_utils.TestServer]:
    app = web.Application()
    app.router.add_get("/cta/bus/directions", _directions)
    app.router.add_get("/cta/bus/stops", _broken)
    app.router.add_get("/cta/bus/vehicles", _not_json)
    app.router.add_get("/cta/bus/routes", _bad_utf8)
    async with test_utils.TestServer(app) as test_server:
        yield test_server


@pytest.mark.asyncio
async def test_get_json_sends_params(server: test_utils.TestServer) -> None:
    config = BusTrackerConfig(base_url=str(server.make_url("/")))
    async with aiohttp.ClientSession() as session:
        transport = HttpTransport(config, session)
        body = await transport.get_json("/cta/bus/directions", {"rt": "22"})

    assert body == {"bustime-response": {"directions": [{"dir": "22-Northbound"}]}}


@pytest.mark.asyncio
async def test_non_200_raises_transport_error(server: test_utils.TestServer) -> None:
    config = BusTrackerConfig(base_url=str(server.make_url("/")))
    async with aiohttp.ClientSession() as session:
        transport = HttpTransport(config, session)
        with pytest.raises(CtaBusTransportError) as exc_info:
            await transport.get_json("/cta/bus/stops", {"rt": "22", "direction": "Northbound"})

    assert exc_info.value.status_code == 500
    assert exc_info.value.endpoint == "/cta/bus/stops"


@pytest.mark.asyncio
async def test_invalid_json_raises_transport_error(server: test_utils.TestServer) -> None:
    config = BusTrackerConfig(base_url=str(server.make_url("/")))
    async with aiohttp.ClientSession() as session:
        transport = HttpTransport(config, session)
        with pytest.raises(CtaBusTransportError, match="Invalid JSON"):
            await transport.get_json("/cta/bus/vehicles", {"rt": "22"})


@pytest.mark.asyncio
async def test_connection_failure_raises_transport_error() -> None:
    # Port 9 (discard) on localhost is closed in test environments.
    config = BusTrackerConfig(base_url="http://127.0.0.1:9")
    async with aiohttp.ClientSession() as session:
        transport = HttpTransport(config, session)
        with pytest.raises(CtaBusTransportError) as exc_info:
            await transport.get_json("/cta/bus/routes")

    assert exc_info.value.status_code is None


@pytest.mark.asyncio
async def test_undecodable_body_raises_transport_error(server: test_utils.TestServer) -> None:
    config = BusTrackerConfig(base_url=str(server.make_url("/")))
    async with aiohttp.ClientSession() as session:
        transport = HttpTransport(config, session)
        with pytest.raises(CtaBusTransportError, match="Invalid JSON") as exc_info:
            await transport.get_json("/cta/bus/routes")

    assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)
