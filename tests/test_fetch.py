from __future__ import annotations

import logging

import aiohttp
import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer, unused_port

import upnpscpd.utils
from upnpscpd import NetworkError, ParseError, ServiceDescription, fetch
from upnpscpd.scpd import TargetType

logger = logging.getLogger(__name__)

RC_URN = "urn:schemas-upnp-org:service:RenderingControl:1"


@pytest_asyncio.fixture
async def scpd_server(rendering_control_xml):
    async def rendering_control(request):
        return web.Response(body=rendering_control_xml, content_type="text/xml")

    async def truncated(request):
        return web.Response(body=rendering_control_xml[:200], content_type="text/xml")

    async def bad_direction(request):
        body = rendering_control_xml.replace(b"<direction>out</direction>", b"<direction>both</direction>")
        return web.Response(body=body, content_type="text/xml")

    app = web.Application()
    app.router.add_get("/RenderingControl.xml", rendering_control)
    app.router.add_get("/truncated.xml", truncated)
    app.router.add_get("/bad_direction.xml", bad_direction)

    server = TestServer(app)
    await server.start_server()
    yield server
    await server.close()


@pytest_asyncio.fixture
async def session():
    yield upnpscpd.utils.g.create_session()

    await upnpscpd.utils.g.close_session()


@pytest.mark.asyncio
async def test_fetch_get_volume(scpd_server):
    description = await fetch(str(scpd_server.make_url("/RenderingControl.xml")), RC_URN)

    assert isinstance(description, ServiceDescription)
    assert description.urn == RC_URN

    outputs = list(description.actions[0].output_arguments())
    assert [argument.name for argument in outputs] == ["CurrentVolume"]

    volume = description.related_state_variable(outputs[0])
    assert volume.name == "Volume"
    assert volume.type_name() == TargetType.U16.value
    logger.info("fetched %s", description.urn)


@pytest.mark.asyncio
async def test_fetch_with_shared_session(scpd_server, session):
    description = await fetch(str(scpd_server.make_url("/RenderingControl.xml")), RC_URN)
    assert len(description.actions) == 3
    assert not session.closed


@pytest.mark.asyncio
async def test_fetch_with_client(scpd_server):
    async with aiohttp.ClientSession() as client:
        description = await fetch(
            str(scpd_server.make_url("/RenderingControl.xml")), RC_URN, client=client
        )
    assert description.state_variable("Channel").type_name() == "Channel"


@pytest.mark.asyncio
async def test_fetch_not_found(scpd_server):
    with pytest.raises(NetworkError):
        await fetch(str(scpd_server.make_url("/missing.xml")), RC_URN)


@pytest.mark.asyncio
async def test_fetch_connection_refused():
    uri = f"http://127.0.0.1:{unused_port()}/RenderingControl.xml"
    with pytest.raises(NetworkError) as info:
        await fetch(uri, RC_URN)
    assert info.value.uri == uri
    assert isinstance(info.value.__cause__, aiohttp.ClientError)


@pytest.mark.asyncio
@pytest.mark.parametrize("path", ["/truncated.xml", "/bad_direction.xml"])
async def test_fetch_parse_error(scpd_server, path):
    with pytest.raises(ParseError):
        await fetch(str(scpd_server.make_url(path)), RC_URN)


@pytest.mark.asyncio
async def test_fetch_empty_urn_before_request():
    # nothing listens on this port, so reaching the network would raise NetworkError
    uri = f"http://127.0.0.1:{unused_port()}/RenderingControl.xml"
    with pytest.raises(ParseError) as info:
        await fetch(uri, "")
    assert info.value.path == "urn"
