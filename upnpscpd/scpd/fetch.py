from __future__ import annotations

import asyncio
import logging

import aiohttp

from ..errors import NetworkError, ParseError
from ..settings import settings
from ..utils import ClientSession, g
from .description import ServiceDescription, parse_scpd

logger = logging.getLogger(__name__)


async def _get_body(uri: str, client: aiohttp.ClientSession) -> bytes:
    try:
        async with client.get(uri) as response:
            response.raise_for_status()
            return await response.read()
    except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
        logger.error("get spec %s failed %s %s", uri, exc.__class__.__name__, exc)
        raise NetworkError(uri, str(exc) or exc.__class__.__name__) from exc


async def fetch(
    uri: str, urn: str, client: aiohttp.ClientSession | None = None
) -> ServiceDescription:
    """GET the SCPD document at ``uri`` and return it registered under ``urn``.

    Uses ``client`` when given, else the shared session in ``g.http``, else a
    session opened for this request only. No timeout or retry is applied.
    """
    if not urn:
        logger.error("get spec %s without a service urn", uri)
        raise ParseError("a service description needs a urn", "urn")

    logger.info("get spec %s %s", urn, uri)

    if client is not None:
        body = await _get_body(uri, client)
    elif g.http is not None:
        body = await _get_body(uri, g.http)
    else:
        async with ClientSession(verify_ssl=settings.verify_ssl) as session:
            body = await _get_body(uri, session)

    try:
        parsed = parse_scpd(body)
    except ParseError:
        logger.error("spec %s at %s is not a valid SCPD document", urn, uri)
        raise
    return parsed.with_urn(urn)
