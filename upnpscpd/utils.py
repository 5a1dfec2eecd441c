from __future__ import annotations

import logging
from dataclasses import dataclass, field
from xml.parsers.expat import ExpatError

import aiohttp
import xmltodict

from .errors import ParseError
from .settings import settings

logger = logging.getLogger(__name__)

INTERNAL_NAME_PREFIX = "A_ARG_TYPE_"

# Elements that repeat inside their container and must decode as lists even
# when a document holds only one of them.
SCPD_LIST_ELEMENTS = ("stateVariable", "action", "argument", "allowedValue")


class ClientSession(aiohttp.ClientSession):
    verify_ssl: bool

    def __init__(self, *args, verify_ssl: bool, **kwargs):
        self.verify_ssl = verify_ssl
        kwargs.setdefault("headers", {"User-Agent": settings.user_agent})
        super().__init__(*args, **kwargs)

    async def _request(self, *args, **kwargs):
        if "ssl" not in kwargs:
            kwargs["ssl"] = self.verify_ssl
        return await super()._request(*args, **kwargs)


@dataclass
class G:
    http: aiohttp.ClientSession | None = field(default=None, init=False)
    verify_ssl: bool = field(default=settings.verify_ssl, init=False)

    def create_session(self) -> aiohttp.ClientSession:
        self.http = ClientSession(
            verify_ssl=self.verify_ssl,
        )
        return self.http

    async def close_session(self):
        if self.http is not None:
            await self.http.close()
            self.http = None


g = G()


def strip_internal_prefix(name: str) -> str:
    """Drop every leading ``A_ARG_TYPE_`` marker; names without one are unchanged."""
    while name.startswith(INTERNAL_NAME_PREFIX):
        name = name[len(INTERNAL_NAME_PREFIX):]
    return name


def xml2dict(
    xml: str | bytes,
    service_namespace: str | None = None,
    force_list: tuple[str, ...] = SCPD_LIST_ELEMENTS,
) -> dict:
    if service_namespace is None:
        service_namespace = settings.service_namespace

    try:
        parsed = xmltodict.parse(
            xml,
            process_namespaces=True,
            namespaces={service_namespace: None},
            force_list=force_list,
        )
    except ExpatError as exc:
        logger.debug("malformed xml: %s", exc)
        raise ParseError(f"malformed xml: {exc}") from exc

    return parsed
