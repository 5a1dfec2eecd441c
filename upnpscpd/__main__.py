"""Dump the actions of a UPnP service with the types a generator would use.

    python -m upnpscpd http://192.168.1.25:49152/RenderingControl.xml \
        urn:schemas-upnp-org:service:RenderingControl:1
"""
from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from .errors import ScpdError, UnsupportedTypeError
from .scpd import Argument, ServiceDescription, fetch
from .settings import settings

logger = logging.getLogger(__name__)


def describe_argument(description: ServiceDescription, argument: Argument) -> str:
    state_variable = description.related_state_variable(argument)
    if state_variable is None:
        type_name = f"<unknown: {argument.related_state_variable}>"
    else:
        try:
            type_name = state_variable.type_name()
        except UnsupportedTypeError as exc:
            type_name = f"<unsupported: {exc.data_type.value}>"
    return f"{argument.name}: {type_name}"


def dump(description: ServiceDescription) -> list[str]:
    lines = [description.urn]
    for action in description.actions:
        lines.append(f"   {action.name}")
        for argument in action.input_arguments():
            lines.append(f"       in: {describe_argument(description, argument)}")
        for argument in action.output_arguments():
            lines.append(f"      out: {describe_argument(description, argument)}")
    return lines


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="upnpscpd", description=__doc__.splitlines()[0])
    parser.add_argument("uri", help="SCPD document URL")
    parser.add_argument("urn", help="service type, e.g. urn:schemas-upnp-org:service:AVTransport:1")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    try:
        description = asyncio.run(fetch(args.uri, args.urn))
    except ScpdError as exc:
        logger.error("%s", exc)
        return 1

    print("\n".join(dump(description)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
