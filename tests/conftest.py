from __future__ import annotations

import logging
from pathlib import Path

import pytest

DATA_DIR = Path(__file__).parent / "data"


def pytest_configure(config):
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


@pytest.fixture
def rendering_control_xml() -> bytes:
    return DATA_DIR.joinpath("rendering_control.xml").read_bytes()


@pytest.fixture
def scpd_document():
    """Build a minimal SCPD document around the given table and action list."""

    def build(state_table: str = "", action_list: str = "") -> str:
        return (
            '<?xml version="1.0"?>'
            '<scpd xmlns="urn:schemas-upnp-org:service-1-0">'
            "<specVersion><major>1</major><minor>0</minor></specVersion>"
            f"<actionList>{action_list}</actionList>"
            f"<serviceStateTable>{state_table}</serviceStateTable>"
            "</scpd>"
        )

    return build
