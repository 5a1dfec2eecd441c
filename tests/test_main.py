from __future__ import annotations

from aiohttp.test_utils import unused_port

from upnpscpd.__main__ import dump, main
from upnpscpd.scpd import parse_service_description


def test_dump(rendering_control_xml):
    description = parse_service_description(
        rendering_control_xml, "urn:schemas-upnp-org:service:RenderingControl:1"
    )
    lines = dump(description)

    assert lines[0] == "urn:schemas-upnp-org:service:RenderingControl:1"
    assert "   GetVolume" in lines
    assert "       in: InstanceID: u32" in lines
    assert "       in: Channel: Channel" in lines
    assert "      out: CurrentVolume: u16" in lines
    assert "   ListPresets" in lines


def test_dump_unsupported_and_unknown(scpd_document):
    description = parse_service_description(
        scpd_document(
            "<stateVariable><name>RelativeTimePosition</name><dataType>time</dataType></stateVariable>",
            "<action><name>GetPositionInfo</name><argumentList>"
            "<argument><name>RelTime</name><direction>out</direction>"
            "<relatedStateVariable>RelativeTimePosition</relatedStateVariable></argument>"
            "<argument><name>Track</name><direction>out</direction>"
            "<relatedStateVariable>CurrentTrack</relatedStateVariable></argument>"
            "</argumentList></action>",
        ),
        "urn:schemas-upnp-org:service:AVTransport:1",
    )
    lines = dump(description)
    assert "      out: RelTime: <unsupported: time>" in lines
    assert "      out: Track: <unknown: CurrentTrack>" in lines


def test_main_network_error():
    uri = f"http://127.0.0.1:{unused_port()}/AVTransport.xml"
    assert main([uri, "urn:schemas-upnp-org:service:AVTransport:1"]) == 1


def test_main_empty_urn():
    uri = f"http://127.0.0.1:{unused_port()}/AVTransport.xml"
    assert main([uri, ""]) == 1
