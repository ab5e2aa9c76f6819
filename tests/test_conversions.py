import pytest

from serverconf.core.conversions import to_datagram_config
from serverconf.core.parsers import parse_http_config, parse_tcp_config, parse_websocket_config
from serverconf.core.types import ConnectionConfig, ProtocolKind


def test_udp_from_tcp_config():
    source = parse_tcp_config("tcp://test.com:7890")
    config = to_datagram_config(source)
    assert type(config) is ConnectionConfig
    assert config.kind is ProtocolKind.UDP
    assert config.host == "test.com"
    assert config.port == 7890
    assert source.kind is ProtocolKind.TCP


def test_udp_from_http_config():
    config = to_datagram_config(parse_http_config("https://www.rust-lang.org"))
    assert config.kind is ProtocolKind.UDP
    assert config.host == "www.rust-lang.org"
    assert config.port == 443


@pytest.mark.parametrize(
    "value",
    ["http://example.com", "https://example.com:8443", "http://  example.com : 1"],
)
def test_host_and_port_survive_conversion(value):
    source = parse_http_config(value)
    config = to_datagram_config(source)
    assert (config.host, config.port) == (source.host, source.port)


def test_conversion_returns_new_record():
    source = ConnectionConfig(ProtocolKind.UDP, "example.com", 53)
    config = to_datagram_config(source)
    assert config == source
    assert config is not source


def test_stream_config_is_not_convertible():
    with pytest.raises(TypeError):
        to_datagram_config(parse_websocket_config("ws://example.com/chat"))
