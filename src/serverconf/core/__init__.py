"""Tokenizer, typed parsers and conversions for server connection strings."""
from __future__ import annotations

from .conversions import to_datagram_config
from .parsers import (
    BaseParser,
    HttpParser,
    TcpParser,
    UdpParser,
    WebSocketParser,
    parse_http_config,
    parse_tcp_config,
    parse_udp_config,
    parse_websocket_config,
)
from .server_parser import ServerConfigParser, parse_config
from .tokenizer import parse_config_from_str, tokenize
from .types import (
    ConnectionConfig,
    ProtocolKind,
    RawTokens,
    RequestConfig,
    ServerConfig,
    StreamConfig,
)

__all__ = [
    "BaseParser",
    "ConnectionConfig",
    "HttpParser",
    "ProtocolKind",
    "RawTokens",
    "RequestConfig",
    "ServerConfig",
    "ServerConfigParser",
    "StreamConfig",
    "TcpParser",
    "UdpParser",
    "WebSocketParser",
    "parse_config",
    "parse_config_from_str",
    "parse_http_config",
    "parse_tcp_config",
    "parse_udp_config",
    "parse_websocket_config",
    "to_datagram_config",
    "tokenize",
]
