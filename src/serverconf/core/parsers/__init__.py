"""Protocol-specific parsers for server connection strings.

Each module provides a ``BaseParser`` subclass that turns the tokens of a
connection string into a typed server config, or raises ``ConversionError``
with a usage message for its protocol family, plus a ``parse_*_config``
shortcut taking the raw string.
"""
from __future__ import annotations

from .common import BaseParser
from .http import HttpParser, parse_http_config
from .tcp import TcpParser, parse_tcp_config
from .udp import UdpParser, parse_udp_config
from .websocket import WebSocketParser, parse_websocket_config

__all__ = [
    "BaseParser",
    "HttpParser",
    "TcpParser",
    "UdpParser",
    "WebSocketParser",
    "parse_http_config",
    "parse_tcp_config",
    "parse_udp_config",
    "parse_websocket_config",
]
