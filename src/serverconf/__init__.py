"""
serverconf - typed server configs from connection strings

This package parses ``scheme://host[:port][/path]`` connection strings for
http(s), ws(s), tcp and udp servers into immutable config records, and
converts request and tcp configs into udp configs.
"""

__version__ = "0.1.0"

# Import key components to be available at the package level
from .core import (
    ConnectionConfig,
    ProtocolKind,
    RawTokens,
    RequestConfig,
    ServerConfig,
    ServerConfigParser,
    StreamConfig,
    parse_config,
    parse_config_from_str,
    parse_http_config,
    parse_tcp_config,
    parse_udp_config,
    parse_websocket_config,
    to_datagram_config,
)
from .exceptions import ConversionError, ServerConfError

# Define the public API of the package
__all__ = [
    "ConnectionConfig",
    "ConversionError",
    "ProtocolKind",
    "RawTokens",
    "RequestConfig",
    "ServerConfError",
    "ServerConfig",
    "ServerConfigParser",
    "StreamConfig",
    "parse_config",
    "parse_config_from_str",
    "parse_http_config",
    "parse_tcp_config",
    "parse_udp_config",
    "parse_websocket_config",
    "to_datagram_config",
    "__version__",
]
