"""Narrowing conversions between server config types."""
from __future__ import annotations

from .types import ConnectionConfig, ProtocolKind, RequestConfig, ServerConfig


def to_datagram_config(config: ServerConfig) -> ConnectionConfig:
    """
    Convert a request or connection config into a ``udp`` connection config.

    Host and port are copied unchanged and the protocol kind is replaced. The
    source record is left untouched.

    Raises:
        TypeError: For stream configs, which have no datagram counterpart.
    """
    if isinstance(config, (RequestConfig, ConnectionConfig)):
        return ConnectionConfig(kind=ProtocolKind.UDP, host=config.host, port=config.port)
    raise TypeError(f"Cannot convert {type(config).__name__} to a datagram config")
