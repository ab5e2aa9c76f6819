"""Shared data types for the serverconf package.

Every record produced by a parser is an immutable ``ServerConfig``. The
concrete subclasses mirror the three shapes of connection string the package
understands: request/response endpoints, message streams that also carry a
path, and raw connections where the port is mandatory.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, Optional

from ..constants import (
    HTTP_SCHEME,
    HTTPS_SCHEME,
    TCP_SCHEME,
    UDP_SCHEME,
    WS_SCHEME,
    WSS_SCHEME,
)


class ProtocolKind(Enum):
    """Protocol family tag stamped on every server config."""

    HTTP = HTTP_SCHEME
    SECURE_HTTP = HTTPS_SCHEME
    WEB_SOCKET = WS_SCHEME
    SECURE_WEB_SOCKET = WSS_SCHEME
    TCP = TCP_SCHEME
    UDP = UDP_SCHEME

    @property
    def is_secure(self) -> bool:
        return self in (ProtocolKind.SECURE_HTTP, ProtocolKind.SECURE_WEB_SOCKET)


@dataclass(frozen=True)
class RawTokens:
    """Candidate fields split out of a connection string by the tokenizer."""

    scheme: Optional[str] = None
    host: Optional[str] = None
    port: Optional[int] = None
    path: Optional[str] = None


@dataclass(frozen=True)
class ServerConfig:
    """Fields shared by every server config."""

    kind: ProtocolKind
    host: str
    port: int

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["kind"] = self.kind.value
        return data


@dataclass(frozen=True)
class RequestConfig(ServerConfig):
    """An ``http`` or ``https`` endpoint."""


@dataclass(frozen=True)
class StreamConfig(ServerConfig):
    """A ``ws`` or ``wss`` endpoint. ``path`` is empty when none was given."""

    path: str = ""


@dataclass(frozen=True)
class ConnectionConfig(ServerConfig):
    """A ``tcp`` or ``udp`` endpoint."""
