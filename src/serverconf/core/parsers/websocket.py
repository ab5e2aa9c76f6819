from __future__ import annotations

from ...constants import (
    DEFAULT_PORT,
    DEFAULT_SECURE_PORT,
    WEB_SOCKET_USAGE,
    WS_SCHEME,
    WSS_SCHEME,
)
from ..types import ProtocolKind, RawTokens, StreamConfig
from .common import BaseParser


class WebSocketParser(BaseParser):
    """
    Parses a ``ws`` or ``wss`` connection string, including its path.
    """

    schemes = (WS_SCHEME, WSS_SCHEME)
    usage = WEB_SOCKET_USAGE

    def build(self, tokens: RawTokens) -> StreamConfig:
        """
        Build a stream config from the tokens.

        Returns:
            A ``StreamConfig``; the port defaults to 443 for wss, else 80, and
            the path defaults to an empty string.
        Raises:
            ConversionError: If the scheme is not ws/wss or the host is missing.
        """
        if not self.accepts(tokens.scheme) or tokens.host is None:
            self.fail()

        kind = ProtocolKind(tokens.scheme)
        port = tokens.port
        if port is None:
            port = DEFAULT_SECURE_PORT if kind.is_secure else DEFAULT_PORT
        return StreamConfig(
            kind=kind,
            host=tokens.host,
            port=port,
            path=tokens.path or "",
        )


def parse_websocket_config(value: str) -> StreamConfig:
    """Parse a ``ws[s]://host[:port][/path]`` string into a ``StreamConfig``."""
    return WebSocketParser(value).parse()
