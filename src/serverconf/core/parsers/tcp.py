from __future__ import annotations

from ...constants import TCP_SCHEME, TCP_USAGE
from ..types import ConnectionConfig, ProtocolKind, RawTokens
from .common import BaseParser


class TcpParser(BaseParser):
    """
    Parses a ``tcp`` connection string. Both host and port are required.
    """

    schemes = (TCP_SCHEME,)
    usage = TCP_USAGE

    def build(self, tokens: RawTokens) -> ConnectionConfig:
        if not self.accepts(tokens.scheme) or tokens.host is None or tokens.port is None:
            self.fail()
        return ConnectionConfig(kind=ProtocolKind.TCP, host=tokens.host, port=tokens.port)


def parse_tcp_config(value: str) -> ConnectionConfig:
    """Parse a ``tcp://host:port`` string into a ``ConnectionConfig``."""
    return TcpParser(value).parse()
