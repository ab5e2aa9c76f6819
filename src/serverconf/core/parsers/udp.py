from __future__ import annotations

from ...constants import UDP_SCHEME, UDP_USAGE
from ..types import ConnectionConfig, ProtocolKind, RawTokens
from .common import BaseParser


class UdpParser(BaseParser):
    """
    Parses a ``udp`` connection string. Both host and port are required.
    """

    schemes = (UDP_SCHEME,)
    usage = UDP_USAGE

    def build(self, tokens: RawTokens) -> ConnectionConfig:
        if not self.accepts(tokens.scheme) or tokens.host is None or tokens.port is None:
            self.fail()
        return ConnectionConfig(kind=ProtocolKind.UDP, host=tokens.host, port=tokens.port)


def parse_udp_config(value: str) -> ConnectionConfig:
    """Parse a ``udp://host:port`` string into a ``ConnectionConfig``."""
    return UdpParser(value).parse()
