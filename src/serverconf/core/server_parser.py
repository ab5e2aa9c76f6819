from __future__ import annotations

import logging
from typing import Dict, List, Optional, Type

from ..exceptions import ConversionError
from .parsers import BaseParser, HttpParser, TcpParser, UdpParser, WebSocketParser
from .tokenizer import parse_config_from_str
from .types import ServerConfig

logger = logging.getLogger(__name__)


class ServerConfigParser:
    """
    Parse any supported connection string into its server config.

    This class acts as a facade, selecting the protocol-specific parser from
    the ``parsers`` subpackage by scheme literal.
    """

    def __init__(self):
        """Initialize the parser and map schemes to parser classes."""
        self.parsers: Dict[str, Type[BaseParser]] = {}
        for parser in (HttpParser, WebSocketParser, TcpParser, UdpParser):
            for scheme in parser.schemes:
                self.parsers[scheme] = parser

    def supported_schemes(self) -> List[str]:
        return sorted(self.parsers)

    def parse(self, config: str, protocol: Optional[str] = None) -> ServerConfig:
        """
        Convert a single connection string to a server config.

        Args:
            config: The connection string.
            protocol: A scheme literal forcing the parser to use. When omitted
                the parser is picked from the scheme of ``config``.

        Returns:
            The config record built by the selected parser.
        Raises:
            ConversionError: If no parser handles the scheme, or the selected
                parser rejects the string.
        """
        scheme = protocol or parse_config_from_str(config).scheme
        parser = self.parsers.get(scheme) if scheme else None
        if parser is None:
            logger.debug("No parser for scheme %r in %r", scheme, config)
            raise ConversionError(
                "Unsupported scheme, valid config string would start with one of: "
                + ", ".join(f"'{s}://'" for s in self.supported_schemes())
            )
        return parser(config).parse()


_default_parser = ServerConfigParser()


def parse_config(config: str, protocol: Optional[str] = None) -> ServerConfig:
    """Parse ``config`` with the shared ``ServerConfigParser``."""
    return _default_parser.parse(config, protocol)
