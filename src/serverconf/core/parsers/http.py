from __future__ import annotations

from ...constants import (
    DEFAULT_PORT,
    DEFAULT_SECURE_PORT,
    HTTP_SCHEME,
    HTTP_USAGE,
    HTTPS_SCHEME,
)
from ..types import ProtocolKind, RawTokens, RequestConfig
from .common import BaseParser


class HttpParser(BaseParser):
    """
    Parses an ``http`` or ``https`` connection string.
    """

    schemes = (HTTP_SCHEME, HTTPS_SCHEME)
    usage = HTTP_USAGE

    def build(self, tokens: RawTokens) -> RequestConfig:
        """
        Build a request config from the tokens.

        Returns:
            A ``RequestConfig``; the port defaults to 443 for https, else 80.
        Raises:
            ConversionError: If the scheme is not http/https or the host is missing.
        """
        if not self.accepts(tokens.scheme) or tokens.host is None:
            self.fail()

        kind = ProtocolKind(tokens.scheme)
        port = tokens.port
        if port is None:
            port = DEFAULT_SECURE_PORT if kind.is_secure else DEFAULT_PORT
        return RequestConfig(kind=kind, host=tokens.host, port=port)


def parse_http_config(value: str) -> RequestConfig:
    """Parse an ``http[s]://host[:port]`` string into a ``RequestConfig``."""
    return HttpParser(value).parse()
