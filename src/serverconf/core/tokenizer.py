"""Tokenizer for ``scheme://host[/path][:port[/path]]`` connection strings.

The tokenizer never raises. It splits whatever it can out of the input and
leaves the remaining fields as ``None``, so each parser can apply its own
rules about which fields are required.
"""
from __future__ import annotations

import logging
import re
from typing import Optional

from ..constants import MAX_PORT
from .types import RawTokens

logger = logging.getLogger(__name__)

PORT_RE = re.compile(r"\+?[0-9]+")


def parse_port(value: str) -> Optional[int]:
    """Parse an unsigned 16-bit base-10 port, returning None when invalid."""
    if not PORT_RE.fullmatch(value):
        return None
    port = int(value)
    if port > MAX_PORT:
        return None
    return port


def parse_config_from_str(value: str) -> RawTokens:
    """
    Split a connection string into scheme, host, port and path candidates.

    Args:
        value: The raw connection string, e.g. ``ws://example.com:8080/chat``.

    Returns:
        A ``RawTokens`` record. All fields are None when no scheme could be
        found; only ``scheme`` is set when the host is empty or has no dot.
    """
    segments = value.split(":")
    if len(segments) < 2:
        logger.debug("No scheme separator in connection string: %r", value)
        return RawTokens()

    scheme = segments[0].strip()
    if not scheme:
        logger.debug("Empty scheme in connection string: %r", value)
        return RawTokens()

    authority = segments[1].removeprefix("//")
    host_and_path = authority.split("/", 1)
    host = host_and_path[0].strip()
    if not host or "." not in host:
        logger.debug("Invalid host %r in connection string: %r", host, value)
        return RawTokens(scheme=scheme)

    port: Optional[int] = None
    path = host_and_path[1].removeprefix("/") if len(host_and_path) == 2 else None

    # A port segment may carry its own path, which wins over one after the host
    if len(segments) == 3:
        port_and_path = segments[2].strip().split("/", 1)
        port = parse_port(port_and_path[0].strip())
        if port is None:
            logger.debug("Ignoring invalid port %r in: %r", port_and_path[0], value)
        if len(port_and_path) == 2:
            path = port_and_path[1].removeprefix("/")

    return RawTokens(scheme=scheme, host=host, port=port, path=path)


tokenize = parse_config_from_str
