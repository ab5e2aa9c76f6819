from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import NoReturn, Optional, Tuple

from ...exceptions import ConversionError
from ..tokenizer import parse_config_from_str
from ..types import RawTokens, ServerConfig

logger = logging.getLogger(__name__)


class BaseParser(ABC):
    """Abstract base class for all server config parsers."""

    schemes: Tuple[str, ...] = ()
    usage: str = ""

    def __init__(self, config_uri: str):
        self.config_uri = config_uri

    @classmethod
    def accepts(cls, scheme: Optional[str]) -> bool:
        """Return True if ``scheme`` is one of this parser's literals."""
        return scheme in cls.schemes

    def parse(self) -> ServerConfig:
        """Tokenize the connection string and build the server config."""
        return self.build(parse_config_from_str(self.config_uri))

    @abstractmethod
    def build(self, tokens: RawTokens) -> ServerConfig:
        """Validate the tokens and return a populated server config."""
        raise NotImplementedError

    def fail(self) -> NoReturn:
        logger.debug("%s rejected connection string: %r", type(self).__name__, self.config_uri)
        raise ConversionError(self.usage)
