"""Target grammar parsers — tree-sitter parsing of translated output."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from . import constants

# Target id → tree-sitter-language-pack grammar name
GRAMMARS: dict[str, str] = {
    constants.TARGET_GO: "go",
    constants.TARGET_PHP: "php",
    constants.TARGET_JAVASCRIPT: "javascript",
    constants.TARGET_CSHARP: "csharp",
}


class ParserFactory(ABC):
    """Abstract factory for obtaining a grammar parser."""

    @abstractmethod
    def get_parser(self, grammar: str): ...


class TreeSitterParserFactory(ParserFactory):
    """Concrete factory that delegates to tree-sitter-language-pack."""

    def get_parser(self, grammar: str):
        import tree_sitter_language_pack as tslp

        return tslp.get_parser(grammar)


class TargetParser:
    """Parses translated text with the grammar of its target."""

    def __init__(self, parser_factory: Optional[ParserFactory] = None):
        self._factory = parser_factory or TreeSitterParserFactory()

    @staticmethod
    def supports(target: str) -> bool:
        return target in GRAMMARS

    def parse(self, text: str, target: str):
        """Parse *text*; raises ``KeyError`` for a target without a grammar."""
        parser = self._factory.get_parser(GRAMMARS[target])
        return parser.parse(text.encode("utf-8"))
