"""Tree-sitter backed tokenizer for non-Python languages."""

from __future__ import annotations

from typing import Any

from loguru import logger

from ..config.defaults import SOURCE_WRAPPERS
from ..core.exceptions import TokenizerError
from ..core.models import Token, TokenKind
from .tokens import TokenClassifier


class TreeSitterTokenizer:
    """Tokenizes source into the leaves of a tree-sitter parse tree.

    Keywords and operators are anonymous leaves whose node type is their
    text (``if``, ``&&``, ``catch``), so only anonymous leaves are
    classified; identifiers and literals are always ``OTHER``. Fragments
    are wrapped per ``SOURCE_WRAPPERS`` before parsing and the wrapper's own
    leaves are dropped again. Code that still does not parse cleanly is
    tokenized from tree-sitter's error recovery.
    """

    def __init__(
        self, language: str, classifier: TokenClassifier | None = None
    ) -> None:
        self.language = language
        self.classifier = classifier or TokenClassifier()
        self._parser: Any = None

    def _ensure_parser_initialized(self) -> None:
        """Load the grammar on first use."""
        if self._parser is not None:
            return
        try:
            from tree_sitter_language_pack import get_parser

            self._parser = get_parser(self.language)  # type: ignore[arg-type]
        except Exception as e:
            raise TokenizerError(
                f"No tree-sitter grammar for language '{self.language}': {e}",
                {"language": self.language},
            ) from e
        logger.debug(f"{self.language} tree-sitter tokenizer initialized")

    def tokenize(self, source: str) -> list[Token]:
        self._ensure_parser_initialized()

        prefix, suffix = SOURCE_WRAPPERS.get(self.language, ("", ""))
        prefix_bytes = prefix.encode("utf-8")
        source_bytes = source.encode("utf-8")
        start = len(prefix_bytes)
        end = start + len(source_bytes)
        line_offset = prefix.count("\n")

        tree = self._parser.parse(prefix_bytes + source_bytes + suffix.encode("utf-8"))

        tokens: list[Token] = []
        stack = [tree.root_node]
        while stack:
            node = stack.pop()
            if node.child_count:
                stack.extend(reversed(node.children))
                continue
            if node.start_byte < start or node.end_byte > end:
                continue

            value = node.text.decode("utf-8", errors="replace") if node.text else ""
            line = node.start_point[0] + 1 - line_offset
            if node.is_named:
                tokens.append(Token(TokenKind.OTHER, value, line))
            else:
                tokens.append(Token(self.classifier.classify(node.type), value, line))

        return tokens
