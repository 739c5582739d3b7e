"""Tokenizer registry for oometrics."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from loguru import logger

from ..config.defaults import DEFAULT_LANGUAGE, LANGUAGE_MAPPINGS
from ..core.models import Token
from .python_tokenizer import PythonTokenizer
from .tokens import TokenClassifier
from .tree_sitter_tokenizer import TreeSitterTokenizer


class Tokenizer(Protocol):
    """Turns source text into classified tokens."""

    def tokenize(self, source: str) -> list[Token]: ...


class TokenizerRegistry:
    """Creates tokenizers on demand and picks one per source file."""

    def __init__(
        self,
        default_language: str = DEFAULT_LANGUAGE,
        classifier: TokenClassifier | None = None,
    ) -> None:
        self.default_language = default_language
        self.classifier = classifier or TokenClassifier()
        self._tokenizers: dict[str, Tokenizer] = {}

    def register(self, language: str, tokenizer: Tokenizer) -> None:
        """Use ``tokenizer`` for ``language`` instead of the built-in one."""
        self._tokenizers[language] = tokenizer

    def get_tokenizer(self, language: str) -> Tokenizer:
        """Return the tokenizer for a language, creating it lazily."""
        tokenizer = self._tokenizers.get(language)
        if tokenizer is None:
            if language == "python":
                tokenizer = PythonTokenizer(self.classifier)
            else:
                tokenizer = TreeSitterTokenizer(language, self.classifier)
            self._tokenizers[language] = tokenizer
            logger.debug(f"Created {type(tokenizer).__name__} for {language}")
        return tokenizer

    def language_for_file(self, path: str | None) -> str:
        if not path:
            return self.default_language
        return LANGUAGE_MAPPINGS.get(Path(path).suffix.lower(), self.default_language)

    def get_tokenizer_for_file(self, path: str | None) -> Tokenizer:
        return self.get_tokenizer(self.language_for_file(path))
