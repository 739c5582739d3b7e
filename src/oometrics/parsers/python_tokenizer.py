"""Tokenizer for Python method source."""

from __future__ import annotations

import io
import keyword
import textwrap
import tokenize

from loguru import logger

from ..core.models import Token, TokenKind
from .tokens import TokenClassifier

# Tokens after which the next NAME starts a logical line
_LINE_START = {tokenize.NEWLINE, tokenize.NL, tokenize.INDENT, tokenize.DEDENT}


class PythonTokenizer:
    """Tokenizes Python source with the standard ``tokenize`` module.

    Method fragments taken out of a class body are dedented first. The
    soft keyword ``case`` only counts when it opens a logical line, so a
    variable named ``case`` is not mistaken for a match arm. Words that are
    keywords elsewhere (``catch``, ``foreach``) are plain names here.
    """

    language = "python"

    def __init__(self, classifier: TokenClassifier | None = None) -> None:
        self.classifier = classifier or TokenClassifier()

    def tokenize(self, source: str) -> list[Token]:
        text = textwrap.dedent(source)
        tokens: list[Token] = []
        at_line_start = True

        try:
            for tok in tokenize.generate_tokens(io.StringIO(text).readline):
                if tok.type == tokenize.NAME:
                    kind = TokenKind.OTHER
                    # Only real keywords count; ``catch`` or ``AND`` are names
                    if keyword.iskeyword(tok.string) or (
                        tok.string == "case" and at_line_start
                    ):
                        kind = self.classifier.classify(tok.string)
                    tokens.append(Token(kind, tok.string, tok.start[0]))
                elif tok.type in (tokenize.OP, tokenize.STRING, tokenize.NUMBER):
                    tokens.append(Token(TokenKind.OTHER, tok.string, tok.start[0]))

                if tok.type in _LINE_START:
                    at_line_start = True
                elif tok.type not in (tokenize.COMMENT, tokenize.ENCODING):
                    at_line_start = False
        except (tokenize.TokenError, SyntaxError) as e:
            # Incomplete fragment: keep what was tokenized so far
            logger.warning(f"Python tokenizer stopped early: {e}")

        # ``case _:`` is the wildcard arm, the equivalent of a default label
        for i, token in enumerate(tokens[:-2]):
            if (
                token.kind is TokenKind.CASE
                and tokens[i + 1].value == "_"
                and tokens[i + 2].value == ":"
            ):
                tokens[i] = Token(TokenKind.OTHER, token.value, token.line)

        return tokens
