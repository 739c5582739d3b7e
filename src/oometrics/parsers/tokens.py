"""Decision-point classification for lexical tokens."""

from __future__ import annotations

from ..core.models import Token, TokenKind

# Token text (as produced by the tokenizers) → decision-point kind.
# Keys cover the keywords and operators of the supported grammars.
DECISION_TOKENS: dict[str, TokenKind] = {
    "if": TokenKind.IF,
    "elif": TokenKind.IF,
    "elseif": TokenKind.IF,
    "for": TokenKind.FOR,
    "foreach": TokenKind.FOREACH,
    "while": TokenKind.WHILE,
    "case": TokenKind.CASE,
    "catch": TokenKind.CATCH,
    "except": TokenKind.CATCH,
    "rescue": TokenKind.CATCH,
    "&&": TokenKind.LOGICAL_AND,
    "and": TokenKind.LOGICAL_AND,
    "||": TokenKind.LOGICAL_OR,
    "or": TokenKind.LOGICAL_OR,
}


class TokenClassifier:
    """Decides whether a token introduces a branch."""

    def __init__(self, decision_tokens: dict[str, TokenKind] | None = None) -> None:
        self.decision_tokens = (
            DECISION_TOKENS if decision_tokens is None else decision_tokens
        )

    def classify(self, text: str) -> TokenKind:
        """Map raw keyword/operator text to its ``TokenKind``.

        Matching is case-insensitive so ``AND``/``Or`` in PHP count too.
        """
        return self.decision_tokens.get(text.lower(), TokenKind.OTHER)

    @staticmethod
    def is_decision_point(token: Token) -> bool:
        return token.kind is not TokenKind.OTHER
