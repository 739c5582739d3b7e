"""Source tokenizers and decision-point classification."""

from .python_tokenizer import PythonTokenizer
from .registry import Tokenizer, TokenizerRegistry
from .tokens import DECISION_TOKENS, TokenClassifier
from .tree_sitter_tokenizer import TreeSitterTokenizer

__all__ = [
    "DECISION_TOKENS",
    "PythonTokenizer",
    "TokenClassifier",
    "Tokenizer",
    "TokenizerRegistry",
    "TreeSitterTokenizer",
]
