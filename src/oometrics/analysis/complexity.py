"""Cyclomatic complexity from a method's token stream.

The count is syntactic: start at 1 and add one for every token that
introduces a branch (if, loops, case labels, catch clauses, short-circuit
boolean operators). ``else``, ``default`` and ``finally`` never add to it.
No control-flow graph is built.
"""

from __future__ import annotations

from loguru import logger

from ..config.thresholds import MetricsConfig
from ..core.exceptions import MethodNotFoundError, SourceUnavailableError
from ..core.models import MemberInfo
from ..core.provider import (
    FileSystemSourceReader,
    SourceReader,
    TypeIntrospectionProvider,
)
from ..parsers.registry import TokenizerRegistry
from ..parsers.tokens import TokenClassifier
from .metrics import MethodComplexity


class ComplexityAnalyzer:
    """Computes CCN for methods reported by an introspection provider."""

    def __init__(
        self,
        provider: TypeIntrospectionProvider,
        reader: SourceReader | None = None,
        tokenizers: TokenizerRegistry | None = None,
        config: MetricsConfig | None = None,
    ) -> None:
        self.provider = provider
        self.reader = reader or FileSystemSourceReader()
        self.config = config or MetricsConfig()
        self.tokenizers = tokenizers or TokenizerRegistry(self.config.default_language)

    def _get_method(self, type_name: str, method_name: str) -> MemberInfo:
        info = self.provider.lookup_type(type_name)
        method = info.get_method(method_name)
        if method is None:
            raise MethodNotFoundError(type_name, method_name)
        return method

    def method_source(self, type_name: str, method_name: str) -> str:
        """Return the literal source of a method (its declaring lines).

        Raises:
            TypeNotFoundError: Unknown type
            MethodNotFoundError: Unknown method
            SourceUnavailableError: No source file, unreadable file, or the
                recorded line range is not inside the file
        """
        method = self._get_method(type_name, method_name)
        return self._read_source(method, type_name)

    def _read_source(self, method: MemberInfo, type_name: str) -> str:
        context = {"type": type_name, "method": method.name, "path": method.source_file}
        if not method.source_file:
            raise SourceUnavailableError(
                f"No source file for {type_name}::{method.name}", context
            )

        lines = self.reader.read_lines(method.source_file)
        if not 1 <= method.start_line <= method.end_line <= len(lines):
            raise SourceUnavailableError(
                f"Lines {method.start_line}-{method.end_line} of {method.source_file} "
                f"are not available for {type_name}::{method.name}",
                context,
            )
        return "".join(lines[method.start_line - 1 : method.end_line])

    def cyclomatic_complexity(self, type_name: str, method_name: str) -> int:
        """Return the CCN (>= 1) of ``type_name.method_name``."""
        method = self._get_method(type_name, method_name)
        return self._ccn(method, type_name)

    def _ccn(self, method: MemberInfo, type_name: str) -> int:
        source = self._read_source(method, type_name)
        tokenizer = self.tokenizers.get_tokenizer_for_file(method.source_file)

        ccn = 1
        for token in tokenizer.tokenize(source):
            if TokenClassifier.is_decision_point(token):
                ccn += 1
        return ccn

    def type_complexity(self, type_name: str) -> list[MethodComplexity]:
        """CCN of every method declared on the type itself.

        Inherited methods are skipped; they are measured on their declaring
        type.
        """
        info = self.provider.lookup_type(type_name)
        results = []
        for method in info.own_methods():
            ccn = self._ccn(method, type_name)
            results.append(
                MethodComplexity(
                    type_name=type_name,
                    method_name=method.name,
                    ccn=ccn,
                    rating=self.config.get_rating(ccn),
                )
            )
        logger.debug(f"Measured {len(results)} methods of {type_name}")
        return results
