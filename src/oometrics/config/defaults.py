"""Default configurations for oometrics."""

# Language mappings for tokenizers
LANGUAGE_MAPPINGS: dict[str, str] = {
    ".py": "python",
    ".pyw": "python",
    ".pyi": "python",
    ".js": "javascript",
    ".jsx": "javascript",
    ".mjs": "javascript",
    ".ts": "typescript",
    ".tsx": "typescript",
    ".java": "java",
    ".cpp": "cpp",
    ".cc": "cpp",
    ".hpp": "cpp",
    ".c": "c",
    ".h": "c",
    ".cs": "csharp",
    ".go": "go",
    ".rs": "rust",
    ".php": "php",
    ".rb": "ruby",
    ".kt": "kotlin",
    ".swift": "swift",
    ".scala": "scala",
}

DEFAULT_LANGUAGE = "python"

# Text placed around a method fragment before tokenizing. Class-based
# grammars only accept method declarations inside a class body, and PHP
# needs an open tag to treat the text as code.
SOURCE_WRAPPERS: dict[str, tuple[str, str]] = {
    "php": ("<?php class __Fragment {\n", "\n}"),
    "java": ("class __Fragment {\n", "\n}"),
    "csharp": ("class __Fragment {\n", "\n}"),
    "kotlin": ("class __Fragment {\n", "\n}"),
    "javascript": ("class __Fragment {\n", "\n}"),
    "typescript": ("class __Fragment {\n", "\n}"),
}
