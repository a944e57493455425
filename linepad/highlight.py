"""ANSI syntax highlighting for single lines of source text."""

from __future__ import annotations

import re

RED = "\033[31m"
GREEN = "\033[32m"
RESET = "\033[0m"

_KEYWORDS: dict[str, tuple[str, ...]] = {
    "cpp": (
        "int", "float", "double", "char",
        "return", "if", "else", "while", "for",
        "class", "include", "using", "namespace",
        "void", "public", "private", "protected",
    ),
    "python": (
        "def", "import", "class", "if",
        "elif", "else", "return", "for", "while",
        "try", "except", "with", "as",
    ),
    "javascript": (
        "function", "let", "var", "const", "let", "alert",
        "if", "else", "for", "while",
        "return", "class", "import", "export",
    ),
}

_COMMENTS: dict[str, re.Pattern[str]] = {
    "cpp": re.compile(r"//.*"),
    "javascript": re.compile(r"//.*"),
    "python": re.compile(r"#.*"),
}

_KEYWORD_PATTERNS: dict[str, tuple[tuple[re.Pattern[str], str], ...]] = {
    language: tuple(
        (re.compile(rf"\b{re.escape(word)}\b", re.ASCII), f"{RED}{word}{RESET}")
        for word in words
    )
    for language, words in _KEYWORDS.items()
}


def apply_syntax_highlighting(line: str, language: str) -> str:
    """Return ``line`` with comments and keywords of ``language`` coloured.

    Comments are coloured first, then each keyword in turn; an unknown
    language leaves the line untouched.
    """
    highlighted = line
    comment = _COMMENTS.get(language)
    if comment is not None:
        highlighted = comment.sub(lambda match: f"{GREEN}{match.group(0)}{RESET}", highlighted)
    for pattern, replacement in _KEYWORD_PATTERNS.get(language, ()):
        highlighted = pattern.sub(lambda _match, text=replacement: text, highlighted)
    return highlighted