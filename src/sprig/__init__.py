"""Sprig language lexer."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sprig.analysis import LexicalAnalysis
    from sprig.tokens import Token

__version__ = "0.1.0"


def tokenize(
    source: str | bytes,
    filename: str = "input.sp",
    *,
    strict: bool = True,
    tab_width: int = 4,
) -> list[Token]:
    """Tokenize Sprig source and return every token, EOF included."""
    from sprig.lexer import tokenize as _tokenize

    return _tokenize(source, filename, strict=strict, tab_width=tab_width)


def analyze(
    source: str | bytes,
    filename: str = "input.sp",
    *,
    strict: bool = True,
    tab_width: int = 4,
) -> LexicalAnalysis:
    """Tokenize Sprig source and index the tokens by offset."""
    from sprig.analysis import analyze as _analyze

    return _analyze(source, filename, strict=strict, tab_width=tab_width)
