"""Token stream dump for the sprig-lex tool."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from sprig.tokens import Token, TokenType

_PAYLOAD_TYPES = frozenset({TokenType.IDENT, TokenType.STRING, TokenType.NUMBER})


def format_token(tok: Token, *, offsets: bool = False) -> str:
    """Render one token as ``line:col  TYPE  payload``."""
    start = tok.span.start
    loc = f"{start.line}:{start.column}"
    if offsets:
        loc += f" [{tok.start}:{tok.end}]"
    line = f"{loc:<12} {tok.type.name}"
    if tok.type in _PAYLOAD_TYPES:
        line += f" {tok.value!r}"
    elif tok.type == TokenType.TAB and tok.raw != "\t":
        line += f" (from {len(tok.raw)} spaces)"
    elif tok.type == TokenType.EOF and tok.raw:
        line += f" (skipped {tok.end - tok.start} bytes)"
    return line


def dump_tokens(
    tokens: Iterable[Token], *, file: TextIO = sys.stderr, offsets: bool = False
) -> None:
    """Print one line per token to *file*."""
    for tok in tokens:
        file.write(format_token(tok, offsets=offsets) + "\n")
