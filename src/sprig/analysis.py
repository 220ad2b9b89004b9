"""Whole-source lexical analysis: line index plus offset-to-token map."""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass

from sprig.lexer import Lexer
from sprig.tokens import Position, Token, position_for


@dataclass(frozen=True, slots=True)
class LexicalAnalysis:
    """The token stream of one source, indexed for diagnostics.

    ``lines`` holds the byte offset of every newline; ``tokens`` maps each
    token's starting offset to the token, in source order.
    """

    source: bytes
    lines: list[int]
    tokens: dict[int, Token]
    starts: list[int]

    def position(self, offset: int) -> Position:
        """Return the line/column position of a byte offset."""
        if not 0 <= offset <= len(self.source):
            raise IndexError(f"offset {offset} outside source of {len(self.source)} bytes")
        return position_for(self.lines, offset)

    def token_at(self, offset: int) -> Token | None:
        """Return the token whose byte range covers offset."""
        idx = bisect_right(self.starts, offset) - 1
        if idx < 0:
            return None
        tok = self.tokens[self.starts[idx]]
        if offset < tok.end or offset == tok.start:
            return tok
        return None

    def line_text(self, line: int) -> str:
        """Return the text of a 1-based line, without its line ending."""
        if not 1 <= line <= len(self.lines) + 1:
            raise IndexError(f"line {line} outside source of {len(self.lines) + 1} lines")
        start = self.lines[line - 2] + 1 if line > 1 else 0
        end = self.lines[line - 1] if line <= len(self.lines) else len(self.source)
        return self.source[start:end].rstrip(b"\r").decode("utf-8", errors="replace")

    def __len__(self) -> int:
        return len(self.tokens)


def analyze(
    source: str | bytes,
    filename: str = "input.sp",
    *,
    strict: bool = True,
    tab_width: int = 4,
) -> LexicalAnalysis:
    """Tokenize source and index the result by offset."""
    data = source.encode("utf-8") if isinstance(source, str) else bytes(source)
    lexer = Lexer(data, filename, strict=strict, tab_width=tab_width)
    tokens = {tok.start: tok for tok in lexer}
    return LexicalAnalysis(
        source=data,
        lines=lexer.newlines,
        tokens=tokens,
        starts=list(tokens),
    )
