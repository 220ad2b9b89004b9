"""Error types with formatted source context."""

from __future__ import annotations

from sprig.tokens import Position


class LexError(Exception):
    """Raised on the first lexing error, with position and source context."""

    def __init__(self, message: str, position: Position, source: str | bytes) -> None:
        self.message = message
        self.position = position
        self.source = source.encode("utf-8") if isinstance(source, str) else bytes(source)
        super().__init__(self.format())

    def format(self, filename: str = "input.sp") -> str:
        lines = self.source.splitlines(keepends=True)
        line_idx = self.position.line - 1
        col = self.position.column

        # Columns count bytes; the caret pad counts decoded characters
        if 0 <= line_idx < len(lines):
            line_bytes = lines[line_idx].rstrip(b"\n").rstrip(b"\r")
        else:
            line_bytes = b""
        source_line = line_bytes.decode("utf-8", errors="replace")
        prefix = line_bytes[: col - 1].decode("utf-8", errors="replace")

        underline_len = max(1, min(2, len(source_line) - len(prefix)))

        pad = " " * len(prefix)
        carets = "^" * underline_len

        line_num = str(self.position.line)
        gutter_width = len(line_num) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"

        return (
            f"error: {self.message}\n"
            f"{' ' * gutter_width}--> {filename}:{self.position.line}:{col}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {source_line}\n"
            f"{blank_gutter} {pad}{carets}"
        )


class UnterminatedStringError(LexError):
    """A string literal reached the end of input before its closing quote."""


class InvalidByteError(LexError):
    """A byte that starts no token (including NUL inside the source)."""

    def __init__(self, byte: int, position: Position, source: str | bytes) -> None:
        self.byte = byte
        if byte == 0:
            message = "NUL byte in source"
        elif byte < 0x80:
            message = f"unexpected character {chr(byte)!r}"
        else:
            message = f"unexpected byte 0x{byte:02X}"
        super().__init__(message, position, source)
