"""Command-line token dump for Sprig sources."""

from __future__ import annotations

import argparse
import logging
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from sprig.errors import LexError
from sprig.tokens import Token


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path
    strict: bool
    tab_width: int
    offsets: bool
    verbose: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="sprig-lex",
        description="Tokenize a Sprig source file and print the token stream",
    )
    p.add_argument("input", help="Input .sp file")
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover sprig.toml)",
    )
    mode = p.add_mutually_exclusive_group()
    mode.add_argument(
        "--strict",
        dest="strict",
        action="store_true",
        default=None,
        help="Fail on malformed input (default)",
    )
    mode.add_argument(
        "--lenient",
        dest="strict",
        action="store_false",
        default=None,
        help="Treat malformed input as end-of-input",
    )
    p.add_argument(
        "--tab-width",
        type=int,
        default=None,
        metavar="N",
        help="Spaces that fold into one tab at an indent start (default: 4)",
    )
    p.add_argument("--offsets", action="store_true", help="Show byte offsets per token")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return p


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / "sprig.toml"

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: defaults < config file < CLI flags.
    """
    input_file = Path(args.input)
    input_dir = input_file.parent
    if not input_dir.parts:
        input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    try:
        config = load_config(config_path, input_dir)
    except tomllib.TOMLDecodeError as exc:
        raise argparse.ArgumentTypeError(f"invalid config file: {exc}") from exc

    strict = True
    tab_width = 4
    cfg_lexer = config.get("lexer")
    if isinstance(cfg_lexer, dict):
        cfg_strict = cfg_lexer.get("strict")
        if cfg_strict is not None:
            if not isinstance(cfg_strict, bool):
                raise argparse.ArgumentTypeError("lexer.strict must be true or false")
            strict = cfg_strict
        cfg_width = cfg_lexer.get("tab_width")
        if cfg_width is not None:
            if isinstance(cfg_width, bool) or not isinstance(cfg_width, int):
                raise argparse.ArgumentTypeError("lexer.tab_width must be an integer")
            tab_width = cfg_width

    if args.strict is not None:
        strict = args.strict
    if args.tab_width is not None:
        tab_width = args.tab_width
    if tab_width < 1:
        raise argparse.ArgumentTypeError(f"tab width must be at least 1, got {tab_width}")

    return CliOptions(
        input_file=input_file,
        strict=strict,
        tab_width=tab_width,
        offsets=args.offsets,
        verbose=args.verbose,
    )


def lex_file(options: CliOptions) -> list[Token]:
    """Read and tokenize a Sprig file."""
    from sprig.lexer import tokenize

    source = options.input_file.read_bytes()
    return tokenize(
        source,
        str(options.input_file),
        strict=options.strict,
        tab_width=options.tab_width,
    )


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    from sprig.debug import dump_tokens

    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except argparse.ArgumentTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if options.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        tokens = lex_file(options)
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except LexError as exc:
        print(exc.format(str(options.input_file)), file=sys.stderr)
        return 1

    dump_tokens(tokens, file=sys.stdout, offsets=options.offsets)
    return 0
