"""
vxlex - VOXL Assembly Tokenizer Command-Line Interface
======================================================

Tokenizes a VOXL assembly source file and prints the resulting tokens.
Useful for checking how the assembler front end reads a file and for
locating lexical errors.

Usage Examples
--------------
Print tokens, one per line:
    $ vxlex main.vxl

Read unprefixed numbers as signed:
    $ vxlex -n signed main.vxl

JSON output for tooling:
    $ vxlex -f json main.vxl

Verbose mode (debug logging and a summary):
    $ vxlex -v main.vxl
"""

import json
import logging
from pathlib import Path
from typing import Any, Optional

import click

from voxl_asm import __version__
from voxl_asm.cli.errors import handle_cli_exception
from voxl_asm.config import LexerConfig
from voxl_asm.isa import Register
from voxl_asm.lexer import NumericType, Token, tokenize
from voxl_asm.text_mapping import FileRegistry


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


# =============================================================================
# Token Formatting
# =============================================================================

def token_value(token: Token) -> Any:
    """JSON-friendly token payload: register name, integer, name or None."""
    if isinstance(token.value, Register):
        return token.value.name
    return token.value


def format_token(token: Token) -> str:
    """
    Format a token as a single line of text.

    Example:
        1:5-7      UNSIGNED_INTEGER  52  '52'
    """
    start = token.range.start
    span = f"{start.row + 1}:{start.column + 1}-{token.range.end.column + 1}"
    value = token_value(token)
    value_str = "" if value is None else str(value)
    return f"{span:<10} {token.type.name:<17} {value_str:<20} {token.text!r}"


def token_to_dict(token: Token) -> dict[str, Any]:
    start, end = token.range.start, token.range.end
    return {
        "type": token.type.name,
        "value": token_value(token),
        "text": token.text,
        "start": {"offset": start.offset, "row": start.row, "column": start.column},
        "end": {"offset": end.offset, "row": end.row, "column": end.column},
    }


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-n", "--numeric",
    type=click.Choice(["signed", "unsigned", "float"], case_sensitive=False),
    default=None,
    help="Interpretation of unprefixed numbers. "
         "Default: $VOXL_DEFAULT_NUMERIC, else unsigned.",
)
@click.option(
    "-f", "--format", "output_format",
    type=click.Choice(["text", "json"], case_sensitive=False),
    default="text",
    help="Output format (default: text)",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="vxlex")
def main(
    input_file: Path,
    numeric: Optional[str],
    output_format: str,
    verbose: bool,
) -> None:
    """
    Tokenize VOXL assembly source.

    INPUT_FILE is the assembly source file to tokenize.

    \b
    Examples:
        vxlex main.vxl               # One token per line
        vxlex -n signed main.vxl     # Unprefixed numbers are signed
        vxlex -f json main.vxl       # Machine-readable output
    """
    setup_logging(verbose)

    config = LexerConfig.from_env()
    if numeric is not None:
        config.default_numeric = NumericType.from_name(numeric)

    try:
        registry = FileRegistry()
        source = registry.load(input_file)

        if verbose:
            click.echo(f"Tokenizing {input_file} ({config.default_numeric.name.lower()} numbers)...")

        tokens = tokenize(source.contents, source, config)

        if output_format.lower() == "json":
            click.echo(json.dumps([token_to_dict(t) for t in tokens], indent=2))
        else:
            for token in tokens:
                click.echo(format_token(token))

        if verbose:
            lines = source.contents.count("\n") + 1
            click.echo(f"{len(tokens)} tokens from {lines} lines")

    except Exception as e:
        handle_cli_exception(e, verbose=verbose)


if __name__ == "__main__":
    main()
