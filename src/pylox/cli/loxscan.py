"""
loxscan - Lox Scanner Command-Line Interface
============================================

Tokenizes a Lox source file and prints one token per line in the form
``TYPE lexeme literal``. Lexical errors are all reported together on
stderr, one per line.

Usage Examples
--------------
List the tokens of a file:
    $ loxscan program.lox

Verbose mode (debug logging from the scanner):
    $ loxscan -v program.lox

Only show the first ten errors:
    $ loxscan --max-errors 10 program.lox
"""

import logging
from pathlib import Path
from typing import Optional

import click

from pylox import __version__
from pylox.cli.errors import handle_cli_exception
from pylox.scanner import Scanner, ScannerOptions


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--max-errors",
    type=click.IntRange(min=1),
    default=None,
    help="Maximum number of lexical errors to report (default: all)",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="loxscan")
def main(input_file: Path, max_errors: Optional[int], verbose: bool) -> None:
    """
    Tokenize a Lox source file.

    INPUT_FILE is the Lox source file to scan.

    \b
    Examples:
        loxscan hello.lox              # List tokens
        loxscan -v hello.lox           # With debug logging
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        if verbose:
            click.echo(f"Scanning {input_file}...")

        # Bytes, so carriage returns reach the scanner untranslated
        source = input_file.read_bytes().decode("utf-8")

        options = ScannerOptions(filename=str(input_file), max_errors=max_errors)
        tokens = Scanner(source, options).scan_tokens()

        for token in tokens:
            click.echo(str(token))

        if verbose:
            click.echo(f"Scanned {len(tokens)} tokens")

    except Exception as e:
        handle_cli_exception(e, verbose=verbose)


if __name__ == "__main__":
    main()
