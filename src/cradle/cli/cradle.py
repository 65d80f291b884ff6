"""
cradle - Translator Command-Line Interface
==========================================

This module implements the command-line interface for the translator.
It reads one line of source (or a whole program), translates it, and
writes the pseudo-assembly as it is produced.

Usage Examples
--------------
Translate an assignment from standard input:
    $ echo "a=2+3*4" | cradle

Translate a program file:
    $ cradle --program loops.txt -o loops.asm

Verbose mode:
    $ cradle -v --program loops.txt
"""

import logging
from typing import TextIO

import click

from cradle import __version__
from cradle.session import TranslatorOptions
from cradle.translator import Translator
from cradle.cli.errors import handle_cli_exception


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.File("r"),
    default="-",
)
@click.option(
    "-o", "--output",
    type=click.File("w"),
    default="-",
    help="Output file (default: standard output)",
)
@click.option(
    "--program",
    is_flag=True,
    help="Translate a whole program instead of a single assignment",
)
@click.option(
    "--label-prefix",
    default="L",
    show_default=True,
    help="Prefix for generated labels",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="cradle")
def main(
    input_file: TextIO,
    output: TextIO,
    program: bool,
    label_prefix: str,
    verbose: bool,
) -> None:
    """
    Translate toy-language source into pseudo-assembly.

    INPUT_FILE is read one character at a time (default: standard input).

    \b
    By default the input is a single assignment followed by a newline:
        a=2+3*4

    \b
    With --program the input is a block of statements ending in 'e':
        i  IF           w  WHILE        p  LOOP
        r  REPEAT/u     f  FOR          d  DO
        b  BREAK        l  ELSE         e  END

    Lines emitted before an error are left in the output.
    """
    setup_logging(verbose)

    options = TranslatorOptions(
        filename=getattr(input_file, "name", "<stdin>"),
        label_prefix=label_prefix,
    )

    try:
        translator = Translator(input_file, output, options)
        if program:
            translator.translate_program()
            translator.expect_newline(allow_end=True)
        else:
            translator.translate_assignment()
            translator.expect_newline()
    except Exception as e:
        output.flush()
        handle_cli_exception(e, verbose)


if __name__ == "__main__":
    main()
