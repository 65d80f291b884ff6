"""
Translator Main Module
======================

This module provides the main interface of the translator. It wires one
Session to the expression and statement translators and exposes the
top-level productions:

    Input → Scanner → Productions → Emitter → Pseudo-assembly

Usage
-----
Command line:
    $ echo "a=2+3*4" | cradle

Programmatic:
    >>> from cradle import translate_program
    >>> asm = translate_program("pxbee")

Error Handling
--------------
Translation stops at the first error. The exception propagates out of
the facade unchanged; whatever was already written to the output stream
stays there.
"""

import logging
from typing import Optional, TextIO, Union

from cradle.errors import TranslatorStateError
from cradle.session import Session, TranslatorOptions
from cradle.expressions import ExpressionTranslator
from cradle.statements import StatementTranslator

logger = logging.getLogger(__name__)


class Translator:
    """
    Translates one input stream into pseudo-assembly.

    Example:
        translator = Translator("a=1+b\\n")
        translator.translate_assignment()
        translator.expect_newline()
        print(translator.output_text)

    A Translator performs a single top-level translation. Create a new
    instance for every input.
    """

    def __init__(
        self,
        source: Union[str, TextIO],
        output: Optional[TextIO] = None,
        options: Optional[TranslatorOptions] = None,
    ):
        """
        Initialize the translator.

        Args:
            source: Input text, or a readable text stream
            output: Stream to write to (an in-memory buffer if None)
            options: Translator configuration (uses defaults if None)
        """
        self.session = Session(source, output, options)
        self.expressions = ExpressionTranslator(self.session)
        self.statements = StatementTranslator(self.session, self.expressions)
        self._used = False

    # =========================================================================
    # Top-Level Productions
    # =========================================================================

    def translate_expression(self) -> None:
        """Translate a single expression."""
        self._start("expression")
        self.expressions.expression()
        self._finish()

    def translate_assignment(self) -> None:
        """Translate a single assignment statement."""
        self._start("assignment")
        self.expressions.assignment()
        self._finish()

    def translate_program(self) -> None:
        """Translate a whole program ending in ``e``."""
        self._start("program")
        self.statements.program()
        self._finish()

    def expect_newline(self, allow_end: bool = False) -> None:
        """
        Require the input to continue with a line terminator.

        Args:
            allow_end: Also accept the end of the input

        Raises:
            UnexpectedTokenError: If anything else follows
        """
        scanner = self.session.scanner
        if scanner.is_line_end() or (allow_end and scanner.at_end()):
            return
        raise scanner.expected("Newline")

    @property
    def output_text(self) -> str:
        """
        Everything emitted so far.

        Only available when the translator owns its in-memory output.
        """
        getvalue = getattr(self.session.output, "getvalue", None)
        if getvalue is None:
            raise TranslatorStateError("output was written to an external stream")
        return getvalue()

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def _start(self, production: str) -> None:
        if self._used:
            raise TranslatorStateError(
                "translator already used; create a new Translator for each input"
            )
        self._used = True
        logger.info(f"Translating {production} from {self.session.options.filename}")

    def _finish(self) -> None:
        logger.info(
            f"Emitted {self.session.emitter.lines_emitted} lines, "
            f"{self.session.labels.count} labels"
        )


# =============================================================================
# Convenience Functions
# =============================================================================

def translate_expression(source: str, options: Optional[TranslatorOptions] = None) -> str:
    """
    Translate an expression and return the emitted text.

    Example:
        >>> translate_expression("-x ")
        '\\tCLR D0\\n\\tMOVE D0,-(SP)\\n\\tMOVE X(PC),D0\\n\\tSUB (SP)+,D0\\n\\tNEG D0\\n'
    """
    translator = Translator(source, options=options)
    translator.translate_expression()
    return translator.output_text


def translate_assignment(source: str, options: Optional[TranslatorOptions] = None) -> str:
    """Translate an assignment and return the emitted text."""
    translator = Translator(source, options=options)
    translator.translate_assignment()
    return translator.output_text


def translate_program(source: str, options: Optional[TranslatorOptions] = None) -> str:
    """Translate a program and return the emitted text."""
    translator = Translator(source, options=options)
    translator.translate_program()
    return translator.output_text
