"""
Character Scanner and Token Recognizers
=======================================

This module implements the single-character lookahead scanner shared by
every production of the translator. There is no separate token stream:
the recognizers below pull characters straight from the input, one at a
time, and the grammar decides what to do by inspecting the lookahead.

Lookahead Model
---------------
The scanner always holds exactly one unconsumed character in ``look``.
End of input is represented by the empty string. Reading the last real
character is fine; advancing again once ``look`` is already empty is a
fatal PrematureEndError.

Whitespace
----------
Only horizontal tab and space count as white space. Line terminators are
significant: the command-line driver checks for one after the top-level
production.

Token Recognizers
-----------------
| Recognizer   | Accepts                       | Returns               |
|--------------|-------------------------------|-----------------------|
| get_name     | letter, then letters/digits   | upper-cased name      |
| get_num      | one or more decimal digits    | digit run as text     |
| match_char   | one exact character           | nothing               |

Each recognizer skips trailing white space, so productions never have to.

Example Usage
-------------
>>> scanner = Scanner("alpha = 42 ")
>>> scanner.get_name()
'ALPHA'
>>> scanner.match_char("=")
>>> scanner.get_num()
'42'
"""

import io
import string
from typing import TextIO, Union

from cradle.errors import (
    SourceLocation,
    UnexpectedTokenError,
    PrematureEndError,
)


# =============================================================================
# Character Classes
# =============================================================================

TAB = "\t"
SPACE = " "
END_OF_INPUT = ""

WHITE_CHARS = frozenset((TAB, SPACE))
ADDOPS = frozenset("+-")
MULOPS = frozenset("*/")
DIGITS = frozenset(string.digits)
LINE_TERMINATORS = frozenset("\r\n")


# =============================================================================
# Scanner
# =============================================================================

class Scanner:
    """
    Peekable character cursor with one character of lookahead.

    Attributes:
        look: The next unconsumed character ("" at end of input)
        filename: Name of the input (for error messages)
    """

    def __init__(
        self,
        source: Union[str, TextIO],
        filename: str = "<input>",
    ):
        """
        Initialize the scanner and prime the lookahead.

        Args:
            source: Input text, or a readable text stream
            filename: Name of the input (for error messages)
        """
        if isinstance(source, str):
            source = io.StringIO(source)
        self._stream = source
        self.filename = filename

        # Position of the lookahead character
        self._line = 1
        self._column = 0

        self.look: str = END_OF_INPUT
        self._read()

    # =========================================================================
    # Character Access
    # =========================================================================

    def _read(self) -> None:
        """Replace the lookahead with the next character from the stream."""
        if self.look == "\n":
            self._line += 1
            self._column = 0
        self.look = self._stream.read(1)
        self._column += 1

    def advance(self) -> None:
        """
        Consume the lookahead character.

        Raises:
            PrematureEndError: If the input is already exhausted
        """
        if self.at_end():
            raise PrematureEndError(self.location)
        self._read()

    def at_end(self) -> bool:
        """Check if the whole input has been consumed."""
        return self.look == END_OF_INPUT

    @property
    def location(self) -> SourceLocation:
        """Location of the lookahead character."""
        return SourceLocation(self.filename, self._line, self._column)

    # =========================================================================
    # Character Classification
    # =========================================================================

    def is_white(self) -> bool:
        return self.look in WHITE_CHARS

    def is_addop(self) -> bool:
        return self.look in ADDOPS

    def is_mulop(self) -> bool:
        return self.look in MULOPS

    def is_alpha(self) -> bool:
        return self.look.isalpha()

    def is_digit(self) -> bool:
        return self.look in DIGITS

    def is_alnum(self) -> bool:
        return self.is_alpha() or self.is_digit()

    def is_line_end(self) -> bool:
        return self.look in LINE_TERMINATORS

    def skip_white(self) -> None:
        """Skip over tabs and spaces."""
        while self.is_white():
            self.advance()

    # =========================================================================
    # Token Recognizers
    # =========================================================================

    def expected(self, description: str) -> UnexpectedTokenError:
        """
        Create an error reporting that `description` was expected here.

        The caller raises the returned exception.
        """
        return UnexpectedTokenError(description, self.location)

    def match_char(self, expected: str) -> None:
        """
        Consume `expected`, then any trailing white space.

        Raises:
            UnexpectedTokenError: If the lookahead is anything else
        """
        if self.look != expected:
            raise self.expected(expected)
        self.advance()
        self.skip_white()

    def get_name(self) -> str:
        """
        Recognize an identifier.

        Returns:
            The identifier, upper-cased

        Raises:
            UnexpectedTokenError: If the lookahead is not a letter
        """
        if not self.is_alpha():
            raise self.expected("Name")

        chars = []
        while self.is_alnum():
            chars.append(self.look.upper())
            self.advance()

        self.skip_white()
        return "".join(chars)

    def get_num(self) -> str:
        """
        Recognize an integer literal.

        The digits are kept as text; no range checking is done.

        Raises:
            UnexpectedTokenError: If the lookahead is not a digit
        """
        if not self.is_digit():
            raise self.expected("Integer")

        chars = []
        while self.is_digit():
            chars.append(self.look)
            self.advance()

        self.skip_white()
        return "".join(chars)

    def __repr__(self) -> str:
        return f"Scanner(look={self.look!r}, at={self.location})"
