"""
Cradle Error Hierarchy
======================

This module defines the exception hierarchy for the translator.
All exceptions inherit from CradleError, allowing callers to catch
every translator-related error with a single except clause.

Exception Hierarchy
-------------------
CradleError (base)
├── TranslationError (fatal, aborts the translation)
│   ├── UnexpectedTokenError - identifier, literal or character mismatch
│   ├── NoEnclosingLoopError - break used outside any loop
│   └── PrematureEndError - input ran out while a character was required
└── TranslatorStateError - a Translator instance was misused

Design Philosophy
-----------------
Every translation error is fatal. Recognizers and productions raise; no
production catches. Lines already written to the output stream stay
there, so the output shows exactly how far translation got.

Error messages follow this format when the location is known:
    filename:line:column: error: description
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class CradleError(Exception):
    """
    Base exception for all translator errors.

        try:
            translate_program("wxe")
        except CradleError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    A position in the input stream, used for error reporting.

    Attributes:
        filename: Name of the input (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Translation Exceptions
# =============================================================================

class TranslationError(CradleError):
    """
    Base exception for fatal translation errors.

    Attributes:
        message: The error description, without location
        location: Where in the input the error occurred (optional)
    """

    def __init__(self, message: str, location: Optional[SourceLocation] = None):
        self.message = message
        self.location = location
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.location:
            return f"{self.location}: error: {self.message}"
        return self.message


class UnexpectedTokenError(TranslationError):
    """
    The lookahead did not match what the grammar required.

    Covers identifier, integer literal and exact-character mismatches.
    The description names what was expected ("Name", "Integer", "=", ...).

    Example:
        >>> str(UnexpectedTokenError("Name"))
        'Name Expected'
    """

    def __init__(self, description: str, location: Optional[SourceLocation] = None):
        self.description = description
        super().__init__(f"{description} Expected", location)


class NoEnclosingLoopError(TranslationError):
    """A break statement appeared with no loop around it."""

    def __init__(self, location: Optional[SourceLocation] = None):
        super().__init__("No loop to break from", location)


class PrematureEndError(TranslationError):
    """The scanner was asked to advance past the end of the input."""

    def __init__(self, location: Optional[SourceLocation] = None):
        super().__init__("premature end of input", location)


# =============================================================================
# API Misuse
# =============================================================================

class TranslatorStateError(CradleError):
    """
    A Translator was used in a way its single-session lifecycle forbids.

    Each Translator owns one session and performs exactly one top-level
    translation.
    """
    pass
