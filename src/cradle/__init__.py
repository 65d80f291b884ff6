"""
Cradle - Single-Pass Recursive-Descent Translator
=================================================

This package translates a tiny imperative toy language into
68000-flavoured pseudo-assembly text in a single pass. Every grammar
production emits its code the moment it recognizes its input; no syntax
tree is ever built.

Main Components
---------------
- **scanner**: One-character lookahead over the input, plus the
  identifier, integer and exact-character recognizers
- **expressions**: Arithmetic expressions, variables and calls
- **statements**: Blocks and control constructs (if, while, loop,
  repeat, for, do, break)
- **emitter**: Instruction/label line output and label generation
- **translator**: The Translator facade and convenience functions

Quick Start
-----------
    >>> from cradle import translate_assignment
    >>> print(translate_assignment("a=2+3*4 "), end="")
    	MOVE #2,D0
    	MOVE D0,-(SP)
    	MOVE #3,D0
    	MOVE D0,-(SP)
    	MOVE #4,D0
    	MULS (SP)+,D0
    	ADD (SP)+,D0
    	LEA A(PC),A0
    	MOVE D0,(A0)

Or use the command-line tool:
    $ echo "a=2+3*4" | cradle
    $ echo "w x e e" | cradle --program
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from cradle.errors import (
    CradleError,
    SourceLocation,
    TranslationError,
    UnexpectedTokenError,
    NoEnclosingLoopError,
    PrematureEndError,
    TranslatorStateError,
)
from cradle.scanner import Scanner
from cradle.emitter import Emitter, LabelGenerator
from cradle.session import Session, TranslatorOptions
from cradle.expressions import ExpressionTranslator
from cradle.statements import StatementTranslator
from cradle.translator import (
    Translator,
    translate_expression,
    translate_assignment,
    translate_program,
)

__all__ = [
    # Version info
    "__version__",
    # Translation
    "Translator",
    "TranslatorOptions",
    "Session",
    "translate_expression",
    "translate_assignment",
    "translate_program",
    # Components
    "Scanner",
    "Emitter",
    "LabelGenerator",
    "ExpressionTranslator",
    "StatementTranslator",
    # Exception hierarchy
    "CradleError",
    "SourceLocation",
    "TranslationError",
    "UnexpectedTokenError",
    "NoEnclosingLoopError",
    "PrematureEndError",
    "TranslatorStateError",
]
