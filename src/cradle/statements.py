"""
Statement and Control-Flow Translator
=====================================

Recursive-descent translation of block-structured statements. Keywords
are single lower-case letters recognized from the lookahead alone:

| Letter | Construct | Shape                                         |
|--------|-----------|-----------------------------------------------|
| i      | IF        | i <condition> <block> [ l <block> ] e         |
| w      | WHILE     | w <condition> <block> e                       |
| p      | LOOP      | p <block> e                                   |
| r      | REPEAT    | r <block> u <condition>                       |
| f      | FOR       | f <ident> = <expr> <expr> <block> e           |
| d      | DO        | d <expr> <block> e                            |
| b      | BREAK     | b                                             |

Any other letter starts an identifier. If ``=`` follows, the statement
is an assignment; otherwise the identifier is emitted verbatim as an
instruction line.

Blocks
------
A block is a run of statements that ends at one of a set of terminator
characters supplied by the caller. The terminator itself is left in the
lookahead for the enclosing construct to match.

Break Targets
-------------
Every loop allocates its exit label before translating its body and
passes it down as the break target. IF passes through whatever target
it was given. Only the innermost loop can be left with ``b``, so a single
optional label is enough; no stack is kept.

Conditions
----------
Boolean conditions are not translated yet. ``condition`` emits a fixed
``<condition>`` marker and consumes no input.
"""

import logging
from typing import Optional

from cradle.errors import NoEnclosingLoopError
from cradle.session import Session
from cradle.expressions import ExpressionTranslator

logger = logging.getLogger(__name__)


# =============================================================================
# Keyword Letters and Terminator Sets
# =============================================================================

IF_KEYWORD = "i"
ELSE_KEYWORD = "l"
END_KEYWORD = "e"
WHILE_KEYWORD = "w"
LOOP_KEYWORD = "p"
REPEAT_KEYWORD = "r"
UNTIL_KEYWORD = "u"
FOR_KEYWORD = "f"
DO_KEYWORD = "d"
BREAK_KEYWORD = "b"

END_ONLY = frozenset(END_KEYWORD)
THEN_TERMINATORS = frozenset((END_KEYWORD, ELSE_KEYWORD))
UNTIL_ONLY = frozenset(UNTIL_KEYWORD)

CONDITION_MARKER = "<condition>"


class StatementTranslator:
    """
    Translates statements and control constructs for one Session.

    Expressions are delegated to an ExpressionTranslator sharing the
    same session.
    """

    def __init__(self, session: Session, expressions: Optional[ExpressionTranslator] = None):
        self.session = session
        self.scanner = session.scanner
        self.expressions = expressions or ExpressionTranslator(session)

        self._dispatch = {
            IF_KEYWORD: self.do_if,
            WHILE_KEYWORD: self.do_while,
            LOOP_KEYWORD: self.do_loop,
            REPEAT_KEYWORD: self.do_repeat,
            FOR_KEYWORD: self.do_for,
            DO_KEYWORD: self.do_do,
            BREAK_KEYWORD: self.do_break,
        }

    # =========================================================================
    # Program and Blocks
    # =========================================================================

    def program(self) -> None:
        """
        Parse and translate a program.

            <program> ::= <block> e
        """
        self.block(END_ONLY)
        if self.session.look != END_KEYWORD:
            raise self.scanner.expected("End")
        self.scanner.match_char(END_KEYWORD)
        self.session.emitln("END")

    def block(self, terminators: frozenset, break_label: Optional[str] = None) -> None:
        """
        Translate statements until the lookahead is one of `terminators`.

        Args:
            terminators: Characters that end this block
            break_label: Exit label of the innermost enclosing loop, if any
        """
        while self.session.look not in terminators:
            self.statement(break_label)

    def statement(self, break_label: Optional[str] = None) -> None:
        """Translate one statement, chosen by the lookahead character."""
        handler = self._dispatch.get(self.session.look)
        if handler is not None:
            handler(break_label)
        else:
            self.other()

    def other(self) -> None:
        """
        Translate an assignment or an "other" statement.

        An identifier not followed by ``=`` is emitted as-is.
        """
        name = self.scanner.get_name()
        if self.session.look == "=":
            self.expressions.assign_to(name)
        else:
            self.session.emitln(name)

    def condition(self) -> None:
        """Parse and translate a Boolean condition."""
        self.session.emitln(CONDITION_MARKER)

    # =========================================================================
    # Control Constructs
    # =========================================================================

    def do_if(self, break_label: Optional[str] = None) -> None:
        """
        Recognize and translate an IF construct.

            IF <condition> <block> [ ELSE <block> ] ENDIF
        """
        self.scanner.match_char(IF_KEYWORD)
        label1 = self.session.new_label()
        label2 = label1
        logger.debug(f"IF, false branch at {label1}")

        self.condition()
        self.session.emitln(f"BEQ {label1}")
        self.block(THEN_TERMINATORS, break_label)

        if self.session.look == ELSE_KEYWORD:
            self.scanner.match_char(ELSE_KEYWORD)
            label2 = self.session.new_label()
            self.session.emitln(f"BRA {label2}")
            self.session.post_label(label1)
            self.block(END_ONLY, break_label)

        self.scanner.match_char(END_KEYWORD)
        self.session.post_label(label2)

    def do_while(self, break_label: Optional[str] = None) -> None:
        """
        Recognize and translate a WHILE loop.

            L1: <condition> BEQ L2 <block> BRA L1 L2:
        """
        self.scanner.match_char(WHILE_KEYWORD)
        top = self.session.new_label()
        exit_label = self.session.new_label()
        logger.debug(f"WHILE {top}..{exit_label}")

        self.session.post_label(top)
        self.condition()
        self.session.emitln(f"BEQ {exit_label}")
        self.block(END_ONLY, exit_label)
        self.scanner.match_char(END_KEYWORD)
        self.session.emitln(f"BRA {top}")
        self.session.post_label(exit_label)

    def do_loop(self, break_label: Optional[str] = None) -> None:
        """Parse and translate an endless LOOP, left only through BREAK."""
        self.scanner.match_char(LOOP_KEYWORD)
        top = self.session.new_label()
        exit_label = self.session.new_label()
        logger.debug(f"LOOP {top}..{exit_label}")

        self.session.post_label(top)
        self.block(END_ONLY, exit_label)
        self.scanner.match_char(END_KEYWORD)
        self.session.emitln(f"BRA {top}")
        self.session.post_label(exit_label)

    def do_repeat(self, break_label: Optional[str] = None) -> None:
        """Parse and translate a REPEAT ... UNTIL loop, tested at the bottom."""
        self.scanner.match_char(REPEAT_KEYWORD)
        top = self.session.new_label()
        exit_label = self.session.new_label()
        logger.debug(f"REPEAT {top}..{exit_label}")

        self.session.post_label(top)
        self.block(UNTIL_ONLY, exit_label)
        self.scanner.match_char(UNTIL_KEYWORD)
        self.condition()
        self.session.emitln(f"BEQ {top}")
        self.session.post_label(exit_label)

    def do_for(self, break_label: Optional[str] = None) -> None:
        """
        Parse and translate a FOR loop with a step of one.

            FOR <ident> = <expr1> <expr2> <block> ENDFOR

        The variable starts one below <expr1> and is incremented before
        each test, so both bounds are inclusive. The limit stays on the
        stack for the life of the loop.
        """
        self.scanner.match_char(FOR_KEYWORD)
        top = self.session.new_label()
        exit_label = self.session.new_label()
        name = self.scanner.get_name()
        logger.debug(f"FOR {name} {top}..{exit_label}")

        self.scanner.match_char("=")
        self.expressions.expression()
        self.session.emitln("SUBQ #1,D0")
        self.expressions.store(name)
        self.expressions.expression()
        self.session.emitln("MOVE D0,-(SP)")

        self.session.post_label(top)
        self.session.emitln(f"LEA {name}(PC),A0")
        self.session.emitln("MOVE (A0),D0")
        self.session.emitln("ADDQ #1,D0")
        self.session.emitln("MOVE D0,(A0)")
        self.session.emitln("CMP (SP),D0")
        self.session.emitln(f"BGT {exit_label}")

        self.block(END_ONLY, exit_label)
        self.scanner.match_char(END_KEYWORD)
        self.session.emitln(f"BRA {top}")
        self.session.post_label(exit_label)
        self.session.emitln("ADDQ #2,SP")

    def do_do(self, break_label: Optional[str] = None) -> None:
        """
        Parse and translate a counted DO loop.

            DO <expr> <block> ENDDO

        The trip count is reduced by one and counted down to zero with
        DBRA. The counter is saved on the stack around the body.
        """
        self.scanner.match_char(DO_KEYWORD)
        top = self.session.new_label()
        exit_label = self.session.new_label()
        logger.debug(f"DO {top}..{exit_label}")

        self.expressions.expression()
        self.session.emitln("SUBQ #1,D0")
        self.session.post_label(top)
        self.session.emitln("MOVE D0,-(SP)")

        self.block(END_ONLY, exit_label)
        self.scanner.match_char(END_KEYWORD)
        self.session.emitln("MOVE (SP)+,D0")
        self.session.emitln(f"DBRA D0,{top}")
        # Fall-through and BREAK both arrive at the exit with one word to drop
        self.session.emitln("SUBQ #2,SP")
        self.session.post_label(exit_label)
        self.session.emitln("ADDQ #2,SP")

    def do_break(self, break_label: Optional[str] = None) -> None:
        """
        Translate a BREAK out of the innermost loop.

        Raises:
            NoEnclosingLoopError: If there is no loop to leave
        """
        location = self.scanner.location
        self.scanner.match_char(BREAK_KEYWORD)
        if break_label is None:
            raise NoEnclosingLoopError(location)
        self.session.emitln(f"BRA {break_label}")
