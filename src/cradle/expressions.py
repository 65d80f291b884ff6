"""
Expression Translator
=====================

Recursive-descent translation of arithmetic expressions straight into
accumulator-based pseudo-assembly. No expression tree is built: each
production emits its code as soon as it has recognized enough input.

Grammar
-------
    <expression> ::= [<addop>] <term> [<addop> <term>]*
    <term>       ::= <factor> [<mulop> <factor>]*
    <factor>     ::= ( <expression> ) | <ident> [ ( ) ] | <number>

Code Generation Strategy
------------------------
Every production leaves its value in D0 (the accumulator). A binary
operator pushes the left operand, translates the right operand into D0,
then combines the two:

| Operator | Code after the right operand        |
|----------|-------------------------------------|
| +        | ADD (SP)+,D0                        |
| -        | SUB (SP)+,D0 / NEG D0               |
| *        | MULS (SP)+,D0                       |
| /        | MOVE (SP)+,D1 / DIVS D1,D0          |

SUB leaves right - left in D0, so the result is negated. A leading
unary sign clears D0 first, so ``-x`` becomes ``0 - x``.

Example:
    >>> from cradle.translator import translate_expression
    >>> print(translate_expression("1+2 "), end="")
    	MOVE #1,D0
    	MOVE D0,-(SP)
    	MOVE #2,D0
    	ADD (SP)+,D0
"""

from cradle.session import Session


# Accumulator-machine mnemonics
PUSH_D0 = "MOVE D0,-(SP)"
CLEAR_D0 = "CLR D0"


class ExpressionTranslator:
    """
    Translates arithmetic expressions for one Session.

    Each production consumes input through the session's scanner and
    writes through its emitter.
    """

    def __init__(self, session: Session):
        self.session = session
        self.scanner = session.scanner

    # =========================================================================
    # Productions
    # =========================================================================

    def expression(self) -> None:
        """
        Parse and translate a math expression.

            <expression> ::= [<addop>] <term> [<addop> <term>]*
        """
        if self.scanner.is_addop():
            self.session.emitln(CLEAR_D0)
        else:
            self.term()

        while self.scanner.is_addop():
            self.session.emitln(PUSH_D0)
            if self.session.look == "+":
                self.add()
            else:
                self.subtract()

    def term(self) -> None:
        """
        Parse and translate a math term.

            <term> ::= <factor> [<mulop> <factor>]*
        """
        self.factor()
        while self.scanner.is_mulop():
            self.session.emitln(PUSH_D0)
            if self.session.look == "*":
                self.multiply()
            else:
                self.divide()

    def factor(self) -> None:
        """
        Parse and translate a math factor.

            <factor> ::= ( <expression> ) | <ident> | <number>
        """
        if self.session.look == "(":
            self.scanner.match_char("(")
            self.expression()
            self.scanner.match_char(")")
        elif self.scanner.is_alpha():
            self.ident()
        else:
            self.session.emitln(f"MOVE #{self.scanner.get_num()},D0")

    def ident(self) -> None:
        """Translate a variable reference or a no-argument call."""
        name = self.scanner.get_name()
        if self.session.look == "(":
            self.scanner.match_char("(")
            self.scanner.match_char(")")
            self.session.emitln(f"BSR {name}")
        else:
            self.session.emitln(f"MOVE {name}(PC),D0")

    # =========================================================================
    # Operators
    # =========================================================================

    def add(self) -> None:
        self.scanner.match_char("+")
        self.term()
        self.session.emitln("ADD (SP)+,D0")

    def subtract(self) -> None:
        self.scanner.match_char("-")
        self.term()
        self.session.emitln("SUB (SP)+,D0")
        self.session.emitln("NEG D0")

    def multiply(self) -> None:
        self.scanner.match_char("*")
        self.factor()
        self.session.emitln("MULS (SP)+,D0")

    def divide(self) -> None:
        self.scanner.match_char("/")
        self.factor()
        # Left operand into D1
        self.session.emitln("MOVE (SP)+,D1")
        self.session.emitln("DIVS D1,D0")

    # =========================================================================
    # Assignment
    # =========================================================================

    def assignment(self) -> None:
        """
        Parse and translate an assignment statement.

            <assignment> ::= <ident> = <expression>
        """
        name = self.scanner.get_name()
        self.assign_to(name)

    def assign_to(self, name: str) -> None:
        """Translate ``= <expression>`` and store the result in `name`."""
        self.scanner.match_char("=")
        self.expression()
        self.store(name)

    def store(self, name: str) -> None:
        """Store the accumulator into the memory location of `name`."""
        self.session.emitln(f"LEA {name}(PC),A0")
        self.session.emitln("MOVE D0,(A0)")
