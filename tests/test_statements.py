# =============================================================================
# test_statements.py - Statement and Control-Flow Unit Tests
# =============================================================================
# Tests for block translation and the control constructs.
#
# Test coverage includes:
#   - Program framing and "other" statements
#   - Assignment statements inside blocks
#   - IF / ELSE, WHILE, LOOP, REPEAT, FOR, DO
#   - BREAK targets, nesting, and BREAK outside any loop
#   - Label uniqueness across a whole translation
# =============================================================================

import re

import pytest
from cradle.session import Session, TranslatorOptions
from cradle.statements import StatementTranslator, END_ONLY
from cradle.translator import Translator, translate_program
from cradle.errors import UnexpectedTokenError, NoEnclosingLoopError


# =============================================================================
# Helper Functions
# =============================================================================

def program(source: str) -> list:
    """Translate a program and return its output lines."""
    return translate_program(source).splitlines()


def statements_for(source: str) -> StatementTranslator:
    """Create a statement translator over a fresh session."""
    return StatementTranslator(Session(source))


LABEL_REF = re.compile(r"\b(L\d+)\b")


# =============================================================================
# Program and Simple Statement Tests
# =============================================================================

class TestProgram:
    """Test program framing and simple statements."""

    def test_empty_program(self):
        assert program("e") == ["\tEND"]

    def test_other_statement(self):
        """An unrecognized letter emits the bare identifier."""
        translator = statements_for("b")
        translator.other()
        assert translator.session.output.getvalue() == "\tB\n"

    def test_other_statements_in_program(self):
        assert program("x yz e") == ["\tX", "\tYZ", "\tEND"]

    def test_assignment_statement(self):
        assert program("a=1 e") == [
            "\tMOVE #1,D0",
            "\tLEA A(PC),A0",
            "\tMOVE D0,(A0)",
            "\tEND",
        ]

    def test_missing_end(self):
        with pytest.raises(UnexpectedTokenError, match="Name Expected"):
            program("x")

    def test_block_stops_at_terminator(self):
        """The terminator is left in the lookahead for the caller."""
        translator = statements_for("x y u z")
        translator.block(frozenset("u"))
        assert translator.session.look == "u"
        assert translator.session.output.getvalue() == "\tX\n\tY\n"


# =============================================================================
# IF Tests
# =============================================================================

class TestIf:
    """Test IF with and without ELSE."""

    def test_if(self):
        assert program("i x e e") == [
            "\t<condition>",
            "\tBEQ L0",
            "\tX",
            "L0:",
            "\tEND",
        ]

    def test_if_else(self):
        assert program("i x l y e e") == [
            "\t<condition>",
            "\tBEQ L0",
            "\tX",
            "\tBRA L1",
            "L0:",
            "\tY",
            "L1:",
            "\tEND",
        ]

    def test_else_only_ends_then_branch(self):
        """Inside a loop body, 'l' is an ordinary statement."""
        lines = program("w l e e")
        assert "\tL" in lines


# =============================================================================
# Loop Tests
# =============================================================================

class TestLoops:
    """Test each loop construct's label placement."""

    def test_while(self):
        assert program("w x y e e") == [
            "L0:",
            "\t<condition>",
            "\tBEQ L1",
            "\tX",
            "\tY",
            "\tBRA L0",
            "L1:",
            "\tEND",
        ]

    @pytest.mark.parametrize("body", ["", "x ", "a=1 x ", "p b e "])
    def test_while_shape_independent_of_body(self, body):
        lines = program(f"w {body}e e")
        assert lines[:3] == ["L0:", "\t<condition>", "\tBEQ L1"]
        assert lines[-3:] == ["\tBRA L0", "L1:", "\tEND"]

    def test_loop(self):
        assert program("p x b e e") == [
            "L0:",
            "\tX",
            "\tBRA L1",
            "\tBRA L0",
            "L1:",
            "\tEND",
        ]

    def test_repeat(self):
        assert program("r x u e") == [
            "L0:",
            "\tX",
            "\t<condition>",
            "\tBEQ L0",
            "L1:",
            "\tEND",
        ]

    def test_for(self):
        assert program("f i = 1 10 x e e") == [
            "\tMOVE #1,D0",
            "\tSUBQ #1,D0",
            "\tLEA I(PC),A0",
            "\tMOVE D0,(A0)",
            "\tMOVE #10,D0",
            "\tMOVE D0,-(SP)",
            "L0:",
            "\tLEA I(PC),A0",
            "\tMOVE (A0),D0",
            "\tADDQ #1,D0",
            "\tMOVE D0,(A0)",
            "\tCMP (SP),D0",
            "\tBGT L1",
            "\tX",
            "\tBRA L0",
            "L1:",
            "\tADDQ #2,SP",
            "\tEND",
        ]

    def test_do(self):
        assert program("d 3 x e e") == [
            "\tMOVE #3,D0",
            "\tSUBQ #1,D0",
            "L0:",
            "\tMOVE D0,-(SP)",
            "\tX",
            "\tMOVE (SP)+,D0",
            "\tDBRA D0,L0",
            "\tSUBQ #2,SP",
            "L1:",
            "\tADDQ #2,SP",
            "\tEND",
        ]

    def test_for_requires_equals(self):
        with pytest.raises(UnexpectedTokenError, match="= Expected"):
            program("f i 1 10 e e")

    def test_terminators_depend_on_context(self):
        """Inside a REPEAT body, 'e' is an ordinary statement."""
        assert program("r e u e") == [
            "L0:",
            "\tE",
            "\t<condition>",
            "\tBEQ L0",
            "L1:",
            "\tEND",
        ]


# =============================================================================
# BREAK Tests
# =============================================================================

class TestBreak:
    """Test that BREAK leaves exactly the innermost loop."""

    def test_break_in_do(self):
        lines = program("d 3 b e e")
        assert "\tBRA L1" in lines
        assert lines.index("\tBRA L1") < lines.index("L1:")

    def test_break_through_if(self):
        """IF passes the enclosing loop's exit label down."""
        assert program("p i b e e e") == [
            "L0:",
            "\t<condition>",
            "\tBEQ L2",
            "\tBRA L1",
            "L2:",
            "\tBRA L0",
            "L1:",
            "\tEND",
        ]

    def test_break_targets_innermost_loop(self):
        assert program("w p b e b e e") == [
            "L0:",
            "\t<condition>",
            "\tBEQ L1",
            "L2:",
            "\tBRA L3",
            "\tBRA L2",
            "L3:",
            "\tBRA L1",
            "\tBRA L0",
            "L1:",
            "\tEND",
        ]

    def test_break_outside_loop(self):
        with pytest.raises(NoEnclosingLoopError) as exc_info:
            program("b e")
        assert exc_info.value.message == "No loop to break from"

    def test_break_in_if_outside_loop(self):
        with pytest.raises(NoEnclosingLoopError):
            program("i b e e")

    def test_output_before_error_is_kept(self):
        """Lines emitted before the failure stay in the output."""
        translator = Translator("x b e")
        with pytest.raises(NoEnclosingLoopError):
            translator.translate_program()
        assert translator.output_text == "\tX\n"

    def test_direct_block_without_loop(self):
        translator = statements_for("b e")
        with pytest.raises(NoEnclosingLoopError):
            translator.block(END_ONLY)


# =============================================================================
# Label Discipline Tests
# =============================================================================

class TestLabels:
    """Test label uniqueness across a translation."""

    SOURCE = "w i x l p b e e r d 2 f k = 1 3 b e e u e e"

    def test_labels_defined_once(self):
        lines = program(self.SOURCE)
        definitions = [line[:-1] for line in lines if line.endswith(":")]
        assert len(definitions) == len(set(definitions))

    def test_every_reference_is_defined(self):
        lines = program(self.SOURCE)
        definitions = {line[:-1] for line in lines if line.endswith(":")}
        references = set()
        for line in lines:
            if line.startswith("\t"):
                references.update(LABEL_REF.findall(line))
        assert references
        assert references <= definitions

    def test_label_numbers_are_contiguous(self):
        lines = program(self.SOURCE)
        numbers = sorted(int(line[1:-1]) for line in lines if line.endswith(":"))
        assert numbers == list(range(len(numbers)))

    def test_label_prefix_option(self):
        options = TranslatorOptions(label_prefix="LBL")
        lines = translate_program("p b e e", options).splitlines()
        assert lines == ["LBL0:", "\tBRA LBL1", "\tBRA LBL0", "LBL1:", "\tEND"]

    def test_indent_option(self):
        options = TranslatorOptions(indent="    ")
        assert translate_program("x e", options) == "    X\n    END\n"
