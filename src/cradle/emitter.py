"""
Line Emitter and Label Generator
================================

Output of the translator is plain line-oriented text written straight to
a stream as the grammar productions run:

    <indent><MNEMONIC> <operands>     instruction line
    <NAME>:                           label definition

Output is append-only. A branch may name a label whose definition has
not been written yet; resolving such forward references is left to
whatever consumes the text.

Example output for ``w x e``:

    L0:
    	<condition>
    	BEQ L1
    	X
    	BRA L0
    L1:
"""

import logging
from typing import TextIO

logger = logging.getLogger(__name__)


# =============================================================================
# Label Generator
# =============================================================================

class LabelGenerator:
    """
    Produces unique, monotonically numbered branch-target names.

    The counter starts at zero and only ever increases, so no label is
    handed out twice during one translation.
    """

    def __init__(self, prefix: str = "L"):
        self.prefix = prefix
        self._count = 0

    def new_label(self) -> str:
        """Generate a unique label."""
        label = f"{self.prefix}{self._count}"
        self._count += 1
        logger.debug(f"Allocated label {label}")
        return label

    @property
    def count(self) -> int:
        """Number of labels handed out so far."""
        return self._count


# =============================================================================
# Emitter
# =============================================================================

class Emitter:
    """
    Writes instruction and label lines to an output stream.

    Attributes:
        indent: Prefix written before every instruction
        lines_emitted: Count of completed output lines
    """

    def __init__(self, stream: TextIO, indent: str = "\t"):
        self._stream = stream
        self.indent = indent
        self.lines_emitted = 0

    def emit(self, text: str) -> None:
        """Output an indented instruction without ending the line."""
        self._stream.write(self.indent + text)

    def emitln(self, text: str) -> None:
        """Output an indented instruction followed by a line break."""
        self.emit(text)
        self._stream.write("\n")
        self.lines_emitted += 1

    def post_label(self, label: str) -> None:
        """Output a label definition, unindented."""
        self._stream.write(f"{label}:\n")
        self.lines_emitted += 1
