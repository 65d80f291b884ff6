"""
Translation Session
===================

A Session bundles the whole mutable state of one translation: the
scanner (lookahead character and input cursor), the label counter and
the emitter. Every production receives the same Session; nothing is
kept in module globals, so two translations never see each other's
state.

A Session is created once at the start of a translation and discarded
when it finishes or aborts. It is not meant to be reused.
"""

import io
from dataclasses import dataclass
from typing import Optional, TextIO, Union

from cradle.scanner import Scanner
from cradle.emitter import Emitter, LabelGenerator


@dataclass
class TranslatorOptions:
    """
    Translator configuration options.

    Attributes:
        filename: Input name used in error locations
        indent: Prefix written before every instruction line
        label_prefix: Prefix of generated labels ("L" gives L0, L1, ...)
    """
    filename: str = "<input>"
    indent: str = "\t"
    label_prefix: str = "L"


class Session:
    """
    The state of one translation in progress.

    Attributes:
        scanner: Input cursor with one character of lookahead
        labels: Unique label generator
        emitter: Output line writer
        output: The stream the emitter writes to
    """

    def __init__(
        self,
        source: Union[str, TextIO],
        output: Optional[TextIO] = None,
        options: Optional[TranslatorOptions] = None,
    ):
        self.options = options or TranslatorOptions()
        self.output = output if output is not None else io.StringIO()

        self.scanner = Scanner(source, self.options.filename)
        self.labels = LabelGenerator(self.options.label_prefix)
        self.emitter = Emitter(self.output, self.options.indent)

        self.scanner.skip_white()

    # Shorthands used throughout the productions

    @property
    def look(self) -> str:
        return self.scanner.look

    def emitln(self, text: str) -> None:
        self.emitter.emitln(text)

    def new_label(self) -> str:
        return self.labels.new_label()

    def post_label(self, label: str) -> None:
        self.emitter.post_label(label)
