"""
Interactive collector reading answers from a text stream.
"""

import sys
from typing import Optional, TextIO

from pairrank.collectors.base import ResponseCollector
from pairrank.core.constants import ATTACK, DEFENSE
from pairrank.core.types import Entity, Response
from pairrank.utils.validation import parse_ratio

SKIP_WORDS = {"s", "skip"}
QUIT_WORDS = {"q", "quit", "exit"}


class ConsoleResponseCollector(ResponseCollector):
    """
    Prompts for ratios on a terminal (or any pair of text streams).

    Accepted answers: a positive number or fraction ("1.5", "3/2"),
    "s" to skip, "q" to quit. Anything else is asked again. End of input
    counts as quit.
    """

    def __init__(self, input_stream: Optional[TextIO] = None, output_stream: Optional[TextIO] = None):
        self.input_stream = input_stream or sys.stdin
        self.output_stream = output_stream or sys.stdout

    def get_response(
        self,
        entity_a: Entity,
        entity_b: Entity,
        attribute: Optional[str] = None
    ) -> Response:
        if attribute:
            question = (
                f"How many times better is {entity_a.name}'s {attribute} "
                f"than {entity_b.name}'s?"
            )
        else:
            question = f"How many times better is {entity_a.name} than {entity_b.name}?"
        return self._prompt(question)

    def get_self_response(
        self,
        entity: Entity,
        primary: str = ATTACK,
        secondary: str = DEFENSE
    ) -> Response:
        return self._prompt(
            f"How many times better is {entity.name}'s {primary} than their {secondary}?"
        )

    def _prompt(self, question: str) -> Response:
        while True:
            self.output_stream.write(f"{question} [number, s = skip, q = quit]: ")
            self.output_stream.flush()

            line = self.input_stream.readline()
            if not line:
                return Response.quit()

            answer = line.strip().lower()
            if answer in SKIP_WORDS:
                return Response.skip()
            if answer in QUIT_WORDS:
                return Response.quit()

            ratio = parse_ratio(answer)
            if ratio is not None:
                return Response.value(ratio)

            self.output_stream.write("Please enter a positive number, 's' or 'q'.\n")
