"""
Askers: where yes/no answers come from.

The game loop treats an asker as opaque and blocking.
"""

from __future__ import annotations

from typing import Callable, Iterable, List, Optional, Protocol

YES = {"y", "yes"}
NO = {"n", "no"}

CATEGORY_PROMPT = "Does it fit in the category {}?"
GUESS_PROMPT = "Is the word that you were thinking of: {}?"
REVEAL_PROMPT = "Hmm I am stumped. What was your word?"


class Asker(Protocol):
    def ask_yes_no(self, prompt: str) -> bool: ...

    def ask_line(self, prompt: str) -> str: ...

    def tell(self, message: str) -> None: ...


class ConsoleAsker:
    """Reads answers from stdin and prints to stdout."""

    def __init__(
        self,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ) -> None:
        self._input = input_fn
        self._output = output_fn

    def ask_yes_no(self, prompt: str) -> bool:
        while True:
            answer = self._input(f"{prompt} ").strip().lower()
            if answer in YES:
                return True
            if answer in NO:
                return False
            self._output("Please answer yes or no.")

    def ask_line(self, prompt: str) -> str:
        return self._input(f"{prompt} ").strip()

    def tell(self, message: str) -> None:
        self._output(message)


class ScriptedAsker:
    """
    Replays canned answers in order.

    Raises RuntimeError when the script runs out, so a test that asks more
    than it planned fails loudly.
    """

    def __init__(self, answers: Iterable[bool], lines: Optional[Iterable[str]] = None) -> None:
        self._answers: List[bool] = list(answers)
        self._lines: List[str] = list(lines or [])
        self.prompts: List[str] = []
        self.messages: List[str] = []

    def ask_yes_no(self, prompt: str) -> bool:
        self.prompts.append(prompt)
        if not self._answers:
            raise RuntimeError(f"No scripted answer left for prompt: {prompt!r}")
        return self._answers.pop(0)

    def ask_line(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._lines:
            raise RuntimeError(f"No scripted line left for prompt: {prompt!r}")
        return self._lines.pop(0)

    def tell(self, message: str) -> None:
        self.messages.append(message)
