"""
Deterministic oracle for scripted games.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Set, Tuple

from .askers import CATEGORY_PROMPT, GUESS_PROMPT
from .config import EngineConfig
from .corpus import normalize_category


class CorpusOracle:
    """
    Plays the user's side for a secret answer.

    Category questions are answered from the corpus facts for the secret,
    guesses are confirmed only when they name the secret, and the reveal
    prompt gets the secret itself.
    """

    def __init__(
        self,
        pairs: Iterable[Tuple[str, str]],
        secret: str,
        config: Optional[EngineConfig] = None,
        lies: Iterable[str] = (),
    ) -> None:
        self.secret = secret
        self._categories: Set[str] = {
            normalize_category(tag, config)
            for answer, tag in pairs
            if answer == secret
        }
        self._lies = {normalize_category(q, config) for q in lies}
        self.messages: List[str] = []

    def answer(self, question: str) -> bool:
        truth = question in self._categories
        return not truth if question in self._lies else truth

    def confirm(self, guess: str) -> bool:
        return guess == self.secret

    def ask_yes_no(self, prompt: str) -> bool:
        guess = _unwrap(GUESS_PROMPT, prompt)
        if guess is not None:
            return self.confirm(guess)
        question = _unwrap(CATEGORY_PROMPT, prompt)
        if question is not None:
            return self.answer(question)
        raise ValueError(f"CorpusOracle cannot answer prompt: {prompt!r}")

    def ask_line(self, prompt: str) -> str:
        return self.secret

    def tell(self, message: str) -> None:
        self.messages.append(message)


def _unwrap(template: str, prompt: str) -> Optional[str]:
    head, tail = template.split("{}")
    if prompt.startswith(head) and prompt.endswith(tail):
        return prompt[len(head): len(prompt) - len(tail)]
    return None
