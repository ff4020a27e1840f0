"""
Twenty questions inference engine.

Owns the feature matrix, the candidate store, the question registry and the
log of asked questions for exactly one game. Start a new game by building a
new engine.
"""

from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Deque, Dict, Iterable, List, Optional, Tuple

from .config import EngineConfig
from .corpus import normalize_category
from .matrix import SparseFeatureMatrix
from .selection import select_best_guess, select_question, split_fraction
from .stores import SubsetTrackingStore

SENTINEL = "EMPTY_SET"


@dataclass
class Candidate:
    """An answer the user might be thinking of."""
    name: str
    row: int
    match_count: int = 0


@dataclass(frozen=True)
class Question:
    """A yes/no category test."""
    name: str
    col: int


@dataclass(frozen=True)
class AskedQuestion:
    question: str
    col: int
    response: bool


@dataclass(frozen=True)
class NextQuestion:
    """What the caller should do next: confirm a guess or ask a category."""
    text: str
    is_guess: bool

    @property
    def exhausted(self) -> bool:
        return not self.is_guess and self.text == SENTINEL


@dataclass(frozen=True)
class Mismatch:
    question: str
    response: bool
    expected: bool


@dataclass
class DifferenceReport:
    revealed: str
    mismatches: List[Mismatch] = field(default_factory=list)
    checked: int = 0

    @property
    def consistent(self) -> bool:
        return not self.mismatches

    def lines(self) -> List[str]:
        if self.consistent:
            return ["I was about to get to that one.."]
        return [f"You incorrectly answered {m.question}" for m in self.mismatches]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "revealed": self.revealed,
            "checked": self.checked,
            "mismatches": [
                {"question": m.question, "response": m.response, "expected": m.expected}
                for m in self.mismatches
            ],
        }


@dataclass
class EngineSnapshot:
    survivors: List[str]
    n_candidates: int
    n_questions: int
    n_askable: int
    asked: List[str]

    @property
    def n_active(self) -> int:
        return len(self.survivors)

    @property
    def entropy_proxy(self) -> float:
        n = self.n_active
        return 0.0 if n <= 1 else math.log2(n)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "survivors": list(self.survivors),
            "n_active": self.n_active,
            "n_candidates": self.n_candidates,
            "n_questions": self.n_questions,
            "n_askable": self.n_askable,
            "asked": list(self.asked),
            "entropy_proxy": self.entropy_proxy,
        }


class EngineError(Exception):
    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details


class InferenceEngine:
    """
    Adaptive twenty questions over a tagged corpus.

    Each turn picks the question that best bisects the active candidates,
    scores every active candidate against the answer and drops those whose
    match ratio falls below the configured threshold.
    """

    def __init__(self, config: Optional[EngineConfig] = None) -> None:
        self.config = (config or EngineConfig()).validate()
        self._matrix = SparseFeatureMatrix(
            rows=self.config.initial_rows,
            cols=self.config.initial_cols,
            row_growth=self.config.row_growth,
            col_growth=self.config.col_growth,
        )
        self._candidates: SubsetTrackingStore[Candidate] = SubsetTrackingStore()
        self._questions: Dict[str, Question] = {}
        self._askable: Dict[str, None] = {}
        self._asked: Deque[AskedQuestion] = deque()

    @classmethod
    def from_pairs(
        cls,
        pairs: Iterable[Tuple[str, str]],
        config: Optional[EngineConfig] = None,
    ) -> "InferenceEngine":
        engine = cls(config)
        engine.ingest(pairs)
        return engine

    # ---- ingestion ----

    def ingest(self, pairs: Iterable[Tuple[str, str]]) -> int:
        """
        Register (answer, category) pairs. Returns the number of pairs used.

        Categories that normalize to an empty string are skipped.
        """
        used = 0
        for answer_name, tag in pairs:
            question_name = normalize_category(tag, self.config)
            if not question_name:
                continue
            candidate = self._register_candidate(answer_name)
            question = self._register_question(question_name)
            self._matrix.set(candidate.row, question.col, True)
            used += 1
        return used

    def _register_candidate(self, name: str) -> Candidate:
        if self._candidates.contains_key(name):
            return self._candidates[name]
        candidate = Candidate(name=name, row=self._candidates.full_size())
        self._matrix.grow_to(candidate.row + 1, self._matrix.cols)
        self._candidates.put(name, candidate)
        return candidate

    def _register_question(self, name: str) -> Question:
        question = self._questions.get(name)
        if question is not None:
            return question
        question = Question(name=name, col=len(self._questions))
        self._matrix.grow_to(self._matrix.rows, question.col + 1)
        self._questions[name] = question
        self._askable[name] = None
        return question

    # ---- turn API ----

    def get_next_question(self, asked_count: int) -> NextQuestion:
        """
        Decide the next move for turn `asked_count` (1-based).

        Returns the sentinel when no candidates remain, a guess when few
        candidates remain or the turn budget is spent, otherwise the most
        even splitting question.

        A question is only offered when it splits the active candidates.
        When the pool is empty or every remaining question is shared by all
        or none of them, the best guess is returned rather than an empty
        question, so callers never see a blank prompt.
        """
        if self._candidates.active_size() == 0:
            return NextQuestion(text=SENTINEL, is_guess=False)
        if (
            self._candidates.active_size() < self.config.min_candidates
            or asked_count == self.config.max_questions
        ):
            return NextQuestion(text=self.best_guess(), is_guess=True)
        question = select_question(
            self._matrix,
            self._active_rows(),
            [(name, self._questions[name].col) for name in self._askable],
        )
        if question is None:
            return NextQuestion(text=self.best_guess(), is_guess=True)
        return NextQuestion(text=question, is_guess=False)

    def update_database(self, response: bool, question_name: str, asked_count: int) -> List[str]:
        """
        Record an answer, rescore active candidates and prune.

        Returns the names refined out of the active subset, in order.
        """
        if asked_count < 1:
            raise EngineError(
                code="INVALID_TURN",
                message="Turn index must be at least 1.",
                details={"asked_count": asked_count},
            )
        question = self._questions.get(question_name)
        if question is None:
            raise EngineError(
                code="UNKNOWN_QUESTION",
                message="Question was never registered.",
                details={"question": question_name},
            )
        response = bool(response)
        self._asked.append(AskedQuestion(question.name, question.col, response))
        self._askable.pop(question.name, None)

        to_remove: List[str] = []
        for name in self._candidates.active_keys():
            candidate = self._candidates[name]
            if self._matrix.get(candidate.row, question.col) == response:
                candidate.match_count += 1
            if candidate.match_count / asked_count < self.config.threshold:
                to_remove.append(name)
        for name in to_remove:
            self._candidates.refine(name)
        return to_remove

    def remove_incorrect_guess(self, name: str) -> None:
        self._candidates.refine(name)

    def best_guess(self) -> str:
        """Highest match-count among active candidates, or "" if none remain."""
        best = select_best_guess(
            (name, self._candidates[name].match_count)
            for name in self._candidates.active_keys()
        )
        return best or ""

    def contains(self, name: str) -> bool:
        return self._candidates.contains_key(name)

    def find_difference(self, revealed_name: str) -> DifferenceReport:
        """
        Explain a miss by draining the asked-question log.

        Every logged answer is compared with the revealed candidate's
        feature. The log is empty afterwards.
        """
        candidate = self._candidates.get(revealed_name)
        report = DifferenceReport(revealed=revealed_name)
        while self._asked:
            entry = self._asked.popleft()
            expected = self._matrix.get(candidate.row, entry.col)
            report.checked += 1
            if expected != entry.response:
                report.mismatches.append(
                    Mismatch(question=entry.question, response=entry.response, expected=expected)
                )
        return report

    def show_answer_key(self) -> List[str]:
        return self._candidates.full_keys()

    # ---- introspection ----

    def is_active(self, name: str) -> bool:
        return self._candidates.is_active(name)

    def active_candidates(self) -> List[str]:
        return self._candidates.active_keys()

    def match_count(self, name: str) -> int:
        return self._candidates[name].match_count

    def has_feature(self, name: str, question_name: str) -> bool:
        question = self._questions.get(normalize_category(question_name, self.config))
        if question is None or not self._candidates.contains_key(name):
            return False
        return self._matrix.get(self._candidates[name].row, question.col)

    def askable_questions(self) -> List[str]:
        return list(self._askable)

    def asked_log(self) -> List[AskedQuestion]:
        return list(self._asked)

    def question_split(self, question_name: str) -> float:
        """Fraction of active candidates that have the category."""
        question = self._questions[question_name]
        return split_fraction(self._matrix, self._active_rows(), question.col)

    def snapshot(self) -> EngineSnapshot:
        return EngineSnapshot(
            survivors=self._candidates.active_keys(),
            n_candidates=self._candidates.full_size(),
            n_questions=len(self._questions),
            n_askable=len(self._askable),
            asked=[entry.question for entry in self._asked],
        )

    @property
    def matrix(self) -> SparseFeatureMatrix:
        return self._matrix

    def _active_rows(self) -> List[int]:
        return [self._candidates[name].row for name in self._candidates.active_keys()]
