"""
Twenty Questions game runner.

Sequences one game against an InferenceEngine:
1. Asks the engine for the next move
2. Confirms a guess or asks a category question through the asker
3. Feeds the answer back into the engine
4. Falls back to the give-up path when candidates or turns run out

The runner does NOT choose questions - that's the engine's job.
"""

from __future__ import annotations

import json
import os
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, TextIO

from .askers import CATEGORY_PROMPT, GUESS_PROMPT, REVEAL_PROMPT, Asker
from .engine import DifferenceReport, InferenceEngine

WON = "won"
EXHAUSTED = "exhausted"


@dataclass
class GameResult:
    """Result of one game."""
    outcome: str
    questions_asked: int
    turns: int
    guess: Optional[str] = None
    revealed: Optional[str] = None
    known: Optional[bool] = None
    difference: Optional[DifferenceReport] = None
    run_id: str = ""
    log_dir: str = ""
    trace: list = field(default_factory=list)

    @property
    def won(self) -> bool:
        return self.outcome == WON

    def to_dict(self) -> dict:
        return {
            "outcome": self.outcome,
            "questions_asked": self.questions_asked,
            "turns": self.turns,
            "guess": self.guess,
            "revealed": self.revealed,
            "known": self.known,
            "difference": self.difference.to_dict() if self.difference else None,
            "run_id": self.run_id,
            "log_dir": self.log_dir,
            "trace_length": len(self.trace),
        }


class GameRunner:
    """
    Runs one game of twenty questions.

    Turns are numbered from 1 to the engine's max_questions. Every turn
    either confirms a guess or asks one category question; a rejected
    guess still uses up its turn.
    """

    def __init__(
        self,
        engine: InferenceEngine,
        asker: Asker,
        verbose: bool = False,
        log_dir: Optional[str] = None,
        run_id: Optional[str] = None,
    ):
        self.engine = engine
        self.asker = asker
        self.max_questions = engine.config.max_questions
        self.verbose = verbose

        self.run_id = run_id or datetime.now().strftime("%Y%m%d-%H%M%S") + "-" + uuid.uuid4().hex[:8]
        self.run_log_dir = os.path.join(log_dir, self.run_id) if log_dir else ""

        self.trace: List[Dict[str, Any]] = []
        self.log_file: Optional[TextIO] = None
        if self.run_log_dir:
            os.makedirs(self.run_log_dir, exist_ok=True)
            self.log_file = open(os.path.join(self.run_log_dir, "run.log"), "w")
            self._log_header()

    def _log_header(self) -> None:
        snapshot = self.engine.snapshot()
        header = [
            "=" * 70,
            f"20Q Run: {self.run_id}",
            f"Started: {datetime.now().isoformat()}",
            f"Candidates: {snapshot.n_candidates}",
            f"Questions: {snapshot.n_questions}",
            f"Config: {json.dumps(self.engine.config.to_dict(), sort_keys=True)}",
            "=" * 70,
            "",
        ]
        for line in header:
            self._write_log(line)

    def _write_log(self, msg: str) -> None:
        if self.log_file:
            self.log_file.write(msg + "\n")
            self.log_file.flush()

    def log(self, msg: str) -> None:
        """Log a message to console and file."""
        timestamped = f"[{datetime.now().strftime('%H:%M:%S.%f')[:-3]}] {msg}"
        self._write_log(timestamped)
        if self.verbose:
            print(f"[20Q] {msg}")

    def play(self) -> GameResult:
        """
        Play one game to completion.

        If the asker raises, the error propagates after the trace and
        result collected so far are written and run.log is closed.
        """
        self.log(f"Game starting with {self.engine.snapshot().n_active} candidates")
        self.trace = []
        result = GameResult(
            outcome=EXHAUSTED,
            questions_asked=0,
            turns=0,
            run_id=self.run_id,
            log_dir=self.run_log_dir,
            trace=self.trace,
        )
        try:
            self._play_turns(result)
            if not result.won:
                self._give_up(result)
            self.log(f"Game complete: {result.to_dict()}")
        except Exception as exc:
            self.log(f"Game aborted on turn {result.turns}: {exc!r}")
            raise
        finally:
            self._save_run_logs(result)
        return result

    def _play_turns(self, result: GameResult) -> None:
        for turn in range(1, self.max_questions + 1):
            result.turns = turn
            before = self.engine.snapshot().n_active
            move = self.engine.get_next_question(turn)

            if move.is_guess:
                result.guess = move.text
                confirmed = self.asker.ask_yes_no(GUESS_PROMPT.format(move.text))
                if confirmed:
                    self._record(turn, "guess", move.text, True, before, [])
                    self.asker.tell("The computer wins again!!!")
                    self.log(f"Turn {turn}: guess '{move.text}' confirmed")
                    result.outcome = WON
                    return
                self.engine.remove_incorrect_guess(move.text)
                self._record(turn, "guess", move.text, False, before, [move.text])
                self.asker.tell("That is unfortunate. Let me think.")
                self.log(f"Turn {turn}: guess '{move.text}' rejected")

            elif move.exhausted:
                self.log(f"Turn {turn}: no candidates remain")
                self._record(turn, "exhausted", None, None, before, [])
                return

            else:
                self.asker.tell("Hmm.. Ok Let me think...")
                split = self.engine.question_split(move.text)
                response = self.asker.ask_yes_no(CATEGORY_PROMPT.format(move.text))
                eliminated = self.engine.update_database(response, move.text, turn)
                result.questions_asked += 1
                self._record(turn, "question", move.text, response, before, eliminated)
                self.log(
                    f"Turn {turn}: {move.text} split={split:.3f} "
                    f"answer={'yes' if response else 'no'} "
                    f"eliminated={len(eliminated)} remaining={self.engine.snapshot().n_active}"
                )

    def _give_up(self, result: GameResult) -> None:
        revealed = self.asker.ask_line(REVEAL_PROMPT)
        result.revealed = revealed
        result.known = self.engine.contains(revealed)
        if not result.known:
            self.asker.tell("It seems as though that word was not in the database.")
            self.log(f"Revealed '{revealed}' is not in the corpus")
            return
        report = self.engine.find_difference(revealed)
        result.difference = report
        for line in report.lines():
            self.asker.tell(line)
        self.log(
            f"Revealed '{revealed}': {len(report.mismatches)} inconsistent answers "
            f"out of {report.checked}"
        )

    def _record(
        self,
        turn: int,
        kind: str,
        text: Optional[str],
        response: Optional[bool],
        active_before: int,
        eliminated: List[str],
    ) -> None:
        self.trace.append({
            "turn": turn,
            "kind": kind,
            "text": text,
            "response": response,
            "active_before": active_before,
            "active_after": self.engine.snapshot().n_active,
            "eliminated": list(eliminated),
        })

    def _save_run_logs(self, result: GameResult) -> None:
        if not self.run_log_dir:
            return
        with open(os.path.join(self.run_log_dir, "trace.json"), "w") as f:
            json.dump(self.trace, f, indent=2)
        with open(os.path.join(self.run_log_dir, "result.json"), "w") as f:
            json.dump(result.to_dict(), f, indent=2)
        if self.log_file:
            self._write_log("")
            self._write_log(f"Logs saved to: {self.run_log_dir}")
            self.log_file.close()
            self.log_file = None
