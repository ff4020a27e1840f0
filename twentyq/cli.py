"""
Command-line entry point.

Usage:
    python -m twentyq                       # choose the database interactively
    python -m twentyq corpus.tsv -v \\
        --log-dir /tmp/twentyq-logs \\
        --result-file results.json
"""

from __future__ import annotations

import argparse
import json
from typing import Callable, List, Optional, Sequence

from .askers import Asker, ConsoleAsker
from .config import EngineConfig, load_config
from .corpus import CorpusError, Pair, load_corpus, load_sample_corpus
from .engine import InferenceEngine
from .game import GameRunner

RULES = [
    "Welcome to '20 Questions'!!",
    "Think of a famous person, place or thing and I will try to guess it",
    "in at most twenty yes or no questions. I read a dataset of answers and",
    "the categories they belong to, and use it to narrow down your word.",
    "Answer as accurately as possible. Good Luck!",
    "",
]

FORMAT_HELP = [
    "If you want to read in your own file, it must be in the format",
    "<answer>  <question/category>",
    "If the dataset does not have enough categories that evenly divide",
    "the answers, it will be tough for me to figure out your word!",
]


def format_answer_key(names: Sequence[str], per_row: int = 5) -> List[str]:
    rows = []
    for start in range(0, len(names), per_row):
        rows.append("     ".join(names[start:start + per_row]))
    return rows


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="twentyq",
        description="Twenty questions over a tagged answer corpus",
    )
    parser.add_argument(
        "corpus",
        nargs="?",
        default=None,
        help="Corpus file of <answer> <category> tokens (default: ask)",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="YAML file with engine settings",
    )
    parser.add_argument(
        "--max-questions",
        type=int,
        default=None,
        help="Turn budget per game (default: from config, 20)",
    )
    parser.add_argument(
        "--show-answers",
        action="store_true",
        help="Print every answer the corpus knows before playing",
    )
    parser.add_argument(
        "--log-dir",
        type=str,
        default=None,
        help="Directory for per-game run logs (default: no log files)",
    )
    parser.add_argument(
        "--result-file",
        type=str,
        default=None,
        help="Path to write game results as JSON",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output",
    )
    return parser


def _choose_corpus(args: argparse.Namespace, asker: Asker) -> Callable[[], List[Pair]]:
    if args.corpus:
        path = args.corpus
        return lambda: load_corpus(path)
    asker.tell("You can load your own 20 questions database, or use the sample one.")
    if asker.ask_yes_no("Would you like to use the sample database?"):
        if not args.show_answers:
            args.show_answers = asker.ask_yes_no(
                "Would you like to see the famous people, places or things that you can choose from?"
            )
        return load_sample_corpus
    for line in FORMAT_HELP:
        asker.tell(line)
    path = asker.ask_line("Enter filename:")
    return lambda: load_corpus(path)


def main(argv: Optional[Sequence[str]] = None, asker: Optional[Asker] = None) -> int:
    args = build_parser().parse_args(argv)
    asker = asker or ConsoleAsker()

    try:
        config = load_config(args.config) if args.config else EngineConfig()
        if args.max_questions is not None:
            config = config.with_overrides(max_questions=args.max_questions)
    except (OSError, ValueError) as exc:
        asker.tell(f"Invalid configuration: {exc}")
        return 2

    for line in RULES:
        asker.tell(line)

    loader = _choose_corpus(args, asker)
    results = []
    shown = False
    while True:
        try:
            pairs = loader()
        except CorpusError as exc:
            asker.tell(f"That was an invalid filename. {exc}")
            return 2
        asker.tell("Reading in File...")
        engine = InferenceEngine.from_pairs(pairs, config)
        if args.show_answers and not shown:
            for row in format_answer_key(engine.show_answer_key()):
                asker.tell(row)
            shown = True

        asker.ask_line("Hit enter when you have selected a word for me to guess!")
        runner = GameRunner(engine, asker, verbose=args.verbose, log_dir=args.log_dir)
        result = runner.play()
        results.append(result.to_dict())

        if args.result_file:
            with open(args.result_file, "w") as f:
                json.dump(results, f, indent=2)

        if not asker.ask_yes_no("Would you like to play again?"):
            break
        asker.tell("")
    return 0
