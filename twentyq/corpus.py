"""
Corpus reader.

A corpus is a text stream of angle-bracket tokens, for example the YAGO
type dump:

    <Albert_Einstein>    rdf:type    <wikicat_German_physicists>
    <Albert_Einstein>    rdf:type    <wordnet_physicist_110428004>

Tokens are taken in stream order as (answer, category) pairs. Text outside
brackets is ignored. Underscores inside a token become spaces.
"""

from __future__ import annotations

import re
from importlib import resources
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

from .config import EngineConfig

Pair = Tuple[str, str]

_TOKEN = re.compile(r"<([^>]*)>")

SAMPLE_CORPUS = "sample_corpus.tsv"


class CorpusError(Exception):
    """Raised when a corpus source cannot be read."""


def iter_tokens(text: str) -> Iterator[str]:
    for match in _TOKEN.finditer(text):
        yield match.group(1).replace("_", " ")


def iter_pairs(text: str) -> Iterator[Pair]:
    """
    Yield (answer, category) pairs.

    An answer token without a following category token (a truncated stream)
    yields nothing.
    """
    tokens = iter_tokens(text)
    for answer in tokens:
        category = next(tokens, None)
        if category is None:
            return
        yield answer, category


def normalize_category(tag: str, config: Optional[EngineConfig] = None) -> str:
    """Uppercase a category tag and strip corpus header prefixes."""
    config = config or EngineConfig()
    question = tag.upper().strip()
    for prefix in config.header_prefixes:
        if not question.startswith(prefix):
            continue
        question = question[len(prefix):].strip()
        if prefix in config.digit_suffix_prefixes:
            question = question.rstrip("0123456789").strip()
    return question


def load_corpus(path: str) -> List[Pair]:
    try:
        text = Path(path).read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise CorpusError(f"Could not read corpus '{path}': {exc}") from exc
    return list(iter_pairs(text))


def load_sample_corpus() -> List[Pair]:
    text = resources.files("twentyq.data").joinpath(SAMPLE_CORPUS).read_text(encoding="utf-8")
    return list(iter_pairs(text))

