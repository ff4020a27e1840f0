"""
twentyq - adaptive twenty questions over a tagged answer corpus

Given a corpus of candidate answers, each tagged with yes/no category
memberships, the engine deduces which candidate the user is thinking of.

Design principles:
- Ask the question that best bisects the remaining candidates
- Score every remaining candidate against each answer
- Drop candidates whose match ratio falls below the threshold
- Keep every record, so a miss can be explained afterwards
"""

from .config import EngineConfig, load_config
from .corpus import CorpusError, iter_pairs, load_corpus, load_sample_corpus, normalize_category
from .engine import (
    SENTINEL,
    DifferenceReport,
    EngineError,
    EngineSnapshot,
    InferenceEngine,
    Mismatch,
    NextQuestion,
)
from .matrix import SparseFeatureMatrix
from .stores import SubsetTrackingStore
from .askers import Asker, ConsoleAsker, ScriptedAsker
from .oracle import CorpusOracle
from .game import GameResult, GameRunner

__all__ = [
    "EngineConfig",
    "load_config",
    "CorpusError",
    "iter_pairs",
    "load_corpus",
    "load_sample_corpus",
    "normalize_category",
    "SENTINEL",
    "DifferenceReport",
    "EngineError",
    "EngineSnapshot",
    "InferenceEngine",
    "Mismatch",
    "NextQuestion",
    "SparseFeatureMatrix",
    "SubsetTrackingStore",
    "Asker",
    "ConsoleAsker",
    "ScriptedAsker",
    "CorpusOracle",
    "GameResult",
    "GameRunner",
]
