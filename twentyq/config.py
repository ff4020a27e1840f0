"""
Engine configuration.

Every tunable the inference engine consults lives here and is handed to the
engine at construction.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class EngineConfig:
    """Configuration for one game of twenty questions."""
    threshold: float = 0.75  # minimum match ratio to stay active
    min_candidates: int = 3  # guess once fewer candidates than this remain
    max_questions: int = 20
    initial_rows: int = 500
    initial_cols: int = 500
    row_growth: int = 2
    col_growth: int = 5  # questions outnumber answers in typical corpora
    header_prefixes: Tuple[str, ...] = ("WIKICAT", "WORDNET")
    digit_suffix_prefixes: Tuple[str, ...] = ("WORDNET",)

    def __post_init__(self) -> None:
        for key in ("header_prefixes", "digit_suffix_prefixes"):
            value = getattr(self, key)
            if not isinstance(value, (list, tuple)):
                raise ValueError(f"{key} must be a list of strings, got {value!r}")
            object.__setattr__(self, key, tuple(str(p).strip().upper() for p in value))

    def validate(self) -> "EngineConfig":
        if not _is_number(self.threshold):
            raise ValueError(f"threshold must be a number, got {self.threshold!r}")
        for key in ("min_candidates", "max_questions", "initial_rows",
                    "initial_cols", "row_growth", "col_growth"):
            value = getattr(self, key)
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValueError(f"{key} must be an integer, got {value!r}")
        if not 0.0 < self.threshold <= 1.0:
            raise ValueError(f"threshold must be in (0, 1], got {self.threshold}")
        if self.min_candidates < 1:
            raise ValueError("min_candidates must be at least 1")
        if self.max_questions < 1:
            raise ValueError("max_questions must be at least 1")
        if self.initial_rows < 1 or self.initial_cols < 1:
            raise ValueError("initial matrix dimensions must be positive")
        if self.row_growth < 2 or self.col_growth < 2:
            raise ValueError("growth factors must be at least 2")
        return self

    def with_overrides(self, **overrides: Any) -> "EngineConfig":
        return replace(self, **overrides).validate()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "threshold": self.threshold,
            "min_candidates": self.min_candidates,
            "max_questions": self.max_questions,
            "initial_rows": self.initial_rows,
            "initial_cols": self.initial_cols,
            "row_growth": self.row_growth,
            "col_growth": self.col_growth,
            "header_prefixes": list(self.header_prefixes),
            "digit_suffix_prefixes": list(self.digit_suffix_prefixes),
        }


def load_config(path: str) -> EngineConfig:
    data = _load_yaml(path) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping.")
    known = {f.name for f in fields(EngineConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown config keys: {', '.join(unknown)}")
    return EngineConfig(**data).validate()


def _load_yaml(path: str) -> Dict:
    try:
        import yaml  # type: ignore
    except ImportError as exc:  # pragma: no cover - depends on optional dep
        raise RuntimeError(
            "pyyaml is required to load config files. Install with `pip install pyyaml`."
        ) from exc
    try:
        return yaml.safe_load(Path(path).read_text())
    except yaml.YAMLError as exc:
        raise ValueError(f"Config file {path} is not valid YAML: {exc}") from exc


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)
