import pytest

from twentyq.config import EngineConfig, load_config
from twentyq.corpus import normalize_category
from twentyq.engine import InferenceEngine


def test_defaults():
    config = EngineConfig()
    assert config.threshold == 0.75
    assert config.min_candidates == 3
    assert config.max_questions == 20
    assert (config.row_growth, config.col_growth) == (2, 5)
    assert config.header_prefixes == ("WIKICAT", "WORDNET")


def test_load_config_overrides(tmp_path):
    path = tmp_path / "engine.yaml"
    path.write_text("threshold: 0.5\nmax_questions: 10\nheader_prefixes: [yago]\n")

    config = load_config(str(path))

    assert config.threshold == 0.5
    assert config.max_questions == 10
    assert config.min_candidates == 3
    assert config.header_prefixes == ("YAGO",)


def test_load_config_empty_file_keeps_defaults(tmp_path):
    path = tmp_path / "engine.yaml"
    path.write_text("")
    assert load_config(str(path)) == EngineConfig()


def test_load_config_unknown_key(tmp_path):
    path = tmp_path / "engine.yaml"
    path.write_text("thresh: 0.5\n")
    with pytest.raises(ValueError, match="thresh"):
        load_config(str(path))


def test_load_config_not_a_mapping(tmp_path):
    path = tmp_path / "engine.yaml"
    path.write_text("- 1\n- 2\n")
    with pytest.raises(ValueError):
        load_config(str(path))


@pytest.mark.parametrize(
    "overrides",
    [
        {"threshold": 0.0},
        {"threshold": 1.5},
        {"min_candidates": 0},
        {"max_questions": 0},
        {"initial_rows": 0},
        {"col_growth": 1},
    ],
)
def test_invalid_values_rejected(overrides):
    with pytest.raises(ValueError):
        EngineConfig(**overrides).validate()


def test_engine_validates_config():
    with pytest.raises(ValueError):
        InferenceEngine(EngineConfig(threshold=2.0))


def test_with_overrides():
    config = EngineConfig().with_overrides(max_questions=7)
    assert config.max_questions == 7
    assert EngineConfig().max_questions == 20


@pytest.mark.parametrize(
    "text",
    [
        "threshold: abc\n",
        "max_questions: 2.5\n",
        "min_candidates: true\n",
        "header_prefixes: WIKICAT\n",
        "digit_suffix_prefixes: 7\n",
    ],
)
def test_load_config_wrong_types_rejected(tmp_path, text):
    path = tmp_path / "engine.yaml"
    path.write_text(text)
    with pytest.raises(ValueError):
        load_config(str(path))


def test_prefixes_uppercased_when_built_directly():
    config = EngineConfig(header_prefixes=["wikicat", " yago "], digit_suffix_prefixes=("yago",))

    assert config.header_prefixes == ("WIKICAT", "YAGO")
    assert config.digit_suffix_prefixes == ("YAGO",)
    assert normalize_category("wikicat Wonders", config) == "WONDERS"
    assert normalize_category("yago mountain 123", config) == "MOUNTAIN"
