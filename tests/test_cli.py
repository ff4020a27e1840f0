import json

from twentyq.askers import ScriptedAsker
from twentyq.cli import build_parser, format_answer_key, main


class NoSayer(ScriptedAsker):
    """Answers no to everything and reveals a word nobody knows."""

    def __init__(self, first=()):
        super().__init__([])
        self._first = list(first)

    def ask_yes_no(self, prompt):
        self.prompts.append(prompt)
        return self._first.pop(0) if self._first else False

    def ask_line(self, prompt):
        self.prompts.append(prompt)
        return "Nobody"


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.corpus is None
    assert args.max_questions is None
    assert args.verbose is False


def test_format_answer_key_five_per_row():
    rows = format_answer_key([f"N{i}" for i in range(7)])
    assert rows == ["N0     N1     N2     N3     N4", "N5     N6"]


def test_plays_one_game_from_file(animal_corpus, tmp_path):
    result_file = tmp_path / "results.json"
    # WATER: no, guess Cat: no, guess Dog: yes, play again: no.
    asker = ScriptedAsker([False, False, True, False], lines=[""])

    code = main([animal_corpus, "--result-file", str(result_file)], asker=asker)

    assert code == 0
    results = json.loads(result_file.read_text())
    assert len(results) == 1
    assert results[0]["outcome"] == "won"
    assert results[0]["guess"] == "Dog"
    assert asker.prompts[-1] == "Would you like to play again?"
    assert "Reading in File..." in asker.messages


def test_replay_builds_fresh_engine(animal_corpus, tmp_path):
    result_file = tmp_path / "results.json"
    asker = ScriptedAsker(
        [False, False, True, True, False, False, True, False],
        lines=["", ""],
    )

    assert main([animal_corpus, "--result-file", str(result_file)], asker=asker) == 0

    results = json.loads(result_file.read_text())
    assert [r["outcome"] for r in results] == ["won", "won"]
    assert results[0]["turns"] == results[1]["turns"] == 3


def test_show_answers(animal_corpus):
    asker = NoSayer()

    assert main([animal_corpus, "--show-answers"], asker=asker) == 0

    assert "Cat     Dog     Fish     Whale" in asker.messages


def test_missing_corpus_file(tmp_path):
    asker = NoSayer()

    code = main([str(tmp_path / "missing.tsv")], asker=asker)

    assert code == 2
    assert any("invalid filename" in m for m in asker.messages)


def test_bad_config(animal_corpus, tmp_path):
    config = tmp_path / "engine.yaml"
    config.write_text("threshold: 3\n")
    asker = NoSayer()

    assert main([animal_corpus, "--config", str(config)], asker=asker) == 2
    assert asker.messages[0].startswith("Invalid configuration")


def test_non_numeric_threshold_is_a_config_error(animal_corpus, tmp_path):
    config = tmp_path / "engine.yaml"
    config.write_text("threshold: abc\n")
    asker = NoSayer()

    assert main([animal_corpus, "--config", str(config)], asker=asker) == 2
    assert asker.messages[0].startswith("Invalid configuration: threshold must be a number")


def test_max_questions_flag(animal_corpus, tmp_path):
    result_file = tmp_path / "results.json"
    asker = NoSayer()

    main([animal_corpus, "--max-questions", "2", "--result-file", str(result_file)], asker=asker)

    results = json.loads(result_file.read_text())
    assert results[0]["turns"] == 2
    assert results[0]["outcome"] == "exhausted"


def test_sample_database_chosen_interactively():
    # Use the sample database: yes. Show the answer key: yes. Then always no.
    asker = NoSayer(first=[True, True])

    assert main([], asker=asker) == 0

    assert asker.prompts[0] == "Would you like to use the sample database?"
    assert any("Albert Einstein" in m for m in asker.messages)
    assert "Hmm I am stumped. What was your word?" in asker.prompts
    assert "It seems as though that word was not in the database." in asker.messages


def test_own_file_chosen_interactively(animal_corpus):
    class FileAsker(NoSayer):
        def ask_line(self, prompt):
            self.prompts.append(prompt)
            return animal_corpus if prompt == "Enter filename:" else "Nobody"

    asker = FileAsker()

    assert main([], asker=asker) == 0
    assert "Enter filename:" in asker.prompts
    assert "<answer>  <question/category>" in asker.messages
