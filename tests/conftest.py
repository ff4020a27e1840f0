import pytest

ANIMALS = [
    ("Cat", "MAMMAL"),
    ("Cat", "PET"),
    ("Dog", "MAMMAL"),
    ("Dog", "PET"),
    ("Dog", "LOYAL"),
    ("Fish", "WATER"),
    ("Fish", "PET"),
    ("Whale", "MAMMAL"),
    ("Whale", "WATER"),
]


@pytest.fixture
def animal_pairs():
    return list(ANIMALS)


@pytest.fixture
def animal_corpus(tmp_path):
    lines = [f"<{answer}>\trdf:type\t<{tag}>" for answer, tag in ANIMALS]
    path = tmp_path / "animals.tsv"
    path.write_text("\n".join(lines) + "\n")
    return str(path)
