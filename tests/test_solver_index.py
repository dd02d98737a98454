import pytest
from packages.solver import DictionaryIndex
from packages.solver.index import ALPHABET

WORDS = ["crane", "slate", "train", "trace", "grape", "sassy", "geese"]


def test_cells_hold_letter_at_position():
    idx = DictionaryIndex(WORDS, 5)
    assert idx.at("t", 0) == {"train", "trace"}
    assert idx.at("a", 2) == {"crane", "slate", "train", "trace", "grape"}
    assert idx.at("s", 2) == {"sassy"}
    assert idx.at("z", 4) == frozenset()


@pytest.mark.parametrize("c", list(ALPHABET))
def test_row_union_is_every_word_with_letter(c):
    idx = DictionaryIndex(WORDS, 5)
    assert idx.containing(c) == {w for w in WORDS if c in w}


def test_containing_except_skips_one_column():
    idx = DictionaryIndex(WORDS, 5)
    # only geese has an "e" outside the last column
    assert idx.containing_except("e", 4) == {"geese"}
    assert idx.containing_except("s", 0) == {"sassy", "geese"}


def test_words_is_whole_dictionary():
    idx = DictionaryIndex(WORDS, 5)
    assert idx.words == set(WORDS)
    assert len(idx) == len(WORDS)
    assert "crane" in idx and "moist" not in idx


def test_rejects_word_of_wrong_length():
    with pytest.raises(ValueError):
        DictionaryIndex(["crane", "cranes"], 5)


def test_rejects_non_positive_length():
    with pytest.raises(ValueError):
        DictionaryIndex([], 0)
