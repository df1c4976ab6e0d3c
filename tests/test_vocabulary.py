import random
from collections import Counter
from pathlib import Path

import pytest
from wordscramble.datasets import ConfigurationError, WordSource


def test_empty_vocabulary_is_a_configuration_error():
    with pytest.raises(ConfigurationError):
        WordSource([])
    with pytest.raises(ConfigurationError):
        WordSource(["", "   "])


def test_configuration_error_is_a_value_error():
    assert issubclass(ConfigurationError, ValueError)


def test_words_are_normalized():
    src = WordSource([" Apple ", "", "DOG"])
    assert src.words == ("apple", "dog")
    assert len(src) == 2


def test_random_word_comes_from_vocabulary():
    vocab = ["cat", "dog", "owl"]
    src = WordSource(vocab, rng=random.Random(5))
    for _ in range(50):
        assert src.get_random_word() in vocab


def test_selection_is_seeded_and_with_replacement():
    a = WordSource(["cat", "dog"], rng=random.Random(1))
    b = WordSource(["cat", "dog"], rng=random.Random(1))
    picks = [a.get_random_word() for _ in range(40)]
    assert picks == [b.get_random_word() for _ in range(40)]
    # 40 draws from 2 words must repeat
    assert max(Counter(picks).values()) > 1


def test_single_word_vocabulary_always_returns_it():
    src = WordSource(["solo"])
    assert {src.get_random_word() for _ in range(10)} == {"solo"}


def test_from_file(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_text("apple\n\nbanana\n", encoding="utf-8")
    src = WordSource.from_file(p)
    assert src.words == ("apple", "banana")


def test_from_missing_file(tmp_path: Path):
    with pytest.raises(ConfigurationError, match="not found"):
        WordSource.from_file(tmp_path / "missing.txt")


def test_from_blank_file(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_text("\n\n", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        WordSource.from_file(p)


def test_default_vocabulary_loads():
    assert len(WordSource.default()) > 0


def test_from_file_with_bad_encoding(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_bytes(b"apple\n\xff\xfe\n")
    with pytest.raises(ConfigurationError, match="unreadable"):
        WordSource.from_file(p)


def test_from_file_with_directory(tmp_path: Path):
    with pytest.raises(ConfigurationError, match="unreadable"):
        WordSource.from_file(tmp_path)
