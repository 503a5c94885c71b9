import pytest

from lyricsync.core.syllables import syllables, word_syllables


@pytest.mark.parametrize(
    "word,expected",
    [
        ("hello", 2),
        ("world", 1),
        ("beautiful", 3),
        ("table", 2),
        ("love", 1),
        ("the", 1),
        ("yes", 1),
        ("you", 1),
        ("played", 1),
        ("cakes", 1),
        ("rhythm", 1),
        ("happy", 2),
    ],
)
def test_word_syllables(word, expected):
    assert word_syllables(word) == expected


def test_line_sums_words_and_ignores_punctuation():
    assert syllables("Hello, world!") == 3
    assert syllables("I'm happy") == 3


def test_floor_of_one():
    assert syllables("") == 1
    assert syllables("!!! ...") == 1
    assert syllables("123") == 1


def test_every_non_empty_line_counts_at_least_one():
    for line in ["a", "zzz", "ed", "e", "--", "Ça va", "ok"]:
        assert syllables(line) >= 1


def test_longer_lines_weigh_more():
    assert syllables("Walking down the empty street") > syllables("Sing it loud")
