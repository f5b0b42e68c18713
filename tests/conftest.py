"""
Shared fixtures for the gibberish detector tests.
Everything is trained from a small in-memory English corpus; files go under tmp_path.
"""

import pytest

from gibberish_detector.model import save_model
from gibberish_detector.trainer import train_model

ENGLISH_SENTENCES = [
    "This is a normal sentence that anyone could write.",
    "The quick brown fox jumps over the lazy dog.",
    "She asked a question about the history of the old town.",
    "We walked to the park after dinner and talked for hours.",
    "The children played in the garden until it was dark.",
    "He said that the train would arrive at noon.",
    "There are many ways to solve this problem, and some are quite simple.",
    "I think it will rain later this afternoon, so take an umbrella.",
    "My favorite book has a green cover and a torn spine.",
    "Please remember to lock the door when you leave the house.",
    "They have lived in this city since they were young.",
    "The instructor explained the lesson once more for the whole class.",
    "It is important to read the instructions before you begin.",
    "Our neighbors invited us to a dance at the community center.",
    "The normal form of the equation is written on the board.",
    "After the meeting we went out for coffee and a sandwich.",
    "Most people agree that a good night of sleep makes a difference.",
    "The river runs quietly through the valley toward the sea.",
    "When the sun came out, the birds began to sing again.",
    "You can find more information in the second chapter of the report.",
    "Every morning she drinks a cup of tea and reads the news.",
    "The company announced a new product at the conference.",
    "His brother works as a doctor at the hospital in the north.",
    "We should probably leave soon if we want to catch the bus.",
    "The sentence on the page was short, but the meaning was clear.",
    "Nothing is quite as pleasant as a quiet evening with friends.",
    "The farmer sold apples and potatoes at the market on Saturday.",
    "If you have any questions, please send me an email.",
    "The museum was closed for repairs during the summer.",
    "Learning a language takes time, patience and a lot of practice.",
]

GOOD_LINES = [
    "this is a normal sentence",
    "the children played in the garden",
    "we walked to the park after dinner",
]

BAD_LINES = [
    "qweasd qwa as",
    "zxqvk jhgfd pqwmx",
    "xkcdqz vbnmw",
]


@pytest.fixture
def corpus_lines():
    return ENGLISH_SENTENCES * 50


@pytest.fixture
def good_lines():
    return list(GOOD_LINES)


@pytest.fixture
def bad_lines():
    return list(BAD_LINES)


@pytest.fixture
def model(corpus_lines, good_lines, bad_lines):
    return train_model(corpus_lines, good_lines, bad_lines)


@pytest.fixture
def write_lines(tmp_path):
    """Factory that writes lines to a text file under tmp_path and returns its path."""
    def _factory(name, lines):
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return str(path)

    return _factory


@pytest.fixture
def corpus_files(write_lines, corpus_lines, good_lines, bad_lines):
    return (
        write_lines("big.txt", corpus_lines),
        write_lines("good.txt", good_lines),
        write_lines("bad.txt", bad_lines),
    )


@pytest.fixture
def model_path(tmp_path, model):
    path = str(tmp_path / "gib_model.npz")
    save_model(path, model)
    return path
