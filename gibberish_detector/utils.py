import os
import re
from typing import Iterator, Tuple

import numpy as np

from .constants import LETTER_TO_IDX
from .errors import MissingInputError

NOT_ACCEPTED_RE = re.compile(r"[^A-Za-z ]")


def normalize(line: str) -> str:
    """Lowercase `line` and keep only the accepted characters (a-z and space)."""
    if not isinstance(line, str):
        return ""
    return NOT_ACCEPTED_RE.sub("", line).lower()


def text_to_inds(text: str) -> np.ndarray:
    return np.array([LETTER_TO_IDX[c] for c in text], dtype=np.int8)


def transition_pairs(text: str) -> Tuple[np.ndarray, np.ndarray]:
    inds = text_to_inds(normalize(text))
    return inds[:-1], inds[1:]


def check_input(path: str, role: str) -> None:
    if not os.path.isfile(path) or not os.access(path, os.R_OK):
        raise MissingInputError(role, path)


def read_lines(path: str) -> Iterator[str]:
    # one line resident at a time
    with open(path, 'r', encoding="utf-8", errors="ignore") as f:
        for line in f:
            yield line.rstrip("\r\n")


def read_examples(path: str) -> Iterator[str]:
    # fewer than two symbols means no transitions to score
    return (line for line in read_lines(path) if len(normalize(line)) >= 2)
