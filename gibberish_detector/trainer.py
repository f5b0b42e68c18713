from typing import Iterable
import logging
logger = logging.getLogger(__name__)

from .errors import InseparableTrainingError
from .markov import count_transitions, log_normalize, score_lines
from .model import Model, save_model
from .utils import check_input, read_examples, read_lines


class LineCounter:
    """Passes lines through while counting them."""

    def __init__(self, lines: Iterable[str]):
        self.lines = lines
        self.count = 0

    def __iter__(self):
        for line in self.lines:
            self.count += 1
            yield line


def train_model(corpus_lines: Iterable[str], good_lines: Iterable[str], bad_lines: Iterable[str]) -> Model:
    """Build a transition model from a corpus and calibrate its threshold.

    The corpus is consumed in one streaming pass. Each good and bad example is scored
    against the normalized matrix, and the threshold is put halfway between the worst
    good score and the best bad score.

    Raises InseparableTrainingError if some bad example scores at least as high as
    some good example, or if either example set is empty.
    """
    corpus = LineCounter(corpus_lines)
    counts = count_transitions(corpus)
    logger.info(f"Counted transitions over {corpus.count} corpus lines")
    log_prob_mat = log_normalize(counts)

    good_probs = score_lines(good_lines, log_prob_mat)
    bad_probs = score_lines(bad_lines, log_prob_mat)
    if not good_probs or not bad_probs:
        raise InseparableTrainingError(
            None, None,
            message=f"Need at least one good and one bad example, got {len(good_probs)} good and {len(bad_probs)} bad")

    min_good_prob = min(good_probs)
    max_bad_prob = max(bad_probs)
    logger.info(f"Worst good score: {min_good_prob}; best bad score: {max_bad_prob}")
    if min_good_prob <= max_bad_prob:
        raise InseparableTrainingError(min_good_prob, max_bad_prob)

    threshold = (min_good_prob + max_bad_prob) / 2
    logger.info(f"Threshold: {threshold}")
    return Model(log_prob_mat, threshold)


def train(big_text_file: str, good_text_file: str, bad_text_file: str, lib_path: str) -> bool:
    """Train from the three text files and save the model to `lib_path`.

    Returns False without writing anything when the examples can't be separated.
    """
    check_input(big_text_file, "big")
    check_input(good_text_file, "good")
    check_input(bad_text_file, "bad")

    try:
        model = train_model(read_lines(big_text_file),
                            read_examples(good_text_file),
                            read_examples(bad_text_file))
    except InseparableTrainingError as exc:
        logger.warning(f"Training failed, model not written: {exc}")
        return False
    save_model(lib_path, model)
    return True
