from typing import Iterable, List

import numpy as np

from .constants import ALPHABET_SIZE, LOG_PROB_SEED, SMOOTHING_PRIOR
from .utils import transition_pairs


def count_transitions(lines: Iterable[str], prior: int = SMOOTHING_PRIOR) -> np.ndarray:
    counts = np.full((ALPHABET_SIZE, ALPHABET_SIZE), prior, dtype=np.float64)
    for line in lines:
        from_inds, to_inds = transition_pairs(line)
        # add.at so repeated pairs within a line are all counted
        np.add.at(counts, (from_inds, to_inds), 1)
    return counts


def log_normalize(counts: np.ndarray) -> np.ndarray:
    """Turn transition counts into per-row log probabilities.

    Log probabilities avoid numeric underflow when many transitions are combined.
    """
    counts = np.asarray(counts, dtype=np.float64)
    return np.log(counts / np.sum(counts, axis=1, keepdims=True))


def average_transition_probability(text: str, log_prob_mat: np.ndarray) -> float:
    from_inds, to_inds = transition_pairs(text)
    transition_ct = len(from_inds)
    log_prob = LOG_PROB_SEED + np.sum(log_prob_mat[from_inds, to_inds])
    # exp translates the average log prob back to a prob
    return float(np.exp(log_prob / max(transition_ct, 1)))


def score_lines(lines: Iterable[str], log_prob_mat: np.ndarray) -> List[float]:
    return [average_transition_probability(line, log_prob_mat) for line in lines]
