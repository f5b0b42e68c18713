import string
import types

ALPHABET = tuple(string.ascii_lowercase) + (" ",)
LETTER_TO_IDX = types.MappingProxyType(dict(map(reversed, enumerate(ALPHABET))))
ALPHABET_SIZE = len(ALPHABET)

# Every transition is assumed seen this many times before counting the corpus,
# so a pair never observed in training can't drive a score to zero.
SMOOTHING_PRIOR = 10
# The scorer starts its log-prob sum here rather than at 0.0. Trained thresholds
# depend on it, so changing it invalidates every saved model.
LOG_PROB_SEED = 1.0

MODEL_FORMAT = "gibberish-bigram"
MODEL_VERSION = 1

BIG_TEXT_FILE = "data/big.txt"
GOOD_TEXT_FILE = "data/good.txt"
BAD_TEXT_FILE = "data/bad.txt"
MODEL_FILE = "gib_model.npz"
