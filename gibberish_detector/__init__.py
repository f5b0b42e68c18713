from .constants import ALPHABET, LETTER_TO_IDX, ALPHABET_SIZE
from .errors import GibberishError, MissingInputError, CorruptModelError, InseparableTrainingError
from .utils import normalize, read_lines
from .markov import average_transition_probability
from .model import Model, save_model, load_model
from .trainer import train, train_model
from .detector import detect, test, Detector
