from typing import Union

from .errors import CorruptModelError
from .markov import average_transition_probability
from .model import Model, load_model


def detect(text: str, model: Model, raw: bool = False) -> Union[float, bool]:
    """Score `text` against `model`.

    Returns the raw score if `raw` is set, otherwise True when the text scores at
    or below the model's threshold, i.e. looks like gibberish.
    """
    if not isinstance(model, Model):
        raise CorruptModelError(f"Expected a Model, got {type(model).__name__}")
    prob = average_transition_probability(text, model.matrix)
    return prob if raw else prob <= model.threshold


def test(text: str, lib_path: str, raw: bool = False) -> Union[float, bool]:
    return detect(text, load_model(lib_path), raw=raw)


class Detector:
    def __init__(self, model: Model):
        if not isinstance(model, Model):
            raise CorruptModelError(f"Expected a Model, got {type(model).__name__}")
        self.model = model

    @classmethod
    def from_path(cls, lib_path: str) -> 'Detector':
        return cls(load_model(lib_path))

    @property
    def threshold(self) -> float:
        return self.model.threshold

    def score(self, text: str) -> float:
        return detect(text, self.model, raw=True)

    def is_gibberish(self, text: str) -> bool:
        return detect(text, self.model)
