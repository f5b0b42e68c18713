import logging
import math
import os
import tempfile
import zipfile
logger = logging.getLogger(__name__)

import numpy as np

from .constants import ALPHABET, ALPHABET_SIZE, MODEL_FORMAT, MODEL_VERSION
from .errors import CorruptModelError

REQUIRED_KEYS = ("matrix", "threshold")


class Model:
    """A trained log-probability transition matrix and its decision threshold.

    The matrix is copied on construction and made read-only, so a model never
    changes after it is built.
    """

    __slots__ = ("_matrix", "_threshold")

    def __init__(self, matrix, threshold):
        try:
            matrix = np.array(matrix, dtype=np.float64)
        except (TypeError, ValueError) as exc:
            raise CorruptModelError("Invalid model matrix - not a numeric table") from exc
        if matrix.shape != (ALPHABET_SIZE, ALPHABET_SIZE):
            raise CorruptModelError(f"Invalid model matrix shape {matrix.shape}, "
                                    f"expected {(ALPHABET_SIZE, ALPHABET_SIZE)}")
        if not np.all(np.isfinite(matrix)):
            raise CorruptModelError("Invalid model matrix - contains non-finite values")
        try:
            threshold = float(threshold)
        except (TypeError, ValueError) as exc:
            raise CorruptModelError(f"Invalid model threshold {threshold!r}") from exc
        if not math.isfinite(threshold):
            raise CorruptModelError(f"Invalid model threshold {threshold!r}")
        matrix.flags.writeable = False
        self._matrix = matrix
        self._threshold = threshold

    @property
    def matrix(self) -> np.ndarray:
        return self._matrix

    @property
    def threshold(self) -> float:
        return self._threshold

    def __eq__(self, other):
        if not isinstance(other, Model):
            return NotImplemented
        return self.threshold == other.threshold and np.array_equal(self.matrix, other.matrix)

    def __repr__(self):
        return f"Model(threshold={self.threshold!r})"


def save_model(path: str, model: Model) -> None:
    directory = os.path.dirname(os.path.abspath(path))
    os.makedirs(directory, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(dir=directory, suffix=".tmp")
    try:
        with os.fdopen(fd, 'wb') as f:
            np.savez(
                f,
                format=np.array(MODEL_FORMAT),
                version=np.array(MODEL_VERSION, dtype=np.int64),
                alphabet=np.array(ALPHABET),
                matrix=model.matrix,
                threshold=np.array(model.threshold, dtype=np.float64),
            )
        # mkstemp creates files 0600; saved models follow the umask instead
        umask = os.umask(0)
        os.umask(umask)
        os.chmod(tmp_path, 0o666 & ~umask)
        os.replace(tmp_path, path)
    except BaseException:
        os.remove(tmp_path)
        raise
    logger.info(f"Saved model to {path} (threshold {model.threshold})")


def _read_fields(path: str) -> dict:
    if not os.path.isfile(path):
        raise CorruptModelError(f"Model file not found: {path}")
    try:
        data = np.load(path, allow_pickle=False)
        if not hasattr(data, "files"):
            raise CorruptModelError(f"Corrupted model file: {path}")
        with data:
            return {key: data[key] for key in data.files}
    except (OSError, ValueError, EOFError, zipfile.BadZipFile) as exc:
        raise CorruptModelError(f"Corrupted model file: {path}") from exc


def _model_from_fields(path: str, fields: dict) -> Model:
    if "format" not in fields or str(fields["format"]) != MODEL_FORMAT:
        raise CorruptModelError(f"Not a {MODEL_FORMAT} model file: {path}")
    try:
        version = int(fields["version"]) if "version" in fields else None
        alphabet = tuple(np.ravel(fields["alphabet"]).tolist()) if "alphabet" in fields else ALPHABET
    except (TypeError, ValueError) as exc:
        raise CorruptModelError(f"Invalid model header in {path}") from exc
    if version != MODEL_VERSION:
        raise CorruptModelError(f"Unsupported model version {version} in {path}")
    if any(key not in fields for key in REQUIRED_KEYS):
        raise CorruptModelError(f"Invalid model structure - missing required components: {path}")
    if alphabet != ALPHABET:
        raise CorruptModelError(f"Model alphabet does not match: {path}")
    return Model(fields["matrix"], fields["threshold"])


def load_model(path: str) -> Model:
    try:
        model = _model_from_fields(path, _read_fields(path))
    except CorruptModelError as exc:
        logger.error(str(exc))
        raise
    logger.info(f"Loaded model from {path}")
    return model
