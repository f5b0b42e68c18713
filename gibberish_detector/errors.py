class GibberishError(Exception):
    pass


class MissingInputError(GibberishError):
    def __init__(self, role: str, path: str):
        super().__init__(f"Specified {role} text file not found: {path}")
        self.role = role
        self.path = path


class CorruptModelError(GibberishError):
    pass


class InseparableTrainingError(GibberishError):
    """Raised when no threshold separates the good examples from the bad ones."""

    def __init__(self, min_good_score: float, max_bad_score: float, message: str = None):
        if message is None:
            message = (f"Model cannot separate the examples: worst good score {min_good_score} "
                       f"<= best bad score {max_bad_score}")
        super().__init__(message)
        self.min_good_score = min_good_score
        self.max_bad_score = max_bad_score
