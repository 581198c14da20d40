class DimensionMismatchError(ValueError):
    """Raised when a vector does not have the size a function expects."""

    def __init__(self, message: str, actual: int, expected: int) -> None:
        super().__init__(message)
        self.actual = actual
        self.expected = expected


class NotFittedError(ValueError):
    """Raised when a model is used for prediction before it has been fitted."""
