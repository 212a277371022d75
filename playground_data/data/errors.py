"""
Exceptions raised by the dataset generator.
"""


class InvalidKind(ValueError):
    """Raised when a dataset selector does not name a known dataset kind."""


class NoTrainingData(RuntimeError):
    """Raised when a mini-batch is requested before any training data exists."""


class NoDataAvailable(RuntimeError):
    """Raised when an accessor is used before its generation step has run."""
