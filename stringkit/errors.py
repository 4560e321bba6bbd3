"""Errors raised by the string algorithms."""


class UnknownAlgorithmError(ValueError):
    """Raised when an algorithm selector does not name a supported algorithm."""

    def __init__(self, kind: str, algorithm: object):
        self.kind = kind
        self.algorithm = algorithm
        super().__init__(f"Unknown {kind} algorithm: {algorithm}")
