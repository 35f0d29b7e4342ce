"""Exceptions raised by the inheritance-state model."""


class UnknownPatternError(ValueError):
    """Raised when a genotype pattern has no entry in the classifier table."""

    def __init__(self, pattern: str):
        super().__init__(f"Unknown genotype pattern: {pattern}")
        self.pattern = pattern


class StateEncodingError(ValueError):
    """Raised when a state cannot be converted to or from its score."""

    pass


class BlockIndexError(Exception):
    """Raised when blocks violate the ordering or non-overlap invariant."""

    pass
