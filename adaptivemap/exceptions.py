"""Exceptions raised by adaptivemap collections."""


class AdaptiveMapError(Exception):
    """Base class for all adaptivemap errors."""


class InvalidCapacityError(AdaptiveMapError, ValueError):
    """Bucket capacity must be greater than 1."""

    def __init__(self, capacity):
        super().__init__(f"bucket capacity must be greater than 1, got {capacity!r}")
        self.capacity = capacity


class InvalidThresholdError(AdaptiveMapError, ValueError):
    """Promotion threshold must be a positive integer."""

    def __init__(self, threshold):
        super().__init__(f"promotion threshold must be at least 1, got {threshold!r}")
        self.threshold = threshold


class InvalidKeyError(AdaptiveMapError, TypeError):
    """None cannot be used as a key."""

    def __init__(self):
        super().__init__("None is not a valid key")


class InvariantViolation(AdaptiveMapError, AssertionError):
    """A balanced tree failed its ordering, balance or height check."""
