"""Construction-time errors raised while building generators."""


class ValidationError(ValueError):
    """Invalid generator options: bounds, skew, sizes or sample kinds."""


class DistributionError(ValidationError):
    """A weight table that does not describe a probability distribution."""
