from typing import Callable

from .models import Range

Scaler = Callable[[float], float]


def clamp(value: float, bounds: Range) -> float:
    """Saturate `value` into the closed interval, leaving in-range values alone."""
    if value >= bounds.max:
        return bounds.max
    if value <= bounds.min:
        return bounds.min
    return value


def create_positive_scaler(source: Range, target: Range) -> Scaler:
    """Linear map of `source` onto a non-negative `target` interval."""
    width = source.max - source.min
    span = target.max - target.min

    if width == 0:
        # single-point domain
        return lambda value: target.min

    return lambda value: span * (value - source.min) / width + target.min


def create_scaler(source: Range, target: Range) -> Scaler:
    """Linear map of a non-negative `source` onto a `target` that may straddle zero.

    The target splits into its non-negative upper half and its mirrored lower
    half. Both halves are scaled with the positive scaler from the same source
    value and subtracted. The lower half runs in the opposite direction, so it
    is fed the source value reflected about the source midpoint.
    """
    if source.max == source.min:
        return lambda value: target.min

    upper = Range(max(target.min, 0), max(target.max, 0))
    lower = Range(max(-target.max, 0), max(-target.min, 0))

    scale_upper = create_positive_scaler(source, upper)
    scale_lower = create_positive_scaler(source, lower)

    def scale(value: float) -> float:
        reflected = source.max + source.min - value
        return scale_upper(value) - scale_lower(reflected)

    return scale


def bias_by_mix(unbiased: float, bias: float, mix: float) -> float:
    # mix in [0, 1]: 0 keeps the unbiased draw, 1 lands exactly on the bias
    return unbiased * (1 - mix) + bias * mix
