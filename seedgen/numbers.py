"""Numeric generators built on the scalers.

Every generator here reads its primary value from the current seed. A biased
generator makes one more draw for the mix weight, so it advances the seed twice
per value.
"""

import math
from typing import Callable, Optional

from .errors import ValidationError
from .gen import Gen, stated
from .lcg import M_MODULUS
from .models import UNBIASED, Biased, Range, Skew, State
from .scaling import Scaler, bias_by_mix, clamp, create_positive_scaler, create_scaler

decimal: Gen[float] = stated.map(lambda state: state.seed / (state.lcg.m - 1))


def make_skew(bias: Optional[float] = None, influence: Optional[float] = None) -> Skew:
    """Build the skew variant from two optional options that must come together."""
    if bias is None and influence is None:
        return UNBIASED
    if influence is None:
        raise ValidationError(f"Bias of {bias} needs an influence to go with it")
    if bias is None:
        raise ValidationError(f"Influence of {influence} needs a bias to go with it")
    return Biased(bias=bias, influence=influence)


def _verify_skew(bounds: Range, skew: Skew) -> None:
    if not isinstance(skew, Biased):
        return
    if skew.bias < bounds.min:
        raise ValidationError(
            f"Bias of {skew.bias} should not be less than the minimum value of {bounds.min}"
        )
    if skew.bias > bounds.max:
        raise ValidationError(
            f"Bias of {skew.bias} should not be greater than the maximum value of {bounds.max}"
        )
    if skew.influence < 0:
        raise ValidationError(f"Influence of {skew.influence} should not be less than 0")
    if skew.influence > 1:
        raise ValidationError(f"Influence of {skew.influence} should not be greater than 1")


def _verify_order(bounds: Range) -> None:
    if bounds.max < bounds.min:
        raise ValidationError(
            f"Maximum value of {bounds.max} should be equal to or greater than "
            f"the minimum value of {bounds.min}"
        )


def verify_positive_arguments(
    min: float = 0,
    max: float = M_MODULUS,
    skew: Skew = UNBIASED,
    unchecked: bool = False,
) -> Range:
    bounds = Range(min, max)
    if unchecked:
        return bounds

    if min < 0:
        raise ValidationError(f"Minimum value of {min} should not be less than 0")
    if max < 0:
        raise ValidationError(f"Maximum value of {max} should not be less than 0")
    _verify_order(bounds)
    _verify_skew(bounds, skew)
    return bounds


def verify_negative_arguments(
    min: float = -M_MODULUS,
    max: float = 0,
    skew: Skew = UNBIASED,
    unchecked: bool = False,
) -> Range:
    bounds = Range(min, max)
    if unchecked:
        return bounds

    if min > 0:
        raise ValidationError(f"Minimum value of {min} should not be greater than 0")
    if max > 0:
        raise ValidationError(f"Maximum value of {max} should not be greater than 0")
    _verify_order(bounds)
    _verify_skew(bounds, skew)
    return bounds


def _scaled(
    target: Range,
    skew: Skew,
    create: Callable[[Range, Range], Scaler],
) -> Gen[float]:
    def scale(state: State) -> float:
        source = Range(0, state.lcg.m - 1)
        return create(source, target)(state.seed)

    unbiased = stated.map(scale)
    if not isinstance(skew, Biased):
        return unbiased

    mix = decimal.map(lambda value: value * skew.influence)
    return (
        unbiased.do("value")
        .do_apply("mix", mix)
        .map(lambda drawn: bias_by_mix(drawn["value"], skew.bias, drawn["mix"]))
    )


def positive(
    min: float = 0,
    max: float = M_MODULUS,
    skew: Skew = UNBIASED,
    unchecked: bool = False,
) -> Gen[float]:
    """Number in ``[min, max]`` for a non-negative range.

    With a `Biased` skew the draw is pulled toward `bias` by a weight sampled
    from ``[0, influence]``.
    """
    target = verify_positive_arguments(min, max, skew, unchecked)
    return _scaled(target, skew, create_positive_scaler)


def _mirror(skew: Skew) -> Skew:
    if isinstance(skew, Biased):
        return Biased(bias=-skew.bias, influence=skew.influence)
    return skew


def negative(
    min: float = -M_MODULUS,
    max: float = 0,
    skew: Skew = UNBIASED,
    unchecked: bool = False,
) -> Gen[float]:
    """Number in ``[min, max]`` for a non-positive range: `positive` mirrored."""
    verify_negative_arguments(min, max, skew, unchecked)
    return positive(-max, -min, _mirror(skew), unchecked=True).map(lambda value: 0 - value)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def integer(
    min: float = -M_MODULUS,
    max: float = M_MODULUS,
    skew: Skew = UNBIASED,
    unchecked: bool = False,
) -> Gen[int]:
    """Whole number in ``[min, max]``; the range may straddle zero.

    Draws are rounded half-up from a continuous scale, so `min` and `max`
    each get half the weight of an interior value. `char` and `array`
    lengths inherit the same lean away from their bounds.
    """
    target = Range(math.ceil(min), math.floor(max))
    if not unchecked:
        if target.min > target.max:
            raise ValidationError(f"No whole number lies between {min} and {max}")
        _verify_skew(Range(min, max), skew)

    return _scaled(target, skew, create_scaler).map(
        lambda value: int(clamp(_round_half_up(value), target))
    )


def number(
    min: float = -M_MODULUS,
    max: float = M_MODULUS,
    skew: Skew = UNBIASED,
    unchecked: bool = False,
) -> Gen[float]:
    """Fractional number in ``[min, max]``: a whole part plus a scaled `decimal` draw."""
    bounds = Range(min, max)
    if not unchecked:
        _verify_order(bounds)
        _verify_skew(bounds, skew)

    # each whole part w owns the unit cell [w, w + 1] cut down to the bounds
    lowest = math.floor(min)
    highest = math.ceil(max) - 1
    if highest < lowest:
        highest = lowest
    whole_part = integer(lowest, highest, skew, unchecked=True)

    def combine(whole: int) -> Callable[[float], float]:
        cell = Range(whole, whole + 1)
        if min > cell.min:
            cell = Range(min, cell.max)
        if max < cell.max:
            cell = Range(cell.min, max)
        scale = create_positive_scaler(Range(0, 1), cell)

        def add(fraction: float) -> float:
            return clamp(scale(fraction), bounds)

        return add

    return whole_part.map(combine).apply(decimal)
