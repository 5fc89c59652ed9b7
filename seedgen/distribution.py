"""Uniform and weighted index selection."""

import math
from bisect import bisect_left
from itertools import accumulate
from typing import List, Mapping, Optional, Sequence, TypeVar, Union

from .errors import DistributionError, ValidationError
from .gen import Gen, stated
from .numbers import decimal

T = TypeVar("T")

Distribution = Union[Sequence[float], Mapping[int, float]]

# Weights are floats; a table summing to 1 within this margin is accepted.
DISTRIBUTION_TOLERANCE = 1e-9


def uniform(size: int) -> Gen[int]:
    """Whole number in ``[0, size)`` with equal probability."""
    if size < 1:
        raise ValidationError(f"Size should be at least 1, but received {size}")

    # integer form of floor(seed / m * size)
    return stated.map(lambda state: state.seed * size // state.lcg.m)


def normalize_distribution(size: int, distribution: Distribution) -> List[float]:
    """Validate a weight table and return one weight per index.

    Sequences must hold exactly `size` weights. Mappings are keyed by index and
    any index they leave out weighs nothing.
    """
    if isinstance(distribution, Mapping):
        stray = sorted(key for key in distribution if not 0 <= key < size)
        if stray:
            raise DistributionError(
                f"Distribution keys {stray} fall outside the indices 0..{size - 1}"
            )
        weights = [float(distribution.get(index, 0.0)) for index in range(size)]
    else:
        weights = [float(weight) for weight in distribution]
        if len(weights) != size:
            raise DistributionError(
                f"Distribution has {len(weights)} weights but should have {size}"
            )

    negatives = [weight for weight in weights if weight < 0]
    if negatives:
        raise DistributionError(f"Distribution weights {negatives} should not be negative")

    total = math.fsum(weights)
    if not math.isclose(total, 1.0, rel_tol=0.0, abs_tol=DISTRIBUTION_TOLERANCE):
        raise DistributionError(f"Distribution weights sum to {total} but should sum to 1")

    return weights


def sized(size: int, distribution: Optional[Distribution] = None) -> Gen[int]:
    """Index in ``[0, size)``, uniform or weighted by `distribution`."""
    if size < 1:
        raise ValidationError(f"Size should be at least 1, but received {size}")
    if distribution is None:
        return uniform(size)

    weights = normalize_distribution(size, distribution)

    # zero-weight arms get no boundary, so they can never be selected
    arms = [index for index, weight in enumerate(weights) if weight > 0]
    boundaries = list(accumulate(weights[index] for index in arms))
    last = len(arms) - 1

    def lookup(percentage: float) -> int:
        position = bisect_left(boundaries, percentage)
        return arms[min(position, last)]

    return decimal.map(lookup)


boolean: Gen[bool] = stated.map(lambda state: state.seed * 2 < state.lcg.m)


def constants(values: Sequence[T], distribution: Optional[Distribution] = None) -> Gen[T]:
    """One of `values`, optionally weighted."""
    if not values:
        raise ValidationError("constants() needs at least one value")
    options = tuple(values)
    return sized(len(options), distribution).map(lambda index: options[index])
