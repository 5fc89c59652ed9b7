from dataclasses import dataclass
from typing import Union

from .lcg import DEFAULT_LCG, Lcg


@dataclass(frozen=True)
class State:
    seed: int
    lcg: Lcg = DEFAULT_LCG


@dataclass(frozen=True)
class Range:
    min: float
    max: float


@dataclass(frozen=True)
class Unbiased:
    pass


@dataclass(frozen=True)
class Biased:
    bias: float
    influence: float


Skew = Union[Unbiased, Biased]

UNBIASED = Unbiased()
