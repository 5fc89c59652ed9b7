"""Public package surface for the seedgen value generators."""

from .combinators import (
    array,
    char,
    expand,
    intersect,
    nullable,
    partial,
    record,
    required,
    sequence,
    spliced,
    string,
    tuple_of,
    union,
    vector,
)
from .distribution import boolean, constants, normalize_distribution, sized, uniform
from .errors import DistributionError, ValidationError
from .gen import Gen, empty, lazy, of, seeded, stated
from .lcg import A_MULTIPLIER, C_CONSTANT, DEFAULT_LCG, M_MODULUS, SEED_MAX, SEED_MIN, Lcg, advance
from .models import UNBIASED, Biased, Range, Skew, State, Unbiased
from .numbers import decimal, integer, make_skew, negative, number, positive
from .sample import SampleConfig, run_sample
from .scaling import bias_by_mix, clamp, create_positive_scaler, create_scaler

__all__ = [
    "A_MULTIPLIER",
    "Biased",
    "C_CONSTANT",
    "DEFAULT_LCG",
    "DistributionError",
    "Gen",
    "Lcg",
    "M_MODULUS",
    "Range",
    "SEED_MAX",
    "SEED_MIN",
    "SampleConfig",
    "Skew",
    "State",
    "UNBIASED",
    "Unbiased",
    "ValidationError",
    "advance",
    "array",
    "bias_by_mix",
    "boolean",
    "char",
    "clamp",
    "constants",
    "create_positive_scaler",
    "create_scaler",
    "decimal",
    "empty",
    "expand",
    "integer",
    "intersect",
    "lazy",
    "make_skew",
    "negative",
    "normalize_distribution",
    "nullable",
    "number",
    "of",
    "partial",
    "positive",
    "record",
    "required",
    "run_sample",
    "seeded",
    "sequence",
    "sized",
    "spliced",
    "stated",
    "string",
    "tuple_of",
    "union",
    "uniform",
    "vector",
]
