"""Shape combinators composed from the core generators."""

import math
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple, TypeVar

from .distribution import Distribution, boolean, sized, uniform
from .errors import ValidationError
from .gen import Gen, of
from .models import UNBIASED, Skew, State
from .numbers import decimal, integer, positive

A = TypeVar("A")
B = TypeVar("B")
K = TypeVar("K")


def _collect(gens: Sequence[Gen[Any]]) -> Gen[List[Any]]:
    def stateful(state: State) -> Tuple[List[Any], State]:
        values = []
        for gen in gens:
            value, state = gen.stateful(state)
            values.append(value)
        return values, state

    return Gen(stateful)


def vector(gen: Gen[A], size: int) -> Gen[List[A]]:
    """Exactly `size` draws from `gen`."""
    if size < 0:
        raise ValidationError(f"Vector size of {size} should not be less than 0")

    def stateful(state: State) -> Tuple[List[A], State]:
        values = []
        for _ in range(size):
            value, state = gen.stateful(state)
            values.append(value)
        return values, state

    return Gen(stateful)


def array(gen: Gen[A], min: int = 0, max: int = 50, skew: Skew = UNBIASED) -> Gen[List[A]]:
    """Between `min` and `max` draws from `gen`; the length itself may be skewed."""
    return positive(min, max, skew).chain(lambda size: vector(gen, math.floor(size + 0.5)))


def tuple_of(*gens: Gen[Any]) -> Gen[Tuple[Any, ...]]:
    return _collect(gens).map(tuple)


def sequence(gens: Sequence[Gen[A]]) -> Gen[List[A]]:
    return _collect(list(gens))


def required(gens: Mapping[str, Gen[Any]]) -> Gen[Dict[str, Any]]:
    """Struct with every key of `gens`, drawn in mapping order."""
    keys = list(gens)
    return _collect([gens[key] for key in keys]).map(lambda values: dict(zip(keys, values)))


def record(key: Gen[K], value: Gen[A], min: int = 0, max: int = 50) -> Gen[Dict[K, A]]:
    """Dict built from up to `max` generated pairs; repeated keys keep the last value."""
    return array(tuple_of(key, value), min, max).map(dict)


def partial(
    gens: Mapping[str, Gen[Any]],
    presence: Optional[Mapping[str, float]] = None,
) -> Gen[Dict[str, Any]]:
    """Struct where each key appears with its own probability, 0.5 by default."""
    presence = dict(presence or {})
    unknown = sorted(set(presence) - set(gens))
    if unknown:
        raise ValidationError(f"Presence given for unknown keys {unknown}")
    for key, probability in presence.items():
        if not 0 <= probability <= 1:
            raise ValidationError(
                f"Presence of {probability} for '{key}' should be between 0 and 1"
            )

    def stateful(state: State) -> Tuple[Dict[str, Any], State]:
        result = {}
        for key, gen in gens.items():
            if key in presence:
                draw, state = decimal.stateful(state)
                present = draw < presence[key]
            else:
                present, state = boolean.stateful(state)
            if present:
                result[key], state = gen.stateful(state)
        return result, state

    return Gen(stateful)


def union(gens: Sequence[Gen[Any]], distribution: Optional[Distribution] = None) -> Gen[Any]:
    """Value from one arm, chosen uniformly or by `distribution`."""
    arms = list(gens)
    if not arms:
        raise ValidationError("union() needs at least one generator")
    return sized(len(arms), distribution).chain(lambda index: arms[index])


def intersect(gens: Sequence[Gen[Mapping[str, Any]]]) -> Gen[Dict[str, Any]]:
    """Merge the dicts of every generator; later keys win."""

    def merge(parts: List[Mapping[str, Any]]) -> Dict[str, Any]:
        merged: Dict[str, Any] = {}
        for part in parts:
            merged.update(part)
        return merged

    return _collect(list(gens)).map(merge)


def spliced(values: Sequence[A], drop: float = 0.5) -> Gen[List[A]]:
    """`values` with roughly `drop` of them removed, original order kept."""
    if not 0 <= drop <= 1:
        raise ValidationError(f"Drop of {drop} should be between 0 and 1")

    items = list(values)
    if not items:
        return of([])

    keep = len(items) - drop * len(items)
    size = integer(math.floor(keep), math.ceil(keep))
    index = uniform(len(items))

    def pick(count: int) -> Gen[List[A]]:
        def stateful(state: State) -> Tuple[List[A], State]:
            chosen: List[int] = []
            while len(chosen) < count:
                position, state = index.filter(lambda i: i not in chosen).stateful(state)
                chosen.append(position)
            return [items[i] for i in sorted(chosen)], state

        return Gen(stateful)

    return size.chain(pick)


def expand(
    gen: Gen[A],
    reducer: Callable[[B, A, int], Tuple[B, bool]],
    initial: B,
) -> Gen[B]:
    """Fold draws from `gen` into `initial` until `reducer` returns done."""

    def stateful(state: State) -> Tuple[B, State]:
        accumulator = initial
        step = 0
        done = False
        while not done:
            current, state = gen.stateful(state)
            accumulator, done = reducer(accumulator, current, step)
            step += 1
        return accumulator, state

    return Gen(stateful)


def nullable(gen: Gen[A]) -> Gen[Optional[A]]:
    none = of(None)
    return boolean.chain(lambda present: gen if present else none)


def char(start: str = " ", end: str = "~") -> Gen[str]:
    """Single character between `start` and `end` inclusive."""
    if len(start) != 1 or len(end) != 1:
        raise ValidationError(f"char() bounds should be single characters, got {start!r} and {end!r}")
    return integer(ord(start), ord(end)).map(chr)


def string(start: str = " ", end: str = "~", min: int = 0, max: int = 100) -> Gen[str]:
    return array(char(start, end), min, max).map("".join)
