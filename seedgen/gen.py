"""State-threading generator algebra.

A `Gen` wraps a function ``State -> (value, State)``. Nothing runs until
`Gen.run` or `Gen.range` receives a state; every combinator returns a new
generator and every step returns a new state.
"""

import logging
from typing import Any, Callable, Dict, Generic, List, Tuple, TypeVar, Union

from .models import State

logger = logging.getLogger(__name__)

A = TypeVar("A")
B = TypeVar("B")
R = TypeVar("R")

Stateful = Callable[[State], Tuple[A, State]]

# filter() keeps drawing forever on an unsatisfiable predicate; it only reports progress.
FILTER_WARN_EVERY = 10_000


def as_state(state: Union[State, int]) -> State:
    """Accept a bare integer seed wherever a state is expected."""
    if isinstance(state, State):
        return state
    return State(seed=state)


class Gen(Generic[A]):
    def __init__(self, stateful: Stateful) -> None:
        self.stateful = stateful

    def run(self, state: Union[State, int]) -> A:
        """Run against `state` and return only the value."""
        return self.stateful(as_state(state))[0]

    def range(self, state: Union[State, int], size: int = 10) -> List[A]:
        """Run `size` times, feeding each returned state into the next run."""
        current = as_state(state)
        values: List[A] = []
        for _ in range(size):
            value, current = self.stateful(current)
            values.append(value)
        return values

    def modify(self, f: Callable[[State], State]) -> "Gen[A]":
        def stateful(state: State) -> Tuple[A, State]:
            value, next_state = self.stateful(state)
            return value, f(next_state)

        return Gen(stateful)

    def increment(self) -> "Gen[A]":
        """Advance the seed with the state's own LCG after this generator runs."""
        return self.modify(lambda state: State(state.lcg.advance(state.seed), state.lcg))

    def map(self, f: Callable[[A], B]) -> "Gen[B]":
        def stateful(state: State) -> Tuple[B, State]:
            value, next_state = self.stateful(state)
            return f(value), next_state

        return Gen(stateful)

    def chain(self, f: Callable[[A], "Gen[B]"]) -> "Gen[B]":
        def stateful(state: State) -> Tuple[B, State]:
            value, next_state = self.stateful(state)
            return f(value).stateful(next_state)

        return Gen(stateful)

    def chain_first(self, f: Callable[[A], "Gen[Any]"]) -> "Gen[A]":
        return self.chain(lambda a: f(a).map(lambda _: a))

    def apply(self, gen: "Gen[R]") -> "Gen[B]":
        """Apply the function produced by `self` to the value produced by `gen`.

        `self` always consumes the state first; swapping the order would change
        every value drawn for a given seed.
        """

        def stateful(state: State) -> Tuple[B, State]:
            f, state2 = self.stateful(state)
            value, state3 = gen.stateful(state2)
            return f(value), state3

        return Gen(stateful)

    def apply_first(self, gen: "Gen[Any]") -> "Gen[A]":
        return self.map(lambda a: lambda _: a).apply(gen)

    def apply_second(self, gen: "Gen[B]") -> "Gen[B]":
        return self.map(lambda _: lambda b: b).apply(gen)

    def flap(self, parameter: Any) -> "Gen[Any]":
        return self.map(lambda f: f(parameter))

    def filter(self, predicate: Callable[[A], bool]) -> "Gen[A]":
        """Redraw on the residual state until `predicate` holds.

        Loops forever when the predicate can never be satisfied.
        """

        def stateful(state: State) -> Tuple[A, State]:
            rejected = 0
            while True:
                value, state = self.stateful(state)
                if predicate(value):
                    return value, state
                rejected += 1
                if rejected % FILTER_WARN_EVERY == 0:
                    logger.warning(
                        "filter rejected %d draws in a row; predicate may be unsatisfiable",
                        rejected,
                    )

        return Gen(stateful)

    def do(self, key: str) -> "Gen[Dict[str, A]]":
        return self.map(lambda value: {key: value})

    def do_chain(self, key: str, f: Callable[[Dict[str, Any]], "Gen[Any]"]) -> "Gen[Dict[str, Any]]":
        return self.chain(lambda record: f(record).map(lambda value: {**record, key: value}))

    def do_apply(self, key: str, gen: "Gen[Any]") -> "Gen[Dict[str, Any]]":
        return self.chain(lambda record: gen.map(lambda value: {**record, key: value}))


def of(value: A) -> Gen[A]:
    """Constant generator; leaves the state untouched."""
    return Gen(lambda state: (value, state))


empty: Gen[None] = of(None)


def lazy(thunk: Callable[[], Gen[A]]) -> Gen[A]:
    """Defer building a generator until first run, for recursive definitions."""
    cell: List[Gen[A]] = []

    def stateful(state: State) -> Tuple[A, State]:
        if not cell:
            cell.append(thunk())
        return cell[0].stateful(state)

    return Gen(stateful)


seeded: Gen[int] = Gen(lambda state: (state.seed, state)).increment()

stated: Gen[State] = Gen(lambda state: (state, state)).increment()
