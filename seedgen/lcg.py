# Linear congruential generator used to advance every seed (Numerical Recipes constants)
from dataclasses import dataclass

A_MULTIPLIER = 1664525
C_CONSTANT = 1013904223
M_MODULUS = 2**32

SEED_MIN = 0
SEED_MAX = M_MODULUS - 1


@dataclass(frozen=True)
class Lcg:
    a: int = A_MULTIPLIER
    c: int = C_CONSTANT
    m: int = M_MODULUS

    def advance(self, seed: int) -> int:
        # Python ints never wrap, so reduce explicitly to stay inside [0, m)
        return (self.a * seed + self.c) % self.m


DEFAULT_LCG = Lcg()


def advance(seed: int, lcg: Lcg = DEFAULT_LCG) -> int:
    """Next seed after `seed` for the given parameters."""
    return lcg.advance(seed)
