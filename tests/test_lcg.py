"""Seed advance regression tests."""

from seedgen import A_MULTIPLIER, C_CONSTANT, DEFAULT_LCG, M_MODULUS, SEED_MAX, Lcg, advance


def test_advance_matches_formula():
    for seed in (0, 1, 42, 1357954837, 2978653157, SEED_MAX):
        assert advance(seed) == (A_MULTIPLIER * seed + C_CONSTANT) % M_MODULUS


def test_advance_known_values():
    assert advance(0) == 1013904223
    assert advance(SEED_MAX) == 1012239698


def test_advance_stays_in_seed_domain():
    seed = 0
    for _ in range(1000):
        seed = advance(seed)
        assert 0 <= seed < M_MODULUS


def test_advance_is_deterministic():
    assert advance(1357954837) == advance(1357954837)


def test_custom_parameters_are_respected():
    lcg = Lcg(a=1, c=1, m=10)
    assert lcg.advance(9) == 0
    assert advance(4, lcg) == 5
    assert DEFAULT_LCG == Lcg(A_MULTIPLIER, C_CONSTANT, M_MODULUS)
