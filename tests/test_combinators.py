"""Shape combinators built from the core generators."""

import pytest

from seedgen import (
    Biased,
    ValidationError,
    array,
    boolean,
    char,
    constants,
    expand,
    integer,
    intersect,
    lazy,
    nullable,
    of,
    partial,
    record,
    required,
    seeded,
    sequence,
    spliced,
    string,
    tuple_of,
    union,
    vector,
)


def _distinct(values):
    return len(set(values)) == len(values)


def test_vector_has_fixed_size_and_fresh_seeds():
    results = vector(seeded, 10).range(0, 10)
    assert all(len(values) == 10 for values in results)
    assert all(_distinct(values) for values in results)
    assert vector(seeded, 0).run(0) == []

    with pytest.raises(ValidationError):
        vector(seeded, -1)


def test_array_length_follows_bounds():
    results = array(seeded, min=3, max=4).range(0, 50)
    assert all(3 <= len(values) <= 4 for values in results)


def test_array_length_with_biased_skew_stays_in_bounds():
    generator = array(seeded, min=2, max=6, skew=Biased(bias=5, influence=1))
    lengths = [len(values) for values in generator.range(0, 100)]
    assert all(2 <= length <= 6 for length in lengths)
    assert 5 in lengths


def test_tuple_of_keeps_generator_order():
    results = tuple_of(seeded, char()).range(0, 10)
    assert all(len(value) == 2 for value in results)
    assert all(isinstance(value[0], int) and isinstance(value[1], str) for value in results)


def test_sequence_matches_tuple_of():
    gens = [char(), integer(min=-5, max=5)]
    assert [tuple(values) for values in sequence(gens).range(0, 10)] == tuple_of(*gens).range(0, 10)


def test_required_contains_every_key():
    inputs = {"one": char(), "two": integer(), "three": boolean}
    results = required(inputs).range(0, 100)
    assert all(list(value) == list(inputs) for value in results)


def test_record_keys_come_from_key_generator():
    properties = ("one", "two")
    generator = record(constants(properties), integer(), min=1, max=8)
    for seed in (0, 1357954837, 2978653157):
        assert set(generator.run(seed)) <= set(properties)


def test_partial_sometimes_contains_each_key():
    results = partial({"first": seeded, "second": char()}).range(0, 30)
    assert any("first" in value for value in results)
    assert any("second" in value for value in results)
    assert any("first" not in value for value in results)
    assert any("second" not in value for value in results)


def test_partial_presence_probabilities():
    generator = partial({"first": seeded, "second": char()}, {"first": 1.0, "second": 0.0})
    results = generator.range(0, 30)
    assert all("first" in value for value in results)
    assert all("second" not in value for value in results)


def test_partial_rejects_invalid_presence():
    with pytest.raises(ValidationError):
        partial({"first": seeded}, {"first": 1.5})
    with pytest.raises(ValidationError, match="unknown"):
        partial({"first": seeded}, {"other": 0.5})


def test_union_draws_from_every_arm():
    generator = union([integer(), string(), boolean])
    results = generator.range(0, 100)
    assert all(isinstance(value, (int, str)) for value in results)
    assert {type(value) for value in results} == {int, str, bool}


def test_union_respects_distribution():
    generator = union([of("a"), of("b"), of("c")], [0.0, 0.0, 1.0])
    assert set(generator.range(0, 20)) == {"c"}

    with pytest.raises(ValidationError):
        union([of("a"), of("b")], [0.5])
    with pytest.raises(ValidationError):
        union([])


def test_intersect_merges_objects():
    generator = intersect([of({"first": "hello"}), of({"second": 2}), of({"third": True})])
    expected = {"first": "hello", "second": 2, "third": True}
    assert generator.range(0, 10) == [expected] * 10


def test_spliced_keeps_original_order():
    values = ["a", "b", "c", "d", "e", "f"]
    for result in spliced(values, 0.5).range(0, 100):
        positions = [values.index(item) for item in result]
        assert positions == sorted(positions)
        assert _distinct(result)


def test_spliced_defaults_to_half():
    values = ["a", "b", "c", "d", "e", "f"]
    assert spliced(values).range(0, 100) == spliced(values, 0.5).range(0, 100)


def test_spliced_removes_a_fixed_amount():
    values = ["a", "b", "c", "d", "e", "f"]
    assert all(len(result) == 3 for result in spliced(values, 0.5).range(0, 100))
    assert all(len(result) in (3, 4) for result in spliced(values, 0.4).range(0, 100))
    assert spliced([], 0.5).run(0) == []

    with pytest.raises(ValidationError):
        spliced(values, 1.5)


def test_expand_stops_when_reducer_is_done():
    accumulator = []
    generator = expand(char(), lambda acc, current, index: (acc, True), accumulator)
    assert all(result is accumulator for result in generator.range(0, 10))


def test_expand_draws_fresh_seeds():
    def collect(acc, current, index):
        return acc + [current], index == 4

    results = expand(seeded, collect, []).range(0, 20)
    assert all(len(values) == 5 and _distinct(values) for values in results)


def test_nullable_produces_value_or_none():
    results = nullable(seeded).range(0, 30)
    assert all(value is None or isinstance(value, int) for value in results)
    assert None in results


def test_char_and_string_stay_in_alphabet():
    letters = char("a", "z").range(1357954837, 100)
    assert all("a" <= letter <= "z" for letter in letters)

    words = string("a", "z", min=1, max=10).range(1357954837, 50)
    assert all(1 <= len(word) <= 10 for word in words)
    assert all(set(word) <= set("abcdefghijklmnopqrstuvwxyz") for word in words)

    with pytest.raises(ValidationError):
        char("ab", "z")


def test_lazy_allows_recursive_structures():
    tree = lazy(lambda: union([of("leaf"), tuple_of(tree, tree)], [0.8, 0.2]))

    def leaves(node):
        if node == "leaf":
            return 1
        return leaves(node[0]) + leaves(node[1])

    assert all(leaves(node) >= 1 for node in tree.range(0, 20))
