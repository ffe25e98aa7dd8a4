import suite
from seqy import (
    from_iterable, from_range, enum_from, iterate, from_indexed_generator, repeat, replicate,
    singleton, empty, seqy, S, Seq, InvalidRangeError, SeqError
)
from dgen import from_schema

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises

order_schema = {
    'order_id': 'uuid4',
    'customer': 'name',
    'items': [{'_qen_items': {'sku': 'ean8', 'qty': ('pyint', {'min_value': 1, 'max_value': 5})},
               '_qen_count': (1, 3)}],
}


# --- from_range ---

@test("from_range is inclusive on both ends")
def test_from_range_inclusive():
    assert_that(from_range(1, 5).collect() == [1, 2, 3, 4, 5], "1..5")
    assert_that(from_range(3, 3).collect() == [3], "single element range")


@test("from_range with a step stops at or before stop")
def test_from_range_step():
    assert_that(from_range(0, 10, 3).collect() == [0, 3, 6, 9], "step 3")
    assert_that(from_range(0, 1, 0.25).collect() == [0, 0.25, 0.5, 0.75, 1.0], "float step")


@test("from_range rejects stop < start at construction")
def test_from_range_backwards():
    error = assert_raises(InvalidRangeError, lambda: from_range(9, 3))
    assert_that(error.start == 9 and error.stop == 3, "error carries the bounds")
    assert_that(isinstance(error, ValueError) and isinstance(error, SeqError), "error hierarchy")


@test("from_range rejects a non-positive step")
def test_from_range_bad_step():
    assert_raises(InvalidRangeError, lambda: from_range(3, 9, -1))
    assert_raises(InvalidRangeError, lambda: from_range(3, 9, 0))


@test("from_range can be traversed repeatedly")
def test_from_range_restartable():
    r = from_range(1, 3)
    assert_that(r.collect() == r.collect() == [1, 2, 3], "same result twice")


# --- infinite producers ---

@test("enum_from counts forever from start")
def test_enum_from():
    assert_that(enum_from(5).take(3).collect() == [5, 6, 7], "step 1")
    assert_that(enum_from(0, 5).take(4).collect() == [0, 5, 10, 15], "step 5")


@test("iterate halves down")
def test_iterate_halving():
    assert_that(iterate(lambda x: x // 2, 128).take(4).collect() == [128, 64, 32, 16], "halving")


@test("iterate re-runs effects per traversal")
def test_iterate_effects():
    calls = []
    xs = iterate(lambda x: calls.append(x) or x + 1, 0).take(3)
    xs.collect()
    xs.collect()
    assert_that(len(calls) == 4, f"f ran {len(calls)} times")


@test("repeat and replicate")
def test_repeat_replicate():
    assert_that(repeat('x').take(3).collect() == ['x', 'x', 'x'], "repeat")
    assert_that(replicate(4, 0).collect() == [0, 0, 0, 0], "replicate")
    assert_that(replicate(0, 1).collect() == [], "replicate zero")
    assert_that(replicate(-2, 1).collect() == [], "replicate negative")


@test("from_indexed_generator stops at the first None")
def test_from_indexed_generator():
    squares = from_indexed_generator(lambda i: i * i if i < 5 else None)
    assert_that(squares.collect() == [0, 1, 4, 9, 16], "squares")
    letters = "seqy"
    assert_that(from_indexed_generator(lambda i: letters[i] if i < len(letters) else None).collect_string() == "seqy",
                "letters")


@test("from_indexed_generator keeps falsy values that are not None")
def test_from_indexed_generator_falsy():
    values = [0, '', False, None, 1]
    xs = from_indexed_generator(lambda i: values[i]).collect()
    assert_that(xs == [0, '', False], f"got {xs}")


# --- simple producers ---

@test("singleton and empty")
def test_singleton_empty():
    assert_that(singleton(42).collect() == [42], "singleton")
    assert_that(empty().collect() == [], "empty")
    assert_that(empty().count() == 0, "empty count")


@test("aliases all build a Seq")
def test_aliases():
    for make in (from_iterable, seqy, S):
        xs = make((1, 2))
        assert_that(isinstance(xs, Seq) and xs.collect() == [1, 2], f"{make.__name__}")


@test("a one-shot iterator can be traversed only once")
def test_one_shot_iterator():
    xs = from_iterable(iter([1, 2, 3]))
    assert_that(xs.collect() == [1, 2, 3], "first traversal")
    assert_that(xs.collect() == [], "spent")


# --- generated data ---

@test("seeded record streams are reproducible")
def test_from_schema_seeded():
    orders = from_schema(order_schema, seed=7).take(5)
    first = orders.collect()
    second = orders.collect()
    assert_that(first == second, "same seed, same records")
    for order in first:
        assert_that(1 <= len(order['items']) <= 3, "item count from _qen_count")


@test("record stream is lazy")
def test_from_schema_lazy():
    records = from_schema(order_schema, seed=1)
    records.take(2).collect()
    assert_that(records._xs.created == 2, f"created {records._xs.created} records")


if __name__ == "__main__":
    suite.run(title="seqy factories test")
