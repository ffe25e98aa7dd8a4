import numpy as np
import pandas as pd
import suite
from seqy import S, from_iterable, from_range, enum_from, empty, repeat, configure, get_config, SeqConfig
from seqy import compare_on, comparing
from dgen import from_schema

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises

product_schema = {
    'id': ('pyint', {'min_value': 1, 'max_value': 50}),
    'name': 'word',
    'price': ('pyfloat', {'min_value': 5.0, 'max_value': 500.0}),
    'category': {'_qen_provider': 'choice', 'from': ['electronics', 'books', 'clothing']}
}


class CountingList(list):
    """a list that records how often it is iterated"""
    traversals = 0

    def __iter__(self):
        CountingList.traversals += 1
        return super().__iter__()


# --- collect ---

@test("collect copies a list backing by default")
def test_collect_copies():
    data = [1, 2, 3]
    result = from_iterable(data).collect()
    assert_that(result == data and result is not data, "should be an equal copy")


@test("collect without copy hands back the list backing")
def test_collect_no_copy():
    data = [1, 2, 3]
    assert_that(from_iterable(data).collect(always_copy=False) is data, "same list")


@test("collect default follows the configured always_copy")
def test_collect_config_default():
    data = [1, 2]
    previous = configure(always_copy=False)
    try:
        assert_that(get_config().always_copy is False, "config changed")
        assert_that(from_iterable(data).collect() is data, "no copy by default now")
    finally:
        configure(**previous.as_dict())
    assert_that(get_config() == SeqConfig(), "config restored")


@test("configure rejects unknown options")
def test_configure_unknown():
    assert_raises(TypeError, lambda: configure(always_cpy=True))
    assert_that(get_config() == SeqConfig(), "config untouched")


@test("collect does not re-evaluate a list backing")
def test_collect_list_backing_not_iterated():
    data = CountingList([1, 2, 3])
    CountingList.traversals = 0
    from_iterable(data).collect()
    assert_that(CountingList.traversals == 0, "copied, not iterated")


# --- count ---

@test("count is constant time for sized backings")
def test_count_sized():
    data = CountingList(range(100))
    CountingList.traversals = 0
    assert_that(from_iterable(data).count() == 100, "list count")
    assert_that(CountingList.traversals == 0, "list not iterated")
    assert_that(from_iterable(range(10 ** 12)).count() == 10 ** 12, "range count without iterating")
    assert_that(from_iterable(np.arange(7)).count() == 7, "ndarray count")
    assert_that(from_iterable("hello").count() == 5, "string count")


@test("count walks lazy sequences")
def test_count_lazy():
    assert_that(from_range(1, 10).filter(lambda x: x % 2).count() == 5, "odd numbers")
    assert_that(empty().count() == 0, "empty")


# --- folds ---

@test("reduce is a left fold")
def test_reduce_left():
    result = S([1, 2, 3]).reduce(lambda acc, x: f"({acc}-{x})", "0")
    assert_that(result == "(((0-1)-2)-3)", f"got {result}")


@test("reduce_right is a right fold")
def test_reduce_right():
    result = S([1, 2, 3]).reduce_right(lambda x, acc: f"({x}-{acc})", "0")
    assert_that(result == "(1-(2-(3-0)))", f"got {result}")


@test("reduce_right handles falsy elements")
def test_reduce_right_falsy():
    result = S([0, '', None]).reduce_right(lambda x, acc: acc + [x], [])
    assert_that(result == [None, '', 0], f"got {result}")


@test("sum and product")
def test_sum_product():
    assert_that(from_range(1, 100).sum() == 5050, "gauss")
    assert_that(from_range(1, 5).product() == 120, "5!")
    assert_that(empty().sum() == 0 and empty().product() == 1, "identities")


@test("all and any short-circuit")
def test_all_any():
    assert_that(enum_from(0).any(lambda x: x > 10), "any on infinite stops at the first hit")
    assert_that(not enum_from(0).all(lambda x: x < 10), "all on infinite stops at the first miss")
    assert_that(empty().all(lambda x: False), "all of nothing")
    assert_that(not empty().any(lambda x: True), "any of nothing")


@test("collect_string joins strings")
def test_collect_string():
    assert_that(S(["se", "q", "y"]).collect_string() == "seqy", "joined")
    assert_that(empty().collect_string() == "", "empty")


@test("first returns the head or the default")
def test_first():
    assert_that(enum_from(3).first() == 3, "infinite")
    assert_that(empty().first('none') == 'none', "default")


@test("un_cons splits off the head")
def test_un_cons():
    head, tail = S([1, 2, 3]).un_cons()
    assert_that(head == 1 and tail.collect() == [2, 3], "head and tail")
    head, tail = repeat(7).un_cons()
    assert_that(head == 7 and tail.take(2).collect() == [7, 7], "infinite tail stays lazy")
    head, tail = empty().un_cons()
    assert_that(head is None and tail.collect() == [], "empty")


# --- export accessor ---

@test("to exports into python containers")
def test_to_containers():
    xs = S([3, 1, 3, 2])
    assert_that(xs.to.list() == [3, 1, 3, 2], "list")
    assert_that(xs.to.tuple() == (3, 1, 3, 2), "tuple")
    assert_that(xs.to.set() == {1, 2, 3}, "set")
    words = S(['apple', 'kiwi'])
    assert_that(words.to.dict(lambda w: w[0], len) == {'a': 5, 'k': 4}, "dict with value selector")
    assert_that(words.to.dict(len) == {5: 'apple', 4: 'kiwi'}, "dict of elements")


@test("to exports into numpy and pandas")
def test_to_numpy_pandas():
    arr = from_range(1, 4).to.array()
    assert_that(isinstance(arr, np.ndarray) and arr.tolist() == [1, 2, 3, 4], "array")
    series = from_range(1, 3).map(lambda x: x * 1.5).to.pandas()
    assert_that(isinstance(series, pd.Series) and series.sum() == 9.0, "series")
    products = from_schema(product_schema, seed=42).take(10)
    df = products.to.df()
    assert_that(isinstance(df, pd.DataFrame) and df.shape == (10, 4), f"dataframe shape {df.shape}")
    assert_that(set(df.columns) == {'id', 'name', 'price', 'category'}, "columns from record keys")


# --- sorting ---

@test("sort uses natural ordering and is deferred")
def test_sort():
    calls = []
    xs = S([3, 1, 2]).map(lambda x: calls.append(x) or x).sort()
    assert_that(calls == [], "sorting is deferred")
    assert_that(xs.collect() == [1, 2, 3], "ascending")
    assert_that(S([3, 1, 2]).sort(reverse=True).collect() == [3, 2, 1], "descending")


@test("sort_on sorts by a projected key and is stable")
def test_sort_on():
    people = S([('bo', 30), ('al', 25), ('cy', 30), ('di', 25)])
    result = people.sort_on(lambda p: p[1]).map(lambda p: p[0]).collect()
    assert_that(result == ['al', 'di', 'bo', 'cy'], f"got {result}")


@test("sort_by takes comparators")
def test_sort_by():
    people = S([{'name': 'bo', 'age': 30}, {'name': 'al', 'age': 25}, {'name': 'cy', 'age': 30}])
    by_age_then_name_desc = compare_on('age').then_by(comparing(lambda p: p['name']).desc())
    names = people.sort_by(by_age_then_name_desc).map(lambda p: p['name']).collect()
    assert_that(names == ['al', 'cy', 'bo'], f"got {names}")
    plain = S([5, 3, 9]).sort_by(lambda a, b: b - a).collect()
    assert_that(plain == [9, 5, 3], "plain comparison function")


if __name__ == "__main__":
    suite.run(title="seqy terminal test")
