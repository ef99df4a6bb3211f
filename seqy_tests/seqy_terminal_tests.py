import numpy as np

import suite
from returns.maybe import Some, Nothing
from seqy import of, from_range, repeat_forever, Ordering, ValidationError

test = suite.test
assert_that = suite.assert_that
assert_equal = suite.assert_equal
assert_raises = suite.assert_raises

numbers = of([3, 1, 4, 1, 5, 9, 2, 6])


# collection tests

@test("to_list and to_set collect elements")
def test_to_list_to_set():
    assert_equal(numbers.to_list(), [3, 1, 4, 1, 5, 9, 2, 6], "list")
    assert_equal(numbers.to_set(), {1, 2, 3, 4, 5, 6, 9}, "set")
    assert_equal(of([]).to_list(), [], "empty list")


@test("to_map builds a dict from entries, later keys win")
def test_to_map():
    entries = of([('a', 1), ('b', 2), ('a', 3)])
    assert_equal(entries.to_map(lambda e: e), {'a': 3, 'b': 2}, "overwrite")
    assert_equal(of(['x', 'yy']).to_map(lambda s: (s, len(s))), {'x': 1, 'yy': 2}, "derived entries")


@test("to_object exposes entries as attributes")
def test_to_object():
    point = of([('x', 1), ('y', 2)]).to_object(lambda e: e)
    assert_equal((point.x, point.y), (1, 2), "attributes")


@test("to_object renders non-string names with str")
def test_to_object_int_names():
    squares = of([1, 2]).to_object(lambda n: (n, n * n))
    assert_equal(vars(squares), {'1': 1, '2': 4}, "attributes")


@test("join and to_string render elements")
def test_join_to_string():
    assert_equal(of([1, 2, 3]).join('-'), '1-2-3', "join")
    assert_equal(of([]).join('-'), '', "empty join")
    assert_equal(of([1, 2, 3]).to_string(), '[1, 2, 3]', "to_string")
    assert_equal(str(of(['a', 'b'])), '[a, b]', "str()")
    assert_equal(of().to_string(), '[]', "empty to_string")


# reduction tests

@test("count counts elements")
def test_count():
    assert_equal(numbers.count(), 8, "count")
    assert_equal(of([]).count(), 0, "empty")
    assert_equal(from_range(0, 1000).count(), 1000, "range")


@test("each runs an action for every element")
def test_each():
    seen = []
    result = of([1, 2, 3]).each(seen.append)
    assert_equal(seen, [1, 2, 3], "visited")
    assert_that(result is None, "each returns nothing")


@test("reduce folds from an initial value")
def test_reduce():
    assert_equal(of([1, 2, 3, 4]).reduce(lambda acc, x: acc + x, 0), 10, "sum")
    assert_equal(of([]).reduce(lambda acc, x: acc + x, 42), 42, "empty returns initial")
    assert_equal(of(['a', 'b']).reduce(lambda acc, x: acc + [x], []), ['a', 'b'], "build list")


@test("every and some short-circuit")
def test_every_some():
    assert_that(of([2, 4, 6]).every(lambda x: x % 2 == 0), "all even")
    assert_that(not of([2, 3]).every(lambda x: x % 2 == 0), "not all even")
    assert_that(of([]).every(lambda x: False), "every on empty is true")
    assert_that(of([1, 2]).some(lambda x: x > 1), "some greater")
    assert_that(not of([]).some(lambda x: True), "some on empty is false")
    assert_that(from_range().some(lambda x: x > 10), "some stops on infinite input")
    assert_that(not from_range().every(lambda x: x < 10), "every stops on infinite input")


@test("is_empty pulls at most one element")
def test_is_empty():
    pulls = []
    assert_that(not of([1, 2, 3]).inspect(pulls.append).is_empty(), "not empty")
    assert_equal(pulls, [1], "one pull")
    assert_that(of([]).is_empty(), "empty")
    assert_that(not repeat_forever(0).is_empty(), "infinite is not empty")


@test("is_unique and is_unique_by_key detect duplicates")
def test_is_unique():
    assert_that(of([1, 2, 3]).is_unique(), "distinct")
    assert_that(not of([1, 2, 1]).is_unique(), "repeated")
    assert_that(of([]).is_unique(), "empty is unique")
    assert_that(not of([[1], [1]]).is_unique(), "unhashable repeated")
    assert_that(not of(['a', 'bb', 'cc']).is_unique_by_key(len), "same length")
    assert_that(not from_range().map(lambda x: x % 5).is_unique(), "stops at first duplicate")
    assert_that(of([np.array([1, 2]), np.array([3, 4])]).is_unique(), "distinct arrays")
    assert_that(not of([np.array([1, 2]), np.array([1, 2])]).is_unique(), "repeated arrays")


# search tests

@test("find returns the first match as an optional")
def test_find():
    assert_equal(numbers.find(lambda x: x > 4), Some(5), "found")
    assert_equal(numbers.find(lambda x: x > 100), Nothing, "missing")
    assert_equal(of([None]).find(lambda x: True), Some(None), "None is a real element")


@test("find_index returns the position of the first match")
def test_find_index():
    assert_equal(numbers.find_index(lambda x: x == 1), Some(1), "first 1")
    assert_equal(numbers.find_index(lambda x: x == 7), Nothing, "missing")


@test("find_map returns the first present result")
def test_find_map():
    parsed = of(['a', '2', '3']).find_map(lambda s: int(s) if s.isdigit() else None)
    assert_equal(parsed, Some(2), "plain value is wrapped")
    wrapped = of([1, 2, 3]).find_map(lambda x: Some(x * 10) if x > 1 else Nothing)
    assert_equal(wrapped, Some(20), "optional is passed through")
    assert_equal(of([1, 2]).find_map(lambda x: None), Nothing, "nothing found")
    assert_equal(of([1]).find_map(lambda x: 0), Some(0), "zero counts as present")


@test("first, last and nth")
def test_first_last_nth():
    assert_equal(numbers.first(), Some(3), "first")
    assert_equal(numbers.last(), Some(6), "last")
    assert_equal(numbers.nth(0), Some(3), "nth 0")
    assert_equal(numbers.nth(5), Some(9), "nth 5")
    assert_equal(numbers.nth(8), Nothing, "past the end")
    assert_equal(of([]).first(), Nothing, "empty first")
    assert_equal(of([]).last(), Nothing, "empty last")
    assert_equal(from_range().nth(100), Some(100), "nth on infinite input")


@test("nth validates the index")
def test_nth_validation():
    assert_raises(ValidationError, lambda: numbers.nth(-1), "expected non-negative in nth, but got -1")
    assert_raises(ValidationError, lambda: numbers.nth(1.5), "expected integer in nth, but got 1.5")
    assert_equal(numbers.nth(2.0), Some(4), "integral float")


# ordering tests

@test("min and max find extremes")
def test_min_max():
    assert_equal(numbers.min(), Some(1), "min")
    assert_equal(numbers.max(), Some(9), "max")
    assert_equal(of([]).min(), Nothing, "empty min")
    assert_equal(of([]).max(), Nothing, "empty max")
    assert_equal(of(['pear', 'apple']).min(), Some('apple'), "strings")


@test("min keeps the earliest tie and max the latest")
def test_min_max_ties():
    pairs = of([(1, 'a'), (2, 'b'), (1, 'c'), (2, 'd')])
    assert_equal(pairs.min_by_key(lambda p: p[0]), Some((1, 'a')), "earliest minimum")
    assert_equal(pairs.max_by_key(lambda p: p[0]), Some((2, 'd')), "latest maximum")


@test("min_by and max_by accept orderings or integers")
def test_min_by_max_by():
    words = of(['ccc', 'a', 'bb'])
    by_length = lambda a, b: Ordering.of(len(a), len(b))
    assert_equal(words.min_by(by_length), Some('a'), "shortest")
    assert_equal(words.max_by(by_length), Some('ccc'), "longest")
    assert_equal(of([5, 3, 8]).min_by(lambda a, b: a - b), Some(3), "integer comparator")
    assert_equal(of([5, 3, 8]).max_by(lambda a, b: a - b), Some(8), "integer comparator max")
    assert_equal(of([5, 3, 8]).max_by(lambda a, b: Ordering.of(a, b).reverse()), Some(3), "reversed")


# comparison tests

@test("eq compares element by element with deep equality")
def test_eq():
    assert_that(of([1, 2, 3]).eq([1, 2, 3]), "same list")
    assert_that(of([1, 2, 3]).eq(of([1, 2, 3])), "same sequence")
    assert_that(not of([1, 2, 3]).eq([1, 2]), "shorter other")
    assert_that(not of([1, 2]).eq([1, 2, 3]), "longer other")
    assert_that(of([]).eq([]), "both empty")
    assert_that(of([[1, {'a': 2}]]).eq([[1, {'a': 2}]]), "nested structures")
    assert_that(not of([1]).eq([True]), "types matter")
    assert_that(not of([1]).eq(1), "non iterable other")
    assert_that(not of(['a', 'b']).eq('ab'), "a string is a single value, not characters")
    assert_that(not of(['a']).eq({'a': 1}), "a mapping is a single value")
    assert_that(of(['a', 'b']).eq(list('ab')), "characters as a list")


@test("eq_by uses a custom comparer")
def test_eq_by():
    assert_that(of(['A', 'b']).eq_by(['a', 'B'], lambda x, y: x.lower() == y.lower()), "case insensitive")
    assert_that(not of([1, 2]).eq_by([1, 3], lambda x, y: x == y), "different")


@test("ne is the complement of eq")
def test_ne():
    assert_that(not of([1, 2, 3]).ne([1, 2, 3]), "same")
    assert_that(of([1, 2, 3]).ne([1, 2, 4]), "different element")
    assert_that(of([1, 2]).ne([1, 2, 3]), "different length")
    assert_that(of([1]).ne(None), "non iterable other")
    assert_that(of(['a', 'b']).ne('ab'), "a string other always differs")
    assert_that(of(['x']).ne_by('x', lambda a, b: False), "strings are not split by ne_by")
    assert_that(of([1, 2]).ne_by([1, 2], lambda x, y: True), "custom difference")
    assert_that(not of([1, 2]).ne_by([3, 4], lambda x, y: False), "no differences")


@test("eq stops at the first difference on infinite input")
def test_eq_infinite():
    assert_that(not from_range().eq(of([0, 1, 5])), "differs early")
    assert_that(from_range().ne(repeat_forever(0)), "differs at the second element")


if __name__ == "__main__":
    suite.run(title="seqy terminal test suite")
