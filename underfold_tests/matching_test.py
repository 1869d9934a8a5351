from dataclasses import dataclass

import suite
from dgen import from_schema
from underfold import P, empty, NOT_FOUND

test = suite.test
assert_that = suite.assert_that
assert_equal = suite.assert_equal

# test data
shapes = P([
    {'color': 'purple', 'shape': 'circle'},
    {'color': 'red', 'shape': 'triangle'},
    {'color': 'blue', 'shape': 'circle'},
    {'color': 'green', 'shape': 'square'},
])

person_schema = {
    'id': ('pyint', {'min_value': 1, 'max_value': 100}),
    'name': 'word',
    'department': {'_gen_provider': 'choice', 'from': ['eng', 'sales', 'hr', 'marketing']},
    'active': {'_gen_provider': 'choice', 'from': [True, False]},
}


@dataclass(frozen=True)
class Point:
    x: int
    y: int


# where() tests

@test("where keeps records carrying the properties, in order")
def test_where_basic():
    circles = shapes.props.where({'shape': 'circle'}).to.list()
    assert_equal(circles, [
        {'color': 'purple', 'shape': 'circle'},
        {'color': 'blue', 'shape': 'circle'},
    ])


@test("where requires every property to match")
def test_where_conjunctive():
    assert_equal(shapes.props.where({'shape': 'circle', 'color': 'blue'}).to.list(),
                 [{'color': 'blue', 'shape': 'circle'}])
    assert_that(shapes.props.where({'shape': 'circle', 'color': 'red'}).is_empty, "no record has both")


@test("where with no properties keeps everything")
def test_where_empty_properties():
    assert_equal(shapes.props.where({}), shapes)
    assert_that(empty().props.where({'a': 1}).is_empty, "empty input gives empty output")


@test("where tells a missing key apart from a none value")
def test_where_missing_key():
    data = P([{'size': None}, {'other': 1}])
    assert_equal(data.props.where({'size': None}).to.list(), [{'size': None}])


@test("where compares unhashable values")
def test_where_unhashable():
    data = P([{'tags': ['a', 'b']}, {'tags': ['c']}])
    assert_equal(data.props.where({'tags': ['c']}).to.list(), [{'tags': ['c']}])


@test("where reads attributes of plain objects")
def test_where_objects():
    points = P([Point(1, 2), Point(3, 4), Point(1, 5)])
    assert_equal(points.props.where({'x': 1}).to.list(), [Point(1, 2), Point(1, 5)])
    assert_that(points.props.where({'z': 1}).is_empty, "objects without the attribute never match")


@test("where treats non-string keys as absent on plain objects")
def test_where_non_string_keys():
    mixed = P([Point(1, 2), {1: 'x'}, {'1': 'x'}])
    assert_equal(mixed.props.where({1: 'x'}).to.list(), [{1: 'x'}], "only the mapping carries key 1")
    assert_equal(mixed.props.pluck(1).to.list(), [None, 'x', None])
    assert_that(P([Point(1, 2)]).props.find_where({1: 'x'}) is NOT_FOUND, "object never matches")


@test("where agrees with an equivalent filter on generated records")
def test_where_records():
    people = from_schema(person_schema, seed=42).take(40)
    expected = people.filter(lambda p: p['department'] == 'eng' and p['active']).to.list()
    actual = people.props.where({'department': 'eng', 'active': True}).to.list()
    assert_that(actual == expected, "where should match the hand-written filter")


# find_where() tests

@test("find_where returns the first match")
def test_find_where_basic():
    assert_equal(shapes.props.find_where({'shape': 'circle'}), {'color': 'purple', 'shape': 'circle'})


@test("find_where returns the not-found marker when nothing matches")
def test_find_where_none():
    assert_that(shapes.props.find_where({'shape': 'hexagon'}) is NOT_FOUND, "should be NOT_FOUND")
    assert_that(empty().props.find_where({}) is NOT_FOUND, "empty input never matches")


# pluck() tests

@test("pluck reads one property per element")
def test_pluck_basic():
    assert_equal(shapes.props.pluck('color').to.list(), ['purple', 'red', 'blue', 'green'])


@test("pluck gives none for missing properties")
def test_pluck_missing():
    assert_equal(P([{'a': 1}, {'b': 2}]).props.pluck('a').to.list(), [1, None])
    assert_equal(P([Point(1, 2), 'text']).props.pluck('y').to.list(), [2, None])


if __name__ == "__main__":
    suite.main(title="underfold property matching test suite")
