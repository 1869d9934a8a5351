import suite
from underfold import P, Sequence, from_range, empty, EmptySequenceError

test = suite.test
assert_that = suite.assert_that
assert_equal = suite.assert_equal
assert_raises = suite.assert_raises

# helper data
numbers = P(range(1, 11))  # 1 through 10
words = P(['apple', 'banana', 'cherry', 'date', 'elderberry'])


# fold() tests

@test("fold with an initial value adds it to the total")
def test_fold_with_initial():
    assert_equal(P([1, 2, 3]).fold(lambda acc, x: acc + x, 4), 10, "4 + 1 + 2 + 3")


@test("fold without an initial value seeds from the first element")
def test_fold_seeded():
    assert_equal(P([1, 2, 3]).fold(lambda acc, x: acc + x), 6, "1 + 2 + 3")
    assert_equal(P([7]).fold(lambda acc, x: acc + x), 7, "single element is returned untouched")


@test("fold walks left to right, each element once")
def test_fold_order():
    seen = []

    def step(acc, x):
        seen.append(x)
        return acc + x

    assert_equal(words.fold(step, ''), 'applebananacherrydateelderberry')
    assert_equal(seen, ['apple', 'banana', 'cherry', 'date', 'elderberry'], "each element visited once in order")


@test("fold of an empty sequence returns the initial value")
def test_fold_empty_with_initial():
    assert_equal(empty().fold(lambda acc, x: acc + x, 'init'), 'init')
    assert_that(empty().fold(lambda acc, x: x, None) is None, "none is a legal initial value")


@test("fold of an empty sequence without initial raises")
def test_fold_empty_without_initial():
    error = assert_raises(EmptySequenceError, empty().fold, lambda acc, x: acc + x)
    assert_that(isinstance(error, ValueError), "empty sequence error should also be a value error")


@test("fold keeps a flat stack on long sequences")
def test_fold_long_sequence():
    count = 100_000
    total = from_range(0, count).fold(lambda acc, x: acc + x, 0)
    assert_equal(total, count * (count - 1) // 2)
    assert_equal(len(from_range(0, count).map(lambda x: x + 1)), count)


@test("fold leaves the initial value alone")
def test_fold_initial_untouched():
    seed = ()
    result = P([1, 2]).fold(lambda acc, x: acc + (x,), seed)
    assert_equal(result, (1, 2))
    assert_equal(seed, (), "seed should not change")


# reverse() tests

@test("reverse inverts order")
def test_reverse_basic():
    assert_equal(P([1, 2, 3]).reverse().to.list(), [3, 2, 1])
    assert_equal(numbers.reverse().reverse(), numbers, "reversing twice restores the sequence")
    assert_that(empty().reverse().is_empty, "reverse of empty is empty")


# map() tests

@test("map transforms elements in order")
def test_map_basic():
    squares = numbers.map(lambda x: x * x).to.list()
    assert_equal(squares, [1, 4, 9, 16, 25, 36, 49, 64, 81, 100])


@test("map preserves length and leaves the source alone")
def test_map_length():
    lengths = words.map(len)
    assert_equal(len(lengths), len(words))
    assert_equal(lengths.to.list(), [5, 6, 6, 4, 10])
    assert_equal(words.to.list(), ['apple', 'banana', 'cherry', 'date', 'elderberry'], "source unchanged")
    assert_that(empty().map(lambda x: x * 2).is_empty, "map of empty is empty")


# filter() / reject() tests

@test("filter keeps matching elements")
def test_filter_basic():
    assert_equal(numbers.filter(lambda x: x % 2 == 0).to.list(), [2, 4, 6, 8, 10])
    assert_equal(numbers.filter(lambda x: x > 100).to.list(), [], "no matches gives an empty sequence")


@test("reject drops matching elements")
def test_reject_basic():
    assert_equal(P([1, 2, 3, 4, 5, 6]).reject(lambda x: x % 2 == 0).to.list(), [1, 3, 5])


@test("filter and reject split the sequence between them")
def test_filter_reject_complement():
    predicate = lambda w: 'e' in w
    kept = words.filter(predicate).to.list()
    dropped = words.reject(predicate).to.list()
    assert_equal(sorted(kept + dropped), sorted(words.to.list()), "together they hold every element")
    assert_that(not set(kept) & set(dropped), "no element lands on both sides")


# sequence structure tests

@test("head and tail expose the linked cells")
def test_head_tail():
    s = P([1, 2, 3])
    assert_equal(s.head, 1)
    assert_equal(s.tail.to.list(), [2, 3])
    assert_that(s.tail._get_cells() is s._get_cells().tail, "tail shares cells with the source")
    assert_raises(EmptySequenceError, lambda: empty().head)
    assert_raises(EmptySequenceError, lambda: empty().tail)


@test("prepend builds a new sequence and keeps the old one")
def test_prepend():
    s = P([2, 3])
    t = s.prepend(1)
    assert_equal(t.to.list(), [1, 2, 3])
    assert_equal(s.to.list(), [2, 3], "original keeps its elements")
    assert_that(t.tail._get_cells() is s._get_cells(), "new sequence shares the old cells")


@test("sequences compare and hash by value")
def test_value_semantics():
    assert_equal(P([1, 2, 3]), P((1, 2, 3)))
    assert_that(P([1, 2]) != P([1, 2, 3]), "different lengths are not equal")
    assert_that(P([1]) != [1], "a sequence does not equal a list")
    assert_equal(hash(P([1, 2])), hash(P([1, 2])))
    assert_equal(len({P([1, 2]), P([1, 2]), P([2, 1])}), 2)


@test("len, bool and repr")
def test_dunders():
    assert_equal(len(numbers), 10)
    assert_that(bool(numbers) and not bool(empty()), "truthiness follows emptiness")
    assert_equal(repr(P([1, 2, 3])), "Sequence([1, 2, 3])")
    assert_that(isinstance(numbers, Sequence), "factories build sequences")
    assert_raises(TypeError, Sequence, [1, 2])


@test("sequences refuse attribute writes")
def test_immutable_attributes():
    s = P([1, 2, 3])

    def overwrite(name):
        setattr(s, name, None)

    for name in ('to', 'group', 'props', '_cells', 'extra'):
        assert_raises(AttributeError, overwrite, name, message=f"setting '{name}'")
    assert_raises(AttributeError, delattr, s, '_cells')
    assert_equal(len(s), 3, "sequence still works after rejected writes")
    assert_equal(s.to.list(), [1, 2, 3])


if __name__ == "__main__":
    suite.main(title="underfold core operations test suite")
