import logging

import suite
from dgen import from_schema
from seqy import Chain, chain, seqy, S, equals_not_strict

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises

# --- test data & helpers ---
person_schema = {
    'name': 'first_name',
    'salary': ('pyint', {'min_value': 30000, 'max_value': 150000}),
    'department': {'_qen_provider': 'choice', 'from': ['eng', 'sales', 'hr']},
    'active': {'_qen_provider': 'choice', 'from': [True, False]}
}

int_cmp = lambda l, r: l - r
add = lambda memo, cur, _i, _s: memo + cur
minus_two = lambda cur, _i, _s: cur - 2
is_even = lambda cur, _i, _s: cur % 2 == 0
above_seven = lambda cur, _i, _s: cur > 7


def fresh():
    return [2, 4, 6, 7, 8, 10, 120, 10, 2, 17]


class _ListHandler(logging.Handler):
    def __init__(self):
        super().__init__(level=logging.DEBUG)
        self.records = []

    def emit(self, record):
        self.records.append(record)


# --- entry ---

@test("chain starts with the input as both working sequence and result")
def test_chain_entry():
    data = [1, 2, 3]
    c = chain(data)
    assert_that(isinstance(c, Chain), "chain builds a Chain")
    assert_that(c.mid is data and c.res is data, "mid and res hold the input")
    assert_that(c.value() is data, "value returns the input before any call")


@test("chain treats None as an empty sequence")
def test_chain_none():
    assert_that(chain(None).value() == [], "None becomes []")
    assert_that(chain().value() == [], "no argument becomes []")
    assert_that(Chain(None).map(minus_two).value() == [], "operations on an empty chain stay empty")


@test("chain factory aliases build the same thing")
def test_chain_aliases():
    assert_that(seqy([3, 1]).sort_by(int_cmp).value() == [1, 3], "seqy alias")
    assert_that(S([3, 1]).sort_by(int_cmp).value() == [1, 3], "S alias")


# --- sequence methods ---

@test("sequence methods thread the working sequence")
def test_chain_sequence_methods():
    c = chain(fresh()).filter(is_even).map(minus_two)
    assert_that(c.value() == [0, 2, 4, 6, 8, 118, 8, 0], "filter then map")
    assert_that(c.res is c.mid, "res and mid are the same list after a sequence method")

    assert_that(chain(fresh()).reject(is_even).value() == [7, 17], "reject")
    assert_that(chain(fresh()).uniq(int_cmp).value() == [2, 4, 6, 7, 8, 10, 120, 17], "uniq")
    assert_that(chain([2, 4, 6, 9, 9, 7]).difference([2, 4, 8], int_cmp).value() == [6, 9, 9, 7], "difference")
    assert_that(chain([2, 4, 6, 9, 9, 7]).intersection([9, 2, 2], int_cmp).value() == [2, 9], "intersection")
    assert_that(chain([2, 4]).union([4, 5], int_cmp).value() == [2, 4, 5], "union")
    assert_that(chain([9, 1, 9]).without(9, int_cmp).value() == [1], "without")


@test("positional methods chain together")
def test_chain_positional():
    result = chain([1, 2]).insert(0, 0).concat([3]).remove(99).value()
    assert_that(result == [0, 1, 2], "insert at front, append, drop the last")


@test("each keeps the chain state")
def test_chain_each():
    seen = []
    c = chain([1, 2, 3])
    before = c.value()
    c.each(lambda cur, i, s: seen.append((cur, i)))
    assert_that(seen == [(1, 0), (2, 1), (3, 2)], "action ran on every element")
    assert_that(c.value() is before and c.mid is before, "state is unchanged")


@test("sort_by in a chain sorts the caller's list")
def test_chain_sort_aliasing():
    data = [3, 1, 2]
    result = chain(data).sort_by(int_cmp).value()
    assert_that(result is data, "sorting works on the same list")
    assert_that(data == [1, 2, 3], "caller's list is sorted")


@test("shuffle and reverse in a chain work on copies")
def test_chain_shuffle_reverse_copies():
    data = fresh()
    reversed_result = chain(data).reverse().value()
    assert_that(reversed_result == [17, 2, 10, 120, 10, 8, 7, 6, 4, 2], "reversed")
    assert_that(data == fresh(), "caller's list untouched by reverse")

    shuffled = chain(data).shuffle().value()
    assert_that(shuffled is not data and data == fresh(), "caller's list untouched by shuffle")
    assert_that(equals_not_strict(shuffled, data, int_cmp), "shuffle keeps the elements")


# --- scalar methods ---

@test("scalar methods store the result and clear the working sequence")
def test_chain_scalar_methods():
    c = chain(fresh()).reduce(add, 0)
    assert_that(c.value() == 186, "reduce result")
    assert_that(c.mid is None, "working sequence cleared")

    assert_that(chain(fresh()).reduce_right(add).value() == 186, "reduce_right")
    assert_that(chain(fresh()).find(above_seven).value() == 8, "find")
    assert_that(chain(fresh()).find_last(above_seven).value() == 17, "find_last")
    assert_that(chain(fresh()).find_index(above_seven).value() == 4, "find_index")
    assert_that(chain(fresh()).find_last_index(above_seven).value() == 9, "find_last_index")
    assert_that(chain(fresh()).some(above_seven).value() is True, "some")
    assert_that(chain(fresh()).every(above_seven).value() is False, "every")
    assert_that(chain(fresh()).index_of(7, False, int_cmp).value() == 3, "index_of")
    assert_that(chain(fresh()).last_index_of(10, int_cmp).value() == 7, "last_index_of")
    assert_that(chain(fresh()).contains(120, False, int_cmp).value() is True, "contains")
    assert_that(chain([1, 2]).equals_strict([1, 2], int_cmp).value() is True, "equals_strict")
    assert_that(chain([1, 2]).equals_not_strict([2, 1], int_cmp).value() is True, "equals_not_strict")


@test("min and max through a chain")
def test_chain_min_max():
    assert_that(chain([2, 99, -12, 884, 8]).min(int_cmp).value() == -12, "min of a mixed list")
    assert_that(chain([1, 0, -(2 ** 31 - 1), 2 ** 15]).min(int_cmp).value() == -(2 ** 31) + 1, "min near int32")
    assert_that(chain([0]).min(int_cmp).value() == 0, "single element")
    assert_that(chain([]).min(int_cmp).value() == -1, "empty gives -1")
    assert_that(chain(None).min(int_cmp).value() == -1, "missing gives -1")
    assert_that(chain([1, 2]).min(None).value() == -1, "missing comparator gives -1")

    assert_that(chain([433, 39, 92, -12, 2 ** 31]).max(int_cmp).value() == 2 ** 31, "max past int32")
    assert_that(chain([1, 0, -1, 0]).max(int_cmp).value() == 1, "max at the front")
    assert_that(chain([0]).max(int_cmp).value() == 0, "single element")
    assert_that(chain(None).max(None).value() == -1, "all missing gives -1")


@test("count_by and group_by settle the chain on a dict")
def test_chain_grouping():
    parity = lambda cur, _i, _s: 'even' if cur % 2 == 0 else 'odd'
    c = chain(fresh()).count_by(parity)
    assert_that(c.value() == {'even': 8, 'odd': 2}, "count_by result")
    assert_that(c.mid is None, "working sequence cleared")

    grouped = chain([1, 2, 3, 4]).group_by(parity).value()
    assert_that(grouped == {'odd': [1, 3], 'even': [2, 4]}, "group_by result")
    assert_that(chain([]).count_by(parity).value() is None, "nothing counted gives None")


@test("a sequence method after a scalar method sees an empty sequence")
def test_chain_scalar_then_sequence():
    assert_that(chain([3, 1, 2]).min(int_cmp).map(minus_two).value() == [], "map after min is empty")
    assert_that(chain([3, 1, 2]).some(is_even).filter(is_even).value() == [], "filter after some is empty")
    assert_that(chain([1]).max(int_cmp).concat([5]).value() == [], "concat onto a cleared chain drops next")
    assert_that(chain([1, 2]).find(is_even).insert('x', 3).value() == ['x'], "insert starts a new sequence")


@test("value can be read repeatedly")
def test_chain_value_idempotent():
    c = chain(fresh()).filter(is_even)
    first, second = c.value(), c.value()
    assert_that(first is second, "value has no side effects")


# --- aliases ---

@test("alias methods give identical results")
def test_chain_method_aliases():
    pairs = [
        ('map', 'collect', (minus_two,)),
        ('filter', 'select', (is_even,)),
        ('reduce', 'inject', (add, 0)),
        ('reduce', 'foldl', (add, None)),
        ('reduce_right', 'foldr', (add, 0)),
        ('find', 'detect', (above_seven,)),
        ('some', 'any', (above_seven,)),
        ('every', 'all', (lambda cur, _i, _s: cur > 0,)),
        ('uniq', 'unique', (int_cmp,)),
        ('contains', 'includes', (10, False, int_cmp)),
    ]
    for canonical, alias, args in pairs:
        expected = getattr(chain(fresh()), canonical)(*args).value()
        actual = getattr(chain(fresh()), alias)(*args).value()
        assert_that(expected == actual, f"{alias} should match {canonical}")

    seen_each, seen_for_each = [], []
    chain(fresh()).each(lambda cur, i, s: seen_each.append(cur))
    chain(fresh()).for_each(lambda cur, i, s: seen_for_each.append(cur))
    assert_that(seen_each == seen_for_each == fresh(), "for_each should match each")


# --- realistic pipeline ---

@test("chain runs a pipeline over generated records")
def test_chain_records_pipeline():
    people = from_schema(person_schema, seed=21).take(40)
    by_salary = lambda l, r: l['salary'] - r['salary']

    names = (chain(list(people))
             .filter(lambda p, _i, _s: p['active'])
             .sort_by(by_salary)
             .map(lambda p, _i, _s: p['salary'])
             .value())
    expected = sorted(p['salary'] for p in people if p['active'])
    assert_that(names == expected, "active salaries in ascending order")

    top = chain(list(people)).max(by_salary).value()
    assert_that(top['salary'] == max(p['salary'] for p in people), "max record has the top salary")


# --- errors & logging ---

@test("callback errors propagate out of a chain")
def test_chain_error_propagates():
    assert_raises(TypeError, lambda: chain([1, 'a', 2]).sort_by(int_cmp))
    assert_raises(ZeroDivisionError, lambda: chain([0]).map(lambda cur, i, s: 1 / cur))


@test("settling a chain is logged at debug level")
def test_chain_logging():
    handler = _ListHandler()
    chain_logger = logging.getLogger('seqy.chaining')
    previous = chain_logger.level
    chain_logger.addHandler(handler)
    chain_logger.setLevel(logging.DEBUG)
    try:
        chain([1, 2]).min(int_cmp)
    finally:
        chain_logger.removeHandler(handler)
        chain_logger.setLevel(previous)
    assert_that(any('cleared' in r.getMessage() for r in handler.records), "a debug record was emitted")


@test("repr shows both fields")
def test_chain_repr():
    text = repr(chain([1]).some(is_even))
    assert_that(text == "Chain(mid=None, res=False)", f"unexpected repr {text}")


if __name__ == "__main__":
    suite.main(title="seqy chaining test")
