from hypothesis import given
from hypothesis.strategies import builds, integers, sampled_from, sets

from infset import InfSet, Kind

# a small range so that generated sets actually overlap
values = integers(-20, 20)
inf_sets = builds(InfSet, sampled_from(Kind), sets(values))


@given(inf_sets)
def test_clear_yields_empty_union(s):
    s.clear()
    assert s.is_empty()
    assert s.is_union()
    assert s == InfSet.empty()


@given(sets(values), values)
def test_complement_duality(xs, v):
    assert InfSet.from_elements(xs).contains(v) != InfSet.from_complement(xs).contains(v)


@given(inf_sets, inf_sets)
def test_de_morgan(a, b):
    assert a & b == ~(~a | ~b)
    assert a | b == ~(~a & ~b)


@given(inf_sets, inf_sets)
def test_commutative(a, b):
    assert a | b == b | a
    assert a & b == b & a


@given(inf_sets)
def test_absorption(a):
    assert a | InfSet.empty() == a
    assert a & InfSet.universal() == a


@given(inf_sets, values)
def test_insert_makes_member(s, v):
    s.insert(v)
    assert s.contains(v)


@given(inf_sets, values)
def test_discard_removes_member(s, v):
    s.discard(v)
    assert v not in s


@given(inf_sets, inf_sets, values)
def test_algebra_agrees_with_membership(a, b, v):
    assert ((a | b).contains(v)) == (a.contains(v) or b.contains(v))
    assert ((a & b).contains(v)) == (a.contains(v) and b.contains(v))


@given(inf_sets, inf_sets)
def test_in_place_matches_allocating(a, b):
    expected_or, expected_and = a | b, a & b
    x, y = a.copy(), a.copy()
    x |= b
    y &= b
    assert x == expected_or
    assert y == expected_and


@given(inf_sets, inf_sets)
def test_operands_untouched(a, b):
    a_before, b_before = a.copy(), b.copy()
    a | b
    a & b
    x = a.copy()
    x |= b
    x &= b
    assert a == a_before
    assert b == b_before


@given(inf_sets, inf_sets)
def test_results_never_alias_operands(a, b):
    for result in (a | b, a & b, ~a):
        assert result.storage is not a.storage
        assert result.storage is not b.storage


@given(inf_sets, inf_sets, values)
def test_disjoint_means_no_shared_member(a, b, v):
    if a.is_disjoint(b):
        assert not (a.contains(v) and b.contains(v))
    assert a.is_disjoint(b) == b.is_disjoint(a)


@given(inf_sets, inf_sets, values)
def test_subset_means_membership_implies(a, b, v):
    if a.is_subset(b) and a.contains(v):
        assert b.contains(v)
    assert a.is_subset(b) == b.is_superset(a)


@given(inf_sets, inf_sets)
def test_subset_agrees_with_intersection(a, b):
    assert a.is_subset(b) == (a & b == a)


@given(inf_sets, inf_sets)
def test_structural_order_is_total(a, b):
    assert (a < b) + (a == b) + (a > b) == 1
