import pytest

from pushswap.stacks import Stacks, index_values, is_sorted


@pytest.mark.parametrize("values", [[], [1], [1, 2, 3], [1, 1, 2], [-5, 0, 5]])
def test_is_sorted_true(values):
    assert is_sorted(values) is True


@pytest.mark.parametrize("values", [[2, 1], [1, 3, 2], [3, 2, 1]])
def test_is_sorted_false(values):
    assert is_sorted(values) is False


def test_index_values_is_permutation_preserving_order():
    values = [40, -3, 17, 8, 1000]
    ranks = index_values(values)
    assert sorted(ranks) == list(range(len(values)))
    for i, vi in enumerate(values):
        for j, vj in enumerate(values):
            assert (vi < vj) == (ranks[i] < ranks[j])


def test_index_values_example():
    assert index_values([3, -1, 7]) == [1, 0, 2]


def test_index_values_ties_by_position():
    assert index_values([5, 5]) == [0, 1]


def test_stacks_index_mapping():
    s = Stacks([30, 10, 20])
    assert [s.index[v] for v in (10, 20, 30)] == [0, 1, 2]


def test_sa_swaps_top_two():
    s = Stacks([1, 2, 3])
    s.sa()
    assert list(s.a) == [2, 1, 3]
    assert s.operations == ["sa"]


def test_sa_on_single_element_still_recorded():
    s = Stacks([1])
    s.sa()
    assert list(s.a) == [1]
    assert s.operations == ["sa"]


def test_pb_and_pa_move_tops():
    s = Stacks([1, 2, 3])
    s.pb()
    s.pb()
    assert list(s.a) == [3]
    assert list(s.b) == [2, 1]
    s.pa()
    assert list(s.a) == [2, 3]
    assert list(s.b) == [1]
    assert s.operations == ["pb", "pb", "pa"]


def test_push_from_empty_is_silent():
    s = Stacks([])
    s.pb()
    s.pa()
    assert s.operations == []
    assert list(s.a) == [] and list(s.b) == []


def test_ra_and_rra_are_inverse():
    s = Stacks([1, 2, 3, 4])
    s.ra()
    assert list(s.a) == [2, 3, 4, 1]
    s.rra()
    assert list(s.a) == [1, 2, 3, 4]
    assert s.operations == ["ra", "rra"]


def test_rra_moves_last_to_top():
    s = Stacks([1, 2, 3])
    s.rra()
    assert list(s.a) == [3, 1, 2]


def test_double_operations_act_on_both():
    s = Stacks([1, 2, 3, 4])
    s.pb()
    s.pb()
    s.ss()
    assert list(s.a) == [4, 3]
    assert list(s.b) == [1, 2]
    s.rr()
    assert list(s.a) == [3, 4]
    assert list(s.b) == [2, 1]
    s.rrr()
    assert list(s.a) == [4, 3]
    assert list(s.b) == [1, 2]
    assert s.operations == ["pb", "pb", "ss", "rr", "rrr"]


def test_b_only_operations():
    s = Stacks([1, 2, 3])
    s.pb()
    s.pb()
    s.pb()
    s.sb()
    assert list(s.b) == [2, 3, 1]
    s.rb()
    assert list(s.b) == [3, 1, 2]
    s.rrb()
    assert list(s.b) == [2, 3, 1]
    assert list(s.a) == []


def test_emit_receives_each_operation():
    seen = []
    s = Stacks([2, 1], emit=seen.append)
    s.sa()
    s.pb()
    s.pa()
    s.pa()
    assert seen == ["sa", "pb", "pa"]
    assert seen == s.operations
    assert list(s.a) == [1, 2]


def test_operations_preserve_contents():
    values = [5, 3, 9, 1, 7]
    s = Stacks(values)
    for op in (s.pb, s.ra, s.pb, s.rr, s.ss, s.rrr, s.pa, s.rrb, s.sb):
        op()
    assert sorted(list(s.a) + list(s.b)) == sorted(values)