import pytest

from hivemimic.utils.slice import (
    concat,
    index_of,
    map_list,
    merge_sort,
    reduce,
    remove,
    sum_of,
)


def test_reduce_collects_in_order():
    assert reduce([1, 2, 3], lambda acc, v: acc + [v], []) == [1, 2, 3]


def test_reduce_empty_returns_initial():
    assert reduce([], lambda acc, v: acc + v, "start") == "start"


def test_sum_of_integers():
    assert sum_of([1, 2, 3, 4]) == 10


def test_sum_of_empty_is_zero():
    assert sum_of([]) == 0


def test_sum_of_matches_reduce():
    values = [0.5, 1.25, 2.0]
    assert sum_of(values) == reduce(values, lambda a, b: a + b, 0)


def test_map_list_preserves_length_and_order():
    result = map_list(["a", "bb", "ccc"], len)
    assert result == [1, 2, 3]


def test_index_of_found_and_missing():
    items = ["x", "y", "z", "y"]
    assert index_of(items, "y") == 1
    assert index_of(items, "q") == -1


def test_index_of_uses_deep_equality():
    items = [{"a": [1]}, {"b": [2]}]
    assert index_of(items, {"b": [2]}) == 1


def test_concat_does_not_mutate_inputs():
    first, second = [1, 2], [3]
    combined = concat(first, second)
    assert combined == first + second
    assert first == [1, 2]
    assert second == [3]


def test_remove_first_occurrence_only():
    items = [1, 2, 1]
    result = remove(items, 1)
    assert result == items[1:]
    assert items == [1, 2, 1]


def test_remove_missing_returns_same_list():
    items = [1, 2, 3]
    assert remove(items, 9) is items


@pytest.mark.parametrize(
    "values",
    [
        [],
        [1],
        [2, 1],
        [0, 2, 4, 1, 3, 5],
        [5, 4, 3, 2, 1, 0],
        [3, 3, 1, 1, 2, 2],
        ["pear", "apple", "fig"],
        [1.5, -2.0, 0.0, 7.25],
    ],
)
def test_merge_sort_sorts_in_place(values):
    items = list(values)
    assert merge_sort(items) is None
    assert items == sorted(values)


def test_merge_sort_keeps_same_list_object():
    items = [3, 1, 2]
    alias = items
    merge_sort(items)
    assert alias is items
    assert alias == sorted([3, 1, 2])