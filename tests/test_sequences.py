from drills.lessons.sequences import (
    array_and_vec,
    middle_slice,
    second_element,
    vec_loop,
    vec_map,
)

EVENS = [2, 4, 6, 8, 10]
DOUBLED = [4, 8, 12, 16, 20]


def test_array_and_vec_similarity():
    array, vec = array_and_vec()
    assert list(array) == vec
    assert vec == [10, 20, 30, 40]


def test_vec_loop():
    assert vec_loop(list(EVENS)) == DOUBLED


def test_vec_loop_mutates_in_place():
    values = list(EVENS)
    vec_loop(values)
    assert values == DOUBLED


def test_vec_map():
    source = list(EVENS)
    assert vec_map(source) == DOUBLED
    assert source == EVENS


def test_slice_out_of_array():
    assert list(middle_slice([1, 2, 3, 4, 5])) == [2, 3, 4]


def test_indexing_tuple():
    assert second_element((1, 2, 3)) == 2