import pytest

from pushswap.sorting import is_sorted


@pytest.mark.parametrize("numbers", [[], [7], [1, 2, 3], [-3, 0, 0, 9]])
def test_non_decreasing_sequences_are_sorted(numbers):
    assert is_sorted(numbers) is True


@pytest.mark.parametrize("numbers", [[2, 1], [1, 3, 2], [0, 0, -1]])
def test_a_single_descent_makes_it_unsorted(numbers):
    assert is_sorted(numbers) is False


def test_sorting_any_list_makes_it_sorted():
    numbers = [5, -2, 9, 0, 3]
    assert is_sorted(numbers) is False
    assert is_sorted(sorted(numbers)) is True


def test_tuples_are_accepted():
    assert is_sorted((1, 2, 2)) is True