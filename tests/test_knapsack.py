import pytest

from algolib.knapsack import knapsack


def test_p02():
    assert knapsack(26, [12, 7, 11, 8, 9], [24, 13, 23, 15, 16]) == (51, 26, [2, 3, 4])


def test_p04():
    assert knapsack(
        190, [56, 59, 80, 64, 75, 17], [50, 50, 64, 46, 50, 5]
    ) == (150, 190, [1, 2, 5])


def test_p01():
    assert knapsack(
        165,
        [23, 31, 29, 44, 53, 38, 63, 85, 89, 82],
        [92, 57, 49, 68, 60, 43, 67, 84, 87, 72],
    ) == (309, 165, [1, 2, 3, 4, 6])


def test_p06():
    assert knapsack(
        170,
        [41, 50, 49, 59, 55, 57, 60],
        [442, 525, 511, 593, 546, 564, 617],
    ) == (1735, 169, [2, 4, 7])


def test_p07():
    assert knapsack(
        750,
        [70, 73, 77, 80, 82, 87, 90, 94, 98, 106, 110, 113, 115, 118, 120],
        [135, 139, 149, 150, 156, 163, 173, 184, 192, 201, 210, 214, 221, 229, 240],
    ) == (1458, 749, [1, 3, 5, 7, 8, 9, 14, 15])


def test_no_items():
    assert knapsack(10, [], []) == (0, 0, [])


def test_mismatched_lengths_raise():
    with pytest.raises(ValueError):
        knapsack(10, [1, 2], [3])