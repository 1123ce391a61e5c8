import pytest

from arraykit.searching import find_peak, search_rotated

BASE = [2, 5, 8, 11, 14, 17, 20]


def _rotations(items):
    return [items[k:] + items[:k] for k in range(len(items))]


@pytest.mark.parametrize("rotated", _rotations(BASE))
def test_finds_every_element_of_every_rotation(rotated):
    for value in rotated:
        assert search_rotated(rotated, value) == rotated.index(value)


@pytest.mark.parametrize("rotated", _rotations(BASE))
def test_missing_target(rotated):
    assert search_rotated(rotated, 9) == -1
    assert search_rotated(rotated, 100) == -1


def test_empty_sequence():
    assert search_rotated([], 3) == -1


def _assert_is_peak(values, result):
    positions = [i for i, v in enumerate(values) if v == result]
    assert any(
        (i == 0 or values[i - 1] < values[i])
        and (i == len(values) - 1 or values[i + 1] < values[i])
        for i in positions
    )


@pytest.mark.parametrize(
    "values",
    [[1, 3, 2], [5, 4, 3, 2, 1], [1, 2, 3, 1, 5, 6, 4], [10, 20, 15, 2, 23, 90, 67]],
)
def test_result_is_a_peak(values):
    _assert_is_peak(values, find_peak(values))


def test_increasing_sequence_peaks_at_end():
    values = [1, 2, 3, 4, 5]
    assert find_peak(values) == values[-1]


def test_single_element():
    assert find_peak([7]) == 7


def test_peak_behind_plateau():
    assert find_peak([1, 3, 1, 1, 1, 1, 1]) == 3


@pytest.mark.parametrize("values", [[], [4, 4, 4]])
def test_no_peak(values):
    with pytest.raises(ValueError):
        find_peak(values)