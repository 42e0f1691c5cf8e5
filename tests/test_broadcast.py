import pytest

from couponlegs.cashflows.broadcast import broadcast


def test_empty_vector_yields_default() -> None:
    assert broadcast([], 0, 1.0) == 1.0
    assert broadcast((), 7, 0.0) == 0.0
    assert broadcast([], 3) is None


@pytest.mark.parametrize("i", [0, 1, 2])
def test_index_within_vector(i: int) -> None:
    values = [100.0, 90.0, 80.0]
    assert broadcast(values, i, -1.0) == values[i]


@pytest.mark.parametrize("i", [3, 4, 50])
def test_short_vector_repeats_last_value(i: int) -> None:
    assert broadcast([100.0, 90.0, 80.0], i, -1.0) == 80.0


def test_single_value_is_flat() -> None:
    assert [broadcast([0.05], i) for i in range(4)] == [0.05] * 4


def test_default_does_not_mask_given_values() -> None:
    # a zero cap is a cap, not a missing one
    assert broadcast([0.0], 2, None) == 0.0
