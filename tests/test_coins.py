import pytest

from algokit.coins import count_change_ways, max_cuts, min_coins


def test_min_coins_source_example():
    assert min_coins([1, 2, 4], 6) == 2


def test_count_change_ways_source_example():
    assert count_change_ways([1, 5, 10, 25], 10) == 4


def test_count_change_ways_second_source_example():
    assert count_change_ways([1, 2, 3], 4) == 4


@pytest.mark.parametrize("target", range(0, 15))
def test_min_coins_with_single_unit_coin(target):
    assert min_coins([1], target) == target
    assert count_change_ways([1], target) == count_change_ways([1], 0)


@pytest.mark.parametrize("target", range(0, 20))
def test_min_coins_never_worse_with_more_denominations(target):
    fewer = min_coins([1, 2], target)
    more = min_coins([1, 2, 5], target)
    assert more <= fewer
    assert count_change_ways([1, 2, 5], target) >= count_change_ways([1, 2], target)


@pytest.mark.parametrize("target", [1, 3, 5, 7])
def test_unreachable_targets(target):
    assert min_coins([2, 4], target) is None
    assert count_change_ways([2, 4], target) == count_change_ways([], 1)


def test_order_of_denominations_irrelevant():
    for target in range(30):
        assert min_coins([1, 5, 10, 25], target) == min_coins([25, 10, 1, 5], target)
        assert count_change_ways([1, 5, 10, 25], target) == count_change_ways([25, 10, 1, 5], target)


@pytest.mark.parametrize("func", [min_coins, count_change_ways])
def test_invalid_arguments(func):
    with pytest.raises(ValueError):
        func([1, 2], -1)
    with pytest.raises(ValueError):
        func([0, 2], 4)


@pytest.mark.parametrize("length", range(0, 20))
def test_max_cuts_with_unit_piece(length):
    assert max_cuts(length, 1, 3, 4) == length


@pytest.mark.parametrize("count", range(0, 8))
def test_max_cuts_same_piece(count):
    assert max_cuts(3 * count, 3, 3, 3) == count
    assert max_cuts(3 * count, 3, 5, 7) >= count


def test_max_cuts_impossible():
    assert max_cuts(5, 2, 4, 6) == max_cuts(0, 2, 4, 6)


def test_max_cuts_invalid():
    with pytest.raises(ValueError):
        max_cuts(5, 0, 2, 3)
    with pytest.raises(ValueError):
        max_cuts(-1, 1, 2, 3)