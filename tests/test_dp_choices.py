import pytest

from algonotes.dp_choices import (
    can_partition,
    climb_stairs,
    coin_change,
    coin_change_ways,
    max_profit,
    min_cost_climbing_stairs,
    rob,
    rob_circular,
    target_sum_ways,
    unique_paths,
)


def test_climb_stairs_base_cases():
    assert climb_stairs(0) == 1
    assert climb_stairs(1) == 1


@pytest.mark.parametrize("n", range(2, 30))
def test_climb_stairs_recurrence(n):
    assert climb_stairs(n) == climb_stairs(n - 1) + climb_stairs(n - 2)


def test_climb_stairs_negative_raises():
    with pytest.raises(ValueError):
        climb_stairs(-1)


def test_coin_change_zero_amount():
    assert coin_change([3, 5], 0) == 0


def test_coin_change_unit_coin_uses_amount_coins():
    assert coin_change([1], 17) == 17


def test_coin_change_impossible():
    assert coin_change([2], 3) == -1


def test_coin_change_exact_single_coin():
    assert coin_change([1, 2, 5], 5) == 1


def test_coin_change_never_worse_with_more_coins():
    for amount in range(40):
        assert coin_change([1, 3, 4], amount) <= coin_change([1, 3], amount)


@pytest.mark.parametrize("bad", [[], [0, 1], [-2]])
def test_coin_change_bad_coins(bad):
    with pytest.raises(ValueError):
        coin_change(bad, 5)


def test_coin_change_ways_basics():
    assert coin_change_ways(0, [2, 3]) == 1
    assert coin_change_ways(9, [1]) == 1
    assert coin_change_ways(7, [2]) == 0


def test_coin_change_ways_caps_at_int_max():
    assert coin_change_ways(500, list(range(1, 501))) == 2147483647


def test_coin_change_ways_order_independent():
    assert coin_change_ways(30, [1, 2, 5, 10]) == coin_change_ways(30, [10, 5, 2, 1])


def test_coin_change_ways_bad_coins():
    with pytest.raises(ValueError):
        coin_change_ways(5, [])


def test_rob_small_inputs():
    assert rob([]) == 0
    assert rob([7]) == 7
    assert rob([3, 8]) == 8


def test_rob_worked_example():
    assert rob([2, 7, 9, 3, 1]) == 12


def test_rob_at_least_largest_value():
    nums = [4, 1, 2, 9, 3, 8, 6]
    assert rob(nums) >= max(nums)
    assert rob(nums) <= sum(nums)


def test_rob_circular_small_inputs():
    assert rob_circular([]) == 0
    assert rob_circular([5]) == 5
    assert rob_circular([4, 9]) == 9


def test_rob_circular_worked_example():
    assert rob_circular([2, 3, 2]) == 3


def test_rob_circular_not_above_line():
    for nums in ([1, 2, 3, 1], [5, 1, 1, 5], [6, 2, 9, 4, 7, 3]):
        assert rob_circular(nums) <= rob(nums)
        assert rob_circular(nums) >= rob(nums[1:])


def test_min_cost_two_steps():
    assert min_cost_climbing_stairs([11, 4]) == 4


def test_min_cost_worked_example():
    assert min_cost_climbing_stairs([10, 15, 20]) == 15


def test_min_cost_zero_costs():
    assert min_cost_climbing_stairs([0] * 10) == 0


@pytest.mark.parametrize("cost", [[], [3]])
def test_min_cost_too_short(cost):
    with pytest.raises(ValueError):
        min_cost_climbing_stairs(cost)


def test_can_partition_cases():
    assert can_partition([]) is True
    assert can_partition([6, 6]) is True
    assert can_partition([1, 2, 4]) is False
    assert can_partition([1, 2, 3]) is True
    assert can_partition([2, 4]) is False


def test_can_partition_negative_raises():
    with pytest.raises(ValueError):
        can_partition([1, -1])


def test_max_profit_decreasing_is_zero():
    assert max_profit([9, 7, 4, 1]) == 0


def test_max_profit_increasing_spans_whole_range():
    prices = [2, 5, 8, 13]
    assert max_profit(prices) == prices[-1] - prices[0]


def test_max_profit_single_price():
    assert max_profit([4]) == 0


def test_max_profit_empty_raises():
    with pytest.raises(ValueError):
        max_profit([])


def test_target_sum_all_plus():
    assert target_sum_ways([1] * 6, 6) == 1


def test_target_sum_zero_value_doubles():
    assert target_sum_ways([0], 0) == 2


def test_target_sum_out_of_reach():
    assert target_sum_ways([1, 2, 3], 7) == 0


def test_target_sum_empty():
    assert target_sum_ways([], 0) == 1
    assert target_sum_ways([], 3) == 0


def test_target_sum_symmetry_and_total():
    nums = [1, 2, 2, 3, 5]
    span = sum(nums)
    counts = [target_sum_ways(nums, t) for t in range(-span, span + 1)]
    assert sum(counts) == 2 ** len(nums)
    assert counts == counts[::-1]


def test_unique_paths_single_row_or_column():
    assert unique_paths(1, 9) == 1
    assert unique_paths(9, 1) == 1


@pytest.mark.parametrize("m,n", [(2, 2), (3, 7), (5, 4), (10, 10)])
def test_unique_paths_recurrence_and_symmetry(m, n):
    assert unique_paths(m, n) == unique_paths(m - 1, n) + unique_paths(m, n - 1)
    assert unique_paths(m, n) == unique_paths(n, m)


@pytest.mark.parametrize("m,n", [(0, 3), (3, 0), (-1, 2)])
def test_unique_paths_bad_dimensions(m, n):
    with pytest.raises(ValueError):
        unique_paths(m, n)