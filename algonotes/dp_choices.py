"""Dynamic programming over take-or-skip choices: stairs, coins, robbers, subsets."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from math import comb

INT_MAX = 2**31 - 1


def climb_stairs(n: int) -> int:
    """Return how many ways to climb ``n`` steps taking one or two at a time."""
    if n < 0:
        raise ValueError("number of steps must not be negative")
    current, previous = 1, 1
    for _ in range(n - 1):
        current, previous = current + previous, current
    return current


def _check_coins(coins: Sequence[int]) -> None:
    if not coins:
        raise ValueError("at least one coin denomination is required")
    if any(coin <= 0 for coin in coins):
        raise ValueError("coin denominations must be positive")


def coin_change(coins: Sequence[int], amount: int) -> int:
    """Return the fewest coins adding up to ``amount``, or -1 if no mix does."""
    _check_coins(coins)
    if amount < 0:
        raise ValueError("amount must not be negative")
    unreachable = float("inf")
    fewest: list[float] = [0] + [unreachable] * amount
    for coin in coins:
        for total in range(coin, amount + 1):
            fewest[total] = min(fewest[total], fewest[total - coin] + 1)
    result = fewest[amount]
    return -1 if result == unreachable else int(result)


def coin_change_ways(amount: int, coins: Sequence[int]) -> int:
    """Return how many coin combinations make ``amount``, capped at 2**31 - 1."""
    _check_coins(coins)
    if amount < 0:
        raise ValueError("amount must not be negative")
    ways = [1] + [0] * amount
    for coin in coins:
        for total in range(coin, amount + 1):
            ways[total] = min(ways[total] + ways[total - coin], INT_MAX)
    return ways[amount]


def rob(nums: Sequence[int]) -> int:
    """Return the largest sum of values with no two adjacent ones taken."""
    best, before = 0, 0
    for value in nums:
        best, before = max(value + before, best), best
    return best


def _rob_line(values: Sequence[int]) -> int:
    best, before = values[0], 0
    for value in values[1:]:
        best, before = max(value + before, best), best
    return best


def rob_circular(nums: Sequence[int]) -> int:
    """Return the best non-adjacent sum when the first and last values are neighbours."""
    if not nums:
        return 0
    if len(nums) == 1:
        return nums[0]
    if len(nums) == 2:
        return max(nums)
    return max(_rob_line(nums[1:]), _rob_line(nums[:-1]))


def min_cost_climbing_stairs(cost: Sequence[int]) -> int:
    """Return the cheapest way past the top, starting on step 0 or 1."""
    if len(cost) < 2:
        raise ValueError("at least two steps are required")
    before, last = cost[0], cost[1]
    for step in cost[2:]:
        before, last = last, step + min(before, last)
    return min(before, last)


def can_partition(nums: Sequence[int]) -> bool:
    """Return True if the values split into two groups of equal sum."""
    if any(value < 0 for value in nums):
        raise ValueError("values must not be negative")
    total = sum(nums)
    if total % 2:
        return False
    target = total // 2
    mask = (1 << (target + 1)) - 1
    reachable = 1
    for value in nums:
        reachable = (reachable | (reachable << value)) & mask
    return bool(reachable >> target & 1)


def max_profit(prices: Sequence[int]) -> int:
    """Return the best gain from one buy followed by one later sell, or 0."""
    if not prices:
        raise ValueError("at least one price is required")
    best = 0
    lowest = prices[0]
    for price in prices[1:]:
        best = max(best, price - lowest)
        lowest = min(lowest, price)
    return best


def target_sum_ways(nums: Sequence[int], target: int) -> int:
    """Return how many ways of signing each value with + or - sum to ``target``."""
    sums = Counter({0: 1})
    for value in nums:
        following: Counter[int] = Counter()
        for total, count in sums.items():
            following[total + value] += count
            following[total - value] += count
        sums = following
    return sums[target]


def unique_paths(m: int, n: int) -> int:
    """Return how many right/down paths cross an ``m`` by ``n`` grid."""
    if m < 1 or n < 1:
        raise ValueError("grid dimensions must be positive")
    return comb(m + n - 2, m - 1)