"""Classic one-pass algorithms over integer sequences."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence
from itertools import groupby


def max_profit(prices: Iterable[int]) -> int:
    """Best profit from a single buy followed by a single sell; 0 if none is possible."""
    lowest: int | None = None
    profit = 0
    for price in prices:
        lowest = price if lowest is None else min(lowest, price)
        profit = max(profit, price - lowest)
    return profit


def find_missing_number(values: Sequence[int], n: int) -> int:
    """Return the one number from 1..n that is absent from ``values``."""
    if len(values) != n - 1:
        raise ValueError(f"expected {n - 1} values for n={n}, got {len(values)}")
    return n * (n + 1) // 2 - sum(values)


def max_subarray_sum(nums: Sequence[int]) -> int:
    """Largest sum of a non-empty contiguous run of ``nums`` (Kadane)."""
    if not nums:
        raise ValueError("max_subarray_sum() needs at least one number")
    best = current = nums[0]
    for value in nums[1:]:
        current = max(value, current + value)
        best = max(best, current)
    return best


def majority_element(nums: Iterable[int]) -> int:
    """Candidate from Moore's voting; the majority element when one exists."""
    count = 0
    candidate: int | None = None
    for num in nums:
        if count == 0:
            candidate = num
        count += 1 if num == candidate else -1
    if candidate is None:
        raise ValueError("majority_element() needs at least one number")
    return candidate


def max_pair_product(values: Sequence[int]) -> int:
    """Largest product of two distinct elements, allowing two negatives."""
    if len(values) < 2:
        raise ValueError("max_pair_product() needs at least two numbers")
    first, second = heapq.nlargest(2, values)
    low, next_low = heapq.nsmallest(2, values)
    return max(first * second, low * next_low)


def move_zeros(nums: Iterable[int]) -> list[int]:
    """Return the numbers with every zero moved to the end, others kept in order."""
    items = list(nums)
    non_zero = [x for x in items if x != 0]
    return non_zero + [0] * (len(items) - len(non_zero))


def remove_duplicates(values: Iterable[int]) -> list[int]:
    """Collapse runs of equal neighbours in a sorted sequence."""
    return [key for key, _ in groupby(values)]


def rotate_right(nums: Sequence[int], k: int) -> list[int]:
    """Return ``nums`` rotated to the right by ``k`` steps."""
    items = list(nums)
    if not items:
        return items
    k %= len(items)
    return items[len(items) - k:] + items[: len(items) - k]


def two_sum(nums: Iterable[int], target: int) -> tuple[int, int] | None:
    """Indices of the first pair adding up to ``target``, or None."""
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        remainder = target - value
        if remainder in seen:
            return seen[remainder], index
        seen[value] = index
    return None