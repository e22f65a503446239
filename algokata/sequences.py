"""Searching, counting and area problems over integer sequences."""

from __future__ import annotations

import heapq
from bisect import bisect_left
from typing import Iterable, Sequence


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in a rotated ascending sequence, or -1."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] == target:
            return mid
        if nums[low] <= nums[mid]:
            if nums[low] <= target < nums[mid]:
                high = mid - 1
            else:
                low = mid + 1
        elif nums[mid] < target <= nums[high]:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def jump(nums: Sequence[int]) -> int:
    """Return the fewest jumps from the first to the last position.

    Each value is the longest jump allowed from its position.
    """
    if not nums:
        raise ValueError("nums is empty")
    last = len(nums) - 1
    current = limit = jumps = 0
    while limit < last:
        next_limit = max(i + nums[i] for i in range(current, limit + 1))
        if next_limit <= limit:
            raise ValueError("the last position cannot be reached")
        current = limit + 1
        limit = next_limit
        jumps += 1
    return jumps


def find_duplicate(nums: Sequence[int]) -> int:
    """Return the repeated value among n + 1 values drawn from 1..n."""
    low, high = 0, len(nums) - 1
    while low < high:
        mid = (low + high) // 2
        if sum(1 for value in nums if value <= mid) > mid:
            high = mid
        else:
            low = mid + 1
    return low


def _sort_and_count(values: list[int]) -> tuple[list[int], int]:
    if len(values) < 2:
        return values, 0
    mid = len(values) // 2
    left, left_count = _sort_and_count(values[:mid])
    right, right_count = _sort_and_count(values[mid:])
    count = left_count + right_count
    j = 0
    for value in left:
        while j < len(right) and value > 2 * right[j]:
            j += 1
        count += j
    return list(heapq.merge(left, right)), count


def reverse_pairs(nums: Iterable[int]) -> int:
    """Count index pairs i < j with nums[i] > 2 * nums[j]."""
    _, count = _sort_and_count(list(nums))
    return count


def max_profit(prices: Sequence[int]) -> int:
    """Return the best profit from at most two non-overlapping buy-sell trades."""
    if not prices:
        return 0
    n = len(prices)
    best_before = [0] * n
    lowest = prices[0]
    for i in range(1, n):
        lowest = min(lowest, prices[i])
        best_before[i] = max(best_before[i - 1], prices[i] - lowest)

    best_after = [0] * n
    highest = prices[-1]
    for i in range(n - 2, -1, -1):
        highest = max(highest, prices[i])
        best_after[i] = max(best_after[i + 1], highest - prices[i])

    return max(
        best_after[0],
        max((best_before[i - 1] + best_after[i] for i in range(1, n)), default=0),
    )


def largest_rectangle_area(heights: Sequence[int]) -> int:
    """Return the area of the largest rectangle under a histogram."""
    best = 0
    stack: list[int] = []
    n = len(heights)
    for i in range(n + 1):
        height = heights[i] if i < n else 0
        while stack and height <= heights[stack[-1]]:
            top = heights[stack.pop()]
            width = i if not stack else i - stack[-1] - 1
            best = max(best, top * width)
        stack.append(i)
    return best


def maximal_rectangle(matrix: Sequence[Sequence[str]]) -> int:
    """Return the area of the largest rectangle of '1' cells in a grid."""
    if not matrix:
        return 0
    cols = len(matrix[0])
    heights = [0] * cols
    left = [0] * cols
    right = [cols] * cols
    best = 0
    for row in matrix:
        filled = [cell == "1" for cell in row]
        heights = [h + 1 if f else 0 for h, f in zip(heights, filled)]

        cur_left = 0
        for c, f in enumerate(filled):
            if f:
                left[c] = max(left[c], cur_left)
            else:
                left[c] = 0
                cur_left = c + 1

        cur_right = cols
        for c in range(cols - 1, -1, -1):
            if filled[c]:
                right[c] = min(right[c], cur_right)
            else:
                right[c] = cols
                cur_right = c

        best = max(
            [best] + [(r - l) * h for l, r, h in zip(left, right, heights)]
        )
    return best


def max_envelopes(envelopes: Iterable[Sequence[int]]) -> int:
    """Return the most envelopes that nest strictly inside one another."""
    ordered = sorted(
        ((width, height) for width, height in envelopes),
        key=lambda pair: (pair[0], -pair[1]),
    )
    tails: list[int] = []
    for _, height in ordered:
        pos = bisect_left(tails, height)
        if pos == len(tails):
            tails.append(height)
        else:
            tails[pos] = height
    return len(tails)