"""Problems on one-dimensional integer arrays."""

from __future__ import annotations

from collections import deque
from typing import Iterable, Sequence


def find_median_sorted_arrays(nums1: Iterable[int], nums2: Iterable[int]) -> float:
    """Return the median of all values from both inputs."""
    combined = sorted([*nums1, *nums2])
    if not combined:
        raise ValueError("both inputs are empty")
    half, odd = divmod(len(combined), 2)
    if odd:
        return float(combined[half])
    return (combined[half - 1] + combined[half]) / 2.0


def three_sum(nums: Iterable[int]) -> list[list[int]]:
    """Return the distinct sorted triples of values that sum to zero, in ascending order."""
    values = sorted(nums)
    n = len(values)
    result: list[list[int]] = []
    for i, first in enumerate(values[: n - 2]):
        if i > 0 and first == values[i - 1]:
            continue
        left, right = i + 1, n - 1
        target = -first
        while left < right:
            pair = values[left] + values[right]
            if pair == target:
                result.append([first, values[left], values[right]])
                while left < right and values[left] == values[left + 1]:
                    left += 1
                while left < right and values[right] == values[right - 1]:
                    right -= 1
                left += 1
                right -= 1
            elif pair < target:
                left += 1
            else:
                right -= 1
    return result


def three_sum_closest(nums: Iterable[int], target: int) -> int:
    """Return the sum of three values that lies closest to ``target``."""
    values = sorted(nums)
    n = len(values)
    if n < 3:
        raise ValueError("at least three values are needed")
    closest = values[0] + values[1] + values[2]
    for i in range(n - 2):
        left, right = i + 1, n - 1
        while left < right:
            total = values[i] + values[left] + values[right]
            if abs(total - target) < abs(closest - target):
                closest = total
            if total < target:
                left += 1
            elif total > target:
                right -= 1
            else:
                return total
    return closest


def next_permutation(nums: list[int]) -> None:
    """Rearrange ``nums`` in place into the next permutation, wrapping to the first."""
    i = len(nums) - 2
    while i >= 0 and nums[i] >= nums[i + 1]:
        i -= 1
    if i < 0:
        nums.reverse()
        return
    j = len(nums) - 1
    while nums[j] <= nums[i]:
        j -= 1
    nums[i], nums[j] = nums[j], nums[i]
    nums[i + 1 :] = nums[: i : -1]


def max_sub_array(nums: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous run."""
    if not nums:
        raise ValueError("nums is empty")
    best = current = nums[0]
    for value in nums[1:]:
        current = current + value if current > 0 else value
        best = max(best, current)
    return best


def sort_colors(nums: list[int]) -> None:
    """Sort a list of 0s, 1s and 2s in place in one pass."""
    low, mid, high = 0, 0, len(nums) - 1
    while mid <= high:
        if nums[mid] == 0:
            nums[low], nums[mid] = nums[mid], nums[low]
            low += 1
            mid += 1
        elif nums[mid] == 1:
            mid += 1
        else:
            nums[mid], nums[high] = nums[high], nums[mid]
            high -= 1


def max_product(nums: Sequence[int]) -> int:
    """Return the largest product of a non-empty contiguous run."""
    if not nums:
        raise ValueError("nums is empty")
    high = low = best = nums[0]
    for value in nums[1:]:
        candidates = (value, high * value, low * value)
        high, low = max(candidates), min(candidates)
        best = max(best, high)
    return best


def longest_consecutive(nums: Iterable[int]) -> int:
    """Return the length of the longest run of consecutive integers among the values."""
    values = set(nums)
    longest = 0
    for value in values:
        if value - 1 in values:
            continue
        end = value
        while end + 1 in values:
            end += 1
        longest = max(longest, end - value + 1)
    return longest


def max_sliding_window(nums: Sequence[int], k: int) -> list[int]:
    """Return the maximum of every window of ``k`` adjacent values."""
    if k < 1:
        raise ValueError("k must be at least 1")
    if k > len(nums):
        raise ValueError("k is larger than the number of values")
    window: deque[int] = deque()
    result: list[int] = []
    for i, value in enumerate(nums):
        if window and window[0] <= i - k:
            window.popleft()
        while window and nums[window[-1]] <= value:
            window.pop()
        window.append(i)
        if i >= k - 1:
            result.append(nums[window[0]])
    return result