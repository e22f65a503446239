"""Backtracking and counting problems."""

from __future__ import annotations

import math
from typing import Iterable

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def combination_sum2(candidates: Iterable[int], target: int) -> list[list[int]]:
    """Return the distinct combinations of candidates, each used once, summing to target."""
    pool = sorted(candidates)
    result: list[list[int]] = []
    chosen: list[int] = []

    def backtrack(start: int, remaining: int) -> None:
        if remaining == 0:
            result.append(list(chosen))
            return
        for i, value in enumerate(pool[start:], start):
            if i > start and value == pool[i - 1]:
                continue
            if value > remaining:
                break
            chosen.append(value)
            backtrack(i + 1, remaining - value)
            chosen.pop()

    backtrack(0, target)
    return result


def total_n_queens(n: int) -> int:
    """Count the placements of n non-attacking queens on an n by n board."""
    if n < 0:
        raise ValueError("n must not be negative")
    if n == 0:
        return 0
    columns: set[int] = set()
    diagonals: set[int] = set()
    anti_diagonals: set[int] = set()

    def place(row: int) -> int:
        if row == n:
            return 1
        total = 0
        for col in range(n):
            if col in columns or row - col in diagonals or row + col in anti_diagonals:
                continue
            columns.add(col)
            diagonals.add(row - col)
            anti_diagonals.add(row + col)
            total += place(row + 1)
            columns.remove(col)
            diagonals.remove(row - col)
            anti_diagonals.remove(row + col)
        return total

    return place(0)


def subsets_with_dup(nums: Iterable[int]) -> list[list[int]]:
    """Return every distinct sub-multiset of nums, each sorted, in depth-first order."""
    pool = sorted(nums)
    result: list[list[int]] = []
    current: list[int] = []

    def visit(start: int) -> None:
        result.append(list(current))
        for i, value in enumerate(pool[start:], start):
            if i > start and value == pool[i - 1]:
                continue
            current.append(value)
            visit(i + 1)
            current.pop()

    visit(0)
    return result


def divide(dividend: int, divisor: int) -> int:
    """Divide 32-bit integers truncating toward zero, clamping the one overflow to INT_MAX."""
    if divisor == 0:
        raise ZeroDivisionError("division by zero")
    if dividend == INT_MIN and divisor == -1:
        return INT_MAX
    if dividend == INT_MIN and divisor == 1:
        return INT_MIN

    remaining = abs(dividend)
    step = abs(divisor)
    quotient = 0
    while step <= remaining:
        chunk, count = step, 1
        while chunk <= remaining - chunk:
            chunk += chunk
            count += count
        quotient += count
        remaining -= chunk
    return -quotient if (dividend < 0) != (divisor < 0) else quotient


def get_permutation(n: int, k: int) -> str:
    """Return the k-th (1-based) permutation of the digits 1..n in lexicographic order."""
    if n < 0:
        raise ValueError("n must not be negative")
    if not 1 <= k <= math.factorial(n):
        raise ValueError("k is out of range")
    digits = list(range(1, n + 1))
    rank = k - 1
    parts = []
    for remaining in range(n, 0, -1):
        index, rank = divmod(rank, math.factorial(remaining - 1))
        parts.append(str(digits.pop(index)))
    return "".join(parts)