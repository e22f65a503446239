"""Dynamic-programming problems on grids, strings and sequences."""

from __future__ import annotations

from bisect import bisect_left
from functools import lru_cache
from typing import Iterable, Sequence


def unique_paths(m: int, n: int) -> int:
    """Count right/down paths from the top-left to the bottom-right of an m by n grid."""
    if m < 1 or n < 1:
        raise ValueError("the grid needs at least one row and one column")
    row = [1] * n
    for _ in range(1, m):
        for col in range(1, n):
            row[col] += row[col - 1]
    return row[-1]


def min_distance(word1: str, word2: str) -> int:
    """Return the fewest single-character inserts, deletes and replacements turning word1 into word2."""
    prev = list(range(len(word2) + 1))
    for i, a in enumerate(word1, 1):
        row = [i]
        for j, b in enumerate(word2, 1):
            if a == b:
                row.append(prev[j - 1])
            else:
                row.append(1 + min(row[j - 1], prev[j], prev[j - 1]))
        prev = row
    return prev[-1]


def is_scramble(s1: str, s2: str) -> bool:
    """Tell whether s2 can be made from s1 by recursively splitting and swapping halves."""
    n = len(s1)
    if n != len(s2):
        return False
    if s1 == s2:
        return True

    @lru_cache(maxsize=None)
    def solve(i1: int, i2: int, length: int) -> bool:
        if length == 1:
            return s1[i1] == s2[i2]
        return any(
            (solve(i1, i2, k) and solve(i1 + k, i2 + k, length - k))
            or (solve(i1, i2 + length - k, k) and solve(i1 + k, i2, length - k))
            for k in range(1, length)
        )

    return solve(0, 0, n)


def num_distinct(s: str, t: str) -> int:
    """Count the subsequences of ``s`` that equal ``t``."""
    ways = [1] + [0] * len(t)
    for char in s:
        for j in range(len(t), 0, -1):
            if t[j - 1] == char:
                ways[j] += ways[j - 1]
    return ways[-1]


def _is_palindrome(text: str) -> bool:
    return text == text[::-1]


def partition(s: str) -> list[list[str]]:
    """Return every way to cut ``s`` into palindromes, shorter first pieces first."""

    @lru_cache(maxsize=None)
    def parts_from(start: int) -> tuple[tuple[str, ...], ...]:
        if start >= len(s):
            return ((),)
        result = []
        for end in range(start + 1, len(s) + 1):
            segment = s[start:end]
            if _is_palindrome(segment):
                result.extend((segment, *rest) for rest in parts_from(end))
        return tuple(result)

    return [list(parts) for parts in parts_from(0)]


def min_cut(s: str) -> int:
    """Return the fewest cuts that split a non-empty ``s`` into palindromes."""
    if not s:
        raise ValueError("s is empty")
    n = len(s)
    palindrome = [[False] * n for _ in range(n)]
    cuts = [0] * n
    for end in range(n):
        best = end
        for start in range(end + 1):
            if s[start] == s[end] and (end - start <= 2 or palindrome[start + 1][end - 1]):
                palindrome[start][end] = True
                best = 0 if start == 0 else min(best, cuts[start - 1] + 1)
        cuts[end] = best
    return cuts[-1]


def word_break(s: str, word_dict: Iterable[str]) -> list[str]:
    """Return, sorted, every way to write ``s`` as dictionary words joined by spaces."""
    dictionary = set(word_dict)
    memo: dict[str, list[str]] = {}

    def breaks(text: str) -> list[str]:
        if text in memo:
            return memo[text]
        results = [text] if text in dictionary else []
        for pos in range(1, len(text)):
            head = text[:pos]
            if head in dictionary:
                results.extend(f"{head} {tail}" for tail in breaks(text[pos:]))
        memo[text] = results
        return results

    return sorted(breaks(s))


def calculate_minimum_hp(dungeon: Sequence[Sequence[int]]) -> int:
    """Return the least starting health to cross the dungeon moving right or down."""
    if not dungeon or not dungeon[0]:
        raise ValueError("the dungeon is empty")
    rows, cols = len(dungeon), len(dungeon[0])
    below = [0] * cols
    for i in range(rows - 1, -1, -1):
        row = [0] * cols
        for j in range(cols - 1, -1, -1):
            if i == rows - 1 and j == cols - 1:
                need = 1
            elif i == rows - 1:
                need = row[j + 1]
            elif j == cols - 1:
                need = below[j]
            else:
                need = min(below[j], row[j + 1])
            row[j] = max(need - dungeon[i][j], 1)
        below = row
    return below[0]


def length_of_lis(nums: Iterable[int]) -> int:
    """Return the length of the longest strictly increasing subsequence."""
    tails: list[int] = []
    for value in nums:
        pos = bisect_left(tails, value)
        if pos == len(tails):
            tails.append(value)
        else:
            tails[pos] = value
    return len(tails)


def find_max_form(strs: Iterable[str], m: int, n: int) -> int:
    """Return the most strings choosable with at most m zeros and n ones in total."""
    if m < 0 or n < 0:
        raise ValueError("m and n must not be negative")
    best = [[0] * (n + 1) for _ in range(m + 1)]
    for text in strs:
        zeros = text.count("0")
        ones = len(text) - zeros
        for z in range(m, zeros - 1, -1):
            for o in range(n, ones - 1, -1):
                best[z][o] = max(best[z][o], best[z - zeros][o - ones] + 1)
    return best[m][n]