"""Pattern matching, parsing and generation problems on strings."""

from __future__ import annotations

from collections import Counter
from functools import lru_cache
from itertools import groupby
from typing import Sequence


def is_match(s: str, p: str) -> bool:
    """Tell whether ``p`` matches all of ``s``.

    In the pattern, '.' matches any character and '*' matches zero or more
    of the element before it.
    """
    if p.startswith("*"):
        raise ValueError("pattern may not start with '*'")
    cols = len(p) + 1
    prev = [False] * cols
    prev[0] = True
    for j, token in enumerate(p):
        prev[j + 1] = token == "*" and prev[j - 1]

    for char in s:
        row = [False] * cols
        for j, token in enumerate(p):
            if token == "*":
                repeated = p[j - 1]
                row[j + 1] = row[j - 1] or (
                    (repeated == "." or repeated == char) and prev[j + 1]
                )
            else:
                row[j + 1] = (token == "." or token == char) and prev[j]
        prev = row
    return prev[-1]


def is_wildcard_match(s: str, p: str) -> bool:
    """Tell whether ``p`` matches all of ``s``, '?' matching one character and '*' any run."""
    cols = len(p) + 1
    prev = [False] * cols
    prev[0] = True
    for j, token in enumerate(p):
        prev[j + 1] = token == "*" and prev[j]

    for char in s:
        row = [False] * cols
        for j, token in enumerate(p):
            if token == "*":
                row[j + 1] = row[j] or prev[j + 1]
            else:
                row[j + 1] = (token == "?" or token == char) and prev[j]
        prev = row
    return prev[-1]


def generate_parenthesis(n: int) -> list[str]:
    """Return every balanced string of ``n`` pairs of parentheses, in ascending order."""
    if n < 0:
        raise ValueError("n must not be negative")

    @lru_cache(maxsize=None)
    def generate(opened: int, closed: int) -> tuple[str, ...]:
        if opened == n and closed == n:
            return ("",)
        result: list[str] = []
        if opened < n:
            result.extend("(" + rest for rest in generate(opened + 1, closed))
        if closed < opened:
            result.extend(")" + rest for rest in generate(opened, closed + 1))
        return tuple(result)

    return list(generate(0, 0))


def find_substring(s: str, words: Sequence[str]) -> list[int]:
    """Return start indices of substrings made of all ``words`` (equal length) in any order.

    Indices are grouped by their remainder modulo the word length, as the
    scan visits them.
    """
    if not words:
        raise ValueError("words is empty")
    length = len(words[0])
    wanted = Counter(words)
    total = len(words)
    result: list[int] = []

    for offset in range(length):
        seen: Counter[str] = Counter()
        size = 0
        for i in range(offset, len(s) - length + 1, length):
            word = s[i : i + length]
            if word not in wanted:
                seen.clear()
                size = 0
                continue
            seen[word] += 1
            size += 1
            while seen[word] > wanted[word]:
                start = i - (size - 1) * length
                seen[s[start : start + length]] -= 1
                size -= 1
            if size == total:
                result.append(i - (size - 1) * length)
    return result


def longest_valid_parentheses(s: str) -> int:
    """Return the length of the longest well-formed run of parentheses in ``s``."""
    ending = [0] * len(s)
    best = 0
    for i in range(1, len(s)):
        if s[i] != ")":
            continue
        if s[i - 1] == "(":
            ending[i] = (ending[i - 2] if i >= 2 else 0) + 2
        else:
            inner = ending[i - 1]
            opener = i - inner - 1
            if opener >= 0 and s[opener] == "(":
                ending[i] = inner + (ending[opener - 1] if opener >= 1 else 0) + 2
        best = max(best, ending[i])
    return best


def count_and_say(n: int) -> str:
    """Return the n-th term of the look-and-say sequence, starting from "1"."""
    term = "1"
    for _ in range(n - 1):
        term = "".join(
            f"{sum(1 for _ in run)}{digit}" for digit, run in groupby(term)
        )
    return term


def num_decodings(s: str) -> int:
    """Count the ways to read a digit string as letters, with 'A' as 1 up to 'Z' as 26."""
    if not s or s[0] == "0":
        return 0
    before_prev, prev = 1, 1
    for i in range(1, len(s)):
        current = prev if s[i] != "0" else 0
        pair = s[i - 1 : i + 1]
        if s[i - 1] == "1" or (s[i - 1] == "2" and s[i] <= "6"):
            current += before_prev
        before_prev, prev = prev, current
    return prev


def reverse_words(s: str) -> str:
    """Return the space-separated words of ``s`` in reverse order, joined by single spaces."""
    words = [word for word in s.split(" ") if word]
    if not words:
        raise ValueError("the string holds no words")
    return " ".join(reversed(words))


def calculate(s: str) -> int:
    """Evaluate an expression of non-negative integers, '+', '-' and parentheses."""
    saved: list[tuple[int, int]] = []
    number = 0
    result = 0
    sign = 1
    for char in s:
        if char.isdigit():
            number = number * 10 + int(char)
        elif char in "+-":
            result += sign * number
            sign = -1 if char == "-" else 1
            number = 0
        elif char == "(":
            saved.append((result, sign))
            result, sign = 0, 1
        elif char == ")":
            if not saved:
                raise ValueError("unbalanced ')'")
            result += sign * number
            outer, outer_sign = saved.pop()
            result = outer + outer_sign * result
            number = 0
    return result + sign * number