"""Problems on two-dimensional grids and matrices."""

from __future__ import annotations

import heapq
from bisect import bisect_left
from collections import deque
from typing import Sequence

_DIRECTIONS = ((1, 0), (-1, 0), (0, 1), (0, -1))


def num_islands(grid: Sequence[Sequence[str]]) -> int:
    """Count groups of '1' cells joined horizontally or vertically."""
    if not grid or not grid[0]:
        return 0
    rows, cols = len(grid), len(grid[0])
    seen: set[tuple[int, int]] = set()
    islands = 0
    for r, row in enumerate(grid):
        for c, cell in enumerate(row):
            if cell != "1" or (r, c) in seen:
                continue
            islands += 1
            seen.add((r, c))
            queue = deque([(r, c)])
            while queue:
                x, y = queue.popleft()
                for dx, dy in _DIRECTIONS:
                    nx, ny = x + dx, y + dy
                    if (
                        0 <= nx < rows
                        and 0 <= ny < cols
                        and (nx, ny) not in seen
                        and grid[nx][ny] == "1"
                    ):
                        seen.add((nx, ny))
                        queue.append((nx, ny))
    return islands


def trap_rain_water(terrain: Sequence[Sequence[int]]) -> int:
    """Return the volume of water a height map holds after rain."""
    if not terrain or not terrain[0]:
        return 0
    rows, cols = len(terrain), len(terrain[0])
    heap = []
    seen: set[tuple[int, int]] = set()
    for r, row in enumerate(terrain):
        for c, height in enumerate(row):
            if r in (0, rows - 1) or c in (0, cols - 1):
                heap.append((height, r, c))
                seen.add((r, c))
    heapq.heapify(heap)

    water = 0
    while heap:
        level, r, c = heapq.heappop(heap)
        for dr, dc in _DIRECTIONS:
            nr, nc = r + dr, c + dc
            if 0 <= nr < rows and 0 <= nc < cols and (nr, nc) not in seen:
                seen.add((nr, nc))
                neighbour = terrain[nr][nc]
                water += max(0, level - neighbour)
                heapq.heappush(heap, (max(level, neighbour), nr, nc))
    return water


def set_zeroes(matrix: list[list[int]]) -> None:
    """Zero, in place, every row and column that holds a zero."""
    zero_rows = set()
    zero_cols = set()
    for r, row in enumerate(matrix):
        for c, value in enumerate(row):
            if value == 0:
                zero_rows.add(r)
                zero_cols.add(c)
    for r, row in enumerate(matrix):
        if r in zero_rows:
            row[:] = [0] * len(row)
        else:
            for c in zero_cols:
                row[c] = 0


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Tell whether ``target`` is in a matrix whose rows, read in order, are sorted."""
    if not matrix or not matrix[0]:
        return False
    top, bottom = 0, len(matrix) - 1
    while top <= bottom:
        mid = (top + bottom) // 2
        row = matrix[mid]
        if row[0] < target < row[-1]:
            break
        if row[0] > target:
            bottom = mid - 1
        else:
            top = mid + 1
    # top + bottom is -1 only when the target precedes every row.
    row = matrix[max((top + bottom) // 2, 0)]
    pos = bisect_left(row, target)
    return pos < len(row) and row[pos] == target