"""Dynamic programming exercises solved with memoization."""

from __future__ import annotations

from collections.abc import Iterable
from functools import lru_cache

__all__ = [
    "fibonacci",
    "find_ways",
    "can_accumulate",
    "how_accumulate",
    "optimize_accumulate",
    "can_generate",
    "how_many_generate",
    "all_combinations",
]


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number, with fibonacci(n) == 1 for n <= 2."""
    previous, current = 1, 1
    for _ in range(n - 2):
        previous, current = current, previous + current
    return current


def find_ways(rows: int, columns: int) -> int:
    """Count paths from the top-left to the bottom-right cell moving only right or down."""

    @lru_cache(maxsize=None)
    def ways(m: int, n: int) -> int:
        if m == 1 and n == 1:
            return 1
        if m == 0 or n == 0:
            return 0
        return solve(m - 1, n) + solve(m, n - 1)

    def solve(m: int, n: int) -> int:
        # The grid is symmetric, so (m, n) and (n, m) share one entry.
        return ways(min(m, n), max(m, n))

    return solve(rows, columns)


def _positive(numbers: Iterable[int]) -> tuple[int, ...]:
    values = tuple(numbers)
    if any(value <= 0 for value in values):
        raise ValueError("numbers must all be positive")
    return values


def can_accumulate(numbers: Iterable[int], total: int) -> bool:
    """Tell whether ``total`` is a sum of the numbers, each usable any number of times."""
    values = _positive(numbers)
    memo: dict[int, bool] = {}

    def solve(rest: int) -> bool:
        if rest in memo:
            return memo[rest]
        if rest == 0:
            return True
        if rest < 0:
            return False
        memo[rest] = any(solve(rest - value) for value in values)
        return memo[rest]

    return solve(total)


def how_accumulate(numbers: Iterable[int], total: int) -> list[int] | None:
    """Return the first combination found that sums to ``total``, or None."""
    values = _positive(numbers)
    memo: dict[int, tuple[int, ...] | None] = {}

    def solve(rest: int) -> tuple[int, ...] | None:
        if rest in memo:
            return memo[rest]
        if rest == 0:
            return ()
        if rest < 0:
            return None
        for value in values:
            found = solve(rest - value)
            if found is not None:
                memo[rest] = (*found, value)
                return memo[rest]
        memo[rest] = None
        return None

    result = solve(total)
    return None if result is None else list(result)


def optimize_accumulate(numbers: Iterable[int], total: int) -> list[int] | None:
    """Return a shortest combination summing to ``total``, or None if there is none."""
    values = _positive(numbers)
    memo: dict[int, tuple[int, ...] | None] = {}

    def solve(rest: int) -> tuple[int, ...] | None:
        if rest in memo:
            return memo[rest]
        if rest == 0:
            return ()
        if rest < 0:
            return None
        best: tuple[int, ...] | None = None
        for value in values:
            found = solve(rest - value)
            if found is not None:
                candidate = (*found, value)
                if best is None or len(candidate) < len(best):
                    best = candidate
        memo[rest] = best
        return best

    result = solve(total)
    return None if result is None else list(result)


def _usable(words: Iterable[str]) -> tuple[str, ...]:
    # An empty word consumes nothing and cannot help build the target.
    return tuple(word for word in words if word)


def can_generate(words: Iterable[str], target: str) -> bool:
    """Tell whether ``target`` can be built by concatenating the words."""
    pieces = _usable(words)
    memo: dict[str, bool] = {}

    def solve(rest: str) -> bool:
        if rest in memo:
            return memo[rest]
        if rest == "":
            return True
        memo[rest] = any(solve(rest[len(word):]) for word in pieces if rest.startswith(word))
        return memo[rest]

    return solve(target)


def how_many_generate(words: Iterable[str], target: str) -> int:
    """Count the ways ``target`` can be built by concatenating the words."""
    pieces = _usable(words)
    memo: dict[str, int] = {}

    def solve(rest: str) -> int:
        if rest in memo:
            return memo[rest]
        if rest == "":
            return 1
        memo[rest] = sum(solve(rest[len(word):]) for word in pieces if rest.startswith(word))
        return memo[rest]

    return solve(target)


def all_combinations(words: Iterable[str], target: str) -> list[list[str]]:
    """List every sequence of words whose concatenation is ``target``."""
    pieces = _usable(words)
    memo: dict[str, list[list[str]]] = {}

    def solve(rest: str) -> list[list[str]]:
        if rest in memo:
            return memo[rest]
        if rest == "":
            return [[]]
        found: list[list[str]] = []
        for word in pieces:
            if rest.startswith(word):
                for way in solve(rest[len(word):]):
                    found.insert(0, [word, *way])
        memo[rest] = found
        return found

    return [list(way) for way in solve(target)]