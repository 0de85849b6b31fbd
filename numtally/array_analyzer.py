"""Statistics and transformations over a list of integers."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from math import prod


def parse_numbers(text: str) -> list[int]:
    """Read whitespace-separated integers, stopping at the first token that is not one."""
    numbers: list[int] = []
    for token in text.split():
        try:
            numbers.append(int(token))
        except ValueError:
            break
    return numbers


def format_list(values: Iterable[int]) -> str:
    """Join values with ', '."""
    return ", ".join(str(value) for value in values)


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Return a new list holding the values in ascending order."""
    items = list(values)
    for _ in items:
        swapped = False
        for left, right in zip(range(len(items)), range(1, len(items))):
            if items[left] > items[right]:
                items[left], items[right] = items[right], items[left]
                swapped = True
        if not swapped:
            break
    return items


def _require_values(values: Sequence[int], minimum: int = 1) -> None:
    if len(values) < minimum:
        raise ValueError(f"at least {minimum} value(s) required, got {len(values)}")


def smallest(values: Sequence[int]) -> int:
    """Return the smallest value."""
    _require_values(values)
    return min(values)


def biggest(values: Sequence[int]) -> int:
    """Return the biggest value."""
    _require_values(values)
    return max(values)


def unique(values: Iterable[int]) -> list[int]:
    """Return the values without repeats, in order of first appearance."""
    return list(dict.fromkeys(values))


def total(values: Iterable[int]) -> int:
    """Return the sum of the values."""
    return sum(values)


def factorial(num: int) -> int:
    """Return num!, which is 1 for zero and negative numbers."""
    return prod(range(1, num + 1))


def factorials(values: Iterable[int]) -> list[int]:
    """Return the factorial of every value."""
    return [factorial(value) for value in values]


def find_position(values: Sequence[int], target: int) -> int | None:
    """Return the 1-based position of the first occurrence of target, or None."""
    try:
        return values.index(target) + 1
    except ValueError:
        return None


def average(values: Sequence[int]) -> int:
    """Return the integer mean, truncated toward zero."""
    _require_values(values)
    quotient = abs(sum(values)) // len(values)
    return quotient if sum(values) >= 0 else -quotient


def split_even_odd(values: Iterable[int]) -> tuple[list[int], list[int]]:
    """Split values into (even, odd), each keeping the original order."""
    even: list[int] = []
    odd: list[int] = []
    for value in values:
        (even if value % 2 == 0 else odd).append(value)
    return even, odd


def squares(values: Iterable[int]) -> list[int]:
    """Return every value multiplied by itself."""
    return [value * value for value in values]


def two_biggest(values: Sequence[int]) -> tuple[int, int]:
    """Scan for the biggest value, remembering the previous holder as runner-up.

    The runner-up starts as the second element; on sorted input the result
    is the two largest values.
    """
    _require_values(values, 2)
    best, runner_up = values[0], values[1]
    for value in values:
        if best < value:
            runner_up, best = best, value
    return best, runner_up


def _read_line(prompt: str) -> str:
    try:
        return input(prompt)
    except EOFError:
        return ""


def main(argv: Sequence[str] | None = None) -> int:
    """Read a line of integers from standard input and print the analysis."""
    values = parse_numbers(_read_line("Enter array with spaces: "))
    print()
    if not values:
        print("No numbers entered.", file=sys.stderr)
        return 1

    ordered = bubble_sort(values)
    print(f"Sorted array: {format_list(ordered)}")
    print(f"Smallest: {smallest(ordered)}")
    print(f"Biggest: {biggest(ordered)}")
    print(f"Sum: {total(ordered)}")
    print(f"Unique: {format_list(unique(ordered))}")
    print(f"Average: {average(ordered)}")
    even, odd = split_even_odd(ordered)
    print(f"Even: {format_list(even)}")
    print(f"Odd: {format_list(odd)}")

    print()
    search = parse_numbers(_read_line("Enter number from array to search: "))
    target = search[0] if search else 0
    position = find_position(ordered, target)
    if position is not None:
        print(f"Number '{target}' position is - {{{position}}}")
    else:
        print(f"Number '{target}' is not found.")

    print(f"Factorials: {format_list(factorials(ordered))}")
    squared = squares(ordered)
    print(f"Cubes: {format_list(squared)}")
    if len(squared) >= 2:
        first, second = two_biggest(squared)
        print(f"Two biggest: {first} , {second}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())