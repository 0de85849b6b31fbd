"""Set-style operations over two lists of integers."""

from __future__ import annotations

from collections.abc import Sequence


def parse_numbers(text: str) -> list[int]:
    """Read whitespace-separated integers, stopping at the first token that is not one."""
    numbers: list[int] = []
    for token in text.split():
        try:
            numbers.append(int(token))
        except ValueError:
            break
    return numbers


def overall_numbers(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Return the elements of a that also occur in b, in a's order."""
    in_b = set(b)
    return [value for value in a if value in in_b]


def all_numbers(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Return every distinct value of a and b, ascending."""
    return sorted(set(a) | set(b))


def subtract(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Return the elements of a that do not occur in b, in a's order."""
    in_b = set(b)
    return [value for value in a if value not in in_b]


def add(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Return all elements of both lists, repeats kept, ascending."""
    return sorted([*a, *b])


def _line(label: str, values: Sequence[int]) -> str:
    # An empty result prints only its label, with no line break.
    if not values:
        return f"{label}: "
    return f"{label}: {', '.join(map(str, values))}\n"


def report(a: Sequence[int], b: Sequence[int]) -> str:
    """Return the printed report for the two lists."""
    overall = "".join(f"{value} " for value in overall_numbers(a, b))
    return "".join(
        [
            f"Overalls: {overall}\n",
            _line("All", all_numbers(a, b)),
            _line("A - B", subtract(a, b)),
            _line("B - A", subtract(b, a)),
            _line("A + B", add(a, b)),
        ]
    )


def _read_line(prompt: str) -> str:
    try:
        return input(prompt)
    except EOFError:
        return ""


def main(argv: Sequence[str] | None = None) -> int:
    """Read two lines of integers from standard input and print the report."""
    print("Welcome to Multitude calculator!")
    a = parse_numbers(_read_line("Enter array A with spaces: "))
    b = parse_numbers(_read_line("Enter array B with spaces: "))
    print(report(a, b), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())