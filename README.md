# numtally

Three small console tools for quick looks at numbers and text.

## Installation

```
pip install .
```

## Commands

### `numtally-array`

This command reads one line of integers separated by spaces. Reading stops at the first token that is not an integer. If no numbers are entered, the command prints an error and exits with status 1. Otherwise it sorts the values and prints:

- the sorted list
- the smallest and biggest values
- the sum and the unique values
- the integer average, truncated toward zero
- the even and odd values
- the 1-based position of a number you enter, or a note that it is not found
- the factorial of each value
- the square of each value, under the label "Cubes"
- the two biggest squares, when there are at least two values

```
$ numtally-array
Enter array with spaces: 3 1 2
```

### `numtally-multitude`

This command reads two lines of integers, A and B. It then prints:

- "Overalls": the elements of A that also occur in B, in A's order
- "All": every distinct value of A and B, sorted
- "A - B" and "B - A": the elements of one line that do not occur in the other
- "A + B": all elements of both lines with repeats kept, sorted

When a list other than "Overalls" is empty, only its label is printed.

### `numtally-string`

This command reads one line of text. It then prints:

- the length of the line
- counts of spaces, vowels, consonants, symbols, capital letters and lower-case letters (`Y` and `y` count both as vowels and as consonants)
- the line reversed
- a "Reverse words" line

## Library use

Each module also exposes its parts as plain functions:

```python
from numtally.array_analyzer import parse_numbers, bubble_sort, two_biggest
from numtally.multitude import all_numbers, subtract
from numtally.string_analyzer import count_characters, reverse_string

values = bubble_sort(parse_numbers("5 3 9 1"))
print(values)                           # [1, 3, 5, 9]
print(two_biggest(values))              # (9, 5)
print(all_numbers([1, 2, 2], [2, 3]))   # [1, 2, 3]
print(subtract([1, 2, 3], [2]))         # [1, 3]
print(count_characters("Hello World!").vowels)  # 3
print(reverse_string("Hello World!"))   # !dlroW olleH
```

`count_characters` returns a `CharacterCounts` record with the fields `spaces`, `vowels`, `consonants`, `symbols`, `caps` and `not_caps`. Each module's `report` function returns the text that its command prints after reading input.

## Limitations

`reverse_words` does not reverse the order of words. It returns the line with its tail from position 32 onward put in front of it. A line shorter than 32 characters comes back unchanged.

## Running the tests

```
pip install .[test]
pytest
```