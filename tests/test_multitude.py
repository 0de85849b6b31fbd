import io

from numtally.multitude import (
    add,
    all_numbers,
    main,
    overall_numbers,
    parse_numbers,
    report,
    subtract,
)


def test_parse_numbers():
    assert parse_numbers("1 2 q 3") == [1, 2]
    assert parse_numbers("") == []


def test_overall_numbers_keeps_order_and_repeats_of_a():
    assert overall_numbers([3, 1, 3, 5], [5, 3]) == [3, 3, 5]


def test_overall_numbers_disjoint():
    assert overall_numbers([1, 2], [3, 4]) == []


def test_all_numbers_is_sorted_distinct_union():
    result = all_numbers([5, 1, 5], [3, 1])
    assert result == [1, 3, 5]
    assert len(result) == len(set(result))


def test_subtract_both_ways():
    a, b = [1, 2, 3, 2], [2, 4]
    assert subtract(a, b) == [1, 3]
    assert subtract(b, a) == [4]


def test_subtract_and_overall_partition_a():
    a, b = [9, 1, 4, 1, 7], [1, 7, 8]
    assert sorted(subtract(a, b) + overall_numbers(a, b)) == sorted(a)


def test_add_keeps_repeats_and_sorts():
    a, b = [3, 1], [1, 2]
    result = add(a, b)
    assert len(result) == len(a) + len(b)
    assert result == [1, 1, 2, 3]


def test_report_layout():
    text = report([1, 2, 3], [2, 3, 4])
    assert text.startswith("Overalls: 2 3 \n")
    assert "All: 1, 2, 3, 4\n" in text
    assert "A - B: 1\n" in text
    assert "B - A: 4\n" in text
    assert text.endswith("A + B: 1, 2, 2, 3, 3, 4\n")


def test_report_empty_difference_has_no_line_break():
    text = report([1], [1])
    assert "A - B: B - A: " in text


def test_main(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 2\n2 5\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Welcome to Multitude calculator!")
    assert "Overalls: 2 \n" in out
    assert "All: 1, 2, 5\n" in out