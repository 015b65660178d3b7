"""Tests for the number scanner."""

from svgscene.svg.numbers import NumberScanner, leading_float, leading_int, scan_numbers


def test_leading_float():
    assert leading_float("12.5px") == 12.5
    assert leading_float("  -3e2") == -300.0
    assert leading_float(".5") == 0.5
    assert leading_float("abc") == 0.0
    assert leading_float("") == 0.0


def test_leading_int():
    assert leading_int("0.5") == 0
    assert leading_int("12px") == 12
    assert leading_int("1e999") == 0
    assert leading_int("-1e999") == 0


def test_packed_numbers():
    # "-" and a second "." both start a new number
    assert scan_numbers("10-20.5.5", allow_units=False) == ["10", "-20.5", ".5"]


def test_separators_and_exponent():
    assert scan_numbers(" 1 , 2e1,\n3E-1 ", allow_units=False) == ["1", "2e1", "3E-1"]


def test_exponent_needs_digits():
    s = NumberScanner("2e")
    token, ok = s.next_number()
    assert ok and token == "2"


def test_units_and_percent():
    assert scan_numbers("10px 50% 2.5cm") == ["10px", "50%", "2.5cm"]


def test_units_not_read_without_flag():
    s = NumberScanner("10px")
    token, ok = s.next_number(allow_units=False)
    assert ok and token == "10"
    assert s.peek() == "p"


def test_failed_read_keeps_cursor():
    s = NumberScanner("  L 10")
    token, ok = s.next_number()
    assert not ok
    assert token == ""
    assert s.pos == 0


def test_sign_without_digits_fails():
    s = NumberScanner("-.")
    _, ok = s.next_number()
    assert not ok
    assert s.pos == 0


def test_next_pair():
    s = NumberScanner("3,4 5")
    (x, y), ok = s.next_pair()
    assert ok and (x, y) == (3.0, 4.0)
    (x, _), ok = s.next_pair()
    assert not ok
    assert x == 5.0
    assert s.at_end


def test_scan_stops_at_garbage():
    assert scan_numbers("1 2 x 3") == ["1", "2"]
