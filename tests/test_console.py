import io

import pytest

from valorquest.console import Console


def make(text):
    out = io.StringIO()
    return Console(io.StringIO(text), out), out


def test_write_appends_newline():
    console, out = make("")
    console.write("Game saved.")
    assert out.getvalue() == "Game saved.\n"


def test_read_line_strips_line_ending_and_shows_prompt():
    console, out = make("hello\r\n")
    assert console.read_line("Name: ") == "hello"
    assert out.getvalue() == "Name: "


def test_read_line_raises_at_end_of_input():
    console, _ = make("")
    with pytest.raises(EOFError):
        console.read_line("x")


def test_read_int_accepts_digits():
    console, _ = make("42\n")
    assert console.read_int("Choice: ") == 42


def test_read_int_retries_on_invalid_input():
    console, out = make("abc\n-3\n\n7\n")
    assert console.read_int("Choice: ") == 7
    text = out.getvalue()
    assert text.count("Invalid input! Please enter a valid integer.") == 3
    assert text.count("Choice: ") == 4


def test_read_int_rejects_non_ascii_digits():
    console, _ = make("\u00b2\n5\n")
    assert console.read_int("") == 5


def test_read_string_retries_when_empty():
    console, out = make("\n\nAria\n")
    assert console.read_string("Enter your name: ") == "Aria"
    assert out.getvalue().count("Input cannot be empty! Please try again: ") == 2


def test_pause_consumes_one_line():
    console, _ = make("\nnext\n")
    console.pause()
    assert console.read_line("") == "next"


def test_pause_at_end_of_input_returns():
    console, out = make("")
    console.pause()
    assert "continue" in out.getvalue()


def test_clear_writes_escape_sequence():
    console, out = make("")
    console.clear()
    assert out.getvalue().startswith("\033[")