import threading

import pytest

from aesdkit.thread_demos import (
    counter_demo,
    main,
    result_from_thread,
    string_length_in_thread,
    upper_in_threads,
)


def test_string_length_in_thread(capsys):
    assert string_length_in_thread("Hello world\n") == len("Hello world\n")
    out = capsys.readouterr().out
    assert "Hello world\n" in out
    assert f"Thread returned {len('Hello world')+1}" in out


def test_string_length_counts_bytes(capsys):
    text = "\u00e9"
    assert string_length_in_thread(text) == len(text.encode())


def test_result_from_thread():
    assert result_from_thread() == 42


@pytest.mark.parametrize("count", [0, 1, 2, 7])
def test_counter_demo(count, capsys):
    assert counter_demo(count) == count
    assert capsys.readouterr().out.count("Counter: ") == count


def test_counter_demo_negative():
    with pytest.raises(ValueError):
        counter_demo(-1)


def test_upper_in_threads_keeps_order(capsys):
    strings = ["abc", "Def", "x y"]
    assert upper_in_threads(strings) == [s.upper() for s in strings]


def test_upper_in_threads_with_stack_size_restores_default(capsys):
    before = threading.stack_size()
    assert upper_in_threads(["ab"], 262144) == ["AB"]
    assert threading.stack_size() == before


def test_upper_in_threads_invalid_stack_size():
    before = threading.stack_size()
    with pytest.raises(ValueError):
        upper_in_threads(["ab"], 1)
    assert threading.stack_size() == before


def test_main_joins(capsys):
    assert main(["-s", "0x40000", "foo", "bar"]) == 0
    out = capsys.readouterr().out
    assert "Joined with thread 1; returned value was FOO" in out
    assert "Joined with thread 2; returned value was BAR" in out


def test_main_bad_option(capsys):
    assert main(["-x"]) == 1
    assert "Usage:" in capsys.readouterr().err