import pytest

from aesdkit.structs import Alpha, LetterNumber, main, merge_two_structs


def test_merge_copies_fields():
    first = LetterNumber("D", 39)
    second = LetterNumber("M", 40)
    merge_two_structs(first, second)
    assert first == second
    assert first.letter == "M"
    assert first.number == 40


def test_merge_leaves_source_untouched():
    first = LetterNumber("D", 39)
    second = LetterNumber("M", 40)
    merge_two_structs(first, second)
    assert second == LetterNumber("M", 40)
    assert first is not second


def test_letter_must_be_one_character():
    with pytest.raises(ValueError):
        LetterNumber("AB", 1)
    with pytest.raises(ValueError):
        LetterNumber("", 1)


def test_alpha_members_are_independent():
    one = Alpha()
    two = Alpha()
    one.first.letter = "A"
    assert two.first.letter == "\0"
    assert one.second == LetterNumber()


def test_main_prints_results(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "M, 40\nA, 20\n"