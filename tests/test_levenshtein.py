import pytest

from byteemu.levenshtein import distance, distance_no_case, keyboard_distance


def test_identical_strings():
    assert distance("mov", "mov") == 0.0


@pytest.mark.parametrize("text", ["", "a", "push", "hello"])
def test_distance_to_empty_is_length(text):
    assert distance(text, "") == len(text)
    assert distance("", text) == len(text)


def test_case_change_is_cheap():
    assert distance("a", "A") == 0.25


def test_adjacent_key_is_cheaper():
    assert distance("a", "s") == 0.5
    assert distance("a", "p") == 1.0


def test_transposition_costs_one():
    assert distance("ab", "ba") == 1.0


@pytest.mark.parametrize("pair", [("macro", "mcaro"), ("add", "adc"), ("Push", "pop")])
def test_symmetric(pair):
    a, b = pair
    assert distance(a, b) == distance(b, a)


def test_no_case_ignores_case():
    assert distance_no_case("PUSH", "push") == 0.0
    assert distance_no_case("Mov", "mOv") == distance("mov", "mov")


def test_keyboard_distance():
    assert keyboard_distance("q", "w") == 1
    assert keyboard_distance("q", "q") == 0
    assert keyboard_distance("q", "!") == 1000