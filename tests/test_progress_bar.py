import pytest

from byteemu.progress_bar import ProgressBar


def test_half_full_rendering():
    bar = ProgressBar(10, 10)
    bar.advance_by(5)
    assert bar.display() == " [#####     ] 5/10\r"


def test_empty_bar():
    bar = ProgressBar(4, 8)
    assert bar.display().count("#") == 0
    assert bar.display().endswith(" 0/4\r")


@pytest.mark.parametrize("steps", [0, 1, 3, 7, 12])
def test_filled_cells_never_exceed_progress(steps):
    bar = ProgressBar(12, 12)
    for _ in range(steps):
        bar.advance()
    assert bar.current == steps
    assert bar.display().count("#") == steps


def test_set_current_adds():
    bar = ProgressBar(10, 10)
    bar.set_current(3)
    bar.set_current(2)
    assert bar.current == 5


def test_display_extra_places_text():
    bar = ProgressBar(2, 4)
    bar.advance()
    text = bar.display_extra(" done", "load ")
    assert text.startswith(" load [")
    assert text.endswith(" 1/2 done\r")


def test_str_matches_display():
    bar = ProgressBar(3, 6)
    bar.advance()
    assert str(bar) == bar.display()


def test_zero_total():
    assert ProgressBar(0, 5).display().count("#") == 0