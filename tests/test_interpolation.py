import pytest

from stormkit.math.interpolation import Interpolation


def test_new_starts_at_start():
    interp = Interpolation(3.0, 9.0)
    assert interp.progress == 0.0
    assert interp.get() == 3.0
    assert (interp.start, interp.end) == (3.0, 9.0)


def test_advance_is_capped_at_end():
    interp = Interpolation(3.0, 9.0)
    interp.advance(0.75)
    interp.advance(0.75)
    assert interp.progress == 1.0
    assert interp.get() == pytest.approx(9.0)


def test_advance_moves_toward_end():
    interp = Interpolation(0.0, 10.0)
    before = interp.get()
    interp.advance(0.3)
    assert before < interp.get() < 10.0


def test_set_restarts():
    interp = Interpolation(0.0, 10.0)
    interp.advance(0.5)
    interp.set(4.0, 8.0)
    assert interp.progress == 0.0
    assert interp.get() == 4.0
    assert interp.end == 8.0


def test_update_continues_from_current_value():
    interp = Interpolation(0.0, 10.0)
    interp.advance(0.5)
    current = interp.get()
    interp.update(20.0)
    assert interp.start == current
    assert interp.end == 20.0
    assert interp.progress == 0.0
    assert interp.get() == current