import pytest

from guiug.layout.anchor import (
    FULL,
    Center,
    End,
    Position,
    Start,
    Stretch,
    center,
    end,
    resolve_anchor,
    start,
    stretch,
)
from guiug.layout.geometry import Dimension, Rect
from guiug.layout.size import ZERO, ParentHeight, ParentWidth, Pixel, ScreenWidth

SCREEN = Dimension(800, 600)


def _axis(anchor, origin: int = 100, length: int = 200) -> tuple[int, int]:
    return resolve_anchor(anchor, origin, length, Dimension(length, length), SCREEN)


def test_constructors_build_variants() -> None:
    assert start(ZERO, Pixel(1)) == Start(Pixel(0), Pixel(1))
    assert center(ZERO, Pixel(1)) == Center(Pixel(0), Pixel(1))
    assert end(ZERO, Pixel(1)) == End(Pixel(0), Pixel(1))
    assert stretch(ZERO, Pixel(1)) == Stretch(Pixel(0), Pixel(1))


@pytest.mark.parametrize("origin", [-50, 0, 7, 100])
def test_start_with_zero_offset_keeps_parent_origin(origin: int) -> None:
    assert _axis(start(ZERO, Pixel(30)), origin=origin) == (origin, 30)


def test_start_offsets_from_parent_origin() -> None:
    assert _axis(start(Pixel(10), Pixel(30))) == (110, 30)


def test_center_places_child_in_the_middle() -> None:
    assert _axis(center(ZERO, Pixel(50))) == (175, 50)
    assert _axis(center(Pixel(10), Pixel(50))) == (185, 50)


def test_center_halves_truncate_toward_zero() -> None:
    # parent 101 wide -> half 50; child 31 wide -> half 15
    assert resolve_anchor(center(ZERO, Pixel(31)), 0, 101, Dimension(101, 1), SCREEN) == (35, 31)
    assert resolve_anchor(center(ZERO, Pixel(-3)), 0, 10, Dimension(10, 1), SCREEN) == (6, -3)


def test_end_measures_from_far_edge() -> None:
    assert _axis(end(ZERO, Pixel(50))) == (250, 50)
    assert _axis(end(Pixel(20), Pixel(50))) == (230, 50)


@pytest.mark.parametrize(("origin", "length"), [(0, 0), (0, 800), (-20, 35), (100, 200)])
def test_stretch_zero_is_identity(origin: int, length: int) -> None:
    assert _axis(stretch(ZERO, ZERO), origin=origin, length=length) == (origin, length)


def test_stretch_insets_both_edges() -> None:
    assert _axis(stretch(Pixel(10), Pixel(30))) == (110, 160)


def test_stretch_overflow_yields_negative_length() -> None:
    assert _axis(stretch(Pixel(150), Pixel(100))) == (250, -50)


def test_position_resolves_axes_independently() -> None:
    parent = Rect(10, 20, 200, 100)
    position = Position(
        start(ParentWidth(0.1), ParentWidth(0.5)),
        end(ParentHeight(0.1), ParentHeight(0.5)),
    )
    assert position.resolve(parent, SCREEN) == Rect(30, 60, 100, 50)


def test_position_ratios_use_parent_rect_dimension() -> None:
    parent = Rect(0, 0, 400, 100)
    position = Position(start(ZERO, ParentHeight(1.0)), start(ZERO, ParentWidth(0.5)))
    assert position.resolve(parent, SCREEN) == Rect(0, 0, 100, 200)


def test_position_screen_ratios_ignore_parent() -> None:
    parent = Rect(50, 50, 10, 10)
    position = Position(start(ZERO, ScreenWidth(0.2)), stretch(ZERO, ZERO))
    assert position.resolve(parent, SCREEN) == Rect(50, 50, 160, 10)


def test_full_position_returns_parent_rect() -> None:
    parent = Rect(3, 4, 50, 60)
    assert FULL.resolve(parent, SCREEN) == parent
