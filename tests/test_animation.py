import pytest

from game.coins.animation import SpriteAnimator, SpriteSheet
from game.coins.geometry import Rect


def make(start: int, end: int, loop: bool, delay: float = 100.0) -> SpriteAnimator:
    anim = SpriteAnimator()
    anim.configure(start, end, loop, delay)
    return anim


def test_configure_resets_state() -> None:
    anim = make(3, 5, True)
    anim.advance(150)
    anim.configure(6, 8, False, 50)
    assert anim.current_frame == 6
    assert anim.elapsed == 0.0
    assert not anim.finished


def test_advance_below_delay_keeps_frame() -> None:
    anim = make(0, 3, True)
    anim.advance(99)
    assert anim.current_frame == 0
    anim.advance(1)
    assert anim.current_frame == 1
    assert anim.elapsed == 0.0


def test_large_step_advances_several_frames() -> None:
    anim = make(0, 7, True)
    anim.advance(350)
    assert anim.current_frame == 3
    assert anim.elapsed == pytest.approx(50.0)


def test_loop_returns_to_start_after_full_cycle() -> None:
    anim = make(0, 7, True, 80)
    for _ in range(8):
        anim.advance(80)
    assert anim.current_frame == 0

    anim = make(9, 11, True, 150)
    anim.advance(3 * 150)
    assert anim.current_frame == 9


def test_non_looping_stops_on_last_frame() -> None:
    anim = make(3, 5, False, 100)
    anim.advance(250)
    assert anim.current_frame == 5
    anim.advance(10_000)
    assert anim.current_frame == 5
    assert anim.finished


def test_single_frame_animation_never_moves() -> None:
    anim = make(7, 7, False, 150)
    for _ in range(20):
        anim.advance(100)
        assert anim.current_frame == 7


def test_non_positive_step_is_ignored() -> None:
    anim = make(0, 3, True)
    anim.advance(0)
    anim.advance(-50)
    assert anim.current_frame == 0
    assert anim.elapsed == 0.0


@pytest.mark.parametrize("delay", [0, -10])
def test_non_positive_delay_rejected(delay: float) -> None:
    with pytest.raises(ValueError, match="delay"):
        SpriteAnimator().configure(0, 3, True, delay)


@pytest.mark.parametrize("start,end", [(4, 2), (-1, 2)])
def test_bad_frame_range_rejected(start: int, end: int) -> None:
    with pytest.raises(ValueError, match="frame range"):
        SpriteAnimator().configure(start, end, True, 100)


def test_sheet_source_rect_uses_rows_and_columns() -> None:
    sheet = SpriteSheet("player.png", columns=3, frame_width=48, frame_height=64)
    assert sheet.source_rect(0) == Rect(0, 0, 48, 64)
    assert sheet.source_rect(4) == Rect(48, 64, 48, 64)
    assert sheet.source_rect(11) == Rect(96, 192, 48, 64)


def test_sheet_needs_columns() -> None:
    with pytest.raises(ValueError):
        SpriteSheet("coin.png", columns=0, frame_width=32, frame_height=32)
