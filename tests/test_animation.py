import pytest

from quadkit.animation import AnimatedSprite, Animation
from quadkit.rect import Rect
from quadkit.vector import Vec2

ANIMATIONS = [
    Animation(name="idle", row=0, frames=20, fps=12),
    Animation(name="run", row=1, frames=15, fps=15),
]


def make_sprite(playing=True):
    return AnimatedSprite(15, 20, ANIMATIONS, playing)


def test_initial_frame():
    frame = make_sprite().frame()
    assert frame.source_rect == Rect(0, 0, 15, 20)
    assert frame.dest_size == Vec2(15, 20)


def test_update_advances_after_period():
    sprite = make_sprite()
    sprite.update(0.1)
    assert sprite.frame().source_rect == Rect(15, 0, 15, 20)


def test_update_accumulates_time():
    sprite = make_sprite()
    sprite.update(0.05)
    assert sprite.frame().source_rect.x == 0
    sprite.update(0.05)
    assert sprite.frame().source_rect.x == 15


def test_not_playing_does_not_advance():
    sprite = make_sprite(playing=False)
    sprite.update(1.0)
    assert sprite.frame().source_rect == make_sprite().frame().source_rect


def test_set_animation_wraps_frame():
    sprite = make_sprite()
    sprite.set_frame(17)
    sprite.set_animation(1)
    assert sprite.current_animation() == 1
    reference = make_sprite()
    reference.set_animation(1)
    reference.set_frame(17 % 15)
    assert sprite.frame() == reference.frame()
    assert sprite.frame().source_rect.y == 20


def test_update_wraps_frame_number():
    sprite = make_sprite()
    sprite.set_frame(19)
    sprite.update(0.1)
    assert sprite.frame().source_rect.x == 0


def test_set_animation_out_of_range():
    sprite = make_sprite()
    with pytest.raises(IndexError):
        sprite.set_animation(5)


def test_zero_fps_never_advances():
    sprite = AnimatedSprite(8, 8, [Animation("still", 0, 4, 0)], True)
    sprite.update(10.0)
    assert sprite.frame().source_rect.x == 0