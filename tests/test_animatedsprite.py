from dungeoncrawl.graphics.animatedsprite import AnimatedSprite
from dungeoncrawl.graphics.sprite import Sprite


def _frames(count):
    return [Sprite(texture_id=i) for i in range(count)]


def test_default_is_invisible_single_empty_frame():
    anim = AnimatedSprite()
    assert anim.visible is False
    assert anim.number_of_frames() == 1
    assert anim.current_sprite() == Sprite()


def test_invisible_animation_does_not_advance():
    anim = AnimatedSprite()
    anim.update()
    anim.update()
    assert anim.current_sprite() == Sprite()


def test_frames_cycle_with_one_tick_per_frame():
    anim = AnimatedSprite(_frames(3), 1)
    assert anim.visible is True
    seen = [anim.current_sprite().texture_id]
    for _ in range(3):
        anim.update()
        seen.append(anim.current_sprite().texture_id)
    assert seen == [0, 1, 2, 0]


def test_ticks_per_frame_delays_first_advance():
    anim = AnimatedSprite(_frames(3), 2)
    anim.update()
    assert anim.current_sprite().texture_id == 0
    anim.update()
    assert anim.current_sprite().texture_id == 1
    # the tick counter keeps running, so later updates advance every tick
    anim.update()
    assert anim.current_sprite().texture_id == 2


def test_starting_frame():
    anim = AnimatedSprite(_frames(4), 1, 2)
    assert anim.current_sprite().texture_id == 2
    assert anim.number_of_frames() == 4


def test_flip_applies_to_every_frame():
    anim = AnimatedSprite(_frames(3), 1)
    anim.flip(True)
    flips = []
    for _ in range(3):
        flips.append(anim.current_sprite().flip)
        anim.update()
    assert flips == [True, True, True]


def test_frames_are_independent_of_callers_sprites():
    frames = _frames(2)
    anim = AnimatedSprite(frames, 1)
    frames[0].flip = True
    returned = anim.current_sprite()
    returned.angle = 45.0
    assert anim.current_sprite().flip is False
    assert anim.current_sprite().angle == 0.0