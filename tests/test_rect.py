from quadkit.rect import Rect, RectOffset
from quadkit.vector import Vec2


def test_edges():
    r = Rect(1.0, 2.0, 3.0, 4.0)
    assert r.left() == r.x
    assert r.top() == r.y
    assert r.right() - r.left() == r.w
    assert r.bottom() - r.top() == r.h
    assert r.point() == Vec2(1.0, 2.0)
    assert r.size() == Vec2(3.0, 4.0)


def test_center_inside():
    r = Rect(0.0, 0.0, 4.0, 2.0)
    assert r.center() == Vec2(2.0, 1.0)
    assert r.contains(r.center())


def test_contains_edges():
    r = Rect(0.0, 0.0, 10.0, 10.0)
    assert r.contains(Vec2(0.0, 0.0))
    assert not r.contains(Vec2(10.0, 5.0))
    assert not r.contains(Vec2(5.0, 10.0))
    assert not r.contains(Vec2(-0.1, 5.0))


def test_move_to_and_scale():
    r = Rect(0.0, 0.0, 2.0, 3.0)
    r.move_to(Vec2(5.0, 6.0))
    r.scale(2.0, 0.5)
    assert r.point() == Vec2(5.0, 6.0)
    assert r.w == 2.0 * 2.0
    assert r.h == 3.0 * 0.5


def test_overlaps_touching_edges():
    a = Rect(0.0, 0.0, 10.0, 10.0)
    b = Rect(10.0, 0.0, 5.0, 5.0)
    c = Rect(20.0, 20.0, 1.0, 1.0)
    assert a.overlaps(b)
    assert b.overlaps(a)
    assert not a.overlaps(c)


def test_intersect():
    a = Rect(0.0, 0.0, 10.0, 10.0)
    b = Rect(5.0, 5.0, 10.0, 10.0)
    assert a.intersect(b) == Rect(5.0, 5.0, 5.0, 5.0)
    assert a.intersect(b) == b.intersect(a)
    assert a.intersect(Rect(20.0, 20.0, 1.0, 1.0)) is None


def test_combine_with_holds_both():
    a = Rect(0.0, 0.0, 2.0, 2.0)
    b = Rect(5.0, -3.0, 1.0, 1.0)
    combined = a.combine_with(b)
    assert combined.left() == min(a.left(), b.left())
    assert combined.top() == min(a.top(), b.top())
    assert combined.right() == max(a.right(), b.right())
    assert combined.bottom() == max(a.bottom(), b.bottom())


def test_offset_round_trip():
    r = Rect(1.0, 2.0, 3.0, 4.0)
    shift = Vec2(7.0, -2.0)
    assert r.offset(shift).offset(-shift) == r
    assert r.offset(shift).size() == r.size()


def test_rect_offset_fields():
    margins = RectOffset(1.0, 2.0, 3.0, 4.0)
    assert (margins.left, margins.right, margins.top, margins.bottom) == (
        1.0,
        2.0,
        3.0,
        4.0,
    )