import pytest

from grid_core.rect import Rect


def test_rect_edges():
    rect = Rect(10, 5, 30, 20)
    assert (rect.left, rect.top, rect.right, rect.bottom) == (10, 5, 40, 25)


def test_rect_area_and_empty():
    assert Rect(0, 0, 4, 5).area == 20
    assert not Rect(0, 0, 4, 5).is_empty
    assert Rect(0, 0, 0, 5).is_empty
    assert Rect(0, 0, 0, 5).area == 0


def test_rect_is_immutable():
    rect = Rect(0, 0, 1, 1)
    with pytest.raises(AttributeError):
        rect.width = 2


def test_rect_structural_equality():
    assert Rect(1, 2, 3, 4) == Rect(1, 2, 3, 4)
    assert len({Rect(1, 2, 3, 4), Rect(1, 2, 3, 4)}) == 1


def test_intersection_overlap():
    assert Rect(0, 0, 10, 10).intersection(Rect(5, 5, 10, 10)) == Rect(5, 5, 5, 5)


def test_intersection_disjoint_is_empty():
    overlap = Rect(0, 0, 10, 10).intersection(Rect(20, 20, 5, 5))
    assert overlap.area == 0
    assert overlap.is_empty


def test_touching_edges_do_not_intersect():
    assert not Rect(0, 0, 10, 10).intersects(Rect(10, 0, 10, 10))
    assert Rect(0, 0, 10, 10).intersects(Rect(9, 0, 10, 10))


def test_contains():
    outer = Rect(0, 0, 100, 100)
    assert outer.contains(Rect(0, 0, 100, 100))
    assert outer.contains(Rect(10, 10, 5, 5))
    assert not outer.contains(Rect(90, 90, 20, 5))
