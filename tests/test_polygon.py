import copy
import logging
import math

import numpy as np
import pytest

from frameshapes import EmptyPolygonError, FrameRect, InvalidArgument, Point, Polygon

UNIT_SQUARE = [(0, 0), (1, 0), (1, 1), (0, 1)]
ARROW = [(0, 0), (4, 1), (5, 4), (5, 8), (4, 10), (3, 8), (2, 5), (-1, 1)]


def test_unit_square_area_and_centroid():
    poly = Polygon(UNIT_SQUARE)

    assert poly.area() == 1.0
    assert poly.signed_area() == 1.0
    assert poly.centroid == Point(0.5, 0.5)
    assert poly.frame_rect() == FrameRect(1, 1, Point(0.5, 0.5))


def test_clockwise_winding_gives_negative_signed_area_and_same_centroid():
    poly = Polygon(list(reversed(UNIT_SQUARE)))

    assert poly.signed_area() == -1.0
    assert poly.area() == 1.0
    assert poly.centroid.x == pytest.approx(0.5)
    assert poly.centroid.y == pytest.approx(0.5)


def test_eight_vertex_polygon_area_and_frame():
    poly = Polygon(ARROW)

    assert math.isclose(poly.area(), 28.5)
    assert poly.frame_rect() == FrameRect(6, 10, Point(2, 5))
    # The centroid is area-weighted, not the frame midpoint.
    assert poly.centroid != poly.frame_rect().position


def test_triangle_centroid_is_vertex_mean():
    poly = Polygon([(0, 0), (6, 0), (0, 3)])

    assert poly.centroid.x == pytest.approx(2.0)
    assert poly.centroid.y == pytest.approx(1.0)


@pytest.mark.parametrize('points', [[], [(0, 0)], [(0, 0), (1, 1)]])
def test_fewer_than_three_vertices_is_rejected(points):
    with pytest.raises(InvalidArgument) as exc:
        Polygon(points)

    assert 'count must not be less than 3' in str(exc.value)


def test_malformed_points_are_rejected():
    with pytest.raises(InvalidArgument):
        Polygon([(0, 0), (1, 0), (1, 1, 1)])
    with pytest.raises(InvalidArgument):
        Polygon(np.zeros((4, 3)))


def test_construction_copies_input():
    points = np.array(UNIT_SQUARE, dtype=float)
    poly = Polygon(points)

    points[0] = (100, 100)

    assert poly.vertices[0] == Point(0, 0)


def test_move_to_places_centroid():
    poly = Polygon(ARROW)
    centroid = poly.centroid

    poly.move_to((10, 20))

    assert poly.centroid.x == pytest.approx(10)
    assert poly.centroid.y == pytest.approx(20)
    dx, dy = 10 - centroid.x, 20 - centroid.y
    assert poly.vertices[0].x == pytest.approx(dx)
    assert poly.vertices[0].y == pytest.approx(dy)


def test_move_by_translates_frame_and_keeps_size():
    poly = Polygon(ARROW)

    poly.move_by(-3, 2.5)

    frame = poly.frame_rect()
    assert frame.position == Point(-1, 7.5)
    assert (frame.width, frame.height) == (6.0, 10.0)
    assert math.isclose(poly.area(), 28.5)


def test_scale_about_centroid_keeps_centroid():
    poly = Polygon(ARROW)
    before = poly.centroid

    poly.scale(2)

    assert poly.centroid == before
    assert math.isclose(poly.area(), 4 * 28.5)
    recomputed = poly.compute_centroid()
    assert recomputed.x == pytest.approx(before.x)
    assert recomputed.y == pytest.approx(before.y)


def test_degenerate_polygon_has_non_finite_centroid(caplog):
    with caplog.at_level(logging.WARNING, logger='frameshapes.shapes.polygon'):
        poly = Polygon([(0, 0), (1, 1), (2, 2)])

    assert poly.area() == 0.0
    assert not math.isfinite(poly.centroid.x)
    assert 'zero signed area' in caplog.text


def test_copy_is_deep():
    original = Polygon(UNIT_SQUARE)

    for duplicate in (original.copy(), copy.copy(original), copy.deepcopy(original)):
        duplicate.move_by(5, 5)
        duplicate.scale(3)
        assert not duplicate.shares_vertices_with(original)

    assert original.vertices == tuple(Point(x, y) for x, y in UNIT_SQUARE)
    assert original.centroid == Point(0.5, 0.5)


def test_assign_copies_state():
    target = Polygon(ARROW)
    source = Polygon(UNIT_SQUARE)

    assert target.assign(source) is target
    source.move_by(1, 1)

    assert target == Polygon(UNIT_SQUARE)
    assert not target.shares_vertices_with(source)
    assert target.assign(target) is target


def test_transfer_moves_vertices_and_empties_source():
    source = Polygon(UNIT_SQUARE)
    store = source._vertices

    moved = source.transfer()

    assert moved._vertices is store
    assert moved.area() == 1.0
    assert source.is_empty
    assert source.vertex_count == 0
    assert len(source) == 0
    assert source.vertices == ()
    assert repr(source) == 'Polygon(<empty>)'


@pytest.mark.parametrize(
    'use',
    [
        lambda p: p.area(),
        lambda p: p.frame_rect(),
        lambda p: p.centroid,
        lambda p: p.move_to((0, 0)),
        lambda p: p.move_by(1, 1),
        lambda p: p.scale(2),
        lambda p: p.to_dict(),
    ],
)
def test_empty_polygon_rejects_geometric_use(use):
    source = Polygon(UNIT_SQUARE)
    source.transfer()

    with pytest.raises(EmptyPolygonError):
        use(source)


def test_take_moves_and_empty_polygon_can_be_reassigned():
    target = Polygon(ARROW)
    source = Polygon(UNIT_SQUARE)

    target.take(source)

    assert target.area() == 1.0
    assert source.is_empty

    source.assign(target)
    assert source.area() == 1.0
    assert not source.shares_vertices_with(target)
    assert target.take(target) is target


def test_vertices_snapshot_is_detached():
    poly = Polygon(UNIT_SQUARE)
    snapshot = poly.vertices

    poly.move_by(1, 0)

    assert snapshot[1] == Point(1, 0)
    assert poly.vertices[1] == Point(2, 0)


def test_to_dict():
    assert Polygon(UNIT_SQUARE).to_dict() == {
        'kind': 'polygon',
        'points': [[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 1.0]],
    }
