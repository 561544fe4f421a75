import math

import numpy as np
import pytest

from core.classifier import classify_sign, find_container, signed_loop_area
from core.errors import NonSimplePolygonWarning
from core.models import Axis, Projection, Side
from core.planar import point_in_polygon, project_loop, signed_area_2d
from core.projection import select_projection
from helpers import square, square_in_plane

XY = Projection(Axis.Z, 1.0)


def test_concentric_squares_containment(concentric_squares):
    outer, inner = concentric_squares
    assert point_in_polygon(inner, XY, outer[0]) == Side.OUTSIDE
    assert point_in_polygon(outer, XY, inner[0]) == Side.INSIDE


def test_concentric_squares_signs_and_areas(concentric_squares):
    assert classify_sign(0, concentric_squares, XY) == 1
    assert classify_sign(1, concentric_squares, XY) == -1

    outer = signed_loop_area(0, concentric_squares, XY)
    inner = signed_loop_area(1, concentric_squares, XY)
    assert outer.area == pytest.approx(100.0)
    assert inner.area == pytest.approx(-16.0)
    assert outer.parent is None
    assert inner.parent == 0


def test_sign_does_not_depend_on_winding_or_order():
    loops = [square(4.0, ccw=True), square(10.0, ccw=False)]
    assert signed_loop_area(0, loops, XY).area == pytest.approx(-16.0)
    assert signed_loop_area(1, loops, XY).area == pytest.approx(100.0)


def test_single_loop_is_positive():
    loops = [square(3.0, ccw=False)]
    assert classify_sign(0, loops, XY) == 1
    assert signed_loop_area(0, loops, XY).area == pytest.approx(9.0)


def test_disjoint_loops_are_both_positive():
    loops = [square(2.0, center=(0.0, 0.0)), square(2.0, center=(10.0, 0.0))]
    assert [classify_sign(i, loops, XY) for i in range(2)] == [1, 1]


def test_first_vertex_on_sibling_boundary_is_not_nested():
    # the small square shares its first corner with the big one
    big = square(4.0, center=(0.0, 0.0))
    small = np.array([[-2.0, -2.0, 0.0], [-1.0, -2.0, 0.0], [-1.0, -1.0, 0.0], [-2.0, -1.0, 0.0], [-2.0, -2.0, 0.0]])
    assert find_container(1, [big, small], XY) is None


def test_island_in_hole_is_single_level():
    # solid(10) > hole(6) > island(2): the island is inside two siblings and
    # only a single flip is applied; the last container in order is its parent
    loops = [square(10.0), square(6.0, ccw=False), square(2.0)]
    island = signed_loop_area(2, loops, XY)
    assert island.area == pytest.approx(-4.0)
    assert island.parent == 1
    assert signed_loop_area(1, loops, XY).area == pytest.approx(-36.0)


def test_non_simple_loop_gets_a_warning():
    bow = np.array([[0.0, 0.0, 0.0], [2.0, 2.0, 0.0], [2.0, 0.0, 0.0], [0.0, 2.0, 0.0], [0.0, 0.0, 0.0]])
    section = signed_loop_area(0, [bow], XY, plane_index=3)
    assert section.is_simple is False
    assert isinstance(section.warning, NonSimplePolygonWarning)
    assert (section.warning.plane_index, section.warning.loop_index) == (3, 0)


def test_simple_loop_has_no_warning(concentric_squares):
    assert signed_loop_area(0, concentric_squares, XY).warning is None


@pytest.mark.parametrize(
    "normal, axis",
    [((5.0, 1.0, 1.0), Axis.X), ((1.0, 5.0, 1.0), Axis.Y), ((1.0, 1.0, 5.0), Axis.Z), ((1.0, 2.0, 3.0), Axis.Z)],
)
def test_area_is_recovered_for_every_dropped_axis(normal, axis):
    side = 3.0
    loops = [square_in_plane(normal, side, origin=(1.0, -2.0, 0.5))]
    proj = select_projection(normal)
    assert proj.dropped == axis

    reported = signed_loop_area(0, loops, proj).area
    assert reported == pytest.approx(side * side)

    shoelace = signed_area_2d(project_loop(loops[0], proj))
    assert reported * proj.cos_theta == pytest.approx(abs(shoelace))


def test_tilted_hole_is_negative():
    n = (0.0, 1.0, 1.0)
    loops = [square_in_plane(n, 8.0), square_in_plane(n, 2.0)]
    proj = select_projection(n)
    assert proj.cos_theta == pytest.approx(1.0 / math.sqrt(2.0))
    assert signed_loop_area(0, loops, proj).area == pytest.approx(64.0)
    assert signed_loop_area(1, loops, proj).area == pytest.approx(-4.0)


def test_later_disjoint_sibling_keeps_the_hole():
    # the disjoint square is tested last and does not hold the hole's vertex
    loops = [square(10.0), square(4.0), square(2.0, center=(30.0, 0.0))]
    assert classify_sign(1, loops, XY) == -1
    assert find_container(1, loops, XY) == 0
