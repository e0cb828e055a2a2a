import math

import numpy as np
import pytest

from turtlescene.geometry import Outline, Rect, effective_stroke_width, stroke_segment
from tests.utils import assert_points_close, stroke_rect


def test_rect_unions_only_grow():
    r = Rect()
    assert r.is_degenerate
    r2 = r.union_point(3.0, -2.0)
    assert r2 == Rect(0.0, -2.0, 3.0, 0.0)
    assert r2.contains(r)
    r3 = r2.union_rect(Rect(-1.0, -1.0, 1.0, 5.0))
    assert r3 == Rect(-1.0, -2.0, 3.0, 5.0)
    assert r3.contains(r2)
    assert r3.width == 4.0 and r3.height == 7.0


def test_rect_from_points():
    assert Rect.from_points([[1, 5], [-2, 3], [0, 7]]) == Rect(-2.0, 3.0, 1.0, 7.0)


def test_effective_width_clamps_to_hairline(hairline):
    assert effective_stroke_width(0.0) == hairline
    assert effective_stroke_width(-4.0) == hairline
    assert effective_stroke_width(2.5) == 2.5


def test_horizontal_stroke(hairline):
    outline = stroke_segment((0.0, 0.0), (10.0, 0.0), 0.0)
    assert len(outline.contours) == 1
    assert_points_close(outline.contours[0], stroke_rect(0.0, 10.0, 0.0, hairline))
    assert outline.bounds() == Rect(0.0, -hairline / 2, 10.0, hairline / 2)
    assert outline.area() == pytest.approx(10.0 * hairline)


def test_diagonal_stroke_is_offset_along_normal():
    outline = stroke_segment((0.0, 0.0), (3.0, 4.0), 2.0)
    pts = outline.contours[0]
    # Unit normal of (3, 4) is (-0.8, 0.6); half width is 1
    n = np.array([-0.8, 0.6])
    assert_points_close(pts, [-n, [3.0, 4.0] - n, [3.0, 4.0] + n, n])
    assert outline.area() == pytest.approx(5.0 * 2.0)


def test_stroke_is_pure():
    a = stroke_segment((1.0, 2.0), (4.0, -1.0), 0.5)
    b = stroke_segment((1.0, 2.0), (4.0, -1.0), 0.5)
    assert np.array_equal(a.contours[0], b.contours[0])


def test_zero_length_stroke_is_square_dot():
    outline = stroke_segment((2.0, 2.0), (2.0, 2.0), 1.0)
    assert outline.bounds() == Rect(1.5, 1.5, 2.5, 2.5)
    assert outline.area() == pytest.approx(1.0)


def test_outline_segments_are_closed():
    outline = stroke_segment((0.0, 0.0), (1.0, 0.0), 1.0)
    segments = list(outline.segments())
    assert len(segments) == 4
    assert np.array_equal(segments[-1][1], segments[0][0])
    for (_, end), (start, _) in zip(segments, segments[1:]):
        assert np.array_equal(end, start)


def test_empty_outline():
    outline = Outline()
    assert list(outline.segments()) == []
    assert outline.bounds() == Rect()
    assert outline.area() == 0.0


def test_stroke_width_is_respected_for_any_angle():
    for deg in range(0, 360, 15):
        rad = math.radians(deg)
        end = (5 * math.cos(rad), 5 * math.sin(rad))
        outline = stroke_segment((0.0, 0.0), end, 0.4)
        assert outline.area() == pytest.approx(5 * 0.4)


@pytest.mark.parametrize(
    "start, end, width",
    [
        ((0.0, 0.0), (math.inf, 0.0), 1.0),
        ((math.nan, 0.0), (1.0, 0.0), 1.0),
        ((0.0, 0.0), (1.0, 0.0), math.inf),
    ],
)
def test_stroke_rejects_non_finite_input(start, end, width):
    with pytest.raises(ValueError):
        stroke_segment(start, end, width)
