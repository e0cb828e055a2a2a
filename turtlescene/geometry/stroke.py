"""
Stroke-to-fill geometry.

Converts a pen-down segment plus a stroke width into a closed, fillable
outline. The outline is the segment offset symmetrically along its normal
by half the effective width (butt caps), so a stroke never extends past
its endpoints along the segment direction.
"""

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field

import numpy as np

from turtlescene.config import HAIRLINE_STROKE_WIDTH

from .rect import Rect

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Outline:
    """
    Closed fillable shape made of line segments.

    Each contour is an (N, 2) float array of vertices; the closing segment
    from the last vertex back to the first is implicit.
    """

    contours: tuple[np.ndarray, ...] = field(default_factory=tuple)

    def segments(self) -> Iterator[tuple[np.ndarray, np.ndarray]]:
        """Yield (from, to) line segments, closing segment included"""
        for contour in self.contours:
            n = len(contour)
            for i in range(n):
                yield contour[i], contour[(i + 1) % n]

    def bounds(self) -> Rect:
        if not self.contours:
            return Rect()
        return Rect.from_points(np.vstack(self.contours))

    def area(self) -> float:
        """Absolute filled area (shoelace formula summed over contours)"""
        total = 0.0
        for contour in self.contours:
            x = contour[:, 0]
            y = contour[:, 1]
            total += 0.5 * abs(float(np.dot(x, np.roll(y, -1)) - np.dot(y, np.roll(x, -1))))
        return total


def effective_stroke_width(width: float) -> float:
    """Requested width clamped up to the hairline minimum"""
    return max(float(width), HAIRLINE_STROKE_WIDTH)


def stroke_segment(start, end, width: float) -> Outline:
    """
    Build the filled outline of a stroked straight segment

    Args:
        start: (x, y) first endpoint
        end: (x, y) second endpoint
        width: Requested stroke width; raised to the hairline minimum

    Returns:
        Outline with a single four-vertex contour, counter-clockwise for
        a segment pointing along +x. A zero-length segment yields a square
        of side equal to the effective width centered on the point.

    Raises:
        ValueError: If an endpoint coordinate or the width is not finite
    """
    p0 = np.asarray(start, dtype=float)
    p1 = np.asarray(end, dtype=float)
    if not (np.all(np.isfinite(p0)) and np.all(np.isfinite(p1)) and np.isfinite(width)):
        raise ValueError(f"Stroke inputs must be finite: start={start}, end={end}, width={width}")
    half = effective_stroke_width(width) / 2.0

    direction = p1 - p0
    length = float(np.hypot(direction[0], direction[1]))
    if length == 0.0:
        logger.debug(f"Zero-length stroke at ({p0[0]}, {p0[1]}), emitting dot")
        corners = np.array([[-half, -half], [half, -half], [half, half], [-half, half]])
        return Outline((p0 + corners,))

    normal = np.array([-direction[1], direction[0]]) / length * half
    contour = np.array([p0 - normal, p1 - normal, p1 + normal, p0 + normal])
    return Outline((contour,))
