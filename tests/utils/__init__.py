"""
Test utilities package.

Provides geometry assertions shared by the turtlescene test suites.
"""

from .geometry import assert_points_close, stroke_rect

__all__ = [
    "assert_points_close",
    "stroke_rect",
]
