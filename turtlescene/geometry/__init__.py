from .rect import Rect
from .stroke import Outline, effective_stroke_width, stroke_segment

__all__ = ["Rect", "Outline", "effective_stroke_width", "stroke_segment"]
