"""
Scene aggregation.

Owns the output of one compile run: path objects in drawing order, the
deduplicated paint registry, and the accumulated bounding rectangle.
Everything here is append/union only.
"""

import itertools
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import NewType

from turtlescene.config import OPAQUE_ALPHA, TRACE
from turtlescene.geometry.rect import Rect
from turtlescene.geometry.stroke import Outline

logger = logging.getLogger(__name__)

PaintRef = NewType("PaintRef", int)
ObjectId = NewType("ObjectId", int)


@dataclass(frozen=True)
class Paint:
    """RGBA paint; program colors are always opaque"""

    r: int
    g: int
    b: int
    a: int = OPAQUE_ALPHA

    @classmethod
    def from_rgb(cls, rgb: tuple[int, int, int]) -> "Paint":
        r, g, b = rgb
        return cls(r, g, b)

    @property
    def rgba(self) -> tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)


class PathObjectKind(Enum):
    FILL = "fill"
    STROKE = "stroke"


@dataclass(frozen=True)
class PathObject:
    outline: Outline
    paint: PaintRef
    id: ObjectId
    kind: PathObjectKind


@dataclass
class Scene:
    """Aggregate geometric output of one compile run"""

    bounds: Rect = field(default_factory=Rect)
    view_box: Rect = field(default_factory=Rect)
    objects: list[PathObject] = field(default_factory=list)
    paints: list[Paint] = field(default_factory=list)

    def paint_for(self, obj: PathObject) -> Paint:
        return self.paints[obj.paint]

    def is_empty(self) -> bool:
        return not self.objects


class SceneBuilder:
    """
    Builds a Scene through append/union-only operations.

    Object ids come from a counter that survives reset(), so an id is never
    handed out twice within one run.
    """

    def __init__(self):
        self.scene = Scene()
        self._paint_refs: dict[Paint, PaintRef] = {}
        self._ids = itertools.count(1)

    def reset(self) -> None:
        """Replace the scene with an empty one; the id counter keeps running"""
        self.scene = Scene()
        self._paint_refs = {}

    def register_paint(self, rgb: tuple[int, int, int]) -> PaintRef:
        """
        Return the reference for a color, registering it on first use

        Args:
            rgb: (r, g, b) channels 0..255

        Returns:
            Index of the paint in scene.paints; stable for the run
        """
        paint = Paint.from_rgb(rgb)
        ref = self._paint_refs.get(paint)
        if ref is None:
            ref = PaintRef(len(self.scene.paints))
            self.scene.paints.append(paint)
            self._paint_refs[paint] = ref
            logger.debug(f"Registered paint #{ref} rgb={rgb}")
        return ref

    def add_path_object(
        self, outline: Outline, paint: PaintRef, kind: PathObjectKind = PathObjectKind.STROKE
    ) -> ObjectId:
        """Append a path object and union its outline bounds into the scene"""
        object_id = ObjectId(next(self._ids))
        self.scene.objects.append(PathObject(outline, paint, object_id, kind))
        self.extend_bounds(outline.bounds())
        logger.log(TRACE, f"Added {kind.value} object #{object_id} paint=#{paint}")
        return object_id

    def extend_bounds(self, area: Rect | tuple[float, float]) -> None:
        """Grow the scene bounds over a point (x, y) or a Rect"""
        if isinstance(area, Rect):
            self.scene.bounds = self.scene.bounds.union_rect(area)
        else:
            x, y = area
            self.scene.bounds = self.scene.bounds.union_point(float(x), float(y))

    def finish(self) -> Scene:
        self.scene.view_box = self.scene.bounds
        return self.scene
