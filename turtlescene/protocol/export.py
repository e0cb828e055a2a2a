"""
Scene export helpers.

This module centralizes encoding of a finished Scene into plain JSON-ready
structures for consumers living outside the Python process.
"""

import json
import logging

import numpy as np

from turtlescene.geometry.rect import Rect
from turtlescene.interpreter import CompileResult
from turtlescene.scene.diagnostics import DiagnosticFlags
from turtlescene.scene.scene import PathObject, Scene

logger = logging.getLogger(__name__)

# Decimal places kept for coordinates in exported geometry
COORD_PRECISION = 6

__all__ = [
    "encode_rect",
    "encode_path_object",
    "scene_to_dict",
    "diagnostics_to_list",
    "result_to_dict",
    "encode_scene",
    "encode_result",
]


def encode_rect(rect: Rect) -> list[float]:
    """[min_x, min_y, max_x, max_y]"""
    return [round(v, COORD_PRECISION) for v in rect.to_list()]


def encode_path_object(obj: PathObject) -> dict:
    contours = [np.round(c, COORD_PRECISION).tolist() for c in obj.outline.contours]
    return {
        "id": int(obj.id),
        "kind": obj.kind.value,
        "paint": int(obj.paint),
        "contours": contours,
    }


def scene_to_dict(scene: Scene) -> dict:
    """JSON-compatible representation of a Scene"""
    return {
        "bounds": encode_rect(scene.bounds),
        "view_box": encode_rect(scene.view_box),
        "paints": [list(p.rgba) for p in scene.paints],
        "objects": [encode_path_object(o) for o in scene.objects],
    }


def diagnostics_to_list(flags: DiagnosticFlags) -> list[str]:
    """Flag names in canonical order"""
    return flags.names()


def result_to_dict(result: CompileResult) -> dict:
    return {
        "scene": scene_to_dict(result.scene),
        "diagnostics": diagnostics_to_list(result.diagnostics),
    }


def encode_scene(scene: Scene, indent: int | None = None) -> str:
    return json.dumps(scene_to_dict(scene), indent=indent)


def encode_result(result: CompileResult, indent: int | None = None) -> str:
    payload = json.dumps(result_to_dict(result), indent=indent)
    logger.debug(f"Encoded result: {len(result.scene.objects)} objects, {len(payload)} bytes")
    return payload
