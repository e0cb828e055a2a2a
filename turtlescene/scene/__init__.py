from .diagnostics import DiagnosticFlag, DiagnosticFlags
from .scene import (
    ObjectId,
    Paint,
    PaintRef,
    PathObject,
    PathObjectKind,
    Scene,
    SceneBuilder,
)

__all__ = [
    "DiagnosticFlag",
    "DiagnosticFlags",
    "ObjectId",
    "Paint",
    "PaintRef",
    "PathObject",
    "PathObjectKind",
    "Scene",
    "SceneBuilder",
]
