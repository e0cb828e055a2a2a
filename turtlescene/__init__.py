"""
turtlescene Python Package

Compiles small turtle-graphics programs into vector scenes of stroked path
outlines with deduplicated paints.

Key components:
- compile_program / compile_file: text (or file) to CompileResult
- TurtleParser: program text to Command list
- TurtleInterpreter: Command list to Scene plus DiagnosticFlags
- Scene, PathObject, Paint: the output handed to downstream consumers
"""

from ._version import __version__
from .compiler import compile_file, compile_program
from .interpreter import CompileResult, TurtleInterpreter, TurtleState
from .program import TurtleParser
from .scene import DiagnosticFlag, DiagnosticFlags, Paint, PathObject, PathObjectKind, Scene
from .utils.errors import ParseError

__all__ = [
    "__version__",
    "compile_program",
    "compile_file",
    "CompileResult",
    "TurtleInterpreter",
    "TurtleState",
    "TurtleParser",
    "DiagnosticFlag",
    "DiagnosticFlags",
    "Paint",
    "PathObject",
    "PathObjectKind",
    "Scene",
    "ParseError",
]
