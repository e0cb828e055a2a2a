from .interpreter import CompileResult, TurtleInterpreter
from .state import TurtleState, normalize_heading

__all__ = ["CompileResult", "TurtleInterpreter", "TurtleState", "normalize_heading"]
