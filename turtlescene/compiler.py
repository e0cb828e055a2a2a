"""
Compile entry points: program text in, scene and diagnostics out.
"""

import logging
from pathlib import Path

from turtlescene.interpreter import CompileResult, TurtleInterpreter
from turtlescene.program.parser import TurtleParser

logger = logging.getLogger(__name__)


def compile_program(text: str, parser: TurtleParser | None = None) -> CompileResult:
    """
    Parse and interpret a turtle program

    Args:
        text: Program text
        parser: Parser to use; a fresh one by default

    Returns:
        CompileResult holding the finished Scene and DiagnosticFlags

    Raises:
        ParseError: If the text does not conform to the grammar. Nothing is
            interpreted in that case.
    """
    commands = (parser or TurtleParser()).parse_program(text)
    return TurtleInterpreter().run(commands)


def compile_file(path: str | Path, encoding: str = "utf-8") -> CompileResult:
    """
    Compile a turtle program stored in a file

    Raises:
        OSError: If the file cannot be read
        UnicodeDecodeError: If the file is not valid text in the given encoding
        ParseError: If the program does not parse
    """
    path = Path(path)
    logger.info(f"Compiling {path}")
    return compile_program(path.read_text(encoding=encoding))
