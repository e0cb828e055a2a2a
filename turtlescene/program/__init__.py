"""
Turtle program front end: command types, keyword registry and parser.
"""

from .commands import Command, Program
from .parser import Token, TurtleParser, parse_program
from .registry import ArgKind, KeywordRegistry, register_keyword

__all__ = [
    "ArgKind",
    "Command",
    "KeywordRegistry",
    "Program",
    "Token",
    "TurtleParser",
    "parse_program",
    "register_keyword",
]
