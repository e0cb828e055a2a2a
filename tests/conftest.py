"""
Pytest configuration and shared fixtures for turtlescene tests.

Provides parser/interpreter fixtures, a compile helper and geometry
assertions used across the unit and integration suites.
"""

import os
import sys
import logging

import pytest

# Add the parent directory to Python path so we can import the package
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from turtlescene import compile_program
from turtlescene.config import HAIRLINE_STROKE_WIDTH
from turtlescene.interpreter import TurtleInterpreter
from turtlescene.program.parser import TurtleParser

logger = logging.getLogger(__name__)


@pytest.fixture
def parser() -> TurtleParser:
    return TurtleParser()


@pytest.fixture
def interpreter() -> TurtleInterpreter:
    return TurtleInterpreter()


@pytest.fixture
def compile_text():
    """Compile program text and return the CompileResult."""
    return compile_program


@pytest.fixture
def hairline() -> float:
    return HAIRLINE_STROKE_WIDTH

