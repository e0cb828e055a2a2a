"""
Keyword registration system with decorator support.

This module provides a centralized registry mapping program keywords to the
command they build, enabling registration through decorators. The parser
looks keywords up here instead of carrying its own keyword table.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from importlib import import_module
from typing import Any

from turtlescene.config import TRACE

logger = logging.getLogger(__name__)


class ArgKind(Enum):
    """Shape of the arguments a keyword consumes."""

    NONE = "none"
    NUMBER = "number"
    OPTIONAL_NUMBER = "optional number"
    POINT = "x y"
    COLOR = "r,g,b"


@dataclass(frozen=True)
class KeywordSpec:
    """How to parse one keyword and build its command."""

    keyword: str
    args: ArgKind
    build: Callable[..., Any]

    @property
    def usage(self) -> str:
        if self.args is ArgKind.NONE:
            return self.keyword
        if self.args is ArgKind.OPTIONAL_NUMBER:
            return f"{self.keyword} [number]"
        return f"{self.keyword} {self.args.value}"


class KeywordRegistry:
    """
    Singleton registry for program keywords.

    Commands register themselves using the @register_keyword decorator.
    The registry imports the commands module on first lookup so the
    decorators have run before the parser needs them.
    """

    _instance: KeywordRegistry | None = None
    _keywords: dict[str, KeywordSpec] = {}
    _discovered: bool = False

    def __new__(cls) -> KeywordRegistry:
        """Ensure singleton pattern."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """Initialize the registry (only runs once due to singleton)."""
        if not hasattr(self, "_initialized"):
            self._keywords = {}
            self._discovered = False
            self._initialized = True

    def register(self, keyword: str, args: ArgKind, build: Callable[..., Any]) -> None:
        """
        Register a keyword.

        Args:
            keyword: The program keyword (matched case-insensitively)
            args: Argument shape consumed after the keyword
            build: Callable receiving the parsed arguments and returning a command

        Raises:
            ValueError: If the keyword is already registered with a different builder
        """
        key = keyword.lower()
        existing = self._keywords.get(key)
        if existing is not None:
            if existing.build is not build or existing.args is not args:
                raise ValueError(
                    f"Keyword '{key}' is already registered for {existing.build.__name__}. "
                    f"Cannot register with {build.__name__}"
                )
            return
        self._keywords[key] = KeywordSpec(key, args, build)
        logger.log(TRACE, f"Registered keyword '{key}' -> {build.__name__}")

    def lookup(self, keyword: str) -> KeywordSpec | None:
        """
        Retrieve the spec for a keyword.

        Returns:
            The KeywordSpec if found, None otherwise
        """
        if not self._discovered:
            self.discover()
        return self._keywords.get(keyword.lower())

    def list_keywords(self) -> list[str]:
        """Return all registered keywords (sorted)."""
        if not self._discovered:
            self.discover()
        return sorted(self._keywords)

    def discover(self) -> None:
        """Import the commands module to trigger the @register_keyword decorators."""
        if self._discovered:
            return
        import_module("turtlescene.program.commands")
        self._discovered = True
        logger.debug(f"Keyword discovery complete. Registered {len(self._keywords)} keywords")


_registry = KeywordRegistry()


def register_keyword(*keywords: str, args: ArgKind = ArgKind.NONE):
    """
    Decorator registering a command class or factory under one or more keywords.

    Example:
        @register_keyword("penwidth", "pw", args=ArgKind.NUMBER)
        @dataclass(frozen=True)
        class PenWidth(Command):
            width: float
    """

    def decorator(build):
        for keyword in keywords:
            _registry.register(keyword, args, build)
        return build

    return decorator


def get_registry() -> KeywordRegistry:
    return _registry
