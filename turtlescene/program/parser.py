"""
Turtle Program Parser

Tokenizes and parses turtle program text into an ordered list of commands.
Keywords are looked up in the keyword registry; any text that does not
conform to the grammar raises ParseError pointing at the offending token.
"""

import logging
import math
import re
from dataclasses import dataclass

from turtlescene.utils.errors import ParseError

from .commands import Command
from .registry import ArgKind, KeywordSpec, get_registry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Token:
    """Represents a lexical token of a turtle program"""

    kind: str  # 'WORD', 'NUMBER', 'COMMA' or 'EOF'
    text: str
    start: int
    end: int
    value: float | None = None

    @property
    def span(self) -> tuple[int, int]:
        return (self.start, self.end)


class TokenStream:
    """Cursor over a token list with error helpers bound to the source text"""

    def __init__(self, text: str, tokens: list[Token]):
        self.text = text
        self.tokens = tokens
        self.pos = 0
        end = len(text)
        self._eof = Token("EOF", "", end, end)

    def peek(self) -> Token:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return self._eof

    def next(self) -> Token:
        token = self.peek()
        if token.kind != "EOF":
            self.pos += 1
        return token

    def at_end(self) -> bool:
        return self.pos >= len(self.tokens)

    def error(self, message: str, token: Token) -> ParseError:
        return make_error(self.text, message, token.text, token.span)


def make_error(text: str, message: str, token_text: str, span: tuple[int, int]) -> ParseError:
    """Build a ParseError with 1-based line/column computed from the span start"""
    start = span[0]
    line = text.count("\n", 0, start) + 1
    column = start - (text.rfind("\n", 0, start) + 1) + 1
    return ParseError(message, token=token_text, span=span, line=line, column=column)


class TurtleParser:
    """Turtle program parser producing Command lists"""

    # Regex patterns for lexing. Every character of the input is covered by
    # exactly one alternative, so lexing never silently skips text.
    TOKEN_PATTERN = re.compile(
        r"(?P<COMMENT>#[^\n]*)|(?P<WS>\s+)|(?P<COMMA>,)|(?P<CHUNK>[^\s,#]+)"
    )
    NUMBER_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)")
    KEYWORD_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")

    COLOR_COMPONENTS = 3
    COLOR_MAX = 255

    def __init__(self):
        self.registry = get_registry()

    def tokenize(self, text: str) -> list[Token]:
        """
        Split program text into tokens

        Args:
            text: Raw program text

        Returns:
            List of WORD, NUMBER and COMMA tokens in source order

        Raises:
            ParseError: On a chunk that is neither a keyword nor a number, or on a
                number too large to represent
        """
        tokens: list[Token] = []
        for match in self.TOKEN_PATTERN.finditer(text):
            kind = match.lastgroup
            if kind in ("WS", "COMMENT"):
                continue
            chunk = match.group()
            start, end = match.span()
            if kind == "COMMA":
                tokens.append(Token("COMMA", chunk, start, end))
            elif self.NUMBER_PATTERN.fullmatch(chunk):
                value = float(chunk)
                if not math.isfinite(value):
                    raise make_error(text, f"Number out of range: {chunk}", chunk, (start, end))
                tokens.append(Token("NUMBER", chunk, start, end, value))
            elif self.KEYWORD_PATTERN.fullmatch(chunk):
                tokens.append(Token("WORD", chunk, start, end))
            else:
                raise make_error(text, f"Malformed token: {chunk}", chunk, (start, end))
        return tokens

    def parse_program(self, text: str) -> list[Command]:
        """
        Parse a complete turtle program

        Args:
            text: Program text; commands separated by whitespace

        Returns:
            Commands in execution order

        Raises:
            ParseError: If the text does not conform to the grammar
        """
        stream = TokenStream(text, self.tokenize(text))
        commands: list[Command] = []
        previous: KeywordSpec | None = None
        while not stream.at_end():
            command, previous = self._parse_one(stream, previous)
            commands.append(command)
        logger.debug(f"Parsed {len(commands)} commands from {len(text)} characters")
        return commands

    def parse_command(self, text: str) -> Command:
        """
        Parse text holding exactly one command

        Raises:
            ParseError: If the text is empty, invalid, or holds anything after the command
        """
        stream = TokenStream(text, self.tokenize(text))
        if stream.at_end():
            raise stream.error("Expected a command, found end of input", stream.peek())
        command, _ = self._parse_one(stream, None)
        if not stream.at_end():
            extra = stream.peek()
            raise stream.error(f"Unexpected input after command: {extra.text}", extra)
        return command

    def _parse_one(
        self, stream: TokenStream, previous: KeywordSpec | None
    ) -> tuple[Command, KeywordSpec]:
        token = stream.next()
        if token.kind == "NUMBER":
            if previous is not None:
                raise stream.error(
                    f"Unexpected number {token.text}; usage is '{previous.usage}'", token
                )
            raise stream.error(f"Expected a command keyword, found number {token.text}", token)
        if token.kind == "COMMA":
            raise stream.error("Unexpected ','", token)

        spec = self.registry.lookup(token.text)
        if spec is None:
            raise stream.error(f"Unknown command: {token.text}", token)

        args = self._parse_args(stream, spec)
        return spec.build(*args), spec

    def _parse_args(self, stream: TokenStream, spec: KeywordSpec) -> list:
        if spec.args is ArgKind.NONE:
            return []
        if spec.args is ArgKind.NUMBER:
            return [self._expect_number(stream, spec)]
        if spec.args is ArgKind.OPTIONAL_NUMBER:
            if stream.peek().kind == "NUMBER":
                return [stream.next().value]
            return []
        if spec.args is ArgKind.POINT:
            x = self._expect_number(stream, spec)
            if stream.peek().kind == "COMMA":
                stream.next()
            y = self._expect_number(stream, spec)
            return [x, y]
        if spec.args is ArgKind.COLOR:
            components = [self._expect_channel(stream, spec)]
            for _ in range(self.COLOR_COMPONENTS - 1):
                sep = stream.next()
                if sep.kind != "COMMA":
                    raise stream.error(
                        f"Expected ',' between color components; usage is '{spec.usage}'", sep
                    )
                components.append(self._expect_channel(stream, spec))
            return components
        raise AssertionError(f"Unhandled argument kind: {spec.args}")

    def _expect_number(self, stream: TokenStream, spec: KeywordSpec) -> float:
        token = stream.next()
        if token.kind != "NUMBER":
            found = "end of input" if token.kind == "EOF" else repr(token.text)
            raise stream.error(f"Expected a number, found {found}; usage is '{spec.usage}'", token)
        return token.value

    def _expect_channel(self, stream: TokenStream, spec: KeywordSpec) -> int:
        token = stream.peek()
        value = self._expect_number(stream, spec)
        if not value.is_integer() or not 0 <= value <= self.COLOR_MAX:
            raise stream.error(
                f"Color component must be an integer in 0..{self.COLOR_MAX}, got {token.text}",
                token,
            )
        return int(value)


_default_parser: TurtleParser | None = None


def parse_program(text: str) -> list[Command]:
    """Parse program text with a shared parser instance."""
    global _default_parser
    if _default_parser is None:
        _default_parser = TurtleParser()
    return _default_parser.parse_program(text)
