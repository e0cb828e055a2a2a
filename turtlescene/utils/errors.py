"""
Custom exception types for the turtlescene compile pipeline.
Keep this focused and non-redundant; prefer built-ins where appropriate.
"""


class ParseError(ValueError):
    """Program text does not conform to the turtle grammar."""

    def __init__(
        self,
        message: str,
        token: str = "",
        span: tuple[int, int] = (0, 0),
        line: int = 1,
        column: int = 1,
    ):
        self.original_message = message
        self.token = token
        self.span = span
        self.line = line
        self.column = column
        super().__init__(f"Parse error: {message}")

    def __str__(self):
        where = f"line {self.line}, column {self.column}"
        if self.token:
            return f"Parse error at {where} ({self.token!r}): {self.original_message}"
        return f"Parse error at {where}: {self.original_message}"
