"""
Errors raised by a parse attempt.

Each kind carries the offset where it was detected plus whatever else
identifies the problem, so callers can match on the type instead of
reading the message.
"""


class ParseError(Exception):
    def __init__(self, offset: int):
        self.offset = offset
        super().__init__(self.describe())

    def describe(self) -> str:
        return f"Parse error at index {self.offset}"

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return vars(self) == vars(other)

    def __hash__(self):
        return hash((type(self), tuple(sorted(vars(self).items()))))


class UnexpectedEndOfInput(ParseError):
    def describe(self):
        return f"Unexpected end of input at index {self.offset}"


class UnexpectedCharacter(ParseError):
    def __init__(self, offset: int, char: str):
        self.char = char
        super().__init__(offset)

    def describe(self):
        return f"Unexpected character '{self.char}' at index {self.offset}"


class ExpectedClosingParenthesis(ParseError):
    def __init__(self, offset: int, found: str | None = None):
        self.found = found
        super().__init__(offset)

    def describe(self):
        if self.found is None:
            return f"Expected closing parenthesis at index {self.offset}, found end of input"
        return f"Expected closing parenthesis at index {self.offset}, found '{self.found}'"


class UnexpectedTrailingInput(ParseError):
    def __init__(self, offset: int, char: str):
        self.char = char
        super().__init__(offset)

    def describe(self):
        return f"Unexpected input '{self.char}' at index {self.offset}"


class NestingTooDeep(ParseError):
    def __init__(self, offset: int, limit: int):
        self.limit = limit
        super().__init__(offset)

    def describe(self):
        return f"Parentheses nested deeper than {self.limit} at index {self.offset}"
