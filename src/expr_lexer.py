OPERATOR = "Operator"
NUMBER = "Number"


class Token:
    def __init__(self, lexeme: str, kind: str):
        self.lexeme = lexeme
        self.kind = kind

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return self.lexeme == other.lexeme and self.kind == other.kind

    def __hash__(self):
        return hash((self.lexeme, self.kind))

    def __repr__(self):
        return f"Token({self.kind}, '{self.lexeme}')"


class SymbolTable:
    """Every distinct lexeme seen during one parse attempt, tagged with its kind."""

    def __init__(self):
        self.table: dict[str, str] = {}

    def insert(self, lexeme: str, kind: str):
        self.table[lexeme] = kind

    def lookup(self, lexeme: str):
        return self.table.get(lexeme)

    def as_dict(self) -> dict[str, str]:
        return dict(self.table)

    def tokens(self):
        for lexeme, kind in self.table.items():
            yield Token(lexeme, kind)

    def __contains__(self, lexeme):
        return lexeme in self.table

    def __len__(self):
        return len(self.table)

    def __iter__(self):
        return iter(self.table.items())

    def __eq__(self, other):
        if not isinstance(other, SymbolTable):
            return NotImplemented
        return self.table == other.table

    def __repr__(self):
        return f"SymbolTable({self.table!r})"


def is_digit(ch: str) -> bool:
    # str.isdigit alone also accepts superscripts and other non-decimal digits
    return ch.isascii() and ch.isdigit()


class Cursor:
    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    # ------------------------------------------------------------
    # Core helpers
    # ------------------------------------------------------------

    def peek(self, offset: int = 0) -> str:
        index = self.pos + offset
        return self.text[index] if index < len(self.text) else ""

    def advance(self) -> str:
        if self.pos >= len(self.text):
            return ""
        ch = self.text[self.pos]
        self.pos += 1
        return ch

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    # ------------------------------------------------------------
    # Token readers
    # ------------------------------------------------------------

    def read_number(self) -> str:
        start = self.pos
        while is_digit(self.peek()):
            self.pos += 1
        return self.text[start:self.pos]
