import logging

from expr_errors import (
    ExpectedClosingParenthesis,
    NestingTooDeep,
    ParseError,
    UnexpectedCharacter,
    UnexpectedEndOfInput,
    UnexpectedTrailingInput,
)
from expr_lexer import NUMBER, OPERATOR, Cursor, SymbolTable, is_digit
from expr_tree import BinaryOp, Node, Number, is_valid_input

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 250


class ParseResult:
    def __init__(self, tree: Node, symbols: SymbolTable, valid: bool):
        self.tree = tree
        self.symbols = symbols
        self.valid = valid

    def __repr__(self):
        return f"ParseResult(tree={self.tree!r}, symbols={self.symbols!r}, valid={self.valid})"


class Parser:
    """Recursive-descent parser for one line of arithmetic.

    expression := term (('+' | '-') term)*
    term       := factor (('*' | '/') factor)*
    factor     := DIGITS | '(' expression ')'

    Groups nested deeper than ``max_depth`` raise NestingTooDeep; operator
    chains are folded in a loop and have no length limit.
    """

    def __init__(self, text: str, max_depth: int = DEFAULT_MAX_DEPTH):
        self.cursor = Cursor(text)
        self.symbols = SymbolTable()
        self.max_depth = max_depth
        self._depth = 0

    def parse(self) -> ParseResult:
        logger.debug("parsing %r", self.cursor.text)
        try:
            tree = self.parse_expression()
            if not self.cursor.at_end():
                raise UnexpectedTrailingInput(self.cursor.pos, self.cursor.peek())
        except ParseError as e:
            logger.debug("parse of %r failed: %s", self.cursor.text, e)
            raise

        valid = is_valid_input(tree)
        logger.debug("parsed %d chars (valid=%s)", len(self.cursor.text), valid)
        return ParseResult(tree, self.symbols, valid)

    # ------------------------------------------------------------
    # Expressions
    # ------------------------------------------------------------

    def parse_expression(self) -> Node:
        node = self.parse_term()
        while self.cursor.peek() in {"+", "-"}:
            op = self.cursor.advance()
            self.symbols.insert(op, OPERATOR)
            right = self.parse_term()
            node = BinaryOp(op, node, right)
        return node

    def parse_term(self) -> Node:
        node = self.parse_factor()
        while self.cursor.peek() in {"*", "/"}:
            op = self.cursor.advance()
            self.symbols.insert(op, OPERATOR)
            right = self.parse_factor()
            node = BinaryOp(op, node, right)
        return node

    def parse_factor(self) -> Node:
        cursor = self.cursor
        if cursor.at_end():
            raise UnexpectedEndOfInput(cursor.pos)

        ch = cursor.peek()

        if is_digit(ch):
            digits = cursor.read_number()
            self.symbols.insert(digits, NUMBER)
            return Number(digits)

        if ch == "(":
            if self._depth >= self.max_depth:
                raise NestingTooDeep(cursor.pos, self.max_depth)
            cursor.advance()
            self._depth += 1
            node = self.parse_expression()
            self._depth -= 1
            if cursor.peek() != ")":
                raise ExpectedClosingParenthesis(cursor.pos, cursor.peek() or None)
            cursor.advance()
            return node

        raise UnexpectedCharacter(cursor.pos, ch)


def parse(text: str, max_depth: int = DEFAULT_MAX_DEPTH) -> ParseResult:
    """Run one independent parse attempt over ``text``."""
    return Parser(text, max_depth=max_depth).parse()
