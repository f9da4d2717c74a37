from typing import NamedTuple, Union

OPERATORS = {"+", "-", "*", "/"}


class Number(NamedTuple):
    digits: str

    @property
    def value(self) -> str:
        return self.digits

    @property
    def children(self) -> tuple:
        return ()

    def __repr__(self):
        return self.digits


class BinaryOp(NamedTuple):
    op: str
    left: "Node"
    right: "Node"

    @property
    def value(self) -> str:
        return self.op

    @property
    def children(self) -> tuple:
        return (self.left, self.right)

    # tuple's own comparison, hash and repr recurse once per level, which a
    # long left-deep chain overflows
    def __eq__(self, other):
        if not isinstance(other, BinaryOp):
            return NotImplemented
        return same_tree(self, other)

    def __ne__(self, other):
        if not isinstance(other, BinaryOp):
            return NotImplemented
        return not same_tree(self, other)

    def __hash__(self):
        return hash(tuple(walk(self)))

    def __repr__(self):
        return fold(self, lambda n: n.digits, lambda op, lhs, rhs: f"({op},{lhs},{rhs})")


Node = Union[Number, BinaryOp]


# ------------------------------------------------------------
# Traversal / rendering
# ------------------------------------------------------------

def walk(node: Node, depth: int = 0):
    """Depth-first, pre-order walk yielding ``(value, depth)`` pairs."""
    stack = [(node, depth)]
    while stack:
        node, depth = stack.pop()
        yield node.value, depth
        for child in reversed(node.children):
            stack.append((child, depth + 1))


def fold(node: Node, leaf, combine):
    """Bottom-up reduction: ``leaf(number)`` for leaves, ``combine(op, left, right)`` above."""
    stack = [(node, False)]
    done = []
    while stack:
        node, expanded = stack.pop()
        if not node.children:
            done.append(leaf(node))
        elif expanded:
            right = done.pop()
            left = done.pop()
            done.append(combine(node.op, left, right))
        else:
            stack.append((node, True))
            stack.append((node.right, False))
            stack.append((node.left, False))
    return done[0]


def same_tree(a: Node, b: Node) -> bool:
    stack = [(a, b)]
    while stack:
        x, y = stack.pop()
        if type(x) is not type(y) or x.value != y.value:
            return False
        stack.extend(zip(x.children, y.children))
    return True


def render_tree(node: Node, indent: str = "  ") -> list[str]:
    return [indent * depth + value for value, depth in walk(node)]


def to_infix(node: Node) -> str:
    return fold(node, lambda n: n.digits, lambda op, lhs, rhs: f"({lhs}{op}{rhs})")


# ------------------------------------------------------------
# Validator
# ------------------------------------------------------------

def count_operators(node: Node) -> int:
    return sum(1 for value, _ in walk(node) if value in OPERATORS)


def count_numbers(node: Node) -> int:
    return sum(1 for value, _ in walk(node) if value[:1].isdigit())


def is_valid_input(tree: Node) -> bool:
    """True when the tree has exactly one fewer operator than numbers.

    Every tree the parser builds satisfies this, so it only fails for trees
    assembled by hand with a malformed shape or values.
    """
    return count_operators(tree) == count_numbers(tree) - 1
