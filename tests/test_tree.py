"""
Tests for parse-tree traversal, rendering and the operator/number validator
"""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from expr_parser import parse
from expr_tree import (Number, BinaryOp, walk, fold, same_tree, render_tree, to_infix,
                       count_operators, count_numbers, is_valid_input)


class TestWalk:
    def test_preorder_with_depth(self):
        tree = parse("(2+3)*4").tree
        assert list(walk(tree)) == [("*", 0), ("+", 1), ("2", 2), ("3", 2), ("4", 1)]

    def test_is_lazy(self):
        it = walk(parse("1+2").tree)
        assert next(it) == ("+", 0)

    def test_starting_depth(self):
        assert list(walk(Number("5"), 3)) == [("5", 3)]

    def test_deep_left_chain(self):
        tree = parse("-".join(["1"] * 2000)).tree
        depths = [d for _, d in walk(tree)]
        assert max(depths) == 1999


class TestRender:
    def test_indented_lines(self):
        assert render_tree(parse("1-2-3").tree) == ["-", "  -", "    1", "    2", "  3"]

    def test_custom_indent(self):
        assert render_tree(parse("1*2").tree, "\t") == ["*", "\t1", "\t2"]

    def test_infix_parenthesizes_every_operator(self):
        assert to_infix(parse("1-2-3").tree) == "((1-2)-3)"
        assert to_infix(parse("2+3*4").tree) == "(2+(3*4))"
        assert to_infix(Number("8")) == "8"


class TestValidator:
    def test_counts(self):
        tree = parse("12+3*45").tree
        assert count_operators(tree) == 2
        assert count_numbers(tree) == 3

    def test_parser_trees_are_valid(self):
        for text in ["1", "1+2", "(1+2)*(3-4)/5", "((((9))))"]:
            assert is_valid_input(parse(text).tree)

    def test_long_chain_counts(self):
        tree = parse("*".join(["7"] * 2000)).tree
        assert count_operators(tree) == 1999
        assert is_valid_input(tree)

    # Unreachable through the parser; hand-built trees only.
    def test_unknown_operator_symbol(self):
        assert not is_valid_input(BinaryOp("%", Number("1"), Number("2")))

    def test_non_numeric_leaf(self):
        assert not is_valid_input(Number("x"))


class TestLongChains:
    TEXT = "-".join(["1"] * 1500)

    def test_infix(self):
        infix = to_infix(parse(self.TEXT).tree)
        assert infix.startswith("(" * 1499 + "1-1)")
        assert infix.endswith("-1)")

    def test_equality_across_attempts(self):
        a, b = parse(self.TEXT).tree, parse(self.TEXT).tree
        assert a == b
        assert not (a != b)
        assert hash(a) == hash(b)

    def test_inequality_deep_in_the_chain(self):
        a = parse(self.TEXT).tree
        b = parse("2" + self.TEXT[1:]).tree
        assert a != b
        assert not same_tree(a, b)

    def test_repr(self):
        text = repr(parse(self.TEXT).tree)
        assert text.startswith("(-," * 1499 + "1,1)")

    def test_short_repr(self):
        assert repr(parse("1-2-3").tree) == "(-,(-,1,2),3)"

    def test_fold_visits_left_before_right(self):
        tree = parse("(1+2)*(3-4)").tree
        assert fold(tree, lambda n: [n.digits], lambda op, lhs, rhs: lhs + rhs + [op]) == \
            ["1", "2", "+", "3", "4", "-", "*"]

    def test_differently_shaped_trees_differ(self):
        assert parse("1-2-3").tree != parse("1-(2-3)").tree
        assert parse("1+2").tree != parse("1*2").tree
        assert parse("1+2").tree != Number("1")
