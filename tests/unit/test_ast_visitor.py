"""
Tests for StatementVisitor exhaustiveness and StatementTransformer traversal.
"""

import pytest

from robotlang.shared.ast_visitor import StatementTransformer, StatementVisitor
from robotlang.shared.nodes import Block, Call, Condition, If, IfElse, StatementKind, While
from tests.test_utils import assert_trees_equal, labels, tree


class TestVisitorExhaustiveness:
    """A visitor must handle every statement kind"""

    def test_one_abstract_method_per_kind(self):
        expected = {f"visit_{kind.name.lower()}" for kind in StatementKind}
        assert StatementVisitor.__abstractmethods__ == frozenset(expected)

    def test_visitor_missing_a_kind_cannot_be_instantiated(self):
        class NoWhile(StatementVisitor[int]):
            def visit_block(self, node):
                return 0

            def visit_if(self, node):
                return 0

            def visit_if_else(self, node):
                return 0

            def visit_call(self, node):
                return 0

        with pytest.raises(TypeError, match="visit_while"):
            NoWhile()

    def test_transformer_is_complete(self):
        StatementTransformer()


class Relabel(StatementTransformer):
    """Appends '!' to every call label."""

    def visit_call(self, node):
        node.assemble(node.disassemble() + "!")
        return node


class TestStatementTransformer:
    """Default traversal rewrites in place and keeps structure"""

    def test_identity_transformer_keeps_tree(self):
        original = tree('(block (if NEXT_IS_WALL (call "turnleft")) '
                        '(while TRUE (if-else RANDOM (call "move") (call "skip"))))')
        copy = tree('(block (if NEXT_IS_WALL (call "turnleft")) '
                    '(while TRUE (if-else RANDOM (call "move") (call "skip"))))')
        result = original.accept(StatementTransformer())
        assert result is original
        assert_trees_equal(result, copy)

    def test_visits_every_call_in_order(self):
        root = tree('(block (call "a") (if TRUE (block (call "b") (call "c"))) '
                    '(if-else RANDOM (call "d") (while TRUE (call "e"))))')
        root.accept(Relabel())
        assert labels(root) == ["a!", "b!", "c!", "d!", "e!"]

    def test_children_keep_identity(self):
        inner = Block([Call("move")])
        node = While(Condition.NEXT_IS_EMPTY, inner)
        node.accept(StatementTransformer())
        assert node.body is inner

    def test_block_order_and_count_preserved(self):
        children = [Call("move"), If(Condition.TRUE, Call("skip")), Call("infect")]
        block = Block(list(children))
        block.accept(StatementTransformer())
        assert len(block) == 3
        assert all(a is b for a, b in zip(block.statements, children))

    def test_if_else_branches_not_swapped_by_default(self):
        node = IfElse(Condition.NEXT_IS_NOT_WALL, Call("move"), Call("skip"))
        node.accept(StatementTransformer())
        assert node == IfElse(Condition.NEXT_IS_NOT_WALL, Call("move"), Call("skip"))
