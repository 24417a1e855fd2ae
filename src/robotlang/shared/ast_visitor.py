"""
Statement Visitor Pattern

This module provides:
1. StatementVisitor (abstract visitor - one abstract visit_* per statement kind)
2. StatementTransformer (in-place rewriting visitor with default traversal)

Design:
- Every statement kind has an abstract visit_* method, so a visitor that
  misses a kind fails at instantiation (TypeError), not halfway through a tree
- Nodes dispatch through accept(); there is no fallback for unknown kinds
- Traversal is recursive; nesting deeper than the interpreter's recursion
  limit raises RecursionError, which is not caught here
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from .nodes import Statement, Block, If, IfElse, While, Call

T = TypeVar('T')


class StatementVisitor(ABC, Generic[T]):
    """
    Base statement visitor.

    Usage:
        class LabelCollector(StatementVisitor[List[str]]):
            def visit_block(self, node: Block) -> List[str]:
                return [label for s in node.statements for label in s.accept(self)]

            def visit_call(self, node: Call) -> List[str]:
                return [node.label]
            ...
    """

    @abstractmethod
    def visit_block(self, node: Block) -> T:
        raise NotImplementedError(f"{self.__class__.__name__} must implement visit_block()")

    @abstractmethod
    def visit_if(self, node: If) -> T:
        raise NotImplementedError(f"{self.__class__.__name__} must implement visit_if()")

    @abstractmethod
    def visit_if_else(self, node: IfElse) -> T:
        raise NotImplementedError(f"{self.__class__.__name__} must implement visit_if_else()")

    @abstractmethod
    def visit_while(self, node: While) -> T:
        raise NotImplementedError(f"{self.__class__.__name__} must implement visit_while()")

    @abstractmethod
    def visit_call(self, node: Call) -> T:
        raise NotImplementedError(f"{self.__class__.__name__} must implement visit_call()")


class StatementTransformer(StatementVisitor[Statement]):
    """
    Visitor that rewrites a tree in place and returns the (same) visited node.

    Children are moved out of their parent, visited, and moved back in at the
    same position. Block order and count are preserved. Override a visit_*
    method to rewrite that kind; call the base method to keep recursing.
    """

    def visit_block(self, node: Block) -> Statement:
        for i in range(len(node)):
            child = node.remove_from_block(i)
            node.add_to_block(i, child.accept(self))
        return node

    def visit_if(self, node: If) -> Statement:
        condition, body = node.disassemble()
        node.assemble(condition, body.accept(self))
        return node

    def visit_if_else(self, node: IfElse) -> Statement:
        condition, then_body, else_body = node.disassemble()
        node.assemble(condition, then_body.accept(self), else_body.accept(self))
        return node

    def visit_while(self, node: While) -> Statement:
        condition, body = node.disassemble()
        node.assemble(condition, body.accept(self))
        return node

    def visit_call(self, node: Call) -> Statement:
        # Leaf
        return node
