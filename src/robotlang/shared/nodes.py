"""
Robot Language Statement Tree

Five statement kinds make up every robot program: Block, If, IfElse, While and
Call. The set is closed; StatementVisitor (ast_visitor.py) declares one
abstract visit_* method per kind, so a visitor that forgets a kind cannot be
instantiated.

Mutation goes through move-based exchange rather than reference edits:
- Block: remove_from_block(i) hands the child out, add_to_block(i, s) takes it back
- If/IfElse/While: disassemble() hands out (condition, bodies) and leaves empty
  placeholder blocks behind; assemble(...) installs the new pieces
- Call: disassemble() hands out the label, assemble(label) installs one

Structural equality (==) compares kind, condition/label and children. Source
locations are not part of equality.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple, TypeVar, TYPE_CHECKING

from .errors import StatementError, RobotLangImplementationError
from .source_location import SourceLocation

if TYPE_CHECKING:
    from .ast_visitor import StatementVisitor

T = TypeVar('T')


class StatementKind(Enum):
    """Statement kinds (closed set)"""
    BLOCK = "block"
    IF = "if"
    IF_ELSE = "if-else"
    WHILE = "while"
    CALL = "call"


class Condition(Enum):
    """Conditions a robot can test before acting"""
    NEXT_IS_EMPTY = "next-is-empty"
    NEXT_IS_NOT_EMPTY = "next-is-not-empty"
    NEXT_IS_WALL = "next-is-wall"
    NEXT_IS_NOT_WALL = "next-is-not-wall"
    NEXT_IS_FRIEND = "next-is-friend"
    NEXT_IS_NOT_FRIEND = "next-is-not-friend"
    NEXT_IS_ENEMY = "next-is-enemy"
    NEXT_IS_NOT_ENEMY = "next-is-not-enemy"
    RANDOM = "random"
    TRUE = "true"


def _check_statement(value: object, role: str) -> 'Statement':
    if not isinstance(value, Statement):
        raise StatementError(f"{role} must be a Statement, got {type(value).__name__}")
    return value


def _check_condition(value: object) -> Condition:
    if not isinstance(value, Condition):
        raise StatementError(f"condition must be a Condition, got {value!r}")
    return value


def _check_label(value: object) -> str:
    if not isinstance(value, str) or not value:
        raise StatementError(f"call label must be a non-empty string, got {value!r}")
    return value


class Statement:
    """
    Base class for statements

    Subclasses implement accept() to call the matching visit_* method.
    """
    __slots__ = ('kind', 'location')

    def __init__(self, kind: StatementKind, location: Optional[SourceLocation] = None):
        self.kind = kind
        self.location = location

    def accept(self, visitor: 'StatementVisitor[T]') -> T:
        raise RobotLangImplementationError(
            f"accept() not implemented for {self.__class__.__name__}"
        )

    def new_instance(self) -> 'Block':
        """Empty placeholder statement (used while a node's children are handed out)"""
        return Block()


@dataclass
class Block(Statement):
    """Ordered sequence of statements, executed in order"""
    statements: List[Statement]

    def __init__(self, statements: Optional[List[Statement]] = None,
                 location: Optional[SourceLocation] = None):
        super().__init__(StatementKind.BLOCK, location)
        self.statements = [_check_statement(s, "block child") for s in (statements or [])]

    def __len__(self) -> int:
        return len(self.statements)

    def remove_from_block(self, pos: int) -> Statement:
        """Remove and return the child at pos; later children shift left"""
        if not 0 <= pos < len(self.statements):
            raise StatementError(
                f"block position {pos} out of range for block of length {len(self.statements)}",
                self.location,
            )
        return self.statements.pop(pos)

    def add_to_block(self, pos: int, statement: Statement) -> None:
        """Insert statement at pos; later children shift right"""
        if not 0 <= pos <= len(self.statements):
            raise StatementError(
                f"block position {pos} out of range for insertion into block of length {len(self.statements)}",
                self.location,
            )
        self.statements.insert(pos, _check_statement(statement, "block child"))

    def accept(self, visitor: 'StatementVisitor[T]') -> T:
        return visitor.visit_block(self)


@dataclass
class If(Statement):
    """if CONDITION then BODY end if"""
    condition: Condition
    body: Statement

    def __init__(self, condition: Condition, body: Statement,
                 location: Optional[SourceLocation] = None):
        super().__init__(StatementKind.IF, location)
        self.condition = _check_condition(condition)
        self.body = _check_statement(body, "if body")

    def disassemble(self) -> Tuple[Condition, Statement]:
        condition, body = self.condition, self.body
        self.body = self.new_instance()
        return condition, body

    def assemble(self, condition: Condition, body: Statement) -> None:
        self.condition = _check_condition(condition)
        self.body = _check_statement(body, "if body")

    def accept(self, visitor: 'StatementVisitor[T]') -> T:
        return visitor.visit_if(self)


@dataclass
class IfElse(Statement):
    """if CONDITION then THEN_BODY else ELSE_BODY end if"""
    condition: Condition
    then_body: Statement
    else_body: Statement

    def __init__(self, condition: Condition, then_body: Statement, else_body: Statement,
                 location: Optional[SourceLocation] = None):
        super().__init__(StatementKind.IF_ELSE, location)
        self.condition = _check_condition(condition)
        self.then_body = _check_statement(then_body, "then body")
        self.else_body = _check_statement(else_body, "else body")

    def disassemble(self) -> Tuple[Condition, Statement, Statement]:
        condition, then_body, else_body = self.condition, self.then_body, self.else_body
        self.then_body = self.new_instance()
        self.else_body = self.new_instance()
        return condition, then_body, else_body

    def assemble(self, condition: Condition, then_body: Statement, else_body: Statement) -> None:
        self.condition = _check_condition(condition)
        self.then_body = _check_statement(then_body, "then body")
        self.else_body = _check_statement(else_body, "else body")

    def accept(self, visitor: 'StatementVisitor[T]') -> T:
        return visitor.visit_if_else(self)


@dataclass
class While(Statement):
    """while CONDITION do BODY end while"""
    condition: Condition
    body: Statement

    def __init__(self, condition: Condition, body: Statement,
                 location: Optional[SourceLocation] = None):
        super().__init__(StatementKind.WHILE, location)
        self.condition = _check_condition(condition)
        self.body = _check_statement(body, "while body")

    def disassemble(self) -> Tuple[Condition, Statement]:
        condition, body = self.condition, self.body
        self.body = self.new_instance()
        return condition, body

    def assemble(self, condition: Condition, body: Statement) -> None:
        self.condition = _check_condition(condition)
        self.body = _check_statement(body, "while body")

    def accept(self, visitor: 'StatementVisitor[T]') -> T:
        return visitor.visit_while(self)


@dataclass
class Call(Statement):
    """Call of a primitive or user-defined instruction (leaf)"""
    label: str

    def __init__(self, label: str, location: Optional[SourceLocation] = None):
        super().__init__(StatementKind.CALL, location)
        self.label = _check_label(label)

    def disassemble(self) -> str:
        return self.label

    def assemble(self, label: str) -> None:
        self.label = _check_label(label)

    def accept(self, visitor: 'StatementVisitor[T]') -> T:
        return visitor.visit_call(self)


@dataclass
class Program:
    """
    Program root: name, user-defined instructions and main body.

    context maps instruction names to their bodies, in definition order.
    """
    name: str
    context: Dict[str, Block]
    body: Block

    def __init__(self, name: str, context: Optional[Dict[str, Block]] = None,
                 body: Optional[Block] = None, location: Optional[SourceLocation] = None):
        self.name = name
        self.context = {}
        for instruction, instruction_body in (context or {}).items():
            if not isinstance(instruction_body, Block):
                raise StatementError(
                    f"body of instruction {instruction!r} must be a Block, "
                    f"got {type(instruction_body).__name__}"
                )
            self.context[instruction] = instruction_body
        if body is None:
            body = Block()
        elif not isinstance(body, Block):
            raise StatementError(f"program body must be a Block, got {type(body).__name__}")
        self.body = body
        self.location = location
