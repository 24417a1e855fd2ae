"""
Primitive Call Counting

Counts calls to the built-in robot actions (move, turnleft, turnright, infect,
skip) anywhere in a statement tree. Calls to user-defined instructions do not
count, and their bodies are not followed: each body is counted where it is
defined. The tree is only read.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict

from ..passes.base import BasePass, PassContext
from ..shared.ast_visitor import StatementVisitor
from ..shared.nodes import Statement, Block, If, IfElse, While, Call, Program
from ..utils.config import PRIMITIVE_INSTRUCTIONS

logger = logging.getLogger("robotlang.passes.primitive_calls")


def is_primitive_instruction(label: str) -> bool:
    return label in PRIMITIVE_INSTRUCTIONS


class PrimitiveCallCounter(StatementVisitor[int]):
    """Visitor returning the number of primitive calls in the visited subtree."""

    def visit_block(self, node: Block) -> int:
        return sum(child.accept(self) for child in node.statements)

    def visit_if(self, node: If) -> int:
        return node.body.accept(self)

    def visit_if_else(self, node: IfElse) -> int:
        # Condition is irrelevant to the count
        return node.then_body.accept(self) + node.else_body.accept(self)

    def visit_while(self, node: While) -> int:
        return node.body.accept(self)

    def visit_call(self, node: Call) -> int:
        return 1 if is_primitive_instruction(node.label) else 0


def count_primitive_calls(statement: Statement) -> int:
    """Number of calls to primitive instructions in statement (including statement itself)."""
    return statement.accept(PrimitiveCallCounter())


@dataclass
class PrimitiveCallReport:
    """Primitive call counts for a whole program."""
    instructions: Dict[str, int] = field(default_factory=dict)
    body: int = 0

    @property
    def total(self) -> int:
        return self.body + sum(self.instructions.values())


class CountPrimitiveCallsPass(BasePass):
    """
    Analysis pass: count primitive calls per instruction and in the main body.

    Stores a PrimitiveCallReport in the context (ctx.get_analysis(CountPrimitiveCallsPass)).
    Returns the program unchanged.
    """

    def run(self, program: Program, ctx: PassContext) -> Program:
        counter = PrimitiveCallCounter()
        report = PrimitiveCallReport()
        for instruction, body in program.context.items():
            report.instructions[instruction] = body.accept(counter)
        report.body = program.body.accept(counter)
        logger.debug(f"Program {program.name}: {report.total} primitive call(s) "
                     f"({report.body} in body, {len(report.instructions)} instruction(s))")
        ctx.set_analysis(CountPrimitiveCallsPass, report)
        return program
