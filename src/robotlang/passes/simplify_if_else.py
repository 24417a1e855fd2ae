"""
If-Else Simplification Pass

Removes negated conditions from if-else statements:

    if next-is-not-wall then A else B end if
        =>
    if next-is-wall then B else A end if

Only IfElse is rewritten. If and While keep their conditions (a negated
while condition has no else branch to swap with). Every nested statement is
simplified, and the tree is rewritten in place: the root object that goes in
is the root object that comes out.
"""

import logging
from typing import Dict

from ..passes.base import BasePass, PassContext
from ..shared.ast_visitor import StatementTransformer
from ..shared.nodes import Statement, IfElse, Condition, Program

logger = logging.getLogger("robotlang.passes.simplify_if_else")


# Negated condition -> positive complement. Conditions not listed are left alone.
NEGATION_COMPLEMENTS: Dict[Condition, Condition] = {
    Condition.NEXT_IS_NOT_EMPTY: Condition.NEXT_IS_EMPTY,
    Condition.NEXT_IS_NOT_WALL: Condition.NEXT_IS_WALL,
    Condition.NEXT_IS_NOT_FRIEND: Condition.NEXT_IS_FRIEND,
    Condition.NEXT_IS_NOT_ENEMY: Condition.NEXT_IS_ENEMY,
}


class IfElseSimplifier(StatementTransformer):
    """Rewrites negated if-else conditions; counts the rewrites it makes."""

    def __init__(self):
        self.rewritten = 0

    def visit_if_else(self, node: IfElse) -> Statement:
        condition, then_body, else_body = node.disassemble()
        then_body = then_body.accept(self)
        else_body = else_body.accept(self)
        complement = NEGATION_COMPLEMENTS.get(condition)
        if complement is not None:
            self.rewritten += 1
            node.assemble(complement, else_body, then_body)
        else:
            node.assemble(condition, then_body, else_body)
        return node


def simplify_if_else(statement: Statement) -> Statement:
    """
    Simplify every negated if-else in statement (in place).

    Returns statement itself, for chaining.
    """
    simplifier = IfElseSimplifier()
    result = statement.accept(simplifier)
    logger.debug(f"Simplified {simplifier.rewritten} negated if-else statement(s)")
    return result


class SimplifyIfElsePass(BasePass):
    """Simplify negated if-else statements in every instruction body and the main body."""

    def run(self, program: Program, ctx: PassContext) -> Program:
        logger.debug(f"Starting if-else simplification of program {program.name}")
        simplifier = IfElseSimplifier()
        for instruction, body in program.context.items():
            program.context[instruction] = body.accept(simplifier)
        program.body = program.body.accept(simplifier)
        logger.debug(f"If-else simplification complete: {simplifier.rewritten} rewrite(s)")
        return program
