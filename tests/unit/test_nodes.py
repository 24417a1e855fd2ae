"""
Tests for the statement tree ADT: kinds, move-based exchange, equality, misuse.
"""

import pytest

from robotlang.shared.errors import StatementError
from robotlang.shared.nodes import (
    Block, Call, Condition, If, IfElse, Program, Statement, StatementKind, While,
)
from robotlang.shared.source_location import SourceLocation


class TestStatementKinds:
    """Every node reports its kind"""

    def test_kinds(self):
        assert Block().kind is StatementKind.BLOCK
        assert If(Condition.RANDOM, Block()).kind is StatementKind.IF
        assert IfElse(Condition.TRUE, Block(), Block()).kind is StatementKind.IF_ELSE
        assert While(Condition.TRUE, Block()).kind is StatementKind.WHILE
        assert Call("move").kind is StatementKind.CALL

    def test_new_instance_is_empty_block(self):
        placeholder = Call("move").new_instance()
        assert placeholder == Block()
        assert len(placeholder) == 0


class TestBlock:
    """remove_from_block / add_to_block preserve order"""

    def test_remove_and_reinsert_preserves_order(self):
        block = Block([Call("move"), Call("turnleft"), Call("infect")])
        child = block.remove_from_block(1)
        assert child == Call("turnleft")
        assert len(block) == 2
        block.add_to_block(1, child)
        assert block == Block([Call("move"), Call("turnleft"), Call("infect")])

    def test_add_at_end(self):
        block = Block([Call("move")])
        block.add_to_block(1, Call("skip"))
        assert block.statements == [Call("move"), Call("skip")]

    def test_remove_out_of_range(self):
        with pytest.raises(StatementError, match="out of range"):
            Block([Call("move")]).remove_from_block(1)

    def test_add_out_of_range(self):
        with pytest.raises(StatementError, match="out of range"):
            Block().add_to_block(1, Call("move"))

    def test_add_non_statement(self):
        with pytest.raises(StatementError, match="must be a Statement"):
            Block().add_to_block(0, "move")

    def test_empty_block_has_zero_length(self):
        assert len(Block()) == 0


class TestDisassembleAssemble:
    """Disassembly hands pieces out and leaves placeholders behind"""

    def test_if_roundtrip(self):
        body = Block([Call("move")])
        node = If(Condition.NEXT_IS_EMPTY, body)
        condition, taken = node.disassemble()
        assert condition is Condition.NEXT_IS_EMPTY
        assert taken is body
        assert node.body == Block()
        node.assemble(condition, taken)
        assert node.body is body

    def test_if_else_roundtrip_with_swap(self):
        then_body, else_body = Block([Call("move")]), Block([Call("skip")])
        node = IfElse(Condition.NEXT_IS_WALL, then_body, else_body)
        condition, t, e = node.disassemble()
        assert (t, e) == (then_body, else_body)
        assert node.then_body == Block() and node.else_body == Block()
        node.assemble(condition, e, t)
        assert node.then_body is else_body
        assert node.else_body is then_body

    def test_while_roundtrip(self):
        node = While(Condition.TRUE, Call("move"))
        condition, body = node.disassemble()
        node.assemble(Condition.RANDOM, body)
        assert node == While(Condition.RANDOM, Call("move"))

    def test_call_roundtrip(self):
        node = Call("go-forward-3-times")
        label = node.disassemble()
        assert label == "go-forward-3-times"
        node.assemble("move")
        assert node.label == "move"

    def test_assemble_rejects_bad_condition(self):
        node = If(Condition.TRUE, Block())
        with pytest.raises(StatementError, match="condition"):
            node.assemble("NEXT_IS_WALL", Block())

    @pytest.mark.parametrize("label", ["", None, 42])
    def test_call_rejects_bad_label(self, label):
        with pytest.raises(StatementError, match="label"):
            Call(label)


class TestEquality:
    """Structural equality ignores locations"""

    def test_equal_trees(self):
        a = IfElse(Condition.NEXT_IS_NOT_ENEMY, Block([Call("move")]), Call("skip"))
        b = IfElse(Condition.NEXT_IS_NOT_ENEMY, Block([Call("move")]), Call("skip"))
        assert a == b

    def test_branch_order_matters(self):
        a = IfElse(Condition.NEXT_IS_WALL, Call("move"), Call("skip"))
        b = IfElse(Condition.NEXT_IS_WALL, Call("skip"), Call("move"))
        assert a != b

    def test_kind_matters(self):
        assert If(Condition.TRUE, Block()) != While(Condition.TRUE, Block())

    def test_location_ignored(self):
        located = Call("move", SourceLocation("bug.bl", 3, 5))
        assert located == Call("move")
        assert str(located.location) == "bug.bl:3:5"

    def test_base_statement_accept_is_implementation_error(self):
        from robotlang.shared.errors import RobotLangImplementationError
        with pytest.raises(RobotLangImplementationError):
            Statement(StatementKind.CALL).accept(object())


class TestProgram:
    """Program holds instruction bodies and a main body"""

    def test_defaults(self):
        program = Program("Empty")
        assert program.context == {}
        assert program.body == Block()

    def test_instruction_body_must_be_block(self):
        with pytest.raises(StatementError, match="turn-around"):
            Program("Bad", {"turn-around": Call("turnleft")})

    def test_program_body_must_be_block(self):
        with pytest.raises(StatementError, match="program body"):
            Program("Bad", body=Call("move"))
