"""
Statement Serialization to S-Expressions
========================================

Converts statement trees and programs to a canonical S-expression form for
testing and debugging, and back:

    (block S1 S2 ...)
    (if NEXT_IS_WALL BODY)
    (if-else NEXT_IS_NOT_ENEMY THEN ELSE)
    (while TRUE BODY)
    (call "move")
    (program "Name" :instructions (("name" (block ...)) ...) :body (block ...))

Keywords and conditions are symbols (unquoted); labels and names are strings.
Uses structured sexpr (nested lists + sexpdata.Symbol), then pretty-prints for
readable output.
"""

from typing import Any, Dict, List, Tuple

import sexpdata

from .ast_visitor import StatementVisitor
from .errors import SerializationError
from .nodes import Statement, Block, If, IfElse, While, Call, Condition, Program
from ..utils.config import SEXPR_MAX_LINE, SEXPR_INDENT


def _sym(s: str) -> sexpdata.Symbol:
    return sexpdata.Symbol(s)


def _is_string(x: Any) -> bool:
    """True for a quoted string (sexpdata.Symbol subclasses str)."""
    return isinstance(x, str) and not isinstance(x, sexpdata.Symbol)


def _sym_val(x: Any) -> str:
    if isinstance(x, sexpdata.Symbol):
        return x.value()
    if isinstance(x, str):
        return x
    return str(x)


def _pretty_dumps(sexpr: Any, indent: int = 0) -> str:
    """
    Pretty-print structured sexpr. Keeps short forms on one line; breaks only when needed.
    """
    # Check Symbol before str (sexpdata.Symbol subclasses str)
    if isinstance(sexpr, sexpdata.Symbol):
        return sexpr.value()
    if isinstance(sexpr, str):
        escaped = sexpr.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'
    if isinstance(sexpr, list):
        if not sexpr:
            return "()"
        parts = [_pretty_dumps(e, indent + 1) for e in sexpr]
        one_line = "(" + " ".join(parts) + ")"
        if len(one_line) + len(SEXPR_INDENT) * indent <= SEXPR_MAX_LINE and "\n" not in one_line:
            return one_line
        prefix = SEXPR_INDENT * indent
        next_prefix = SEXPR_INDENT * (indent + 1)
        # Head stays on the ( line; a condition or name stays with it
        head_len = 2 if len(parts) > 1 and "\n" not in parts[1] and not isinstance(sexpr[1], list) else 1
        head = " ".join(parts[:head_len])
        rest = "\n".join(next_prefix + p for p in parts[head_len:])
        inner = head + ("\n" + rest if rest else "")
        return f"({inner}\n{prefix})"
    return str(sexpr)


class StatementSerializer(StatementVisitor[list]):
    """Statement tree to structured S-expression."""

    def visit_block(self, node: Block) -> list:
        return [_sym("block")] + [s.accept(self) for s in node.statements]

    def visit_if(self, node: If) -> list:
        return [_sym("if"), _sym(node.condition.name), node.body.accept(self)]

    def visit_if_else(self, node: IfElse) -> list:
        return [_sym("if-else"), _sym(node.condition.name),
                node.then_body.accept(self), node.else_body.accept(self)]

    def visit_while(self, node: While) -> list:
        return [_sym("while"), _sym(node.condition.name), node.body.accept(self)]

    def visit_call(self, node: Call) -> list:
        return [_sym("call"), node.label]

    def serialize_program(self, program: Program) -> list:
        instructions = [[name, body.accept(self)] for name, body in program.context.items()]
        return [_sym("program"), program.name,
                _sym(":instructions"), instructions,
                _sym(":body"), program.body.accept(self)]


def _dumps(sexpr: list, pretty: bool) -> str:
    if pretty:
        return _pretty_dumps(sexpr)
    return sexpdata.dumps(sexpr)


def serialize_statement(node: Statement, pretty: bool = True) -> str:
    """
    Serialize a statement tree to an S-expression string.

    Args:
        node: Statement to serialize
        pretty: Use pretty-printed format (default True). Set False for compact single-line.
    """
    return _dumps(node.accept(StatementSerializer()), pretty)


def serialize_program(program: Program, pretty: bool = True) -> str:
    """Serialize a program (instructions + body) to an S-expression string."""
    return _dumps(StatementSerializer().serialize_program(program), pretty)


class StatementDeserializer:
    """Structured S-expression to statement tree."""

    _FORMS = {
        "block": "_deserialize_block",
        "if": "_deserialize_if",
        "if-else": "_deserialize_if_else",
        "while": "_deserialize_while",
        "call": "_deserialize_call",
    }

    def deserialize(self, sexpr: Any) -> Statement:
        if not isinstance(sexpr, list) or not sexpr:
            raise SerializationError(f"expected a statement form, got {sexpr!r}")
        head = sexpr[0]
        tag = _sym_val(head)
        if not isinstance(head, sexpdata.Symbol) or tag not in self._FORMS:
            raise SerializationError(f"unknown statement form {head!r}")
        return getattr(self, self._FORMS[tag])(sexpr[1:])

    def _condition(self, sexpr: Any) -> Condition:
        name = _sym_val(sexpr)
        if not isinstance(sexpr, sexpdata.Symbol):
            raise SerializationError(f"condition must be a symbol, got {sexpr!r}")
        try:
            return Condition[name]
        except KeyError:
            raise SerializationError(f"unknown condition {name!r}") from None

    def _arity(self, tag: str, tail: list, expected: int) -> None:
        if len(tail) != expected:
            raise SerializationError(
                f"({tag} ...) takes {expected} argument(s), got {len(tail)}"
            )

    def _deserialize_block(self, tail: list) -> Block:
        return Block([self.deserialize(s) for s in tail])

    def _deserialize_if(self, tail: list) -> If:
        self._arity("if", tail, 2)
        return If(self._condition(tail[0]), self.deserialize(tail[1]))

    def _deserialize_if_else(self, tail: list) -> IfElse:
        self._arity("if-else", tail, 3)
        return IfElse(self._condition(tail[0]), self.deserialize(tail[1]), self.deserialize(tail[2]))

    def _deserialize_while(self, tail: list) -> While:
        self._arity("while", tail, 2)
        return While(self._condition(tail[0]), self.deserialize(tail[1]))

    def _deserialize_call(self, tail: list) -> Call:
        self._arity("call", tail, 1)
        if not _is_string(tail[0]) or not tail[0]:
            raise SerializationError(f"call label must be a non-empty string, got {tail[0]!r}")
        return Call(_sym_val(tail[0]))

    def _block(self, sexpr: Any, what: str) -> Block:
        node = self.deserialize(sexpr)
        if not isinstance(node, Block):
            raise SerializationError(f"{what} must be a (block ...), got ({_sym_val(sexpr[0])} ...)")
        return node

    def deserialize_program(self, sexpr: Any) -> Program:
        if not isinstance(sexpr, list) or not sexpr or not isinstance(sexpr[0], sexpdata.Symbol) \
                or _sym_val(sexpr[0]) != "program":
            raise SerializationError(f"expected (program ...), got {sexpr!r}")
        if len(sexpr) < 2 or not _is_string(sexpr[1]):
            raise SerializationError("program name must be a string")
        opts = _plist(sexpr[2:])
        context: Dict[str, Block] = {}
        for entry in opts.get(":instructions") or []:
            if not isinstance(entry, list) or len(entry) != 2 or not _is_string(entry[0]):
                raise SerializationError(f"malformed instruction entry {entry!r}")
            name = _sym_val(entry[0])
            if name in context:
                raise SerializationError(f"duplicate instruction {name!r}")
            context[name] = self._block(entry[1], f"body of instruction {name!r}")
        body_sexpr = opts.get(":body")
        body = self._block(body_sexpr, "program body") if body_sexpr is not None else Block()
        return Program(_sym_val(sexpr[1]), context, body)


def _plist(items: list) -> Dict[str, Any]:
    """Parse a keyword property list (:key value ...) into a dict."""
    if len(items) % 2 != 0:
        raise SerializationError("property list must have an even number of items")
    opts: Dict[str, Any] = {}
    pairs: List[Tuple[Any, Any]] = list(zip(items[::2], items[1::2]))
    for key, value in pairs:
        if not isinstance(key, sexpdata.Symbol) or not _sym_val(key).startswith(":"):
            raise SerializationError(f"expected a :keyword, got {key!r}")
        opts[_sym_val(key)] = value
    return opts


def _loads(text: str) -> Any:
    try:
        return sexpdata.loads(text)
    except Exception as e:
        raise SerializationError(f"malformed S-expression: {e}") from e


def deserialize_statement(text: str) -> Statement:
    """Deserialize an S-expression string to a statement tree."""
    return StatementDeserializer().deserialize(_loads(text))


def deserialize_program(text: str) -> Program:
    """Deserialize an S-expression string to a program."""
    return StatementDeserializer().deserialize_program(_loads(text))
