"""
Shared components: statement tree, visitors, serialization, errors.
"""

from .source_location import SourceLocation
from .errors import (
    RobotLangError, StatementError, SerializationError, PassOrderError,
    RobotLangImplementationError,
)
from .nodes import (
    Statement, StatementKind, Condition,
    Block, If, IfElse, While, Call, Program,
)
from .ast_visitor import StatementVisitor, StatementTransformer
from .serialization import (
    serialize_statement, serialize_program,
    deserialize_statement, deserialize_program,
)
