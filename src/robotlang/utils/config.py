"""
Configuration constants to replace magic values throughout robotlang
"""

# Built-in robot actions (calls to any other label are user-defined instructions)
PRIMITIVE_INSTRUCTIONS = frozenset({
    "move",
    "turnleft",
    "turnright",
    "infect",
    "skip",
})

# S-expression display constants
SEXPR_MAX_LINE = 100  # Wrap pretty-printed forms longer than this
SEXPR_INDENT = "  "

# Error codes
STATEMENT_ERROR_CODE = "E0101"
SERIALIZATION_ERROR_CODE = "E0201"
PASS_ORDER_ERROR_CODE = "E0301"
IMPLEMENTATION_ERROR_CODE = "E9999"
