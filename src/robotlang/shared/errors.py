"""
Error Reporting

User-facing errors (bad trees, bad S-expressions, bad pass setups) derive from
RobotLangError. Bugs in robotlang itself raise RobotLangImplementationError.
"""

from typing import Optional

from .source_location import SourceLocation
from ..utils.config import (
    STATEMENT_ERROR_CODE,
    SERIALIZATION_ERROR_CODE,
    PASS_ORDER_ERROR_CODE,
    IMPLEMENTATION_ERROR_CODE,
)


# ============================================================================
# Exception Classes
# ============================================================================

class RobotLangError(Exception):
    """Base exception for all robotlang errors"""
    error_code = "E0001"

    def __init__(self, message: str, location: Optional[SourceLocation] = None):
        super().__init__(message)
        self.message = message
        self.location = location

    def __str__(self):
        if self.location:
            return f"error[{self.error_code}]: {self.message}\n --> {self.location}"
        return f"error[{self.error_code}]: {self.message}"


class StatementError(RobotLangError):
    """
    Misuse of the statement tree ADT.

    Raised for out-of-range block positions, children that are not statements,
    conditions that are not Condition members and empty call labels.
    """
    error_code = STATEMENT_ERROR_CODE


class SerializationError(RobotLangError):
    """Malformed statement S-expression."""
    error_code = SERIALIZATION_ERROR_CODE


class PassOrderError(RobotLangError):
    """Pass dependencies cannot be ordered (cycle or unregistered requirement)."""
    error_code = PASS_ORDER_ERROR_CODE


class RobotLangImplementationError(Exception):
    """
    Error in robotlang's own Python code (not in the tree it was given).

    Use this for internal Python errors:
    - Missing implementations
    - Invalid internal state
    """
    def __init__(self, message: str, error_code: str = IMPLEMENTATION_ERROR_CODE):
        super().__init__(message)
        self.message = message
        self.error_code = error_code

    def __str__(self):
        return f"[{self.error_code}] {self.message}"
