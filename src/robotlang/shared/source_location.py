"""
Source Location (Span)

Where a statement came from in a robot program file. Populated by whatever
builds the tree; the passes only carry it along.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SourceLocation:
    """
    Source location of a statement.

    - File, line, column (1-based)
    - Optional end line/column for multi-line statements
    - Immutable (frozen) for hashability
    """
    file: str
    line: int
    column: int
    end_line: int = 0
    end_column: int = 0

    def __str__(self) -> str:
        """Format as file:line:column"""
        return f"{self.file}:{self.line}:{self.column}"
