"""
pershom/errors.py

Exception types raised by the persistence pipeline.

Each error derives from the builtin raised for the same class of failure,
so callers catching ``ValueError``/``TypeError`` keep working.
"""

from __future__ import annotations


class TypeMismatch(TypeError):
    """A cell was offered to a complex that does not accept its type."""


class InvariantViolation(RuntimeError):
    """The filtration order is inconsistent with the complex's face relation."""


class DimensionOutOfRange(ValueError):
    """A homology dimension outside the complex was requested."""


class FiltrationParseError(ValueError):
    """A serialized filtration line could not be parsed."""

    def __init__(self, lineno: int, line: str, reason: str):
        self.lineno = lineno
        self.line = line
        self.reason = reason
        super().__init__(f"line {lineno}: {reason}: {line!r}")
