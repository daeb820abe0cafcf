"""Results of lowering an expression into intermediate instructions."""

from __future__ import annotations

from dataclasses import dataclass

from cobaltc.tacky_ast import Value


class TackyGeneratorError(RuntimeError):
    """Raised when a syntax tree cannot be lowered to intermediate code."""


@dataclass
class ExpressionResult:
    """What lowering an expression produced: an operand or a pointer to one."""

    operand: Value


@dataclass
class PlainOperand(ExpressionResult):
    """The expression's value is the operand itself."""


@dataclass
class DereferencedPointer(ExpressionResult):
    """The expression designates the object the operand points to."""