"""Text helpers for rendering intermediate-representation nodes."""

from __future__ import annotations

from typing import Any

from cobaltc.tacky_ast import BinaryOperator, Constant, ConstantKind, UnaryOperator

_ESCAPES = {'"': '\\"', "\\": "\\\\", "\n": "\\n", "\t": "\\t"}

_OPERATOR_NAMES: dict[Any, str] = {
    UnaryOperator.COMPLEMENT: "Complement",
    UnaryOperator.NEGATE: "Negate",
    UnaryOperator.NOT: "Not",
    BinaryOperator.ADD: "Add",
    BinaryOperator.SUBTRACT: "Subtract",
    BinaryOperator.MULTIPLY: "Multiply",
    BinaryOperator.DIVIDE: "Divide",
    BinaryOperator.REMAINDER: "Remainder",
    BinaryOperator.EQUAL: "Equal",
    BinaryOperator.NOT_EQUAL: "NotEqual",
    BinaryOperator.LESS_THAN: "LessThan",
    BinaryOperator.LESS_OR_EQUAL: "LessOrEqual",
    BinaryOperator.GREATER_THAN: "GreaterThan",
    BinaryOperator.GREATER_OR_EQUAL: "GreaterOrEqual",
}


def escape_string(text: str) -> str:
    """Escape quotes, backslashes, newlines and tabs for a DOT label."""
    return "".join(_ESCAPES.get(c, c) for c in text)


def constant_value_to_string(constant: Constant) -> str:
    """Render a constant's value the way DOT labels show it."""
    if constant.value is None:
        return "[uninitialized]"
    if constant.kind is ConstantKind.INT:
        return str(constant.value)
    if constant.kind is ConstantKind.LONG:
        return f"{constant.value}L"
    return "[unknown_type]"


def operator_to_string(op: Any) -> str:
    """Name of a unary or binary operator, or ``unknown``."""
    return _OPERATOR_NAMES.get(op, "unknown")