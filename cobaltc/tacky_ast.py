"""Node types of the three-address intermediate representation."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any


class TackyVisitor:
    """Dispatches nodes to ``visit_<ClassName>`` methods.

    Lookup walks the node's class hierarchy, so a handler for a base class
    also receives its subclasses.
    """

    def visit(self, node: TackyAST) -> Any:
        for cls in type(node).__mro__:
            handler = getattr(self, f"visit_{cls.__name__}", None)
            if handler is not None:
                return handler(node)
        raise TypeError(f"{type(self).__name__} cannot visit {type(node).__name__}")


class TackyAST(ABC):
    """Base class of every intermediate-representation node."""

    def accept(self, visitor: TackyVisitor) -> Any:
        return visitor.visit(self)


def _as_identifier(value: Identifier | str) -> Identifier:
    return value if isinstance(value, Identifier) else Identifier(value)


@dataclass
class Identifier(TackyAST):
    name: str


class UnaryOperator(Enum):
    COMPLEMENT = auto()
    NEGATE = auto()
    NOT = auto()


class BinaryOperator(Enum):
    ADD = auto()
    SUBTRACT = auto()
    MULTIPLY = auto()
    DIVIDE = auto()
    REMAINDER = auto()
    EQUAL = auto()
    NOT_EQUAL = auto()
    LESS_THAN = auto()
    LESS_OR_EQUAL = auto()
    GREATER_THAN = auto()
    GREATER_OR_EQUAL = auto()


class ConstantKind(Enum):
    """The C type a constant value carries."""

    INT = "int"
    LONG = "long"
    UINT = "unsigned int"
    ULONG = "unsigned long"
    DOUBLE = "double"


class Value(TackyAST):
    """An operand: a constant or a variable."""

    @abstractmethod
    def clone(self) -> Value:
        """Return an independent copy of this value."""


@dataclass
class Constant(Value):
    """A constant; ``value`` of None means uninitialised."""

    value: int | float | None = None
    kind: ConstantKind = ConstantKind.INT

    def clone(self) -> Constant:
        return Constant(self.value, self.kind)


@dataclass
class TemporaryVariable(Value):
    identifier: Identifier

    def __post_init__(self) -> None:
        self.identifier = _as_identifier(self.identifier)

    def clone(self) -> TemporaryVariable:
        return TemporaryVariable(self.identifier.name)


class Instruction(TackyAST):
    """Base class of all instructions."""


@dataclass
class ReturnInstruction(Instruction):
    value: Value | None


@dataclass
class SignExtendInstruction(Instruction):
    source: Value | None
    destination: Value | None


@dataclass
class TruncateInstruction(Instruction):
    source: Value | None
    destination: Value | None


@dataclass
class ZeroExtendInstruction(Instruction):
    source: Value | None
    destination: Value | None


@dataclass
class DoubleToIntInstruction(Instruction):
    source: Value | None
    destination: Value | None


@dataclass
class DoubleToUIntInstruction(Instruction):
    source: Value | None
    destination: Value | None


@dataclass
class IntToDoubleInstruction(Instruction):
    source: Value | None
    destination: Value | None


@dataclass
class UIntToDoubleInstruction(Instruction):
    source: Value | None
    destination: Value | None


@dataclass
class UnaryInstruction(Instruction):
    unary_operator: UnaryOperator
    source: Value | None
    destination: Value | None


@dataclass
class BinaryInstruction(Instruction):
    binary_operator: BinaryOperator
    source1: Value | None
    source2: Value | None
    destination: Value | None


@dataclass
class CopyInstruction(Instruction):
    source: Value | None
    destination: Value | None


@dataclass
class GetAddressInstruction(Instruction):
    source: Value | None
    destination: Value | None


@dataclass
class LoadInstruction(Instruction):
    source_pointer: Value | None
    destination: Value | None


@dataclass
class StoreInstruction(Instruction):
    source: Value | None
    destination_pointer: Value | None


@dataclass
class AddPointerInstruction(Instruction):
    source_pointer: Value | None
    index: Value | None
    scale: int
    destination: Value | None


@dataclass
class CopyToOffsetInstruction(Instruction):
    source: Value | None
    identifier: Identifier
    offset: int

    def __post_init__(self) -> None:
        self.identifier = _as_identifier(self.identifier)


@dataclass
class JumpInstruction(Instruction):
    identifier: Identifier

    def __post_init__(self) -> None:
        self.identifier = _as_identifier(self.identifier)


@dataclass
class JumpIfZeroInstruction(Instruction):
    condition: Value | None
    identifier: Identifier

    def __post_init__(self) -> None:
        self.identifier = _as_identifier(self.identifier)


@dataclass
class JumpIfNotZeroInstruction(Instruction):
    condition: Value | None
    identifier: Identifier

    def __post_init__(self) -> None:
        self.identifier = _as_identifier(self.identifier)


@dataclass
class LabelInstruction(Instruction):
    identifier: Identifier

    def __post_init__(self) -> None:
        self.identifier = _as_identifier(self.identifier)


@dataclass
class FunctionCallInstruction(Instruction):
    name: Identifier
    arguments: list[Value] = field(default_factory=list)
    destination: Value | None = None

    def __post_init__(self) -> None:
        self.name = _as_identifier(self.name)


class TopLevel(TackyAST):
    """A top-level definition: a function or a static variable."""


@dataclass
class FunctionDefinition(TopLevel):
    name: Identifier
    is_global: bool
    parameters: list[Identifier] = field(default_factory=list)
    body: list[Instruction] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.name = _as_identifier(self.name)
        self.parameters = [_as_identifier(p) for p in self.parameters]


@dataclass
class StaticVariable(TopLevel):
    name: Identifier
    is_global: bool
    type: Any = None
    init: Any = None

    def __post_init__(self) -> None:
        self.name = _as_identifier(self.name)


@dataclass
class Program(TackyAST):
    definitions: list[TopLevel] = field(default_factory=list)