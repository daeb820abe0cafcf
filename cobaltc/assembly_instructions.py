"""Instructions and top-level definitions of the assembly tree."""

from __future__ import annotations

import copy
from abc import abstractmethod
from dataclasses import dataclass, field
from typing import Any

from cobaltc.assembly_operands import (
    AssemblyAST,
    AssemblyType,
    AssemblyTypeKind,
    AssemblyVisitor,
    BinaryOperator,
    ConditionCode,
    Identifier,
    Operand,
    Register,
    UnaryOperator,
)

_MOV_KINDS = frozenset(
    {
        AssemblyTypeKind.LONG_WORD,
        AssemblyTypeKind.QUAD_WORD,
        AssemblyTypeKind.DOUBLE,
        AssemblyTypeKind.BYTE_ARRAY,
    }
)


def _as_identifier(value: Identifier | str) -> Identifier:
    return value if isinstance(value, Identifier) else Identifier(value)


def _retype(assembly_type: AssemblyType, *operands: Operand | None) -> None:
    """Give every register among ``operands`` the width ``assembly_type``."""
    for operand in operands:
        if isinstance(operand, Register):
            operand.type = assembly_type


class Instruction(AssemblyAST):
    """Base class of all assembly instructions."""

    def accept(self, visitor: AssemblyVisitor) -> Any:
        return visitor.visit(self)

    @abstractmethod
    def clone(self) -> Instruction:
        """Return an independent copy of this instruction."""


@dataclass
class CommentInstruction(Instruction):
    message: str

    def clone(self) -> CommentInstruction:
        return CommentInstruction(self.message)


@dataclass
class ReturnInstruction(Instruction):
    def clone(self) -> ReturnInstruction:
        return ReturnInstruction()


@dataclass
class MovInstruction(Instruction):
    type: AssemblyType
    source: Operand
    destination: Operand

    def __post_init__(self) -> None:
        if self.type.kind not in _MOV_KINDS:
            raise ValueError(f"mov does not support operand type {self.type.kind.name}")
        _retype(self.type, self.source, self.destination)

    def clone(self) -> MovInstruction:
        return MovInstruction(self.type, self.source.clone(), self.destination.clone())


@dataclass
class MovsxInstruction(Instruction):
    source: Operand
    destination: Operand

    def clone(self) -> MovsxInstruction:
        return MovsxInstruction(self.source.clone(), self.destination.clone())


@dataclass
class MovZeroExtendInstruction(Instruction):
    source: Operand
    destination: Operand

    def clone(self) -> MovZeroExtendInstruction:
        return MovZeroExtendInstruction(self.source.clone(), self.destination.clone())


@dataclass
class LeaInstruction(Instruction):
    source: Operand
    destination: Operand

    def clone(self) -> LeaInstruction:
        return LeaInstruction(self.source.clone(), self.destination.clone())


@dataclass
class Cvttsd2siInstruction(Instruction):
    type: AssemblyType
    source: Operand
    destination: Operand

    def __post_init__(self) -> None:
        _retype(self.type, self.source, self.destination)

    def clone(self) -> Cvttsd2siInstruction:
        return Cvttsd2siInstruction(
            self.type, self.source.clone(), self.destination.clone()
        )


@dataclass
class Cvtsi2sdInstruction(Instruction):
    type: AssemblyType
    source: Operand
    destination: Operand

    def __post_init__(self) -> None:
        _retype(self.type, self.source, self.destination)

    def clone(self) -> Cvtsi2sdInstruction:
        return Cvtsi2sdInstruction(
            self.type, self.source.clone(), self.destination.clone()
        )


@dataclass
class UnaryInstruction(Instruction):
    unary_operator: UnaryOperator
    type: AssemblyType
    operand: Operand

    def __post_init__(self) -> None:
        _retype(self.type, self.operand)

    def clone(self) -> UnaryInstruction:
        return UnaryInstruction(self.unary_operator, self.type, self.operand.clone())


@dataclass
class BinaryInstruction(Instruction):
    binary_operator: BinaryOperator
    type: AssemblyType
    source: Operand
    destination: Operand

    def __post_init__(self) -> None:
        _retype(self.type, self.source, self.destination)

    def clone(self) -> BinaryInstruction:
        return BinaryInstruction(
            self.binary_operator,
            self.type,
            self.source.clone(),
            self.destination.clone(),
        )


@dataclass
class CmpInstruction(Instruction):
    type: AssemblyType
    source: Operand
    destination: Operand

    def __post_init__(self) -> None:
        _retype(self.type, self.source, self.destination)

    def clone(self) -> CmpInstruction:
        return CmpInstruction(self.type, self.source.clone(), self.destination.clone())


@dataclass
class IdivInstruction(Instruction):
    type: AssemblyType
    operand: Operand

    def __post_init__(self) -> None:
        _retype(self.type, self.operand)

    def clone(self) -> IdivInstruction:
        return IdivInstruction(self.type, self.operand.clone())


@dataclass
class DivInstruction(Instruction):
    type: AssemblyType
    operand: Operand

    def __post_init__(self) -> None:
        _retype(self.type, self.operand)

    def clone(self) -> DivInstruction:
        return DivInstruction(self.type, self.operand.clone())


@dataclass
class CdqInstruction(Instruction):
    type: AssemblyType

    def clone(self) -> CdqInstruction:
        return CdqInstruction(self.type)


@dataclass
class JmpInstruction(Instruction):
    identifier: Identifier

    def __post_init__(self) -> None:
        self.identifier = _as_identifier(self.identifier)

    def clone(self) -> JmpInstruction:
        return JmpInstruction(self.identifier.name)


@dataclass
class JmpCCInstruction(Instruction):
    condition_code: ConditionCode
    identifier: Identifier

    def __post_init__(self) -> None:
        self.identifier = _as_identifier(self.identifier)

    def clone(self) -> JmpCCInstruction:
        return JmpCCInstruction(self.condition_code, self.identifier.name)


@dataclass
class SetCCInstruction(Instruction):
    condition_code: ConditionCode
    destination: Operand

    def __post_init__(self) -> None:
        _retype(AssemblyType.BYTE, self.destination)

    def clone(self) -> SetCCInstruction:
        return SetCCInstruction(self.condition_code, self.destination.clone())


@dataclass
class LabelInstruction(Instruction):
    identifier: Identifier

    def __post_init__(self) -> None:
        self.identifier = _as_identifier(self.identifier)

    def clone(self) -> LabelInstruction:
        return LabelInstruction(self.identifier.name)


@dataclass
class PushInstruction(Instruction):
    destination: Operand

    def __post_init__(self) -> None:
        _retype(AssemblyType.QUAD_WORD, self.destination)

    def clone(self) -> PushInstruction:
        return PushInstruction(self.destination.clone())


@dataclass
class CallInstruction(Instruction):
    identifier: Identifier

    def __post_init__(self) -> None:
        self.identifier = _as_identifier(self.identifier)

    def clone(self) -> CallInstruction:
        return CallInstruction(self.identifier.name)


class TopLevel(AssemblyAST):
    """A top-level definition: a function, a static variable or a constant."""

    @abstractmethod
    def clone(self) -> TopLevel:
        """Return an independent copy of this definition."""


@dataclass
class FunctionDefinition(TopLevel):
    name: Identifier
    is_global: bool
    instructions: list[Instruction] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.name = _as_identifier(self.name)

    def clone(self) -> FunctionDefinition:
        return FunctionDefinition(
            self.name.name,
            self.is_global,
            [instruction.clone() for instruction in self.instructions],
        )


@dataclass
class StaticVariable(TopLevel):
    name: Identifier
    is_global: bool
    alignment: int
    static_init: Any = None

    def __post_init__(self) -> None:
        self.name = _as_identifier(self.name)

    def clone(self) -> StaticVariable:
        return StaticVariable(
            self.name.name,
            self.is_global,
            self.alignment,
            copy.deepcopy(self.static_init),
        )


@dataclass
class StaticConstant(TopLevel):
    name: Identifier
    alignment: int
    static_init: Any = None

    def __post_init__(self) -> None:
        self.name = _as_identifier(self.name)

    def clone(self) -> StaticConstant:
        return StaticConstant(
            self.name.name, self.alignment, copy.deepcopy(self.static_init)
        )


@dataclass
class Program(AssemblyAST):
    definitions: list[TopLevel] = field(default_factory=list)

    def accept(self, visitor: AssemblyVisitor) -> Any:
        return visitor.visit(self)