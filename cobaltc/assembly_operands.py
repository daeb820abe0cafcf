"""Operands and basic vocabulary of the assembly tree."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from cobaltc.tacky_ast import ConstantKind


class AssemblyVisitor:
    """Dispatches nodes to ``visit_<ClassName>`` methods.

    Lookup walks the node's class hierarchy, so a handler for a base class
    also receives its subclasses.
    """

    def visit(self, node: AssemblyAST) -> Any:
        for cls in type(node).__mro__:
            handler = getattr(self, f"visit_{cls.__name__}", None)
            if handler is not None:
                return handler(node)
        raise TypeError(f"{type(self).__name__} cannot visit {type(node).__name__}")


class AssemblyAST(ABC):
    """Base class of every assembly node."""

    def accept(self, visitor: AssemblyVisitor) -> Any:
        return visitor.visit(self)


class RegisterName(Enum):
    AX = auto()
    CX = auto()
    DX = auto()
    DI = auto()
    SI = auto()
    R8 = auto()
    R9 = auto()
    R10 = auto()
    R11 = auto()
    SP = auto()
    BP = auto()
    XMM0 = auto()
    XMM1 = auto()
    XMM2 = auto()
    XMM3 = auto()
    XMM4 = auto()
    XMM5 = auto()
    XMM6 = auto()
    XMM7 = auto()
    XMM14 = auto()
    XMM15 = auto()


class AssemblyTypeKind(Enum):
    BYTE = auto()
    WORD = auto()
    LONG_WORD = auto()
    QUAD_WORD = auto()
    DOUBLE = auto()
    BYTE_ARRAY = auto()
    NONE = auto()


_FIXED_SIZES = {
    AssemblyTypeKind.BYTE: 1,
    AssemblyTypeKind.WORD: 2,
    AssemblyTypeKind.LONG_WORD: 4,
    AssemblyTypeKind.QUAD_WORD: 8,
    AssemblyTypeKind.DOUBLE: 8,
    AssemblyTypeKind.NONE: 0,
}


@dataclass(frozen=True)
class AssemblyType:
    """An operand type; byte arrays carry their own size and alignment."""

    kind: AssemblyTypeKind = AssemblyTypeKind.NONE
    byte_size: int = 0
    byte_alignment: int = 0

    @classmethod
    def byte_array(cls, size: int, alignment: int) -> AssemblyType:
        return cls(AssemblyTypeKind.BYTE_ARRAY, size, alignment)

    def size(self) -> int:
        if self.kind is AssemblyTypeKind.BYTE_ARRAY:
            return self.byte_size
        return _FIXED_SIZES[self.kind]

    def alignment(self) -> int:
        if self.kind is AssemblyTypeKind.BYTE_ARRAY:
            return self.byte_alignment
        return _FIXED_SIZES[self.kind]

    def is_byte_array(self) -> bool:
        return self.kind is AssemblyTypeKind.BYTE_ARRAY


AssemblyType.BYTE = AssemblyType(AssemblyTypeKind.BYTE)
AssemblyType.WORD = AssemblyType(AssemblyTypeKind.WORD)
AssemblyType.LONG_WORD = AssemblyType(AssemblyTypeKind.LONG_WORD)
AssemblyType.QUAD_WORD = AssemblyType(AssemblyTypeKind.QUAD_WORD)
AssemblyType.DOUBLE = AssemblyType(AssemblyTypeKind.DOUBLE)
AssemblyType.NONE = AssemblyType(AssemblyTypeKind.NONE)


@dataclass
class Identifier(AssemblyAST):
    name: str

    def clone(self) -> Identifier:
        return Identifier(self.name)


def _as_identifier(value: Identifier | str) -> Identifier:
    return value if isinstance(value, Identifier) else Identifier(value)


class UnaryOperator(Enum):
    NEG = auto()
    NOT = auto()
    SHR = auto()


class BinaryOperator(Enum):
    ADD = auto()
    SUB = auto()
    MULT = auto()
    DIV_DOUBLE = auto()
    AND = auto()
    OR = auto()
    XOR = auto()


class ConditionCode(Enum):
    E = auto()
    NE = auto()
    G = auto()
    GE = auto()
    L = auto()
    LE = auto()
    A = auto()
    AE = auto()
    B = auto()
    BE = auto()
    NONE = auto()


class Operand(AssemblyAST):
    """Base class of instruction operands."""

    @abstractmethod
    def clone(self) -> Operand:
        """Return an independent copy of this operand."""

    def is_memory(self) -> bool:
        return False


@dataclass
class ImmediateValue(Operand):
    value: int | float | None = None
    kind: ConstantKind = ConstantKind.INT

    def clone(self) -> ImmediateValue:
        return ImmediateValue(self.value, self.kind)


@dataclass
class Register(Operand):
    name: RegisterName
    type: AssemblyType = AssemblyType.LONG_WORD

    def __post_init__(self) -> None:
        if not isinstance(self.name, RegisterName):
            raise TypeError(f"not a register name: {self.name!r}")

    def clone(self) -> Register:
        return Register(self.name, self.type)


def _quad_register(register: Register | RegisterName) -> Register:
    if isinstance(register, RegisterName):
        return Register(register, AssemblyType.QUAD_WORD)
    register.type = AssemblyType.QUAD_WORD
    return register


@dataclass
class PseudoRegister(Operand):
    identifier: Identifier

    def __post_init__(self) -> None:
        self.identifier = _as_identifier(self.identifier)

    def clone(self) -> PseudoRegister:
        return PseudoRegister(self.identifier.name)


@dataclass
class MemoryAddress(Operand):
    """A memory location at ``offset`` from a base register."""

    base_register: Register
    offset: int

    def __post_init__(self) -> None:
        self.base_register = _quad_register(self.base_register)

    def clone(self) -> MemoryAddress:
        return MemoryAddress(self.base_register.clone(), self.offset)

    def is_memory(self) -> bool:
        return True


@dataclass
class IndexedAddress(Operand):
    """A memory location at base + index * offset."""

    base_register: Register
    index_register: Register
    offset: int

    def __post_init__(self) -> None:
        self.base_register = _quad_register(self.base_register)
        self.index_register = _quad_register(self.index_register)

    def clone(self) -> IndexedAddress:
        return IndexedAddress(
            self.base_register.clone(), self.index_register.clone(), self.offset
        )

    def is_memory(self) -> bool:
        return True


@dataclass
class DataOperand(Operand):
    """A static object addressed by its symbol."""

    identifier: Identifier

    def __post_init__(self) -> None:
        self.identifier = _as_identifier(self.identifier)

    def clone(self) -> DataOperand:
        return DataOperand(self.identifier.name)

    def is_memory(self) -> bool:
        return True


@dataclass
class PseudoMemory(Operand):
    """A location inside an aggregate not yet assigned a stack slot."""

    identifier: Identifier
    offset: int

    def __post_init__(self) -> None:
        self.identifier = _as_identifier(self.identifier)

    def clone(self) -> PseudoMemory:
        return PseudoMemory(self.identifier.name, self.offset)