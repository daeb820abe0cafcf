"""Symbol table used by the assembly stages."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Union

from cobaltc.assembly_operands import AssemblyType


@dataclass
class ObjectEntry:
    """A variable or constant: its assembly type and storage."""

    type: AssemblyType
    is_static: bool
    is_constant: bool


@dataclass
class FunctionEntry:
    """A function: its stack frame size and whether it is defined here."""

    stack_frame_size: int
    defined: bool


BackendSymbolTableEntry = Union[ObjectEntry, FunctionEntry]


class DuplicateSymbolError(RuntimeError):
    """Raised when inserting a name that is already in the table."""


class BackendSymbolTable:
    """Maps symbol names to object or function entries."""

    def __init__(self) -> None:
        self._symbols: dict[str, BackendSymbolTableEntry] = {}

    def symbols(self) -> Mapping[str, BackendSymbolTableEntry]:
        """A read-only view of all entries."""
        return MappingProxyType(self._symbols)

    def symbol_at(self, name: str) -> BackendSymbolTableEntry:
        """Return the entry for ``name``; raises KeyError if absent."""
        return self._symbols[name]

    def insert_symbol(self, name: str, entry: BackendSymbolTableEntry) -> None:
        """Add a new entry; raises DuplicateSymbolError if ``name`` exists."""
        if name in self._symbols:
            raise DuplicateSymbolError(f"Symbol '{name}' already exists in symbol table")
        self._symbols[name] = entry

    def insert_or_assign_symbol(self, name: str, entry: BackendSymbolTableEntry) -> None:
        """Add or replace the entry for ``name``."""
        self._symbols[name] = entry

    def contains_symbol(self, name: str) -> bool:
        return name in self._symbols

    def __contains__(self, name: object) -> bool:
        return name in self._symbols

    def __len__(self) -> int:
        return len(self._symbols)