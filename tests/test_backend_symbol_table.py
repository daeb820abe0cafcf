import pytest

from cobaltc.assembly_operands import AssemblyType
from cobaltc.backend_symbol_table import (
    BackendSymbolTable,
    DuplicateSymbolError,
    FunctionEntry,
    ObjectEntry,
)


def test_insert_and_lookup():
    table = BackendSymbolTable()
    entry = ObjectEntry(AssemblyType.LONG_WORD, False, False)
    table.insert_symbol("x", entry)
    assert table.symbol_at("x") == entry
    assert table.contains_symbol("x")
    assert "x" in table


def test_duplicate_insert_raises():
    table = BackendSymbolTable()
    table.insert_symbol("main", FunctionEntry(0, True))
    with pytest.raises(DuplicateSymbolError, match="main"):
        table.insert_symbol("main", FunctionEntry(16, True))
    assert table.symbol_at("main") == FunctionEntry(0, True)


def test_insert_or_assign_replaces():
    table = BackendSymbolTable()
    table.insert_symbol("v", ObjectEntry(AssemblyType.LONG_WORD, False, False))
    replacement = ObjectEntry(AssemblyType.DOUBLE, True, True)
    table.insert_or_assign_symbol("v", replacement)
    assert table.symbol_at("v") == replacement
    assert len(table) == 1


def test_missing_symbol_raises_key_error():
    table = BackendSymbolTable()
    with pytest.raises(KeyError):
        table.symbol_at("nope")
    assert not table.contains_symbol("nope")


def test_symbols_view_is_read_only():
    table = BackendSymbolTable()
    table.insert_symbol("a", FunctionEntry(0, False))
    view = table.symbols()
    assert set(view) == {"a"}
    with pytest.raises(TypeError):
        view["b"] = FunctionEntry(0, False)


def test_symbols_view_tracks_later_inserts():
    table = BackendSymbolTable()
    view = table.symbols()
    table.insert_symbol("late", FunctionEntry(0, True))
    assert "late" in view


def test_entry_mutation_through_lookup_persists():
    table = BackendSymbolTable()
    table.insert_symbol("f", FunctionEntry(0, True))
    table.symbol_at("f").stack_frame_size = 32
    assert table.symbol_at("f").stack_frame_size == 32