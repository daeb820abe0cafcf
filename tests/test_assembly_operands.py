import pytest

from cobaltc.assembly_operands import (
    AssemblyType,
    AssemblyTypeKind,
    AssemblyVisitor,
    DataOperand,
    Identifier,
    ImmediateValue,
    IndexedAddress,
    MemoryAddress,
    Operand,
    PseudoMemory,
    PseudoRegister,
    Register,
    RegisterName,
)
from cobaltc.tacky_ast import ConstantKind


@pytest.mark.parametrize(
    "assembly_type, size",
    [
        (AssemblyType.BYTE, 1),
        (AssemblyType.WORD, 2),
        (AssemblyType.LONG_WORD, 4),
        (AssemblyType.QUAD_WORD, 8),
        (AssemblyType.DOUBLE, 8),
        (AssemblyType.NONE, 0),
    ],
)
def test_fixed_sizes_and_alignments(assembly_type, size):
    assert assembly_type.size() == size
    assert assembly_type.alignment() == size
    assert not assembly_type.is_byte_array()


def test_byte_array_uses_own_size_and_alignment():
    array = AssemblyType.byte_array(24, 16)
    assert array.is_byte_array()
    assert array.size() == 24
    assert array.alignment() == 16
    assert array.kind is AssemblyTypeKind.BYTE_ARRAY


def test_default_type_is_none():
    assert AssemblyType() == AssemblyType.NONE


def test_register_defaults_to_long_word():
    reg = Register(RegisterName.AX)
    assert reg.type == AssemblyType.LONG_WORD
    assert not reg.is_memory()


def test_register_rejects_bad_name():
    with pytest.raises(TypeError):
        Register("ax")


def test_register_clone_is_independent():
    reg = Register(RegisterName.CX, AssemblyType.BYTE)
    copy = reg.clone()
    assert copy == reg
    copy.type = AssemblyType.QUAD_WORD
    assert reg.type == AssemblyType.BYTE


def test_memory_address_forces_quad_word_base():
    from_name = MemoryAddress(RegisterName.BP, -8)
    assert from_name.base_register == Register(RegisterName.BP, AssemblyType.QUAD_WORD)
    from_register = MemoryAddress(Register(RegisterName.AX, AssemblyType.BYTE), 4)
    assert from_register.base_register.type == AssemblyType.QUAD_WORD
    assert from_register.is_memory()


def test_memory_address_clone_is_deep():
    address = MemoryAddress(RegisterName.BP, -4)
    copy = address.clone()
    assert copy == address
    assert copy.base_register is not address.base_register


def test_indexed_address_forces_quad_word_registers():
    address = IndexedAddress(RegisterName.AX, Register(RegisterName.DX), 8)
    assert address.base_register.type == AssemblyType.QUAD_WORD
    assert address.index_register.type == AssemblyType.QUAD_WORD
    copy = address.clone()
    assert copy == address
    assert copy.index_register is not address.index_register
    assert address.is_memory()


def test_data_operand_is_memory_and_clones():
    operand = DataOperand("counter")
    assert operand.is_memory()
    assert operand.identifier == Identifier("counter")
    assert operand.clone() == operand


def test_pseudo_operands_are_not_memory():
    pseudo = PseudoRegister("tmp.0")
    mem = PseudoMemory("arr", 12)
    assert not pseudo.is_memory()
    assert not mem.is_memory()
    assert pseudo.clone() == pseudo
    assert mem.clone() == mem


def test_immediate_value_clone():
    imm = ImmediateValue(5, ConstantKind.LONG)
    copy = imm.clone()
    assert copy == imm
    assert copy is not imm


def test_identifier_clone():
    ident = Identifier("main")
    assert ident.clone() == ident
    assert ident.clone() is not ident


def test_operand_is_abstract():
    with pytest.raises(TypeError):
        Operand()


class _NameVisitor(AssemblyVisitor):
    def visit_Register(self, node):
        return node.name

    def visit_Operand(self, node):
        return "operand"


def test_visitor_dispatches_by_class_and_base():
    visitor = _NameVisitor()
    assert Register(RegisterName.SI).accept(visitor) is RegisterName.SI
    assert DataOperand("x").accept(visitor) == "operand"


def test_visitor_without_handler_raises():
    with pytest.raises(TypeError):
        Identifier("x").accept(_NameVisitor())