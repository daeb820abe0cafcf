import pytest

from cobaltc.tacky_ast import (
    AddPointerInstruction,
    BinaryInstruction,
    BinaryOperator,
    Constant,
    ConstantKind,
    CopyToOffsetInstruction,
    FunctionCallInstruction,
    FunctionDefinition,
    Identifier,
    Instruction,
    JumpIfZeroInstruction,
    LabelInstruction,
    Program,
    ReturnInstruction,
    StaticVariable,
    TackyVisitor,
    TemporaryVariable,
    Value,
)


class _Recorder(TackyVisitor):
    def __init__(self):
        self.seen = []

    def visit_Constant(self, node):
        self.seen.append(("constant", node.value))
        return "c"

    def visit_TemporaryVariable(self, node):
        self.seen.append(("tmp", node.identifier.name))
        return "t"

    def visit_Instruction(self, node):
        self.seen.append(("instr", type(node).__name__))
        return "i"


def test_accept_dispatches_by_class_name():
    rec = _Recorder()
    assert Constant(7).accept(rec) == "c"
    assert TemporaryVariable("tmp.0").accept(rec) == "t"
    assert rec.seen == [("constant", 7), ("tmp", "tmp.0")]


def test_visit_falls_back_to_base_class_handler():
    rec = _Recorder()
    result = ReturnInstruction(Constant(0)).accept(rec)
    assert result == "i"
    assert rec.seen == [("instr", "ReturnInstruction")]


def test_visit_without_handler_raises_type_error():
    with pytest.raises(TypeError):
        Program([]).accept(_Recorder())


def test_value_is_abstract():
    with pytest.raises(TypeError):
        Value()


def test_constant_clone_is_equal_and_independent():
    original = Constant(5, ConstantKind.LONG)
    copy = original.clone()
    assert copy == original
    assert copy is not original
    copy.value = 6
    assert original.value == 5


def test_temporary_variable_clone_is_independent():
    original = TemporaryVariable("x")
    copy = original.clone()
    assert copy == original
    copy.identifier.name = "y"
    assert original.identifier.name == "x"


def test_string_names_become_identifiers():
    assert TemporaryVariable("a").identifier == Identifier("a")
    assert LabelInstruction("end").identifier == Identifier("end")
    assert JumpIfZeroInstruction(Constant(1), "lbl").identifier == Identifier("lbl")
    assert CopyToOffsetInstruction(Constant(1), "arr", 8).identifier == Identifier("arr")
    assert FunctionCallInstruction("f", [], None).name == Identifier("f")
    assert StaticVariable("g", True).name == Identifier("g")


def test_function_definition_parameters_normalised():
    fn = FunctionDefinition("main", True, ["a", Identifier("b")], [])
    assert fn.parameters == [Identifier("a"), Identifier("b")]
    assert fn.name.name == "main"
    assert fn.is_global is True


def test_instruction_fields_kept():
    instr = BinaryInstruction(BinaryOperator.ADD, Constant(1), Constant(2), TemporaryVariable("t"))
    assert instr.binary_operator is BinaryOperator.ADD
    assert instr.source1 == Constant(1)
    assert instr.source2 == Constant(2)
    assert isinstance(instr, Instruction)
    ptr = AddPointerInstruction(TemporaryVariable("p"), Constant(3), 4, TemporaryVariable("d"))
    assert ptr.scale == 4


def test_constant_default_is_uninitialised_int():
    c = Constant()
    assert c.value is None
    assert c.kind is ConstantKind.INT