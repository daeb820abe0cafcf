from cobaltc.expression_result import (
    DereferencedPointer,
    ExpressionResult,
    PlainOperand,
    TackyGeneratorError,
)
from cobaltc.tacky_ast import Constant, TemporaryVariable


def test_plain_operand_holds_value():
    result = PlainOperand(Constant(7))
    assert result.operand == Constant(7)
    assert isinstance(result, ExpressionResult)


def test_dereferenced_pointer_holds_pointer():
    pointer = TemporaryVariable("ptr")
    result = DereferencedPointer(pointer)
    assert result.operand.identifier.name == "ptr"


def test_results_of_different_kinds_are_not_equal():
    value = TemporaryVariable("x")
    assert PlainOperand(value) != DereferencedPointer(value)
    assert PlainOperand(value) == PlainOperand(TemporaryVariable("x"))


def test_match_distinguishes_results():
    def describe(result):
        match result:
            case PlainOperand(operand=op):
                return ("plain", op)
            case DereferencedPointer(operand=op):
                return ("deref", op)

    value = TemporaryVariable("t")
    assert describe(DereferencedPointer(value)) == ("deref", value)
    assert describe(PlainOperand(value)) == ("plain", value)


def test_generator_error_is_runtime_error():
    error = TackyGeneratorError("TackyGenerator: Invalid AST")
    assert str(error) == "TackyGenerator: Invalid AST"
    assert isinstance(error, RuntimeError)