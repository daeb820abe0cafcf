# cobaltc

This package provides the data structures for the middle and back end of a small C compiler that targets x86-64.

- **`cobaltc.tacky_ast`** holds the three-address intermediate representation, called TACKY:
  - Values: `Constant`, which has a `value` and a `ConstantKind`, and `TemporaryVariable`.
  - Instructions, for example `BinaryInstruction`, `AddPointerInstruction`, `CopyToOffsetInstruction` and `JumpIfZeroInstruction`.
  - Top-level items: `FunctionDefinition`, `StaticVariable` and `Program`.

  Every node has an `accept(visitor)` method. `TackyVisitor.visit` dispatches a node to a method named `visit_<ClassName>`. It walks the node's class hierarchy to find one, and raises `TypeError` if it finds no handler.
- **`cobaltc.tacky_format`** has three text helpers:
  - `escape_string` escapes quotes, backslashes, newlines and tabs.
  - `constant_value_to_string` gives `"[uninitialized]"` when the value is `None`, and the plain number for int constants. A long constant gets an `L` suffix. Any other kind gives `"[unknown_type]"`.
  - `operator_to_string` gives the operator's name, such as `Add` or `Negate`, and `"unknown"` for anything else.
- **`cobaltc.tacky_printer`**: `PrinterVisitor` turns a TACKY tree into a Graphviz DOT graph with one graph node per tree node. `to_dot(ast)` returns the text. `generate_dot_file(filename, ast)` writes it to a file.
- **`cobaltc.expression_result`** holds `PlainOperand` and `DereferencedPointer`, the two results of lowering an expression. It also defines `TackyGeneratorError`.
- **`cobaltc.assembly_operands`** has the vocabulary of the assembly tree:
  - `AssemblyType`, with the ready-made values `BYTE`, `WORD`, `LONG_WORD`, `QUAD_WORD`, `DOUBLE` and `NONE`. `AssemblyType.byte_array(size, alignment)` makes a byte-array type, and every type has `size()` and `alignment()`.
  - The enumerations `RegisterName`, `UnaryOperator`, `BinaryOperator` and `ConditionCode`.
  - The operand classes `ImmediateValue`, `Register`, `PseudoRegister`, `MemoryAddress`, `IndexedAddress`, `DataOperand` and `PseudoMemory`.

  `AssemblyVisitor` dispatches the same way as `TackyVisitor`.
- **`cobaltc.assembly_instructions`** has the assembly instructions, from `MovInstruction` to `CallInstruction`, and the top-level items `FunctionDefinition`, `StaticVariable`, `StaticConstant` and `Program`.
  - Each instruction with a type sets that width on the `Register` operands it is given. `SetCCInstruction` sets `BYTE` and `PushInstruction` sets `QUAD_WORD`.
  - `MovInstruction` raises `ValueError` for any type except long word, quad word, double or byte array.
  - Every instruction and top-level item has `clone()`, which returns an independent copy.
- **`cobaltc.backend_symbol_table`**: `BackendSymbolTable` maps names to `ObjectEntry` or `FunctionEntry` records.

## Installation

```
pip install .
```

## Example

```python
from cobaltc.tacky_ast import (
    BinaryInstruction, BinaryOperator, Constant, FunctionDefinition,
    Identifier, Program, ReturnInstruction, TemporaryVariable,
)
from cobaltc.tacky_printer import PrinterVisitor

body = [
    BinaryInstruction(BinaryOperator.ADD, Constant(1), Constant(2), TemporaryVariable("tmp.0")),
    ReturnInstruction(TemporaryVariable("tmp.0")),
]
program = Program([FunctionDefinition("main", True, [Identifier("x")], body)])

print(PrinterVisitor().to_dot(program))
```

The output is a `digraph TackyAST { ... }` document that any Graphviz tool can render.

## Backend symbol table

```python
from cobaltc.assembly_operands import AssemblyType
from cobaltc.backend_symbol_table import BackendSymbolTable, DuplicateSymbolError, ObjectEntry

table = BackendSymbolTable()
table.insert_symbol("x", ObjectEntry(AssemblyType.LONG_WORD, False, False))
try:
    table.insert_symbol("x", ObjectEntry(AssemblyType.QUAD_WORD, False, False))
except DuplicateSymbolError as exc:
    print(exc)
```

- `insert_or_assign_symbol` replaces an existing entry and raises no error.
- `symbol_at` raises `KeyError` for an unknown name.
- `symbols()` returns a read-only view of the table.

## What this package does not do

This package contains only the tree types, a DOT printer for the intermediate representation, and the backend symbol table. It does not:

- read or parse C source;
- lower syntax trees to TACKY;
- turn TACKY into assembly;
- assign stack slots or fix up instructions;
- write assembly files;
- provide a command-line compiler.

## Tests

```
pip install .[test]
pytest
```