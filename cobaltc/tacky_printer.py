"""Render an intermediate-representation tree as a Graphviz DOT graph."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from cobaltc.tacky_ast import (
    AddPointerInstruction,
    BinaryInstruction,
    Constant,
    CopyInstruction,
    CopyToOffsetInstruction,
    DoubleToIntInstruction,
    DoubleToUIntInstruction,
    FunctionCallInstruction,
    FunctionDefinition,
    GetAddressInstruction,
    Identifier,
    IntToDoubleInstruction,
    JumpIfNotZeroInstruction,
    JumpIfZeroInstruction,
    JumpInstruction,
    LabelInstruction,
    LoadInstruction,
    Program,
    ReturnInstruction,
    SignExtendInstruction,
    StaticVariable,
    StoreInstruction,
    TackyAST,
    TackyVisitor,
    TemporaryVariable,
    TruncateInstruction,
    UIntToDoubleInstruction,
    UnaryInstruction,
    ZeroExtendInstruction,
)
from cobaltc.tacky_format import (
    constant_value_to_string,
    escape_string,
    operator_to_string,
)


class PrinterVisitor(TackyVisitor):
    """Builds a DOT description of a tree, one graph node per tree node."""

    def __init__(self) -> None:
        self._node_ids: dict[int, int] = {}
        self._lines: list[str] = []

    def to_dot(self, ast: TackyAST) -> str:
        """Return the DOT text describing ``ast``."""
        self._node_ids = {}
        self._lines = [
            "digraph TackyAST {\n",
            '  node [shape=box, fontname="Arial", fontsize=10];\n',
        ]
        ast.accept(self)
        self._lines.append("}\n")
        return "".join(self._lines)

    def generate_dot_file(self, filename: str | Path, ast: TackyAST) -> None:
        """Write the DOT text describing ``ast`` to ``filename``."""
        content = self.to_dot(ast)
        Path(filename).write_text(content)

    def visit(self, node: TackyAST) -> Any:
        return super().visit(node)

    # -- helpers -----------------------------------------------------------

    def _node_id(self, node: TackyAST) -> int:
        return self._node_ids.setdefault(id(node), len(self._node_ids))

    def _declare(self, node: TackyAST, label: str, extra: str = "") -> int:
        node_id = self._node_id(node)
        self._lines.append(f'  node{node_id} [label="{label}"{extra}];\n')
        return node_id

    def _child(self, parent_id: int, child: TackyAST | None, label: str) -> None:
        if child is None:
            return
        child.accept(self)
        self._lines.append(
            f'  node{parent_id} -> node{self._node_id(child)} [label="{label}"];\n'
        )

    def _source_destination(self, node: Any, name: str) -> None:
        node_id = self._declare(node, name)
        self._child(node_id, node.source, "source")
        self._child(node_id, node.destination, "destination")

    # -- leaves ------------------------------------------------------------

    def visit_Identifier(self, node: Identifier) -> None:
        self._declare(node, f"Identifier\\nname: {escape_string(node.name)}")

    def visit_Constant(self, node: Constant) -> None:
        value = escape_string(constant_value_to_string(node))
        self._declare(node, f"Constant\\nvalue: {value}")

    def visit_TemporaryVariable(self, node: TemporaryVariable) -> None:
        node_id = self._declare(node, "TemporaryVariable")
        self._child(node_id, node.identifier, "identifier")

    # -- instructions ------------------------------------------------------

    def visit_ReturnInstruction(self, node: ReturnInstruction) -> None:
        node_id = self._declare(node, "ReturnInstruction")
        self._child(node_id, node.value, "value")

    def visit_SignExtendInstruction(self, node: SignExtendInstruction) -> None:
        self._source_destination(node, "SignExtendInstruction")

    def visit_TruncateInstruction(self, node: TruncateInstruction) -> None:
        self._source_destination(node, "TruncateInstruction")

    def visit_ZeroExtendInstruction(self, node: ZeroExtendInstruction) -> None:
        self._source_destination(node, "ZeroExtendInstruction")

    def visit_DoubleToIntInstruction(self, node: DoubleToIntInstruction) -> None:
        self._source_destination(node, "DoubleToIntIntruction")

    def visit_DoubleToUIntInstruction(self, node: DoubleToUIntInstruction) -> None:
        self._source_destination(node, "DoubleToUIntIntruction")

    def visit_IntToDoubleInstruction(self, node: IntToDoubleInstruction) -> None:
        self._source_destination(node, "IntToDoubleIntruction")

    def visit_UIntToDoubleInstruction(self, node: UIntToDoubleInstruction) -> None:
        self._source_destination(node, "UIntToDoubleIntruction")

    def visit_UnaryInstruction(self, node: UnaryInstruction) -> None:
        label = f"UnaryInstruction\\noperator: {operator_to_string(node.unary_operator)}\\n"
        node_id = self._declare(node, label)
        self._child(node_id, node.source, "source")
        self._child(node_id, node.destination, "destination")

    def visit_BinaryInstruction(self, node: BinaryInstruction) -> None:
        label = f"BinaryInstruction\\noperator: {operator_to_string(node.binary_operator)}\\n"
        node_id = self._declare(node, label)
        self._child(node_id, node.source1, "source1")
        self._child(node_id, node.source2, "source2")
        self._child(node_id, node.destination, "destination")

    def visit_CopyInstruction(self, node: CopyInstruction) -> None:
        self._source_destination(node, "CopyInstruction")

    def visit_GetAddressInstruction(self, node: GetAddressInstruction) -> None:
        self._source_destination(node, "GetAddressInstruction")

    def visit_LoadInstruction(self, node: LoadInstruction) -> None:
        node_id = self._declare(node, "LoadInstruction")
        self._child(node_id, node.source_pointer, "source_pointer")
        self._child(node_id, node.destination, "destination")

    def visit_StoreInstruction(self, node: StoreInstruction) -> None:
        node_id = self._declare(node, "StoreInstruction")
        self._child(node_id, node.source, "source")
        self._child(node_id, node.destination_pointer, "destination_pointer")

    def visit_AddPointerInstruction(self, node: AddPointerInstruction) -> None:
        node_id = self._declare(node, f"AddPointerInstruction\\nscale: {node.scale}")
        self._child(node_id, node.source_pointer, "source_pointer")
        self._child(node_id, node.index, "index")
        self._child(node_id, node.destination, "destination")

    def visit_CopyToOffsetInstruction(self, node: CopyToOffsetInstruction) -> None:
        node_id = self._declare(node, f"CopyToOffsetInstruction\\noffset: {node.offset}")
        self._child(node_id, node.source, "source")
        self._child(node_id, node.identifier, "identifier")

    def visit_JumpInstruction(self, node: JumpInstruction) -> None:
        node_id = self._declare(node, "JumpInstruction")
        self._child(node_id, node.identifier, "identifier")

    def visit_JumpIfZeroInstruction(self, node: JumpIfZeroInstruction) -> None:
        node_id = self._declare(node, "JumpIfZeroInstruction")
        self._child(node_id, node.condition, "condition")
        self._child(node_id, node.identifier, "identifier")

    def visit_JumpIfNotZeroInstruction(self, node: JumpIfNotZeroInstruction) -> None:
        node_id = self._declare(node, "JumpIfNotZeroInstruction")
        self._child(node_id, node.condition, "condition")
        self._child(node_id, node.identifier, "identifier")

    def visit_LabelInstruction(self, node: LabelInstruction) -> None:
        node_id = self._declare(node, "LabelInstruction")
        self._child(node_id, node.identifier, "identifier")

    def visit_FunctionCallInstruction(self, node: FunctionCallInstruction) -> None:
        node_id = self._declare(node, "FunctionCallInstruction")
        self._child(node_id, node.name, "name")
        for i, argument in enumerate(node.arguments):
            self._child(node_id, argument, f"arguments[{i}]")
        self._child(node_id, node.destination, "destination")

    # -- top level ---------------------------------------------------------

    def visit_FunctionDefinition(self, node: FunctionDefinition) -> None:
        flag = "true" if node.is_global else "false"
        node_id = self._declare(node, f"FunctionDefinition\\nglobal: {flag}")
        self._child(node_id, node.name, "name")
        for i, parameter in enumerate(node.parameters):
            self._child(node_id, parameter, f"parameters[{i}]")
        for i, instruction in enumerate(node.body):
            self._child(node_id, instruction, f"body[{i}]")

    def visit_StaticVariable(self, node: StaticVariable) -> None:
        flag = "true" if node.is_global else "false"
        node_id = self._declare(node, f"StaticVariable\\nglobal: {flag}")
        self._child(node_id, node.name, "name")

    def visit_Program(self, node: Program) -> None:
        node_id = self._declare(
            node, "Program", ", color=blue, style=filled, fillcolor=lightblue"
        )
        for i, definition in enumerate(node.definitions):
            self._child(node_id, definition, f"definitions[{i}]")