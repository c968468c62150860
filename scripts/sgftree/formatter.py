"""Serializer turning a valid ``Collection`` back into SGF text."""

from __future__ import annotations

from dataclasses import dataclass

from .nodes import Collection, ContractViolation, Node, Tree
from .validator import find_violation


@dataclass(frozen=True, slots=True)
class SgfFormat:
    newline_between_trees: bool = True
    # only honoured together with newline_between_trees
    newline_between_nodes: bool = True
    indent_width: int = 4


DEFAULT_FORMAT = SgfFormat(newline_between_trees=True, newline_between_nodes=True, indent_width=4)
NO_NEWLINES_FORMAT = SgfFormat(newline_between_trees=False, newline_between_nodes=False, indent_width=0)


def escape_value(value: str) -> str:
    return value.replace("\\", "\\\\").replace("]", "\\]")


@dataclass
class SgfFormatter:
    sgf_format: SgfFormat = DEFAULT_FORMAT

    def format_collection(self, collection: Collection) -> str:
        violation = find_violation(collection)
        if violation:
            raise ContractViolation(f"collection is not valid: {violation}")

        parts: list[str] = []
        for index, tree in enumerate(collection.trees):
            if index > 0 and self.sgf_format.newline_between_trees:
                parts.append("\n")
            self._format_tree(tree, parts)
        return "".join(parts)

    def _format_tree(self, root: Tree, parts: list[str]) -> None:
        # explicit stack: str items are pending closing parens
        stack: list[tuple[Tree, int] | str] = [(root, 0)]
        while stack:
            item = stack.pop()
            if isinstance(item, str):
                parts.append(item)
                continue
            tree, level = item
            if self.sgf_format.newline_between_trees and level > 0:
                parts.append("\n" + self._indent(level))
            parts.append("(")
            for index, node in enumerate(tree.nodes):
                if index > 0 and self._nodes_on_own_line:
                    parts.append("\n" + self._indent(level) + " ")
                parts.append(self.format_node(node))
            stack.append(")")
            stack.extend((child, level + 1) for child in reversed(tree.trees))

    def format_node(self, node: Node) -> str:
        pieces = [";"]
        for prop in node.properties:
            pieces.append(prop.ident)
            pieces.extend(f"[{escape_value(value)}]" for value in prop.values)
        return "".join(pieces)

    @property
    def _nodes_on_own_line(self) -> bool:
        return self.sgf_format.newline_between_trees and self.sgf_format.newline_between_nodes

    def _indent(self, level: int) -> str:
        return "" if level <= 0 else " " * (self.sgf_format.indent_width * level)


def serialize(collection: Collection, fmt: SgfFormat = DEFAULT_FORMAT) -> str:
    return SgfFormatter(fmt).format_collection(collection)


__all__ = [
    "DEFAULT_FORMAT",
    "NO_NEWLINES_FORMAT",
    "SgfFormat",
    "SgfFormatter",
    "escape_value",
    "serialize",
]
