"""Structural checks run before a collection is serialized."""

from dataclasses import dataclass
from typing import Literal, Optional

from .nodes import Collection, Tree

PathKind = Literal["tree", "node", "property"]


@dataclass(frozen=True, slots=True)
class Violation:
    path: tuple[tuple[PathKind, int], ...]
    reason: str

    def __str__(self) -> str:
        location = ".".join(f"{kind}[{index}]" for kind, index in self.path) or "collection"
        return f"{location}: {self.reason}"


def _tree_violation(tree: Tree, path: tuple) -> Optional[Violation]:
    if not tree.nodes:
        return Violation(path, "tree has no nodes")
    for node_index, node in enumerate(tree.nodes):
        for prop_index, prop in enumerate(node.properties):
            prop_path = (*path, ("node", node_index), ("property", prop_index))
            if not prop.ident:
                return Violation(prop_path, "property has an empty ident")
            if not prop.values:
                return Violation(prop_path, f"property {prop.ident} has no values")
    return None


def find_violation(collection: Collection) -> Optional[Violation]:
    """Return the first structural problem in depth-first order, or None."""
    if not collection.trees:
        return Violation((), "collection has no trees")
    stack = [(tree, (("tree", i),)) for i, tree in reversed(list(enumerate(collection.trees)))]
    while stack:
        tree, path = stack.pop()
        violation = _tree_violation(tree, path)
        if violation:
            return violation
        for i in reversed(range(len(tree.trees))):
            stack.append((tree.trees[i], (*path, ("tree", i))))
    return None


def is_valid(collection: Collection) -> bool:
    return find_violation(collection) is None


__all__ = ["Violation", "find_violation", "is_valid"]
