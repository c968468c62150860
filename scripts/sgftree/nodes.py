"""Tree model for SGF collections.

A ``Collection`` owns root ``Tree``s, a ``Tree`` owns its trunk of ``Node``s and its
child ``Tree``s, a ``Node`` owns ``Property``s. Model equality is structural; every
addressing operation (``*_index``, ``swap_*``, ``remove_*``) works on object identity,
since two properties may carry identical content.
"""

from typing import TypeVar
from pydantic import BaseModel, Field


class ContractViolation(AssertionError):
    """Misuse of the tree API: missing item, index out of range, invalid collection."""


T = TypeVar("T")


def _index_of(items: list[T], item: T) -> int:
    for i, candidate in enumerate(items):
        if candidate is item:
            return i
    return -1


def _require(items: list[T], item: T, kind: str) -> int:
    i = _index_of(items, item)
    if i == -1:
        raise ContractViolation(f"{kind} is not part of this container")
    return i


def _check_index(items: list, i: int, kind: str) -> None:
    if not 0 <= i < len(items):
        raise ContractViolation(f"{kind} index {i} out of range (size {len(items)})")


def _swap_at(items: list, i: int, j: int, kind: str) -> None:
    _check_index(items, i, kind)
    _check_index(items, j, kind)
    items[i], items[j] = items[j], items[i]


def _remove_at(items: list, i: int, kind: str) -> None:
    _check_index(items, i, kind)
    del items[i]


class Property(BaseModel):
    ident: str = ""
    values: list[str] = Field(default_factory=list)


class Node(BaseModel):
    properties: list[Property] = Field(default_factory=list)

    def new_property(self, ident: str, *values: str) -> Property:
        prop = Property(ident=ident, values=list(values))
        self.add_property(prop)
        return prop

    def add_property(self, prop: Property) -> None:
        self.properties.append(prop)

    def property_index(self, prop: Property) -> int:
        return _index_of(self.properties, prop)

    def swap_properties(self, first: Property, second: Property) -> None:
        self.swap_properties_at(
            _require(self.properties, first, "Property"),
            _require(self.properties, second, "Property"),
        )

    def swap_properties_at(self, i: int, j: int) -> None:
        _swap_at(self.properties, i, j, "Property")

    def remove_property(self, prop: Property) -> None:
        self.remove_property_at(_require(self.properties, prop, "Property"))

    def remove_property_at(self, i: int) -> None:
        _remove_at(self.properties, i, "Property")


class Tree(BaseModel):
    nodes: list[Node] = Field(default_factory=list)
    trees: list["Tree"] = Field(default_factory=list)

    def new_node(self) -> Node:
        node = Node()
        self.add_node(node)
        return node

    def new_tree(self) -> tuple["Tree", Node]:
        """Append a child tree holding one empty node; return both."""
        tree = Tree()
        self.add_tree(tree)
        return tree, tree.new_node()

    # Trunk -------------------------------------------------------------------
    def add_node(self, node: Node) -> None:
        self.nodes.append(node)

    def node_index(self, node: Node) -> int:
        return _index_of(self.nodes, node)

    def swap_nodes(self, first: Node, second: Node) -> None:
        self.swap_nodes_at(_require(self.nodes, first, "Node"), _require(self.nodes, second, "Node"))

    def swap_nodes_at(self, i: int, j: int) -> None:
        _swap_at(self.nodes, i, j, "Node")

    def remove_node(self, node: Node) -> None:
        self.remove_node_at(_require(self.nodes, node, "Node"))

    def remove_node_at(self, i: int) -> None:
        _remove_at(self.nodes, i, "Node")

    # Branches ----------------------------------------------------------------
    def add_tree(self, tree: "Tree") -> None:
        self.trees.append(tree)

    def tree_index(self, tree: "Tree") -> int:
        return _index_of(self.trees, tree)

    def swap_trees(self, first: "Tree", second: "Tree") -> None:
        self.swap_trees_at(_require(self.trees, first, "Tree"), _require(self.trees, second, "Tree"))

    def swap_trees_at(self, i: int, j: int) -> None:
        _swap_at(self.trees, i, j, "Tree")

    def remove_tree(self, tree: "Tree") -> None:
        self.remove_tree_at(_require(self.trees, tree, "Tree"))

    def remove_tree_at(self, i: int) -> None:
        _remove_at(self.trees, i, "Tree")


class Collection(BaseModel):
    trees: list[Tree] = Field(default_factory=list)

    def new_tree(self) -> tuple[Tree, Node]:
        """Append a root tree holding one empty node; return both."""
        tree = Tree()
        self.add_tree(tree)
        return tree, tree.new_node()

    def add_tree(self, tree: Tree) -> None:
        self.trees.append(tree)

    def tree_index(self, tree: Tree) -> int:
        return _index_of(self.trees, tree)

    def swap_trees(self, first: Tree, second: Tree) -> None:
        self.swap_trees_at(_require(self.trees, first, "Tree"), _require(self.trees, second, "Tree"))

    def swap_trees_at(self, i: int, j: int) -> None:
        _swap_at(self.trees, i, j, "Tree")

    def remove_tree(self, tree: Tree) -> None:
        self.remove_tree_at(_require(self.trees, tree, "Tree"))

    def remove_tree_at(self, i: int) -> None:
        _remove_at(self.trees, i, "Tree")


def new_collection() -> tuple[Collection, Tree, Node]:
    """Create a collection with one tree holding one empty node."""
    collection = Collection()
    tree, node = collection.new_tree()
    return collection, tree, node


__all__ = ["Collection", "ContractViolation", "Node", "Property", "Tree", "new_collection"]
