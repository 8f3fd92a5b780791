"""Binary trees of integers: measures, traversals and shape checks."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass
class BinaryTree:
    """A node holding ``data`` with optional left and right subtrees."""

    data: int
    left: Optional[BinaryTree] = None
    right: Optional[BinaryTree] = None


def size(tree: BinaryTree | None) -> int:
    """Return the number of nodes."""
    if tree is None:
        return 0
    return 1 + size(tree.left) + size(tree.right)


def height(tree: BinaryTree | None) -> int:
    """Return the height; an empty tree has height -1, a leaf 0."""
    if tree is None:
        return -1
    return 1 + max(height(tree.left), height(tree.right))


def _prefix(tree: BinaryTree | None) -> Iterator[int]:
    if tree is not None:
        yield tree.data
        yield from _prefix(tree.left)
        yield from _prefix(tree.right)


def _infix(tree: BinaryTree | None) -> Iterator[int]:
    if tree is not None:
        yield from _infix(tree.left)
        yield tree.data
        yield from _infix(tree.right)


def _postfix(tree: BinaryTree | None) -> Iterator[int]:
    if tree is not None:
        yield from _postfix(tree.left)
        yield from _postfix(tree.right)
        yield tree.data


def prefix(tree: BinaryTree | None) -> list[int]:
    """Return the values in depth-first preorder."""
    return list(_prefix(tree))


def infix(tree: BinaryTree | None) -> list[int]:
    """Return the values in depth-first inorder."""
    return list(_infix(tree))


def postfix(tree: BinaryTree | None) -> list[int]:
    """Return the values in depth-first postorder."""
    return list(_postfix(tree))


def _emit(values: list[int]) -> None:
    print("".join(f"{value} " for value in values), end="")


def print_prefix(tree: BinaryTree | None) -> None:
    """Print the preorder values, each followed by a space."""
    _emit(prefix(tree))


def print_infix(tree: BinaryTree | None) -> None:
    """Print the inorder values, each followed by a space."""
    _emit(infix(tree))


def print_postfix(tree: BinaryTree | None) -> None:
    """Print the postorder values, each followed by a space."""
    _emit(postfix(tree))


def is_perfect(tree: BinaryTree | None) -> bool:
    """Return whether every level of the tree is completely filled."""
    if tree is None:
        return True
    if height(tree.left) != height(tree.right):
        return False
    return is_perfect(tree.left) and is_perfect(tree.right)


def is_degenerate(tree: BinaryTree | None) -> bool:
    """Return whether no node has two children."""
    if tree is None:
        return True
    if tree.left is not None and tree.right is not None:
        return False
    return is_degenerate(tree.left) and is_degenerate(tree.right)


def is_full(tree: BinaryTree | None) -> bool:
    """Return whether every node has either zero or two children."""
    if tree is None:
        return True
    if (tree.left is None) != (tree.right is None):
        return False
    return is_full(tree.left) and is_full(tree.right)