"""Binary trees: traversals, construction, validation and (de)serialisation."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence


@dataclass(eq=False, repr=False)
class TreeNode:
    """A node of a binary tree; ``next`` links a node to its right neighbour on a level."""

    val: int = 0
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None
    next: Optional["TreeNode"] = None

    def __repr__(self) -> str:
        return f"TreeNode({self.val!r})"


def build_level_order(values: Sequence[Optional[int]]) -> Optional[TreeNode]:
    """Build a tree from level-order values where None marks a missing child."""
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    queue = deque([root])
    while queue:
        node = queue.popleft()
        for side in ("left", "right"):
            try:
                value = next(items)
            except StopIteration:
                return root
            if value is not None:
                child = TreeNode(value)
                setattr(node, side, child)
                queue.append(child)
    return root


def to_level_order(root: Optional[TreeNode]) -> list[Optional[int]]:
    """Return level-order values with None for missing children, trailing Nones dropped."""
    result: list[Optional[int]] = []
    queue: deque[Optional[TreeNode]] = deque([root])
    while queue:
        node = queue.popleft()
        if node is None:
            result.append(None)
            continue
        result.append(node.val)
        queue.append(node.left)
        queue.append(node.right)
    while result and result[-1] is None:
        result.pop()
    return result


def inorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Return the values in left, node, right order."""
    result = []
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append(node.val)
        node = node.right
    return result


def is_valid_bst(root: Optional[TreeNode]) -> bool:
    """Tell whether every node is strictly between the bounds set by its ancestors."""
    stack: list[tuple[Optional[TreeNode], Optional[int], Optional[int]]] = [(root, None, None)]
    while stack:
        node, lower, upper = stack.pop()
        if node is None:
            continue
        if (lower is not None and node.val <= lower) or (upper is not None and node.val >= upper):
            return False
        stack.append((node.left, lower, node.val))
        stack.append((node.right, node.val, upper))
    return True


def is_same_tree(p: Optional[TreeNode], q: Optional[TreeNode]) -> bool:
    """Tell whether two trees have the same shape and values."""
    stack = [(p, q)]
    while stack:
        a, b = stack.pop()
        if a is None and b is None:
            continue
        if a is None or b is None or a.val != b.val:
            return False
        stack.append((a.left, b.left))
        stack.append((a.right, b.right))
    return True


def level_order(root: Optional[TreeNode]) -> list[list[int]]:
    """Return the values of each level, left to right."""
    if root is None:
        return []
    levels = []
    current = [root]
    while current:
        levels.append([node.val for node in current])
        current = [
            child
            for node in current
            for child in (node.left, node.right)
            if child is not None
        ]
    return levels


def zigzag_level_order(root: Optional[TreeNode]) -> list[list[int]]:
    """Return level values, alternating left-to-right and right-to-left."""
    return [
        level if depth % 2 == 0 else level[::-1]
        for depth, level in enumerate(level_order(root))
    ]


def _index_of(inorder: Sequence[int]) -> dict[int, int]:
    return {value: i for i, value in enumerate(inorder)}


def build_tree_pre_in(preorder: Sequence[int], inorder: Sequence[int]) -> Optional[TreeNode]:
    """Rebuild a tree from its preorder and inorder traversals."""
    if len(preorder) != len(inorder):
        raise ValueError("traversals differ in length")
    position = _index_of(inorder)

    def build(pre_start: int, pre_end: int, in_start: int, in_end: int) -> Optional[TreeNode]:
        if pre_start > pre_end or in_start > in_end:
            return None
        node = TreeNode(preorder[pre_start])
        try:
            root_index = position[node.val]
        except KeyError:
            raise ValueError(f"value {node.val!r} is missing from inorder") from None
        left_size = root_index - in_start
        node.left = build(pre_start + 1, pre_start + left_size, in_start, root_index - 1)
        node.right = build(pre_start + left_size + 1, pre_end, root_index + 1, in_end)
        return node

    return build(0, len(preorder) - 1, 0, len(inorder) - 1)


def build_tree_in_post(inorder: Sequence[int], postorder: Sequence[int]) -> Optional[TreeNode]:
    """Rebuild a tree from its inorder and postorder traversals."""
    if len(postorder) != len(inorder):
        raise ValueError("traversals differ in length")
    position = _index_of(inorder)

    def build(in_start: int, in_end: int, post_start: int, post_end: int) -> Optional[TreeNode]:
        if in_start > in_end or post_start > post_end:
            return None
        node = TreeNode(postorder[post_end])
        try:
            root_index = position[node.val]
        except KeyError:
            raise ValueError(f"value {node.val!r} is missing from inorder") from None
        right_size = in_end - root_index
        node.right = build(root_index + 1, in_end, post_end - right_size, post_end - 1)
        node.left = build(in_start, root_index - 1, post_start, post_end - right_size - 1)
        return node

    return build(0, len(inorder) - 1, 0, len(postorder) - 1)


def flatten(root: Optional[TreeNode]) -> None:
    """Rearrange the tree in place into a right-leaning chain in preorder."""
    node = root
    while node is not None:
        if node.left is not None:
            tail = node.left
            while tail.right is not None:
                tail = tail.right
            tail.right = node.right
            node.right = node.left
            node.left = None
        node = node.right


def connect(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Point each node of a perfect binary tree at its right neighbour on its level."""
    leftmost = root
    while leftmost is not None and leftmost.left is not None:
        node: Optional[TreeNode] = leftmost
        while node is not None:
            node.left.next = node.right
            if node.next is not None:
                node.right.next = node.next.left
            node = node.next
        leftmost = leftmost.left
    return root


def max_path_sum(root: Optional[TreeNode]) -> int:
    """Return the largest sum along any path between two nodes of a non-empty tree."""
    if root is None:
        raise ValueError("the tree is empty")
    best = root.val

    def gain(node: TreeNode) -> int:
        nonlocal best
        left = max(gain(node.left), 0) if node.left is not None else 0
        right = max(gain(node.right), 0) if node.right is not None else 0
        best = max(best, node.val + left + right)
        return node.val + max(left, right)

    gain(root)
    return best


def lowest_common_ancestor(
    root: Optional[TreeNode], p: TreeNode, q: TreeNode
) -> Optional[TreeNode]:
    """Return the lowest node of a binary search tree that has both p and q below or at it."""
    node = root
    while node is not None:
        if p.val < node.val and q.val < node.val:
            node = node.left
        elif p.val > node.val and q.val > node.val:
            node = node.right
        else:
            return node
    return None


def serialize(root: Optional[TreeNode]) -> str:
    """Encode a tree as preorder tokens, '#' for an empty child, each followed by a space."""
    tokens = []
    stack: list[Optional[TreeNode]] = [root]
    while stack:
        node = stack.pop()
        if node is None:
            tokens.append("# ")
            continue
        tokens.append(f"{node.val} ")
        stack.append(node.right)
        stack.append(node.left)
    return "".join(tokens)


def deserialize(data: str) -> Optional[TreeNode]:
    """Decode a tree written by :func:`serialize`."""
    tokens = iter(data.split())

    def take() -> Optional[TreeNode]:
        token = next(tokens, None)
        if token is None:
            raise ValueError("serialised tree is truncated")
        if token == "#":
            return None
        node = TreeNode(int(token))
        node.left = take()
        node.right = take()
        return node

    return take()


class BSTIterator:
    """Iterates over the values of a binary search tree in ascending order."""

    def __init__(self, root: Optional[TreeNode]) -> None:
        self._stack: list[TreeNode] = []
        self._push_left(root)

    def _push_left(self, node: Optional[TreeNode]) -> None:
        while node is not None:
            self._stack.append(node)
            node = node.left

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        if not self._stack:
            raise StopIteration
        node = self._stack.pop()
        self._push_left(node.right)
        return node.val

    def has_next(self) -> bool:
        """Tell whether more values remain."""
        return bool(self._stack)