"""A red-black tree with sentinel nodes, duplicate keys and minimum tracking."""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Iterator, Optional

Compare = Callable[[Any, Any], int]


class Color(Enum):
    """Colour of a tree node."""

    RED = 0
    BLACK = 1


class Traversal(Enum):
    """Order in which :meth:`RBTree.apply` visits nodes."""

    PREORDER = 0
    INORDER = 1
    POSTORDER = 2


class Node:
    """A tree node; its links point at the tree's sentinels at the edges."""

    __slots__ = ("left", "right", "parent", "color", "data")

    def __init__(
        self,
        data: Any = None,
        color: Color = Color.BLACK,
        left: Optional[Node] = None,
        right: Optional[Node] = None,
        parent: Optional[Node] = None,
    ) -> None:
        self.data = data
        self.color = color
        self.left = left
        self.right = right
        self.parent = parent

    def __repr__(self) -> str:
        return f"Node({self.data!r}, {self.color.name})"


class RBTree:
    """Red-black tree ordered by a three-way ``compare`` function.

    Equal keys are kept as separate nodes (inserted to the right), and the
    node holding the smallest key is tracked by :meth:`minimal`.
    """

    def __init__(self, compare: Compare, destroy: Optional[Callable[[Any], None]] = None) -> None:
        self.compare = compare
        self.destroy = destroy if destroy is not None else (lambda data: None)

        nil = Node(color=Color.BLACK)
        nil.left = nil.right = nil.parent = nil
        self.nil = nil

        self._root = Node(color=Color.BLACK, left=nil, right=nil, parent=nil)
        self._min: Optional[Node] = None

    # -- inspection -------------------------------------------------------

    def first(self) -> Optional[Node]:
        """Return the top node of the tree, or None when it is empty."""
        node = self._root.left
        return None if node is self.nil else node

    def minimal(self) -> Optional[Node]:
        """Return the node holding the smallest key, or None."""
        return self._min

    def is_empty(self) -> bool:
        return self._root.left is self.nil and self._root.right is self.nil

    def find(self, data: Any) -> Optional[Node]:
        """Return a node whose data compares equal to ``data``, or None."""
        p = self._root.left
        while p is not self.nil:
            cmp = self.compare(data, p.data)
            if cmp == 0:
                return p
            p = p.left if cmp < 0 else p.right
        return None

    def successor(self, node: Node) -> Optional[Node]:
        """Return the next node in order after ``node``, or None."""
        p = node.right
        if p is not self.nil:
            while p.left is not self.nil:
                p = p.left
            return p
        p = node.parent
        while node is p.right:
            node = p
            p = p.parent
        return None if p is self._root else p

    def __iter__(self) -> Iterator[Any]:
        node = self._min
        while node is not None:
            yield node.data
            node = self.successor(node)

    def apply(
        self,
        node: Optional[Node],
        func: Callable[[Any, Any], Any],
        cookie: Any = None,
        order: Traversal = Traversal.INORDER,
    ) -> Any:
        """Call ``func(data, cookie)`` over the subtree at ``node``.

        ``node`` of None means the whole tree. The walk stops at the first
        truthy result of ``func``, which is returned; otherwise None.
        """
        if node is None:
            node = self._root.left
        if node is self.nil:
            return None
        if order is Traversal.PREORDER:
            err = func(node.data, cookie)
            if err:
                return err
        err = self.apply(node.left, func, cookie, order) if node.left is not self.nil else None
        if err:
            return err
        if order is Traversal.INORDER:
            err = func(node.data, cookie)
            if err:
                return err
        err = self.apply(node.right, func, cookie, order) if node.right is not self.nil else None
        if err:
            return err
        if order is Traversal.POSTORDER:
            err = func(node.data, cookie)
            if err:
                return err
        return None

    # -- rotations ----------------------------------------------------------

    def _rotate_left(self, x: Node) -> None:
        y = x.right
        x.right = y.left
        if x.right is not self.nil:
            x.right.parent = x
        y.parent = x.parent
        if x is x.parent.left:
            x.parent.left = y
        else:
            x.parent.right = y
        y.left = x
        x.parent = y

    def _rotate_right(self, x: Node) -> None:
        y = x.left
        x.left = y.right
        if x.left is not self.nil:
            x.left.parent = x
        y.parent = x.parent
        if x is x.parent.left:
            x.parent.left = y
        else:
            x.parent.right = y
        y.right = x
        x.parent = y

    # -- insertion ----------------------------------------------------------

    def insert(self, data: Any) -> Node:
        """Insert ``data`` and return the new node."""
        current = self._root.left
        parent = self._root
        while current is not self.nil:
            cmp = self.compare(data, current.data)
            parent = current
            current = current.left if cmp < 0 else current.right

        new_node = Node(data, Color.RED, self.nil, self.nil, parent)
        if parent is self._root or self.compare(data, parent.data) < 0:
            parent.left = new_node
        else:
            parent.right = new_node

        if self._min is None or self.compare(new_node.data, self._min.data) < 0:
            self._min = new_node

        if new_node.parent.color is Color.RED:
            self._insert_repair(new_node)

        self._root.left.color = Color.BLACK
        return new_node

    def _insert_repair(self, current: Node) -> None:
        while True:
            grand = current.parent.parent
            if current.parent is grand.left:
                uncle = grand.right
                if uncle.color is Color.RED:
                    current.parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    current = grand
                    current.color = Color.RED
                else:
                    if current is current.parent.right:
                        current = current.parent
                        self._rotate_left(current)
                    current.parent.color = Color.BLACK
                    current.parent.parent.color = Color.RED
                    self._rotate_right(current.parent.parent)
            else:
                uncle = grand.left
                if uncle.color is Color.RED:
                    current.parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    current = grand
                    current.color = Color.RED
                else:
                    if current is current.parent.left:
                        current = current.parent
                        self._rotate_right(current)
                    current.parent.color = Color.BLACK
                    current.parent.parent.color = Color.RED
                    self._rotate_left(current.parent.parent)
            if current.parent.color is not Color.RED:
                break

    # -- deletion -----------------------------------------------------------

    def delete(self, node: Node, keep: bool = False) -> Any:
        """Remove ``node``; return its data if ``keep``, else destroy it and return None."""
        data = node.data

        if node.left is self.nil or node.right is self.nil:
            target = node
            if self._min is target:
                self._min = self.successor(target)
        else:
            target = self.successor(node)
            node.data = target.data

        child = target.right if target.left is self.nil else target.left

        if target.color is Color.BLACK:
            if child.color is Color.RED:
                child.color = Color.BLACK
            elif target is not self._root.left:
                self._delete_repair(target)

        if child is not self.nil:
            child.parent = target.parent
        if target is target.parent.left:
            target.parent.left = child
        else:
            target.parent.right = child

        target.left = target.right = target.parent = None

        if not keep:
            self.destroy(data)
            return None
        return data

    def _delete_repair(self, current: Node) -> None:
        while True:
            if current is current.parent.left:
                sibling = current.parent.right
                if sibling.color is Color.RED:
                    sibling.color = Color.BLACK
                    current.parent.color = Color.RED
                    self._rotate_left(current.parent)
                    sibling = current.parent.right
                if sibling.right.color is Color.BLACK and sibling.left.color is Color.BLACK:
                    sibling.color = Color.RED
                    if current.parent.color is Color.RED:
                        current.parent.color = Color.BLACK
                        break
                    current = current.parent
                else:
                    if sibling.right.color is Color.BLACK:
                        sibling.left.color = Color.BLACK
                        sibling.color = Color.RED
                        self._rotate_right(sibling)
                        sibling = current.parent.right
                    sibling.color = current.parent.color
                    current.parent.color = Color.BLACK
                    sibling.right.color = Color.BLACK
                    self._rotate_left(current.parent)
                    break
            else:
                sibling = current.parent.left
                if sibling.color is Color.RED:
                    sibling.color = Color.BLACK
                    current.parent.color = Color.RED
                    self._rotate_right(current.parent)
                    sibling = current.parent.left
                if sibling.right.color is Color.BLACK and sibling.left.color is Color.BLACK:
                    sibling.color = Color.RED
                    if current.parent.color is Color.RED:
                        current.parent.color = Color.BLACK
                        break
                    current = current.parent
                else:
                    if sibling.left.color is Color.BLACK:
                        sibling.right.color = Color.BLACK
                        sibling.color = Color.RED
                        self._rotate_left(sibling)
                        sibling = current.parent.left
                    sibling.color = current.parent.color
                    current.parent.color = Color.BLACK
                    sibling.left.color = Color.BLACK
                    self._rotate_right(current.parent)
                    break
            if current is self._root.left:
                break

    # -- validation ---------------------------------------------------------

    def check_order(self, minimum: Any, maximum: Any) -> bool:
        """Return True if every key lies in order within [minimum, maximum]."""
        return self._check_order(self._root.left, minimum, maximum)

    def _check_order(self, n: Node, minimum: Any, maximum: Any) -> bool:
        if n is self.nil:
            return True
        if self.compare(n.data, minimum) < 0 or self.compare(n.data, maximum) > 0:
            return False
        return self._check_order(n.left, minimum, n.data) and self._check_order(
            n.right, n.data, maximum
        )

    def check_black_height(self) -> int:
        """Return the black height of the tree, or 0 if a colour rule is broken."""
        if (
            self._root.color is Color.RED
            or self._root.left.color is Color.RED
            or self.nil.color is Color.RED
        ):
            return 0
        return self._check_black_height(self._root.left)

    def _check_black_height(self, n: Node) -> int:
        if n is self.nil:
            return 1
        if n.color is Color.RED and (
            n.left.color is Color.RED
            or n.right.color is Color.RED
            or n.parent.color is Color.RED
        ):
            return 0
        lbh = self._check_black_height(n.left)
        if lbh == 0:
            return 0
        rbh = self._check_black_height(n.right)
        if rbh == 0 or lbh != rbh:
            return 0
        return lbh + (1 if n.color is Color.BLACK else 0)

    # -- output and teardown ------------------------------------------------

    def format(self, print_func: Callable[[Any], str] = str) -> str:
        """Render the tree sideways, right subtree on top, with its black height."""
        lines: list[str] = []
        self._format(self._root.left, print_func, 0, "T", lines)
        return "\n--\n" + "".join(lines) + f"\ncheck_black_height = {self.check_black_height()}\n"

    def _format(
        self, n: Node, print_func: Callable[[Any], str], depth: int, label: str, out: list[str]
    ) -> None:
        if n is self.nil:
            return
        self._format(n.right, print_func, depth + 1, "R", out)
        mark = "r" if n.color is Color.RED else "b"
        out.append(f"{' ' * (8 * depth)}{label}: {print_func(n.data)} ({mark})\n")
        self._format(n.left, print_func, depth + 1, "L", out)

    def clear(self) -> None:
        """Destroy every item and empty the tree."""
        self._destroy(self._root.left)
        self._root.left = self.nil
        self._root.right = self.nil
        self._min = None

    def _destroy(self, n: Node) -> None:
        if n is self.nil:
            return
        self._destroy(n.left)
        self._destroy(n.right)
        self.destroy(n.data)
        n.left = n.right = n.parent = None