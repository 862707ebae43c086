"""A Fibonacci heap ordered by a key function, with decrease-key support."""

from __future__ import annotations

from typing import Any, Callable


class HeapNode:
    """A node of a FibonacciHeap; hold on to it to decrease its key later."""

    __slots__ = ("datum", "next", "prev", "parent", "child", "degree", "mark")

    def __init__(self, datum: Any) -> None:
        self.datum = datum
        self.next: HeapNode = self
        self.prev: HeapNode = self
        self.parent: HeapNode | None = None
        self.child: HeapNode | None = None
        self.degree = 0
        self.mark = False


def _insert_in_list(node: HeapNode, anchor: HeapNode) -> None:
    node.next = anchor
    node.prev = anchor.prev
    node.prev.next = node
    anchor.prev = node


def _remove_from_list(node: HeapNode) -> None:
    node.next.prev = node.prev
    node.prev.next = node.next


def _splice(first: HeapNode | None, second: HeapNode | None) -> None:
    if first is not None and second is not None:
        first.next.prev = second.prev
        second.prev.next = first.next
        first.next = second
        second.prev = first


class FibonacciHeap:
    """Min-heap whose items are compared by ``key(item)``."""

    def __init__(self, key: Callable[[Any], Any]) -> None:
        self._key = key
        self._min: HeapNode | None = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def _less(self, a: Any, b: Any) -> bool:
        return self._key(a) < self._key(b)

    def insert(self, datum: Any) -> HeapNode:
        """Add ``datum`` and return the node that holds it."""
        node = HeapNode(datum)
        if self._min is not None:
            _insert_in_list(node, self._min)
        if self._min is None or self._less(datum, self._min.datum):
            self._min = node
        self._size += 1
        return node

    def peek_min(self) -> Any:
        """Return the smallest item without removing it."""
        if self._min is None:
            raise IndexError("peek at an empty heap")
        return self._min.datum

    def _link(self, node: HeapNode, root: HeapNode) -> None:
        if root.child is not None:
            _insert_in_list(node, root.child)
        else:
            root.child = node
            node.next = node.prev = node
        node.parent = root
        root.degree += 1
        node.mark = False

    def _consolidate(self) -> None:
        roots = []
        node = self._min
        while True:
            roots.append(node)
            node = node.next
            if node is self._min:
                break

        by_degree: dict[int, HeapNode] = {}
        for x in roots:
            while x.degree in by_degree:
                y = by_degree.pop(x.degree)
                if self._less(y.datum, x.datum):
                    x, y = y, x
                self._link(y, x)
            by_degree[x.degree] = x

        self._min = None
        for degree in sorted(by_degree):
            node = by_degree[degree]
            if self._min is None:
                self._min = node
                node.next = node.prev = node
            else:
                _insert_in_list(node, self._min)
                if self._less(node.datum, self._min.datum):
                    self._min = node

    def remove_min(self) -> Any:
        """Remove and return the smallest item."""
        if self._min is None:
            raise IndexError("remove from an empty heap")
        smallest = self._min
        if self._size == 1:
            self._min = None
        else:
            child = smallest.child
            while child is not None and child.parent is not None:
                child.parent = None
                child = child.next
            _splice(smallest, smallest.child)
            _remove_from_list(smallest)
            self._min = smallest.next
            self._consolidate()
        self._size -= 1
        return smallest.datum

    def combine(self, other: FibonacciHeap) -> None:
        """Move every item of ``other`` into this heap, leaving ``other`` empty."""
        if self._key is not other._key:
            raise ValueError("heaps with different keys cannot be combined")
        if self._min is None:
            self._min = other._min
        elif other._min is not None:
            new_min = other._min if self._less(other._min.datum, self._min.datum) else self._min
            _splice(self._min, other._min)
            self._min = new_min
        self._size += other._size
        other._min = None
        other._size = 0

    def _cut(self, node: HeapNode, parent: HeapNode) -> None:
        parent.degree -= 1
        if parent.degree == 0:
            parent.child = None
        if parent.child is node:
            parent.child = node.next
        _remove_from_list(node)
        node.parent = None
        node.mark = False
        _insert_in_list(node, self._min)

    def _cascading_cut(self, node: HeapNode) -> None:
        while node.parent is not None:
            if not node.mark:
                node.mark = True
                return
            parent = node.parent
            self._cut(node, parent)
            node = parent

    def decrease_key(self, node: HeapNode, datum: Any) -> None:
        """Replace the item in ``node`` with a strictly smaller one."""
        if not self._less(datum, node.datum):
            raise ValueError("new key is not smaller than the current key")
        node.datum = datum
        self.decrease_key_no_replace(node)

    def decrease_key_no_replace(self, node: HeapNode) -> None:
        """Restore heap order after the item in ``node`` had its key lowered in place."""
        parent = node.parent
        if parent is not None and self._less(node.datum, parent.datum):
            self._cut(node, parent)
            self._cascading_cut(parent)
        if self._less(node.datum, self._min.datum):
            self._min = node