from __future__ import annotations
from typing import Iterator, List, Optional, Tuple

# counted in code points, not UTF-8 bytes
MAX_VALUE_LENGTH = 1024


def compare(a: str, b: str) -> int:
    """Order two values over their first MAX_VALUE_LENGTH characters."""
    a = a[:MAX_VALUE_LENGTH]
    b = b[:MAX_VALUE_LENGTH]
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


class Node:
    __slots__ = ("value", "next")
    def __init__(self, v: str):
        self.value: str = v[:MAX_VALUE_LENGTH]
        self.next: Optional["Node"] = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"


class Slot:
    """A handle on a link field: a queue's head or some node's ``next``.

    Range operations take slots rather than nodes so they can replace
    whichever node currently occupies the start of a range.
    """
    __slots__ = ("owner", "attr")
    def __init__(self, owner: object, attr: str = "next"):
        self.owner = owner
        self.attr = attr

    @classmethod
    def after(cls, node: Node) -> "Slot":
        return cls(node, "next")

    def get(self) -> Optional[Node]:
        return getattr(self.owner, self.attr)

    def set(self, node: Optional[Node]) -> None:
        setattr(self.owner, self.attr, node)

    def __repr__(self) -> str:
        return f"Slot({self.owner!r}, {self.attr!r})"


class StringQueue:
    def __init__(self, values: Optional[List[str]] = None):
        self._head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._size: int = 0
        if values is not None:
            for v in values:
                self.insert_tail(v)

    # ---- basics ----
    def empty(self) -> bool:
        return self._size == 0

    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def clear(self) -> None:
        n = self._head
        while n is not None:
            nxt = n.next
            n.next = None
            n = nxt
        self._head = self._tail = None
        self._size = 0

    # ---- insert/remove ----
    def insert_head(self, v: str) -> bool:
        if v is None:
            return False
        n = Node(v)
        n.next = self._head
        self._head = n
        if self._tail is None:
            self._tail = n
        self._size += 1
        return True

    def insert_tail(self, v: str) -> bool:
        if v is None:
            return False
        n = Node(v)
        if self._tail is None:
            self._head = self._tail = n
        else:
            self._tail.next = n
            self._tail = n
        self._size += 1
        return True

    def remove_head(self, bufsize: Optional[int] = None) -> Tuple[bool, Optional[str]]:
        """Unlink the head node and return ``(ok, value)``.

        With ``bufsize`` the returned copy keeps at most ``bufsize - 1``
        characters, leaving room for the terminator a C buffer would need.
        """
        if self._head is None:
            return False, None
        n = self._head
        self._head = n.next
        n.next = None
        self._size -= 1
        if self._size == 0:
            self._tail = None
        value = n.value
        if bufsize is not None:
            value = value[:max(bufsize - 1, 0)]
        return True, value

    # ---- access ----
    def head(self) -> Optional[Node]:
        return self._head

    def tail(self) -> Optional[Node]:
        return self._tail

    def head_slot(self) -> Slot:
        return Slot(self, "_head")

    def front(self) -> str:
        if self._head is None:
            raise IndexError("front from empty queue")
        return self._head.value

    def back(self) -> str:
        if self._tail is None:
            raise IndexError("back from empty queue")
        return self._tail.value

    # ---- rearranging ----
    def reverse(self) -> None:
        if self._size <= 1:
            return
        prev: Optional[Node] = None
        curr = self._head
        while curr is not None:
            nxt = curr.next
            curr.next = prev
            prev = curr
            curr = nxt
        self._tail = self._head
        self._head = prev

    def recompute_tail(self) -> None:
        n = self._head
        if n is None:
            self._tail = None
            return
        while n.next is not None:
            n = n.next
        self._tail = n

    # ---- utils ----
    def __iter__(self) -> Iterator[str]:
        n = self._head
        while n is not None:
            yield n.value
            n = n.next

    def to_list(self) -> List[str]:
        return list(self)

    def __repr__(self) -> str:
        return f"StringQueue({self.to_list()!r})"
