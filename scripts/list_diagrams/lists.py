"""The list-removal routines the diagrams illustrate.

Three ways to unlink an entry from a singly linked list, each matching one
of the pointer diagrams:

    traditional   keep a prev cursor and special-case the head
    improved      keep a reference to the link that points at the cursor
    linux         treat the list header as a node and stop one short

Python has no pointer-to-pointer, so the improved routine carries the link
as a (holder, attribute) slot instead.
"""


class Node:
    __slots__ = ("value", "next")

    def __init__(self, value, next=None):
        self.value = value
        self.next = next

    def __repr__(self):
        return f"Node({self.value!r})"


class LinkedList:
    """A singly linked list header.

    ``next`` aliases ``head`` so that code can walk the header as if it
    were the node before the first entry.
    """

    def __init__(self, values=()):
        self.head = None
        for value in reversed(list(values)):
            self.head = Node(value, self.head)

    @property
    def next(self):
        return self.head

    @next.setter
    def next(self, node):
        self.head = node

    def nodes(self):
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self):
        for node in self.nodes():
            yield node.value

    def __len__(self):
        return sum(1 for _ in self.nodes())


def remove_traditional(lst, entry):
    prev = None
    walk = lst.head

    # Walk the list
    while walk is not entry:
        if walk is None:
            raise ValueError(f"{entry!r} is not in the list")
        prev = walk
        walk = walk.next

    # Remove the entry by updating the head or the previous entry
    if prev is None:
        lst.head = entry.next
    else:
        prev.next = entry.next


def remove_improved(lst, entry):
    holder, attr = lst, "head"
    while getattr(holder, attr) is not entry:
        node = getattr(holder, attr)
        if node is None:
            raise ValueError(f"{entry!r} is not in the list")
        holder, attr = node, "next"
    setattr(holder, attr, entry.next)


def remove_linux(lst, entry):
    """Unlink entry if present; removing an absent entry does nothing."""
    if entry is None:
        return
    p = lst
    while p is not None:
        if p.next is entry:
            p.next = entry.next
            return
        p = p.next


# Diagram name -> the routine it depicts
REMOVERS = {
    "traditional": remove_traditional,
    "improved": remove_improved,
    "linux": remove_linux,
}
