from typing import Any, Hashable, Optional


class _Empty:
    __slots__ = ()

    def __repr__(self):
        return 'EMPTY'

    def __bool__(self):
        return False


EMPTY: Any = _Empty()


class Node:
    """
    A point in the prefix space of the stored keys.

    The edge from the parent is labelled with `element`; the root carries no element
    and stands for the empty key. `value` is `EMPTY` unless a key ends exactly here.

    Nodes expose `parent` and `children` the way anytree nodes do, so `anytree.RenderTree`
    can draw them. Attaching a child is O(1): a new child cannot close a loop, so there
    is no ancestor walk.

    Writing `value` directly bypasses the owning SetTrie: its length and its guard against
    mutation during traversals are only maintained through `SetTrie` and `Entry`.
    """

    __slots__ = ('element', 'value', 'parent', '_by_element')

    def __init__(self, element: Hashable = None, parent: Optional['Node'] = None):
        self.element = element
        self.value: Any = EMPTY
        self._by_element: dict[Hashable, Node] = {}
        # Registering first means an unhashable element leaves the parent untouched.
        if parent is not None:
            parent._by_element[element] = self
        self.parent = parent

    @property
    def has_value(self) -> bool:
        return self.value is not EMPTY

    @property
    def children(self) -> tuple['Node', ...]:
        return tuple(self._by_element.values())

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def is_leaf(self) -> bool:
        return not self._by_element

    def child_for(self, element: Hashable) -> Optional['Node']:
        return self._by_element.get(element)

    def child_or_create(self, element: Hashable) -> 'Node':
        child = self._by_element.get(element)
        if child is None:
            child = Node(element, parent=self)
        return child

    def sorted_children(self) -> list['Node']:
        return sorted(self._by_element.values(), key=lambda child: child.element)

    def iter_path_reverse(self):
        node = self
        while node is not None:
            yield node
            node = node.parent

    @property
    def path(self) -> tuple['Node', ...]:
        return tuple(reversed(tuple(self.iter_path_reverse())))

    @property
    def depth(self) -> int:
        return sum(1 for _ in self.iter_path_reverse()) - 1

    @property
    def key(self) -> tuple:
        "The key spelled by the path from the root to this node."
        return tuple(node.element for node in self.path[1:])

    def __repr__(self):
        if self.is_root:
            return f'Node(root, value={self.value!r})'
        return f'Node({self.element!r}, value={self.value!r})'
