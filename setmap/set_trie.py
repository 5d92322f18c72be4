import logging
from itertools import pairwise
from operator import attrgetter
from typing import Generic, Hashable, Iterable, Iterator, Sequence, TypeVar
from anytree import RenderTree
from . import settings
from .entry import Entry
from .errors import TrieBorrowedError, UnsortedKeyError
from .node import Node
from .traversal import SubsetTraversal, SupersetTraversal, Traversal, ValuesTraversal


logger = logging.getLogger(__name__)

_K = TypeVar('_K', bound=Hashable)
_V = TypeVar('_V')

_value = attrgetter('value')
_key = attrgetter('key')


def _item(node: Node) -> tuple[tuple, object]:
    return node.key, node.value


class SetTrie(Generic[_K, _V]):
    """
    A mapping keyed by sets, supporting subset and superset queries.

    Keys are sequences of distinct elements sorted ascending. Sortedness is not checked
    unless `validate_keys` is enabled: unsorted keys or queries silently give wrong answers.

    .. code-block:: python
        employees = SetTrie()
        employees.insert(['accounting', 'banking'], 'Daniels')
        employees.insert(['accounting', 'banking', 'crime'], 'Stevens')
        list(employees.subsets(['accounting', 'banking', 'crime']))  # ['Daniels', 'Stevens']
        list(employees.supersets(['accounting']))  # ['Daniels', 'Stevens']

    The trie cannot be modified while any of the iterators returned by `subsets`,
    `supersets`, `keys`, `values` or `items` is live; doing so raises `TrieBorrowedError`.
    """

    def __init__(self, items: Iterable[tuple[Iterable[_K], _V]] | None = None, validate_keys: bool | None = None):
        """
        Initializes a new trie.

        Args:
            items (Iterable[tuple[Iterable[_K], _V]] | None): Optional (key, value) pairs to insert.
            validate_keys (bool | None): Whether to reject keys and queries that are not strictly
            ascending. Defaults to `settings.VALIDATE_KEYS`.
        """
        self._root = Node()
        self._count = 0
        self._borrows = 0
        self.validate_keys = settings.VALIDATE_KEYS if validate_keys is None else validate_keys
        if items is not None:
            self.update(items)

    def _borrow(self):
        self._borrows += 1

    def _release(self):
        self._borrows -= 1

    def _check_mutable(self):
        if self._borrows > 0:
            logger.debug('Rejected mutation with %d live traversal(s)', self._borrows)
            raise TrieBorrowedError(self._borrows)

    def _checked(self, key: Iterable[_K]) -> tuple[_K, ...]:
        key = tuple(key)
        if self.validate_keys and any(a >= b for a, b in pairwise(key)):
            logger.debug('Rejected unsorted key %r', key)
            raise UnsortedKeyError(key)
        return key

    def _find(self, key: Iterable[_K]) -> Node | None:
        node: Node | None = self._root
        for element in self._checked(key):
            node = node.child_for(element)
            if node is None:
                return None
        return node

    def _entry_from(self, node: Node, key: Iterable[_K]) -> Entry[_K, _V]:
        self._check_mutable()
        key = tuple(key)
        if self.validate_keys:
            self._checked(node.key + key)
        for element in key:
            node = node.child_or_create(element)
        return Entry(self, node)

    def entry(self, key: Iterable[_K]) -> Entry[_K, _V]:
        "Returns a cursor on the value slot of `key`, creating the path to it if needed."
        return self._entry_from(self._root, key)

    def insert(self, key: Iterable[_K], value: _V) -> _V | None:
        """
        Stores `value` under `key`, replacing any previous value.

        Returns the previous value, or None if the key was new.
        """
        return self.entry(key).insert(value)

    def update(self, items: Iterable[tuple[Iterable[_K], _V]]):
        "Inserts every (key, value) pair, later pairs winning over earlier ones."
        for key, value in items:
            self.insert(key, value)

    def contains(self, key: Iterable[_K]) -> bool:
        node = self._find(key)
        return node is not None and node.has_value

    def get(self, key: Iterable[_K], default: _V | None = None) -> _V | None:
        node = self._find(key)
        if node is None or not node.has_value:
            return default
        return node.value

    def subsets(self, query: Iterable[_K]) -> Traversal[_V]:
        """
        Lazily yields the values of every stored key that is a subset of `query`.

        Values come in depth-first order, following the order of the query.
        """
        return SubsetTraversal(self, self._checked(query), _value)

    def subset_items(self, query: Iterable[_K]) -> Traversal[tuple[tuple[_K, ...], _V]]:
        return SubsetTraversal(self, self._checked(query), _item)

    def supersets(self, query: Iterable[_K]) -> Traversal[_V]:
        """
        Lazily yields the values of every stored key that is a superset of `query`.

        Far more nodes are visited than for subsets, since keys may hold any number of
        elements besides the queried ones.
        """
        return SupersetTraversal(self, self._checked(query), _value)

    def superset_items(self, query: Iterable[_K]) -> Traversal[tuple[tuple[_K, ...], _V]]:
        return SupersetTraversal(self, self._checked(query), _item)

    def keys(self) -> Traversal[tuple[_K, ...]]:
        return ValuesTraversal(self, _key)

    def values(self) -> Traversal[_V]:
        "Lazily yields every stored value, ordered by key."
        return ValuesTraversal(self, _value)

    def items(self) -> Traversal[tuple[tuple[_K, ...], _V]]:
        return ValuesTraversal(self, _item)

    def __iter__(self) -> Iterator[tuple[_K, ...]]:
        return self.keys()

    def __len__(self):
        return self._count

    def __contains__(self, key: Sequence[_K]):
        return self.contains(key)

    def __getitem__(self, key: Sequence[_K]) -> _V:
        node = self._find(key)
        if node is None or not node.has_value:
            raise KeyError(key)
        return node.value

    def __setitem__(self, key: Sequence[_K], value: _V):
        self.insert(key, value)

    def __eq__(self, other):
        if isinstance(other, SetTrie):
            return len(self) == len(other) and dict(self.items()) == dict(other.items())
        return False

    def __str__(self):
        return str(RenderTree(self._root))

    def __repr__(self):
        return f'SetTrie({{#{self._count}}})'

    def __copy__(self) -> 'SetTrie[_K, _V]':
        return SetTrie[_K, _V](self.items(), validate_keys=self.validate_keys)

    def copy(self):
        "Returns a shallow copy of the trie: a new node tree holding the same values."
        return self.__copy__()
