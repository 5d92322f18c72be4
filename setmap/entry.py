from typing import TYPE_CHECKING, Callable, Generic, Iterable, TypeVar
from .node import EMPTY, Node

if TYPE_CHECKING:
    from .set_trie import SetTrie


_K = TypeVar('_K')
_V = TypeVar('_V')


class Entry(Generic[_K, _V]):
    """
    Cursor over the value slot of a single node, as returned by `SetTrie.entry`.

    The path to the node already exists, so every operation is O(1). The cursor is only
    meant to live for the statement that created it.
    """

    __slots__ = ('_trie', '_node')
    _trie: 'SetTrie[_K, _V]'
    _node: Node

    def __init__(self, trie: 'SetTrie[_K, _V]', node: Node):
        self._trie = trie
        self._node = node

    @property
    def key(self) -> tuple[_K, ...]:
        return self._node.key

    @property
    def occupied(self) -> bool:
        return self._node.has_value

    def get(self, default: _V | None = None) -> _V | None:
        return self._node.value if self._node.has_value else default

    def insert(self, value: _V) -> _V | None:
        """
        Stores `value` in the slot, replacing what was there.

        Returns the previous value, or None if the slot was empty.
        """
        self._trie._check_mutable()
        previous = self._node.value
        self._node.value = value
        if previous is EMPTY:
            self._trie._count += 1
            return None
        return previous

    def or_insert(self, default: _V) -> _V:
        if not self._node.has_value:
            self.insert(default)
        return self._node.value

    def or_insert_with(self, factory: Callable[[], _V]) -> _V:
        if not self._node.has_value:
            self.insert(factory())
        return self._node.value

    def and_modify(self, function: Callable[[_V], _V]) -> 'Entry[_K, _V]':
        """
        Replaces the stored value with `function(value)` if the slot is occupied.

        Returns the entry itself, so that `or_insert` can follow.
        """
        if self._node.has_value:
            self._trie._check_mutable()
            self._node.value = function(self._node.value)
        return self

    def entry(self, suffix: Iterable[_K]) -> 'Entry[_K, _V]':
        """
        Entry for this key extended with `suffix`, walked from this node instead of the root.

        Handy when inserting chains of growing keys.
        """
        return self._trie._entry_from(self._node, suffix)

    def __repr__(self):
        return f'Entry({self.key!r}, {self._node.value!r})'
