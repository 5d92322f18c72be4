from .entry import Entry
from .errors import SetTrieError, TrieBorrowedError, UnsortedKeyError
from .node import EMPTY, Node
from .set_trie import SetTrie
from .traversal import SubsetTraversal, SupersetTraversal, Traversal, ValuesTraversal

__all__ = [
    'EMPTY',
    'Entry',
    'Node',
    'SetTrie',
    'SetTrieError',
    'SubsetTraversal',
    'SupersetTraversal',
    'Traversal',
    'TrieBorrowedError',
    'UnsortedKeyError',
    'ValuesTraversal',
]
