class SetTrieError(Exception):
    pass


class TrieBorrowedError(SetTrieError, RuntimeError):
    """
    Raised when a trie is mutated while a traversal over it is still live.

    Close, exhaust or drop every subset/superset/values iterator before inserting.
    """

    def __init__(self, live_traversals: int):
        self.live_traversals = live_traversals
        super().__init__(f'Cannot mutate a SetTrie while {live_traversals} traversal(s) over it are live')


class UnsortedKeyError(SetTrieError, ValueError):
    def __init__(self, key):
        self.key = key
        super().__init__(f'Key {key!r} is not strictly ascending')
