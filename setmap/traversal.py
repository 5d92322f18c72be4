from typing import TYPE_CHECKING, Callable, Iterator, Sequence, TypeVar
from .node import Node

if TYPE_CHECKING:
    from .set_trie import SetTrie


_R = TypeVar('_R')


class Traversal(Iterator[_R]):
    """
    Lazy depth-first walk over the nodes of a SetTrie.

    The walk keeps an explicit frontier of (node, query position) pairs; every call to
    `next` pops entries until one of them matches, so no work is done ahead of the caller.
    While the traversal is live the trie refuses mutations, see `TrieBorrowedError`.
    The hold is released when the traversal is exhausted, closed or collected.
    """

    _live = False

    def __init__(self, trie: 'SetTrie', query: Sequence, project: Callable[[Node], _R]):
        self._live = False
        self._trie = trie
        self._query = query
        self._project = project
        self._frontier: list[tuple[Node, int]] = [(trie._root, 0)]
        trie._borrow()
        self._live = True

    def _expand(self, node: Node, position: int) -> bool:
        """
        Push the children of `node` worth visiting and tell whether `node` itself matches.

        Children must be pushed in reverse visiting order.
        """
        raise NotImplementedError()

    def __iter__(self):
        return self

    def __next__(self) -> _R:
        while self._frontier:
            node, position = self._frontier.pop()
            if self._expand(node, position):
                return self._project(node)
        self.close()
        raise StopIteration

    @property
    def live(self) -> bool:
        return self._live

    def close(self):
        if self._live:
            self._live = False
            self._frontier.clear()
            self._trie._release()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def __del__(self):
        self.close()


class SubsetTraversal(Traversal[_R]):
    """
    Yields every stored key that is a subset of the query.

    A node reached at position `p` can only continue with elements from `query[p:]`, so
    branches labelled with anything else are never visited. Each node scans whichever is
    shorter: the rest of the query or its own children.
    """

    def __init__(self, trie: 'SetTrie', query: Sequence, project: Callable[[Node], _R]):
        self._positions = {element: index for index, element in enumerate(query)}
        super().__init__(trie, query, project)

    def _expand(self, node: Node, position: int) -> bool:
        if node.is_leaf:
            return node.has_value
        query = self._query
        children = node.children
        if len(children) < len(query) - position:
            matches = []
            for child in children:
                index = self._positions.get(child.element)
                if index is not None and index >= position:
                    matches.append((index, child))
            matches.sort(key=lambda match: match[0], reverse=True)
            self._frontier.extend((child, index + 1) for index, child in matches)
        else:
            for index in range(len(query) - 1, position - 1, -1):
                child = node.child_for(query[index])
                if child is not None:
                    self._frontier.append((child, index + 1))
        return node.has_value


class SupersetTraversal(Traversal[_R]):
    """
    Yields every stored key that is a superset of the query.

    `position` counts how many query elements the path has matched. Children labelled
    with the next query element advance it, smaller ones are extra elements and keep it,
    greater ones can never reach the next query element and are skipped.
    """

    def _expand(self, node: Node, position: int) -> bool:
        query = self._query
        complete = position == len(query)
        if not node.is_leaf:
            for child in reversed(node.sorted_children()):
                if complete:
                    self._frontier.append((child, position))
                elif child.element == query[position]:
                    self._frontier.append((child, position + 1))
                elif child.element < query[position]:
                    self._frontier.append((child, position))
        return complete and node.has_value


class ValuesTraversal(Traversal[_R]):
    def __init__(self, trie: 'SetTrie', project: Callable[[Node], _R]):
        super().__init__(trie, (), project)

    def _expand(self, node: Node, position: int) -> bool:
        if not node.is_leaf:
            self._frontier.extend((child, position) for child in reversed(node.sorted_children()))
        return node.has_value
