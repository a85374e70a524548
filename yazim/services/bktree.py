"""
BK-tree over an integer edit-distance metric.

Each node holds one word; a child stored under edge ``d`` roots a subtree
whose words are all at distance exactly ``d`` from the node's word. Search
prunes with the triangle inequality: only edges with
``|d - dist(query, node)| <= max_distance`` can hold matches.
"""
from typing import Callable, Dict, Iterator, List, Optional, Tuple

from yazim.services.distance import levenshtein
from yazim.services.spellcheck_base import InternalSearchFailure


class BKNode:
    __slots__ = ("word", "children")

    def __init__(self, word: str):
        self.word = word
        self.children: Dict[int, "BKNode"] = {}


class BKTree:
    """Bounded-radius search index over words."""

    def __init__(self, distance: Callable[[str, str], int] = levenshtein):
        self._distance = distance
        self._root: Optional[BKNode] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def add(self, word: str) -> bool:
        """
        Insert a word.

        Returns:
            False if the word was already in the tree, True otherwise
        """
        if self._root is None:
            self._root = BKNode(word)
            self._size = 1
            return True

        node = self._root
        while True:
            dist = self._distance(word, node.word)
            if dist == 0:
                return False
            child = node.children.get(dist)
            if child is None:
                node.children[dist] = BKNode(word)
                self._size += 1
                return True
            node = child

    def search(self, word: str, max_distance: int) -> List[Tuple[str, int]]:
        """
        Find all words within ``max_distance`` of ``word``.

        Args:
            word: Query word
            max_distance: Inclusive edit-distance radius (>= 0)

        Returns:
            (candidate, distance) pairs in traversal order

        Raises:
            ValueError: If max_distance is negative
            InternalSearchFailure: If the tree structure is corrupted
        """
        if max_distance < 0:
            raise ValueError(f"max_distance must be >= 0, got {max_distance}")
        if self._root is None:
            return []

        results: List[Tuple[str, int]] = []
        stack = [self._root]
        try:
            while stack:
                node = stack.pop()
                dist = self._distance(word, node.word)
                if dist < 0:
                    raise InternalSearchFailure(
                        f"Negative distance between {word!r} and {node.word!r}",
                        word=word,
                    )
                if dist <= max_distance:
                    results.append((node.word, dist))
                low, high = dist - max_distance, dist + max_distance
                for edge, child in node.children.items():
                    if low <= edge <= high:
                        stack.append(child)
        except (AttributeError, TypeError) as e:
            raise InternalSearchFailure(f"Corrupted BK-tree: {e}", word=word) from e
        return results

    def __iter__(self) -> Iterator[str]:
        if self._root is None:
            return
        stack = [self._root]
        while stack:
            node = stack.pop()
            yield node.word
            stack.extend(node.children.values())

    def depth(self) -> int:
        """Height of the tree (0 when empty); a rough balance indicator."""
        if self._root is None:
            return 0
        deepest = 0
        stack = [(self._root, 1)]
        while stack:
            node, level = stack.pop()
            deepest = max(deepest, level)
            stack.extend((child, level + 1) for child in node.children.values())
        return deepest
