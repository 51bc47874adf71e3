"""A prefix tree of words."""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = ["Trie"]


@dataclass
class _Node:
    children: dict[str, _Node] = field(default_factory=dict)
    is_word: bool = False


class Trie:
    """A set of words stored by shared prefixes."""

    def __init__(self) -> None:
        self._root = _Node()

    def insert(self, word: str) -> None:
        """Add ``word`` to the trie."""
        node = self._root
        for char in word:
            node = node.children.setdefault(char, _Node())
        node.is_word = True

    def _find(self, word: str) -> _Node | None:
        node = self._root
        for char in word:
            node = node.children.get(char)
            if node is None:
                return None
        return node

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        node = self._find(word)
        return node is not None and node.is_word

    def remove(self, word: str) -> None:
        """Remove ``word``, pruning nodes no other word needs.

        Raises KeyError if the word is not in the trie.
        """
        if word not in self:
            raise KeyError(word)
        path = []
        node = self._root
        for char in word:
            path.append((node, char))
            node = node.children[char]
        node.is_word = False
        for parent, char in reversed(path):
            child = parent.children[char]
            if child.children or child.is_word:
                break
            del parent.children[char]

    def is_empty(self) -> bool:
        """Return whether the trie holds no words."""
        return not self._root.children and not self._root.is_word