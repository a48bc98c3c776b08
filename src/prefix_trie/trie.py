"""This module represents the implementation of a prefix tree (trie)
supporting insertion, membership lookup, removal and prefix enumeration
of strings.
"""

import weakref
from collections.abc import Iterator
from typing import Optional, Union


class TrieNode:
    """Represent a node in the trie structure."""

    def __init__(
        self,
        key: Optional[str] = None,
        parent: Optional["TrieNode"] = None,
    ) -> None:
        """Initialize a new Trie node.

        Attributes:
            key (str | None): The character this node represents,
            None only for the root.
            children (dict): A dictionary mapping characters to
            their corresponding child TrieNode instances, kept in
            insertion order.
            is_end_of_word (bool): Indicates whether this
            node marks the end of a valid word in the Trie.

        """
        self.key = key
        # Parents own their children, so the way back up is a weak reference
        self._parent: Union[weakref.ref["TrieNode"], None] = (
            weakref.ref(parent) if parent is not None else None
        )
        self.children: dict[str, TrieNode] = {}
        self.is_end_of_word = False

    @property
    def parent(self) -> Optional["TrieNode"]:
        """Return the parent node, or None for the root or a detached node."""
        if self._parent is None:
            return None
        return self._parent()

    @parent.setter
    def parent(self, node: Optional["TrieNode"]) -> None:
        self._parent = weakref.ref(node) if node is not None else None

    def get_word(self) -> str:
        """Rebuild the word this node terminates by walking up to the root.

        Returns:
            str: The concatenation of the keys from the root
            (exclusive) down to this node (inclusive).

        """
        keys: list[str] = []
        node: Optional[TrieNode] = self
        while node is not None:
            if node.key is not None:
                keys.append(node.key)
            node = node.parent
        return "".join(reversed(keys))

    def __repr__(self) -> str:
        return (
            f"TrieNode(key={self.key!r}, end={self.is_end_of_word}, "
            f"children={list(self.children)})"
        )


class Trie:
    """Represents the string trie data structure."""

    def __init__(self, clear_siblings_on_remove: bool = False) -> None:
        """Initialize the root node of the Trie.

        Args:
            clear_siblings_on_remove (bool): Reproduce the legacy removal
            behaviour, which empties the whole children mapping of a removed
            leaf's parent instead of detaching only that leaf. Unrelated
            words sharing the parent are lost in this mode.

        """
        self.root = TrieNode()
        self.clear_siblings_on_remove = clear_siblings_on_remove

    def insert(self, word: str) -> None:
        """Insert a new word into the Trie structure.

        Empty words are never stored.

        Args:
            word (str): The word to be inserted into the Trie structure.

        """
        if not word:
            return

        node = self.root
        for char in word:
            # If the character is not already a child, add a new TrieNode
            if char not in node.children:
                node.children[char] = TrieNode(char, node)
            # Move to the child node
            node = node.children[char]
        # Mark the end of the word
        node.is_end_of_word = True

    def contains(self, word: Optional[str]) -> bool:
        """Check for the existence of a given word in the Trie structure.

        Args:
            word (str | None): The word to search for in the Trie structure.

        Returns:
            bool: True if the exact `word` is present in the trie as a
            complete word, False otherwise (including for empty input).

        """
        if not word:
            return False

        node = self._find_node(word)
        # A full traversal only proves `word` is a prefix of something
        return node is not None and node.is_end_of_word

    def remove(self, word: Optional[str]) -> bool:
        """Remove a word from the Trie structure.

        A word that other stored words extend only loses its end-of-word
        mark. A word ending in a leaf is detached from the tree together
        with any ancestors left without a purpose.

        Args:
            word (str | None): The word to be removed.

        Returns:
            bool: True if the word was stored and has been removed,
            False if there was nothing to remove.

        """
        if not word:
            return False

        node = self._find_node(word)
        if node is None or not node.is_end_of_word:
            return False

        if node.children:
            node.is_end_of_word = False
            return True

        parent = node.parent
        if parent is None:
            return False

        if self.clear_siblings_on_remove:
            for child in parent.children.values():
                child.parent = None
            parent.children = {}
            return True

        self._detach(node)
        while (
            parent is not self.root
            and not parent.children
            and not parent.is_end_of_word
        ):
            grandparent = parent.parent
            self._detach(parent)
            if grandparent is None:
                break
            parent = grandparent
        return True

    def starts_with(self, prefix: Optional[str]) -> list[str]:
        """Return every stored word beginning with `prefix`.

        Words are listed in depth-first pre-order, children being visited
        in the order their characters were first inserted, so a word always
        comes before the longer words it is a prefix of.

        Args:
            prefix (str | None): The prefix to match. An empty prefix
            matches every stored word.

        Returns:
            list[str]: The matching words, empty if there are none.

        """
        prefix = prefix or ""
        start = self._find_node(prefix)
        if start is None:
            return []
        return [node.get_word() for node in self._walk(start)]

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __iter__(self) -> Iterator[str]:
        for node in self._walk(self.root):
            yield node.get_word()

    def _find_node(self, chars: str) -> Optional[TrieNode]:
        node = self.root
        for char in chars:
            child = node.children.get(char)
            if child is None:
                return None
            node = child
        return node

    @staticmethod
    def _walk(start: TrieNode) -> Iterator[TrieNode]:
        """Yield the end-of-word nodes under `start` in pre-order."""
        stack = [start]
        while stack:
            node = stack.pop()
            if node.is_end_of_word:
                yield node
            # Reversed so the first inserted child is popped first
            stack.extend(reversed(node.children.values()))

    @staticmethod
    def _detach(node: TrieNode) -> None:
        parent = node.parent
        if parent is not None and node.key is not None:
            del parent.children[node.key]
        node.parent = None
