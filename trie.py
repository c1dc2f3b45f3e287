from __future__ import annotations

import logging

log = logging.getLogger(__name__)


class TrieNode:
    """
    A single node in the trie.

    Attributes:
        children (dict[str, TrieNode]):
            Mapping from a character to the next TrieNode.
        is_end (bool):
            True if this node marks the end of an inserted word.
    """
    __slots__ = ("children", "is_end")

    def __init__(self):
        self.children: dict[str, TrieNode] = {}
        self.is_end = False


class Trie:
    """
    A trie (prefix tree) supporting insertion, exact search,
    prefix checks, and deletion with pruning of dead branches.
    """

    def __init__(self):
        """Initialize an empty trie."""
        self.root = TrieNode()

    # -------------------------------------------------------------
    # Core Operations
    # -------------------------------------------------------------

    def insert(self, word: str) -> None:
        """
        Insert a word into the trie.

        Args:
            word (str): The word to insert. May be empty.

        Returns:
            None
        """
        node = self.root
        for ch in word:
            if ch not in node.children:
                node.children[ch] = TrieNode()
            node = node.children[ch]
        node.is_end = True

    def search(self, word: str) -> bool:
        """
        Determine whether a word exists in the trie.

        Args:
            word (str): The word to search for.

        Returns:
            bool: True if the word exists, False otherwise.
        """
        node = self._walk(word)
        return node is not None and node.is_end

    def starts_with(self, prefix: str) -> bool:
        """
        Check if the prefix is reachable from the root.

        Args:
            prefix (str): The prefix to test.

        Returns:
            bool: True if at least one word begins with the prefix.
                  The empty prefix always matches.
        """
        return self._walk(prefix) is not None

    def delete(self, word: str) -> bool:
        """
        Delete a word from the trie, pruning nodes left without purpose.

        Deleting a word that was never inserted is a no-op.

        Args:
            word (str): The word to delete.

        Returns:
            bool: True if the word was deleted,
                  False if the word was not present.
        """
        path = []
        node = self.root
        for ch in word:
            child = node.children.get(ch)
            if child is None:
                log.debug("delete %r: not present", word)
                return False
            path.append((node, ch))
            node = child

        if not node.is_end:
            log.debug("delete %r: not present", word)
            return False
        node.is_end = False

        # Unwind towards the root; the root itself is never in a parent's map.
        pruned = 0
        while path and not node.children and not node.is_end:
            parent, ch = path.pop()
            del parent.children[ch]
            pruned += 1
            node = parent

        log.debug("delete %r: pruned %d node(s)", word, pruned)
        return True

    def __contains__(self, word: str) -> bool:
        return self.search(word)

    def _walk(self, s: str) -> TrieNode | None:
        node = self.root
        for ch in s:
            node = node.children.get(ch)
            if node is None:
                return None
        return node
