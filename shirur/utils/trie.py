"""
Prefix trie for service-name autocomplete.

This module implements a character-level Trie (prefix tree) that indexes the
marketplace label set (service categories, synonym keywords, product names)
for as-you-type suggestions. Lookups are case-insensitive while the stored
value keeps the original casing of the label.
"""

from __future__ import annotations
from typing import Dict, Iterable, List, Optional, Tuple, Union


class TrieNode:
    """A node in the Trie data structure."""

    __slots__ = ("children", "is_end", "value")

    def __init__(self):
        self.children: Dict[str, TrieNode] = {}
        self.is_end = False
        self.value: Optional[str] = None


class PrefixIndex:
    """Trie answering "which labels start with this prefix"."""

    def __init__(self):
        self.root = TrieNode()
        self._size = 0

    def insert(self, word: str, value: Optional[str] = None) -> None:
        """Insert a word into the Trie.

        Args:
            word: Text to index; matched case-insensitively
            value: Payload returned by search for this word (defaults to word).
                Re-inserting the same lowercased word overwrites the payload.
        """
        if value is None:
            value = word
        node = self.root
        for ch in word.lower():
            if ch not in node.children:
                node.children[ch] = TrieNode()
            node = node.children[ch]
        if not node.is_end:
            self._size += 1
        node.is_end = True
        node.value = value

    def search(self, prefix: str) -> List[str]:
        """Return the values of every word starting with prefix.

        An empty prefix matches every inserted word. Results come out in
        depth-first preorder: a word is listed before the longer words it is
        a prefix of, and sibling branches follow first-insertion order.
        """
        node = self._walk(prefix)
        if node is None:
            return []
        return self._collect(node)

    def _walk(self, s: str) -> Optional[TrieNode]:
        node = self.root
        for ch in s.lower():
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    @staticmethod
    def _collect(start: TrieNode) -> List[str]:
        results: List[str] = []
        stack = [start]
        while stack:
            node = stack.pop()
            if node.is_end and node.value is not None:
                results.append(node.value)
            # reversed so the first-inserted child is popped first
            stack.extend(reversed(list(node.children.values())))
        return results

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        node = self._walk(word)
        return node is not None and node.is_end

    def __len__(self) -> int:
        return self._size


Label = Union[str, Tuple[str, str]]


def build_index(labels: Iterable[Label]) -> PrefixIndex:
    """Build a PrefixIndex from labels.

    Args:
        labels: Plain strings (indexed under themselves) or (word, value) pairs

    Returns:
        A PrefixIndex containing all the labels
    """
    index = PrefixIndex()
    for label in labels:
        if isinstance(label, tuple):
            word, value = label
        else:
            word, value = label, label
        if word and isinstance(word, str):  # Skip empty or invalid entries
            index.insert(word, value)
    return index
