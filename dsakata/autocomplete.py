"""Word prediction: frequency-ranked trie completion and recency-biased suggestions."""

from __future__ import annotations

import heapq
from collections import Counter, deque
from dataclasses import dataclass, field


@dataclass
class _TrieNode:
    children: dict[str, "_TrieNode"] = field(default_factory=dict)
    word_freq: Counter[str] = field(default_factory=Counter)


class Autocomplete:
    """Predicts the most frequent words that start with a prefix."""

    def __init__(self) -> None:
        self._root = _TrieNode()

    def insert(self, word: str, freq: int) -> None:
        """Add ``freq`` uses of ``word``; repeated inserts accumulate."""
        node = self._root
        node.word_freq[word] += freq
        for char in word:
            node = node.children.setdefault(char, _TrieNode())
            node.word_freq[word] += freq

    def predict(self, prefix: str, k: int) -> list[str]:
        """Up to ``k`` words starting with ``prefix``, most frequent first.

        Words of equal frequency come in alphabetical order.
        """
        node = self._root
        for char in prefix:
            child = node.children.get(char)
            if child is None:
                return []
            node = child
        if k <= 0:
            return []
        ranked = heapq.nsmallest(
            k, node.word_freq.items(), key=lambda item: (-item[1], item[0])
        )
        return [word for word, _ in ranked]


class AutocompleteHistory:
    """Suggests recently used words, most recent first."""

    def __init__(self, max_recent: int) -> None:
        if max_recent < 0:
            raise ValueError("max_recent must not be negative")
        self.max_recent = max_recent
        self.freq: Counter[str] = Counter()
        self._recent: deque[str] = deque()

    def use_word(self, word: str) -> None:
        """Mark ``word`` as just used, evicting the oldest beyond the limit."""
        self.freq[word] += 1
        if word in self._recent:
            self._recent.remove(word)
        self._recent.appendleft(word)
        while len(self._recent) > self.max_recent:
            self._recent.pop()

    def suggest(self, prefix: str) -> list[str]:
        """Recent words starting with ``prefix``, most recent first."""
        return [word for word in self._recent if word.startswith(prefix)]