from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from tqdm import tqdm

from ..utils.logging import get_logger
from ..utils.trie import Label, PrefixIndex, build_index


def _as_pair(label: Label) -> Tuple[str, str]:
    if isinstance(label, tuple):
        return label
    return label, label


class SuggestionIndex:
    """Autocomplete suggestions over a label set.

    The live PrefixIndex is never mutated after it is published: a changed
    label set is built into a fresh index and swapped in with one assignment,
    so a reader holding the old reference keeps a consistent tree.
    """

    def __init__(self, labels: Optional[Iterable[Label]] = None, progress: bool = False, log_level: str = "INFO"):
        self.logger = get_logger("suggestion_index", level=log_level)
        self.progress = progress
        self._index = PrefixIndex()
        self._fingerprint: Optional[Tuple[Tuple[str, str], ...]] = None
        if labels is not None:
            self.rebuild(labels)

    @property
    def index(self) -> PrefixIndex:
        return self._index

    def rebuild(self, labels: Iterable[Label]) -> bool:
        """Rebuild the index if the label set changed. Returns True if rebuilt."""
        pairs = tuple(_as_pair(label) for label in labels)
        if pairs == self._fingerprint:
            self.logger.debug("Label set unchanged (%d labels), keeping index", len(pairs))
            return False

        fresh = build_index(tqdm(pairs, desc="Indexing labels", unit="label", disable=not self.progress))
        self._index = fresh
        self._fingerprint = pairs
        self.logger.info("Indexed %d words from %d labels", len(fresh), len(pairs))
        return True

    def suggest(self, query: str, limit: Optional[int] = None) -> List[str]:
        """Suggestions for what the user has typed so far.

        Blank input returns nothing (the suggestion panel stays hidden);
        repeated values, e.g. several synonyms for one service, show once.
        """
        if not query or not query.strip() or (limit is not None and limit <= 0):
            return []
        index = self._index
        seen = set()
        out: List[str] = []
        for value in index.search(query.lstrip()):
            if value in seen:
                continue
            seen.add(value)
            out.append(value)
            if limit is not None and len(out) >= limit:
                break
        return out

    def __len__(self) -> int:
        return len(self._index)
