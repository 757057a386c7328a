from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence

from .config import DEFAULT_INDEXED_FIELDS
from .fields import FieldSelector, ItemField
from .models import Item
from .performance import PerformanceReport, Stopwatch

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchResult:
    results: List[Item]
    performance: PerformanceReport


class SortedScanSearch:
    """Case-insensitive substring search over a sorted copy of the items.

    Reported as "Binary Search", but the lookup is a full linear pass after an
    O(n log n) sort. Every element is examined (one comparison each) and the
    matches come back in sorted order.
    """

    algorithm = "Binary Search"

    def search(self, items: Sequence[Item], term: str, field: FieldSelector) -> SearchResult:
        f = ItemField.parse(field)
        watch = Stopwatch()

        sorted_items = sorted(items, key=f.text)
        needle = term.lower()
        comparisons = 0
        results: List[Item] = []
        for item in sorted_items:
            comparisons += 1
            if needle in f.text(item).lower():
                results.append(item)

        report = PerformanceReport(
            algorithm=self.algorithm,
            operation=f"Search by {f.value}",
            data_size=len(items),
            execution_time=watch.elapsed_ms(),
            comparisons=comparisons,
        )
        logger.debug("%s term=%r field=%s hits=%d", self.algorithm, term, f.value, len(results))
        return SearchResult(results, report)


class PrefixHashIndex:
    """Exact-match lookup against every prefix of the indexed field values.

    ``build`` maps each prefix of each lowercased field value to the items
    sharing it (deduplicated by ``item_id``, first-insertion order). A term
    matches only if it is a literal prefix: "game" finds "GameMouse" but
    "mouse" does not.
    """

    algorithm = "Hash Map Search"

    def __init__(self, fields: Optional[Iterable[FieldSelector]] = None):
        if fields is None:
            fields = DEFAULT_INDEXED_FIELDS
        self.fields = tuple(ItemField.parse(f) for f in fields)
        if not self.fields:
            raise ValueError("indexed fields must name at least one field")
        self._maps: Dict[ItemField, Dict[str, List[Item]]] = {}

    def build(self, items: Iterable[Item]) -> None:
        """Rebuild all prefix maps from scratch."""
        items = list(items)
        maps: Dict[ItemField, Dict[str, List[Item]]] = {}
        for f in self.fields:
            prefix_map: Dict[str, List[Item]] = {}
            seen: Dict[str, set] = {}
            for item in items:
                value = f.text(item).lower()
                for i in range(1, len(value) + 1):
                    prefix = value[:i]
                    ids = seen.setdefault(prefix, set())
                    if item.item_id in ids:
                        continue
                    ids.add(item.item_id)
                    prefix_map.setdefault(prefix, []).append(item)
            maps[f] = prefix_map
        self._maps = maps
        logger.debug("prefix index built: %d items, %d entries", len(items), self.entry_count())

    def search(self, term: str, field: FieldSelector) -> SearchResult:
        f = ItemField.parse(field)
        watch = Stopwatch()

        prefix_map = self._maps.get(f, {})
        results = list(prefix_map.get(term.lower(), []))

        report = PerformanceReport(
            algorithm=self.algorithm,
            operation=f"Search by {f.value}",
            data_size=self.entry_count(),
            execution_time=watch.elapsed_ms(),
            comparisons=1,
        )
        logger.debug("%s term=%r field=%s hits=%d", self.algorithm, term, f.value, len(results))
        return SearchResult(results, report)

    def entry_count(self) -> int:
        """Total (prefix, item) pairs across all indexed fields."""
        return sum(len(v) for m in self._maps.values() for v in m.values())

    def __repr__(self) -> str:
        return f"PrefixHashIndex(fields={[f.value for f in self.fields]}, entries={self.entry_count()})"
