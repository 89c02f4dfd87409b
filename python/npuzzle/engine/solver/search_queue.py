"""Insert-only min-priority queue of search nodes."""

from __future__ import annotations

import heapq
import itertools

from npuzzle.models.search_node import SearchNode


class SearchQueue:
    """Binary heap keyed on :attr:`SearchNode.priority`.

    There is no decrease-key: a board reached twice is simply queued
    twice. The insertion counter only keeps heap entries comparable,
    ties beyond the priority carry no meaning.
    """

    def __init__(self) -> None:
        self._heap: list[tuple[tuple[int, int], int, SearchNode]] = []
        self._counter = itertools.count()

    def push(self, node: SearchNode) -> None:
        heapq.heappush(self._heap, (node.priority, next(self._counter), node))

    def pop_min(self) -> SearchNode:
        """Remove and return the lowest-priority node.

        Raises ``IndexError`` when the queue is empty.
        """
        return heapq.heappop(self._heap)[-1]

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
