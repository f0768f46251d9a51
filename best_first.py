"""
Generic best-first search: Dijkstra and A* over caller-defined states.

A state exposes two derivations:
- cache_key(): identifies "where we are" for deduplication. It must determine
  every reachable future state, and should omit the output accumulated so far.
- score(): totally ordered "goodness" of the state.

Dijkstra pops the HIGHEST score first. For minimization, wrap the raw cost in
Reverse so the smallest cost has the highest score. A* instead expects the raw
(unwrapped) cost, since heuristics are added to it, and pops the lowest
score + heuristic first.

Optimality requires scores that never improve along an edge (non-negative
edge weights) and, for A*, a consistent heuristic. Neither is checked.
"""

from __future__ import annotations

import heapq
import itertools
import logging
from dataclasses import dataclass
from functools import total_ordering
from typing import Any, Callable, Generic, Hashable, Iterable, Protocol, TypeVar

__all__ = ["OptimizationState", "Reverse", "dijkstra", "a_star"]

logger = logging.getLogger(__name__)


class OptimizationState(Protocol):
    """Capability set consumed by the search engine."""

    def cache_key(self) -> Hashable: ...

    def score(self) -> Any: ...


S = TypeVar("S", bound=OptimizationState)
V = TypeVar("V")

# Type alias for successor functions
Successors = Callable[[S], Iterable[S]]

_MISSING = object()


@total_ordering
@dataclass(frozen=True)
class Reverse(Generic[V]):
    """Ordering wrapper: Reverse(a) < Reverse(b) exactly when b < a."""

    value: V

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Reverse):
            return NotImplemented
        return other.value < self.value  # type: ignore[no-any-return]


def dijkstra(
    start: S,
    successors: Successors[S],
    is_final: Callable[[S], bool],
) -> S | None:
    """
    Best-first search popping the highest-scoring state first.

    Args:
        start: Initial state
        successors: Next-state function; may return any iterable, consumed once
        is_final: Goal predicate

    Returns:
        The first popped state for which is_final is true, or None if the
        queue drains first
    """
    # Best score seen per cache key
    cache: dict[Hashable, Any] = {}
    # Entries are (Reverse(score), seq, state): heapq is a min-heap, and seq
    # breaks ties in push order so states are never compared
    seq = itertools.count()
    heap: list[tuple[Reverse[Any], int, S]] = [(Reverse(start.score()), next(seq), start)]
    expanded = 0

    while heap:
        _, _, state = heapq.heappop(heap)
        if is_final(state):
            _log_result("dijkstra", state, expanded, seq, cache)
            return state

        # Superseded by a better entry for the same key
        prev_score = cache.get(state.cache_key(), _MISSING)
        if prev_score is not _MISSING and state.score() < prev_score:
            continue

        expanded += 1
        for successor in successors(state):
            key = successor.cache_key()
            score = successor.score()
            prev_score = cache.get(key, _MISSING)
            if prev_score is not _MISSING and score <= prev_score:
                continue
            cache[key] = score
            heapq.heappush(heap, (Reverse(score), next(seq), successor))

    _log_result("dijkstra", None, expanded, seq, cache)
    return None


def a_star(
    start: S,
    successors: Successors[S],
    h: Callable[[S], Any],
    is_final: Callable[[S], bool],
) -> S | None:
    """
    A* search popping the lowest score() + h() first.

    score() must NOT be wrapped in Reverse: lower raw scores are better, and
    they must support addition with the heuristic's values.

    Args:
        start: Initial state
        successors: Next-state function; may return any iterable, consumed once
        h: Heuristic estimating remaining cost; must be consistent
        is_final: Goal predicate

    Returns:
        The first popped state for which is_final is true, or None
    """
    cache: dict[Hashable, Any] = {}
    seq = itertools.count()
    # The start entry is alone on the heap, so its heuristic never matters
    heap: list[tuple[Any, int, S]] = [(start.score() + h(start), next(seq), start)]
    expanded = 0

    while heap:
        _, _, state = heapq.heappop(heap)
        if is_final(state):
            _log_result("a_star", state, expanded, seq, cache)
            return state

        # Comparisons are mirrored from dijkstra: lower raw score is better
        prev_score = cache.get(state.cache_key(), _MISSING)
        if prev_score is not _MISSING and state.score() > prev_score:
            continue

        expanded += 1
        for successor in successors(state):
            key = successor.cache_key()
            score = successor.score()
            prev_score = cache.get(key, _MISSING)
            if prev_score is not _MISSING and score >= prev_score:
                continue
            cache[key] = score
            heapq.heappush(heap, (score + h(successor), next(seq), successor))

    _log_result("a_star", None, expanded, seq, cache)
    return None


def _log_result(
    name: str,
    final: OptimizationState | None,
    expanded: int,
    seq: itertools.count[int],
    cache: dict[Hashable, Any],
) -> None:
    if not logger.isEnabledFor(logging.DEBUG):
        return
    # seq has handed out exactly one number per push
    pushed = next(seq)
    if final is None:
        logger.debug(
            "%s: queue exhausted after expanding %d states (%d pushed, %d cache keys)",
            name, expanded, pushed, len(cache),
        )
    else:
        logger.debug(
            "%s: final score %r after expanding %d states (%d pushed, %d cache keys)",
            name, final.score(), expanded, pushed, len(cache),
        )
