from __future__ import annotations
from typing import Dict, Iterable, Iterator, Set

from coords import Coord, neighbor_offsets
from grid import ActiveSet, parse_grid
from rules import CONWAY, LifeRule


def count_active_neighbors(coord: Coord, active: ActiveSet) -> int:
    """Number of the 3**D - 1 surrounding cells that are active."""
    return sum(1 for off in neighbor_offsets(active.dim) if coord + off in active)


def step(active: ActiveSet, rule: LifeRule = CONWAY) -> ActiveSet:
    """
    One synchronous update of the unbounded grid.
    Only active cells and their direct neighbors can change state, so those
    are the only cells visited. `active` is read, never modified.
    """
    offsets = neighbor_offsets(active.dim)
    counts_from_active: Dict[Coord, int] = {}
    # inactive cells next to at least one active cell; a set so each is checked once
    candidates: Set[Coord] = set()

    for cell in active:
        n_active = 0
        for off in offsets:
            pos = cell + off
            if pos in active:
                n_active += 1
            else:
                candidates.add(pos)
        counts_from_active[cell] = n_active

    survivors = [cell for cell, n in counts_from_active.items() if rule(True, n)]

    born = [
        pos for pos in candidates
        if rule(False, count_active_neighbors(pos, active))
    ]

    return ActiveSet(active.dim, frozenset(survivors).union(born))


def simulate(active: ActiveSet, generations: int, rule: LifeRule = CONWAY) -> ActiveSet:
    if generations < 1:
        raise ValueError(f"generations must be >= 1, got {generations}")
    curr = active
    for _ in range(generations):
        curr = step(curr, rule)
    return curr


def count_after(active: ActiveSet, generations: int, rule: LifeRule = CONWAY) -> int:
    """Active-cell count after `generations` steps."""
    return len(simulate(active, generations, rule))


def generations(start: ActiveSet, rule: LifeRule = CONWAY) -> Iterator[ActiveSet]:
    """
    Yield `start` and then every following generation, without end.
    Bound it at the call site, e.g. itertools.islice(generations(s), 7).
    """
    curr = start
    while True:
        yield curr
        curr = step(curr, rule)


def run_dimensions(
    text: str,
    dims: Iterable[int],
    cycles: int = 6,
    rule: LifeRule = CONWAY,
) -> Dict[int, int]:
    """Parse `text` once per dimension and return {dim: count after `cycles` steps}."""
    return {
        dim: count_after(parse_grid(text, dim), cycles, rule)
        for dim in dims
    }
