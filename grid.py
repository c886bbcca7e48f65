from __future__ import annotations
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Iterator, List, Sequence, Tuple

from coords import Coord

ACTIVE = "#"
INACTIVE = "."


class ParseError(ValueError):
    """An input grid contained a character other than '#' or '.'."""

    def __init__(self, char: str, line: int, column: int):
        self.char = char
        self.line = line
        self.column = column
        super().__init__(f"unexpected character {char!r} at line {line}, column {column}")


@dataclass(frozen=True)
class ActiveSet:
    """
    One generation of a sparse, unbounded grid: the set of active coordinates.
    Anything not in `cells` is inactive. Instances are never mutated; every
    step builds a new one.
    """
    dim: int
    cells: FrozenSet[Coord] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if self.dim < 2:
            raise ValueError(f"dimension must be >= 2, got {self.dim}")
        if not isinstance(self.cells, frozenset):
            object.__setattr__(self, "cells", frozenset(self.cells))
        for cell in self.cells:
            if cell.dim != self.dim:
                raise ValueError(f"{cell.dim}-D coordinate in a {self.dim}-D set")

    def __contains__(self, coord: object) -> bool:
        return coord in self.cells

    def __iter__(self) -> Iterator[Coord]:
        return iter(self.cells)

    def __len__(self) -> int:
        return len(self.cells)

    def with_cell(self, coord: Coord) -> ActiveSet:
        """Return a new set that also contains `coord`."""
        return ActiveSet(self.dim, self.cells | {coord})

    def bounds(self) -> List[Tuple[int, int]]:
        """Per-axis (min, max) over the active cells. Empty set -> []."""
        if not self.cells:
            return []
        return [
            (min(axis), max(axis))
            for axis in zip(*(cell.values for cell in self.cells))
        ]

    @classmethod
    def empty(cls, dim: int) -> ActiveSet:
        return cls(dim)

    @classmethod
    def from_text(cls, text: str, dim: int) -> ActiveSet:
        return parse_grid(text, dim)


def parse_grid(text: str, dim: int) -> ActiveSet:
    """
    Build the initial generation from a '#'/'.' grid.
    Line number is y, character index is x, every higher axis is 0.
    Rows may differ in length. The first unknown character aborts the parse.
    """
    active = []
    for y, row in enumerate(text.splitlines()):
        for x, ch in enumerate(row):
            if ch == ACTIVE:
                active.append(Coord.from_xy(x, y, dim))
            elif ch != INACTIVE:
                raise ParseError(ch, y + 1, x + 1)
    return ActiveSet(dim, frozenset(active))


def render_slice(active: ActiveSet, extra: Sequence[int] = ()) -> str:
    """
    Draw the 2-D layer of `active` whose higher axes equal `extra`
    (zero-padded to the set's dimension), framed by the x/y bounding box
    of the whole set so consecutive layers line up.
    """
    if not active.cells:
        return ""
    extra = tuple(extra) + (0,) * (active.dim - 2 - len(extra))
    if len(extra) != active.dim - 2:
        raise ValueError(f"expected at most {active.dim - 2} extra components, got {len(extra)}")
    (min_x, max_x), (min_y, max_y) = active.bounds()[:2]
    rows = []
    for y in range(min_y, max_y + 1):
        rows.append("".join(
            ACTIVE if Coord((x, y) + extra) in active else INACTIVE
            for x in range(min_x, max_x + 1)
        ))
    return "\n".join(rows)


def layers(active: ActiveSet) -> Iterable[Tuple[int, ...]]:
    """Sorted distinct higher-axis tuples that hold at least one active cell."""
    return sorted({cell.extra for cell in active.cells})
