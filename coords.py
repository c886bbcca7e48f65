from __future__ import annotations
from dataclasses import dataclass
from functools import lru_cache
from itertools import product
from operator import add
from typing import Iterator, Sequence, Tuple


@dataclass(frozen=True)
class Coord:
    """
    Immutable integer position in a D-dimensional grid.
    Axis 0 is x (column), axis 1 is y (row); every axis past those two
    starts at 0 when a flat 2-D pattern is embedded.
    """
    values: Tuple[int, ...]

    def __post_init__(self) -> None:
        if not isinstance(self.values, tuple):
            object.__setattr__(self, "values", tuple(self.values))
        if len(self.values) < 2:
            raise ValueError(f"a coordinate needs at least 2 axes, got {len(self.values)}")

    @property
    def dim(self) -> int:
        return len(self.values)

    @property
    def x(self) -> int:
        return self.values[0]

    @property
    def y(self) -> int:
        return self.values[1]

    @property
    def extra(self) -> Tuple[int, ...]:
        """Components beyond the first two (z, w, ...)."""
        return self.values[2:]

    def __add__(self, other: Coord) -> Coord:
        if not isinstance(other, Coord):
            return NotImplemented
        if other.dim != self.dim:
            raise ValueError(f"cannot add {other.dim}-D coordinate to {self.dim}-D coordinate")
        return Coord(tuple(map(add, self.values, other.values)))

    @classmethod
    def from_xy(cls, x: int, y: int, dim: int) -> Coord:
        """Embed a 2-D point, zero-filling the higher axes."""
        if dim < 2:
            raise ValueError(f"dimension must be >= 2, got {dim}")
        return cls((x, y) + (0,) * (dim - 2))

    @classmethod
    def from_sequence(cls, values: Sequence[int], dim: int) -> Coord:
        if len(values) != dim:
            raise ValueError(f"expected {dim} components, got {len(values)}")
        return cls(tuple(values))


@lru_cache(maxsize=None)
def neighbor_offsets(dim: int) -> Tuple[Coord, ...]:
    """
    Every unit step in `dim` dimensions: all vectors in {-1, 0, 1}^dim
    except the zero vector, i.e. 3**dim - 1 offsets.
    Cached per dimension; callers must treat the result as read-only.
    """
    if dim < 2:
        raise ValueError(f"dimension must be >= 2, got {dim}")
    zero = (0,) * dim
    return tuple(
        Coord.from_sequence(delta, dim)
        for delta in product((-1, 0, 1), repeat=dim)
        if delta != zero
    )


def neighbors(coord: Coord) -> Iterator[Coord]:
    for offset in neighbor_offsets(coord.dim):
        yield coord + offset
