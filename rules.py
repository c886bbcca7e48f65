from __future__ import annotations
from dataclasses import dataclass
from typing import FrozenSet


@dataclass(frozen=True)
class LifeRule:
    """
    Outer-totalistic birth/survival rule over any neighborhood size.
    An inactive cell becomes active when its active-neighbor count is in
    `birth`; an active cell stays active when its count is in `survive`.
    """
    birth: FrozenSet[int] = frozenset({3})
    survive: FrozenSet[int] = frozenset({2, 3})

    def __post_init__(self) -> None:
        for name in ("birth", "survive"):
            counts = frozenset(getattr(self, name))
            if any(n < 0 for n in counts):
                raise ValueError(f"{name} counts must be non-negative, got {sorted(counts)}")
            object.__setattr__(self, name, counts)
        # cells with no active neighbours are never visited
        if 0 in self.birth:
            raise ValueError("birth on 0 neighbours would activate the whole unbounded grid")

    def __call__(self, is_active: bool, neighbor_count: int) -> bool:
        """Return whether the cell is active in the next generation."""
        if neighbor_count < 0:
            raise ValueError("invalid neighbor count")
        if is_active:
            return neighbor_count in self.survive
        return neighbor_count in self.birth

    @classmethod
    def from_string(cls, notation: str) -> LifeRule:
        """
        Parse "B3/S23" style notation (either order, case-insensitive).
        Each digit is one neighbor count, so only counts 0..9 are reachable;
        construct the dataclass directly for anything larger.
        """
        found = {}
        for part in notation.strip().upper().split("/"):
            if not part or part[0] not in "BS" or part[0] in found:
                raise ValueError(f"malformed rule notation: {notation!r}")
            digits = part[1:]
            if digits and not digits.isdigit():
                raise ValueError(f"malformed rule notation: {notation!r}")
            found[part[0]] = frozenset(int(d) for d in digits)
        if set(found) != {"B", "S"}:
            raise ValueError(f"rule notation needs both B and S parts: {notation!r}")
        return cls(birth=found["B"], survive=found["S"])

    def to_string(self) -> str:
        return "B{}/S{}".format(
            "".join(str(n) for n in sorted(self.birth)),
            "".join(str(n) for n in sorted(self.survive)),
        )


# birth on 3, survive on 2 or 3
CONWAY = LifeRule()
