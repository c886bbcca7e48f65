from __future__ import annotations
from dataclasses import dataclass, field
import numpy as np
from typing import List, Sequence

from grid import ACTIVE, INACTIVE, parse_grid
from simulate import step


@dataclass
class Problem:
    '''
    A single cube-simulation task: the flat starting pattern, the dimensions
    to embed it in, and the number of cycles to run.
    '''
    grid: str
    dims: List[int] = field(default_factory=lambda: [3, 4])
    generations: int = 6


class PatternGenerator:
    """
    Random '#'/'.' starting pattern generator.
    Patterns are HxW rectangles; the simulation space around them is unbounded.
    """
    def __init__(self, height: int, width: int, *, seed: int = 42, density: float = 0.5):
        if height < 1 or width < 1:
            raise ValueError("height and width must be positive")
        if not 0.0 <= density <= 1.0:
            raise ValueError("density must be in [0, 1]")
        self.h = height
        self.w = width
        self.density = density
        self.rng = np.random.default_rng(seed)

    def _make_grid(self) -> str:
        """
        Generate a random HxW pattern with the given density of active cells.
        """
        mask = self.rng.random((self.h, self.w)) < self.density
        return "\n".join(
            "".join(ACTIVE if cell else INACTIVE for cell in row)
            for row in mask
        )

    def generate(self, dims: Sequence[int] = (3, 4), generations: int = 6) -> Problem:
        return Problem(grid=self._make_grid(), dims=list(dims), generations=generations)

    def is_trivial(self, problem: Problem) -> bool:
        """
        True if the pattern is empty, or dies out after one cycle in every
        requested dimension.
        """
        if ACTIVE not in problem.grid:
            return True
        return all(len(step(parse_grid(problem.grid, dim))) == 0 for dim in problem.dims)

    def generate_batch(
        self,
        num_problems: int,
        dims: Sequence[int] = (3, 4),
        generations: Sequence[int] | int = 6,
        trim_trivial: bool = True,
        max_attempts_factor: int = 10,
    ) -> List[Problem]:
        """
        Generate a batch of problems, skipping trivial ones if trim_trivial is True.
        """
        if isinstance(generations, int):
            gen_list = [generations] * num_problems
        else:
            if len(generations) < num_problems:
                raise ValueError("Length of generations must equal number of problems.")
            gen_list = list(generations)

        problems: List[Problem] = []
        attempts = 0
        max_attempts = max_attempts_factor * num_problems

        while attempts < max_attempts and len(problems) < num_problems:
            idx = len(problems)
            prob = self.generate(dims, gen_list[idx])
            if not trim_trivial or not self.is_trivial(prob):
                problems.append(prob)
            attempts += 1

        if len(problems) < num_problems:
            raise RuntimeError(
                f"Could only create {len(problems)}/{num_problems} nontrivial problems "
                f"in {max_attempts} attempts."
            )

        return problems
