"""Battle royale arena where SUBLEQ gladiators share one memory.

Programs are loaded at evenly spaced offsets and run round-robin. Any
gladiator may read or write anywhere, so each can corrupt another's code.
The last one still running wins.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field, replace

from .vm import SubleqVM

logger = logging.getLogger(__name__)


@dataclass
class ArenaConfig:
    """Size of the shared memory, of each slot, and the round limit."""

    memory_size: int = 1024
    gladiator_slot_size: int = 64
    max_rounds: int = 100_000


@dataclass
class BattleResult:
    """Outcome of one battle."""

    winner_index: int | None
    total_rounds: int
    survivors: int
    elimination_order: list[int] = field(default_factory=list)


class Arena:
    """Shared memory and the gladiators fighting in it."""

    def __init__(self, config: ArenaConfig | None = None) -> None:
        self.config = replace(config) if config is not None else ArenaConfig()
        self.memory: list[int] = [0] * self.config.memory_size
        self.gladiators: list[SubleqVM] = []

    def spawn(self, programs: Sequence[Sequence[int]]) -> None:
        """Load each program at ``i * gladiator_slot_size`` in fresh memory.

        Memory grows when the programs' slots would not fit in it.
        """
        slot = self.config.gladiator_slot_size
        required = len(programs) * slot
        if required > self.config.memory_size:
            logger.info(
                "Arena auto-resize: %d -> %d cells (%d fighters x %d slot)",
                self.config.memory_size,
                required,
                len(programs),
                slot,
            )
            self.config.memory_size = required
        self.memory = [0] * self.config.memory_size
        self.gladiators = [
            SubleqVM.load(program, index * slot, self.memory)
            for index, program in enumerate(programs)
        ]

    def _alive_count(self) -> int:
        return sum(1 for g in self.gladiators if g.alive)

    def run_battle(self) -> BattleResult:
        """Run rounds until at most one gladiator lives or the limit is hit."""
        rounds = 0
        elimination_order: list[int] = []

        while self._alive_count() > 1 and rounds < self.config.max_rounds:
            for index, gladiator in enumerate(self.gladiators):
                if gladiator.alive and not gladiator.step(self.memory):
                    elimination_order.append(index)
            rounds += 1

        survivors = self._alive_count()
        winner = None
        if survivors == 1:
            winner = next(i for i, g in enumerate(self.gladiators) if g.alive)

        return BattleResult(
            winner_index=winner,
            total_rounds=rounds,
            survivors=survivors,
            elimination_order=elimination_order,
        )

    def extract_program(self, index: int) -> list[int]:
        """Copy of the memory slot belonging to gladiator ``index``."""
        base = index * self.config.gladiator_slot_size
        end = min(base + self.config.gladiator_slot_size, self.config.memory_size)
        return self.memory[base:end]