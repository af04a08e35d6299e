"""SUBLEQ virtual machine running on a shared memory list.

Each instruction is a triplet ``(A, B, C)``::

    mem[B] -= mem[A]
    if mem[B] <= 0: pc = C
    else:           pc += 3
"""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence
from dataclasses import dataclass

MAX_CYCLES = 10_000
"""Number of executed instructions after which a VM is forced to halt."""

_I64_SPAN = 1 << 64
_I64_HALF = 1 << 63


def _wrap_i64(value: int) -> int:
    """Wrap an integer into the signed 64-bit range."""
    return (value + _I64_HALF) % _I64_SPAN - _I64_HALF


@dataclass
class SubleqVM:
    """A single SUBLEQ gladiator executing on shared memory."""

    pc: int
    base_addr: int = 0
    program_len: int = 0
    cycles: int = 0
    alive: bool = True

    @classmethod
    def load(
        cls,
        program: Iterable[int],
        base_addr: int,
        memory: MutableSequence[int],
    ) -> SubleqVM:
        """Copy ``program`` into ``memory`` at ``base_addr`` and return a VM there.

        Cells that would fall past the end of memory are dropped.
        """
        loaded = 0
        for offset, value in enumerate(program):
            addr = base_addr + offset
            if addr < len(memory):
                memory[addr] = value
                loaded += 1
        return cls(pc=base_addr, base_addr=base_addr, program_len=loaded)

    def _halt(self) -> bool:
        self.alive = False
        return False

    def step(self, memory: MutableSequence[int]) -> bool:
        """Execute one instruction; return whether the VM is still alive."""
        if not self.alive:
            return False

        size = len(memory)
        if self.pc + 2 >= size:
            return self._halt()
        if self.cycles >= MAX_CYCLES:
            return self._halt()

        a, b, c = memory[self.pc], memory[self.pc + 1], memory[self.pc + 2]
        if not (0 <= a < size and 0 <= b < size):
            return self._halt()

        memory[b] = _wrap_i64(memory[b] - memory[a])

        if memory[b] <= 0:
            if not 0 <= c < size:
                return self._halt()
            self.pc = c
        else:
            self.pc += 3

        self.cycles += 1
        return True

    def run_to_death(self, memory: MutableSequence[int]) -> None:
        """Step until the VM halts."""
        while self.step(memory):
            pass