"""Curriculum stages for the arena and random program generation."""

from __future__ import annotations

import random
import sys
from collections.abc import Sequence
from dataclasses import dataclass

from .arena import ArenaConfig
from .constraint import NUM_ADDRESSES, Token, tokens_to_ids
from .replay_buffer import ReplayBuffer


@dataclass(frozen=True)
class CurriculumStage:
    """Arena settings that apply until ``until_generation`` (exclusive)."""

    until_generation: int
    arena_memory_size: int
    gladiator_slot_size: int
    max_rounds: int

    def arena_config(self) -> ArenaConfig:
        return ArenaConfig(
            memory_size=self.arena_memory_size,
            gladiator_slot_size=self.gladiator_slot_size,
            max_rounds=self.max_rounds,
        )


DEFAULT_CURRICULUM: tuple[CurriculumStage, ...] = (
    CurriculumStage(20, 256, 64, 1_000),
    CurriculumStage(50, 512, 64, 10_000),
    CurriculumStage(sys.maxsize, 1024, 64, 50_000),
)


def curriculum_arena_config(
    generation: int, stages: Sequence[CurriculumStage]
) -> ArenaConfig:
    """Arena settings of the first stage that still covers ``generation``.

    Past every stage the last one applies; with no stages, the defaults.
    """
    for stage in stages:
        if generation < stage.until_generation:
            return stage.arena_config()
    if stages:
        return stages[-1].arena_config()
    return ArenaConfig()


def generate_random_program(max_tokens: int) -> tuple[list[int], list[Token]]:
    """A random valid program and its token sequence.

    It holds between one and ``max_tokens // 3`` instructions (at least one).
    """
    num_instructions = random.randint(1, max(max_tokens // 3, 1))
    program = [
        random.randrange(NUM_ADDRESSES) for _ in range(num_instructions * 3)
    ]
    tokens = [Token.start(), *(Token.addr(cell) for cell in program), Token.end()]
    return program, tokens


def seed_random_programs(buffer: ReplayBuffer, count: int, max_tokens: int) -> None:
    """Push ``count`` random programs, as token ids, into ``buffer``."""
    for _ in range(count):
        _, tokens = generate_random_program(max_tokens)
        buffer.push(tokens_to_ids(tokens))