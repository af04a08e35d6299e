"""Replay buffer of winning token sequences used as training data."""

from __future__ import annotations

import json
import logging
import os
import random
from collections.abc import Sequence
from dataclasses import dataclass, field

from .constraint import END_TOKEN

logger = logging.getLogger(__name__)

Batch = tuple[list[list[int]], list[list[int]]]


@dataclass
class ReplayBuffer:
    """First-in first-out store of token id sequences, capped at ``max_capacity``."""

    max_capacity: int
    sequences: list[list[int]] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.sequences)

    def push(self, token_ids: Sequence[int]) -> None:
        """Append a sequence, dropping the oldest one when the buffer is full."""
        if len(self.sequences) >= self.max_capacity and self.sequences:
            del self.sequences[0]
        self.sequences.append(list(token_ids))

    def save(self, path: str | os.PathLike[str]) -> None:
        """Write the buffer to ``path`` as JSON."""
        data = {"sequences": self.sequences, "max_capacity": self.max_capacity}
        with open(path, "w", encoding="utf-8") as fh:
            json.dump(data, fh)
        logger.info("Replay buffer saved to %s", path)

    @classmethod
    def load(
        cls, path: str | os.PathLike[str], default_capacity: int
    ) -> ReplayBuffer:
        """Read a buffer from ``path``; an empty one if missing or unreadable."""
        try:
            with open(path, encoding="utf-8") as fh:
                raw = fh.read()
        except OSError:
            return cls(max_capacity=default_capacity)

        try:
            data = json.loads(raw)
            buffer = cls(
                max_capacity=int(data["max_capacity"]),
                sequences=[[int(t) for t in seq] for seq in data["sequences"]],
            )
        except (ValueError, KeyError, TypeError, AttributeError):
            logger.warning("Failed to parse replay buffer file, starting fresh")
            return cls(max_capacity=default_capacity)

        logger.info(
            "Loaded replay buffer from %s (%d sequences)", path, len(buffer.sequences)
        )
        return buffer

    def make_weighted_batch(
        self,
        hof_sequences: Sequence[Sequence[int]],
        max_seq_len: int,
        batch_size: int,
        hof_ratio: float,
    ) -> Batch | None:
        """A teacher-forcing batch mixing Hall of Fame and buffer sequences.

        About ``hof_ratio`` of the rows come from ``hof_sequences``, the rest
        from the buffer. Each row pairs ``tokens[:-1]`` with ``tokens[1:]``,
        padded to a common length (inputs with 0, targets with END) and cut
        to at most ``max_seq_len`` tokens. Returns ``(inputs, targets)``, or
        ``None`` when there is nothing to sample.
        """
        total_available = len(self.sequences) + len(hof_sequences)
        if total_available == 0:
            return None

        actual_batch_size = min(batch_size, total_available)
        hof_count = (
            min(int(actual_batch_size * hof_ratio), len(hof_sequences))
            if hof_sequences
            else 0
        )
        pool_count = (
            min(max(actual_batch_size - hof_count, 0), len(self.sequences))
            if self.sequences
            else 0
        )

        selected: list[Sequence[int]] = []
        if hof_count > 0:
            selected.extend(random.sample(list(hof_sequences), hof_count))
        if pool_count > 0:
            selected.extend(random.sample(self.sequences, pool_count))
        if not selected:
            return None

        longest = max(len(seq) for seq in selected)
        target_len = max(min(longest, max_seq_len), 2) - 1

        inputs: list[list[int]] = []
        targets: list[list[int]] = []
        for seq in selected:
            head = list(seq[:target_len])
            tail = list(seq[1 : target_len + 1])
            inputs.append(head + [0] * (target_len - len(head)))
            targets.append(tail + [END_TOKEN] * (target_len - len(tail)))
        return inputs, targets