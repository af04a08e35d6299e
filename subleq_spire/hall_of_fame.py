"""Hall of Fame: the top elite programs and their ELO ratings."""

from __future__ import annotations

import json
import logging
import os
import random
from dataclasses import asdict, dataclass, field
from typing import Any

logger = logging.getLogger(__name__)


@dataclass
class HoFEntry:
    """One elite program."""

    token_ids: list[int]
    program: list[int]
    elo: float
    generation_born: int

    def copy(self) -> HoFEntry:
        return HoFEntry(
            token_ids=list(self.token_ids),
            program=list(self.program),
            elo=self.elo,
            generation_born=self.generation_born,
        )

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> HoFEntry:
        return cls(
            token_ids=[int(t) for t in data["token_ids"]],
            program=[int(c) for c in data["program"]],
            elo=float(data["elo"]),
            generation_born=int(data["generation_born"]),
        )


@dataclass
class HallOfFame:
    """At most ``max_size`` elite entries, weakest replaced first."""

    max_size: int
    entries: list[HoFEntry] = field(default_factory=list)
    last_generation: int = 0

    def __len__(self) -> int:
        return len(self.entries)

    def try_promote(self, entry: HoFEntry) -> bool:
        """Induct ``entry`` if there is room or it outrates the weakest entry."""
        if len(self.entries) < self.max_size:
            logger.info(
                "[HoF] New inductee! ELO=%.0f, gen=%d (filling slot %d/%d)",
                entry.elo,
                entry.generation_born,
                len(self.entries) + 1,
                self.max_size,
            )
            self.entries.append(entry)
            return True

        if not self.entries:
            return False

        weakest_idx = min(range(len(self.entries)), key=lambda i: self.entries[i].elo)
        weakest = self.entries[weakest_idx]
        if entry.elo > weakest.elo:
            logger.info(
                "[HoF] Dethroned! New ELO=%.0f > Old ELO=%.0f (gen %d->%d)",
                entry.elo,
                weakest.elo,
                weakest.generation_born,
                entry.generation_born,
            )
            self.entries[weakest_idx] = entry
            return True
        return False

    def select_champions(self, count: int) -> list[tuple[int, HoFEntry]]:
        """Up to ``count`` distinct random entries, with their indices."""
        count = min(count, len(self.entries))
        indices = random.sample(range(len(self.entries)), count)
        return [(i, self.entries[i].copy()) for i in indices]

    def update_elo(self, index: int, new_elo: float) -> None:
        """Set the rating of entry ``index``; unknown indices are ignored."""
        if 0 <= index < len(self.entries):
            self.entries[index].elo = new_elo

    def all_token_ids(self) -> list[list[int]]:
        """Token sequences of every entry."""
        return [entry.token_ids for entry in self.entries]

    def save(self, path: str | os.PathLike[str]) -> None:
        """Write the Hall of Fame to ``path`` as JSON."""
        data = {
            "entries": [asdict(entry) for entry in self.entries],
            "max_size": self.max_size,
            "last_generation": self.last_generation,
        }
        with open(path, "w", encoding="utf-8") as fh:
            json.dump(data, fh)
        logger.info("[HoF] Saved (%d entries) to %s", len(self.entries), path)

    @classmethod
    def load(cls, path: str | os.PathLike[str], default_max_size: int) -> HallOfFame:
        """Read a Hall of Fame from ``path``; a fresh one if missing or unreadable."""
        try:
            with open(path, encoding="utf-8") as fh:
                raw = fh.read()
        except OSError:
            return cls(max_size=default_max_size)

        try:
            data = json.loads(raw)
            hof = cls(
                max_size=int(data["max_size"]),
                entries=[HoFEntry._from_dict(e) for e in data["entries"]],
                last_generation=int(data.get("last_generation", 0)),
            )
        except (ValueError, KeyError, TypeError, AttributeError):
            logger.warning("Failed to parse HoF file, starting fresh")
            return cls(max_size=default_max_size)

        logger.info("[HoF] Loaded %d entries from %s", len(hof.entries), path)
        return hof