"""ELO ratings for ranking gladiators by battle outcome."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

DEFAULT_ELO = 1500.0
K_FACTOR = 32.0


def elo_expected(rating_a: float, rating_b: float) -> float:
    """Probability that a player rated ``rating_a`` beats one rated ``rating_b``."""
    return 1.0 / (1.0 + 10.0 ** ((rating_b - rating_a) / 400.0))


def elo_update(
    rating_a: float, rating_b: float, score_a: float, k: float = K_FACTOR
) -> tuple[float, float]:
    """New ratings after a match; ``score_a`` is 1 for a win, 0 a loss, 0.5 a draw."""
    expected_a = elo_expected(rating_a, rating_b)
    expected_b = 1.0 - expected_a
    score_b = 1.0 - score_a
    return (
        rating_a + k * (score_a - expected_a),
        rating_b + k * (score_b - expected_b),
    )


def compute_battle_elos(
    num_fighters: int,
    elimination_order: Iterable[int],
    winner_index: int | None,
    initial_elos: Sequence[float],
) -> list[float]:
    """Ratings after a battle royale.

    Each eliminated fighter loses a pairwise match to every fighter still
    alive at that moment; the outright winner gets a bonus of half a K-factor.
    """
    elos = list(initial_elos)
    alive = set(range(num_fighters))

    for eliminated in elimination_order:
        for survivor in sorted(alive - {eliminated}):
            elos[eliminated], elos[survivor] = elo_update(
                elos[eliminated], elos[survivor], 0.0, K_FACTOR
            )
        alive.discard(eliminated)

    if winner_index is not None:
        elos[winner_index] += K_FACTOR * 0.5

    return elos