"""Click-to-reveal state machine for presenting a ranking live."""

from __future__ import annotations

from collections.abc import Sequence

from quizboard.constants.quiz_constants import DEFAULT_REVEAL_TIER_SIZE
from quizboard.core.models import TeamResult


class RevealSequencer:
    """Discloses ranked teams one advance at a time.

    The top tier is revealed worst-first so the winner comes last; the
    remaining teams then follow best-first. Visibility is derived from the
    revealed count alone, so there are no per-team flags to keep in sync.
    """

    def __init__(
        self,
        ordered_results: Sequence[TeamResult],
        top_tier_size: int = DEFAULT_REVEAL_TIER_SIZE,
        revealed_count: int = 0,
    ) -> None:
        if top_tier_size < 1:
            raise ValueError("Reveal tier size must be at least 1.")
        self._results: list[TeamResult] = sorted(ordered_results, key=lambda r: r.rank)
        self._top_tier_size = top_tier_size
        self._revealed_count = max(0, min(revealed_count, len(self._results)))

    @property
    def revealed_count(self) -> int:
        return self._revealed_count

    @property
    def team_count(self) -> int:
        return len(self._results)

    @property
    def tier_size(self) -> int:
        """Number of teams in the top tier (smaller than configured for small fields)."""
        return min(self._top_tier_size, len(self._results))

    @property
    def is_complete(self) -> bool:
        return self._revealed_count >= len(self._results)

    def advance(self) -> TeamResult | None:
        """Reveal the next team and return it; past the end this is a no-op."""
        if self.is_complete:
            return None
        revealed = self.next_result()
        self._revealed_count += 1
        return revealed

    def reset(self) -> None:
        self._revealed_count = 0

    def reveal_step(self, rank: int) -> int:
        """Return the 1-based advance on which ``rank`` becomes visible."""
        if not 1 <= rank <= len(self._results):
            raise ValueError(f"Rank {rank} is outside 1..{len(self._results)}.")
        if rank <= self.tier_size:
            return self.tier_size - rank + 1
        return rank

    def is_revealed(self, rank: int) -> bool:
        if not 1 <= rank <= len(self._results):
            return False
        return self.reveal_step(rank) <= self._revealed_count

    def reveal_order(self) -> list[int]:
        """Ranks in the order they are disclosed."""
        tier = list(range(self.tier_size, 0, -1))
        remainder = list(range(self.tier_size + 1, len(self._results) + 1))
        return tier + remainder

    def next_result(self) -> TeamResult | None:
        if self.is_complete:
            return None
        next_rank = self.reveal_order()[self._revealed_count]
        return self._results[next_rank - 1]

    def revealed_results(self) -> list[TeamResult]:
        """Currently visible teams in rank order, as a board would list them."""
        return [result for result in self._results if self.is_revealed(result.rank)]
