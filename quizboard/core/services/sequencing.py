"""Contiguous re-numbering of ordered items (rounds, teams)."""

from __future__ import annotations

from collections.abc import Hashable, Sequence
from typing import TypeVar

ItemId = TypeVar("ItemId", bound=Hashable)


def resequence(ordered_ids: Sequence[ItemId], moved_id: ItemId, target_index: int) -> list[ItemId]:
    """Move ``moved_id`` to ``target_index`` and return the new order.

    The target index is clamped into range, so moving past either end pins
    the item there. Position ``i`` of the result maps to sequence number ``i + 1``.
    """
    if moved_id not in ordered_ids:
        raise KeyError(moved_id)
    remaining = [item_id for item_id in ordered_ids if item_id != moved_id]
    target_index = max(0, min(target_index, len(remaining)))
    remaining.insert(target_index, moved_id)
    return remaining


def sequence_numbers(ordered_ids: Sequence[ItemId]) -> dict[ItemId, int]:
    return {item_id: index + 1 for index, item_id in enumerate(ordered_ids)}
