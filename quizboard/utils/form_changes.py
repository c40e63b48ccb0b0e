"""Helpers for writing back only the form fields an operator edited."""

from __future__ import annotations

from collections.abc import Hashable, Mapping
from typing import TypeVar

FieldKey = TypeVar("FieldKey", bound=Hashable)


def changed_values(
    shown: Mapping[FieldKey, object],
    current: Mapping[FieldKey, object],
) -> dict[FieldKey, object]:
    """Return the entries of ``current`` that differ from what the form first showed.

    ``shown`` must hold the widget values as displayed, after any rounding the
    widget applied, so untouched fields never compare unequal.
    """
    return {key: value for key, value in current.items() if key not in shown or shown[key] != value}
