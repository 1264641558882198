"""Set difference between two flattened value collections."""

from __future__ import annotations

from typing import Iterable

from .models import DiffOutcome


class SetDiffer:
    """
    Partitions two value collections into matched and one-sided values.

    Both inputs are reduced to sets first, so duplicates within one side
    collapse and input order is irrelevant. Every part of the outcome is
    sorted lexicographically, so identical inputs always produce identical
    output.
    """

    def diff(self, left: Iterable[str], right: Iterable[str]) -> DiffOutcome:
        left_set = set(left)
        right_set = set(right)

        return DiffOutcome(
            matched=tuple(sorted(left_set & right_set)),
            only_in_left=tuple(sorted(left_set - right_set)),
            only_in_right=tuple(sorted(right_set - left_set)),
        )


def diff(left: Iterable[str], right: Iterable[str]) -> DiffOutcome:
    """Convenience function to diff two flattened collections."""
    return SetDiffer().diff(left, right)
