"""Data models for EndpointDiff."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Side(Enum):
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class DiffOutcome:
    """Partition of two value collections, each part sorted."""
    matched: tuple[str, ...] = ()
    only_in_left: tuple[str, ...] = ()
    only_in_right: tuple[str, ...] = ()

    @property
    def is_equivalent(self) -> bool:
        return not self.only_in_left and not self.only_in_right


@dataclass(frozen=True)
class ComparisonResult:
    """Result of comparing the values extracted from two sources."""
    left_source: str
    right_source: str
    left_path: str
    right_path: str
    matched: tuple[str, ...] = field(default_factory=tuple)
    only_in_left: tuple[str, ...] = field(default_factory=tuple)
    only_in_right: tuple[str, ...] = field(default_factory=tuple)
    is_equivalent: bool = True

    @classmethod
    def from_outcome(
        cls,
        outcome: DiffOutcome,
        left_source: str,
        right_source: str,
        left_path: str,
        right_path: str
    ) -> "ComparisonResult":
        return cls(
            left_source=left_source,
            right_source=right_source,
            left_path=left_path,
            right_path=right_path,
            matched=outcome.matched,
            only_in_left=outcome.only_in_left,
            only_in_right=outcome.only_in_right,
            is_equivalent=outcome.is_equivalent,
        )

    def to_dict(self) -> dict:
        return {
            "is_equivalent": self.is_equivalent,
            "left": {
                "source": self.left_source,
                "jsonpath": self.left_path,
            },
            "right": {
                "source": self.right_source,
                "jsonpath": self.right_path,
            },
            "summary": {
                "matched": len(self.matched),
                "only_in_left": len(self.only_in_left),
                "only_in_right": len(self.only_in_right),
            },
            "matched": list(self.matched),
            "only_in_left": list(self.only_in_left),
            "only_in_right": list(self.only_in_right),
        }
