"""Rendering of comparison results for the console and JSON reports."""

from __future__ import annotations

import json
from pathlib import Path

from .models import ComparisonResult

NONE_MARKER = "(none)"


class ComparisonReporter:
    """
    Renders a ComparisonResult as text.

    In normal mode every unmatched value is listed under its endpoint. In
    verbose mode matched values are listed too, unmatched values are shown
    side by side, and only the unmatched counts follow.
    """

    def __init__(self, verbose: bool = False):
        self.verbose = verbose

    def render(self, result: ComparisonResult) -> str:
        lines: list[str] = []
        lines.extend(self._header(result))
        lines.append(f"  Matched: {len(result.matched)} items")

        if self.verbose:
            lines.extend(self._detailed_comparison(result))
            lines.extend(self._unmatched_counts(result))
        else:
            lines.extend(self._only_in("Only in Endpoint1", result.only_in_left))
            lines.extend(self._only_in("Only in Endpoint2", result.only_in_right))

        status = "MATCH" if result.is_equivalent else "MISMATCH"
        lines.append("")
        lines.append(f"Comparison Status: {status}")
        return "\n".join(lines)

    def print_report(self, result: ComparisonResult):
        print(self.render(result))

    @staticmethod
    def to_dict(result: ComparisonResult) -> dict:
        return result.to_dict()

    def write_json(self, result: ComparisonResult, path: str | Path):
        """Save the result as an indented JSON report."""
        with open(path, 'w') as f:
            json.dump(self.to_dict(result), f, indent=2, ensure_ascii=False)

    def _header(self, result: ComparisonResult) -> list[str]:
        return [
            "",
            "=== REST API Comparison ===",
            f"Endpoint1: {result.left_source} ({result.left_path})",
            f"Endpoint2: {result.right_source} ({result.right_path})",
            "",
            "Results:",
        ]

    def _detailed_comparison(self, result: ComparisonResult) -> list[str]:
        lines = ["", "Detailed comparison:"]

        if result.matched:
            lines.append("  Matched Values (both endpoints):")
            for i, item in enumerate(result.matched):
                lines.append(f"    [{i:3d}] MATCH: '{item}'")

        if result.only_in_left or result.only_in_right:
            lines.append("")
            lines.append("  Comparison Details:")
            rows = max(len(result.only_in_left), len(result.only_in_right))
            for i in range(rows):
                lines.append(self._comparison_row(result, i, i + len(result.matched)))

        return lines

    def _comparison_row(self, result: ComparisonResult, idx: int, print_idx: int) -> str:
        left = result.only_in_left[idx] if idx < len(result.only_in_left) else NONE_MARKER
        right = result.only_in_right[idx] if idx < len(result.only_in_right) else NONE_MARKER

        if idx >= len(result.only_in_left):
            status = "ONLY IN ENDPOINT2"
        elif idx >= len(result.only_in_right):
            status = "ONLY IN ENDPOINT1"
        else:
            status = "MISMATCH"

        return f"    [{print_idx:3d}] {left:<25} <-> {right:<25} | {status}"

    @staticmethod
    def _unmatched_counts(result: ComparisonResult) -> list[str]:
        lines = []
        if result.only_in_left:
            lines.append(f"  Only in Endpoint1: {len(result.only_in_left)} items")
        if result.only_in_right:
            lines.append(f"  Only in Endpoint2: {len(result.only_in_right)} items")
        return lines

    @staticmethod
    def _only_in(label: str, items: tuple[str, ...]) -> list[str]:
        if not items:
            return []
        lines = [f"  {label}: {len(items)} items"]
        lines.extend(f"    - {item}" for item in items)
        return lines
