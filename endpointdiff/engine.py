"""Main comparison engine for EndpointDiff."""

from __future__ import annotations

from typing import Any, Optional

from .differ import SetDiffer
from .exceptions import PathEvaluationError, PathSyntaxError
from .flattener import ValueFlattener
from .jsonpath_utils import PathExpression
from .models import ComparisonResult, Side


class ComparisonEngine:
    """
    Comparison engine that runs a 3-stage pipeline per comparison:

    1. Selection: evaluate each side's JSONPath against its document
    2. Flattening: reduce the selected nodes to sorted string leaves
    3. Set diffing: partition both sides into matched / only-left / only-right

    The two sides share no mutable state. The engine performs no I/O.
    """

    def __init__(
        self,
        flattener: Optional[ValueFlattener] = None,
        differ: Optional[SetDiffer] = None
    ):
        self.flattener = flattener or ValueFlattener()
        self.differ = differ or SetDiffer()

    def compare(
        self,
        left_root: Any,
        left_path: PathExpression | str,
        right_root: Any,
        right_path: PathExpression | str,
        left_source: str = Side.LEFT.value,
        right_source: str = Side.RIGHT.value
    ) -> ComparisonResult:
        """
        Compare the values selected from two decoded JSON documents.

        Args:
            left_root: Decoded JSON document of the left source
            left_path: JSONPath applied to the left document
            right_root: Decoded JSON document of the right source
            right_path: JSONPath applied to the right document
            left_source: Label of the left source (typically its URL)
            right_source: Label of the right source

        Returns:
            ComparisonResult

        Raises:
            PathSyntaxError: a path given as text cannot be parsed
            PathEvaluationError: a path fails on its document
        """
        left_expr = self._coerce_path(left_path, Side.LEFT)
        right_expr = self._coerce_path(right_path, Side.RIGHT)

        left_values = self.extract(left_root, left_expr, Side.LEFT)
        right_values = self.extract(right_root, right_expr, Side.RIGHT)

        outcome = self.differ.diff(left_values, right_values)

        return ComparisonResult.from_outcome(
            outcome,
            left_source=left_source,
            right_source=right_source,
            left_path=left_expr.text,
            right_path=right_expr.text,
        )

    def extract(
        self,
        root: Any,
        path: PathExpression,
        side: Side = Side.LEFT
    ) -> list[str]:
        """Select nodes with `path` and flatten them."""
        try:
            nodes = path.find(root)
        except PathEvaluationError as e:
            raise PathEvaluationError(e.expression, e.reason, side=side.value) from e
        return self.flattener.flatten(nodes)

    @staticmethod
    def _coerce_path(path: PathExpression | str, side: Side) -> PathExpression:
        try:
            return PathExpression.coerce(path)
        except PathSyntaxError as e:
            raise PathSyntaxError(e.expression, e.reason, side=side.value) from e


def compare(
    left_root: Any,
    left_path: PathExpression | str,
    right_root: Any,
    right_path: PathExpression | str,
    left_source: str = Side.LEFT.value,
    right_source: str = Side.RIGHT.value
) -> ComparisonResult:
    """
    Convenience function to compare two decoded JSON documents.

    Returns:
        ComparisonResult
    """
    engine = ComparisonEngine()
    return engine.compare(
        left_root, left_path, right_root, right_path, left_source, right_source
    )
