"""JSONPath utilities for EndpointDiff."""

from __future__ import annotations

from typing import Any

from jsonpath_ng import parse as jsonpath_parse
from jsonpath_ng.exceptions import JsonPathLexerError, JsonPathParserError
from jsonpath_ng.jsonpath import DatumInContext, Fields, Slice

from .exceptions import PathEvaluationError, PathSyntaxError


class WildcardSlice(Slice):
    """`[*]` that selects the member values of an object, like `.*`."""

    def find(self, datum):
        datum = DatumInContext.wrap(datum)
        if isinstance(datum.value, dict):
            return Fields('*').find(datum)
        return super().find(datum)


def _rewrite_wildcards(node):
    """Replace every open `[*]` slice in a parsed expression with WildcardSlice."""
    if type(node) is Slice and node.start is None and node.end is None and node.step is None:
        return WildcardSlice()
    for attr in ("left", "right"):
        child = getattr(node, attr, None)
        if child is not None:
            setattr(node, attr, _rewrite_wildcards(child))
    return node


class PathExpression:
    """
    A parsed JSONPath expression.

    Expressions are compared and hashed by their text, and the parsed form
    is shared between instances built from the same text.

    Supported syntax (jsonpath_ng dialect):
    - Root reference: $
    - Member access: $.items, $['items']
    - Wildcards: $[*], $.items[*].name, $.*
    - Indexing and slicing: $[0], $[1:3]
    - Recursive descent: $..id
    """

    # Cache for compiled JSONPath expressions
    _cache: dict = {}

    __slots__ = ("text", "_parsed")

    def __init__(self, text: str):
        self.text = text
        self._parsed = self.compile(text)

    @classmethod
    def compile(cls, path: str):
        """Compile and cache a JSONPath expression."""
        if not isinstance(path, str) or not path.strip():
            raise PathSyntaxError(str(path), "expression must be a non-empty string")

        if path not in cls._cache:
            try:
                cls._cache[path] = _rewrite_wildcards(jsonpath_parse(path))
            except (JsonPathParserError, JsonPathLexerError) as e:
                raise PathSyntaxError(path, str(e)) from e
        return cls._cache[path]

    @classmethod
    def coerce(cls, path: "PathExpression | str") -> "PathExpression":
        """Return `path` unchanged if already parsed, otherwise parse it."""
        if isinstance(path, PathExpression):
            return path
        return cls(path)

    def find(self, data: Any) -> list[Any]:
        """Evaluate the expression and return the matched values."""
        try:
            return [m.value for m in self._parsed.find(data)]
        except Exception as e:
            raise PathEvaluationError(self.text, f"{type(e).__name__}: {e}") from e

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PathExpression):
            return NotImplemented
        return self.text == other.text

    def __hash__(self) -> int:
        return hash(self.text)

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"PathExpression({self.text!r})"


def select(root: Any, expr: PathExpression | str) -> list[Any]:
    """
    Select all nodes of `root` matched by `expr`.

    Args:
        root: A decoded JSON value (never modified)
        expr: A PathExpression or the text of one

    Returns:
        The matched nodes in visit order; empty when nothing matches

    Raises:
        PathSyntaxError: `expr` is a string that cannot be parsed
        PathEvaluationError: evaluation failed for this value
    """
    return PathExpression.coerce(expr).find(root)
