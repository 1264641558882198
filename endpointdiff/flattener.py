"""Flattening of selected JSON nodes into comparable string leaves."""

from __future__ import annotations

from typing import Any, Iterable

from .utils import format_number, get_type_name, to_compact_json


class ValueFlattener:
    """
    Reduces selected JSON nodes to a sorted list of string leaves.

    Flattening rules:
    - string: the string itself, unquoted
    - null: "null"
    - boolean: "true" / "false"
    - number: decimal text (integral floats render without ".0")
    - array: each element flattened in turn, recursively to any depth
    - object: one leaf per member value, one level only; a member holding an
      object or array becomes a single compact JSON string

    Keys and positions are discarded. The result is sorted so that it does
    not depend on the order in which nodes or object members were visited.
    """

    def flatten(self, nodes: Iterable[Any]) -> list[str]:
        """Flatten every node in `nodes` and return the sorted leaves."""
        values: list[str] = []
        for node in nodes:
            values.extend(self._flatten_node(node))
        values.sort()
        return values

    def _flatten_node(self, node: Any) -> list[str]:
        type_name = get_type_name(node)

        if type_name == "array":
            return self._flatten_array(node)
        elif type_name == "object":
            return self._flatten_object(node)
        return [self._render_scalar(node, type_name)]

    def _flatten_array(self, items: Iterable[Any]) -> list[str]:
        values = []
        for item in items:
            values.extend(self._flatten_node(item))
        return values

    def _flatten_object(self, obj: dict) -> list[str]:
        # Member values are not recursed into
        return [self._render_member(value) for value in obj.values()]

    def _render_member(self, value: Any) -> str:
        type_name = get_type_name(value)
        if type_name in ("array", "object"):
            return to_compact_json(value)
        return self._render_scalar(value, type_name)

    @staticmethod
    def _render_scalar(value: Any, type_name: str) -> str:
        if type_name == "string":
            return value
        elif type_name == "null":
            return "null"
        elif type_name == "boolean":
            return "true" if value else "false"
        elif type_name in ("integer", "number"):
            return format_number(value)
        return str(value)


def flatten(nodes: Iterable[Any]) -> list[str]:
    """Convenience function to flatten selected nodes."""
    return ValueFlattener().flatten(nodes)
